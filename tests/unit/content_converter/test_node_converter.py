"""Unit tests for node_converter module."""

from unittest.mock import patch

import pytest

from telegraph_nodes.content_converter.dom import DomKind
from telegraph_nodes.content_converter.errors import ParseError, TooDeepError
from telegraph_nodes.content_converter.node_converter import (
    NodeConverter,
    convert,
    html_to_node,
)
from telegraph_nodes.content_converter.serializer import MAX_DEPTH_LIMIT, serialize
from telegraph_nodes.models import ElementNode, TextNode
from tests.fixtures import (
    HELLO_CANONICAL,
    HELLO_NODES,
    IMAGE_CANONICAL,
    IMAGE_NODES,
    SAMPLE_MALFORMED,
    SAMPLE_VALUELESS_ATTRIBUTES,
    SAMPLE_WITH_COMMENTS,
    nested_divs,
)


class FakeDomNode:
    """Minimal stand-in for DomNode used to shape trees the parsers never produce."""

    def __init__(self, kind, kind_name, text=None, tag_name=None, attributes=None, children=None):
        self.kind = kind
        self.kind_name = kind_name
        self.text = text
        self.tag_name = tag_name
        self.attributes = attributes or {}
        self.children = children or []


def _element(tag, *children, **attributes):
    return FakeDomNode(DomKind.ELEMENT, "element", tag_name=tag,
                       attributes=attributes, children=list(children))


def _text(text):
    return FakeDomNode(DomKind.TEXT, "text", text=text)


class TestConcreteScenarios:
    """Test cases for the reference conversions."""

    def test_paragraph(self):
        """Test a single paragraph converts to one element with one text child."""
        nodes = convert("<p>Hello, world</p>")

        assert nodes == HELLO_NODES
        assert serialize(nodes) == HELLO_CANONICAL

    def test_sibling_elements_with_image(self):
        """Test siblings stay top-level and a void element has no children."""
        nodes = convert('<a>Text</a><p>img:<img src="https://me"></p>')

        assert nodes == IMAGE_NODES
        assert serialize(nodes) == IMAGE_CANONICAL

    def test_comment_dropped(self):
        """Test comments disappear without affecting siblings."""
        nodes = convert("<div><!-- comment --><span>x</span></div>")

        assert serialize(nodes) == '[{"tag":"div","children":[{"tag":"span","children":["x"]}]}]'

    def test_empty_input(self):
        """Test the empty fragment converts to an empty list."""
        assert convert("") == []
        assert serialize(convert("")) == "[]"

    def test_valueless_attribute(self):
        """Test a value-less attribute serializes as null."""
        nodes = convert("<input disabled>")

        assert nodes == [ElementNode("input", attrs={"disabled": None})]
        assert serialize(nodes) == '[{"tag":"input","attrs":{"disabled":null}}]'


class TestNodeConverter:
    """Test cases for NodeConverter behaviour."""

    def test_default_configuration(self):
        """Test default parser and depth bound."""
        converter = NodeConverter()

        assert converter.parser == "html.parser"
        assert converter.max_depth == 128

    @pytest.mark.parametrize("max_depth", [0, -1, MAX_DEPTH_LIMIT + 1, 100000])
    def test_invalid_max_depth(self, max_depth):
        """Test depth bounds outside 1..MAX_DEPTH_LIMIT are rejected."""
        with pytest.raises(ValueError):
            NodeConverter(max_depth=max_depth)

    def test_result_is_always_a_list(self):
        """Test a single element still yields a list."""
        nodes = NodeConverter().convert("<hr>")

        assert nodes == [ElementNode("hr")]

    def test_top_level_text(self):
        """Test bare text at the top level becomes a text node."""
        nodes = convert("hello <b>x</b>")

        assert nodes == [
            TextNode("hello "),
            ElementNode("b", children=[TextNode("x")]),
        ]

    def test_whitespace_preserved(self):
        """Test whitespace-only text between elements is kept verbatim."""
        nodes = convert("<p> a </p>\n<p>b</p>")

        assert nodes == [
            ElementNode("p", children=[TextNode(" a ")]),
            TextNode("\n"),
            ElementNode("p", children=[TextNode("b")]),
        ]

    def test_entities_decoded(self):
        """Test text content is the payload after entity decoding."""
        nodes = convert("<p>a &amp; b &lt;c&gt;&nbsp;</p>")

        assert nodes[0].children == [TextNode("a & b <c>\xa0")]

    def test_attribute_and_child_order(self):
        """Test attributes and children keep source order."""
        nodes = convert('<a title="t" href="h" id="i"><b>1</b>2<i>3</i></a>')

        assert list(nodes[0].attrs) == ["title", "href", "id"]
        assert nodes[0].children == [
            ElementNode("b", children=[TextNode("1")]),
            TextNode("2"),
            ElementNode("i", children=[TextNode("3")]),
        ]

    def test_absent_fields_omitted(self):
        """Test attrs/children are None, never empty, when absent."""
        nodes = convert("<p></p><br>")

        for node in nodes:
            assert node.attrs is None
            assert node.children is None

    def test_element_with_only_comment_has_no_children(self):
        """Test an element whose only child was dropped has children absent."""
        nodes = convert("<p><!-- gone --></p>")

        assert nodes == [ElementNode("p")]

    def test_valueless_attributes_inside_paragraph(self):
        """Test value-less attributes sit beside valued ones."""
        nodes = convert(SAMPLE_VALUELESS_ATTRIBUTES)

        assert nodes[0].children[0].attrs == {
            "type": "checkbox",
            "checked": None,
            "disabled": None,
        }

    def test_uppercase_markup(self):
        """Test tag names come back as reported by the parser (lower-case)."""
        nodes = convert('<P ID="Main">Hi</P>')

        assert nodes == [ElementNode("p", attrs={"id": "Main"}, children=[TextNode("Hi")])]

    def test_malformed_markup_recovered(self):
        """Test malformed but recoverable markup does not raise."""
        nodes = convert(SAMPLE_MALFORMED)

        assert nodes == [
            ElementNode("p", children=[
                TextNode("unclosed "),
                ElementNode("b", children=[
                    TextNode("bold "),
                    ElementNode("i", children=[TextNode("both")]),
                ]),
            ]),
            TextNode(" stray text "),
        ]

    def test_bytes_input(self):
        """Test UTF-8 bytes convert like text."""
        assert convert("<p>Привет</p>".encode("utf-8")) == [
            ElementNode("p", children=[TextNode("Привет")]),
        ]

    def test_lxml_parser(self):
        """Test the lxml parser produces the same nodes for a simple fragment."""
        assert convert("<p>Hello, world</p>", parser="lxml") == HELLO_NODES

    def test_lxml_keeps_top_level_text(self):
        """Test bare top-level text survives lxml parsing, wrapped or not."""
        nodes = convert("hello", parser="lxml")

        assert len(nodes) == 1
        text = nodes[0].text if isinstance(nodes[0], TextNode) else nodes[0].get_text_content()
        assert text == "hello"

    def test_empty_attribute_value_is_null(self):
        """Test an empty attribute value is indistinguishable from a value-less one."""
        nodes = convert('<img src="x" alt="">')

        assert nodes == [ElementNode("img", attrs={"src": "x", "alt": None})]
        assert serialize(nodes) == '[{"tag":"img","attrs":{"src":"x","alt":null}}]'

    def test_nested_body_is_content(self):
        """Test a <body> inside a fragment does not hide its siblings."""
        nodes = convert("<div>a</div><section><body>b</body></section><p>c</p>")

        assert nodes == [
            ElementNode("div", children=[TextNode("a")]),
            ElementNode("section", children=[
                ElementNode("body", children=[TextNode("b")]),
            ]),
            ElementNode("p", children=[TextNode("c")]),
        ]

    def test_document_body_is_root(self):
        """Test a full document converts from the children of its body."""
        nodes = convert(
            "<!DOCTYPE html><html><head><title>t</title></head>"
            "<body><p>x</p></body></html>"
        )

        assert nodes == [ElementNode("p", children=[TextNode("x")])]


class TestDroppedNodes:
    """Test cases for node kinds the content format cannot carry."""

    def test_report_lists_dropped_kinds(self):
        """Test convert_with_report names each skipped node in document order."""
        result = NodeConverter().convert_with_report(SAMPLE_WITH_COMMENTS)

        assert result.dropped == ["doctype", "comment", "comment", "processing-instruction"]
        assert result.metadata == {"parser": "html.parser"}

    def test_kept_elements_unaffected(self):
        """Test siblings of dropped nodes are converted normally."""
        result = NodeConverter().convert_with_report(SAMPLE_WITH_COMMENTS)

        elements = [node for node in result.nodes if isinstance(node, ElementNode)]
        assert elements == [
            ElementNode("div", children=[ElementNode("span", children=[TextNode("kept")])]),
            ElementNode("p", children=[TextNode("end")]),
        ]

    def test_nothing_dropped(self):
        """Test a clean fragment reports no drops."""
        result = NodeConverter().convert_with_report("<p>x</p>")

        assert result.dropped == []

    @patch('telegraph_nodes.content_converter.node_converter.parse_document')
    def test_dropped_subtree_not_hoisted(self, mock_parse):
        """Test children of a dropped node never reach the output."""
        other = FakeDomNode(
            DomKind.OTHER, "unknown",
            children=[_element("b", _text("hidden")), _text("also hidden")],
        )
        mock_parse.return_value = _element("root", _element("p", other, _text("kept")))

        result = NodeConverter().convert_with_report("<ignored>")

        assert result.nodes == [ElementNode("p", children=[TextNode("kept")])]
        assert result.dropped == ["unknown"]


class TestDepthBound:
    """Test cases for the nesting depth bound."""

    def test_at_limit(self):
        """Test nesting exactly at the bound is accepted."""
        nodes = NodeConverter(max_depth=2).convert("<div><p>x</p></div>")

        assert nodes[0].children[0].tag == "p"

    def test_over_limit(self):
        """Test one element past the bound raises TooDeepError."""
        with pytest.raises(TooDeepError) as exc_info:
            NodeConverter(max_depth=2).convert("<div><p><b>x</b></p></div>")

        assert exc_info.value.depth == 3
        assert exc_info.value.max_depth == 2

    def test_text_does_not_count(self):
        """Test text below the deepest allowed element is fine."""
        assert NodeConverter(max_depth=1).convert("<p>x</p>") == [
            ElementNode("p", children=[TextNode("x")]),
        ]

    def test_default_bound(self):
        """Test the default bound accepts 128 levels and rejects 129."""
        assert len(convert(nested_divs(128))) == 1

        with pytest.raises(TooDeepError) as exc_info:
            convert(nested_divs(129))

        assert exc_info.value.depth == 129

    def test_very_deep_input_at_largest_bound(self):
        """Test input far deeper than the largest bound raises TooDeepError, not RecursionError."""
        converter = NodeConverter(max_depth=MAX_DEPTH_LIMIT)

        with pytest.raises(TooDeepError) as exc_info:
            converter.convert(nested_divs(2000))

        assert exc_info.value.depth == MAX_DEPTH_LIMIT + 1

    def test_largest_bound_accepted(self):
        """Test nesting exactly at the largest bound converts."""
        nodes = NodeConverter(max_depth=MAX_DEPTH_LIMIT).convert(nested_divs(MAX_DEPTH_LIMIT))

        assert nodes[0].tag == "div"


class TestParseFailures:
    """Test cases for unusable input."""

    def test_non_string_input(self):
        """Test input of the wrong type raises ParseError."""
        with pytest.raises(ParseError):
            convert(None)

    def test_unsupported_parser(self):
        """Test an unknown parser feature raises ParseError."""
        with pytest.raises(ParseError):
            NodeConverter(parser="html5lib").convert("<p>x</p>")


class TestHtmlToNode:
    """Test cases for the one-call helper."""

    def test_returns_canonical_string(self):
        """Test html_to_node returns the canonical node-array string."""
        assert html_to_node("<p>Hello, world</p>") == HELLO_CANONICAL

    def test_empty(self):
        """Test html_to_node of the empty fragment."""
        assert html_to_node("") == "[]"
