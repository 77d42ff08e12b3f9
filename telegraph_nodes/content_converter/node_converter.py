"""HTML to Telegraph content node conversion.

This module turns an HTML fragment into the restricted node tree the
Telegraph API accepts as page content. The walk is a plain depth-first,
pre-order recursion over the DomNode interface:

- text nodes become TextNode, verbatim
- elements become ElementNode, with attrs/children only when non-empty
- every other node kind (comments, doctypes, ...) is dropped together with
  its whole subtree; its children are not promoted to the parent
"""

import logging
from typing import List, Union

from ..models.content_node import ContentNode, ElementNode, TextNode
from ..models.conversion_result import ConversionResult
from .dom import DEFAULT_PARSER, DomKind, DomNode, parse_document
from .errors import TooDeepError
from .serializer import DEFAULT_MAX_DEPTH, check_max_depth, serialize

logger = logging.getLogger(__name__)


class NodeConverter:
    """Converts HTML fragments into content nodes.

    Instances hold only configuration, so one converter can be shared
    between threads.

    Example:
        >>> converter = NodeConverter()
        >>> converter.convert("<p>Hello, world</p>")
        [ElementNode(tag='p', attrs=None, children=[TextNode(text='Hello, world')])]
    """

    def __init__(self, parser: str = DEFAULT_PARSER, max_depth: int = DEFAULT_MAX_DEPTH):
        """Initialize NodeConverter.

        Args:
            parser: BeautifulSoup feature used to parse fragments
            max_depth: Maximum element nesting depth before TooDeepError

        Raises:
            ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT
        """
        check_max_depth(max_depth)
        self.parser = parser
        self.max_depth = max_depth

    def convert(self, html: Union[str, bytes]) -> List[ContentNode]:
        """Convert an HTML fragment into top-level content nodes.

        Args:
            html: HTML body fragment (not necessarily a full document)

        Returns:
            Ordered list of content nodes, empty for an empty fragment

        Raises:
            ParseError: If no document root can be established
            TooDeepError: If nesting exceeds max_depth
        """
        return self.convert_with_report(html).nodes

    def convert_with_report(self, html: Union[str, bytes]) -> ConversionResult:
        """Convert an HTML fragment and report which DOM nodes were skipped.

        Args:
            html: HTML body fragment

        Returns:
            ConversionResult with nodes and the kind names of dropped nodes

        Raises:
            ParseError: If no document root can be established
            TooDeepError: If nesting exceeds max_depth
        """
        root = parse_document(html, self.parser)
        dropped: List[str] = []
        nodes = self._convert_children(root, 1, dropped)

        if dropped:
            logger.debug(f"Skipped {len(dropped)} unsupported node(s): {', '.join(dropped)}")

        return ConversionResult(
            nodes=nodes,
            dropped=dropped,
            metadata={"parser": self.parser},
        )

    def _convert_children(self, dom_node: DomNode, depth: int, dropped: List[str]) -> List[ContentNode]:
        """Convert the children of dom_node, which sit at the given depth."""
        nodes = []
        for child in dom_node.children:
            node = self._convert_node(child, depth, dropped)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert_node(self, dom_node: DomNode, depth: int, dropped: List[str]):
        if dom_node.kind is DomKind.TEXT:
            return TextNode(dom_node.text)

        if dom_node.kind is DomKind.ELEMENT:
            if depth > self.max_depth:
                raise TooDeepError(depth, self.max_depth)
            return ElementNode(
                tag=dom_node.tag_name,
                attrs=dom_node.attributes or None,
                children=self._convert_children(dom_node, depth + 1, dropped) or None,
            )

        dropped.append(dom_node.kind_name)
        return None


def convert(html: Union[str, bytes], parser: str = DEFAULT_PARSER, max_depth: int = DEFAULT_MAX_DEPTH) -> List[ContentNode]:
    """Convert an HTML fragment into content nodes with a one-off converter."""
    return NodeConverter(parser=parser, max_depth=max_depth).convert(html)


def html_to_node(html: Union[str, bytes], parser: str = DEFAULT_PARSER) -> str:
    """Convert an HTML fragment straight to the canonical node-array string.

    The result is what createPage/editPage expect as their content parameter.

    Example:
        >>> html_to_node("<p>Hello, world</p>")
        '[{"tag":"p","children":["Hello, world"]}]'
    """
    return serialize(convert(html, parser=parser))
