"""Generic DOM capability interface over BeautifulSoup trees.

The converter walks the parsed document through DomNode rather than through
BeautifulSoup classes directly. DomNode exposes only what the content model
needs: the node kind, its text, its tag name, its attributes and its
children. Swapping the HTML parsing library means providing another
parse_document returning objects with the same surface.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    PageElement,
    PreformattedString,
    ProcessingInstruction,
)

from .errors import ParseError

logger = logging.getLogger(__name__)

# BeautifulSoup features accepted for parsing. Both lower-case tag and
# attribute names.
SUPPORTED_PARSERS = ("html.parser", "lxml")
DEFAULT_PARSER = "html.parser"

# Most specific first: every entry subclasses PreformattedString
_OTHER_KIND_NAMES = (
    (Comment, "comment"),
    (Doctype, "doctype"),
    (CData, "cdata"),
    (ProcessingInstruction, "processing-instruction"),
    (Declaration, "declaration"),
)


class DomKind(Enum):
    """Kinds of generic DOM nodes."""

    TEXT = "text"
    ELEMENT = "element"
    OTHER = "other"


class DomNode:
    """Read-only view of one node in a parsed HTML document.

    Attributes:
        kind: DomKind of the wrapped node
        kind_name: Human-readable kind ("text", "element", "comment", ...)
    """

    def __init__(self, element: Union[PageElement, BeautifulSoup]):
        self._element = element
        self.kind, self.kind_name = self._classify(element)

    @staticmethod
    def _classify(element) -> tuple:
        # Comments, doctypes etc. are NavigableString subclasses, so they
        # must be ruled out before plain text.
        if isinstance(element, PreformattedString):
            for cls, name in _OTHER_KIND_NAMES:
                if isinstance(element, cls):
                    return DomKind.OTHER, name
            return DomKind.OTHER, type(element).__name__.lower()
        if isinstance(element, NavigableString):
            return DomKind.TEXT, "text"
        if isinstance(element, Tag):
            return DomKind.ELEMENT, "element"
        return DomKind.OTHER, type(element).__name__.lower()

    @property
    def text(self) -> Optional[str]:
        """Raw text payload of a text node, None for other kinds."""
        if self.kind is not DomKind.TEXT:
            return None
        return str(self._element)

    @property
    def tag_name(self) -> Optional[str]:
        """Element name as reported by the parser, None for non-elements."""
        if self.kind is not DomKind.ELEMENT:
            return None
        return self._element.name

    @property
    def attributes(self) -> Dict[str, Optional[str]]:
        """Element attributes in source order.

        BeautifulSoup reports a value-less attribute (``<input disabled>``)
        as an empty string; both are mapped to None here.
        """
        if self.kind is not DomKind.ELEMENT:
            return {}
        attributes: Dict[str, Optional[str]] = {}
        for name, value in self._element.attrs.items():
            if isinstance(value, list):
                value = " ".join(value)
            attributes[name] = value if value else None
        return attributes

    @property
    def children(self) -> List["DomNode"]:
        """Child nodes in source order (empty for leaves)."""
        if self.kind is not DomKind.ELEMENT:
            return []
        return [DomNode(child) for child in self._element.contents]

    def __repr__(self) -> str:
        return f"DomNode(kind={self.kind_name!r}, tag={self.tag_name!r})"


def _effective_root(soup: BeautifulSoup) -> Union[Tag, BeautifulSoup]:
    """Return the document-level <body>, or the soup when there is none.

    Only html > body counts, and only when <html> is the sole top-level
    element with no top-level text beside it. A <body> nested anywhere else
    is ordinary content.
    """
    html = None
    for child in soup.contents:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            if child.strip():
                return soup
            continue
        if html is not None or child.name != "html":
            return soup
        html = child

    if html is None:
        return soup
    return html.find("body", recursive=False) or soup


def parse_document(markup: Union[str, bytes], parser: str = DEFAULT_PARSER) -> DomNode:
    """Parse an HTML fragment and return its effective root.

    The fragment is parsed as a full document. When the document is a
    single <html> element with a <body> child, the body is the effective
    root; otherwise the document itself is.

    Args:
        markup: HTML fragment as text or UTF-8 bytes
        parser: BeautifulSoup feature name (one of SUPPORTED_PARSERS)

    Returns:
        DomNode wrapping the effective root

    Raises:
        ParseError: If the input is unusable or the parser rejects it
    """
    if parser not in SUPPORTED_PARSERS:
        raise ParseError(
            f"unsupported parser '{parser}' "
            f"(expected one of: {', '.join(SUPPORTED_PARSERS)})"
        )

    if isinstance(markup, bytes):
        try:
            markup = markup.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"input is not valid UTF-8: {e}") from e
    elif not isinstance(markup, str):
        raise ParseError(
            f"expected str or bytes, got {type(markup).__name__}"
        )

    try:
        soup = BeautifulSoup(markup, parser, multi_valued_attributes=None)
    except FeatureNotFound as e:
        raise ParseError(f"parser '{parser}' is not installed") from e
    except ParserRejectedMarkup as e:
        raise ParseError(str(e)) from e

    root = _effective_root(soup)
    logger.debug(f"Parsed fragment with {parser}, effective root: {root.name}")
    return DomNode(root)
