"""Content conversion between HTML and Telegraph content nodes.

This module provides the NodeConverter for HTML -> node conversion, the
canonical serializer/decoder for node arrays, and an HTML renderer for the
reverse direction.
"""

from .errors import (
    TelegraphError,
    ConversionError,
    ParseError,
    TooDeepError,
    NodeFormatError,
)
from .serializer import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    check_max_depth,
    serialize,
    deserialize,
    node_to_value,
    nodes_to_value,
    node_from_value,
    nodes_from_value,
)
from .dom import DEFAULT_PARSER, SUPPORTED_PARSERS, DomKind, DomNode, parse_document
from .node_converter import NodeConverter, convert, html_to_node
from .html_renderer import render_html

__all__ = [
    'TelegraphError',
    'ConversionError',
    'ParseError',
    'TooDeepError',
    'NodeFormatError',
    'DEFAULT_MAX_DEPTH',
    'MAX_DEPTH_LIMIT',
    'check_max_depth',
    'serialize',
    'deserialize',
    'node_to_value',
    'nodes_to_value',
    'node_from_value',
    'nodes_from_value',
    'DEFAULT_PARSER',
    'SUPPORTED_PARSERS',
    'DomKind',
    'DomNode',
    'parse_document',
    'NodeConverter',
    'convert',
    'html_to_node',
    'render_html',
]
