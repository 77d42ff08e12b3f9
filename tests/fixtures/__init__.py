"""Test fixtures shared by unit and integration tests.

This module provides:
- Sample HTML fragments for conversion tests
- Sample content node arrays in canonical and legacy serialized form
- Sample Telegraph page objects
"""

from .sample_html import (
    SAMPLE_PARAGRAPH,
    SAMPLE_ARTICLE,
    SAMPLE_WITH_COMMENTS,
    SAMPLE_MALFORMED,
    SAMPLE_VALUELESS_ATTRIBUTES,
    SAMPLE_UNICODE,
    nested_divs,
)
from .sample_nodes import (
    HELLO_NODES,
    HELLO_CANONICAL,
    HELLO_LEGACY,
    IMAGE_NODES,
    IMAGE_CANONICAL,
    SAMPLE_PAGE_DICT,
)

__all__ = [
    "SAMPLE_PARAGRAPH",
    "SAMPLE_ARTICLE",
    "SAMPLE_WITH_COMMENTS",
    "SAMPLE_MALFORMED",
    "SAMPLE_VALUELESS_ATTRIBUTES",
    "SAMPLE_UNICODE",
    "nested_divs",
    "HELLO_NODES",
    "HELLO_CANONICAL",
    "HELLO_LEGACY",
    "IMAGE_NODES",
    "IMAGE_CANONICAL",
    "SAMPLE_PAGE_DICT",
]
