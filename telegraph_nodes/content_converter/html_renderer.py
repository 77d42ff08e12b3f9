"""Render content nodes back to HTML markup.

The markup is an approximation. Converting it again yields the same tag
names, attribute sets and concatenated text, but adjacent text nodes (for
example the two sides of a dropped comment) come back merged into one.
"""

from typing import List

from bs4 import BeautifulSoup

from ..models.content_node import ContentNode, NodeKind


def _build(soup: BeautifulSoup, node: ContentNode):
    if node.kind is NodeKind.TEXT:
        return soup.new_string(node.text)

    tag = soup.new_tag(node.tag, attrs=dict(node.attrs or {}))
    for child in node.children or []:
        tag.append(_build(soup, child))
    return tag


def render_html(nodes: List[ContentNode]) -> str:
    """Render content nodes as HTML markup.

    Value-less attributes render as bare names (``<input disabled/>``) and
    void elements render self-closed.

    Args:
        nodes: Top-level content nodes

    Returns:
        HTML markup string
    """
    soup = BeautifulSoup("", "html.parser", multi_valued_attributes=None)
    for node in nodes:
        element = _build(soup, node)
        soup.append(element)
    return soup.decode()
