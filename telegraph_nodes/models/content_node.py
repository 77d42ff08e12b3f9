"""Content node data model.

Telegraph pages are stored as an array of content nodes. A node is either a
text leaf or an element with a tag, optional attributes and optional
children. Absent attributes/children are modelled as None, never as an
empty collection, so the serialized form can omit them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union


class NodeKind(Enum):
    """Discriminator for the ContentNode union."""

    TEXT = "text"
    ELEMENT = "element"


@dataclass
class TextNode:
    """A leaf carrying literal text content.

    Attributes:
        text: Text exactly as it appeared in the source, whitespace included
    """
    kind: ClassVar[NodeKind] = NodeKind.TEXT

    text: str


@dataclass
class ElementNode:
    """A structural node.

    Attributes:
        tag: Element name as reported by the parser
        attrs: Attribute mapping in source order, or None when the element
            has no attributes. A value-less attribute maps to None.
        children: Retained child nodes in source order, or None when the
            element has none

    Example:
        >>> ElementNode("img", attrs={"src": "https://me"})
        >>> ElementNode("p", children=[TextNode("Hello")])
    """
    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    tag: str
    attrs: Optional[Dict[str, Optional[str]]] = None
    children: Optional[List["ContentNode"]] = None

    def __post_init__(self):
        # Empty collections collapse to absent
        if not self.attrs:
            self.attrs = None
        if not self.children:
            self.children = None

    def get_text_content(self) -> str:
        """Concatenate the text of all descendant text nodes."""
        parts = []
        for child in self.children or []:
            if child.kind is NodeKind.TEXT:
                parts.append(child.text)
            else:
                parts.append(child.get_text_content())
        return "".join(parts)


ContentNode = Union[TextNode, ElementNode]
