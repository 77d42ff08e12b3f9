"""Canonical serialization of content nodes.

The canonical form is a compact JSON array. A text node is a JSON string; an
element node is an object with keys in the fixed order tag, attrs, children.
Absent attrs/children are omitted from the object entirely: null, [] and {}
are never emitted for them.

Decoding accepts the canonical form plus the legacy form that spells absent
fields as null, and always yields nodes whose absent fields are None.
"""

import json
from typing import Any, Dict, List, Optional

from ..models.content_node import ContentNode, ElementNode, NodeKind, TextNode
from .errors import NodeFormatError, TooDeepError

# Shared with the converter so both directions accept the same documents
DEFAULT_MAX_DEPTH = 128

# Upper bound for max_depth. Each level costs two stack frames, so the walk
# stays below the interpreter recursion limit.
MAX_DEPTH_LIMIT = 256

_ELEMENT_KEYS = {"tag", "attrs", "children"}


def check_max_depth(max_depth: int) -> None:
    """Reject depth bounds outside 1..MAX_DEPTH_LIMIT.

    Raises:
        ValueError: If max_depth is out of range
    """
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(
            f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}"
        )


def node_to_value(node: ContentNode) -> Any:
    """Convert a node to its JSON-ready value.

    Args:
        node: TextNode or ElementNode

    Returns:
        str for a text node, dict for an element node
    """
    if node.kind is NodeKind.TEXT:
        return node.text

    # Omission rule: empty or missing attrs/children are never written
    value: Dict[str, Any] = {"tag": node.tag}
    if node.attrs:
        value["attrs"] = dict(node.attrs)
    if node.children:
        value["children"] = nodes_to_value(node.children)
    return value


def nodes_to_value(nodes: List[ContentNode]) -> List[Any]:
    """Convert a node sequence to a JSON-ready list."""
    return [node_to_value(node) for node in nodes]


def serialize(nodes: List[ContentNode]) -> str:
    """Render nodes to the canonical node-array string.

    The output is deterministic: the same tree always yields byte-identical
    text, with attributes in insertion order.

    Args:
        nodes: Top-level content nodes

    Returns:
        Compact JSON array text, e.g. '[{"tag":"p","children":["Hi"]}]'

    Example:
        >>> serialize([ElementNode("p", children=[TextNode("Hello, world")])])
        '[{"tag":"p","children":["Hello, world"]}]'
    """
    return json.dumps(
        nodes_to_value(nodes),
        ensure_ascii=False,
        separators=(",", ":"),
    )


def node_from_value(
    value: Any,
    path: str = "$",
    depth: int = 1,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ContentNode:
    """Decode one JSON value into a content node.

    A string is a text node and an object is an element node; anything else
    is rejected.

    Args:
        value: Decoded JSON value
        path: Location of the value, used in error messages
        depth: Nesting depth of the value (top-level nodes are depth 1)
        max_depth: Maximum allowed nesting depth

    Returns:
        TextNode or ElementNode

    Raises:
        NodeFormatError: If the value does not have the content-node shape
        TooDeepError: If element nesting exceeds max_depth
        ValueError: If max_depth is out of range
    """
    if depth == 1:
        check_max_depth(max_depth)

    if isinstance(value, str):
        return TextNode(value)

    if not isinstance(value, dict):
        raise NodeFormatError(
            f"expected a string or an object, got {type(value).__name__}",
            path=path,
        )

    if depth > max_depth:
        raise TooDeepError(depth, max_depth)

    unknown = set(value) - _ELEMENT_KEYS
    if unknown:
        raise NodeFormatError(
            f"unexpected field(s): {', '.join(sorted(unknown))}", path=path
        )

    tag = value.get("tag")
    if not isinstance(tag, str) or not tag:
        raise NodeFormatError("'tag' must be a non-empty string", path=path)

    return ElementNode(
        tag=tag,
        attrs=_attrs_from_value(value.get("attrs"), f"{path}.attrs"),
        children=_children_from_value(
            value.get("children"), f"{path}.children", depth, max_depth
        ),
    )


def _attrs_from_value(value: Any, path: str) -> Optional[Dict[str, Optional[str]]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise NodeFormatError(
            f"expected an object, got {type(value).__name__}", path=path
        )
    for name, attr_value in value.items():
        if attr_value is not None and not isinstance(attr_value, str):
            raise NodeFormatError(
                f"attribute value must be a string or null, "
                f"got {type(attr_value).__name__}",
                path=f"{path}.{name}",
            )
    return dict(value)


def _children_from_value(
    value: Any, path: str, depth: int, max_depth: int
) -> Optional[List[ContentNode]]:
    if value is None:
        return None
    if not isinstance(value, list):
        raise NodeFormatError(
            f"expected an array, got {type(value).__name__}", path=path
        )
    children = []
    for index, child in enumerate(value):
        children.append(
            node_from_value(child, f"{path}[{index}]", depth + 1, max_depth)
        )
    return children


def nodes_from_value(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> List[ContentNode]:
    """Decode a JSON array value into content nodes.

    Args:
        value: Decoded JSON value, expected to be a list
        max_depth: Maximum allowed nesting depth

    Returns:
        List of content nodes

    Raises:
        NodeFormatError: If the value is not a node array
        TooDeepError: If element nesting exceeds max_depth
        ValueError: If max_depth is out of range
    """
    check_max_depth(max_depth)
    if not isinstance(value, list):
        raise NodeFormatError(
            f"expected an array of nodes, got {type(value).__name__}"
        )
    return [
        node_from_value(item, f"$[{index}]", 1, max_depth)
        for index, item in enumerate(value)
    ]


def deserialize(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> List[ContentNode]:
    """Parse node-array text (canonical or legacy form) into content nodes.

    Args:
        text: JSON array text
        max_depth: Maximum allowed nesting depth

    Returns:
        List of content nodes

    Raises:
        NodeFormatError: If the text is not valid JSON, is nested too deeply
            for the JSON decoder, or is not a node array
        TooDeepError: If element nesting exceeds max_depth
        ValueError: If max_depth is out of range
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise NodeFormatError(f"not valid JSON ({e})") from e
    except RecursionError as e:
        raise NodeFormatError("JSON nesting too deep to decode") from e
    return nodes_from_value(value, max_depth=max_depth)
