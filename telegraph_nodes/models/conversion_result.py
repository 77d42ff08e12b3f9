"""Conversion result data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .content_node import ContentNode


@dataclass
class ConversionResult:
    """Result of HTML to content node conversion.

    Contains the converted nodes along with the kinds of DOM nodes that were
    skipped because the content format has no representation for them.

    Attributes:
        nodes: Converted top-level content nodes
        dropped: Kind names of skipped DOM nodes (e.g. "comment"), in the
            order they were encountered
        metadata: Additional metadata about the conversion (e.g. parser used)
    """
    nodes: List[ContentNode]
    dropped: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
