"""Typed exception hierarchy for content conversion errors.

This module defines all custom exceptions raised while turning HTML into
Telegraph content nodes and back. All exceptions inherit from TelegraphError
so callers can catch everything from this package with a single clause.
"""

from typing import Optional


class TelegraphError(Exception):
    """Base exception for all telegraph-nodes errors.

    Use this to catch any application-level error from the toolkit.
    """
    pass


class ConversionError(TelegraphError):
    """Base exception for all content conversion errors."""
    pass


class ParseError(ConversionError):
    """Raised when the markup parser cannot establish a document root."""

    def __init__(self, reason: str):
        super().__init__(f"Unable to parse HTML fragment: {reason}")
        self.reason = reason


class TooDeepError(ConversionError):
    """Raised when node nesting exceeds the configured depth bound."""

    def __init__(self, depth: int, max_depth: int):
        super().__init__(
            f"Node nesting depth {depth} exceeds maximum of {max_depth}"
        )
        self.depth = depth
        self.max_depth = max_depth


class NodeFormatError(ConversionError):
    """Raised when serialized content does not have the content-node shape."""

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            full_message = f"Invalid content node at {path}: {message}"
        else:
            full_message = f"Invalid content nodes: {message}"
        super().__init__(full_message)
        self.path = path
        self.original_message = message
