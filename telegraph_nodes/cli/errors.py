"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from ..content_converter.errors import TelegraphError


class CLIError(TelegraphError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class InputError(CLIError):
    """Raised when reading input or writing output fails."""

    def __init__(self, path: str, operation: str, reason: Optional[str] = None):
        message = f"Operation '{operation}' failed for {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.reason = reason
