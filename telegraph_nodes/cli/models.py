"""Data models for CLI operations."""

from dataclasses import dataclass
from enum import IntEnum

from ..content_converter.dom import DEFAULT_PARSER
from ..content_converter.serializer import DEFAULT_MAX_DEPTH


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Unexpected failure
    - CONVERSION_ERROR (2): Input could not be parsed, decoded or was too deep
    - CONFIG_ERROR (3): Invalid configuration file, environment or flags
    - IO_ERROR (4): Input could not be read or output could not be written

    Example:
        >>> raise typer.Exit(ExitCode.CONVERSION_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONVERSION_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 4


@dataclass
class ConverterConfig:
    """Settings for HTML parsing and node decoding.

    Attributes:
        parser: BeautifulSoup feature used to parse HTML ("html.parser" or "lxml")
        max_depth: Maximum element nesting depth accepted in either direction

    Example:
        >>> config = ConverterConfig()
        >>> config = ConverterConfig(parser="lxml", max_depth=64)
    """
    parser: str = DEFAULT_PARSER
    max_depth: int = DEFAULT_MAX_DEPTH
