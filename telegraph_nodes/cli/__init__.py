"""Command-line interface for telegraph-nodes.

This package provides the `telegraph-nodes` CLI tool that converts HTML
files into Telegraph content-node JSON and renders node JSON back to HTML,
with layered configuration and Rich status output.
"""

from .config import ConfigLoader
from .models import ConverterConfig, ExitCode
from .errors import CLIError, ConfigError, InputError

__all__ = [
    'ConfigLoader',
    'ConverterConfig',
    'ExitCode',
    'CLIError',
    'ConfigError',
    'InputError',
]
