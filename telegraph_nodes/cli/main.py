"""Main CLI entry point for the telegraph-nodes command.

This module provides the Typer application that converts HTML into the
Telegraph content-node format and renders node arrays back to HTML.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import typer

from ..content_converter.errors import ConversionError
from ..content_converter.html_renderer import render_html
from ..content_converter.node_converter import NodeConverter
from ..content_converter.serializer import deserialize, nodes_to_value, serialize
from .config import ConfigLoader
from .errors import ConfigError, InputError
from .models import ConverterConfig, ExitCode
from .output import OutputHandler

VERSION = "0.1.0"

app = typer.Typer(
    name="telegraph-nodes",
    help="""Convert HTML to Telegraph content nodes and back.

QUICK START:
  telegraph-nodes convert page.html               # HTML -> node JSON on stdout
  cat page.html | telegraph-nodes convert -       # Read HTML from stdin
  telegraph-nodes convert page.html -o page.json  # Write node JSON to a file
  telegraph-nodes render page.json                # Node JSON -> HTML""",
    add_completion=False,
    rich_markup_mode=None,  # Disable Rich markup to avoid compatibility issues
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'telegraph_nodes' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("telegraph_nodes")
    app_logger.setLevel(level)

    # Repeated invocations in one process must not stack handlers
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"telegraph-nodes_{timestamp}.log"

        # File handler gets the logger name as well
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _read_input(input_path: str) -> str:
    """Read the whole input document from a file or from stdin ("-").

    Raises:
        InputError: If the file cannot be read
    """
    if input_path == "-":
        return sys.stdin.read()

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        raise InputError(input_path, 'read', 'File not found')
    except UnicodeDecodeError as e:
        raise InputError(input_path, 'read', f'Not valid UTF-8: {e}')
    except OSError as e:
        raise InputError(input_path, 'read', str(e))


def _write_output(text: str, output_path: Optional[str]) -> None:
    """Write the result to a file, or to stdout when no path is given.

    Raises:
        InputError: If the file cannot be written
    """
    if output_path is None:
        typer.echo(text)
        return

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise InputError(output_path, 'write', str(e))


def _run_guarded(output: OutputHandler, operation: str, action: Callable[[], None]) -> None:
    """Run a command body and translate failures into exit codes.

    Args:
        output: Output handler for error messages
        operation: Operation name used in messages
        action: Command body
    """
    try:
        action()

    except ConfigError as e:
        logger.error(f"{operation} failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    except InputError as e:
        logger.error(f"{operation} failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.IO_ERROR)

    except ConversionError as e:
        logger.error(f"{operation} failed: {e}")
        output.error(f"{operation} failed: {e}")
        raise typer.Exit(ExitCode.CONVERSION_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception(f"Unexpected error during {operation.lower()}")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Convert HTML to Telegraph content nodes and back."""
    if version:
        typer.echo(f"telegraph-nodes version {VERSION}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("convert")
def convert_command(
    input_path: str = typer.Argument(
        "-",
        help="HTML file to convert ('-' reads stdin)",
        metavar="INPUT",
    ),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write node JSON to this file instead of stdout",
        metavar="FILE",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Indent the JSON output (not the canonical compact form)",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML configuration file",
        metavar="FILE",
    ),
    parser: Optional[str] = typer.Option(
        None,
        "--parser",
        help="HTML parser: html.parser or lxml",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        help="Maximum element nesting depth",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Convert an HTML fragment into a Telegraph content-node array."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    def _convert() -> None:
        config: ConverterConfig = ConfigLoader.resolve(config_path, parser, max_depth)
        output.debug(f"Parser: {config.parser}, max depth: {config.max_depth}")

        html = _read_input(input_path)
        converter = NodeConverter(parser=config.parser, max_depth=config.max_depth)
        result = converter.convert_with_report(html)

        if pretty:
            text = json.dumps(nodes_to_value(result.nodes), ensure_ascii=False, indent=2)
        else:
            text = serialize(result.nodes)
        _write_output(text, output_path)

        output.print_conversion_summary(len(result.nodes), result.dropped)
        if output_path is not None:
            output.success(f"Wrote {output_path}")

    _run_guarded(output, "Conversion", _convert)


@app.command("render")
def render_command(
    input_path: str = typer.Argument(
        "-",
        help="Node JSON file to render ('-' reads stdin)",
        metavar="INPUT",
    ),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write HTML to this file instead of stdout",
        metavar="FILE",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML configuration file",
        metavar="FILE",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        help="Maximum element nesting depth",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Render a Telegraph content-node array as HTML."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    def _render() -> None:
        config = ConfigLoader.resolve(config_path, max_depth=max_depth)
        nodes = deserialize(_read_input(input_path), max_depth=config.max_depth)
        _write_output(render_html(nodes), output_path)
        output.info(f"Rendered {len(nodes)} top-level node(s)")

    _run_guarded(output, "Rendering", _render)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m telegraph_nodes.cli.main
if __name__ == "__main__":
    main()
