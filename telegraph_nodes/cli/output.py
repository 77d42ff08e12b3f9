"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI status output.
Messages are written to stderr so that stdout carries only the converted
document and can be piped.
"""

from collections import Counter
from typing import List

from rich.console import Console
from rich.markup import escape


class OutputHandler:
    """Handles all terminal status output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance writing to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Converted 3 node(s)")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green (only if verbosity >= 1).

        Args:
            message: Success message to display
        """
        if self.verbosity >= 1:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1).

        Args:
            message: Info message to display
        """
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2).

        Args:
            message: Debug message to display
        """
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_conversion_summary(self, node_count: int, dropped: List[str]) -> None:
        """Display conversion summary (only if verbosity >= 1).

        Args:
            node_count: Number of top-level nodes produced
            dropped: Kind names of skipped DOM nodes
        """
        if self.verbosity < 1:
            return

        self.console.print("\n[bold]Conversion Summary:[/bold]")
        self.console.print(f"  [green]✓[/green] Top-level nodes: {node_count}")

        for kind, count in sorted(Counter(dropped).items()):
            self.console.print(f"  [dim]─[/dim] Skipped {kind}: {count}")
