"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Everything is written to stderr except tool results, so `call` output can
be piped; `serve` never prints to stdout because stdout carries the MCP
stream.
"""

import json
from typing import Any, Iterable

from rich.console import Console
from rich.table import Table


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Console for results (stdout)
        err_console: Console for messages (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Operation completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(no_color=no_color, highlight=False)
        self.err_console = Console(stderr=True, no_color=no_color, highlight=False)

    def success(self, message: str) -> None:
        self.err_console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.err_console.print(f"[red]✗[/red] {message}", style="red")

    def warning(self, message: str) -> None:
        self.err_console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.err_console.print(message)

    def print_json(self, payload: Any) -> None:
        """Print a tool payload as indented JSON on stdout."""
        self.console.print_json(json.dumps(payload, default=str))

    def print_tools(self, tools: Iterable[Any]) -> None:
        """Print tool names and descriptions as a table."""
        table = Table(title="Confluence tools")
        table.add_column("Tool", style="cyan", no_wrap=True)
        table.add_column("Required arguments")
        table.add_column("Description")
        for tool in tools:
            required = ", ".join(tool.inputSchema.get("required", []))
            table.add_row(tool.name, required, tool.description or "")
        self.console.print(table)
