"""
Output utility for the empstats CLI with colors, tables, and verbosity control.

Provides a centralized output manager using the Rich library for formatted
CLI output: status messages, report sections, and employee tables.
"""

from enum import IntEnum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from rich.console import Console
from rich.table import Table
from rich import box

EMPLOYEE_COLUMNS = ["id", "name", "age", "gender", "department", "year_of_joining", "salary"]


class Verbosity(IntEnum):
    """Verbosity levels for output."""

    QUIET = 0  # Only errors and final results
    NORMAL = 1  # Standard output with colors
    VERBOSE = 2  # Detailed output including files read and written


class OutputManager:
    """
    Centralized output manager for the empstats CLI.

    Provides methods for formatted output with colors, tables, and
    verbosity control. Results printed through result() and the table
    helpers are shown at every verbosity level.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, console: Optional[Console] = None):
        """
        Initialize the output manager.

        Args:
            verbosity: Verbosity level for output
            console: Console to print to (defaults to stdout)
        """
        self.verbosity = verbosity
        self.console = console or Console()
        self.error_console = Console(stderr=True)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, suggestion: Optional[str] = None) -> None:
        """Print an error message in red to stderr."""
        self.error_console.print(f"[red]✗ {message}[/red]", style="red")
        if suggestion and self.verbosity >= Verbosity.NORMAL:
            self.error_console.print(f"[yellow]💡 {suggestion}[/yellow]", style="yellow")

    def warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")

    def info(self, message: str) -> None:
        """Print an info message in blue."""
        if self.verbosity >= Verbosity.NORMAL:
            self.console.print(f"[blue]ℹ[/blue] {message}", style="blue")

    def prompt(self, message: str) -> None:
        """Print an input prompt. Prompts are shown even in quiet mode."""
        self.console.print(message, highlight=False)

    def result(self, content: str) -> None:
        """Print a final result verbatim, regardless of verbosity."""
        self.console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def verbose(self, message: str) -> None:
        """Print a verbose message (only shown in VERBOSE mode)."""
        if self.verbosity >= Verbosity.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]", style="dim")

    def section(self, title: str) -> None:
        """Print a section header."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def table(
        self,
        title: str,
        columns: List[str],
        rows: List[List[str]],
        show_header: bool = True,
    ) -> None:
        """Print a table."""
        # Title wraps to the table width, so keep the table at least as wide as it
        table = Table(title=title, show_header=show_header, box=box.ROUNDED, min_width=len(title) + 4)
        for col in columns:
            table.add_column(col)
        for row in rows:
            table.add_row(*row)
        self.console.print(table)

    def mapping_table(self, title: str, data: Mapping[str, Any], key_column: str, value_column: str) -> None:
        """Print a two-column table of a mapping."""
        rows = [[str(key), _format_value(value)] for key, value in data.items()]
        self.table(title, [key_column, value_column], rows)

    def employee_table(self, title: str, employees: Iterable[Dict[str, Any]]) -> None:
        """Print employee records (as mappings) one per row."""
        rows = [[str(record.get(col, "")) for col in EMPLOYEE_COLUMNS] for record in employees]
        self.table(title, EMPLOYEE_COLUMNS, rows)


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{key}: {item}" for key, item in value.items()) or "-"
    return str(value)


# Global output manager instance
_output_manager: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """
    Get the global output manager instance.

    Returns:
        OutputManager instance
    """
    global _output_manager
    if _output_manager is None:
        _output_manager = OutputManager()
    return _output_manager


def set_output(manager: OutputManager) -> None:
    """Set the global output manager instance."""
    global _output_manager
    _output_manager = manager
