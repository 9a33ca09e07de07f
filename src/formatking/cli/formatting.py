"""
CLI output formatting utilities.

This module provides helpers for consistent terminal output using the
Rich library.
"""

from typing import Any, Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


# Global console instance
console = Console()

SORT_INDICATORS = {"asc": "▲", "desc": "▼"}


def print_header(title: str, subtitle: Optional[str] = None) -> None:
    """Print a formatted header."""
    console.print()
    console.rule(f"[bold blue]{title}[/bold blue]")
    if subtitle:
        console.print(f"[dim]{subtitle}[/dim]")
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}", style="red")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_summary_panel(
    title: str,
    content: Dict[str, Any],
    success: bool = True
) -> None:
    """Print a summary panel with results."""
    lines = []
    for key, value in content.items():
        lines.append(f"[cyan]{key}:[/cyan] {escape(str(value))}")

    style = "green" if success else "red"
    panel = Panel(
        "\n".join(lines),
        title=f"[bold]{title}[/bold]",
        border_style=style,
    )
    console.print(panel)


def print_data_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    title: Optional[str] = None,
    sort_column: Optional[int] = None,
    sort_direction: str = "asc",
    highlight: str = "",
    limit: Optional[int] = None,
) -> None:
    """Print a table of cells.

    Cells are rendered literally (no Rich markup). The sorted column's
    header carries a direction arrow and *highlight* matches are marked.
    """
    table = Table(
        title=Text(title) if title is not None else None,
        show_header=True,
        header_style="bold cyan",
    )
    for i, header in enumerate(headers):
        label = header
        if i == sort_column:
            label = f"{header} {SORT_INDICATORS.get(sort_direction, '')}"
        table.add_column(Text(label))

    shown = rows if limit is None else rows[:limit]
    for row in shown:
        cells: List[Text] = []
        for cell in row:
            text = Text(cell)
            if highlight:
                text.highlight_words([highlight], style="bold yellow", case_sensitive=False)
            cells.append(text)
        table.add_row(*cells)

    console.print(table)
    if limit is not None and len(rows) > limit:
        console.print(f"[dim]... {format_number(len(rows) - limit)} more rows[/dim]")


def format_number(n: int) -> str:
    """Format a number with thousand separators."""
    return f"{n:,}"
