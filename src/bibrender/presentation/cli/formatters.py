"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about rendering logic.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "bibrender") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]Error:[/] {escape(message)}", markup=True, highlight=False)


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Backend table
# ---------------------------------------------------------------------------


def backends_table(rows: list[tuple[str, str, str, str]]) -> None:
    """Print the registered backends.

    Each row is ``(name, class name, default suffix, symbols)``.
    """
    table = Table(title="Output backends", show_header=True, border_style="blue")
    table.add_column("Name", style="cyan")
    table.add_column("Class", style="green")
    table.add_column("Suffix")
    table.add_column("Symbols", style="dim")

    for row in rows:
        table.add_row(*row)

    console.print(table)
