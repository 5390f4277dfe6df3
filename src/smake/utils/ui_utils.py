"""
UI utility functions used by the smake executor and CLI.
"""
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

# Rich theme shared by every smake console
SMAKE_THEME = Theme(
    {
        "headline": "bold yellow",
        "error": "red",
        "info": "white",
        "success": "green",
        "danger": "bold red",
        "muted": "dim white",
        "section": "bold cyan",
    }
)


def get_console(theme: bool = True, **kwargs) -> Console:
    """Get a rich console with the smake theme.

    Args:
        theme: Whether to apply the smake theme
        **kwargs: Extra Console options (file, force_terminal, ...)

    Returns:
        A configured Console object
    """
    if theme:
        return Console(theme=SMAKE_THEME, highlight=False, **kwargs)
    return Console(highlight=False, **kwargs)


class Reporter:
    """Human readable progress output with headline, error and info channels."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def headline(self, text: str) -> None:
        self.console.print(text, style="headline", markup=False)

    def error(self, text: str) -> None:
        self.console.print(f"\t{text.rstrip()}", style="error", markup=False)

    def info(self, text: str) -> None:
        self.console.print(f"\t{text.rstrip()}", style="info", markup=False)

    def success(self, text: str) -> None:
        self.console.print(text, style="success", markup=False)

    def fatal(self, error: Exception) -> None:
        """Display the error that stopped the run."""
        self.console.print(f"Error: {error}", style="danger", markup=False)

    def sections(self, sections: dict) -> None:
        """Display the declared sections and their command counts."""
        table = Table(title="Sections")
        table.add_column("Section", style="section")
        table.add_column("Commands", justify="right")
        for name, commands in sections.items():
            table.add_row(name, str(len(commands)))
        self.console.print(table)
