"""Rich console output utilities for the rat CLI."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table


console = Console()
error_console = Console(stderr=True)


def printable(text: str) -> str:
    """Show undecodable filename bytes as U+FFFD instead of failing to encode them."""
    try:
        return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}", highlight=False)


def print_fatal(message: str) -> None:
    """Print a single-line fatal message to stderr."""
    error_console.print(
        f"[bold red]fatal:[/bold red] {escape(printable(message))}",
        highlight=False,
        soft_wrap=True,
    )


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}", highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]→[/blue] {message}", highlight=False)


def print_names(names: list[str]) -> None:
    """Print names one per line, without markup, for piping into other tools."""
    for name in names:
        console.print(printable(name), markup=False, highlight=False, soft_wrap=True)


def print_config(config: dict[str, Any]) -> None:
    """Print configuration as a table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    for key, value in sorted(config.items()):
        table.add_row(key, escape(str(value)) if value != "" else "[dim](not set)[/dim]")

    console.print(table)
