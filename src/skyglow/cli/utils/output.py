"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table

from skyglow.api.core.enums import Band


console = Console()

# Rich handles unicode detection internally, but the info icon needs a fallback
_use_unicode = console.is_terminal and not console.legacy_windows


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    import json

    console.print_json(json.dumps(data))


def format_latitude(latitude: float) -> str:
    """Format a latitude as e.g. "40.7128°N"."""
    direction = "N" if latitude >= 0 else "S"
    return f"{abs(latitude):.4f}°{direction}"


def format_longitude(longitude: float) -> str:
    """Format a longitude as e.g. "74.0060°W"."""
    direction = "E" if longitude >= 0 else "W"
    return f"{abs(longitude):.4f}°{direction}"


def print_band_table(title: str, column: str, values: Sequence[float], fmt: str = ".4g") -> None:
    """
    Print one value per photometric band in a table.

    Args:
        title: Table title
        column: Header of the value column
        values: Values in U, B, V, R, I order
        fmt: Format string for the values
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Band", style="cyan")
    table.add_column(column, style="green", justify="right")

    for band, value in zip(Band, values, strict=True):
        table.add_row(band.name, format(value, fmt))

    console.print(table)
