"""
skyglow CLI - Main Application

This is the main entry point for the skyglow command-line interface.
"""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from skyglow.cli.commands import site, sky
from skyglow.cli.utils.groups import SortedCommandsGroup


# Create main app
app = typer.Typer(
    name="skyglow",
    help="Sky brightness and naked-eye limiting magnitude",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()

# Global state for CLI
state: dict[str, bool] = {
    "verbose": False,
}


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    skyglow - Sky Brightness and Visual Limit

    Computes sky brightness, atmospheric extinction and the faintest star
    visible to the naked eye for a point of the sky.

    [bold green]Examples:[/bold green]

        skyglow site set --lat 40.7128 --lon -74.0060 --humidity 60
        skyglow limit --alt 45 --sun-alt -30 --moon-alt -10
        skyglow brightness --now --alt 30 --az 180

    [bold blue]Environment Variables:[/bold blue]

        SKYGLOW_CONFIG_DIR - Directory holding the saved observer site
        SKYFIELD_DIR       - Skyfield ephemeris cache directory
    """
    state["verbose"] = verbose

    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from skyglow.cli import __version__

    console.print(f"[bold]skyglow[/bold] version [cyan]{__version__}[/cyan]")


# Sky model
app.command("limit", rich_help_panel="Sky")(sky.limit)
app.command("brightness", rich_help_panel="Sky")(sky.brightness)
app.command("extinction", rich_help_panel="Sky")(sky.extinction)
app.command("visible", rich_help_panel="Sky")(sky.visible)

# Configuration
app.add_typer(
    site.app,
    name="site",
    help="Observer site commands",
    rich_help_panel="Configuration",
)


if __name__ == "__main__":
    app()
