"""
Typer command groups shared by the skyglow CLI.
"""

from click import Context
from typer.core import TyperGroup


__all__ = ["SortedCommandsGroup"]


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)
