"""
skyglow command-line interface.

Typer application exposing the sky brightness model.
"""

from skyglow import __version__


__all__ = ["__version__"]
