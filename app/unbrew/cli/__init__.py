"""CLI package for unbrew.

This package contains the Typer application.
"""

from unbrew.cli.main import app

__all__ = ["app"]
