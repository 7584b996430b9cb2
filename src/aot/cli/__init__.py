# src/aot/cli/__init__.py
"""CLI package for the Atom of Thoughts engine.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from aot.cli.app import app, console

__all__ = ["app", "console"]
