# src/secondbrain/cli/__init__.py
"""CLI package for SecondBrain.

This package provides the command-line interface using Typer.
"""

from secondbrain.cli.app import app, console

__all__ = ["app", "console"]
