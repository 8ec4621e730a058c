"""Command-line entry point."""

from .main import cli, main

__all__ = ["cli", "main"]
