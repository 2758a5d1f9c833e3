"""Command line interface for trashbin."""

from .main import cli, main

__all__ = ["cli", "main"]
