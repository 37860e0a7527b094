"""Command line interface package."""

from tagedit.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
