"""Command line argument handling package."""

from tagedit.ui.cli.args.parser import ArgumentParser
from tagedit.ui.cli.args.options import CLIArgs, EditArgs, EditorArgs, QuickEditArgs, ViewArgs

__all__ = ["ArgumentParser", "CLIArgs", "EditArgs", "EditorArgs", "QuickEditArgs", "ViewArgs"]
