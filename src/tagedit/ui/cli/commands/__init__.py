"""Command execution package for CLI."""

from tagedit.ui.cli.commands.executor import CommandExecutor
from tagedit.ui.cli.commands.edit import EditCommand
from tagedit.ui.cli.commands.editor import EditorCommand
from tagedit.ui.cli.commands.quickedit import QuickEditCommand
from tagedit.ui.cli.commands.view import ViewCommand

__all__ = [
    "CommandExecutor",
    "EditCommand",
    "EditorCommand",
    "QuickEditCommand",
    "ViewCommand",
]
