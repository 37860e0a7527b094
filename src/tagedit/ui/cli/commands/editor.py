"""src/tagedit/ui/cli/commands/editor.py
What: Edit the tags of selected files in the user's text editor.
Why: Let users change many fields interactively in one session.
"""

from typing import override

from tagedit.application.services import ApplyResult
from tagedit.platform.editor import resolve_editor
from tagedit.ui.cli.args.options import EditorArgs
from tagedit.ui.cli.commands.executor import CommandExecutor


class EditorCommand(CommandExecutor):
    """Command for editing tags through $VISUAL or $EDITOR."""

    args: EditorArgs

    @override
    def execute(self) -> list[ApplyResult]:
        """Execute editor command.

        Returns:
            List of apply results.
        """
        editor = resolve_editor(fallback=self.settings.editor_fallback)
        results = self.service.edit_in_editor(self.args.files, editor)
        self.display_results(results)
        return results
