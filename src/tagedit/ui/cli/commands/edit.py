"""src/tagedit/ui/cli/commands/edit.py
What: Apply a JSON object of per-file tags read from standard input.
Why: Allow ``view --json | jq ... | edit`` style pipelines.
"""

import sys
from typing import TextIO, override

from tagedit.application.services import ApplyResult
from tagedit.shared.errors import InputOutputError
from tagedit.ui.cli.commands.executor import CommandExecutor


class EditCommand(CommandExecutor):
    """Command for batch editing from standard input."""

    @override
    def execute(self) -> list[ApplyResult]:
        """Execute edit command.

        Returns:
            List of apply results.

        Raises:
            InputOutputError: If standard input cannot be read.
            MalformedInputError: If the input is not a JSON object of tags.
        """
        results = self.service.apply_document(self._read_stdin(sys.stdin))
        self.display_results(results)
        return results

    @staticmethod
    def _read_stdin(stream: TextIO) -> str:
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputOutputError(f"Could not read standard input: {exc}") from exc
