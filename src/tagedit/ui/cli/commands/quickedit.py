"""src/tagedit/ui/cli/commands/quickedit.py
What: Set the same literal tag values on every listed file.
Why: Cover one-off fixes without writing JSON.
"""

from typing import override

from tagedit.application.services import ApplyResult
from tagedit.platform.logging import logger
from tagedit.ui.cli.args.options import QuickEditArgs
from tagedit.ui.cli.commands.executor import CommandExecutor


class QuickEditCommand(CommandExecutor):
    """Command for flag-based edits."""

    args: QuickEditArgs

    @override
    def execute(self) -> list[ApplyResult]:
        """Execute quickedit command.

        Returns:
            List of apply results.
        """
        if self.args.tags.is_empty():
            logger.warning("No tag options given; nothing to update")
        results = self.service.quick_edit(self.args.files, self.args.tags)
        self.display_results(results)
        return results
