"""src/tagedit/ui/cli/commands/view.py
What: Print the tags of one or more files.
Why: Single files read best as text lines; batches as JSON keyed by filename.
"""

from typing import override

from tagedit.application.services import ReadResult
from tagedit.ui.cli.args.options import ViewArgs
from tagedit.ui.cli.commands.executor import CommandExecutor


class ViewCommand(CommandExecutor):
    """Command for viewing tags."""

    args: ViewArgs

    @override
    def execute(self) -> list[ReadResult]:
        """Execute view command.

        Returns:
            List of read results.
        """
        results = self.service.read_many(self.args.files)
        if len(self.args.files) == 1 and not self.args.json:
            self.tag_display.show_lines(results[0])
        else:
            self.tag_display.show_json(results, self.service)
        return results
