"""src/tagedit/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tagedit.application.services import ApplyResult, ReadResult, TagService
from tagedit.config.config import Config
from tagedit.config.settings import RuntimeSettings
from tagedit.ui.cli.args.options import CLIArgs
from tagedit.ui.cli.display.result import ResultDisplay
from tagedit.ui.cli.display.tags import TagDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CLIArgs
    settings: RuntimeSettings
    service: TagService
    tag_display: TagDisplay
    result_display: ResultDisplay

    def __init__(self, args: CLIArgs, settings: RuntimeSettings | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            settings: Runtime settings; derived from the loaded config when omitted.
        """
        self.args = args
        self.settings = settings or RuntimeSettings.from_config(Config.load())
        self.service = TagService(json_indent=self.settings.json_indent)
        self.tag_display = TagDisplay()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> Sequence[ReadResult | ApplyResult]:
        """Execute the command.

        Returns:
            Per-file results; any unsuccessful entry makes the run fail.
        """
        pass

    def display_results(self, results: Sequence[ApplyResult]) -> None:
        """Display the summary of an edit run."""
        self.result_display.show_results(results, quiet=self.args.quiet)
