"""Command line interface for tagedit."""

import sys
from collections.abc import Sequence
from typing import final

from tagedit.application.services import ApplyResult, ReadResult
from tagedit.platform.logging import logger
from tagedit.shared.errors import TagEditError
from tagedit.ui.cli.args import ArgumentParser
from tagedit.ui.cli.args.options import CLIArgs, EditArgs, EditorArgs, QuickEditArgs, ViewArgs
from tagedit.ui.cli.commands import (
    CommandExecutor,
    EditCommand,
    EditorCommand,
    QuickEditCommand,
    ViewCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Per-file failures are reported as they happen and make the process
        exit with status 1 once every file was handled. Malformed input and
        editor failures abort the invocation immediately.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            results = CommandProcessor._build_command(args).execute()
            if CommandProcessor._has_failures(results):
                sys.exit(1)
            return

        except TagEditError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, ViewArgs):
            return ViewCommand(args)
        if isinstance(args, EditArgs):
            return EditCommand(args)
        if isinstance(args, EditorArgs):
            return EditorCommand(args)
        assert isinstance(args, QuickEditArgs)
        return QuickEditCommand(args)

    @staticmethod
    def _has_failures(results: Sequence[ReadResult | ApplyResult]) -> bool:
        return any(not result.success for result in results)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
