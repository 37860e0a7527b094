"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagedit import __version__
from tagedit.config.config import Config
from tagedit.platform.logging import level_for_verbosity, logger, setup_logger
from tagedit.shared.audio_tags import AudioTags
from tagedit.ui.cli.args.options import CLIArgs, EditArgs, EditorArgs, QuickEditArgs, ViewArgs

# (flag, long option, field, help) for every quickedit tag option.
QUICKEDIT_OPTIONS: tuple[tuple[str, str, str, str], ...] = (
    ("-t", "--title", "title", "Set title tag"),
    ("-r", "--artist", "artist", "Set artist tag"),
    ("-l", "--album", "album", "Set album tag"),
    ("-c", "--comment", "comment", "Set comment tag"),
    ("-g", "--genre", "genre", "Set genre tag"),
    ("-n", "--track", "track", "Set track tag"),
    ("-y", "--year", "year", "Set year tag"),
)


def non_negative_int(value: str) -> int:
    """Parse a non-negative integer option value."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value!r} must not be negative")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagedit",
            description="Edit audio tags",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        view_parser = subparsers.add_parser("view", help="View tags from file")
        ArgumentParser._add_files_argument(view_parser)
        _ = view_parser.add_argument(
            "-j",
            "--json",
            action="store_true",
            help="Output tags in json format",
        )
        ArgumentParser._add_verbosity_arguments(view_parser)

        edit_parser = subparsers.add_parser(
            "edit",
            help="Edit tags from a JSON object read on standard input",
        )
        ArgumentParser._add_verbosity_arguments(edit_parser)

        editor_parser = subparsers.add_parser(
            "editor",
            help="Edit tags in $VISUAL or $EDITOR",
        )
        ArgumentParser._add_files_argument(editor_parser)
        ArgumentParser._add_verbosity_arguments(editor_parser)

        quickedit_parser = subparsers.add_parser("quickedit", help="Update tag on the fly")
        ArgumentParser._add_files_argument(quickedit_parser)
        for flag, long_option, field_name, help_text in QUICKEDIT_OPTIONS:
            value_type = non_negative_int if field_name in {"year", "track"} else str
            _ = quickedit_parser.add_argument(
                flag,
                long_option,
                dest=field_name,
                type=value_type,
                help=help_text,
                metavar=field_name.upper(),
            )
        ArgumentParser._add_verbosity_arguments(quickedit_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = level_for_verbosity(verbose=parsed_args.verbose, quiet=parsed_args.quiet)
        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "view":
            return ViewArgs(
                command="view",
                files=ArgumentParser._paths(parsed_args.files),
                json=parsed_args.json,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "edit":
            return EditArgs(command="edit", verbose=parsed_args.verbose, quiet=parsed_args.quiet)

        if command == "editor":
            return EditorArgs(
                command="editor",
                files=ArgumentParser._paths(parsed_args.files),
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "quickedit":
            return ArgumentParser._process_quickedit(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_files_argument(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "files",
            nargs="+",
            type=str,
            help="Audio files to process",
            metavar="FILE",
        )

    @staticmethod
    def _add_verbosity_arguments(parser: argparse.ArgumentParser) -> None:
        """Apply the verbosity flags shared by every subcommand."""

        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _paths(raw_paths: list[str]) -> list[Path]:
        return [Path(raw) for raw in raw_paths]

    @staticmethod
    def _process_quickedit(parsed_args: argparse.Namespace) -> QuickEditArgs:
        tags = AudioTags(
            **{
                field_name: getattr(parsed_args, field_name)
                for _, _, field_name, _ in QUICKEDIT_OPTIONS
            }
        )
        return QuickEditArgs(
            command="quickedit",
            files=ArgumentParser._paths(parsed_args.files),
            tags=tags,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
