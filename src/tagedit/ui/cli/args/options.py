"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from tagedit.shared.audio_tags import AudioTags


@final
@dataclass(slots=True)
class ViewArgs:
    """Command line arguments for the ``view`` subcommand."""

    command: Literal["view"]
    files: list[Path]
    json: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditArgs:
    """Command line arguments for the ``edit`` subcommand."""

    command: Literal["edit"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class EditorArgs:
    """Command line arguments for the ``editor`` subcommand."""

    command: Literal["editor"]
    files: list[Path]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class QuickEditArgs:
    """Command line arguments for the ``quickedit`` subcommand."""

    command: Literal["quickedit"]
    files: list[Path]
    tags: AudioTags
    verbose: bool
    quiet: bool


CLIArgs = ViewArgs | EditArgs | EditorArgs | QuickEditArgs

__all__ = ["CLIArgs", "EditArgs", "EditorArgs", "QuickEditArgs", "ViewArgs"]
