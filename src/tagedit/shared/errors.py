"""Where: src/tagedit/shared/errors.py
What: Exception hierarchy raised across tag reading, writing and editing.
Why: Let the service layer tell per-file failures from invocation-fatal ones.
"""

from __future__ import annotations

from pathlib import Path


class TagEditError(Exception):
    """Base class for every error raised by tagedit."""


class NotAFileError(TagEditError):
    """Raised when a path does not reference an existing regular file."""

    path: Path

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not a file: {path}")


class LibraryError(TagEditError):
    """Raised when mutagen rejects opening, reading or writing a file."""

    path: Path
    reason: str

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not access tags of {path}: {reason}")


class SaveFailedError(TagEditError):
    """Raised when changed tags could not be persisted to disk."""

    path: Path
    reason: str

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save tags to {path}: {reason}")


class MalformedInputError(TagEditError):
    """Raised when a JSON document does not describe tag snapshots."""


class InputOutputError(TagEditError):
    """Raised when a temporary file or a standard stream cannot be used."""


class EditorError(TagEditError):
    """Base class for external editor round-trip failures."""


class EditorIoError(EditorError, InputOutputError):
    """Raised when the temporary file or the editor process cannot be handled."""


class NonZeroExitError(EditorError):
    """Raised when the external editor exits with a failure status."""

    returncode: int

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(f"Editor exited with {returncode} exit code")


__all__ = [
    "EditorError",
    "EditorIoError",
    "InputOutputError",
    "LibraryError",
    "MalformedInputError",
    "NonZeroExitError",
    "NotAFileError",
    "SaveFailedError",
    "TagEditError",
]
