"""
Summary: Tag accessor wrapping one opened audio file.
Why: Offer read and diff-then-save operations independent of container format.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from mutagen import MutagenError

from tagedit.features.tagging.adapters.format_backends import TagBackend, backend_for
from tagedit.features.tagging.domain.diff import compute_tag_changes
from tagedit.platform.logging import logger
from tagedit.shared.audio_tags import AudioTags
from tagedit.shared.errors import LibraryError, NotAFileError, SaveFailedError


@final
class AudioFile:
    """Handle on a single audio file and its tag container.

    The handle owns the underlying mutagen object for its lifetime and is
    not meant to be shared across threads.
    """

    path: Path
    backend: TagBackend

    def __init__(self, path: Path, backend: TagBackend) -> None:
        self.path = path
        self.backend = backend

    @classmethod
    def open(cls, path: Path) -> AudioFile:
        """Open ``path`` for tag access.

        Args:
            path: Audio file to open.

        Returns:
            AudioFile: Handle on the opened file.

        Raises:
            NotAFileError: If ``path`` is not an existing regular file.
            LibraryError: If the format is unsupported or mutagen rejects the file.
        """
        if not path.is_file():
            raise NotAFileError(path)
        backend_class = backend_for(path)
        return cls(path, backend_class.load(path))

    def read_tags(self) -> AudioTags:
        """Return the tags currently stored in the file.

        Raises:
            LibraryError: If the tag container cannot be interpreted.
        """
        try:
            return self.backend.read_tags()
        except (MutagenError, ValueError, TypeError) as exc:
            raise LibraryError(self.path, str(exc)) from exc

    def apply_tags(self, desired: AudioTags) -> bool:
        """Write the fields of ``desired`` that differ from the file, then save.

        Current tags are re-read first. Nothing is written and the file is not
        saved when no field differs.

        Args:
            desired: Partial update; absent fields are left unchanged.

        Returns:
            bool: ``True`` if the file was rewritten, ``False`` on a no-op.

        Raises:
            LibraryError: If reading or setting a field fails.
            SaveFailedError: If persisting the changes fails.
        """
        changes = compute_tag_changes(
            self.read_tags(),
            desired,
            empty_is_absent=not self.backend.STORES_EMPTY_TEXT,
        )
        if not changes:
            logger.debug("No tag changes for %s", self.path)
            return False

        try:
            for name, value in changes.items():
                self.backend.write_field(name, value)
        except (MutagenError, ValueError, TypeError) as exc:
            raise LibraryError(self.path, str(exc)) from exc

        try:
            self.backend.save()
        except (MutagenError, OSError) as exc:
            raise SaveFailedError(self.path, str(exc)) from exc

        logger.debug("Saved %s: %s", self.path, ", ".join(changes))
        return True


__all__ = ["AudioFile"]
