"""Application service for viewing and editing tags.

This layer orchestrates the tag accessor and the editor bridge over many
files so that CLI commands only parse arguments and present results.
Per-file failures are captured in results; invocation-wide failures
(editor errors, malformed documents) propagate.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, final

from tagedit.features.tagging import AudioFile
from tagedit.features.tagging.usecases.ports import EditorRunner, TagFileOpener
from tagedit.platform.editor import edit_content
from tagedit.platform.logging import TagEvent, logger
from tagedit.shared.audio_tags import (
    AudioTags,
    dumps_document,
    loads_document,
    parse_tag_mapping,
)
from tagedit.shared.errors import MalformedInputError, TagEditError


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading one file's tags.

    Attributes:
        path: File that was read.
        tags: Tags read from the file, ``None`` on failure.
        error: Failure raised while opening or reading, if any.
    """

    path: Path
    tags: AudioTags | None = None
    error: TagEditError | None = None

    @property
    def success(self) -> bool:
        return self.error is None and self.tags is not None


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of applying desired tags to one file.

    Attributes:
        path: File that was targeted.
        success: Whether the update finished without error.
        changed: Whether the file was rewritten.
        error: Failure raised while opening, writing or saving, if any.
    """

    path: Path
    success: bool
    changed: bool = False
    error: TagEditError | None = None


@final
class TagService:
    """Application service running the view and edit modes over many files."""

    def __init__(
        self,
        *,
        opener: TagFileOpener | None = None,
        editor_runner: EditorRunner | None = None,
        json_indent: int = 2,
    ) -> None:
        """Create a service with overridable collaborators.

        Tests can inject light-weight doubles while production code opens
        real files with mutagen and launches a real editor.
        """
        self._open: TagFileOpener = opener or AudioFile.open
        self._run_editor: EditorRunner = editor_runner or edit_content
        self.json_indent = json_indent

    def read_one(self, path: Path) -> ReadResult:
        """Read tags from ``path``, capturing any failure."""
        try:
            tags = self._open(path).read_tags()
        except TagEditError as exc:
            logger.error(
                "Could not read from %s: %s",
                path,
                exc,
                extra={"tag_event": TagEvent.FILE_ERROR, "path": path, "error_message": str(exc)},
            )
            return ReadResult(path=path, error=exc)
        return ReadResult(path=path, tags=tags)

    def read_many(self, paths: Sequence[Path]) -> list[ReadResult]:
        """Read tags from every path in order; one failure never stops the rest."""
        return [self.read_one(path) for path in paths]

    def apply_one(self, path: Path, desired: AudioTags) -> ApplyResult:
        """Apply ``desired`` to ``path``, capturing any failure."""
        try:
            changed = self._open(path).apply_tags(desired)
        except TagEditError as exc:
            logger.error(
                "Couldn't update tags for %s: %s",
                path,
                exc,
                extra={"tag_event": TagEvent.FILE_ERROR, "path": path, "error_message": str(exc)},
            )
            return ApplyResult(path=path, success=False, error=exc)

        if changed:
            logger.info(
                "Updated tags for %s",
                path,
                extra={"tag_event": TagEvent.FILE_UPDATED, "path": path},
            )
        else:
            logger.debug(
                "Tags already up to date for %s",
                path,
                extra={"tag_event": TagEvent.FILE_UNCHANGED, "path": path},
            )
        return ApplyResult(path=path, success=True, changed=changed)

    def apply_many(self, desired_by_file: Mapping[str, AudioTags]) -> list[ApplyResult]:
        """Apply per-file desired tags, keyed by filename."""
        return [self.apply_one(Path(name), tags) for name, tags in desired_by_file.items()]

    def apply_document(self, text: str) -> list[ApplyResult]:
        """Parse a JSON object keyed by filename and apply each entry.

        Raises:
            MalformedInputError: If ``text`` is not such an object; nothing is applied.
        """
        return self.apply_many(parse_tag_mapping(loads_document(text)))

    def quick_edit(self, paths: Sequence[Path], desired: AudioTags) -> list[ApplyResult]:
        """Apply the same ``desired`` tags to every path."""
        return [self.apply_one(path, desired) for path in paths]

    def render_document(self, reads: Sequence[ReadResult], *, single: bool) -> str:
        """Render successful reads as JSON.

        A single selected file renders as a bare tag object; otherwise the
        object is keyed by filename.
        """
        readable = [read for read in reads if read.tags is not None]
        document: dict[str, Any]
        if single and len(readable) == 1:
            document = readable[0].tags.to_dict()  # pyright: ignore[reportOptionalMemberAccess]
        else:
            document = {
                str(read.path): read.tags.to_dict()  # pyright: ignore[reportOptionalMemberAccess]
                for read in readable
            }
        return dumps_document(document, indent=self.json_indent)

    def edit_in_editor(self, paths: Sequence[Path], editor: str) -> list[ApplyResult]:
        """Round-trip the tags of ``paths`` through ``editor`` and apply the result.

        All readable files share one editor session. Nothing is applied when
        the editor fails or the edited document cannot be parsed.

        Args:
            paths: Files selected by the user.
            editor: Editor command.

        Returns:
            list[ApplyResult]: One result per selected file.

        Raises:
            EditorError: If the editor cannot run or exits with failure.
            MalformedInputError: If the edited document is invalid.
        """
        reads = self.read_many(paths)
        failed = [
            ApplyResult(path=read.path, success=False, error=read.error)
            for read in reads
            if not read.success
        ]
        readable = [read for read in reads if read.success]
        if not readable:
            logger.error("No readable files to edit")
            return failed

        single = len(paths) == 1
        content = self.render_document(readable, single=single) + "\n"
        try:
            edited = self._run_editor(editor, content)
        except TagEditError as exc:
            logger.error(
                "Editor failed: %s",
                exc,
                extra={"tag_event": TagEvent.EDITOR_FAILED, "error_message": str(exc)},
            )
            raise

        desired = self._parse_edited(edited, readable, single=single)
        return failed + [self.apply_one(path, tags) for path, tags in desired.items()]

    @staticmethod
    def _parse_edited(
        text: str,
        readable: Sequence[ReadResult],
        *,
        single: bool,
    ) -> dict[Path, AudioTags]:
        """Map the edited document back onto the files that were opened.

        Entries removed by the user are left untouched; entries naming files
        outside the session are rejected.
        """
        data = loads_document(text)
        if single:
            return {readable[0].path: AudioTags.from_dict(data)}

        by_name = {str(read.path): read.path for read in readable}
        desired: dict[Path, AudioTags] = {}
        for name, tags in parse_tag_mapping(data).items():
            if name not in by_name:
                raise MalformedInputError(f"{name} was not opened for editing")
            desired[by_name[name]] = tags
        return desired


__all__ = ["ApplyResult", "ReadResult", "TagService"]
