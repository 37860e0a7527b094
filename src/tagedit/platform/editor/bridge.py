"""
Summary: Round-trip text through an external editor via a temporary file.
Why: Let users edit tag documents in the program they already use.
"""

from __future__ import annotations

import os
import shlex
import subprocess
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from tagedit.platform.logging import TagEvent, logger
from tagedit.shared.errors import EditorIoError, NonZeroExitError

EDITOR_ENV_VARS: Final[tuple[str, ...]] = ("VISUAL", "EDITOR")
TEMP_PREFIX: Final[str] = "tags-"
TEMP_SUFFIX: Final[str] = ".json"


def resolve_editor(env: Mapping[str, str] | None = None, fallback: str = "vi") -> str:
    """Pick the editor command from ``$VISUAL``, then ``$EDITOR``, then ``fallback``.

    Blank variables are skipped.
    """
    mapping = env if env is not None else os.environ
    for name in EDITOR_ENV_VARS:
        candidate = (mapping.get(name) or "").strip()
        if candidate:
            return candidate
    return fallback


def edit_content(editor: str, content: str) -> str:
    """Let the user edit ``content`` in ``editor`` and return the result.

    The editor command is split with shell rules and receives the temporary
    file path as its last argument. The file is removed on every exit path.

    Args:
        editor: Editor command, e.g. ``"vi"`` or ``"code --wait"``.
        content: Initial file content.

    Returns:
        str: File content after the editor exited successfully.

    Raises:
        NonZeroExitError: If the editor exits with a non-zero status.
        EditorIoError: If the temporary file cannot be created, written or
            read back, or the editor cannot be launched.
    """
    try:
        argv = shlex.split(editor)
    except ValueError as exc:
        raise EditorIoError(f"Invalid editor command {editor!r}: {exc}") from exc
    if not argv:
        raise EditorIoError("Editor command is empty")

    try:
        fd, raw_path = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX)
    except OSError as exc:
        raise EditorIoError(f"Could not create temporary file: {exc}") from exc

    path = Path(raw_path)
    try:
        try:
            handle = os.fdopen(fd, "w", encoding="utf-8")
        except OSError as exc:
            os.close(fd)
            raise EditorIoError(f"Could not write {path}: {exc}") from exc
        try:
            with handle:
                _ = handle.write(content)
        except OSError as exc:
            raise EditorIoError(f"Could not write {path}: {exc}") from exc

        logger.info(
            "Launching editor %s on %s",
            editor,
            path,
            extra={"tag_event": TagEvent.EDITOR_LAUNCH, "editor": editor},
        )
        try:
            completed = subprocess.run([*argv, str(path)], check=False)
        except OSError as exc:
            raise EditorIoError(f"Could not launch editor {editor!r}: {exc}") from exc

        if completed.returncode != 0:
            logger.debug("Editor %s exited with %d", editor, completed.returncode)
            raise NonZeroExitError(completed.returncode)

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise EditorIoError(f"Could not read back {path}: {exc}") from exc
    finally:
        path.unlink(missing_ok=True)


__all__ = ["EDITOR_ENV_VARS", "edit_content", "resolve_editor"]
