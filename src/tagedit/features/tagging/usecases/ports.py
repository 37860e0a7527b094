"""
Summary: Ports describing what the application layer needs from tagging.
Why: Let services run against in-memory doubles in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from tagedit.shared.audio_tags import AudioTags


@runtime_checkable
class TagFilePort(Protocol):
    """Port for one opened audio file."""

    path: Path

    def read_tags(self) -> AudioTags:
        """Return the tags currently stored in the file."""
        ...

    def apply_tags(self, desired: AudioTags) -> bool:
        """Write differing fields and save; return whether anything changed."""
        ...


TagFileOpener = Callable[[Path], TagFilePort]
EditorRunner = Callable[[str, str], str]


__all__ = ["EditorRunner", "TagFileOpener", "TagFilePort"]
