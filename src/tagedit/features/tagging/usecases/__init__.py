"""Tagging use cases."""

from .audio_file import AudioFile
from .ports import EditorRunner, TagFileOpener, TagFilePort

__all__ = ["AudioFile", "EditorRunner", "TagFileOpener", "TagFilePort"]
