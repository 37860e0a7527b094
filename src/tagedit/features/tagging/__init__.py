# Where: tagedit.features.tagging.__init__
# What: Expose the tag accessor, diff policy and backends.
# Why: Provide a cohesive import surface for the application and UI layers.

from tagedit.shared.audio_tags import AudioTags
from .adapters import TagBackend, backend_for
from .domain import compute_tag_changes
from .usecases import AudioFile

__all__ = [
    "AudioFile",
    "AudioTags",
    "TagBackend",
    "backend_for",
    "compute_tag_changes",
]
