"""
Summary: mutagen-backed adapters for the tagging feature.
Why: Isolate container-specific tag keys behind one backend interface.
"""

from .format_backends import (
    BACKENDS_BY_EXTENSION,
    AiffBackend,
    ApeBackend,
    AsfBackend,
    FlacBackend,
    Id3Backend,
    Mp4Backend,
    OggVorbisBackend,
    OpusBackend,
    TagBackend,
    VorbisCommentBackend,
    WaveBackend,
    backend_for,
)

__all__ = [
    "BACKENDS_BY_EXTENSION",
    "AiffBackend",
    "ApeBackend",
    "AsfBackend",
    "FlacBackend",
    "Id3Backend",
    "Mp4Backend",
    "OggVorbisBackend",
    "OpusBackend",
    "TagBackend",
    "VorbisCommentBackend",
    "WaveBackend",
    "backend_for",
]
