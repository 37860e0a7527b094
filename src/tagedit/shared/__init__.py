"""Shared value objects and errors used across tagedit layers."""

from tagedit.shared.audio_tags import (
    NUMERIC_FIELDS,
    TAG_FIELDS,
    TEXT_FIELDS,
    AudioTags,
    TagValue,
    dumps_document,
    loads_document,
    parse_tag_mapping,
)
from tagedit.shared.errors import (
    EditorError,
    EditorIoError,
    InputOutputError,
    LibraryError,
    MalformedInputError,
    NonZeroExitError,
    NotAFileError,
    SaveFailedError,
    TagEditError,
)

__all__ = [
    "AudioTags",
    "EditorError",
    "EditorIoError",
    "InputOutputError",
    "LibraryError",
    "MalformedInputError",
    "NUMERIC_FIELDS",
    "NonZeroExitError",
    "NotAFileError",
    "SaveFailedError",
    "TAG_FIELDS",
    "TEXT_FIELDS",
    "TagEditError",
    "TagValue",
    "dumps_document",
    "loads_document",
    "parse_tag_mapping",
]
