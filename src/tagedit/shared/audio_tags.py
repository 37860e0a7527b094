# Where: tagedit.shared.audio_tags
# What: Canonical AudioTags snapshot plus its JSON and text renderings.
# Why: Every mode exchanges the same seven optional fields with the user.

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final

from tagedit.shared.errors import MalformedInputError

TEXT_FIELDS: Final[tuple[str, ...]] = ("title", "artist", "album", "comment", "genre")
NUMERIC_FIELDS: Final[tuple[str, ...]] = ("year", "track")
# Display and serialization order.
TAG_FIELDS: Final[tuple[str, ...]] = TEXT_FIELDS + NUMERIC_FIELDS

TagValue = str | int


@dataclass(slots=True, frozen=True)
class AudioTags:
    """Snapshot of the seven supported tags.

    ``None`` means the field is absent: either not requested (desired state)
    or not stored in the file (current state). An empty string is a value.
    """

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    comment: str | None = None
    genre: str | None = None
    year: int | None = None
    track: int | None = None

    def get(self, name: str) -> TagValue | None:
        """Return the value of field ``name``."""
        if name not in TAG_FIELDS:
            raise KeyError(name)
        value: TagValue | None = getattr(self, name)
        return value

    def present(self) -> list[tuple[str, TagValue]]:
        """Return ``(name, value)`` pairs for present fields in display order."""
        pairs: list[tuple[str, TagValue]] = []
        for name in TAG_FIELDS:
            value = self.get(name)
            if value is not None:
                pairs.append((name, value))
        return pairs

    def is_empty(self) -> bool:
        """Return whether no field is present."""
        return not self.present()

    def to_dict(self) -> dict[str, TagValue]:
        """Return present fields only, in display order."""
        return dict(self.present())

    def format_lines(self) -> str:
        """Render one ``field:<TAB>value`` line per present field."""
        return "".join(f"{name}:\t{value}\n" for name, value in self.present())

    @classmethod
    def from_dict(cls, data: object) -> AudioTags:
        """Build a snapshot from a decoded JSON object.

        Args:
            data: Decoded JSON value expected to be an object keyed by field name.

        Returns:
            AudioTags: Snapshot holding the fields present in ``data``.

        Raises:
            MalformedInputError: If ``data`` has an unexpected shape.
        """
        if not isinstance(data, dict):
            raise MalformedInputError(
                f"Expected a JSON object of tags, got {_json_type_name(data)}"
            )

        unknown = sorted(str(key) for key in data if key not in TAG_FIELDS)
        if unknown:
            raise MalformedInputError(f"Unknown tag field(s): {', '.join(unknown)}")

        values: dict[str, TagValue] = {}
        for name, value in data.items():
            if value is None:
                continue
            if name in TEXT_FIELDS:
                if not isinstance(value, str):
                    raise MalformedInputError(
                        f"Tag {name!r} must be a string, got {_json_type_name(value)}"
                    )
            elif isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise MalformedInputError(
                    f"Tag {name!r} must be a non-negative integer, got {value!r}"
                )
            values[name] = value
        return cls(**values)  # pyright: ignore[reportArgumentType]


def parse_tag_mapping(data: object) -> dict[str, AudioTags]:
    """Parse an object keyed by filename into per-file snapshots."""
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Expected a JSON object keyed by filename, got {_json_type_name(data)}"
        )
    mapping: dict[str, AudioTags] = {}
    for filename, tags in data.items():
        try:
            mapping[filename] = AudioTags.from_dict(tags)
        except MalformedInputError as exc:
            raise MalformedInputError(f"{filename}: {exc}") from exc
    return mapping


def dumps_document(document: Any, indent: int = 2) -> str:
    """Serialize a tag document as pretty-printed JSON."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def loads_document(text: str) -> Any:
    """Decode a JSON tag document.

    Raises:
        MalformedInputError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid JSON: {exc}") from exc


def _json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


__all__ = [
    "AudioTags",
    "NUMERIC_FIELDS",
    "TAG_FIELDS",
    "TEXT_FIELDS",
    "TagValue",
    "dumps_document",
    "loads_document",
    "parse_tag_mapping",
]
