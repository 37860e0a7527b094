"""Format-specific tag backends.

Where: src/tagedit/features/tagging/adapters/format_backends.py
What: Translate the seven tag fields to and from mutagen containers.
Why: Keep ID3, Vorbis comment, MP4, APEv2 and ASF details out of the tag accessor.
"""

from __future__ import annotations

import abc
import re
from pathlib import Path
from typing import Any, ClassVar, Final, Self, cast, override

from mutagen import MutagenError
from mutagen.aiff import AIFF
from mutagen.apev2 import APEv2File
from mutagen.asf import ASF
from mutagen.flac import FLAC
from mutagen.id3 import COMM, ID3, TALB, TCON, TDRC, TIT2, TPE1, TRCK
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis
from mutagen.wave import WAVE

from tagedit.platform.logging import logger
from tagedit.shared.audio_tags import NUMERIC_FIELDS, TAG_FIELDS, AudioTags, TagValue
from tagedit.shared.errors import LibraryError

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
    "parse_leading_number",
    "split_number_total",
]

_LEADING_NUMBER: Final[re.Pattern[str]] = re.compile(r"^\s*(\d+)")

# ID3v2.4 text encoding: UTF-8
_UTF8: Final[int] = 3


def parse_leading_number(value: str | None) -> int | None:
    """Parse the leading digits of ``value`` (``"1999-04-01"`` -> 1999, ``"3/12"`` -> 3)."""
    if not value:
        return None
    match = _LEADING_NUMBER.match(value)
    return int(match.group(1)) if match else None


def split_number_total(value: str | None) -> str | None:
    """Return the ``TOTAL`` part of an ``N/TOTAL`` string, if any."""
    if not value or "/" not in value:
        return None
    total = value.split("/", 1)[1].strip()
    return total or None


class TagBackend(abc.ABC):
    """Base class for reading and writing the seven fields of one container."""

    FILE_CLASS: ClassVar[type | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    TAG_MAPPING: ClassVar[dict[str, str]] = {}
    # False when the container drops empty text values on save.
    STORES_EMPTY_TEXT: ClassVar[bool] = True

    audio: Any
    path: Path

    def __init__(self, audio: Any, path: Path) -> None:
        self.audio = audio
        self.path = path

    @classmethod
    def load(cls, path: Path) -> Self:
        """Open ``path`` with the backend's mutagen file class.

        Raises:
            LibraryError: If mutagen cannot parse the file.
        """
        if cls.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")
        try:
            audio = cls.FILE_CLASS(path, **cls.FILE_INIT_PARAMS)
        except (MutagenError, OSError) as exc:
            logger.debug("%s could not open %s: %s", cls.__name__, path, exc)
            raise LibraryError(path, str(exc)) from exc
        return cls(audio, path)

    def _ensure_tags(self) -> Any:
        """Return the tag container, creating an empty one if the file has none."""
        if self.audio.tags is None:
            self.audio.add_tags()
        return self.audio.tags

    def read_tags(self) -> AudioTags:
        """Read all seven fields from the container."""
        tags = self.audio.tags
        if tags is None:
            return AudioTags()
        values: dict[str, TagValue] = {}
        for name in TAG_FIELDS:
            raw = self._read_raw(tags, name)
            value = parse_leading_number(raw) if name in NUMERIC_FIELDS else raw
            if value is not None:
                values[name] = value
        return AudioTags(**values)  # pyright: ignore[reportArgumentType]

    def write_field(self, name: str, value: TagValue) -> None:
        """Set field ``name`` to ``value`` in memory."""
        if name not in self.TAG_MAPPING:
            raise KeyError(name)
        tags = self._ensure_tags()
        if name == "track":
            total = split_number_total(self._read_raw(tags, "track"))
            self._write_track(tags, int(value), total)
        else:
            self._write_raw(tags, name, str(value))

    def save(self) -> None:
        """Persist the container to disk; mutagen errors propagate."""
        self.audio.save()

    @abc.abstractmethod
    def _read_raw(self, tags: Any, name: str) -> str | None:
        """Return the first stored value of field ``name`` as text."""
        raise NotImplementedError

    @abc.abstractmethod
    def _write_raw(self, tags: Any, name: str, value: str) -> None:
        """Store ``value`` for field ``name``."""
        raise NotImplementedError

    def _write_track(self, tags: Any, number: int, total: str | None) -> None:
        self._write_raw(tags, "track", f"{number}/{total}" if total else str(number))


class Id3Backend(TagBackend):
    """Backend for MP3 files using ID3v2 frames.

    ID3 drops text frames whose value is empty when it saves, so writing
    ``""`` deletes the frame and an absent frame reads back as ``None``.
    """

    FILE_CLASS: ClassVar[type | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}
    STORES_EMPTY_TEXT: ClassVar[bool] = False

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album": "TALB",
        "comment": "COMM",
        "genre": "TCON",
        "year": "TDRC",
        "track": "TRCK",
    }
    FRAME_CLASSES: ClassVar[dict[str, type]] = {
        "TIT2": TIT2,
        "TPE1": TPE1,
        "TALB": TALB,
        "TCON": TCON,
        "TDRC": TDRC,
        "TRCK": TRCK,
    }

    @override
    def _read_raw(self, tags: ID3, name: str) -> str | None:
        frame_id = self.TAG_MAPPING[name]
        if frame_id == "COMM":
            frame = self._main_comment(tags)
        else:
            frame = tags.get(frame_id)
        if frame is None:
            return None
        if isinstance(frame, TCON):
            # Resolves numeric references such as "(17)" to "Rock".
            genres = cast(list[str], frame.genres)
            return genres[0] if genres else None
        text = cast(list[object], getattr(frame, "text", []))
        return str(text[0]) if text else None

    @override
    def _write_raw(self, tags: ID3, name: str, value: str) -> None:
        frame_id = self.TAG_MAPPING[name]
        if frame_id == "COMM":
            # Only the description-less comment is ours; keep tool-specific ones.
            others = [frame for frame in tags.getall("COMM") if frame.desc != ""]
            if value == "":
                tags.setall("COMM", others)
                return
            tags.setall("COMM", [*others, COMM(encoding=_UTF8, lang="eng", desc="", text=[value])])
            return
        if value == "":
            tags.delall(frame_id)
            return
        frame_class = self.FRAME_CLASSES[frame_id]
        tags.setall(frame_id, [frame_class(encoding=_UTF8, text=[value])])

    @staticmethod
    def _main_comment(tags: ID3) -> COMM | None:
        comments = cast(list[COMM], tags.getall("COMM"))
        # Described comments (iTunNORM and friends) belong to other tools.
        for frame in comments:
            if frame.desc == "":
                return frame
        return None


class WaveBackend(Id3Backend):
    """Backend for RIFF/WAVE files carrying an ``id3`` chunk."""

    FILE_CLASS: ClassVar[type | None] = WAVE


class AiffBackend(Id3Backend):
    """Backend for AIFF/AIFF-C files carrying an ``ID3`` chunk."""

    FILE_CLASS: ClassVar[type | None] = AIFF


class VorbisCommentBackend(TagBackend, abc.ABC):
    """Shared backend for containers storing Vorbis comments."""

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "title",
        "artist": "artist",
        "album": "album",
        "comment": "comment",
        "genre": "genre",
        "year": "date",
        "track": "tracknumber",
    }

    @override
    def _read_raw(self, tags: Any, name: str) -> str | None:
        values = cast(list[str] | None, tags.get(self.TAG_MAPPING[name]))
        return values[0] if values else None

    @override
    def _write_raw(self, tags: Any, name: str, value: str) -> None:
        tags[self.TAG_MAPPING[name]] = [value]


class FlacBackend(VorbisCommentBackend):
    """Backend for FLAC files."""

    FILE_CLASS: ClassVar[type | None] = FLAC


class OggVorbisBackend(VorbisCommentBackend):
    """Backend for Ogg Vorbis files."""

    FILE_CLASS: ClassVar[type | None] = OggVorbis


class OpusBackend(VorbisCommentBackend):
    """Backend for Opus files."""

    FILE_CLASS: ClassVar[type | None] = OggOpus


class Mp4Backend(TagBackend):
    """Backend for M4A/MP4 files using iTunes-style atoms."""

    FILE_CLASS: ClassVar[type | None] = MP4

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album": "\xa9alb",
        "comment": "\xa9cmt",
        "genre": "\xa9gen",
        "year": "\xa9day",
        "track": "trkn",
    }

    @override
    def _read_raw(self, tags: Any, name: str) -> str | None:
        key = self.TAG_MAPPING[name]
        if key == "trkn":
            pairs = cast(list[tuple[int, int]] | None, tags.get(key))
            if not pairs:
                return None
            number, total = pairs[0]
            return f"{number}/{total}" if total else str(number)
        values = cast(list[str] | None, tags.get(key))
        return str(values[0]) if values else None

    @override
    def _write_raw(self, tags: Any, name: str, value: str) -> None:
        tags[self.TAG_MAPPING[name]] = [value]

    @override
    def _write_track(self, tags: Any, number: int, total: str | None) -> None:
        total_number = int(total) if total and total.isdigit() else 0
        tags["trkn"] = [(number, total_number)]


class ApeBackend(TagBackend):
    """Backend for APEv2-tagged files (Monkey's Audio, WavPack, Musepack).

    The generic ``APEv2File`` is used so stream parsing never blocks tag edits.
    """

    FILE_CLASS: ClassVar[type | None] = APEv2File

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Artist",
        "album": "Album",
        "comment": "Comment",
        "genre": "Genre",
        "year": "Year",
        "track": "Track",
    }

    
    def _read_raw(self, tags: Any, name: str) -> str | None:
        value = tags.get(self.TAG_MAPPING[name])
        if value is None:
            return None
        # Multi-value items are NUL-separated; the first one is ours.
        return str(value).split("\x00", 1)[0]

    
    def _write_raw(self, tags: Any, name: str, value: str) -> None:
        tags[self.TAG_MAPPING[name]] = value


class AsfBackend(TagBackend):
    """Backend for WMA files using ASF attributes."""

    FILE_CLASS: ClassVar[type | None] = ASF

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "Title",
        "artist": "Author",
        "album": "WM/AlbumTitle",
        "comment": "Description",
        "genre": "WM/Genre",
        "year": "WM/Year",
        "track": "WM/TrackNumber",
    }

    
    def _read_raw(self, tags: Any, name: str) -> str | None:
        values = cast(list[object] | None, tags.get(self.TAG_MAPPING[name]))
        return str(values[0]) if values else None

    
    def _write_raw(self, tags: Any, name: str, value: str) -> None:
        tags[self.TAG_MAPPING[name]] = value


BACKENDS_BY_EXTENSION: Final[dict[str, type[TagBackend]]] = {
    ".mp3": Id3Backend,
    ".wav": WaveBackend,
    ".wave": WaveBackend,
    ".aif": AiffBackend,
    ".aiff": AiffBackend,
    ".aifc": AiffBackend,
    ".flac": FlacBackend,
    ".ogg": OggVorbisBackend,
    ".oga": OggVorbisBackend,
    ".opus": OpusBackend,
    ".m4a": Mp4Backend,
    ".mp4": Mp4Backend,
    ".ape": ApeBackend,
    ".wv": ApeBackend,
    ".mpc": ApeBackend,
    ".wma": AsfBackend,
    ".asf": AsfBackend,
}


def backend_for(path: Path) -> type[TagBackend]:
    """Select the backend class for ``path`` by its extension.

    Raises:
        LibraryError: If the extension is not supported.
    """
    ext = path.suffix.lower()
    try:
        return BACKENDS_BY_EXTENSION[ext]
    except KeyError:
        raise LibraryError(path, f"Unsupported file format: {ext or '<none>'}") from None
