"""
Summary: Save and re-open real audio files through AudioFile.
Why: In-memory doubles cannot catch containers that rewrite values on save.
"""

from __future__ import annotations

import struct
import wave
from collections.abc import Callable
from pathlib import Path

import pytest

from tagedit.features.tagging import AudioFile
from tagedit.shared.audio_tags import AudioTags

# MPEG-1 Layer III, 128 kbit/s, 44.1 kHz, joint stereo: 417-byte frames
MP3_FRAME = b"\xff\xfb\x90\x64" + b"\x00" * 413
# 44100 as an 80-bit IEEE extended float
AIFF_RATE_44100 = b"\x40\x0e\xac\x44" + b"\x00" * 6

FULL_TAGS = AudioTags(
    title="",
    artist="Artist",
    album="Album",
    comment="",
    genre="Rock",
    year=1999,
    track=0,
)


def _write_mp3(path: Path) -> None:
    _ = path.write_bytes(MP3_FRAME * 8)


def _write_flac(path: Path) -> None:
    # STREAMINFO: 4096-sample blocks, 44.1 kHz, stereo, 16 bit, no samples.
    packed = (44100 << 44) | (1 << 41) | (15 << 36)
    streaminfo = (
        (4096).to_bytes(2, "big") * 2
        + b"\x00" * 6
        + packed.to_bytes(8, "big")
        + b"\x00" * 16
    )
    header = bytes([0x80]) + len(streaminfo).to_bytes(3, "big")
    _ = path.write_bytes(b"fLaC" + header + streaminfo)


def _write_m4a(path: Path) -> None:
    ftyp = struct.pack(">I4s4sI4s", 20, b"ftyp", b"M4A ", 0, b"M4A ")
    moov = struct.pack(">I4s", 8, b"moov")
    _ = path.write_bytes(ftyp + moov)


def _write_wav(path: Path) -> None:
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(44100)
        handle.writeframes(b"\x00\x00" * 16)


def _write_aiff(path: Path) -> None:
    comm = b"COMM" + struct.pack(">I", 18) + struct.pack(">hLh", 1, 0, 16) + AIFF_RATE_44100
    ssnd = b"SSND" + struct.pack(">I", 8) + b"\x00" * 8
    body = b"AIFF" + comm + ssnd
    _ = path.write_bytes(b"FORM" + struct.pack(">I", len(body)) + body)


def _write_ape(path: Path) -> None:
    _ = path.write_bytes(b"\x00" * 128)


BUILDERS: dict[str, Callable[[Path], None]] = {
    ".mp3": _write_mp3,
    ".flac": _write_flac,
    ".m4a": _write_m4a,
    ".wav": _write_wav,
    ".aiff": _write_aiff,
    ".ape": _write_ape,
}
# Containers that cannot keep an empty text value
ID3_SUFFIXES = {".mp3", ".wav", ".aiff"}


@pytest.fixture(params=sorted(BUILDERS))
def audio_path(request: pytest.FixtureRequest, tmp_path: Path) -> Path:
    """An untagged audio file of each supported kind."""

    suffix: str = request.param
    path = tmp_path / f"song{suffix}"
    BUILDERS[suffix](path)
    return path


def _expected_after_save(path: Path) -> AudioTags:
    if path.suffix in ID3_SUFFIXES:
        return AudioTags(artist="Artist", album="Album", genre="Rock", year=1999, track=0)
    return FULL_TAGS


class TestSavedFiles:
    """Every field survives a real save and re-open."""

    def test_untagged_file_reads_empty(self, audio_path: Path) -> None:
        """A freshly built file has no tags."""

        assert AudioFile.open(audio_path).read_tags() == AudioTags()

    def test_fields_survive_reopen(self, audio_path: Path) -> None:
        """Text, empty text, the year and a zero track are read back."""

        assert AudioFile.open(audio_path).apply_tags(FULL_TAGS) is True

        assert AudioFile.open(audio_path).read_tags() == _expected_after_save(audio_path)

    def test_second_apply_leaves_file_untouched(self, audio_path: Path) -> None:
        """Re-applying the same tags to the re-opened file is a no-op."""

        _ = AudioFile.open(audio_path).apply_tags(FULL_TAGS)
        saved = audio_path.read_bytes()

        assert AudioFile.open(audio_path).apply_tags(FULL_TAGS) is False
        assert audio_path.read_bytes() == saved

    def test_partial_update_keeps_other_fields(self, audio_path: Path) -> None:
        """Only the requested field changes on disk."""

        _ = AudioFile.open(audio_path).apply_tags(FULL_TAGS)

        assert AudioFile.open(audio_path).apply_tags(AudioTags(album="Other", track=7)) is True

        expected = _expected_after_save(audio_path)
        reread = AudioFile.open(audio_path).read_tags()
        assert reread.album == "Other"
        assert reread.track == 7
        assert reread.artist == expected.artist
        assert reread.year == expected.year


class TestEmptyText:
    """Empty strings replace stored values on disk."""

    @pytest.mark.parametrize("suffix", sorted(ID3_SUFFIXES))
    def test_empty_string_clears_existing_value(self, tmp_path: Path, suffix: str) -> None:
        """Writing "" over a stored title deletes it, and repeating is a no-op."""

        path = tmp_path / f"song{suffix}"
        BUILDERS[suffix](path)
        _ = AudioFile.open(path).apply_tags(AudioTags(title="Foo", comment="Note"))

        assert AudioFile.open(path).apply_tags(AudioTags(title="", comment="")) is True
        assert AudioFile.open(path).read_tags() == AudioTags()
        assert AudioFile.open(path).apply_tags(AudioTags(title="", comment="")) is False

    def test_empty_string_is_kept_elsewhere(self, tmp_path: Path) -> None:
        """Containers able to store "" replace a value with the empty string."""

        path = tmp_path / "song.flac"
        _write_flac(path)
        _ = AudioFile.open(path).apply_tags(AudioTags(title="Foo"))

        assert AudioFile.open(path).apply_tags(AudioTags(title="")) is True
        assert AudioFile.open(path).read_tags() == AudioTags(title="")
