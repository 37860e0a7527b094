"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

import pytest

from tagedit.config.config import Config
from tagedit.shared.audio_tags import AudioTags
from tagedit.shared.errors import NotAFileError, SaveFailedError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and clear editor variables."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("TAGEDIT_CONFIG", str(config_file))
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    Config.reset()
    yield config_file
    Config.reset()


class FakeTagFile:
    """In-memory stand-in for an opened audio file."""

    def __init__(self, path: Path, tags: AudioTags, *, fail_save: bool = False) -> None:
        self.path = path
        self.tags = tags
        self.fail_save = fail_save
        self.saves = 0

    def read_tags(self) -> AudioTags:
        return self.tags

    def apply_tags(self, desired: AudioTags) -> bool:
        changes = {
            name: value
            for name, value in desired.present()
            if value != self.tags.get(name)
        }
        if not changes:
            return False
        if self.fail_save:
            raise SaveFailedError(self.path, "disk full")
        self.tags = replace(self.tags, **changes)
        self.saves += 1
        return True


class FakeLibrary:
    """Opener returning ``FakeTagFile`` objects for known paths."""

    def __init__(self, files: dict[str, FakeTagFile]) -> None:
        self.files = files

    def open(self, path: Path) -> FakeTagFile:
        try:
            return self.files[str(path)]
        except KeyError:
            raise NotAFileError(path) from None


@pytest.fixture
def fake_library() -> FakeLibrary:
    """Two readable files: a.mp3 with a title only, b.mp3 fully tagged."""

    return FakeLibrary(
        {
            "a.mp3": FakeTagFile(Path("a.mp3"), AudioTags(title="Foo")),
            "b.mp3": FakeTagFile(
                Path("b.mp3"),
                AudioTags(
                    title="Bar",
                    artist="Artist",
                    album="Album",
                    comment="",
                    genre="Rock",
                    year=1999,
                    track=3,
                ),
            ),
        }
    )


@pytest.fixture
def make_tag_file() -> type[FakeTagFile]:
    """Expose the in-memory file double to tests."""

    return FakeTagFile


@pytest.fixture
def make_library() -> type[FakeLibrary]:
    """Expose the in-memory opener to tests."""

    return FakeLibrary
