"""Tests for configuration path discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagedit.config.paths import default_config_dir, default_config_path, resolve_overridable_path


def test_explicit_config_file(tmp_path: Path) -> None:
    """``TAGEDIT_CONFIG`` wins over the XDG location."""

    target = tmp_path / "custom.toml"
    env = {"TAGEDIT_CONFIG": str(target), "XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert default_config_path(env) == target.resolve()


def test_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert default_config_dir(env) == (tmp_path / "xdg").resolve() / "tagedit"
    assert default_config_path(env) == (tmp_path / "xdg").resolve() / "tagedit" / "config.toml"


def test_home_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without overrides the directory lives under ``~/.config``."""

    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_config_path({}) == (tmp_path / ".config").resolve() / "tagedit" / "config.toml"


def test_blank_override_is_ignored(tmp_path: Path) -> None:
    env = {"TAGEDIT_CONFIG": "   ", "XDG_CONFIG_HOME": str(tmp_path)}

    assert default_config_path(env) == tmp_path.resolve() / "tagedit" / "config.toml"


def test_explicit_path_wins(tmp_path: Path) -> None:
    result = resolve_overridable_path(
        explicit_path=tmp_path / "a.toml",
        env={"X": str(tmp_path / "b.toml")},
        env_var="X",
        default_factory=lambda: tmp_path / "c.toml",
    )

    assert result == (tmp_path / "a.toml").resolve()
