"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagedit.shared.audio_tags import AudioTags
from tagedit.ui.cli.args import ArgumentParser, EditArgs, EditorArgs, QuickEditArgs, ViewArgs


def test_create_parser() -> None:
    """Argument parser should expose the four subcommands."""

    parser = ArgumentParser.create_parser()

    view_args: Namespace = parser.parse_args(["view", "a.mp3", "b.flac", "--json"])
    assert view_args.command == "view"
    assert view_args.files == ["a.mp3", "b.flac"]
    assert view_args.json is True

    edit_args: Namespace = parser.parse_args(["edit"])
    assert edit_args.command == "edit"

    editor_args: Namespace = parser.parse_args(["editor", "a.mp3", "--verbose"])
    assert editor_args.command == "editor"
    assert editor_args.verbose is True

    quick_args: Namespace = parser.parse_args(["quickedit", "a.mp3", "-t", "Title", "-n", "3"])
    assert quick_args.title == "Title"
    assert quick_args.track == 3
    assert quick_args.year is None


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["view"],
        ["editor"],
        ["quickedit", "-t", "x"],
        ["quickedit", "a.mp3", "-y", "nineteen"],
        ["quickedit", "a.mp3", "-n", "-1"],
        ["frobnicate", "a.mp3"],
    ],
)
def test_usage_errors_exit_with_2(argv: list[str]) -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit) as excinfo:
        _ = parser.parse_args(argv)

    assert excinfo.value.code == 2


def test_process_view_args() -> None:
    args = ArgumentParser.process_args(["view", "song.mp3"])

    assert isinstance(args, ViewArgs)
    assert args.files == [Path("song.mp3")]
    assert args.json is False
    assert args.quiet is False


def test_process_edit_args() -> None:
    args = ArgumentParser.process_args(["edit", "--quiet"])

    assert isinstance(args, EditArgs)
    assert args.quiet is True


def test_process_editor_args() -> None:
    args = ArgumentParser.process_args(["editor", "a.mp3", "b.mp3"])

    assert isinstance(args, EditorArgs)
    assert args.files == [Path("a.mp3"), Path("b.mp3")]


def test_process_quickedit_args() -> None:
    """Every tag flag lands in the desired snapshot."""

    args = ArgumentParser.process_args(
        [
            "quickedit",
            "a.mp3",
            "-t",
            "Title",
            "-r",
            "Artist",
            "-l",
            "Album",
            "-c",
            "",
            "-g",
            "Jazz",
            "-n",
            "7",
            "-y",
            "2001",
        ]
    )

    assert isinstance(args, QuickEditArgs)
    assert args.tags == AudioTags(
        title="Title",
        artist="Artist",
        album="Album",
        comment="",
        genre="Jazz",
        year=2001,
        track=7,
    )


def test_process_quickedit_without_flags() -> None:
    args = ArgumentParser.process_args(["quickedit", "a.mp3"])

    assert isinstance(args, QuickEditArgs)
    assert args.tags.is_empty()


@pytest.mark.parametrize(
    ("flags", "expected_level"),
    [
        ([], logging.INFO),
        (["--verbose"], logging.DEBUG),
        (["--quiet"], logging.ERROR),
    ],
)
def test_process_args_sets_log_level(
    mocker: MockerFixture, flags: list[str], expected_level: int
) -> None:
    mock_setup = mocker.patch("tagedit.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["view", "a.mp3", *flags])

    mock_setup.assert_called_once_with(log_file=None, console_level=expected_level)


def test_process_args_uses_configured_log_file(
    mocker: MockerFixture, isolated_config: Path, tmp_path: Path
) -> None:
    isolated_config.parent.mkdir(parents=True)
    log_file = tmp_path / "run.log"
    _ = isolated_config.write_text(f'log_file = "{log_file}"\n', encoding="utf-8")
    mock_setup = mocker.patch("tagedit.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args(["edit"])

    mock_setup.assert_called_once_with(log_file=log_file, console_level=logging.INFO)
