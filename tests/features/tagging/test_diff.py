"""
Summary: Tests for the tag diff policy.
Why: Guard the rule that only present, differing fields are written.
"""

import pytest

from tagedit.features.tagging import compute_tag_changes
from tagedit.shared.audio_tags import TAG_FIELDS, AudioTags

CURRENT = AudioTags(
    title="Title",
    artist="Artist",
    album="Album",
    comment="Comment",
    genre="Genre",
    year=1999,
    track=3,
)
OTHER_VALUES: dict[str, str | int] = {
    "title": "New Title",
    "artist": "New Artist",
    "album": "New Album",
    "comment": "New Comment",
    "genre": "New Genre",
    "year": 2000,
    "track": 4,
}


def test_empty_desired_is_a_no_op() -> None:
    """No desired field means no change."""

    assert compute_tag_changes(CURRENT, AudioTags()) == {}
    assert compute_tag_changes(AudioTags(), AudioTags()) == {}


@pytest.mark.parametrize("field_name", TAG_FIELDS)
def test_differing_field_is_written_alone(field_name: str) -> None:
    """Each field is handled the same way, independent of the others."""

    desired = AudioTags(**{field_name: OTHER_VALUES[field_name]})

    assert compute_tag_changes(CURRENT, desired) == {field_name: OTHER_VALUES[field_name]}


@pytest.mark.parametrize("field_name", TAG_FIELDS)
def test_equal_field_is_not_written(field_name: str) -> None:
    """A present field equal to the current value produces no write."""

    desired = AudioTags(**{field_name: CURRENT.get(field_name)})

    assert compute_tag_changes(CURRENT, desired) == {}


@pytest.mark.parametrize("field_name", TAG_FIELDS)
def test_field_missing_from_file_is_written(field_name: str) -> None:
    """A present desired field is written when the file has no value."""

    desired = AudioTags(**{field_name: OTHER_VALUES[field_name]})

    assert compute_tag_changes(AudioTags(), desired) == {field_name: OTHER_VALUES[field_name]}


def test_text_comparison_is_exact() -> None:
    """Whitespace and case differences count as changes."""

    changes = compute_tag_changes(
        AudioTags(title="Foo", artist="bar"),
        AudioTags(title="Foo ", artist="Bar"),
    )

    assert changes == {"title": "Foo ", "artist": "Bar"}


def test_empty_string_differs_from_absent() -> None:
    """Clearing a field to the empty string is a change."""

    assert compute_tag_changes(AudioTags(), AudioTags(comment="")) == {"comment": ""}


def test_changes_follow_field_order() -> None:
    """Changes are reported in display order."""

    desired = AudioTags(track=9, title="T", year=2020)

    assert list(compute_tag_changes(AudioTags(), desired)) == ["title", "year", "track"]


def test_empty_string_matches_absent_when_requested() -> None:
    """Containers that drop empty text treat "" and a missing field alike."""

    changes = compute_tag_changes(
        AudioTags(title="Foo"),
        AudioTags(title="", comment="", genre="Rock"),
        empty_is_absent=True,
    )

    assert changes == {"title": "", "genre": "Rock"}


def test_empty_is_absent_keeps_numeric_zero() -> None:
    """Zero is a real number, never confused with a missing field."""

    changes = compute_tag_changes(AudioTags(), AudioTags(track=0, year=0), empty_is_absent=True)

    assert changes == {"year": 0, "track": 0}
