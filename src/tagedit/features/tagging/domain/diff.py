"""
Summary: Compute which tag fields must be written to reach a desired state.
Why: Writes and saves happen only for fields that actually change.
"""

from __future__ import annotations

from tagedit.shared.audio_tags import TAG_FIELDS, AudioTags, TagValue


def compute_tag_changes(
    current: AudioTags,
    desired: AudioTags,
    *,
    empty_is_absent: bool = False,
) -> dict[str, TagValue]:
    """Return the ``field -> new value`` pairs to write.

    A field is included iff it is present in ``desired`` and differs from
    ``current``. Absent desired fields never produce a write.

    Args:
        current: Tags currently stored in the file.
        desired: Partial update requested by the user.
        empty_is_absent: Treat a desired ``""`` as equal to a missing field,
            for containers that cannot store empty text.

    Returns:
        dict[str, TagValue]: Changes in display order; empty when nothing differs.
    """
    changes: dict[str, TagValue] = {}
    for name in TAG_FIELDS:
        wanted = desired.get(name)
        if wanted is None:
            continue
        stored = current.get(name)
        if empty_is_absent and wanted == "" and stored is None:
            continue
        if wanted != stored:
            changes[name] = wanted
    return changes


__all__ = ["compute_tag_changes"]
