"""src/tagedit/ui/cli/display/tags.py
What: Write tag data produced by ``view`` to standard output.
Why: Keep machine-readable output plain, free of console styling.
"""

from __future__ import annotations

import sys
from typing import TextIO, final

from tagedit.application.services import ReadResult, TagService


@final
class TagDisplay:
    """Prints tags as text lines or as a JSON document."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the display.

        Args:
            stream: Output stream; defaults to the current ``sys.stdout``.
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def show_lines(self, result: ReadResult) -> None:
        """Print ``field:<TAB>value`` lines for one successfully read file."""
        if result.tags is None:
            return
        _ = self.stream.write(result.tags.format_lines())

    def show_json(self, results: list[ReadResult], service: TagService) -> None:
        """Print successful reads as one JSON object keyed by filename."""
        _ = self.stream.write(service.render_document(results, single=False) + "\n")
