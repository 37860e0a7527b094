"""src/tagedit/ui/cli/display/result.py
What: Render the summary of an edit run on standard error.
Why: Tell users how many files changed without polluting standard output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape

from tagedit.application.services import ApplyResult


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console(stderr=True)

    def show_results(self, results: Sequence[ApplyResult], quiet: bool = False) -> None:
        """Display a summary of apply results.

        Args:
            results: Results of the edit run.
            quiet: Whether to suppress non-error output.
        """
        if quiet or not results:
            return

        updated = sum(1 for result in results if result.success and result.changed)
        unchanged = sum(1 for result in results if result.success and not result.changed)
        failures = [result for result in results if not result.success]

        self.console.print("\n[bold]Tag Summary:[/bold]")
        self.console.print(f"Total files: {len(results)}")
        self.console.print(f"[green]Updated: {updated}[/green]")
        self.console.print(f"Unchanged: {unchanged}")

        if not failures:
            return

        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for failed in failures:
            self.console.print(f"[red]  • {escape(str(failed.path))}: {escape(str(failed.error))}[/red]")
