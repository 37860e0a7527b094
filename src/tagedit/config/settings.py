"""Where: src/tagedit/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagedit.config.config import EDITOR_FALLBACK_DEFAULT, JSON_INDENT_DEFAULT, Config

# Largest indentation accepted from the config file.
MAX_JSON_INDENT: int = 8


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Validated settings consumed by the CLI and services."""

    editor_fallback: str = EDITOR_FALLBACK_DEFAULT
    json_indent: int = JSON_INDENT_DEFAULT

    @classmethod
    def from_config(cls, app_config: Config) -> RuntimeSettings:
        """Derive settings, replacing out-of-range values with defaults."""

        editor = app_config.editor.strip() if isinstance(app_config.editor, str) else ""

        indent = app_config.json_indent
        if isinstance(indent, bool) or not isinstance(indent, int):
            indent = JSON_INDENT_DEFAULT
        elif not 0 <= indent <= MAX_JSON_INDENT:
            indent = JSON_INDENT_DEFAULT

        return cls(
            editor_fallback=editor or EDITOR_FALLBACK_DEFAULT,
            json_indent=indent,
        )


__all__ = ["MAX_JSON_INDENT", "RuntimeSettings"]
