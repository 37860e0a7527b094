"""External editor bridge."""

from .bridge import EDITOR_ENV_VARS, edit_content, resolve_editor

__all__ = ["EDITOR_ENV_VARS", "edit_content", "resolve_editor"]
