"""Display helpers for CLI output."""

from .result import ResultDisplay
from .tags import TagDisplay

__all__ = ["ResultDisplay", "TagDisplay"]
