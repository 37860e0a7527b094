"""
Summary: Pure tagging rules with no file access.
Why: Keep the diff policy testable without any tag library.
"""

from .diff import compute_tag_changes

__all__ = ["compute_tag_changes"]
