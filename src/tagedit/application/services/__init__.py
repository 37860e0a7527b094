"""Application services."""

from .tag_service import ApplyResult, ReadResult, TagService

__all__ = ["ApplyResult", "ReadResult", "TagService"]
