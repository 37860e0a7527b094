"""Configuration loading and derived runtime settings."""

from tagedit.config.config import Config
from tagedit.config.settings import RuntimeSettings

__all__ = ["Config", "RuntimeSettings"]
