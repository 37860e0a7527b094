"""Configuration management for tagedit."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tagedit.config.paths import default_config_path
from tagedit.platform.logging import logger

EDITOR_FALLBACK_DEFAULT = "vi"
JSON_INDENT_DEFAULT = 2


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Editor command used when neither $VISUAL nor $EDITOR is set
    editor: str = EDITOR_FALLBACK_DEFAULT

    # Indentation of JSON documents printed by `view` and opened by `editor`
    json_indent: int = JSON_INDENT_DEFAULT

    # Cached instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(config_dict) - known):
                logger.warning("Ignoring unknown configuration key %r in %s", key, config_file)
                del config_dict[key]

            logger.debug("Configuration loaded from %s", config_file)
            instance = cls(**config_dict)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "EDITOR_FALLBACK_DEFAULT", "JSON_INDENT_DEFAULT"]
