"""Settings loaded from a YAML or JSON configuration file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import-untyped]
from attrs import define, field

from docperiod.engine import DEFAULT_TAGS, TagTable
from docperiod.errors import ConfigError
from docperiod.json_utils import json_loads

logger = logging.getLogger(__name__)

# Types for configuration mappings.
JSONDict = Dict[str, Any]

# File looked up in the working directory when no path is given.
CONFIG_FILE_NAME = ".docperiod.yaml"


def _to_tuple(value: Any) -> tuple[str, ...]:  # noqa: ANN401
    """Accept a single string or a list of strings."""

    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


@define(slots=True, frozen=True)
class Settings:
    """User settings for a check run.

    Attributes:
        extensions: File suffixes scanned when a directory is checked.
        inline_tags: Extra tags treated as inline elements.
        exempt_tags: Extra tags never checked.
        opaque_tags: Extra tags holding non-prose content.
    """

    extensions: tuple[str, ...] = field(default=(".cs",), converter=_to_tuple)
    inline_tags: tuple[str, ...] = field(default=(), converter=_to_tuple)
    exempt_tags: tuple[str, ...] = field(default=(), converter=_to_tuple)
    opaque_tags: tuple[str, ...] = field(default=(), converter=_to_tuple)

    def tag_table(self) -> TagTable:
        """Return the default tag tables extended by these settings."""

        return DEFAULT_TAGS.extend(
            inline=self.inline_tags,
            exempt=self.exempt_tags,
            opaque=self.opaque_tags,
        )


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path`` or from the working directory.

    Args:
        path: Explicit configuration file. When omitted,
            ``.docperiod.yaml`` in the working directory is used if present.

    Returns:
        Loaded settings, or the defaults when no file is found.

    Throws:
        ConfigError: If the file cannot be read or has unknown keys.
    """

    if path is None:
        candidate = Path.cwd() / CONFIG_FILE_NAME
        if not candidate.is_file():
            return Settings()
        path = candidate

    data = _load_config_file(path)
    logger.debug(f"Loaded settings from {path}")

    # Reject keys that do not correspond to a setting.
    known = {"extensions", "inline_tags", "exempt_tags", "opaque_tags"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown settings {', '.join(unknown)}")

    try:
        return Settings(**data)
    except TypeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _load_config_file(path: Path) -> JSONDict:
    """Read a configuration mapping from ``path``.

    Args:
        path: Location of the JSON or YAML configuration file.

    Returns:
        Parsed configuration dictionary; empty for an empty file.
    """

    try:
        text = path.read_text(encoding="utf-8")

        # Decode JSON or YAML depending on file extension.
        if path.suffix == ".json":
            data = json_loads(text)
        else:
            data = yaml.safe_load(text)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping of settings")
    return data
