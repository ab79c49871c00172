"""Settings management for symbol-autoloader.

Scope-aware YAML settings. Scope priority (most specific wins):
1. local (.symbol-autoloader/autoload.local.yaml) - gitignored, machine-specific
2. project (.symbol-autoloader/autoload.yaml) - committed, team-shared
3. global (~/.symbol-autoloader/autoload.yaml) - user defaults
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import ValidationError

from .errors import ConfigurationError
from .schema import AutoloadConfig

Scope = Literal["local", "project", "global"]

SETTINGS_DIR = ".symbol-autoloader"


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard layout."""
        return cls(
            global_settings=Path.home() / SETTINGS_DIR / "autoload.yaml",
            project_settings=Path.cwd() / SETTINGS_DIR / "autoload.yaml",
            local_settings=Path.cwd() / SETTINGS_DIR / "autoload.local.yaml",
        )


class AutoloadSettings:
    """Loads and merges autoload settings from all scopes.

    Usage:
        settings = AutoloadSettings()
        config = settings.load()  # AutoloadConfig

        # Single explicit file, no scope search
        config = AutoloadSettings.from_file(Path("autoload.yaml")).load()
    """

    def __init__(self, paths: SettingsPaths | None = None, files: list[Path] | None = None) -> None:
        self.paths = paths or SettingsPaths.default()
        self._files = files

    @classmethod
    def from_file(cls, path: Path) -> AutoloadSettings:
        return cls(files=[path])

    def files(self) -> list[Path]:
        """Settings files in merge order (least specific first)."""
        if self._files is not None:
            return list(self._files)
        return [self.paths.global_settings, self.paths.project_settings, self.paths.local_settings]

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and deep merge settings from every existing file."""
        result: dict[str, Any] = {}
        for path in self.files():
            if path.exists():
                result = deep_merge(result, self._read(path))
        return result

    def load(self) -> AutoloadConfig:
        """Merged settings validated against the schema.

        Raises:
            ConfigurationError: A file is malformed or the result is invalid
        """
        merged = self.get_merged_settings()
        try:
            return AutoloadConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid autoload settings: {e}") from e

    def _read(self, path: Path) -> dict[str, Any]:
        try:
            with open(path) as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}") from e

        if not isinstance(content, dict):
            raise ConfigurationError(f"{path} must contain a mapping, got {type(content).__name__}")
        return content


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, overlay wins."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
