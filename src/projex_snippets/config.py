"""Load and save user settings.

Settings live in a small YAML file. The only key today is
``autoSyncInstructions``, which controls whether hosts run a silent sync
on startup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from projex_snippets.paths import settings_path

logger = logging.getLogger(__name__)

AUTO_SYNC_KEY = "autoSyncInstructions"


class SettingsError(ValueError):
    """Raised when the settings file exists but cannot be used."""


@dataclass
class Settings:
    auto_sync: bool = True

    def to_dict(self) -> dict:
        return {AUTO_SYNC_KEY: self.auto_sync}


def load_settings(path: Path | str | None = None) -> Settings:
    """Read settings from disk.

    A missing file yields the defaults.

    Raises:
        SettingsError: If the YAML is malformed or not a mapping, or the
            toggle is not a boolean.
    """
    settings_file = Path(path) if path else settings_path()
    if not settings_file.is_file():
        logger.debug("No settings file at %s, using defaults", settings_file)
        return Settings()

    try:
        with open(settings_file) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"settings at {settings_file} are not valid YAML: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise SettingsError(f"settings at {settings_file} are not a YAML mapping")

    auto_sync = data.get(AUTO_SYNC_KEY, True)
    if not isinstance(auto_sync, bool):
        raise SettingsError(f"{AUTO_SYNC_KEY} must be true or false, got {auto_sync!r}")

    return Settings(auto_sync=auto_sync)


def save_settings(settings: Settings, path: Path | str | None = None) -> Path:
    """Write settings back to disk, preserving unrelated keys."""
    settings_file = Path(path) if path else settings_path()
    existing: dict = {}
    if settings_file.is_file():
        try:
            with open(settings_file) as f:
                loaded = yaml.safe_load(f)
            if isinstance(loaded, dict):
                existing = loaded
        except yaml.YAMLError:
            logger.warning("Overwriting unreadable settings file %s", settings_file)

    existing.update(settings.to_dict())
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_file, "w") as f:
        yaml.safe_dump(existing, f, default_flow_style=False, sort_keys=True)
    return settings_file


def toggle_auto_sync(path: Path | str | None = None) -> Settings:
    """Flip the auto-sync toggle and persist it. Returns the new settings."""
    settings = load_settings(path)
    settings.auto_sync = not settings.auto_sync
    save_settings(settings, path)
    logger.info("Auto-sync %s", "enabled" if settings.auto_sync else "disabled")
    return settings
