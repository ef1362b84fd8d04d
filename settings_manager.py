"""Read-only loading of Pointer Clicker preferences."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from logger import StatusLogger
from models import ApplicationSettings


def get_settings_path() -> Path:
    """Per-user location of the optional settings file."""
    return Path.home() / ".config" / "pointer-clicker" / "settings.json"


class SettingsManager:
    """
    Loads the optional settings file.

    The file is never written: a missing or unreadable file only means the
    defaults apply, and the reason is logged as a warning.
    """

    def __init__(self, storage_path: Optional[Path] = None, logger: Optional[StatusLogger] = None) -> None:
        self._storage_path = storage_path or get_settings_path()
        self._logger = logger or StatusLogger()

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def load(self) -> ApplicationSettings:
        """Load settings, returning defaults if the file is missing or invalid."""
        path = self.storage_path
        if not path.exists():
            return ApplicationSettings()

        try:
            raw_data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw_data, dict):
                raise ValueError("top level must be an object")
            return ApplicationSettings.from_dict(raw_data)
        except (OSError, ValueError) as e:
            self._logger.log_warning(f"Ignoring settings file {path}: {e}")
            return ApplicationSettings()
