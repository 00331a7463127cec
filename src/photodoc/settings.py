"""
Settings persistence for photodoc.

JSON-backed store for export preferences. Any malformed data falls back
to defaults and is reported through ``load_error``; loading never raises.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from photodoc.config import ExportConfig
from photodoc.errors import SettingsError
from photodoc.layout.config import PageSize

logger = logging.getLogger(__name__)


class SettingsStore:
    """Lightweight JSON-backed store for persisting export preferences."""

    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.data: Dict[str, Any] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
                if not isinstance(loaded, dict):
                    raise ValueError("top level must be a JSON object")
                self.data = loaded
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted: {e}"
                self.data = {}
            except (OSError, ValueError) as e:
                self._load_error = f"Failed to read settings: {e}"
                self.data = {}

        if self._load_error:
            logger.warning(f"{self._load_error} ({self.path}); using defaults")

        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        """Why the settings file was ignored, if it was."""
        return self._load_error

    def get_page_size(self) -> PageSize:
        raw = self.data.get("page_size")
        if isinstance(raw, str):
            try:
                return PageSize.parse(raw)
            except ValueError:
                logger.warning(f"Ignoring unknown page size in settings: {raw!r}")
        return ExportConfig.page_size

    def set_page_size(self, value: PageSize) -> None:
        self.data["page_size"] = value.name
        self._save()

    def get_default_filename(self) -> str:
        raw = self.data.get("default_filename")
        if isinstance(raw, str) and raw.lower().endswith(".pdf"):
            return raw
        return ExportConfig.default_filename

    def set_default_filename(self, value: str) -> None:
        if not value.lower().endswith(".pdf"):
            value = f"{value}.pdf"
        self.data["default_filename"] = value
        self._save()

    def get_selection_limit(self) -> Optional[int]:
        raw = self.data.get("selection_limit", ExportConfig.selection_limit)
        if raw is None:
            return None
        value = self._safe_int(raw, ExportConfig.selection_limit)
        return value if value is None or value > 0 else ExportConfig.selection_limit

    def set_selection_limit(self, value: Optional[int]) -> None:
        self.data["selection_limit"] = value
        self._save()

    def to_config(self) -> ExportConfig:
        """Build an ExportConfig from the stored values."""
        return ExportConfig(
            page_size=self.get_page_size(),
            default_filename=self.get_default_filename(),
            selection_limit=self.get_selection_limit(),
        )

    def _safe_int(self, value: Any, default: Optional[int]) -> Optional[int]:
        """Safely convert a value to int, returning default on failure."""
        if isinstance(value, bool):
            return default
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def _save(self) -> None:
        """
        Write settings to disk.

        Raises:
            SettingsError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Failed to save settings to {self.path}: {e}") from e
