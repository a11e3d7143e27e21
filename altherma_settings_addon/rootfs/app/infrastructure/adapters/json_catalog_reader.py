"""JSON settings catalog reader.

Loads the pre-built settings catalog (produced by the settings database
parser) and the optional optimization thresholds from a JSON document.
"""

import json
import logging
from pathlib import Path
from typing import Any

from domain.entities import SettingCatalog
from domain.exceptions import CatalogError
from domain.interfaces import ISettingCatalogReader
from domain.value_objects import OptimizationThresholds, Setting

_LOGGER = logging.getLogger(__name__)


class JsonSettingCatalogReader(ISettingCatalogReader):
    """Reads the settings catalog from a JSON file.

    Expected document layout:
    {
        "settings": [
            {"code": "1-00", "name": ..., "category": ..., "type": ...,
             "access": ..., "range": {"type": "numeric", ...},
             "dependencies": [...], "conflicts": [...]},
            ...
        ],
        "optimization": {"dhw_comfort_ceiling": 55, ...}
    }
    """

    def __init__(self, catalog_path: str | Path | None = None) -> None:
        """Initialize the catalog reader.

        Args:
            catalog_path: Path to the catalog JSON file. If None, uses the
                bundled config/altherma_settings.json.
        """
        if catalog_path is None:
            app_dir = Path(__file__).parent.parent.parent
            catalog_path = app_dir.parent.parent.parent / "config" / "altherma_settings.json"

        self._catalog_path = Path(catalog_path)
        self._document: dict[str, Any] | None = None

    @property
    def catalog_path(self) -> Path:
        return self._catalog_path

    def load_catalog(self) -> SettingCatalog:
        """Load the settings catalog.

        Entries that cannot be parsed are skipped with a warning.

        Returns:
            The catalog of setting definitions

        Raises:
            CatalogError: If the file is missing, is not valid JSON, or holds
                duplicate setting codes
        """
        document = self._read_document()
        entries = document.get("settings", [])
        if not isinstance(entries, list):
            raise CatalogError(
                f"Invalid settings section in {self._catalog_path}, expected list, "
                f"got {type(entries).__name__}"
            )

        settings = []
        for entry in entries:
            try:
                settings.append(Setting.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                _LOGGER.warning(
                    "Skipping invalid catalog entry %s: %s",
                    entry.get("code", "?") if isinstance(entry, dict) else entry,
                    e,
                )

        catalog = SettingCatalog(settings)
        _LOGGER.info("Loaded %d settings from %s", len(catalog), self._catalog_path)
        return catalog

    def load_thresholds(self) -> OptimizationThresholds:
        """Load the optimization thresholds.

        Returns:
            Thresholds with the document's overrides applied

        Raises:
            CatalogError: If the overrides are malformed
        """
        overrides = self._read_document().get("optimization") or {}
        try:
            thresholds = OptimizationThresholds.from_dict(overrides)
        except (TypeError, ValueError) as e:
            raise CatalogError(f"Invalid optimization thresholds in {self._catalog_path}: {e}") from e
        if overrides:
            _LOGGER.info("Applied optimization threshold overrides: %s", sorted(overrides))
        return thresholds

    def _read_document(self) -> dict[str, Any]:
        if self._document is not None:
            return self._document

        if not self._catalog_path.exists():
            raise CatalogError(f"Settings catalog not found at {self._catalog_path}")

        try:
            with open(self._catalog_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            _LOGGER.error("Failed to load settings catalog from %s: %s", self._catalog_path, e)
            raise CatalogError(f"Cannot read settings catalog {self._catalog_path}: {e}") from e

        if not isinstance(document, dict):
            raise CatalogError(f"Settings catalog {self._catalog_path} must be a JSON object")

        self._document = document
        return document
