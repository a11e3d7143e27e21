"""Tests for the JSON settings catalog reader."""

import json
import tempfile
from pathlib import Path

import pytest


def _write_catalog(document) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(document, f)
        return f.name


PUMP_MODE = {
    "code": "F-0D",
    "name": "Pump operation mode",
    "category": "Space Heating/Cooling",
    "type": "mode",
    "access": "R/W",
    "range": {"type": "enum", "options": {"0": "Continuous", "2": "Request"}, "default": "0"},
}


def test_catalog_reader_load_from_file():
    """Test loading the catalog and thresholds from a JSON file."""
    from infrastructure.adapters import JsonSettingCatalogReader

    config_path = _write_catalog({"settings": [PUMP_MODE], "optimization": {"dhw_max_gap": 8}})

    try:
        reader = JsonSettingCatalogReader(config_path)

        catalog = reader.load_catalog()
        assert list(catalog) == ["F-0D"]
        assert catalog["F-0D"].range.options["2"] == "Request"

        thresholds = reader.load_thresholds()
        assert thresholds.dhw_max_gap == 8.0
        assert thresholds.curve_max_slope == 1.5

    finally:
        Path(config_path).unlink()


def test_catalog_reader_skips_invalid_entries():
    """Test that malformed entries are skipped instead of failing the load."""
    from infrastructure.adapters import JsonSettingCatalogReader

    broken = {**PUMP_MODE, "code": "F-0E", "category": "Garage"}
    missing_name = {"code": "F-0F", "category": "Room"}
    config_path = _write_catalog({"settings": [PUMP_MODE, broken, missing_name]})

    try:
        catalog = JsonSettingCatalogReader(config_path).load_catalog()
        assert list(catalog) == ["F-0D"]
    finally:
        Path(config_path).unlink()


def test_catalog_reader_missing_file():
    """Test handling of a missing catalog file."""
    from domain.exceptions import CatalogError
    from infrastructure.adapters import JsonSettingCatalogReader

    reader = JsonSettingCatalogReader("/nonexistent/path/catalog.json")
    with pytest.raises(CatalogError, match="not found"):
        reader.load_catalog()


def test_catalog_reader_invalid_json():
    """Test handling of a file that is not valid JSON."""
    from domain.exceptions import CatalogError
    from infrastructure.adapters import JsonSettingCatalogReader

    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        f.write("{ invalid json }")
        config_path = f.name

    try:
        with pytest.raises(CatalogError, match="Cannot read settings catalog"):
            JsonSettingCatalogReader(config_path).load_catalog()
    finally:
        Path(config_path).unlink()


def test_catalog_reader_duplicate_codes():
    """Test that duplicate codes fail the load."""
    from domain.exceptions import CatalogError
    from infrastructure.adapters import JsonSettingCatalogReader

    config_path = _write_catalog({"settings": [PUMP_MODE, PUMP_MODE]})

    try:
        with pytest.raises(CatalogError, match="Duplicate setting code"):
            JsonSettingCatalogReader(config_path).load_catalog()
    finally:
        Path(config_path).unlink()


def test_catalog_reader_invalid_thresholds():
    """Test that unknown threshold names are reported as catalog errors."""
    from domain.exceptions import CatalogError
    from infrastructure.adapters import JsonSettingCatalogReader

    config_path = _write_catalog({"settings": [], "optimization": {"max_slope": 2}})

    try:
        with pytest.raises(CatalogError, match="Invalid optimization thresholds"):
            JsonSettingCatalogReader(config_path).load_thresholds()
    finally:
        Path(config_path).unlink()


def test_catalog_reader_default_path():
    """Test that the bundled catalog is used by default."""
    from infrastructure.adapters import JsonSettingCatalogReader

    reader = JsonSettingCatalogReader()
    assert reader.catalog_path.name == "altherma_settings.json"
    assert reader.catalog_path.parent.name == "config"

    catalog = reader.load_catalog()
    assert "1-02" in catalog
    assert reader.load_thresholds().dhw_comfort_ceiling == 55.0
