"""Pytest configuration for Altherma settings engine tests.

This module configures the Python path for tests to find the application modules
and provides the settings catalog shared by the test suites.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the application directory to the Python path for test imports
APP_DIR = Path(__file__).parent.parent / "altherma_settings_addon" / "rootfs" / "app"
sys.path.insert(0, str(APP_DIR))

CATALOG_PATH = Path(__file__).parent.parent / "config" / "altherma_settings.json"


@pytest.fixture
def catalog_document() -> dict:
    """Raw content of the bundled settings catalog."""
    with open(CATALOG_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def catalog(catalog_document: dict):
    """Settings catalog built from the bundled catalog document."""
    from domain.entities import SettingCatalog
    from domain.value_objects import Setting

    return SettingCatalog(Setting.from_dict(entry) for entry in catalog_document["settings"])


@pytest.fixture
def valid_configuration() -> dict[str, str]:
    """A complete configuration that passes batch validation and needs no optimization."""
    return {
        "1-00": "5",
        "1-01": "15",
        "1-02": "50",
        "1-03": "40",
        "2-02": "02:30",
        "2-0C": "0",
        "3-06": "24",
        "3-07": "18",
        "4-00": "1",
        "4-01": "0",
        "4-05": "60",
        "4-06": "30",
        "4-07": "10",
        "4-08": "1",
        "6-0A": "55",
        "6-0B": "48",
        "6-0D": "1",
        "8-02": "02",
        "8-0B": "1",
        "8-0C": "1",
        "9-00": "55",
        "9-01": "25",
        "9-02": "22",
        "9-03": "18",
        "F-0D": "2",
    }
