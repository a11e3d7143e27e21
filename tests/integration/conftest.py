"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API against a
settings service built from a temporary catalog file.
"""

import json
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import patch

import pytest

from application.services import SettingsApplicationService
from infrastructure.adapters import JsonSettingCatalogReader


@pytest.fixture
def temp_catalog_path(catalog_document: dict) -> Generator[Path, None, None]:
    """Write the bundled catalog to a temporary file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "altherma_settings.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(catalog_document, f)
        yield path


@pytest.fixture
def settings_service(temp_catalog_path: Path) -> SettingsApplicationService:
    """Create a settings service reading the temporary catalog."""
    return SettingsApplicationService(JsonSettingCatalogReader(temp_catalog_path))


@pytest.fixture
def flask_app(settings_service: SettingsApplicationService) -> Any:
    """Create a Flask app for testing.

    This fixture patches the global settings_service in the server module.
    """
    import infrastructure.api.server as server_module

    with patch.object(server_module, "settings_service", settings_service):
        app = server_module.app
        app.config["TESTING"] = True
        yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def steep_curve_request() -> Dict[str, Any]:
    """Analysis request for a configuration with a too steep heating curve."""
    return {
        "current_values": {
            "1-00": "5",
            "1-01": "15",
            "1-02": "60",
            "1-03": "40",
            "F-0D": "0",
            "4-08": "0",
        },
        "preferences": {"prioritizeComfort": False},
        "metrics": {
            "temperatures": {"outdoor": 3.5, "indoor": 20.5, "water": 42.0},
            "power": {"consumption": 1.4, "cop": 3.6},
        },
    }
