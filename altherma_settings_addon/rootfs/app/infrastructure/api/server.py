"""Flask HTTP API Server.

HTTP API for the settings UI and sync manager.
Provides endpoints for catalog lookup, validation and optimization.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import SettingsApplicationService
from domain.exceptions import SynthesisError
from domain.value_objects import SystemMetrics, UserPreferences, ValidationOptions
from infrastructure.adapters import JsonSettingCatalogReader

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)

# Initialize services
catalog_path = os.getenv("SETTINGS_CATALOG_PATH") or None
catalog_reader = JsonSettingCatalogReader(catalog_path)
settings_service = SettingsApplicationService(catalog_reader)


def _wire_values(raw: Any, field: str) -> dict[str, str]:
    """Convert a JSON object of setting values to wire strings.

    Raises:
        ValueError: If the field is not a JSON object
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"{field} must be an object mapping setting codes to values")
    return {str(code): str(value) for code, value in raw.items()}


def _current_values(data: dict[str, Any]) -> dict[str, str]:
    raw = data.get("current_values", data.get("currentSettings"))
    return _wire_values(raw, "current_values")


def _validation_options(data: dict[str, Any]) -> ValidationOptions:
    options = data.get("options") or {}
    return ValidationOptions(
        allow_override=bool(options.get("allow_override", options.get("allowOverride", False))),
        validate_dependencies=bool(
            options.get("validate_dependencies", options.get("validateDependencies", True))
        ),
    )


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
def get_status() -> Response:
    """Get settings service status."""
    try:
        return jsonify(settings_service.get_status())
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/settings", methods=["GET"])
def list_settings() -> Response:
    """List the settings catalog, optionally filtered by category."""
    try:
        category = request.args.get("category")
        settings = [
            setting.to_dict()
            for setting in settings_service.catalog.values()
            if category is None or setting.category.value == category
        ]
        return jsonify({"count": len(settings), "settings": settings})
    except Exception as e:
        _LOGGER.exception("Error listing settings")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/settings/<code>", methods=["GET"])
def get_setting(code: str) -> Response:
    """Get the definition of a single setting."""
    try:
        description = settings_service.describe_setting(code)
        if description is None:
            return jsonify({"error": f"Unknown setting code: {code}"}), 404
        return jsonify(description)
    except Exception as e:
        _LOGGER.exception("Error getting setting %s", code)
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/validate", methods=["POST"])
def validate_setting() -> Response:
    """Validate a proposed value for one setting.

    Request body:
    {
        "code": str,
        "value": str,
        "current_values": {code: value, ...} (optional),
        "options": {
            "allow_override": bool (optional, default: false),
            "validate_dependencies": bool (optional, default: true)
        }
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        code = data["code"]
        value = data["value"]
        result = settings_service.validate_setting(
            str(code),
            str(value),
            _current_values(data),
            _validation_options(data),
        )
        return jsonify({"code": code, **result.to_dict()})

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except ValueError as e:
        _LOGGER.warning("Invalid validation request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error validating setting")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/validate/batch", methods=["POST"])
def validate_settings() -> Response:
    """Validate a whole configuration.

    Request body:
    {
        "settings": {code: value, ...},
        "options": {...} (optional)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if "settings" not in data:
            return jsonify({"error": "Missing required field: 'settings'"}), 400

        result = settings_service.validate_settings(
            _wire_values(data["settings"], "settings"),
            _validation_options(data),
        )
        return jsonify(result.to_dict())

    except ValueError as e:
        _LOGGER.warning("Invalid batch validation request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error validating settings")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/optimize/analyze", methods=["POST"])
def analyze_settings() -> Response:
    """Analyze a configuration and return optimization suggestions.

    Request body:
    {
        "current_values": {code: value, ...},
        "preferences": {"prioritizeComfort": bool, ...} (optional),
        "metrics": {"temperatures": {...}, "power": {...}, ...} (optional)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        report = settings_service.analyze(
            _current_values(data),
            UserPreferences.from_dict(data.get("preferences")),
            SystemMetrics.from_dict(data.get("metrics")),
        )
        return jsonify(report.to_dict())

    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid analysis request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error analyzing settings")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/optimize/synthesize", methods=["POST"])
def synthesize_settings() -> Response:
    """Generate an optimized configuration.

    Request body: same as /api/v1/optimize/analyze.
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400

        result = settings_service.generate_optimal_settings(
            _current_values(data),
            UserPreferences.from_dict(data.get("preferences")),
            SystemMetrics.from_dict(data.get("metrics")),
        )
        return jsonify({"success": True, **result.to_dict()})

    except SynthesisError as e:
        _LOGGER.error("Synthesis failed: %s", e)
        body: dict[str, Any] = {"success": False, "error": str(e)}
        if e.validation is not None:
            body["validation"] = e.validation.to_dict()
        return jsonify(body), 422
    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid synthesis request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error synthesizing settings")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting Altherma settings API server on %s:%d", host, port)
    _LOGGER.info("Settings catalog: %s", catalog_reader.catalog_path)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
