"""Settings Application Service.

Main application service that coordinates domain services and the
catalog reader for validation and optimization use cases.
"""

import logging
from datetime import datetime
from typing import Mapping

from domain.entities import SettingCatalog
from domain.interfaces import ISettingCatalogReader
from domain.services import ConfigurationSynthesizer, OptimizationEngine, SettingsValidator
from domain.services.value_codec import encode_default, format_description
from domain.value_objects import (
    BatchValidationResult,
    OptimizationReport,
    Setting,
    SynthesisResult,
    SystemMetrics,
    UserPreferences,
    ValidationOptions,
    ValidationResult,
)

_LOGGER = logging.getLogger(__name__)


class SettingsApplicationService:
    """Application service for settings operations.

    This service is the main entry point for all settings use cases.
    It loads the catalog once and wires the validator, optimization
    engine and synthesizer around it.
    """

    def __init__(
        self,
        catalog_reader: ISettingCatalogReader,
        validator: SettingsValidator | None = None,
    ) -> None:
        """Initialize the settings application service.

        Args:
            catalog_reader: Source of the settings catalog and thresholds
            validator: Validator implementation. If None, uses SettingsValidator().

        Raises:
            CatalogError: If the catalog cannot be loaded
        """
        self._catalog = catalog_reader.load_catalog()
        self._validator = validator or SettingsValidator()
        self._engine = OptimizationEngine(
            validator=self._validator,
            thresholds=catalog_reader.load_thresholds(),
        )
        self._synthesizer = ConfigurationSynthesizer(self._engine, self._validator)
        self._loaded_at = datetime.now()
        _LOGGER.info(
            "Settings service ready: %d settings, %d optimization rules",
            len(self._catalog),
            len(self._engine.rules),
        )

    @property
    def catalog(self) -> SettingCatalog:
        return self._catalog

    def get_setting(self, code: str) -> Setting | None:
        """Look up a setting definition by code."""
        return self._catalog.get(code)

    def describe_setting(self, code: str) -> dict | None:
        """Describe a setting with its expected format and default value.

        Returns:
            JSON-compatible description, or None if the code is unknown
        """
        setting = self._catalog.get(code)
        if setting is None:
            return None
        description = setting.to_dict()
        description["format"] = format_description(setting)
        description["defaultValue"] = encode_default(setting)
        description["writable"] = setting.is_writable
        if setting.range is not None:
            description["rangeDescription"] = setting.range.describe()
        return description

    def validate_setting(
        self,
        code: str,
        value: str,
        current_values: Mapping[str, str],
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """Validate a proposed change of one setting.

        Args:
            code: Setting code
            value: Proposed wire value
            current_values: Current configuration
            options: Optional validation switches

        Returns:
            Validation result
        """
        result = self._validator.validate_one(code, value, self._catalog, current_values, options)
        if result.overridden:
            _LOGGER.warning(
                "Validation override for %s=%s: %s",
                code,
                value,
                "; ".join(issue.message for issue in result.errors),
            )
        return result

    def validate_settings(
        self,
        values: Mapping[str, str],
        options: ValidationOptions | None = None,
    ) -> BatchValidationResult:
        """Validate a whole candidate configuration."""
        return self._validator.validate_batch(values, self._catalog, options)

    def analyze(
        self,
        current_values: Mapping[str, str],
        preferences: UserPreferences | None = None,
        metrics: SystemMetrics | None = None,
    ) -> OptimizationReport:
        """Analyze a configuration and report the validated suggestions.

        Args:
            current_values: Current configuration
            preferences: User preferences for this request
            metrics: Optional live appliance readings

        Returns:
            Suggestions with their aggregated impact
        """
        context = self._engine.build_context(current_values, self._catalog, preferences, metrics)
        suggestions = self._engine.analyze(context)
        report = self._engine.summarize(suggestions)
        _LOGGER.info(
            "Analysis found %d suggestion(s), potential savings %s",
            len(report.suggestions),
            report.potential_savings,
        )
        return report

    def generate_optimal_settings(
        self,
        current_values: Mapping[str, str],
        preferences: UserPreferences | None = None,
        metrics: SystemMetrics | None = None,
    ) -> SynthesisResult:
        """Synthesize an optimized configuration.

        Raises:
            SynthesisError: If the merged configuration fails validation
        """
        return self._synthesizer.synthesize(current_values, self._catalog, preferences, metrics)

    def get_status(self) -> dict:
        """Get the current status of the settings service.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": True,
            "setting_count": len(self._catalog),
            "optimization_rules": [rule.rule_id for rule in self._engine.rules],
            "catalog_loaded_at": self._loaded_at.isoformat(),
            "timestamp": datetime.now().isoformat(),
        }
