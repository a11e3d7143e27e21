"""Optimal configuration synthesizer.

Domain service merging ranked optimization suggestions into one complete
alternative configuration.
"""

import logging
from typing import Iterable, Mapping

from domain.entities import SettingCatalog
from domain.exceptions import SynthesisError
from domain.interfaces import ISettingsValidator
from domain.value_objects import (
    OptimizationSuggestion,
    SynthesisResult,
    SystemMetrics,
    UserPreferences,
)

from .optimization_engine import OptimizationEngine

_LOGGER = logging.getLogger(__name__)


def rank_suggestions(
    suggestions: Iterable[OptimizationSuggestion],
) -> list[OptimizationSuggestion]:
    """Order suggestions by priority, then by combined energy and cost impact.

    The sort is stable: ties keep rule registration order.
    """
    return sorted(
        suggestions,
        key=lambda suggestion: (-suggestion.priority.rank, -suggestion.impact.magnitude),
    )


class ConfigurationSynthesizer:
    """Build an optimized configuration honoring user preferences.

    Suggestions are merged in rank order into a copy of the current
    configuration. When comfort is prioritized, suggestions whose comfort
    impact is below the exclusion threshold are skipped outright. The
    merged configuration is batch-validated and rejected as a whole if
    any entry fails.
    """

    def __init__(self, engine: OptimizationEngine, validator: ISettingsValidator) -> None:
        """Initialize the synthesizer.

        Args:
            engine: Engine producing the suggestions
            validator: Validator used for the final batch check
        """
        self._engine = engine
        self._validator = validator

    def synthesize(
        self,
        current_values: Mapping[str, str],
        catalog: SettingCatalog,
        preferences: UserPreferences | None = None,
        metrics: SystemMetrics | None = None,
    ) -> SynthesisResult:
        """Synthesize an optimized configuration.

        Args:
            current_values: Current wire values keyed by setting code
            catalog: Settings catalog
            preferences: User preferences for this request
            metrics: Optional live appliance readings

        Returns:
            Result with the complete configuration and the applied and
            skipped suggestions. When nothing applies, the configuration
            equals the input and applied is empty.

        Raises:
            SynthesisError: If the merged configuration fails validation
        """
        preferences = preferences or UserPreferences()
        context = self._engine.build_context(current_values, catalog, preferences, metrics)
        threshold = context.thresholds.comfort_exclusion_threshold

        working = dict(current_values)
        applied = []
        skipped = []
        for suggestion in rank_suggestions(self._engine.analyze(context)):
            if preferences.prioritize_comfort and suggestion.impact.comfort < threshold:
                _LOGGER.debug(
                    "Skipping suggestion %s: comfort impact %s below %s",
                    suggestion.id, suggestion.impact.comfort, threshold,
                )
                skipped.append(suggestion)
                continue
            working.update(suggestion.suggested_values)
            applied.append(suggestion)

        validation = self._validator.validate_batch(working, catalog)
        if not validation.is_valid:
            _LOGGER.error(
                "Synthesized configuration is invalid for setting(s) %s",
                sorted(validation.errors),
            )
            raise SynthesisError("Generated settings are invalid", validation=validation)

        _LOGGER.info(
            "Synthesized configuration: %d suggestion(s) applied, %d skipped",
            len(applied), len(skipped),
        )
        return SynthesisResult(configuration=working, applied=tuple(applied), skipped=tuple(skipped))
