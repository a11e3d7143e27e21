"""Optimization rule engine.

Domain service running the registered optimization rules over a
configuration and keeping only the suggestions that validate.
"""

import logging
from typing import Mapping, Sequence

from domain.entities import SettingCatalog
from domain.interfaces import IOptimizationRule, ISettingsValidator
from domain.value_objects import (
    Impact,
    OptimizationContext,
    OptimizationReport,
    OptimizationSuggestion,
    OptimizationThresholds,
    SystemMetrics,
    UserPreferences,
)

from .optimization_rules import default_optimization_rules

_LOGGER = logging.getLogger(__name__)


class OptimizationEngine:
    """Derive optimization suggestions from the current configuration.

    Rules are evaluated independently: a rule raising an exception is
    logged and skipped without affecting the others. Each suggestion is
    re-validated against the configuration it would produce and dropped
    when any suggested value fails.
    """

    def __init__(
        self,
        validator: ISettingsValidator,
        rules: Sequence[IOptimizationRule] | None = None,
        thresholds: OptimizationThresholds | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            validator: Validator used to re-check suggested values
            rules: Rules to run. If None, uses the default rule set.
            thresholds: Tuning constants. If None, uses default values.
        """
        self._validator = validator
        self._rules = tuple(rules) if rules is not None else tuple(default_optimization_rules())
        self._thresholds = thresholds or OptimizationThresholds()

    @property
    def rules(self) -> tuple[IOptimizationRule, ...]:
        return self._rules

    @property
    def thresholds(self) -> OptimizationThresholds:
        return self._thresholds

    def build_context(
        self,
        current_values: Mapping[str, str],
        catalog: SettingCatalog,
        preferences: UserPreferences | None = None,
        metrics: SystemMetrics | None = None,
    ) -> OptimizationContext:
        """Bundle the inputs of one optimization request."""
        return OptimizationContext(
            current_values=current_values,
            catalog=catalog,
            preferences=preferences or UserPreferences(),
            metrics=metrics,
            thresholds=self._thresholds,
        )

    def analyze(self, context: OptimizationContext) -> list[OptimizationSuggestion]:
        """Run every rule and return the suggestions that validate.

        Args:
            context: Current values, catalog, preferences and metrics

        Returns:
            Validated suggestions in rule registration order
        """
        suggestions = []
        for rule in self._rules:
            try:
                suggestion = rule.analyze(context)
            except Exception:
                _LOGGER.exception("Error analyzing rule %s", rule.rule_id)
                continue

            if suggestion is None:
                _LOGGER.debug("Rule %s has no suggestion", rule.rule_id)
                continue

            if not self._is_applicable(suggestion, context):
                continue

            suggestions.append(suggestion)

        _LOGGER.debug("Analysis produced %d suggestion(s)", len(suggestions))
        return suggestions

    def summarize(self, suggestions: Sequence[OptimizationSuggestion]) -> OptimizationReport:
        """Aggregate the estimated impact of a set of suggestions."""
        total = Impact()
        for suggestion in suggestions:
            total = total + suggestion.impact
        return OptimizationReport(suggestions=tuple(suggestions), total_impact=total)

    def _is_applicable(
        self, suggestion: OptimizationSuggestion, context: OptimizationContext
    ) -> bool:
        prospective = {**context.current_values, **suggestion.suggested_values}
        for code, value in suggestion.suggested_values.items():
            result = self._validator.validate_one(code, value, context.catalog, prospective)
            if not result.is_valid:
                _LOGGER.warning(
                    "Dropping suggestion %s: %s=%s is invalid (%s)",
                    suggestion.id,
                    code,
                    value,
                    "; ".join(issue.message for issue in result.errors),
                )
                return False
        return True
