"""Optimization rule interface.

Contract for a single pluggable analysis rule of the optimization engine.
"""

from abc import ABC, abstractmethod

from domain.value_objects import OptimizationContext, OptimizationSuggestion


class IOptimizationRule(ABC):
    """Contract for an optimization analysis rule.

    A rule inspects the current configuration (and optionally system
    metrics) and proposes at most one change. Rules are independent of
    each other: new rules are added by registering them with the engine.
    """

    rule_id: str = ""
    name: str = ""
    description: str = ""

    @abstractmethod
    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        """Analyze the configuration and propose a change.

        Implementations must not mutate the context. Missing or
        undecodable inputs should yield None rather than raise.

        Args:
            context: Current values, catalog, preferences and metrics

        Returns:
            A suggestion, or None when the rule has nothing to propose
        """
        pass
