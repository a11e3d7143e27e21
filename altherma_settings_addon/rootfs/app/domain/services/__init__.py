"""Domain services for the settings engine.

Services contain pure business logic and operate on value objects.
"""

from .altherma_relationship_rules import altherma_relationship_rules, default_relationship_rules
from .configuration_synthesizer import ConfigurationSynthesizer, rank_suggestions
from .optimization_engine import OptimizationEngine
from .optimization_rules import (
    DhwComfortTemperatureRule,
    DhwTemperatureGapRule,
    HeatingBandRule,
    HeatingCurveRule,
    PowerConsumptionControlRule,
    PumpOperationRule,
    default_optimization_rules,
)
from .range_validator import RangeValidator
from .relationship_rules import (
    RelationshipRule,
    RelationshipRuleTable,
    RuleKind,
    conflict_group,
    dependency_rule,
)
from .relationship_validator import RelationshipValidator
from .settings_validator import SettingsValidator
from .value_codec import ValueCodec

__all__ = [
    "ConfigurationSynthesizer",
    "DhwComfortTemperatureRule",
    "DhwTemperatureGapRule",
    "HeatingBandRule",
    "HeatingCurveRule",
    "OptimizationEngine",
    "PowerConsumptionControlRule",
    "PumpOperationRule",
    "RangeValidator",
    "RelationshipRule",
    "RelationshipRuleTable",
    "RelationshipValidator",
    "RuleKind",
    "SettingsValidator",
    "ValueCodec",
    "altherma_relationship_rules",
    "conflict_group",
    "default_optimization_rules",
    "default_relationship_rules",
    "dependency_rule",
    "rank_suggestions",
]
