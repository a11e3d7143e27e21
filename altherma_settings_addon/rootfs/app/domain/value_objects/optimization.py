"""Optimization value objects.

Immutable data structures exchanged by the optimization rule engine
and the configuration synthesizer.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from domain.entities import SettingCatalog


class SuggestionType(str, Enum):
    """Objective a suggestion primarily serves."""

    ENERGY_EFFICIENCY = "energy_efficiency"
    COMFORT = "comfort"
    COST = "cost"
    ENVIRONMENTAL = "environmental"


class Priority(str, Enum):
    """Priority of a suggestion."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Numeric rank, higher is more urgent."""
        return {"high": 3, "medium": 2, "low": 1}[self.value]


@dataclass(frozen=True)
class Impact:
    """Estimated effect of a suggestion as signed percentage deltas.

    Negative energy and cost deltas are savings; a negative comfort delta
    is a comfort loss.
    """

    energy: float = 0.0
    comfort: float = 0.0
    cost: float = 0.0

    @property
    def magnitude(self) -> float:
        """Combined size of the energy and cost effect, used for ranking."""
        return abs(self.energy) + abs(self.cost)

    def __add__(self, other: "Impact") -> "Impact":
        return Impact(
            energy=self.energy + other.energy,
            comfort=self.comfort + other.comfort,
            cost=self.cost + other.cost,
        )

    def to_dict(self) -> dict[str, float]:
        return {"energy": self.energy, "comfort": self.comfort, "cost": self.cost}


@dataclass(frozen=True)
class OptimizationSuggestion:
    """A proposed multi-setting change produced by one optimization rule.

    Attributes:
        id: Suggestion identifier, stable per rule
        type: Objective served by the change
        priority: Urgency of the change
        title: Short title
        description: Explanation shown to the user
        impact: Estimated effect
        affected_settings: Codes changed by the suggestion
        suggested_values: New wire values keyed by setting code
        can_auto_apply: Whether the change may be applied without review
    """

    id: str
    type: SuggestionType
    priority: Priority
    title: str
    description: str
    impact: Impact
    affected_settings: tuple[str, ...]
    suggested_values: Mapping[str, str] = field(hash=False)
    can_auto_apply: bool = True

    def __post_init__(self) -> None:
        """Validate suggestion consistency."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.suggested_values:
            raise ValueError(f"suggestion {self.id} must suggest at least one value")
        missing = set(self.suggested_values) - set(self.affected_settings)
        if missing:
            raise ValueError(
                f"suggestion {self.id} suggests values for unaffected settings: {sorted(missing)}"
            )
        object.__setattr__(self, "affected_settings", tuple(self.affected_settings))
        object.__setattr__(
            self, "suggested_values", MappingProxyType(dict(self.suggested_values))
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation."""
        return {
            "id": self.id,
            "type": self.type.value,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "impact": self.impact.to_dict(),
            "affectedSettings": list(self.affected_settings),
            "suggestedValues": dict(self.suggested_values),
            "canAutoApply": self.can_auto_apply,
        }


@dataclass(frozen=True)
class UserPreferences:
    """Optimization preferences supplied per request.

    Attributes:
        prioritize_efficiency: Favor energy savings
        prioritize_comfort: Refuse changes with a noticeable comfort loss
        quiet_operation: Favor low-noise operation
        schedule_optimization: Allow schedule-based optimization
        max_temperature_change: Largest setpoint change the user accepts (°C)
        allow_automatic_updates: Allow auto-applicable suggestions to be pushed
    """

    prioritize_efficiency: bool = False
    prioritize_comfort: bool = False
    quiet_operation: bool = False
    schedule_optimization: bool = False
    max_temperature_change: float = 5.0
    allow_automatic_updates: bool = False

    def __post_init__(self) -> None:
        """Validate preference values."""
        if self.max_temperature_change < 0:
            raise ValueError(
                f"max_temperature_change must be non-negative, got {self.max_temperature_change}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserPreferences":
        """Create preferences from a camelCase or snake_case mapping."""
        data = data or {}

        def pick(snake: str, camel: str, default: Any) -> Any:
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            prioritize_efficiency=bool(pick("prioritize_efficiency", "prioritizeEfficiency", False)),
            prioritize_comfort=bool(pick("prioritize_comfort", "prioritizeComfort", False)),
            quiet_operation=bool(pick("quiet_operation", "quietOperation", False)),
            schedule_optimization=bool(pick("schedule_optimization", "scheduleOptimization", False)),
            max_temperature_change=float(
                pick("max_temperature_change", "maxTemperatureChange", 5.0)
            ),
            allow_automatic_updates=bool(
                pick("allow_automatic_updates", "allowAutomaticUpdates", False)
            ),
        )


@dataclass(frozen=True)
class SystemMetrics:
    """Live readings of the appliance, optional input to optimization rules."""

    outdoor_temp: float | None = None
    indoor_temp: float | None = None
    water_temp: float | None = None
    tank_temp: float | None = None
    power_consumption: float | None = None
    cop: float | None = None
    flow_rate: float | None = None
    pressure: float | None = None

    def __post_init__(self) -> None:
        if self.cop is not None and self.cop < 0:
            raise ValueError(f"cop must be non-negative, got {self.cop}")
        if self.power_consumption is not None and self.power_consumption < 0:
            raise ValueError(
                f"power_consumption must be non-negative, got {self.power_consumption}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SystemMetrics | None":
        """Create metrics from the nested collaborator representation."""
        if not data:
            return None
        temperatures = data.get("temperatures", {})
        power = data.get("power", {})
        flow = data.get("flow", {})
        return cls(
            outdoor_temp=temperatures.get("outdoor"),
            indoor_temp=temperatures.get("indoor"),
            water_temp=temperatures.get("water"),
            tank_temp=temperatures.get("tank"),
            power_consumption=power.get("consumption"),
            cop=power.get("cop"),
            flow_rate=flow.get("rate"),
            pressure=data.get("pressure"),
        )


@dataclass(frozen=True)
class OptimizationThresholds:
    """Appliance-tuning constants used by the optimization rules.

    Attributes:
        curve_max_slope: Heating curve slope above which the curve is too steep
        curve_reduction: Degrees removed from both water points of a steep curve
        curve_low_water_floor: Lowest water temperature suggested at low ambient
        curve_high_water_floor: Lowest water temperature suggested at high ambient
        dhw_comfort_ceiling: Highest recommended DHW comfort setpoint
        dhw_max_gap: Largest recommended gap between DHW comfort and eco setpoints
        heating_band_max_width: Largest recommended heating min/max band
        comfort_exclusion_threshold: Comfort impact below which a suggestion is
            excluded when comfort is prioritized
    """

    curve_max_slope: float = 1.5
    curve_reduction: float = 5.0
    curve_low_water_floor: float = 35.0
    curve_high_water_floor: float = 25.0
    dhw_comfort_ceiling: float = 55.0
    dhw_max_gap: float = 10.0
    heating_band_max_width: float = 8.0
    comfort_exclusion_threshold: float = -3.0

    def __post_init__(self) -> None:
        """Validate threshold values."""
        if self.curve_max_slope <= 0:
            raise ValueError(f"curve_max_slope must be positive, got {self.curve_max_slope}")
        if self.curve_reduction <= 0:
            raise ValueError(f"curve_reduction must be positive, got {self.curve_reduction}")
        if self.dhw_max_gap <= 0:
            raise ValueError(f"dhw_max_gap must be positive, got {self.dhw_max_gap}")
        if self.heating_band_max_width <= 0:
            raise ValueError(
                f"heating_band_max_width must be positive, got {self.heating_band_max_width}"
            )
        if self.comfort_exclusion_threshold > 0:
            raise ValueError(
                f"comfort_exclusion_threshold must be zero or negative, "
                f"got {self.comfort_exclusion_threshold}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "OptimizationThresholds":
        """Create thresholds from a mapping of overrides.

        Raises:
            ValueError: If an unknown threshold name is supplied
        """
        data = data or {}
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown optimization thresholds: {sorted(unknown)}")
        return cls(**{name: float(value) for name, value in data.items()})


@dataclass(frozen=True)
class OptimizationContext:
    """Everything an optimization rule may inspect.

    Attributes:
        current_values: Current wire values keyed by setting code
        catalog: Settings catalog
        preferences: User preferences for this request
        metrics: Optional live appliance readings
        thresholds: Tuning constants for the rules
    """

    current_values: Mapping[str, str] = field(hash=False)
    catalog: "SettingCatalog" = field(hash=False)
    preferences: UserPreferences = field(default_factory=UserPreferences)
    metrics: SystemMetrics | None = None
    thresholds: OptimizationThresholds = field(default_factory=OptimizationThresholds)

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_values", MappingProxyType(dict(self.current_values)))


@dataclass(frozen=True)
class OptimizationReport:
    """Suggestions together with their aggregated effect.

    Attributes:
        suggestions: Validated suggestions
        total_impact: Sum of all suggestion impacts
    """

    suggestions: tuple[OptimizationSuggestion, ...]
    total_impact: Impact

    @property
    def potential_savings(self) -> dict[str, float]:
        """Energy and cost savings as positive percentages."""
        return {
            "energy": max(0.0, -self.total_impact.energy),
            "cost": max(0.0, -self.total_impact.cost),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggestions": [suggestion.to_dict() for suggestion in self.suggestions],
            "totalImpact": self.total_impact.to_dict(),
            "potentialSavings": self.potential_savings,
        }


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of synthesizing an optimal configuration.

    Attributes:
        configuration: Complete, validated candidate configuration
        applied: Suggestions merged into the configuration, in merge order
        skipped: Suggestions excluded because of user preferences
    """

    configuration: Mapping[str, str] = field(hash=False)
    applied: tuple[OptimizationSuggestion, ...] = ()
    skipped: tuple[OptimizationSuggestion, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "configuration", MappingProxyType(dict(self.configuration)))

    @property
    def changes(self) -> dict[str, str]:
        """Values set by the applied suggestions, later suggestions winning."""
        changed: dict[str, str] = {}
        for suggestion in self.applied:
            changed.update(suggestion.suggested_values)
        return changed

    def to_dict(self) -> dict[str, Any]:
        return {
            "configuration": dict(self.configuration),
            "changes": self.changes,
            "applied": [suggestion.id for suggestion in self.applied],
            "skipped": [suggestion.id for suggestion in self.skipped],
        }
