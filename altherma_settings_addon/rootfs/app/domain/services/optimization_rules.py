"""Optimization rules for the Altherma 3 settings bank.

Each rule is a small independent class proposing at most one change.
Thresholds come from OptimizationThresholds so they can be tuned per
installation without touching the rules.
"""

from domain.interfaces import IOptimizationRule
from domain.value_objects import (
    Impact,
    OptimizationContext,
    OptimizationSuggestion,
    Priority,
    SuggestionType,
    encode_number,
)

from .value_codec import read_number

COMFORT_LOSS = -5.0


def _number(context: OptimizationContext, code: str) -> float | None:
    return read_number(context.current_values, context.catalog, code)


class HeatingCurveRule(IOptimizationRule):
    """Flatten a weather-dependent heating curve that is too steep.

    The slope is the leaving water temperature drop per degree of ambient
    temperature rise between the two curve points.
    """

    rule_id = "heating-curve"
    name = "Heating Curve Optimization"
    description = "Optimize heating curve based on outdoor temperature and comfort settings"

    LOW_AMBIENT = "1-00"
    HIGH_AMBIENT = "1-01"
    WATER_AT_LOW_AMBIENT = "1-02"
    WATER_AT_HIGH_AMBIENT = "1-03"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        low_ambient = _number(context, self.LOW_AMBIENT)
        high_ambient = _number(context, self.HIGH_AMBIENT)
        water_low = _number(context, self.WATER_AT_LOW_AMBIENT)
        water_high = _number(context, self.WATER_AT_HIGH_AMBIENT)
        if None in (low_ambient, high_ambient, water_low, water_high):
            return None
        if high_ambient <= low_ambient:
            return None

        thresholds = context.thresholds
        slope = (water_low - water_high) / (high_ambient - low_ambient)
        if slope <= thresholds.curve_max_slope:
            return None

        new_low = max(thresholds.curve_low_water_floor, water_low - thresholds.curve_reduction)
        new_high = max(thresholds.curve_high_water_floor, water_high - thresholds.curve_reduction)
        if new_low == water_low and new_high == water_high:
            return None

        return OptimizationSuggestion(
            id="heating-curve-1",
            type=SuggestionType.ENERGY_EFFICIENCY,
            priority=Priority.HIGH,
            title="Optimize Heating Curve",
            description="Current heating curve may lead to overheating and energy waste.",
            impact=Impact(
                energy=-15,
                comfort=COMFORT_LOSS if context.preferences.prioritize_comfort else 0,
                cost=-12,
            ),
            affected_settings=(self.WATER_AT_LOW_AMBIENT, self.WATER_AT_HIGH_AMBIENT),
            suggested_values={
                self.WATER_AT_LOW_AMBIENT: encode_number(new_low),
                self.WATER_AT_HIGH_AMBIENT: encode_number(new_high),
            },
        )


class DhwComfortTemperatureRule(IOptimizationRule):
    """Clamp the domestic hot water comfort setpoint to the recommended ceiling."""

    rule_id = "dhw-comfort-temp"
    name = "DHW Temperature Optimization"
    description = "Optimize domestic hot water temperature settings"

    DHW_COMFORT = "6-0A"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        comfort = _number(context, self.DHW_COMFORT)
        ceiling = context.thresholds.dhw_comfort_ceiling
        if comfort is None or comfort <= ceiling:
            return None

        return OptimizationSuggestion(
            id="dhw-temp-1",
            type=SuggestionType.ENERGY_EFFICIENCY,
            priority=Priority.MEDIUM,
            title="Reduce DHW Temperature",
            description="Lower DHW temperature can improve efficiency while maintaining comfort.",
            impact=Impact(
                energy=-8,
                comfort=COMFORT_LOSS if context.preferences.prioritize_comfort else 0,
                cost=-8,
            ),
            affected_settings=(self.DHW_COMFORT,),
            suggested_values={self.DHW_COMFORT: encode_number(ceiling)},
        )


class DhwTemperatureGapRule(IOptimizationRule):
    """Narrow the gap between the DHW comfort and eco setpoints."""

    rule_id = "dhw-temp-gap"
    name = "DHW Temperature Difference"
    description = "Reduce the gap between comfort and eco DHW temperatures"

    DHW_COMFORT = "6-0A"
    DHW_ECO = "6-0B"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        comfort = _number(context, self.DHW_COMFORT)
        eco = _number(context, self.DHW_ECO)
        max_gap = context.thresholds.dhw_max_gap
        if comfort is None or eco is None:
            return None
        # Measured against the comfort setpoint left by DhwComfortTemperatureRule
        comfort = min(comfort, context.thresholds.dhw_comfort_ceiling)
        if comfort - eco <= max_gap:
            return None

        return OptimizationSuggestion(
            id="dhw-temp-2",
            type=SuggestionType.ENERGY_EFFICIENCY,
            priority=Priority.LOW,
            title="Optimize DHW Temperature Difference",
            description=(
                "Reduce the gap between comfort and eco temperatures for better efficiency."
            ),
            impact=Impact(energy=-5, comfort=0, cost=-5),
            affected_settings=(self.DHW_ECO,),
            suggested_values={self.DHW_ECO: encode_number(comfort - max_gap)},
        )


class PumpOperationRule(IOptimizationRule):
    """Switch a continuously running circulation pump to request-based operation."""

    rule_id = "pump-operation"
    name = "Pump Operation Optimization"
    description = "Optimize pump operation mode"

    PUMP_MODE = "F-0D"
    CONTINUOUS = "0"
    REQUEST = "2"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        if context.current_values.get(self.PUMP_MODE) != self.CONTINUOUS:
            return None

        return OptimizationSuggestion(
            id="pump-1",
            type=SuggestionType.ENERGY_EFFICIENCY,
            priority=Priority.MEDIUM,
            title="Optimize Pump Operation",
            description="Change pump operation to request mode for better efficiency.",
            impact=Impact(energy=-10, comfort=0, cost=-8),
            affected_settings=(self.PUMP_MODE,),
            suggested_values={self.PUMP_MODE: self.REQUEST},
        )


class HeatingBandRule(IOptimizationRule):
    """Narrow a wide room heating temperature band.

    Framed as a comfort improvement, with a small energy and cost benefit.
    """

    rule_id = "heating-band"
    name = "Heating Temperature Range"
    description = "Narrow the room heating temperature band"

    HEATING_MAX = "3-06"
    HEATING_MIN = "3-07"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        maximum = _number(context, self.HEATING_MAX)
        minimum = _number(context, self.HEATING_MIN)
        max_width = context.thresholds.heating_band_max_width
        if maximum is None or minimum is None or maximum - minimum <= max_width:
            return None

        return OptimizationSuggestion(
            id="comfort-1",
            type=SuggestionType.COMFORT,
            priority=Priority.LOW,
            title="Wide Heating Temperature Range",
            description="Narrower temperature range can improve comfort and efficiency.",
            impact=Impact(energy=-3, comfort=10, cost=-2),
            affected_settings=(self.HEATING_MAX, self.HEATING_MIN),
            suggested_values={self.HEATING_MAX: encode_number(minimum + max_width)},
        )


class PowerConsumptionControlRule(IOptimizationRule):
    """Enable continuous power consumption control when it is switched off."""

    rule_id = "power-consumption-control"
    name = "Power Consumption Control"
    description = "Enable power consumption control to manage energy costs"

    POWER_CONTROL = "4-08"
    NO_LIMITATION = "0"
    CONTINUOUS = "1"

    def analyze(self, context: OptimizationContext) -> OptimizationSuggestion | None:
        if context.current_values.get(self.POWER_CONTROL) != self.NO_LIMITATION:
            return None

        return OptimizationSuggestion(
            id="energy-1",
            type=SuggestionType.COST,
            priority=Priority.MEDIUM,
            title="No Power Consumption Control",
            description="Enable power consumption control to manage energy costs.",
            impact=Impact(energy=-12, comfort=COMFORT_LOSS, cost=-15),
            affected_settings=(self.POWER_CONTROL,),
            suggested_values={self.POWER_CONTROL: self.CONTINUOUS},
        )


def default_optimization_rules() -> list[IOptimizationRule]:
    """Return the rule set used when none is supplied."""
    return [
        HeatingCurveRule(),
        DhwComfortTemperatureRule(),
        DhwTemperatureGapRule(),
        PumpOperationRule(),
        HeatingBandRule(),
        PowerConsumptionControlRule(),
    ]
