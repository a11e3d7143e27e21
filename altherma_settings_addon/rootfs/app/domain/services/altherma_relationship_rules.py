"""Relationship rules of the Altherma 3 settings bank.

Appliance knowledge: which setting pairs depend on each other and which
groups of settings must not be combined. Rules only fire when every value
they read is present and decodable.
"""

from typing import Mapping

from domain.entities import SettingCatalog

from .relationship_rules import (
    RelationshipRule,
    RelationshipRuleTable,
    conflict_group,
    dependency_rule,
)
from .value_codec import read_number

LOW_AMBIENT = "1-00"
HIGH_AMBIENT = "1-01"
EMITTER_TYPE = "2-0C"
BACKUP_HEATER_OPERATION = "4-00"
BACKUP_HEATER_PRIORITY = "4-01"
POWER_SHARES = ("4-05", "4-06", "4-07")
DHW_COMFORT = "6-0A"
DHW_ECO = "6-0B"
DHW_HEAT_UP_MODE = "6-0D"
HEATING_MAX = "9-00"
HEATING_MIN = "9-01"
COOLING_MAX = "9-02"
COOLING_MIN = "9-03"
QUIET_MODE = "8-0B"
QUIET_MODE_SCHEDULE = "8-0C"

RADIATOR_EMITTER = "2"
RADIATOR_MAX_TEMP = 65.0
OTHER_EMITTER_MAX_TEMP = 55.0
REHEAT_ONLY = "0"
BACKUP_HEATER_DISABLED = "0"
BACKUP_HEATER_AS_PRIORITY = "2"
MAX_TOTAL_POWER = 100.0


def _name(catalog: SettingCatalog, code: str) -> str:
    setting = catalog.get(code)
    return setting.name if setting is not None else code


def _ordered_pair(low_code: str, high_code: str, subject: str):
    """Build an evaluator requiring low < high, phrased from the subject's side."""

    def evaluate(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
        low = read_number(values, catalog, low_code)
        high = read_number(values, catalog, high_code)
        if low is None or high is None or low < high:
            return None
        if subject == low_code:
            return f"{_name(catalog, low_code)} must be lower than {_name(catalog, high_code)}"
        return f"{_name(catalog, high_code)} must be higher than {_name(catalog, low_code)}"

    return evaluate


def _emitter_ceiling(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
    emitter = values.get(EMITTER_TYPE)
    maximum = read_number(values, catalog, HEATING_MAX)
    if emitter is None or maximum is None:
        return None
    ceiling = RADIATOR_MAX_TEMP if emitter == RADIATOR_EMITTER else OTHER_EMITTER_MAX_TEMP
    if maximum > ceiling:
        return (
            f"{_name(catalog, HEATING_MAX)} must be <= {ceiling:g}°C "
            f"with the current {_name(catalog, EMITTER_TYPE)}"
        )
    return None


def _eco_requires_scheduled_heat_up(
    values: Mapping[str, str], catalog: SettingCatalog
) -> str | None:
    if values.get(DHW_HEAT_UP_MODE) == REHEAT_ONLY:
        return (
            f"{_name(catalog, DHW_ECO)} is not applicable when "
            f"{_name(catalog, DHW_HEAT_UP_MODE)} is reheat only"
        )
    return None


def _eco_not_above_comfort(subject: str):
    def evaluate(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
        comfort = read_number(values, catalog, DHW_COMFORT)
        eco = read_number(values, catalog, DHW_ECO)
        if comfort is None or eco is None or eco <= comfort:
            return None
        if subject == DHW_ECO:
            return f"{_name(catalog, DHW_ECO)} must not exceed {_name(catalog, DHW_COMFORT)}"
        return f"{_name(catalog, DHW_COMFORT)} must not be below {_name(catalog, DHW_ECO)}"

    return evaluate


def _feature_requires_enabled(feature: str, prerequisite: str):
    def evaluate(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
        if values.get(feature) == "1" and values.get(prerequisite) == "0":
            return f"{_name(catalog, prerequisite)} must be enabled to use {_name(catalog, feature)}"
        return None

    return evaluate


def _min_below_max(min_code: str, max_code: str):
    def evaluate(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
        minimum = read_number(values, catalog, min_code)
        maximum = read_number(values, catalog, max_code)
        if minimum is None or maximum is None or minimum < maximum:
            return None
        return f"{_name(catalog, min_code)} must be lower than {_name(catalog, max_code)}"

    return evaluate


def _backup_heater_priority(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
    if (
        values.get(BACKUP_HEATER_OPERATION) == BACKUP_HEATER_DISABLED
        and values.get(BACKUP_HEATER_PRIORITY) == BACKUP_HEATER_AS_PRIORITY
    ):
        return "Cannot set backup heater as priority when backup heater is disabled"
    return None


def _total_power(values: Mapping[str, str], catalog: SettingCatalog) -> str | None:
    shares = [read_number(values, catalog, code) for code in POWER_SHARES]
    total = sum(share for share in shares if share is not None)
    if total > MAX_TOTAL_POWER:
        names = ", ".join(_name(catalog, code) for code in POWER_SHARES)
        return f"Total power allocation of {names} exceeds {MAX_TOTAL_POWER:g}% (got {total:g}%)"
    return None


def altherma_relationship_rules() -> list[RelationshipRule]:
    """Return every dependency and conflict rule of the settings bank."""
    rules = [
        dependency_rule(
            "curve-ambient-order", LOW_AMBIENT, HIGH_AMBIENT,
            _ordered_pair(LOW_AMBIENT, HIGH_AMBIENT, subject=LOW_AMBIENT),
        ),
        dependency_rule(
            "curve-ambient-order", HIGH_AMBIENT, LOW_AMBIENT,
            _ordered_pair(LOW_AMBIENT, HIGH_AMBIENT, subject=HIGH_AMBIENT),
        ),
        dependency_rule("emitter-ceiling", HEATING_MAX, EMITTER_TYPE, _emitter_ceiling),
        dependency_rule("emitter-ceiling", EMITTER_TYPE, HEATING_MAX, _emitter_ceiling),
        dependency_rule(
            "dhw-eco-heat-up-mode", DHW_ECO, DHW_HEAT_UP_MODE, _eco_requires_scheduled_heat_up
        ),
        dependency_rule(
            "dhw-eco-below-comfort", DHW_ECO, DHW_COMFORT, _eco_not_above_comfort(DHW_ECO)
        ),
        dependency_rule(
            "dhw-eco-below-comfort", DHW_COMFORT, DHW_ECO, _eco_not_above_comfort(DHW_COMFORT)
        ),
        dependency_rule(
            "quiet-mode-schedule", QUIET_MODE_SCHEDULE, QUIET_MODE,
            _feature_requires_enabled(QUIET_MODE_SCHEDULE, QUIET_MODE),
        ),
    ]
    rules += conflict_group(
        "heating-min-max", (HEATING_MIN, HEATING_MAX), _min_below_max(HEATING_MIN, HEATING_MAX)
    )
    rules += conflict_group(
        "cooling-min-max", (COOLING_MIN, COOLING_MAX), _min_below_max(COOLING_MIN, COOLING_MAX)
    )
    rules += conflict_group(
        "backup-heater-priority",
        (BACKUP_HEATER_OPERATION, BACKUP_HEATER_PRIORITY),
        _backup_heater_priority,
    )
    rules += conflict_group("total-power-allocation", POWER_SHARES, _total_power)
    return rules


def default_relationship_rules() -> RelationshipRuleTable:
    """Return the rule table used when none is supplied."""
    return RelationshipRuleTable(altherma_relationship_rules())
