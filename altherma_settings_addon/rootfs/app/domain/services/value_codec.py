"""Value codec service.

Per-type decoding and format validation of setting wire values.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Mapping

from domain.value_objects import (
    BooleanRange,
    EnumRange,
    NumericRange,
    Setting,
    SettingType,
    ValidationErrorKind,
    ValidationIssue,
)

# Absolute sanity bounds, independent of each setting's declared range
TEMPERATURE_BOUNDS = (Decimal(-40), Decimal(90))
POWER_BOUNDS = (Decimal(0), Decimal(100))

_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_HEX_PATTERN = re.compile(r"^[0-9A-Fa-f]{2}$")
_BOOLEAN_VALUES = ("0", "1")


def parse_decimal(value: str) -> Decimal | None:
    """Parse a plain decimal number.

    Exponents, NaN and infinities are rejected.

    Returns:
        The parsed number, or None when the text is not a decimal number
    """
    if not isinstance(value, str) or not _DECIMAL_PATTERN.match(value):
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        return None


def is_hex_coded(setting: Setting) -> bool:
    """Whether the setting uses the raw 2-digit hexadecimal wire format."""
    if setting.type in (SettingType.TEMPERATURE, SettingType.TIME, SettingType.BOOLEAN):
        return False
    if isinstance(setting.range, (EnumRange, BooleanRange)):
        return False
    if setting.type == SettingType.POWER and isinstance(setting.range, NumericRange):
        return False
    return True


def decode_number(value: str, setting: Setting) -> Decimal | None:
    """Decode a numeric wire value according to the setting's format.

    Hex-coded settings are read as base 16, everything else as decimal.

    Returns:
        The decoded number, or None when the value cannot be decoded
    """
    if is_hex_coded(setting):
        if not isinstance(value, str) or not _HEX_PATTERN.match(value):
            return None
        return Decimal(int(value, 16))
    return parse_decimal(value)


def read_number(
    values: Mapping[str, str], catalog: Mapping[str, Setting], code: str
) -> float | None:
    """Read the current value of a numeric setting from a configuration.

    Values are decoded with the setting's own wire format, so hex-coded
    settings read as base 16 and malformed text reads as absent.

    Returns:
        The decoded value, or None when absent, unknown or not decodable
    """
    raw = values.get(code)
    setting = catalog.get(code)
    if raw is None or setting is None:
        return None
    number = decode_number(raw, setting)
    return float(number) if number is not None else None


def format_description(setting: Setting) -> str:
    """Human-readable description of the expected wire format."""
    if setting.type == SettingType.TEMPERATURE:
        low, high = TEMPERATURE_BOUNDS
        return f"Decimal number between {low} and {high}"
    if setting.type == SettingType.TIME:
        return "HH:MM format"
    if setting.type == SettingType.BOOLEAN or isinstance(setting.range, BooleanRange):
        return "0 or 1"
    if isinstance(setting.range, EnumRange):
        return f"One of: {', '.join(setting.range.options)}"
    if not is_hex_coded(setting):
        low, high = POWER_BOUNDS
        return f"Percentage between {low} and {high}"
    return "2-digit hexadecimal"


class ValueCodec:
    """Checks that wire values are well-formed for their setting type.

    Format correctness says nothing about the declared range: a well
    formed temperature may still lie outside the appliance's limits.
    """

    def check_format(self, value: str, setting: Setting) -> ValidationIssue | None:
        """Check the wire format of a value.

        Args:
            value: Wire value
            setting: Setting the value is meant for

        Returns:
            A format issue, or None when the value is well-formed
        """
        if self._is_well_formed(value, setting):
            return None
        return ValidationIssue(
            kind=ValidationErrorKind.FORMAT,
            message=(
                f"Invalid format for {setting.name}. "
                f"Expected format: {format_description(setting)}"
            ),
        )

    def _is_well_formed(self, value: str, setting: Setting) -> bool:
        if not isinstance(value, str):
            return False
        if setting.type == SettingType.TEMPERATURE:
            return _within(parse_decimal(value), TEMPERATURE_BOUNDS)
        if setting.type == SettingType.TIME:
            return bool(_TIME_PATTERN.match(value))
        if setting.type == SettingType.BOOLEAN or isinstance(setting.range, BooleanRange):
            return value in _BOOLEAN_VALUES
        if isinstance(setting.range, EnumRange):
            return value in setting.range.options
        if not is_hex_coded(setting):
            return _within(parse_decimal(value), POWER_BOUNDS)
        return bool(_HEX_PATTERN.match(value))


def _within(number: Decimal | None, bounds: tuple[Decimal, Decimal]) -> bool:
    return number is not None and bounds[0] <= number <= bounds[1]


def encode_default(setting: Setting) -> str | None:
    """Encode the factory default of a setting as a wire value.

    Returns:
        The default wire value, or None when the setting declares no range
    """
    if setting.range is None:
        return None
    if isinstance(setting.range, NumericRange) and is_hex_coded(setting):
        return f"{int(setting.range.default):02X}"
    return setting.range.wire_default()
