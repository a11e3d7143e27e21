"""Tests for the range validator service."""

from unittest.mock import Mock

import pytest
from domain.services import RangeValidator
from domain.value_objects import (
    AccessMode,
    NumericRange,
    Setting,
    SettingCategory,
    SettingType,
    ValidationErrorKind,
)


def _temperature(value_range: NumericRange) -> Setting:
    return Setting(
        code="6-0A",
        name="DHW comfort temperature",
        category=SettingCategory.TANK,
        type=SettingType.TEMPERATURE,
        access=AccessMode.READ_WRITE,
        range=value_range,
    )


class TestNumericRanges:
    """Tests for numeric range checks."""

    @pytest.mark.parametrize("value", ["25", "80", "45"])
    def test_bounds_are_inclusive(self, catalog, value: str) -> None:
        """Test that min and max are accepted."""
        assert RangeValidator().check_range(value, catalog["1-02"]) is None

    @pytest.mark.parametrize("value", ["24", "81"])
    def test_values_outside_bounds(self, catalog, value: str) -> None:
        """Test that values outside [min, max] are rejected."""
        issue = RangeValidator().check_range(value, catalog["1-02"])
        assert issue is not None
        assert issue.kind == ValidationErrorKind.RANGE
        assert issue.message == (
            "Value out of range for Leaving water temperature at low ambient. "
            "Must be between 25°C and 80°C in steps of 1°C"
        )

    def test_step_grid(self) -> None:
        """Test that values must sit on the step grid anchored at min."""
        setting = _temperature(NumericRange(min=30, max=70, step=5, default=50))
        validator = RangeValidator()
        assert validator.check_range("35", setting) is None
        assert validator.check_range("70", setting) is None
        assert validator.check_range("37", setting) is not None
        assert validator.check_range("75", setting) is not None

    def test_fractional_step_uses_exact_arithmetic(self) -> None:
        """Test that 0.3 lies on a 0.1 grid."""
        setting = _temperature(NumericRange(min=0, max=1, step=0.1, default=0))
        validator = RangeValidator()
        assert validator.check_range("0.3", setting) is None
        assert validator.check_range("0.7", setting) is None
        assert validator.check_range("0.35", setting) is not None

    def test_grid_is_anchored_at_min(self) -> None:
        """Test that an odd minimum shifts the grid."""
        setting = _temperature(NumericRange(min=1, max=11, step=2, default=1))
        validator = RangeValidator()
        assert validator.check_range("3", setting) is None
        assert validator.check_range("4", setting) is not None

    def test_hex_value_is_decoded(self, catalog) -> None:
        """Test that hex-coded values are compared after base 16 decoding."""
        validator = RangeValidator()
        assert validator.check_range("0A", catalog["8-02"]) is None
        assert validator.check_range("0B", catalog["8-02"]) is not None

    def test_undecodable_value(self, catalog) -> None:
        """Test that a value that cannot be decoded is a range error."""
        issue = RangeValidator().check_range("ZZ", catalog["8-02"])
        assert issue is not None
        assert issue.message == "Invalid value for Anti-recycling time"

    def test_power_percentage(self, catalog) -> None:
        """Test the step of power allocation settings."""
        validator = RangeValidator()
        assert validator.check_range("65", catalog["4-05"]) is None
        assert validator.check_range("62", catalog["4-05"]) is not None


class TestEnumAndBooleanRanges:
    """Tests for enumerated and boolean range checks."""

    def test_enum_membership(self, catalog) -> None:
        """Test that only declared options are accepted."""
        validator = RangeValidator()
        assert validator.check_range("2", catalog["F-0D"]) is None
        issue = validator.check_range("5", catalog["F-0D"])
        assert issue.message == (
            "Value out of range for Pump operation mode. "
            "Valid values: 0 (Continuous), 1 (Sample), 2 (Request)"
        )

    def test_boolean_values(self, catalog) -> None:
        """Test that boolean settings accept 0 and 1 only."""
        validator = RangeValidator()
        assert validator.check_range("0", catalog["8-0B"]) is None
        assert validator.check_range("1", catalog["8-0B"]) is None
        issue = validator.check_range("2", catalog["8-0B"])
        assert issue.message == "Value out of range for Quiet mode. 0 (Disabled) or 1 (Enabled)"


class TestMissingRange:
    """Tests for settings without a declared range."""

    def test_no_range_skips_check(self, catalog) -> None:
        """Test that settings without a range are always in range."""
        assert RangeValidator().check_range("anything", catalog["2-02"]) is None

    def test_unsupported_range_type(self) -> None:
        """Test that an unknown range variant is a programming error."""
        setting = Mock(range=object())
        with pytest.raises(TypeError, match="Unsupported range type"):
            RangeValidator().check_range("1", setting)
