"""Range validator service.

Checks wire values against the declared value domain of their setting.
"""

from decimal import Decimal

from domain.value_objects import (
    BooleanRange,
    EnumRange,
    NumericRange,
    Setting,
    ValidationErrorKind,
    ValidationIssue,
)

from .value_codec import decode_number


class RangeValidator:
    """Validates values against numeric, enumerated and boolean ranges."""

    def check_range(self, value: str, setting: Setting) -> ValidationIssue | None:
        """Check a value against the setting's declared range.

        Numeric values must lie within [min, max] and sit on the step grid
        anchored at min. The grid check uses exact decimal arithmetic on
        the wire text, so 0.3 is on a 0.1 grid.

        Args:
            value: Wire value
            setting: Setting the value is meant for

        Returns:
            A range issue, or None when the value is in range (or the
            setting declares no range)
        """
        value_range = setting.range
        if value_range is None:
            return None

        if isinstance(value_range, NumericRange):
            number = decode_number(value, setting)
            if number is None:
                return self._issue(f"Invalid value for {setting.name}")
            if not self._in_numeric_range(number, value_range):
                return self._issue(
                    f"Value out of range for {setting.name}. {value_range.describe()}"
                )
            return None

        if isinstance(value_range, EnumRange):
            if value not in value_range.options:
                return self._issue(
                    f"Value out of range for {setting.name}. {value_range.describe()}"
                )
            return None

        if isinstance(value_range, BooleanRange):
            if value not in ("0", "1"):
                return self._issue(
                    f"Value out of range for {setting.name}. {value_range.describe()}"
                )
            return None

        raise TypeError(f"Unsupported range type: {type(value_range).__name__}")

    @staticmethod
    def _in_numeric_range(number: Decimal, value_range: NumericRange) -> bool:
        minimum = Decimal(str(value_range.min))
        maximum = Decimal(str(value_range.max))
        step = Decimal(str(value_range.step))
        if number < minimum or number > maximum:
            return False
        return (number - minimum) % step == 0

    @staticmethod
    def _issue(message: str) -> ValidationIssue:
        return ValidationIssue(kind=ValidationErrorKind.RANGE, message=message)
