"""Setting range value objects.

Immutable descriptions of the value domain of a setting. A range is one of
three variants: numeric, enumerated or boolean.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class NumericRange:
    """Numeric value domain with a quantization step.

    Attributes:
        min: Lowest accepted value
        max: Highest accepted value
        step: Quantization step; every valid value is min + k * step
        default: Factory default value
        unit: Optional display unit (e.g. "°C", "%")
    """

    min: float
    max: float
    step: float
    default: float
    unit: str | None = None

    def __post_init__(self) -> None:
        """Validate numeric range bounds."""
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.min > self.max:
            raise ValueError(f"min must not exceed max, got min={self.min}, max={self.max}")
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"default must be between {self.min} and {self.max}, got {self.default}"
            )

    def describe(self) -> str:
        """Human-readable description of the accepted values."""
        unit = self.unit or ""
        low, high, step = (encode_number(n) for n in (self.min, self.max, self.step))
        return f"Must be between {low}{unit} and {high}{unit} in steps of {step}{unit}"

    def wire_default(self) -> str:
        return encode_number(self.default)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": "numeric",
            "min": self.min,
            "max": self.max,
            "step": self.step,
            "default": self.default,
        }
        if self.unit:
            data["unit"] = self.unit
        return data


@dataclass(frozen=True)
class EnumRange:
    """Enumerated value domain.

    Attributes:
        options: Mapping of wire code to display label
        default: Factory default code, one of the option keys
    """

    options: Mapping[str, str] = field(hash=False)
    default: str

    def __post_init__(self) -> None:
        """Validate enumerated options."""
        if not self.options:
            raise ValueError("options cannot be empty")
        if self.default not in self.options:
            raise ValueError(
                f"default must be one of {sorted(self.options)}, got {self.default!r}"
            )
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def describe(self) -> str:
        """Human-readable description of the accepted values."""
        labels = ", ".join(f"{code} ({label})" for code, label in self.options.items())
        return f"Valid values: {labels}"

    def wire_default(self) -> str:
        return self.default

    def to_dict(self) -> dict[str, Any]:
        return {"type": "enum", "options": dict(self.options), "default": self.default}


@dataclass(frozen=True)
class BooleanRange:
    """Two-state value domain encoded as "0" / "1" on the wire.

    Attributes:
        false_label: Label shown for "0"
        true_label: Label shown for "1"
        default: Factory default state
    """

    false_label: str = "Off"
    true_label: str = "On"
    default: bool = False
    options: Mapping[bool, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "options",
            MappingProxyType({False: self.false_label, True: self.true_label}),
        )

    def describe(self) -> str:
        """Human-readable description of the accepted values."""
        return f"0 ({self.false_label}) or 1 ({self.true_label})"

    def wire_default(self) -> str:
        return "1" if self.default else "0"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "boolean",
            "options": {"false": self.false_label, "true": self.true_label},
            "default": self.default,
        }


SettingRange = Union[NumericRange, EnumRange, BooleanRange]


def encode_number(number: float | Decimal) -> str:
    """Encode a number as a decimal wire value ("55", "22.5")."""
    decimal = Decimal(str(number))
    if decimal == decimal.to_integral_value():
        return str(int(decimal))
    return format(decimal.normalize(), "f")
