"""Setting value object.

Immutable definition of a single coded appliance setting as it appears
in the settings catalog.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .setting_range import BooleanRange, EnumRange, NumericRange, SettingRange


class SettingCategory(str, Enum):
    """Functional zone a setting belongs to."""

    ROOM = "Room"
    MAIN_ZONE = "Main Zone"
    ADDITIONAL_ZONE = "Additional Zone"
    SPACE_HEATING_COOLING = "Space Heating/Cooling"
    TANK = "Tank"
    USER_SETTINGS = "User Settings"
    INSTALLER_SETTINGS = "Installer Settings"


class SettingType(str, Enum):
    """Kind of value a setting carries."""

    TEMPERATURE = "temperature"
    MODE = "mode"
    CONFIGURATION = "configuration"
    TIME = "time"
    POWER = "power"
    BOOLEAN = "boolean"


class AccessMode(str, Enum):
    """Access mode declared by the appliance for a setting.

    Attributes:
        READ: Read-only value
        WRITE: Write-only value
        READ_WRITE: Readable and writable value
        RESERVED: Reserved by the manufacturer, not to be changed
    """

    READ = "R"
    WRITE = "W"
    READ_WRITE = "R/W"
    RESERVED = "R/O"


@dataclass(frozen=True)
class Setting:
    """Definition of a coded appliance setting.

    Attributes:
        code: Unique setting code (e.g. "1-02")
        name: Display name
        category: Functional zone of the setting
        type: Kind of value carried by the setting
        access: Declared access mode
        range: Domain of valid values, None when the appliance declares none
        description: Optional longer description
        dependencies: Codes whose current values constrain this setting
        conflicts: Codes whose simultaneous values may clash with this setting
    """

    code: str
    name: str
    category: SettingCategory
    type: SettingType
    access: AccessMode
    range: SettingRange | None
    description: str | None = None
    dependencies: tuple[str, ...] = ()
    conflicts: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate setting definition."""
        if not self.code:
            raise ValueError("code cannot be empty")
        if not self.name:
            raise ValueError(f"name cannot be empty for setting {self.code}")
        if self.range is not None and not isinstance(
            self.range, (NumericRange, EnumRange, BooleanRange)
        ):
            raise ValueError(f"range of setting {self.code} has unsupported type {type(self.range)}")
        if self.type == SettingType.BOOLEAN and not isinstance(self.range, BooleanRange):
            raise ValueError(f"boolean setting {self.code} must have a boolean range")
        if isinstance(self.range, BooleanRange) and self.type != SettingType.BOOLEAN:
            raise ValueError(
                f"setting {self.code} has a boolean range but type {self.type.value}"
            )
        if self.code in self.dependencies or self.code in self.conflicts:
            raise ValueError(f"setting {self.code} cannot depend on or conflict with itself")
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        object.__setattr__(self, "conflicts", tuple(self.conflicts))

    @property
    def is_writable(self) -> bool:
        """Whether the appliance accepts writes to this setting."""
        return self.access in (AccessMode.WRITE, AccessMode.READ_WRITE)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation, the inverse of from_dict."""
        data: dict[str, Any] = {
            "code": self.code,
            "name": self.name,
            "category": self.category.value,
            "type": self.type.value,
            "access": self.access.value,
            "range": self.range.to_dict() if self.range is not None else None,
        }
        if self.description:
            data["description"] = self.description
        if self.dependencies:
            data["dependencies"] = list(self.dependencies)
        if self.conflicts:
            data["conflicts"] = list(self.conflicts)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Setting":
        """Create a setting from its catalog document representation.

        Args:
            data: Mapping with code, name, category, type, access, range and
                optional description, dependencies and conflicts

        Returns:
            The parsed setting

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field holds an unsupported value
        """
        return cls(
            code=str(data["code"]),
            name=str(data["name"]),
            category=SettingCategory(data["category"]),
            type=SettingType(data["type"]),
            access=AccessMode(data["access"]),
            range=range_from_dict(data["range"]) if data.get("range") else None,
            description=data.get("description"),
            dependencies=tuple(data.get("dependencies") or ()),
            conflicts=tuple(data.get("conflicts") or ()),
        )


def range_from_dict(data: dict[str, Any]) -> SettingRange:
    """Build a range variant from its tagged document representation.

    Args:
        data: Mapping with a "type" tag of numeric, enum or boolean

    Returns:
        The matching range variant

    Raises:
        ValueError: If the tag is unknown
    """
    kind = data.get("type")
    if kind == "numeric":
        return NumericRange(
            min=float(data["min"]),
            max=float(data["max"]),
            step=float(data["step"]),
            default=float(data.get("default", data["min"])),
            unit=data.get("unit"),
        )
    if kind == "enum":
        options = {str(code): str(label) for code, label in data["options"].items()}
        return EnumRange(options=options, default=str(data.get("default", next(iter(options), ""))))
    if kind == "boolean":
        options = data.get("options", {})
        return BooleanRange(
            false_label=str(options.get("false", "Off")),
            true_label=str(options.get("true", "On")),
            default=bool(data.get("default", False)),
        )
    raise ValueError(f"Unknown range type: {kind!r}")
