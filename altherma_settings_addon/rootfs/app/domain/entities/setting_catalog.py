"""Setting Catalog entity.

Domain entity holding the read-only catalog of appliance settings.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from domain.exceptions import CatalogError
from domain.value_objects import Setting, SettingCategory, SettingType


class SettingCatalog(Mapping[str, Setting]):
    """Immutable mapping from setting code to setting definition.

    The catalog is produced by an external parser and borrowed by the
    validation and optimization services for the duration of a call.
    """

    def __init__(self, settings: Iterable[Setting] = ()) -> None:
        """Initialize the catalog.

        Args:
            settings: Setting definitions, each with a unique code

        Raises:
            CatalogError: If two settings share the same code
        """
        by_code: dict[str, Setting] = {}
        for setting in settings:
            if setting.code in by_code:
                raise CatalogError(f"Duplicate setting code in catalog: {setting.code}")
            by_code[setting.code] = setting
        self._settings = MappingProxyType(by_code)

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Setting]) -> "SettingCatalog":
        """Build a catalog from an existing code -> setting mapping.

        Raises:
            CatalogError: If a key does not match its setting's code
        """
        for code, setting in settings.items():
            if code != setting.code:
                raise CatalogError(
                    f"Catalog key {code!r} does not match setting code {setting.code!r}"
                )
        return cls(settings.values())

    def __getitem__(self, code: str) -> Setting:
        return self._settings[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __repr__(self) -> str:
        return f"SettingCatalog({len(self)} settings)"

    def by_category(self, category: SettingCategory) -> list[Setting]:
        """Return the settings of a functional zone, in catalog order."""
        return [s for s in self._settings.values() if s.category == category]

    def by_type(self, setting_type: SettingType) -> list[Setting]:
        """Return the settings of a given value type, in catalog order."""
        return [s for s in self._settings.values() if s.type == setting_type]

