"""Setting catalog reader interface.

Contract for obtaining the pre-built settings catalog from a collaborator.
"""

from abc import ABC, abstractmethod

from domain.entities import SettingCatalog
from domain.value_objects import OptimizationThresholds


class ISettingCatalogReader(ABC):
    """Contract for loading the settings catalog."""

    @abstractmethod
    def load_catalog(self) -> SettingCatalog:
        """Load the settings catalog.

        Returns:
            The catalog of setting definitions

        Raises:
            CatalogError: If the catalog source is missing or malformed
        """
        pass

    @abstractmethod
    def load_thresholds(self) -> OptimizationThresholds:
        """Load the optimization tuning constants shipped with the catalog.

        Returns:
            Thresholds, defaults when the source does not override them
        """
        pass
