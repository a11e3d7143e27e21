"""Settings validator interface.

Contract for validating setting values against the settings catalog.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from domain.entities import SettingCatalog
from domain.value_objects import BatchValidationResult, ValidationOptions, ValidationResult


class ISettingsValidator(ABC):
    """Contract for per-setting and whole-configuration validation.

    Implementations hold no mutable state between calls and never
    mutate the catalog or the supplied values.
    """

    @abstractmethod
    def validate_one(
        self,
        code: str,
        value: str,
        catalog: SettingCatalog,
        current_values: Mapping[str, str],
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """Validate a proposed value for one setting.

        Args:
            code: Setting code
            value: Proposed wire value
            catalog: Settings catalog
            current_values: Current wire values of the other settings
            options: Optional validation switches

        Returns:
            Result listing every failed check
        """
        pass

    @abstractmethod
    def validate_batch(
        self,
        values: Mapping[str, str],
        catalog: SettingCatalog,
        options: ValidationOptions | None = None,
    ) -> BatchValidationResult:
        """Validate a whole configuration against itself.

        Args:
            values: Candidate wire values keyed by setting code
            catalog: Settings catalog
            options: Optional validation switches

        Returns:
            Batch result with the failing entries
        """
        pass
