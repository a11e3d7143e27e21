"""Domain interfaces for the settings engine.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .optimization_rule import IOptimizationRule
from .setting_catalog_reader import ISettingCatalogReader
from .settings_validator import ISettingsValidator

__all__ = [
    "IOptimizationRule",
    "ISettingCatalogReader",
    "ISettingsValidator",
]
