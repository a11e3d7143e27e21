"""Infrastructure adapters for the settings engine.

These adapters implement domain interfaces using external resources
like the file system.
"""

from .json_catalog_reader import JsonSettingCatalogReader

__all__ = [
    "JsonSettingCatalogReader",
]
