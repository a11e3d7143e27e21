"""Domain entities for the settings engine.

Entities are objects with identity that encapsulate business rules and behavior.
"""

from .setting_catalog import SettingCatalog

__all__ = ["SettingCatalog"]
