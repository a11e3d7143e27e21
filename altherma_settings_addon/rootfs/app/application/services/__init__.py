"""Application services for settings operations.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .settings_application_service import SettingsApplicationService

__all__ = [
    "SettingsApplicationService",
]
