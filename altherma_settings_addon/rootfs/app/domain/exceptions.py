"""Settings engine exceptions.

Simple exception hierarchy for error handling. Validation failures are
never raised; they are returned as ValidationResult objects.
"""


class SettingsEngineError(Exception):
    """Base exception for the settings engine."""

    pass


class CatalogError(SettingsEngineError):
    """Settings catalog is malformed."""

    pass


class SynthesisError(SettingsEngineError):
    """Synthesized configuration failed validation.

    Attributes:
        validation: Batch validation result of the rejected configuration
    """

    def __init__(self, message: str, validation=None) -> None:
        super().__init__(message)
        self.validation = validation
