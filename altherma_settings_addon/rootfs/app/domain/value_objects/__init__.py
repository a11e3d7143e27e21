"""Value objects for the settings domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .optimization import (
    Impact,
    OptimizationContext,
    OptimizationReport,
    OptimizationSuggestion,
    OptimizationThresholds,
    Priority,
    SuggestionType,
    SynthesisResult,
    SystemMetrics,
    UserPreferences,
)
from .setting import AccessMode, Setting, SettingCategory, SettingType, range_from_dict
from .setting_range import BooleanRange, EnumRange, NumericRange, SettingRange, encode_number
from .validation_result import (
    BatchValidationResult,
    ValidationErrorKind,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)

__all__ = [
    "AccessMode",
    "BatchValidationResult",
    "BooleanRange",
    "EnumRange",
    "Impact",
    "NumericRange",
    "OptimizationContext",
    "OptimizationReport",
    "OptimizationSuggestion",
    "OptimizationThresholds",
    "Priority",
    "Setting",
    "SettingCategory",
    "SettingRange",
    "SettingType",
    "SuggestionType",
    "SynthesisResult",
    "SystemMetrics",
    "UserPreferences",
    "ValidationErrorKind",
    "ValidationIssue",
    "ValidationOptions",
    "ValidationResult",
    "encode_number",
    "range_from_dict",
]
