"""Settings validation service.

Domain service composing format, range, dependency and conflict checks
into per-setting and whole-configuration validation.
"""

import logging
from typing import Mapping

from domain.entities import SettingCatalog
from domain.interfaces import ISettingsValidator
from domain.value_objects import (
    BatchValidationResult,
    ValidationErrorKind,
    ValidationIssue,
    ValidationOptions,
    ValidationResult,
)

from .altherma_relationship_rules import default_relationship_rules
from .range_validator import RangeValidator
from .relationship_rules import RelationshipRuleTable
from .relationship_validator import RelationshipValidator
from .value_codec import ValueCodec

_LOGGER = logging.getLogger(__name__)


class SettingsValidator(ISettingsValidator):
    """Validate setting values against the catalog.

    Checks run in a fixed order and never short-circuit:
    1. Format: the wire value parses as the setting's type
    2. Range: the value lies in the declared domain
    3. Dependency: declared relations to other current values hold
    4. Conflict: group constraints hold in the prospective configuration

    The validator keeps no state between calls and may be shared.
    """

    def __init__(
        self,
        rule_table: RelationshipRuleTable | None = None,
        codec: ValueCodec | None = None,
        range_validator: RangeValidator | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            rule_table: Relationship rules. If None, uses the appliance defaults.
            codec: Format checker. If None, uses ValueCodec().
            range_validator: Range checker. If None, uses RangeValidator().
        """
        self._codec = codec or ValueCodec()
        self._range_validator = range_validator or RangeValidator()
        self._relationships = RelationshipValidator(
            rule_table if rule_table is not None else default_relationship_rules()
        )

    def validate_one(
        self,
        code: str,
        value: str,
        catalog: SettingCatalog,
        current_values: Mapping[str, str],
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """Validate a proposed value for one setting.

        Unknown codes always fail with a format error, even when
        allow_override is set.

        Args:
            code: Setting code
            value: Proposed wire value
            catalog: Settings catalog
            current_values: Current wire values of the configuration
            options: Optional validation switches

        Returns:
            Result listing every failed check
        """
        options = options or ValidationOptions()
        setting = catalog.get(code)
        if setting is None:
            return ValidationResult.from_issues(
                [ValidationIssue(kind=ValidationErrorKind.FORMAT, message=f"Unknown setting code: {code}")]
            )

        issues: list[ValidationIssue] = []

        format_issue = self._codec.check_format(value, setting)
        if format_issue:
            issues.append(format_issue)

        range_issue = self._range_validator.check_range(value, setting)
        if range_issue:
            issues.append(range_issue)

        if options.validate_dependencies:
            issues.extend(
                self._relationships.check_dependencies(code, value, catalog, current_values)
            )

        issues.extend(self._relationships.check_conflicts(code, value, catalog, current_values))

        if issues and options.allow_override:
            _LOGGER.debug("Override accepted %d issue(s) for %s=%s", len(issues), code, value)
        return ValidationResult.from_issues(issues, allow_override=options.allow_override)

    def validate_batch(
        self,
        values: Mapping[str, str],
        catalog: SettingCatalog,
        options: ValidationOptions | None = None,
    ) -> BatchValidationResult:
        """Validate every entry of a configuration against the same snapshot.

        Cross-field checks see the full candidate set at once, so the
        outcome does not depend on iteration order.

        Args:
            values: Candidate wire values keyed by setting code
            catalog: Settings catalog
            options: Optional validation switches

        Returns:
            Batch result containing the failing entries
        """
        snapshot = dict(values)
        errors: dict[str, ValidationResult] = {}
        for code, value in snapshot.items():
            result = self.validate_one(code, value, catalog, snapshot, options)
            if not result.is_valid:
                errors[code] = result

        if errors:
            _LOGGER.debug(
                "Batch validation failed for %d of %d setting(s): %s",
                len(errors), len(snapshot), sorted(errors),
            )
        return BatchValidationResult(is_valid=not errors, errors=errors)
