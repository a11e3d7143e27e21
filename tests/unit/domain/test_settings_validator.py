"""Tests for the settings validation service."""

from domain.services import RelationshipRuleTable, SettingsValidator
from domain.value_objects import ValidationErrorKind, ValidationOptions


class TestValidateOne:
    """Tests for single-setting validation."""

    def setup_method(self) -> None:
        self.validator = SettingsValidator()

    def test_valid_value(self, catalog) -> None:
        """Test that a well-formed in-range value is valid."""
        result = self.validator.validate_one("1-02", "45", catalog, {})
        assert result.is_valid is True
        assert result.errors == ()

    def test_unknown_code(self, catalog) -> None:
        """Test that unknown codes fail with a format error naming the code."""
        result = self.validator.validate_one("Z-99", "1", catalog, {})
        assert result.is_valid is False
        assert result.has_error(ValidationErrorKind.FORMAT)
        assert result.errors[0].message == "Unknown setting code: Z-99"

    def test_unknown_code_cannot_be_overridden(self, catalog) -> None:
        """Test that allow_override does not accept unknown codes."""
        result = self.validator.validate_one(
            "Z-99", "1", catalog, {}, ValidationOptions(allow_override=True)
        )
        assert result.is_valid is False
        assert result.overridden is False

    def test_dependency_violation(self, catalog) -> None:
        """Test that a low ambient point above the high point is rejected."""
        result = self.validator.validate_one("1-00", "10", catalog, {"1-01": "5"})
        assert result.is_valid is False
        assert result.has_error(ValidationErrorKind.DEPENDENCY)

    def test_dependency_satisfied(self, catalog) -> None:
        """Test that a low ambient point below the high point is accepted."""
        result = self.validator.validate_one("1-00", "0", catalog, {"1-01": "5"})
        assert result.is_valid is True

    def test_conflict_violation(self, catalog) -> None:
        """Test that a minimum above the maximum heating temperature is rejected."""
        result = self.validator.validate_one("9-01", "50", catalog, {"9-00": "45"})
        assert result.is_valid is False
        assert result.has_error(ValidationErrorKind.CONFLICT)

    def test_all_errors_are_collected(self, catalog) -> None:
        """Test that checks do not short-circuit and keep their order."""
        result = self.validator.validate_one("1-00", "30", catalog, {"1-01": "5"})
        assert [issue.kind for issue in result.errors] == [
            ValidationErrorKind.RANGE,
            ValidationErrorKind.DEPENDENCY,
        ]

    def test_invalid_option_is_format_and_range_error(self, catalog) -> None:
        """Test that an undeclared enum value fails both the format and range checks."""
        result = self.validator.validate_one("F-0D", "5", catalog, {})
        assert [issue.kind for issue in result.errors] == [
            ValidationErrorKind.FORMAT,
            ValidationErrorKind.RANGE,
        ]

    def test_override_accepts_invalid_value(self, catalog) -> None:
        """Test that allow_override accepts the value and keeps the errors."""
        result = self.validator.validate_one(
            "9-01", "50", catalog, {"9-00": "45"}, ValidationOptions(allow_override=True)
        )
        assert result.is_valid is True
        assert result.overridden is True
        assert result.has_error(ValidationErrorKind.CONFLICT)

    def test_dependencies_can_be_skipped(self, catalog) -> None:
        """Test that validate_dependencies=False disables dependency rules only."""
        options = ValidationOptions(validate_dependencies=False)
        assert self.validator.validate_one("1-00", "10", catalog, {"1-01": "5"}, options).is_valid
        result = self.validator.validate_one("9-01", "30", catalog, {"9-00": "25"}, options)
        assert result.has_error(ValidationErrorKind.CONFLICT)

    def test_custom_rule_table(self, catalog) -> None:
        """Test that relationship checks come from the supplied rule table."""
        validator = SettingsValidator(rule_table=RelationshipRuleTable())
        assert validator.validate_one("1-00", "10", catalog, {"1-01": "5"}).is_valid

    def test_revalidating_valid_configuration(self, catalog, valid_configuration) -> None:
        """Test that every value of a valid configuration validates against itself."""
        for code, value in valid_configuration.items():
            result = self.validator.validate_one(code, value, catalog, valid_configuration)
            assert result.is_valid, (code, result.errors)
            assert result.errors == ()


class TestValidateBatch:
    """Tests for whole-configuration validation."""

    def setup_method(self) -> None:
        self.validator = SettingsValidator()

    def test_valid_configuration(self, catalog, valid_configuration) -> None:
        """Test that a valid configuration passes batch validation."""
        result = self.validator.validate_batch(valid_configuration, catalog)
        assert result.is_valid is True
        assert dict(result.errors) == {}

    def test_cross_field_errors_reported_on_both_sides(self, catalog) -> None:
        """Test that both members of a violated pair are reported."""
        result = self.validator.validate_batch({"9-00": "45", "9-01": "50"}, catalog)
        assert result.is_valid is False
        assert set(result.errors) == {"9-00", "9-01"}
        assert result.errors["9-00"].has_error(ValidationErrorKind.CONFLICT)

    def test_order_independent(self, catalog) -> None:
        """Test that the result does not depend on entry order."""
        values = {"1-00": "10", "1-01": "5", "F-0D": "9"}
        reversed_values = dict(reversed(list(values.items())))
        forward = self.validator.validate_batch(values, catalog)
        backward = self.validator.validate_batch(reversed_values, catalog)
        assert set(forward.errors) == set(backward.errors) == {"1-00", "1-01", "F-0D"}

    def test_unknown_code_in_batch(self, catalog) -> None:
        """Test that unknown codes fail the batch."""
        result = self.validator.validate_batch({"Z-99": "1"}, catalog)
        assert result.is_valid is False
        assert "Z-99" in result.errors

    def test_does_not_mutate_input(self, catalog, valid_configuration) -> None:
        """Test that batch validation leaves the input untouched."""
        snapshot = dict(valid_configuration)
        self.validator.validate_batch(valid_configuration, catalog)
        assert valid_configuration == snapshot
