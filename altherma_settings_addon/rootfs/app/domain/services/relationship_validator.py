"""Relationship validator service.

Checks dependency and conflict rules between a changed setting and the
other values of the configuration.
"""

import logging
from typing import Mapping

from domain.entities import SettingCatalog
from domain.value_objects import ValidationErrorKind, ValidationIssue

from .relationship_rules import RelationshipRuleTable, RuleKind

_LOGGER = logging.getLogger(__name__)


class RelationshipValidator:
    """Evaluates the relationship rules relevant to one changed setting.

    The setting's declared dependencies and conflicts gate which rules
    are considered; the rule table supplies the rule bodies.
    """

    def __init__(self, rule_table: RelationshipRuleTable) -> None:
        """Initialize the validator.

        Args:
            rule_table: Registered dependency and conflict rules
        """
        self._rules = rule_table

    def check_dependencies(
        self,
        code: str,
        value: str,
        catalog: SettingCatalog,
        current_values: Mapping[str, str],
    ) -> list[ValidationIssue]:
        """Check the declared dependencies of a setting.

        For each declared dependency present in the catalog and in the
        current values, the rule keyed by (code, dependency) is evaluated.
        A rule targeting several declared dependencies is evaluated once.

        Args:
            code: Code of the changed setting
            value: Candidate wire value
            catalog: Settings catalog
            current_values: Current wire values

        Returns:
            Dependency issues, empty when every relation holds
        """
        setting = catalog.get(code)
        if setting is None or not setting.dependencies:
            return []

        prospective = {**current_values, code: value}
        candidates = self._rules.rules_for(code, RuleKind.DEPENDENCY)
        issues = []
        seen_rules = set()
        for dependency_code in setting.dependencies:
            if dependency_code not in catalog or dependency_code not in current_values:
                continue
            for rule in candidates:
                if dependency_code not in rule.targets or rule.rule_id in seen_rules:
                    continue
                seen_rules.add(rule.rule_id)
                message = rule.evaluate(prospective, catalog)
                if message:
                    _LOGGER.debug(
                        "Dependency rule %s rejected %s=%s: %s", rule.rule_id, code, value, message
                    )
                    issues.append(
                        ValidationIssue(kind=ValidationErrorKind.DEPENDENCY, message=message)
                    )
        return issues

    def check_conflicts(
        self,
        code: str,
        value: str,
        catalog: SettingCatalog,
        current_values: Mapping[str, str],
    ) -> list[ValidationIssue]:
        """Check the conflict groups a setting belongs to.

        The candidate value is applied to a copy of the current values so
        that group rules see the prospective configuration.

        Args:
            code: Code of the changed setting
            value: Candidate wire value
            catalog: Settings catalog
            current_values: Current wire values

        Returns:
            Conflict issues, empty when no group rule is violated
        """
        setting = catalog.get(code)
        if setting is None or not setting.conflicts:
            return []

        declared = set(setting.conflicts)
        prospective = {**current_values, code: value}
        issues = []
        seen_groups = set()
        for rule in self._rules.rules_for(code, RuleKind.CONFLICT):
            if rule.rule_id in seen_groups or not declared.intersection(rule.targets):
                continue
            seen_groups.add(rule.rule_id)
            message = rule.evaluate(prospective, catalog)
            if message:
                _LOGGER.debug(
                    "Conflict rule %s rejected %s=%s: %s", rule.rule_id, code, value, message
                )
                issues.append(ValidationIssue(kind=ValidationErrorKind.CONFLICT, message=message))
        return issues
