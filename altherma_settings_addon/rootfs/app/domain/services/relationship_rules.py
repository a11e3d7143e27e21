"""Relationship rule records and rule table.

Dependency and conflict rules are plain data records registered in a
table indexed by trigger code. The appliance-specific rule bodies live
in altherma_relationship_rules; the validator only knows this contract.
"""

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping

from domain.entities import SettingCatalog

# Receives the prospective configuration (current values with the candidate
# value applied) and the catalog; returns a violation message or None.
RuleEvaluator = Callable[[Mapping[str, str], SettingCatalog], "str | None"]


class RuleKind(str, Enum):
    """Kind of relationship a rule expresses."""

    DEPENDENCY = "dependency"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class RelationshipRule:
    """A single dependency or conflict rule.

    Attributes:
        rule_id: Identifier, shared by all members of a conflict group
        trigger: Code whose change makes the rule run
        targets: Other codes the rule reads
        kind: Dependency or conflict
        evaluate: Pure function returning a violation message or None
    """

    rule_id: str
    trigger: str
    targets: tuple[str, ...]
    kind: RuleKind
    evaluate: RuleEvaluator

    def __post_init__(self) -> None:
        """Validate rule wiring."""
        if not self.rule_id:
            raise ValueError("rule_id cannot be empty")
        if not self.targets:
            raise ValueError(f"rule {self.rule_id} must have at least one target")
        if self.trigger in self.targets:
            raise ValueError(f"rule {self.rule_id} cannot target its own trigger {self.trigger}")
        object.__setattr__(self, "targets", tuple(self.targets))


def dependency_rule(
    rule_id: str, trigger: str, target: str, evaluate: RuleEvaluator
) -> RelationshipRule:
    """Create the dependency rule keyed by the (trigger, target) pair."""
    return RelationshipRule(
        rule_id=rule_id,
        trigger=trigger,
        targets=(target,),
        kind=RuleKind.DEPENDENCY,
        evaluate=evaluate,
    )


def conflict_group(
    rule_id: str, codes: Iterable[str], evaluate: RuleEvaluator
) -> list[RelationshipRule]:
    """Create one conflict rule per group member.

    Every member triggers the same group evaluation, with the other
    members as targets.
    """
    members = tuple(codes)
    if len(members) < 2:
        raise ValueError(f"conflict group {rule_id} needs at least two codes")
    return [
        RelationshipRule(
            rule_id=rule_id,
            trigger=code,
            targets=tuple(other for other in members if other != code),
            kind=RuleKind.CONFLICT,
            evaluate=evaluate,
        )
        for code in members
    ]


class RelationshipRuleTable:
    """Immutable registry of relationship rules indexed by trigger code.

    Lookups only return the rules that react to the changed code, so a
    single update costs O(rules touching that code).
    """

    def __init__(self, rules: Iterable[RelationshipRule] = ()) -> None:
        """Initialize the table.

        Args:
            rules: Rules to register
        """
        self._rules = tuple(rules)
        index: dict[tuple[str, RuleKind], list[RelationshipRule]] = defaultdict(list)
        for rule in self._rules:
            index[(rule.trigger, rule.kind)].append(rule)
        self._index = {key: tuple(value) for key, value in index.items()}

    def rules_for(self, code: str, kind: RuleKind) -> tuple[RelationshipRule, ...]:
        """Return the rules of a kind triggered by a code."""
        return self._index.get((code, kind), ())

    def extended(self, rules: Iterable[RelationshipRule]) -> "RelationshipRuleTable":
        """Return a new table with additional rules registered."""
        return RelationshipRuleTable((*self._rules, *rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)
