"""
Rule: a frozen membership/allowed-dependency pair that can be checked.

Checking is a pure pass over an immutable unit graph. Disallowed accesses are
yielded as Violation values; they are only raised when the caller asks for it
via assert_applies.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from archguard.domain.exceptions import ArchitectureViolationError
from archguard.domain.models import EvaluationResult, Unit, UnitGraph, Violation
from archguard.domain.predicates import DescribedPredicate


def _as_graph(units: UnitGraph | Iterable[Unit]) -> UnitGraph:
    if isinstance(units, UnitGraph):
        return units
    return UnitGraph(units=tuple(units))


@dataclass(frozen=True)
class Rule:
    """Units that satisfy `belongs` may only access units that satisfy `allowed`."""

    belongs: DescribedPredicate
    allowed: DescribedPredicate

    @property
    def description(self) -> str:
        return (
            f"modules that {self.belongs.description} "
            f"should only access modules that {self.allowed.description}"
        )

    def check(self, units: UnitGraph | Iterable[Unit]) -> Iterator[Violation]:
        """Lazily yield every violation, in graph order."""
        return check(self, units)

    def evaluate(self, units: UnitGraph | Iterable[Unit]) -> EvaluationResult:
        """Collect all violations, sorted by source unit then location."""
        violations = sorted(self.check(units), key=Violation.sort_key)
        return EvaluationResult(
            rule_description=self.description, violations=tuple(violations)
        )

    def assert_applies(self, units: UnitGraph | Iterable[Unit]) -> None:
        """
        Raises:
            ArchitectureViolationError: Listing every violation, if any
        """
        result = self.evaluate(units)
        if not result.passed:
            raise ArchitectureViolationError(self.description, result.violations)


def check(rule: Rule, units: UnitGraph | Iterable[Unit]) -> Iterator[Violation]:
    """
    Evaluate a rule against analysed units.

    For each unit the rule applies to, every outgoing reference's target is
    tested against the allowed-dependency predicate. A target matching any
    allowed module passes; there is no most-specific match.

    Args:
        rule: The rule to evaluate
        units: The analysed units; targets missing from them are treated as
            stubs without source

    Yields:
        One Violation per disallowed reference
    """
    graph = _as_graph(units)
    description = rule.description
    for unit in graph:
        if not rule.belongs.apply(unit):
            continue
        for reference in unit.references:
            if rule.allowed.apply(graph.get(reference.target)):
                continue
            yield Violation(
                source_unit=unit.name,
                target_unit=reference.target,
                location=reference.location,
                rule_description=description,
            )
