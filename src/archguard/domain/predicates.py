"""
Described predicates over units.

A predicate is a small expression tree (pattern match, union, external,
negation) paired with a human-readable description. Trees are immutable;
combining two predicates builds a new tree. `evaluate` interprets a tree
against a unit.
"""

from dataclasses import dataclass, replace
from typing import Self

from archguard.domain.models import Unit
from archguard.domain.patterns import PackagePattern


@dataclass(frozen=True)
class DescribedPredicate:
    """Base for all predicate nodes."""

    description: str

    def apply(self, unit: Unit) -> bool:
        return evaluate(self, unit)

    def as_(self, description: str) -> Self:
        """Same predicate, new description."""
        return replace(self, description=description)

    def or_(self, other: "DescribedPredicate") -> "AnyOf":
        return AnyOf.of(self, other)

    def negate(self) -> "Not":
        return Not(description=f"not {self.description}", operand=self)


@dataclass(frozen=True)
class ResideInAnyPackage(DescribedPredicate):
    """Unit namespace matches at least one package pattern."""

    patterns: tuple[PackagePattern, ...] = ()

    @classmethod
    def of(cls, *patterns: str) -> "ResideInAnyPackage":
        compiled = tuple(PackagePattern(p) for p in patterns)
        quoted = ", ".join(f"'{p}'" for p in patterns)
        return cls(description=f"reside in any package [{quoted}]", patterns=compiled)


@dataclass(frozen=True)
class AnyOf(DescribedPredicate):
    """Logical OR of its operands."""

    operands: tuple[DescribedPredicate, ...] = ()

    @classmethod
    def of(cls, left: DescribedPredicate, right: DescribedPredicate) -> "AnyOf":
        return cls(
            description=f"{left.description} or {right.description}",
            operands=(left, right),
        )


@dataclass(frozen=True)
class AreExternal(DescribedPredicate):
    """Unit has no analysable source or comes from an installed distribution."""

    description: str = "are external"


@dataclass(frozen=True)
class Not(DescribedPredicate):
    operand: DescribedPredicate | None = None


ARE_EXTERNAL = AreExternal()


def evaluate(predicate: DescribedPredicate, unit: Unit) -> bool:
    """Interpret a predicate tree against a unit."""
    match predicate:
        case ResideInAnyPackage(patterns=patterns):
            namespace = unit.namespace
            return any(p.matches(namespace) for p in patterns)
        case AnyOf(operands=operands):
            return any(evaluate(op, unit) for op in operands)
        case AreExternal():
            return unit.is_external
        case Not(operand=operand) if operand is not None:
            return not evaluate(operand, unit)
    raise TypeError(f"Cannot evaluate predicate {predicate!r}")
