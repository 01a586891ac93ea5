"""
Module: a named group of units and the targets it may depend on.

Modules are immutable. Every builder call returns a new Module whose allowed
dependencies are a superset of the previous ones.

Example:
    core = define_module("Core", "..util..", "..annotation..")
    web = define_module("Web", "..web..")

    rule = web.allow(core).allow_external().as_rule()
    rule.assert_applies(graph)
"""

from archguard.application.rule import Rule
from archguard.domain.exceptions import ConfigurationError
from archguard.domain.predicates import (
    ARE_EXTERNAL,
    AnyOf,
    DescribedPredicate,
    ResideInAnyPackage,
)

ARE_ANY_OF = "are any of"


class Module:
    """
    Named module with membership and allowed-dependency predicates.

    A fresh module may depend on itself: its allowed predicate starts as its
    own membership predicate.
    """

    __slots__ = ("_name", "_belongs", "_allowed")

    def __init__(
        self,
        name: str,
        belongs: DescribedPredicate,
        allowed: DescribedPredicate | None = None,
    ):
        """
        Args:
            name: Unique module name
            belongs: Membership predicate
            allowed: Allowed-dependency predicate (defaults to membership)
        """
        if not name or not name.strip():
            raise ConfigurationError("Module name must not be empty")
        self._name = name
        self._belongs = belongs.as_(f"are '{name}'")
        self._allowed = allowed if allowed is not None else belongs.as_(ARE_ANY_OF)

    def __setattr__(self, key: str, value: object) -> None:
        if hasattr(self, "_allowed"):
            raise AttributeError(f"Module '{self._name}' is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self) -> str:
        return f"Module({self._name!r}, allowed={self._allowed.description!r})"

    @staticmethod
    def named(name: str) -> "ModuleCreator":
        """Start a two-step definition: Module.named("Web").identified_by("..web..")."""
        return ModuleCreator(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def belongs(self) -> DescribedPredicate:
        """Membership predicate."""
        return self._belongs

    @property
    def allowed(self) -> DescribedPredicate:
        """Allowed-dependency predicate."""
        return self._allowed

    def allow(self, other: "Module") -> "Module":
        """New module that may also depend on `other`."""
        current = self._allowed.description
        template = "{} {}" if current == ARE_ANY_OF else "{}, {}"
        description = template.format(current, other.name)
        return Module(
            self._name,
            self._belongs,
            self._allowed.or_(other.belongs).as_(description),
        )

    def allow_external(self) -> "Module":
        """New module that may also depend on external units."""
        return Module(self._name, self._belongs, AnyOf.of(self._allowed, ARE_EXTERNAL))

    def as_rule(self) -> Rule:
        """Freeze the current predicates into a checkable rule."""
        return Rule(belongs=self._belongs, allowed=self._allowed)


class ModuleCreator:
    """Holds a module name until its package patterns are supplied."""

    def __init__(self, name: str):
        self._name = name

    def identified_by(self, *packages: str) -> Module:
        """
        Create the module from package patterns.

        Raises:
            ConfigurationError: If the name or the pattern set is empty,
                or a pattern is malformed
        """
        if not self._name or not self._name.strip():
            raise ConfigurationError("Module name must not be empty")
        if not packages:
            raise ConfigurationError(
                f"Module '{self._name}' must be identified by at least one package"
            )
        return Module(self._name, ResideInAnyPackage.of(*packages))


def define_module(name: str, *packages: str) -> Module:
    """Create a module whose members reside in any of the given packages."""
    return Module.named(name).identified_by(*packages)
