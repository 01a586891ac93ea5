"""
Domain models for archguard.

The unit graph is an immutable snapshot produced by an analyser and consumed by
rules. All models are frozen dataclasses so a checking pass can never alter the
graph it inspects.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

# =============================================================================
# UNITS AND REFERENCES
# =============================================================================


class Origin(Enum):
    """Where a unit comes from."""

    PROJECT = "project"  # The analysed source tree
    PACKAGED = "packaged"  # Installed distribution (site-packages, wheel, egg)
    STDLIB = "stdlib"  # Python standard library
    UNRESOLVED = "unresolved"  # Referenced but not located anywhere


@dataclass(frozen=True)
class SourceFile:
    """Analysable source backing a unit."""

    path: str  # Path relative to the analysed root
    uri: str  # Absolute file URI


@dataclass(frozen=True)
class SourceLocation:
    """Position of a reference, used only for reporting."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"({self.path}:{self.line})"


@dataclass(frozen=True)
class Reference:
    """Dependency edge: one import from a source unit to a target unit."""

    source: str  # Dotted name of the importing unit
    target: str  # Dotted name of the imported unit
    location: SourceLocation


@dataclass(frozen=True)
class Unit:
    """
    A single Python module in the unit graph.

    Units without source are stubs created for import targets outside the
    analysed tree.
    """

    name: str
    source: SourceFile | None = None
    origin: Origin = Origin.PROJECT
    references: tuple[Reference, ...] = ()

    @property
    def namespace(self) -> str:
        """Dotted name matched against package patterns."""
        return self.name

    @property
    def has_source(self) -> bool:
        return self.source is not None

    @property
    def is_external(self) -> bool:
        """No analysable source, or shipped as an installed distribution."""
        return not self.has_source or self.origin is Origin.PACKAGED

    @classmethod
    def stub(cls, name: str, origin: Origin = Origin.UNRESOLVED) -> "Unit":
        return cls(name=name, source=None, origin=origin)


@dataclass(frozen=True)
class UnitGraph:
    """
    Immutable snapshot of analysed units.

    Iteration is in sorted unit-name order. Looking up a name the graph does
    not know yields a stub, so every reference target resolves to a unit.
    """

    units: tuple[Unit, ...] = ()
    _index: Mapping[str, Unit] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.units, key=lambda u: u.name))
        index: dict[str, Unit] = {}
        for unit in ordered:
            if unit.name in index:
                raise ValueError(f"Duplicate unit in graph: {unit.name}")
            index[unit.name] = unit
        object.__setattr__(self, "units", ordered)
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def get(self, name: str) -> Unit:
        return self._index.get(name) or Unit.stub(name)

    @property
    def references(self) -> tuple[Reference, ...]:
        return tuple(ref for unit in self.units for ref in unit.references)


# =============================================================================
# CHECK RESULTS
# =============================================================================


@dataclass(frozen=True)
class Violation:
    """An access whose target is not permitted by the rule."""

    source_unit: str
    target_unit: str
    location: SourceLocation
    rule_description: str

    @property
    def message(self) -> str:
        return f"module {self.source_unit} imports {self.target_unit} in {self.location}"

    def sort_key(self) -> tuple[str, str, int, str]:
        return (
            self.source_unit,
            self.location.path,
            self.location.line,
            self.target_unit,
        )


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one rule against one unit graph."""

    rule_description: str
    violations: tuple[Violation, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.violations
