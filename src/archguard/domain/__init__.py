"""
Domain layer for archguard.

Contains the unit graph model, package patterns and predicates, with no
external dependencies.
"""

from archguard.domain.exceptions import (
    AnalysisError,
    ArchGuardError,
    ArchitectureViolationError,
    ConfigurationError,
)
from archguard.domain.interfaces import CodeAnalyzerInterface, ReporterInterface
from archguard.domain.models import (
    EvaluationResult,
    Origin,
    Reference,
    SourceFile,
    SourceLocation,
    Unit,
    UnitGraph,
    Violation,
)
from archguard.domain.patterns import PackagePattern, compile_pattern
from archguard.domain.predicates import (
    ARE_EXTERNAL,
    AnyOf,
    AreExternal,
    DescribedPredicate,
    Not,
    ResideInAnyPackage,
    evaluate,
)

__all__ = [
    # Models
    "Origin",
    "SourceFile",
    "SourceLocation",
    "Reference",
    "Unit",
    "UnitGraph",
    "Violation",
    "EvaluationResult",
    # Patterns and predicates
    "PackagePattern",
    "compile_pattern",
    "DescribedPredicate",
    "ResideInAnyPackage",
    "AnyOf",
    "AreExternal",
    "Not",
    "ARE_EXTERNAL",
    "evaluate",
    # Interfaces
    "CodeAnalyzerInterface",
    "ReporterInterface",
    # Exceptions
    "ArchGuardError",
    "ConfigurationError",
    "AnalysisError",
    "ArchitectureViolationError",
]
