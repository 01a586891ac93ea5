"""
archguard: module dependency policies for Python code bases.

Declare named modules by package pattern, say which modules each may depend
on, and fail when an import crosses a boundary the policy does not allow.

Example:
    from archguard import PythonSourceAnalyzer, define_module

    core = define_module("Core", "..util..", "..annotation..")
    web = define_module("Web", "..web..")

    graph = PythonSourceAnalyzer("src").analyze()
    web.allow(core).allow_external().as_rule().assert_applies(graph)
"""

__version__ = "0.1.0"

# Application layer (module registry and checking)
from archguard.application.checker import DependencyChecker
from archguard.application.module import Module, define_module
from archguard.application.policy import ArchitecturePolicy, ModuleSpec
from archguard.application.rule import Rule, check

# Domain exceptions
from archguard.domain.exceptions import (
    AnalysisError,
    ArchGuardError,
    ArchitectureViolationError,
    ConfigurationError,
)

# Domain interfaces (for custom analysers and reporters)
from archguard.domain.interfaces import CodeAnalyzerInterface, ReporterInterface

# Domain models
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

# Infrastructure (explicit import encouraged for dependency injection)
from archguard.infrastructure.analysis import PythonSourceAnalyzer
from archguard.infrastructure.config import load_policy

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Origin",
    "SourceFile",
    "SourceLocation",
    "Reference",
    "Unit",
    "UnitGraph",
    "Violation",
    "EvaluationResult",
    # Domain interfaces
    "CodeAnalyzerInterface",
    "ReporterInterface",
    # Domain exceptions
    "ArchGuardError",
    "ConfigurationError",
    "AnalysisError",
    "ArchitectureViolationError",
    # Application layer
    "Module",
    "define_module",
    "Rule",
    "check",
    "DependencyChecker",
    "ArchitecturePolicy",
    "ModuleSpec",
    # Infrastructure
    "PythonSourceAnalyzer",
    "load_policy",
]
