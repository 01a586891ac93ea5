"""
Application layer for archguard.

Module registry, rules and the checking pass built on the domain predicates.
"""

from archguard.application.checker import DependencyChecker
from archguard.application.module import Module, ModuleCreator, define_module
from archguard.application.policy import ArchitecturePolicy, ModuleSpec
from archguard.application.rule import Rule, check

__all__ = [
    "Module",
    "ModuleCreator",
    "define_module",
    "Rule",
    "check",
    "DependencyChecker",
    "ArchitecturePolicy",
    "ModuleSpec",
]
