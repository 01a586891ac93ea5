"""
Analysers: adapters that produce a unit graph from a code base.
"""

from archguard.infrastructure.analysis.origin import classify_external, is_installed_path
from archguard.infrastructure.analysis.python_source import PythonSourceAnalyzer

__all__ = [
    "PythonSourceAnalyzer",
    "classify_external",
    "is_installed_path",
]
