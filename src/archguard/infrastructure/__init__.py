"""
Infrastructure layer for archguard.

Contains adapters for external concerns (source analysis, policy files,
console reporting).
"""

from archguard.infrastructure.analysis import PythonSourceAnalyzer
from archguard.infrastructure.config import load_policy
from archguard.infrastructure.reporting import RichReporter

__all__ = [
    # Analysis
    "PythonSourceAnalyzer",
    # Configuration
    "load_policy",
    # Reporting
    "RichReporter",
]
