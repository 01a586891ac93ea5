"""
Domain interfaces (Ports) for archguard.

The checker only needs a unit graph; where it comes from and where results go
are adapters behind these ports.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archguard.domain.models import EvaluationResult, UnitGraph


class CodeAnalyzerInterface(ABC):
    """
    Port for code analysis.

    Implementations read a code base and produce the unit graph: every unit
    with its outgoing references, source availability and origin.
    """

    @abstractmethod
    def analyze(self) -> "UnitGraph":
        """
        Build a fresh unit graph.

        Returns:
            Immutable snapshot of the analysed units

        Raises:
            AnalysisError: If part of the code base cannot be analysed
        """
        pass


class ReporterInterface(ABC):
    """Port for presenting evaluation results."""

    @abstractmethod
    def report(self, results: "Sequence[EvaluationResult]") -> None:
        """
        Present the outcome of a checking pass.

        Args:
            results: One result per evaluated rule, in rule order
        """
        pass
