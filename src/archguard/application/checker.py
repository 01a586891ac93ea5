"""
DependencyChecker: evaluates a set of rules against one unit graph.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from archguard.application.rule import Rule
from archguard.domain.models import EvaluationResult, UnitGraph

logger = logging.getLogger(__name__)


class DependencyChecker:
    """
    Runs every rule over the same immutable graph.

    Rules share no mutable state, so they can be evaluated in parallel.
    Results always come back in rule order.
    """

    def __init__(self, rules: Iterable[Rule], max_workers: int | None = None):
        """
        Args:
            rules: Rules to evaluate
            max_workers: Thread pool size; None or 1 evaluates sequentially
        """
        self._rules: tuple[Rule, ...] = tuple(rules)
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._max_workers = max_workers

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def run(self, graph: UnitGraph) -> list[EvaluationResult]:
        """
        Evaluate all rules.

        Args:
            graph: Analysed unit graph

        Returns:
            One EvaluationResult per rule, in rule order
        """
        logger.debug(
            "Checking %d rule(s) against %d unit(s)", len(self._rules), len(graph)
        )
        if self._max_workers is None or self._max_workers == 1:
            results = [rule.evaluate(graph) for rule in self._rules]
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                results = list(pool.map(lambda rule: rule.evaluate(graph), self._rules))

        for result in results:
            if result.passed:
                logger.debug("PASS %s", result.rule_description)
            else:
                logger.info(
                    "FAIL %s (%d violation(s))",
                    result.rule_description,
                    len(result.violations),
                )
        return results

    @staticmethod
    def total_violations(results: Sequence[EvaluationResult]) -> int:
        return sum(len(r.violations) for r in results)
