"""
Rich console reporter.

Renders one table of violations per failing rule, followed by a summary line.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from archguard.domain.interfaces import ReporterInterface
from archguard.domain.models import EvaluationResult


class RichReporter(ReporterInterface):
    """Writes evaluation results to a rich Console."""

    def __init__(self, console: Console | None = None, show_passed: bool = False):
        """
        Args:
            console: Target console (defaults to stdout)
            show_passed: Also list rules without violations
        """
        self.console = console or Console()
        self.show_passed = show_passed

    def report(self, results: Sequence[EvaluationResult]) -> None:
        for result in results:
            if result.passed:
                if self.show_passed:
                    self.console.print(
                        Text.assemble(("PASS ", "bold green"), result.rule_description)
                    )
                continue
            self.console.print(
                Text(
                    f"Rule '{result.rule_description}' was violated "
                    f"({len(result.violations)} times)",
                    style="bold red",
                )
            )
            self.console.print(self._violation_table(result))

        failed = [r for r in results if not r.passed]
        total = sum(len(r.violations) for r in failed)
        if failed:
            self.console.print(
                f"[bold red]{total} violation(s)[/bold red] in "
                f"{len(failed)} of {len(results)} rule(s)"
            )
        else:
            self.console.print(f"[bold green]All {len(results)} rule(s) passed[/bold green]")

    @staticmethod
    def _violation_table(result: EvaluationResult) -> Table:
        table = Table(show_header=True)
        table.add_column("Module", style="cyan")
        table.add_column("Imports", style="magenta")
        table.add_column("Location", style="yellow")
        for violation in result.violations:
            table.add_row(
                violation.source_unit, violation.target_unit, str(violation.location)
            )
        return table
