"""
archguard command line.

Usage:
    archguard check architecture.json --source src
    archguard modules architecture.json

Exit codes:
    0  no violations
    1  violations found
    2  configuration or analysis error
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

import click

from archguard import __version__
from archguard.application.checker import DependencyChecker
from archguard.cli.console import console, print_error, print_header, print_modules
from archguard.cli.logging_setup import setup_logging
from archguard.domain.exceptions import AnalysisError, ConfigurationError
from archguard.infrastructure.analysis import PythonSourceAnalyzer
from archguard.infrastructure.config import load_policy
from archguard.infrastructure.reporting import RichReporter

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

F = TypeVar("F", bound=Callable[..., Any])


def common_options(func: F) -> F:
    """
    Decorator adding common CLI options to a click command.

    Options added:
        --log-file: Path to log file
        -v/--verbose: Enable verbose logging
    """

    @click.option(
        "--log-file",
        default=None,
        type=click.Path(dir_okay=False),
        help="Path to log file",
    )
    @click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Enable verbose (DEBUG) logging to console",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


@click.group()
@click.version_option(__version__, prog_name="archguard")
def cli() -> None:
    """Enforce module dependency policies on Python code."""


@cli.command()
@click.argument("policy_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-s",
    "--source",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Source root to analyse (e.g. src)",
)
@click.option("--include-tests", is_flag=True, help="Also analyse test modules")
@click.option(
    "--no-type-checking",
    is_flag=True,
    help="Ignore imports guarded by 'if TYPE_CHECKING:'",
)
@click.option(
    "-j",
    "--jobs",
    default=1,
    type=click.IntRange(min=1),
    help="Evaluate rules in parallel (default: 1)",
)
@click.option("--show-passed", is_flag=True, help="List rules without violations")
@common_options
def check(
    policy_file: str,
    source: str,
    include_tests: bool,
    no_type_checking: bool,
    jobs: int,
    show_passed: bool,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Check SOURCE against the module policy in POLICY_FILE."""
    logger = setup_logging("archguard", log_file, verbose)

    try:
        policy = load_policy(Path(policy_file))
        analyzer = PythonSourceAnalyzer(
            source,
            include_tests=include_tests,
            include_type_checking=not no_type_checking,
        )
        graph = analyzer.analyze()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print_error(str(e), "Check that the policy file matches the policy schema.")
        sys.exit(EXIT_ERROR)
    except AnalysisError as e:
        logger.error(f"Analysis error: {e}")
        print_error(str(e), f"Fix or exclude {e.path} and run again.")
        sys.exit(EXIT_ERROR)

    print_header(f"archguard: {policy.name}", f"{len(graph)} unit(s) under {source}")
    results = DependencyChecker(policy.rules().values(), max_workers=jobs).run(graph)
    RichReporter(console, show_passed=show_passed).report(results)

    total = DependencyChecker.total_violations(results)
    logger.info(f"Finished: {total} violation(s)")
    sys.exit(EXIT_VIOLATIONS if total else EXIT_OK)


@cli.command()
@click.argument("policy_file", type=click.Path(exists=True, dir_okay=False))
@common_options
def modules(policy_file: str, log_file: str | None, verbose: bool) -> None:
    """Show the modules declared in POLICY_FILE."""
    logger = setup_logging("archguard", log_file, verbose)
    try:
        policy = load_policy(Path(policy_file))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print_error(str(e))
        sys.exit(EXIT_ERROR)

    print_header(f"archguard: {policy.name}")
    print_modules(policy)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
