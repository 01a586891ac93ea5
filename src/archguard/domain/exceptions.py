"""
Domain exceptions for archguard.

Policy defects and analysis failures are raised. Architecture violations are
reported as values and only raised on request (see ArchitectureViolationError).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archguard.domain.models import Violation


class ArchGuardError(Exception):
    """Base class for all archguard errors."""


class ConfigurationError(ArchGuardError):
    """
    Raised when a policy declaration is malformed.

    Surfaced at policy-build time, before any checking happens.
    """


class AnalysisError(ArchGuardError):
    """Raised when a source file cannot be read or parsed."""

    def __init__(self, message: str, path: str):
        """
        Args:
            message: Human-readable error message
            path: The file that failed
        """
        super().__init__(message)
        self.path = path


class ArchitectureViolationError(AssertionError):
    """
    Raised by Rule.assert_applies when at least one access is not permitted.

    Subclasses AssertionError so pytest renders it as a test failure.
    """

    def __init__(self, rule_description: str, violations: tuple["Violation", ...]):
        """
        Args:
            rule_description: Description of the rule that failed
            violations: Every violation found, in report order
        """
        lines = [
            f"Architecture violated: Rule '{rule_description}' "
            f"was violated ({len(violations)} times):"
        ]
        lines.extend(v.message for v in violations)
        super().__init__("\n".join(lines))
        self.rule_description = rule_description
        self.violations = violations
