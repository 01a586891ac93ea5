"""Rich console utilities for the archguard CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from archguard.application.policy import ArchitecturePolicy

# Shared console instances
console = Console()
error_console = Console(stderr=True)


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_header(title: str, subtitle: str | None = None) -> None:
    """Print a styled header panel."""
    content = Text(title, style="bold blue")
    if subtitle:
        content.append(f"\n{subtitle}", style="dim")
    console.print(Panel(content, expand=False))


def print_modules(policy: ArchitecturePolicy) -> None:
    """Print the module table of a policy."""
    table = Table(show_header=True, box=None)
    table.add_column("Module", style="cyan")
    table.add_column("Packages")
    table.add_column("May depend on", style="magenta")

    for spec in policy.modules:
        targets = list(spec.allow)
        if spec.allow_external:
            targets.append("(external)")
        table.add_row(spec.name, escape(", ".join(spec.packages)), ", ".join(targets) or "-")

    console.print(table)
