"""Rich console rendering for zoneguard results."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from zoneguard.domain import paths
from zoneguard.domain.models import Policy, RuleId, Violation

# Shared console instances
console = Console()
error_console = Console(stderr=True)


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def _location(violation: Violation, root: str) -> str:
    where = paths.relative_to(root, violation.source_file)
    if violation.location is not None:
        where += f":{violation.location.line}:{violation.location.column}"
    return where


def print_violations(violations: Sequence[Violation], root: str) -> None:
    """Print one table row per violation, in report order."""
    table = Table(show_header=True, box=None)
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Rule", style="magenta")
    table.add_column("Zone / rule", style="yellow")
    table.add_column("Message", style="red")

    for violation in violations:
        table.add_row(
            _location(violation, root),
            violation.rule_id.value,
            violation.zone_or_rule_name,
            violation.message,
        )
    console.print(table)


def print_summary(counts: dict[RuleId, int], edge_count: int) -> None:
    """Print per-rule counts and the overall verdict."""
    total = sum(counts.values())
    if total == 0:
        console.print(
            Panel(
                f"{edge_count} import(s) checked, no boundary violations",
                title="Success",
                border_style="green",
            )
        )
        return

    content = Text(f"{total} violation(s) in {edge_count} import(s)", style="bold red")
    for rule_id, count in counts.items():
        if count:
            content.append(f"\n{rule_id.value}: {count}", style="dim")
    console.print(Panel(content, title="Failed", border_style="red"))


def print_policy_info(policy: Policy) -> None:
    """Print a summary table of a loaded policy."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Root", policy.root)
    table.add_row("Zones", str(len(policy.zones)))
    table.add_row("Restricted paths", str(len(policy.restricted_paths)))
    table.add_row("Private file regexes", str(len(policy.private_files.regexes)))
    table.add_row("Zone-private rules", str(len(policy.zone_private_rules)))
    console.print(table)
