"""
Command line driver for zoneguard.

    zoneguard check --policy policy.json src/
    zoneguard check --policy policy.json --edges edges.jsonl --format jsonl
    zoneguard validate-policy policy.json

Exit codes: 0 clean, 1 violations found, 2 invalid configuration or input.
Unparseable sources are reported and skipped; the run still exits 2.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from zoneguard import __version__
from zoneguard.application.engine import PolicyEngine
from zoneguard.console import (
    console,
    print_error,
    print_policy_info,
    print_summary,
    print_violations,
)
from zoneguard.domain import paths
from zoneguard.domain.exceptions import SourceParseError, ZoneguardError
from zoneguard.domain.models import ImportEdge
from zoneguard.infrastructure.edges import load_edges
from zoneguard.infrastructure.policy_loader import load_policy
from zoneguard.infrastructure.python_imports import (
    extract_import_edges,
    iter_python_files,
)
from zoneguard.logging_setup import setup_logging

logger = logging.getLogger("zoneguard.cli")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _absolute_root(root: str | None) -> str:
    return paths.to_posix(os.path.abspath(root if root else os.getcwd()))


def _collect_edges(
    sources: tuple[str, ...],
    edges_file: str | None,
    root: str,
    package_root: str | None,
) -> tuple[list[ImportEdge], list[SourceParseError]]:
    """Edges from the edge file and every parseable source, plus parse failures."""
    edges: list[ImportEdge] = []
    if edges_file:
        edges.extend(load_edges(Path(edges_file), root))

    failures: list[SourceParseError] = []
    source_paths = [Path(os.path.abspath(s)) for s in sources]
    for source_path in iter_python_files(source_paths):
        try:
            file_edges = extract_import_edges(
                source_path, package_root=package_root or root
            )
        except SourceParseError as e:
            logger.info("Skipping %s", e)
            failures.append(e)
            continue
        logger.debug("%s: %d import(s)", source_path, len(file_edges))
        edges.extend(file_edges)
    return edges, failures


@click.group()
@click.version_option(__version__, prog_name="zoneguard")
def main() -> None:
    """Enforce import boundaries between the directories of a codebase."""


@main.command()
@click.argument("sources", nargs=-1, type=click.Path(exists=True))
@click.option(
    "--policy",
    "policy_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the policy JSON document",
)
@click.option(
    "--root",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory policy patterns are resolved against (default: cwd)",
)
@click.option(
    "--edges",
    "edges_file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON / JSON-lines file of pre-extracted import edges",
)
@click.option(
    "--package-root",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory absolute Python imports live under (default: --root)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "jsonl"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--workers",
    default=1,
    type=click.IntRange(min=1),
    show_default=True,
    help="Evaluate edges on a thread pool of this size",
)
@click.option(
    "--log-file",
    default=None,
    type=click.Path(),
    help="Path to log file",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose (DEBUG) logging to stderr",
)
def check(
    sources: tuple[str, ...],
    policy_file: str,
    root: str | None,
    edges_file: str | None,
    package_root: str | None,
    output_format: str,
    workers: int,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Check the imports of SOURCES (files or directories) against a policy."""
    setup_logging(verbose=verbose, log_file=log_file)
    base = _absolute_root(root)
    resolved_package_root = _absolute_root(package_root) if package_root else None

    try:
        policy = load_policy(Path(policy_file), root=base)
        edges, failures = _collect_edges(
            sources, edges_file, base, resolved_package_root
        )
    except ZoneguardError as e:
        print_error(str(e), hint="Fix the policy or input files and re-run.")
        sys.exit(EXIT_ERROR)

    if not edges:
        logger.warning("No import edges to check")

    reporter = PolicyEngine(policy).evaluate_all(edges, max_workers=workers)

    if output_format == "jsonl":
        if reporter.has_violations:
            click.echo(reporter.to_jsonl())
    else:
        if reporter.has_violations:
            print_violations(reporter.violations, policy.root)
        print_summary(reporter.by_rule(), len(edges))

    if failures:
        print_error(
            "\n".join(str(e) for e in failures),
            hint=f"{len(failures)} file(s) were not checked.",
        )
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_VIOLATIONS if reporter.has_violations else EXIT_OK)


@main.command("validate-policy")
@click.argument("policy_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--root",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory policy patterns are resolved against (default: cwd)",
)
def validate_policy_command(policy_file: str, root: str | None) -> None:
    """Load and validate POLICY_FILE without checking any imports."""
    try:
        policy = load_policy(Path(policy_file), root=_absolute_root(root))
    except ZoneguardError as e:
        print_error(str(e))
        sys.exit(EXIT_ERROR)

    console.print(f"[green]Policy is valid:[/green] {policy_file}")
    print_policy_info(policy)


if __name__ == "__main__":
    main()
