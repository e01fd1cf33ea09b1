"""
Policy evaluation engine.

Runs the rule set over import edges. The engine holds nothing but the
immutable policy and the rule instances, so edges are independent of each
other and may be evaluated on a thread pool.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from zoneguard.application.reporter import ViolationReporter
from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import ImportEdge, Policy, Violation
from zoneguard.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


class PolicyEngine:
    """
    Evaluates import edges against one policy.

    Example:
        engine = PolicyEngine(policy)
        edge = ImportEdge.create("/repo/src/ui/App.py", "../data/db")
        for violation in engine.evaluate(edge):
            print(violation.message)
    """

    def __init__(
        self,
        policy: Policy,
        rules: Sequence[RuleInterface] | None = None,
    ):
        """
        Args:
            policy: The validated policy for this run
            rules: Rules to apply, in order (default: all four boundary rules)
        """
        self.policy = policy
        self.rules: tuple[RuleInterface, ...] = (
            tuple(rules) if rules is not None else tuple(cls() for cls in DEFAULT_RULES)
        )

    def evaluate(self, edge: ImportEdge) -> tuple[Violation, ...]:
        """Evaluate one edge with every rule, in rule order."""
        violations: list[Violation] = []
        for rule in self.rules:
            violations.extend(rule.evaluate(edge, self.policy))
        if violations:
            logger.debug(
                "%s -> %s: %d violation(s)",
                edge.source_file,
                edge.import_specifier,
                len(violations),
            )
        return tuple(violations)

    def evaluate_all(
        self,
        edges: Iterable[ImportEdge],
        max_workers: int | None = None,
        reporter: ViolationReporter | None = None,
    ) -> ViolationReporter:
        """
        Evaluate a batch of edges.

        With ``max_workers`` > 1 the edges are spread over a thread pool.
        Results are still collected in edge order, so the output is the
        same as a sequential run.

        Args:
            edges: Edges in discovery order
            max_workers: Thread pool size (None or 1: evaluate sequentially)
            reporter: Existing reporter to append to (default: a new one)

        Returns:
            The reporter holding all violations
        """
        reporter = reporter if reporter is not None else ViolationReporter()
        edge_list = list(edges)
        already_reported = len(reporter)

        if max_workers is not None and max_workers > 1 and len(edge_list) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                for violations in pool.map(self.evaluate, edge_list):
                    reporter.extend(violations)
        else:
            for edge in edge_list:
                reporter.extend(self.evaluate(edge))

        logger.info(
            "Evaluated %d edge(s): %d violation(s)",
            len(edge_list),
            len(reporter) - already_reported,
        )
        return reporter


def evaluate(edge: ImportEdge, policy: Policy) -> tuple[Violation, ...]:
    """Evaluate one edge against a policy with the default rule set."""
    return PolicyEngine(policy).evaluate(edge)
