"""
Domain interfaces (Ports) for zoneguard.

These abstract base classes define the contracts that rule implementations
must satisfy. They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zoneguard.domain.models import ImportEdge, Policy, RuleId, Violation


class RuleInterface(ABC):
    """
    Port for import boundary rules.

    Rules are stateless, deterministic functions of one edge and the policy.
    The same inputs always produce the same violations in the same order.
    """

    rule_id: "RuleId"

    @abstractmethod
    def evaluate(self, edge: "ImportEdge", policy: "Policy") -> tuple["Violation", ...]:
        """
        Evaluate one import edge.

        Args:
            edge: The import edge to check
            policy: The immutable policy of the current run

        Returns:
            Violations found for this edge (empty when the import is legal)
        """
        pass
