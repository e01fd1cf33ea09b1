"""
Ordered violation collection.

Violations keep the order they were added in: edge discovery order first,
then rule evaluation order within an edge.
"""

import json
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any

from zoneguard.domain.models import RuleId, Violation


class ViolationReporter:
    """Append-only, ordered sink for violations."""

    def __init__(self, violations: Iterable[Violation] = ()) -> None:
        self._violations: list[Violation] = list(violations)

    def add(self, violation: Violation) -> None:
        self._violations.append(violation)

    def extend(self, violations: Iterable[Violation]) -> None:
        self._violations.extend(violations)

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    @property
    def has_violations(self) -> bool:
        return bool(self._violations)

    def by_rule(self) -> dict[RuleId, int]:
        """Violation count per rule, listing every rule (zero included)."""
        counts = Counter(v.rule_id for v in self._violations)
        return {rule_id: counts.get(rule_id, 0) for rule_id in RuleId}

    def to_dicts(self) -> list[dict[str, Any]]:
        return [v.to_dict() for v in self._violations]

    def to_jsonl(self) -> str:
        return "\n".join(
            json.dumps(d, ensure_ascii=False, sort_keys=True) for d in self.to_dicts()
        )

    def __len__(self) -> int:
        return len(self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(tuple(self._violations))
