"""Restricted path rule: a global deny over one root with whitelisted importers."""

from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import ImportEdge, Policy, RuleId, Violation
from zoneguard.domain.paths import is_ancestor_or_self, relative_to


class RestrictedPathImportRule(RuleInterface):
    """
    Flags imports of a restricted root from outside its whitelist.

    Independent of zone membership. Each configured entry is checked on
    its own and violations are attributed to the entry that matched.
    """

    rule_id = RuleId.RESTRICTED_PATH

    MESSAGE = (
        "Importing from '{restricted}' is prohibited here, "
        "since the current directory is not in its whitelist."
    )

    def evaluate(self, edge: ImportEdge, policy: Policy) -> tuple[Violation, ...]:
        violations = []
        for entry in policy.restricted_paths:
            if not is_ancestor_or_self(entry.restricted_root, edge.resolved_import_path):
                continue
            if any(is_ancestor_or_self(root, edge.source_file) for root in entry.whitelist):
                continue
            restricted = relative_to(policy.root, entry.restricted_root)
            violations.append(
                Violation.for_edge(
                    self.rule_id,
                    edge,
                    zone_or_rule_name=restricted,
                    message=self.MESSAGE.format(restricted=restricted),
                )
            )
        return tuple(violations)
