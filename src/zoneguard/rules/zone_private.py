"""
Zone-private import rule.

Generalizes the directory-private rule: the scope a private file may be
imported from is an explicit set of ``src`` roots rather than its own
directory, so a file can be private to a logical module spanning several
directories.
"""

from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import ImportEdge, Policy, RuleId, Violation
from zoneguard.domain.paths import basename, is_ancestor_or_self


class ZonePrivateImportRule(RuleInterface):
    """Flags zone-private files imported from outside their ``src`` scope."""

    rule_id = RuleId.ZONE_PRIVATE

    MESSAGE = "Import '{target}' goes beyond the directories of private scope '{name}'."

    def evaluate(self, edge: ImportEdge, policy: Policy) -> tuple[Violation, ...]:
        filename = basename(edge.resolved_import_path)
        violations = []
        for rule in policy.zone_private_rules:
            if not rule.matches_filename(filename):
                continue
            importer_inside = any(
                is_ancestor_or_self(root, edge.source_file) for root in rule.src
            )
            # One report per src root holding the target, as roots may overlap.
            for root in rule.src:
                if not is_ancestor_or_self(root, edge.resolved_import_path):
                    continue
                if importer_inside:
                    continue
                violations.append(
                    Violation.for_edge(
                        self.rule_id,
                        edge,
                        zone_or_rule_name=rule.name,
                        message=self.MESSAGE.format(
                            target=edge.resolved_import_path, name=rule.name
                        ),
                    )
                )
        return tuple(violations)
