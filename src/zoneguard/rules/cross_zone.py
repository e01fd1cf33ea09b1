"""
Cross-zone import rule.

Each zone lists the roots it may import from. A file inside a zone may
only import paths under the zone's ``uses`` or its own ``paths``.
"""

from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import ImportEdge, Policy, RuleId, Violation
from zoneguard.domain.paths import is_ancestor_or_self, relative_to
from zoneguard.domain.zones import ZoneIndex


class CrossZoneImportRule(RuleInterface):
    """
    Flags imports that leave a zone's allowed roots.

    Opt-in per zone: files outside every zone are not checked. A file in
    several zones is checked against each of them independently, so one
    edge may produce one violation per failing zone.
    """

    rule_id = RuleId.CROSS_ZONE

    MESSAGE = "In zone '{zone}', importing from '{target}' is prohibited."

    def evaluate(self, edge: ImportEdge, policy: Policy) -> tuple[Violation, ...]:
        violations = []
        for zone in ZoneIndex.of(policy.zones).containing(edge.source_file):
            allowed = any(
                is_ancestor_or_self(root, edge.resolved_import_path)
                for root in zone.allowed_roots
            )
            if allowed:
                continue
            target = relative_to(policy.root, edge.resolved_import_path)
            violations.append(
                Violation.for_edge(
                    self.rule_id,
                    edge,
                    zone_or_rule_name=zone.name,
                    message=self.MESSAGE.format(zone=zone.name, target=target),
                )
            )
        return tuple(violations)
