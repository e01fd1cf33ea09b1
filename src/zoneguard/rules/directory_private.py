"""
Directory-private import rule.

A file whose basename matches one of the private-file regexes may only be
imported from its own directory or below it.
"""

from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import ImportEdge, Policy, RuleId, Violation
from zoneguard.domain.paths import basename, dirname, is_ancestor_or_self


class DirectoryPrivateImportRule(RuleInterface):
    """Flags private files imported from outside their directory's subtree."""

    rule_id = RuleId.DIRECTORY_PRIVATE

    MESSAGE = "'{specifier}' is private to its directory and cannot be imported from here."

    def evaluate(self, edge: ImportEdge, policy: Policy) -> tuple[Violation, ...]:
        regex = policy.private_files.first_match(basename(edge.resolved_import_path))
        if regex is None:
            return ()

        private_dir = dirname(edge.resolved_import_path)
        if is_ancestor_or_self(private_dir, dirname(edge.source_file)):
            return ()

        return (
            Violation.for_edge(
                self.rule_id,
                edge,
                zone_or_rule_name=regex.pattern,
                message=self.MESSAGE.format(specifier=edge.import_specifier),
            ),
        )
