"""
Domain models for zone boundary enforcement.

These are pure data structures: the policy a run is evaluated against,
the import edges fed into the rules, and the violations they produce.
All models are immutable (frozen dataclasses) so a single Policy can be
shared across threads without synchronization.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from zoneguard.domain import paths

# =============================================================================
# POLICY RECORDS
# =============================================================================


@dataclass(frozen=True)
class Zone:
    """Named group of directory roots and the roots it may import from."""

    name: str
    paths: tuple[str, ...]  # Absolute roots belonging to the zone
    uses: tuple[str, ...] = ()  # Absolute roots the zone may import from

    @property
    def allowed_roots(self) -> tuple[str, ...]:
        """Effective allow-list: a zone may always import from itself."""
        return self.uses + self.paths


@dataclass(frozen=True)
class RestrictedPath:
    """A root that is off-limits except to importers under a whitelist root."""

    restricted_root: str
    whitelist: tuple[str, ...] = ()


@dataclass(frozen=True)
class PrivateFilePattern:
    """Basename regexes marking files private to their own directory."""

    regexes: tuple[re.Pattern[str], ...] = ()

    def first_match(self, filename: str) -> re.Pattern[str] | None:
        for regex in self.regexes:
            if regex.search(filename):
                return regex
        return None


@dataclass(frozen=True)
class ZonePrivateRule:
    """Files matching ``filename_regexps`` under ``src`` stay inside ``src``."""

    name: str
    src: tuple[str, ...]
    filename_regexps: tuple[re.Pattern[str], ...] = ()

    def matches_filename(self, filename: str) -> bool:
        return any(regex.search(filename) for regex in self.filename_regexps)


@dataclass(frozen=True)
class Policy:
    """
    Validated, in-memory policy for one evaluation run.

    Every path is already absolute and normalized against ``root``.
    Build it through ``zoneguard.infrastructure.policy_loader`` when
    starting from a configuration document.
    """

    root: str
    zones: tuple[Zone, ...] = ()
    restricted_paths: tuple[RestrictedPath, ...] = ()
    private_files: PrivateFilePattern = PrivateFilePattern()
    zone_private_rules: tuple[ZonePrivateRule, ...] = ()


# =============================================================================
# EDGES
# =============================================================================


@dataclass(frozen=True)
class SourceLocation:
    """Position of the import statement in the importing file (1-based line)."""

    line: int
    column: int = 0


@dataclass(frozen=True)
class ImportEdge:
    """One source file importing one path, prior to policy evaluation."""

    source_file: str
    import_specifier: str
    resolved_import_path: str
    location: SourceLocation | None = None

    @classmethod
    def create(
        cls,
        source_file: str,
        import_specifier: str,
        location: SourceLocation | None = None,
    ) -> "ImportEdge":
        """
        Build an edge, resolving the specifier against the importer's directory.

        Raises:
            ValueError: If ``source_file`` is not absolute
        """
        if not paths.is_absolute(source_file):
            raise ValueError(f"source_file must be absolute, got {source_file!r}")
        source = paths.normalize(paths.SEPARATOR, source_file)
        resolved = paths.normalize(paths.dirname(source), import_specifier)
        return cls(
            source_file=source,
            import_specifier=import_specifier,
            resolved_import_path=resolved,
            location=location,
        )


# =============================================================================
# VIOLATIONS
# =============================================================================


class RuleId(Enum):
    """Identifiers of the four boundary rules, in evaluation order."""

    CROSS_ZONE = "restrict-crosszone-import"
    RESTRICTED_PATH = "restricted-import"
    DIRECTORY_PRIVATE = "restricted-by-current-dir"
    ZONE_PRIVATE = "restricted-zone-private-import"


@dataclass(frozen=True)
class Violation:
    """One detected breach of one rule for one import edge."""

    rule_id: RuleId
    source_file: str
    import_specifier: str
    resolved_import_path: str
    zone_or_rule_name: str
    message: str
    location: SourceLocation | None = None

    @classmethod
    def for_edge(
        cls,
        rule_id: RuleId,
        edge: ImportEdge,
        zone_or_rule_name: str,
        message: str,
    ) -> "Violation":
        return cls(
            rule_id=rule_id,
            source_file=edge.source_file,
            import_specifier=edge.import_specifier,
            resolved_import_path=edge.resolved_import_path,
            zone_or_rule_name=zone_or_rule_name,
            message=message,
            location=edge.location,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule_id": self.rule_id.value,
            "source_file": self.source_file,
            "import_specifier": self.import_specifier,
            "resolved_import_path": self.resolved_import_path,
            "zone_or_rule_name": self.zone_or_rule_name,
            "message": self.message,
            "line": self.location.line if self.location else None,
            "column": self.location.column if self.location else None,
        }
