"""
Domain layer for zoneguard.

Pure policy records, path arithmetic and the rule port. No dependencies
on the application or infrastructure layers.
"""

from zoneguard.domain.exceptions import (
    ConfigurationError,
    SourceParseError,
    ZoneguardError,
)
from zoneguard.domain.interfaces import RuleInterface
from zoneguard.domain.models import (
    ImportEdge,
    Policy,
    PrivateFilePattern,
    RestrictedPath,
    RuleId,
    SourceLocation,
    Violation,
    Zone,
    ZonePrivateRule,
)
from zoneguard.domain.zones import ZoneIndex, zones_containing

__all__ = [
    # Exceptions
    "ZoneguardError",
    "ConfigurationError",
    "SourceParseError",
    # Policy records
    "Zone",
    "RestrictedPath",
    "PrivateFilePattern",
    "ZonePrivateRule",
    "Policy",
    # Edges and results
    "SourceLocation",
    "ImportEdge",
    "RuleId",
    "Violation",
    # Zones
    "ZoneIndex",
    "zones_containing",
    # Ports
    "RuleInterface",
]
