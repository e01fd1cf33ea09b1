"""
zoneguard: import boundary enforcement between directories of a codebase.

A declarative policy (zones with allow-lists, restricted paths, private
files) is evaluated against import edges: a source file and the path it
imports. Each violated rule produces a structured Violation.

Example:
    from zoneguard import ImportEdge, PolicyEngine, build_policy

    policy = build_policy(
        {"zones": [{"name": "ui", "paths": ["src/ui"], "uses": ["src/shared"]}]},
        root="/repo",
    )
    engine = PolicyEngine(policy)
    edge = ImportEdge.create("/repo/src/ui/App.py", "../data/db")
    for violation in engine.evaluate(edge):
        print(violation.zone_or_rule_name, violation.message)
"""

# Application layer (orchestration)
from zoneguard.application.engine import PolicyEngine, evaluate
from zoneguard.application.reporter import ViolationReporter

# Domain exceptions
from zoneguard.domain.exceptions import (
    ConfigurationError,
    SourceParseError,
    ZoneguardError,
)

# Domain interfaces (for custom rules)
from zoneguard.domain.interfaces import RuleInterface

# Domain models
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

# Infrastructure (policy documents, edge sources)
from zoneguard.infrastructure.policy_loader import build_policy, load_policy

# Rules
from zoneguard.rules import (
    CrossZoneImportRule,
    DirectoryPrivateImportRule,
    RestrictedPathImportRule,
    ZonePrivateImportRule,
)

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Zone",
    "RestrictedPath",
    "PrivateFilePattern",
    "ZonePrivateRule",
    "Policy",
    "SourceLocation",
    "ImportEdge",
    "RuleId",
    "Violation",
    # Domain interfaces
    "RuleInterface",
    # Domain exceptions
    "ZoneguardError",
    "ConfigurationError",
    "SourceParseError",
    # Rules
    "CrossZoneImportRule",
    "RestrictedPathImportRule",
    "DirectoryPrivateImportRule",
    "ZonePrivateImportRule",
    # Application layer
    "PolicyEngine",
    "ViolationReporter",
    "evaluate",
    # Infrastructure
    "build_policy",
    "load_policy",
]
