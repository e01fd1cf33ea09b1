"""
Import boundary rules.

Rules are stateless evaluators implementing ``RuleInterface``: each takes
one import edge plus the policy and returns zero or more violations.

Evaluation order is fixed by ``DEFAULT_RULES``:
- CrossZoneImportRule: zone ``uses`` allow-lists
- RestrictedPathImportRule: restricted roots with whitelisted importers
- DirectoryPrivateImportRule: files private to their directory
- ZonePrivateImportRule: files private to an explicit set of roots
"""

from zoneguard.rules.cross_zone import CrossZoneImportRule
from zoneguard.rules.directory_private import DirectoryPrivateImportRule
from zoneguard.rules.restricted_path import RestrictedPathImportRule
from zoneguard.rules.zone_private import ZonePrivateImportRule

DEFAULT_RULES = (
    CrossZoneImportRule,
    RestrictedPathImportRule,
    DirectoryPrivateImportRule,
    ZonePrivateImportRule,
)

__all__ = [
    "DEFAULT_RULES",
    "CrossZoneImportRule",
    "RestrictedPathImportRule",
    "DirectoryPrivateImportRule",
    "ZonePrivateImportRule",
]
