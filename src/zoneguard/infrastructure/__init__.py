"""
Infrastructure layer for zoneguard.

Adapters between the engine and the outside world: policy documents on
disk, edge files, and import extraction from Python sources.
"""

from zoneguard.infrastructure.edges import edge_from_record, load_edges
from zoneguard.infrastructure.policy_loader import build_policy, load_policy
from zoneguard.infrastructure.python_imports import (
    DEFAULT_EXCLUDE_DIRS,
    extract_import_edges,
    iter_python_files,
)

__all__ = [
    # Policy
    "build_policy",
    "load_policy",
    # Edge sources
    "edge_from_record",
    "load_edges",
    "extract_import_edges",
    "iter_python_files",
    "DEFAULT_EXCLUDE_DIRS",
]
