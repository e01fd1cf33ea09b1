"""
Edge files: pre-extracted import edges produced by another tool.

Accepted formats are a JSON array of records or JSON lines, one record
per line. Each record needs ``source_file`` and ``import_specifier`` and
may carry ``line`` and ``column``.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from zoneguard.domain import paths
from zoneguard.domain.exceptions import ConfigurationError
from zoneguard.domain.models import ImportEdge, SourceLocation

logger = logging.getLogger(__name__)


def edge_from_record(record: Mapping[str, Any], root: str) -> ImportEdge:
    """
    Build an ImportEdge from one record.

    A relative ``source_file`` is taken relative to ``root``.

    Raises:
        ConfigurationError: If a required field is missing or the
            location is not numeric
    """
    missing = [f for f in ("source_file", "import_specifier") if not record.get(f)]
    if missing:
        raise ConfigurationError(f"edge record missing fields: {', '.join(missing)}")

    location = None
    if record.get("line") is not None:
        try:
            location = SourceLocation(
                line=int(record["line"]), column=int(record.get("column") or 0)
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"line and column must be integers, got "
                f"{record.get('line')!r} and {record.get('column')!r}",
                path="line",
            ) from e
    return ImportEdge.create(
        paths.normalize(root, str(record["source_file"])),
        str(record["import_specifier"]),
        location=location,
    )


def _iter_records(text: str, path: Path) -> Iterator[Any]:
    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            yield from json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        return

    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}:{line_no}: {e}") from e


def load_edges(path: Path, root: str) -> list[ImportEdge]:
    """
    Read import edges from a JSON or JSON-lines file.

    Args:
        path: Edge file
        root: Absolute directory relative ``source_file`` values start from

    Returns:
        Edges in file order

    Raises:
        ConfigurationError: If the file is missing or malformed
    """
    if not path.exists():
        raise ConfigurationError(f"Edge file not found: {path}")

    edges = []
    for index, record in enumerate(_iter_records(path.read_text(encoding="utf-8"), path)):
        if not isinstance(record, dict):
            raise ConfigurationError(
                f"Expected object in {path}, got {type(record).__name__}",
                path=f"[{index}]",
            )
        edges.append(edge_from_record(record, root))

    logger.debug("Loaded %d edge(s) from %s", len(edges), path)
    return edges
