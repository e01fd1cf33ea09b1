"""
Policy loading: JSON document -> validated Policy.

Validation is eager. The document is checked against the JSON schema, every
regex is compiled and every path is resolved against the root before the
Policy exists. Any failure raises ConfigurationError and nothing is built.
"""

import json
import logging
import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import jsonschema

from zoneguard.domain import paths
from zoneguard.domain.exceptions import ConfigurationError
from zoneguard.domain.models import (
    Policy,
    PrivateFilePattern,
    RestrictedPath,
    Zone,
    ZonePrivateRule,
)
from zoneguard.schemas import validate_policy

logger = logging.getLogger(__name__)


def _format_error_path(parts: Iterable[Any]) -> str | None:
    """Render a jsonschema path deque as ``zones[0].paths``."""
    rendered = ""
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered or None


def _resolve_all(root: str, patterns: Iterable[str]) -> tuple[str, ...]:
    """Resolve patterns against root, dropping duplicates but keeping order."""
    return tuple(dict.fromkeys(paths.normalize(root, p) for p in patterns))


def _compile_all(patterns: Iterable[str], where: str) -> tuple[re.Pattern[str], ...]:
    compiled = []
    for index, pattern in enumerate(patterns):
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigurationError(
                f"invalid regular expression {pattern!r}: {e}",
                path=f"{where}[{index}]",
            ) from e
    return tuple(compiled)


def build_policy(data: Mapping[str, Any], root: str | None = None) -> Policy:
    """
    Build a Policy from a parsed policy document.

    Args:
        data: Parsed policy document (see ``policy.schema.json``)
        root: Absolute directory patterns are resolved against
            (default: the process working directory)

    Returns:
        The validated Policy

    Raises:
        ConfigurationError: If the document or root is invalid
    """
    base = root if root is not None else os.getcwd()
    if not paths.is_absolute(base):
        raise ConfigurationError(f"policy root must be absolute, got {base!r}")
    base = paths.normalize(paths.SEPARATOR, base)

    try:
        validate_policy(data)
    except jsonschema.ValidationError as e:
        raise ConfigurationError(
            e.message, path=_format_error_path(e.absolute_path)
        ) from e

    zones = tuple(
        Zone(
            name=zone["name"],
            paths=_resolve_all(base, zone["paths"]),
            uses=_resolve_all(base, zone.get("uses", [])),
        )
        for zone in data.get("zones", [])
    )

    restricted_paths = tuple(
        RestrictedPath(
            restricted_root=paths.normalize(base, entry["restricted_root"]),
            whitelist=_resolve_all(base, entry.get("whitelist", [])),
        )
        for entry in data.get("restricted_paths", [])
    )

    private_section = data.get("private_files", {"regexes": []})
    private_files = PrivateFilePattern(
        regexes=_compile_all(private_section["regexes"], "private_files.regexes")
    )

    zone_private_rules = tuple(
        ZonePrivateRule(
            name=entry["name"],
            src=_resolve_all(base, entry["src"]),
            filename_regexps=_compile_all(
                entry["filename_regexps"], f"zone_private[{index}].filename_regexps"
            ),
        )
        for index, entry in enumerate(data.get("zone_private", []))
    )

    policy = Policy(
        root=base,
        zones=zones,
        restricted_paths=restricted_paths,
        private_files=private_files,
        zone_private_rules=zone_private_rules,
    )
    logger.debug(
        "Built policy rooted at %s: %d zone(s), %d restricted path(s), "
        "%d private regex(es), %d zone-private rule(s)",
        base,
        len(zones),
        len(restricted_paths),
        len(private_files.regexes),
        len(zone_private_rules),
    )
    return policy


def load_policy(path: Path, root: str | None = None) -> Policy:
    """
    Load and validate a policy from a JSON file.

    Args:
        path: Path to the policy document
        root: Absolute directory patterns are resolved against
            (default: the process working directory)

    Returns:
        The validated Policy

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    if not path.exists():
        raise ConfigurationError(f"Policy file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected object in {path}, got {type(data).__name__}")

    logger.info("Loading policy from %s", path)
    return build_policy(data, root)
