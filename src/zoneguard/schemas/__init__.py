"""zoneguard JSON Schema definitions and validation utilities.

Schemas:
    - policy.schema.json: Policy document (zones, restricted paths,
      private-file regexes, zone-private rules)

Usage:
    from zoneguard.schemas import validate_policy

    with open("policy.json") as f:
        data = json.load(f)
    validate_policy(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'policy.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("zoneguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_policy_schema() -> dict[str, Any]:
    """Get the policy.json schema.

    Returns:
        JSON Schema for policy documents
    """
    return _load_schema("policy.schema.json")


def validate_policy(data: Any) -> None:
    """Validate a policy document against the schema.

    Args:
        data: Parsed policy document

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_policy_schema())


__all__ = [
    "get_policy_schema",
    "validate_policy",
]
