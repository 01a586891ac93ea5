"""archguard JSON Schema definitions and validation utilities.

Schemas:
    - policy.schema.json: Module policy (modules, packages, allowed modules)

Usage:
    from archguard.schemas import validate_policy

    with open("architecture.json") as f:
        data = json.load(f)
    validate_policy(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from functools import cache
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
    schema_text = files("archguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


@cache
def get_policy_schema() -> dict[str, Any]:
    """Get the policy.json schema."""
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
