"""Policy file loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import jsonschema

from archguard.application.policy import ArchitecturePolicy
from archguard.domain.exceptions import ConfigurationError
from archguard.schemas import validate_policy

logger = logging.getLogger(__name__)


def load_policy(path: str | Path) -> ArchitecturePolicy:
    """
    Load a module policy from a JSON file.

    Args:
        path: Path to the policy file (e.g. architecture.json)

    Returns:
        The validated policy

    Raises:
        ConfigurationError: If the file is missing, not valid JSON, does not
            match the policy schema, or describes an inconsistent policy
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Policy file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

    try:
        validate_policy(data)
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigurationError(f"Invalid policy in {path} at {location}: {e.message}") from e

    policy = ArchitecturePolicy.from_mapping(data)
    logger.debug(
        "Loaded policy '%s' from %s: %s", policy.name, path, ", ".join(policy.module_names)
    )
    return policy
