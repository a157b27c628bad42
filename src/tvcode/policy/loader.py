"""Delivery profile loading from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ProfileValidationError
from .profile import DEFAULT_PROFILE, DeliveryProfile

logger = logging.getLogger(__name__)


def load_profile(profile_path: Path | None) -> DeliveryProfile:
    """Load and validate a delivery profile from a YAML file.

    Args:
        profile_path: Path to the YAML profile, or None for the default.

    Returns:
        Validated DeliveryProfile.

    Raises:
        ProfileValidationError: If the file is missing or invalid.
    """
    if profile_path is None:
        return DEFAULT_PROFILE

    if not profile_path.exists():
        raise ProfileValidationError(f"Profile file not found: {profile_path}")

    try:
        with open(profile_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProfileValidationError(f"Invalid YAML syntax: {e}") from e
    except OSError as e:
        raise ProfileValidationError(f"Cannot read profile {profile_path}: {e}") from e

    if data is None:
        raise ProfileValidationError("Profile file is empty")

    if not isinstance(data, dict):
        raise ProfileValidationError("Profile file must be a YAML mapping")

    profile = load_profile_from_dict(data)
    logger.info("Loaded delivery profile '%s' from %s", profile.name, profile_path)
    return profile


def load_profile_from_dict(data: dict[str, Any]) -> DeliveryProfile:
    """Validate a profile from a dictionary.

    Raises:
        ProfileValidationError: If the data does not form a valid profile.
    """
    try:
        return DeliveryProfile.model_validate(data)
    except ValidationError as e:
        raise ProfileValidationError(_format_validation_error(e)) from e


def _format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error into a one-line message."""
    errors = error.errors()
    if errors:
        first_error = errors[0]
        loc = ".".join(str(x) for x in first_error.get("loc", []))
        msg = first_error.get("msg", str(error))
        if loc:
            return f"Profile validation failed: {loc}: {msg}"
        return f"Profile validation failed: {msg}"
    return f"Profile validation failed: {error}"
