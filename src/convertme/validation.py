"""Opt-in validators for Person fields.

A Person accepts any name and any age. These checks only run when strict
mode is enabled (see convertme.config).
"""

from __future__ import annotations

import logging
from typing import Any

from convertme.errors import ValidationError

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({"Bad Name"})


def validate_name(name: Any) -> str:
    """Validate a person name.

    Args:
        name: The candidate name.

    Returns:
        The name, unchanged.

    Raises:
        ValidationError: If the name is not a string or is reserved.
    """
    if not isinstance(name, str):
        msg = f"name must be a string, got {type(name).__name__}"
        logger.warning(msg)
        raise ValidationError(msg)
    if name in RESERVED_NAMES:
        msg = f"name '{name}' is not allowed"
        logger.warning(msg)
        raise ValidationError(msg)
    return name


def validate_age(age: Any) -> int:
    """Validate a person age.

    Args:
        age: The candidate age.

    Returns:
        The age, unchanged.

    Raises:
        ValidationError: If the age is not an integer or is negative.
    """
    # bool is an int subclass; True is not an age.
    if isinstance(age, bool) or not isinstance(age, int):
        msg = f"age must be an integer, got {type(age).__name__}"
        logger.warning(msg)
        raise ValidationError(msg)
    if age < 0:
        msg = f"age must not be negative, got {age}"
        logger.warning(msg)
        raise ValidationError(msg)
    return age
