"""Reusable field validators for input DTOs."""

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: Optional[str]) -> bool:
    """Check an email address against the accepted format."""
    return bool(value) and EMAIL_PATTERN.match(value.strip()) is not None


def require_email(value: str, message: str = "Por favor, introduce un email válido.") -> str:
    """
    Validate and normalize an email address.

    Raises:
        ValueError: If the address is not valid
    """
    if not is_valid_email(value):
        raise ValueError(message)
    return value.strip()


def require_min_length(value: str, length: int, message: str) -> str:
    """
    Validate that a trimmed string has a minimum length.

    Raises:
        ValueError: If the string is too short
    """
    stripped = (value or "").strip()
    if len(stripped) < length:
        raise ValueError(message)
    return stripped
