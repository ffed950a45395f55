"""
Credential validators — pure functions, no I/O.
"""

from __future__ import annotations

from typing import Any

from nocaptcha.errors import EmptyKeyError, InvalidKeyTypeError


def check_key(name: str, value: Any) -> str:
    """Validate a reCAPTCHA credential and return it trimmed.

    Args:
        name: Human readable label used in error messages (e.g. ``"site key"``).
        value: The raw credential.

    Returns:
        The credential with surrounding whitespace removed.

    Raises:
        InvalidKeyTypeError: when *value* is not a ``str``.
        EmptyKeyError: when *value* is empty after trimming.
    """
    if not isinstance(value, str):
        raise InvalidKeyTypeError(
            f"The {name} must be a string value, {type(value).__name__} given",
            field=name,
        )
    value = value.strip()
    if not value:
        raise EmptyKeyError(f"The {name} must not be empty", field=name)
    return value
