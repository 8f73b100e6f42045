"""
Helper Functions

Contains request payload helpers used by the controllers.
"""

from typing import Any, Dict, List


class PayloadError(ValueError):
    """Raised when a request payload is missing fields or has the wrong types."""


def normalize_word(value: Any, field: str) -> str:
    """Lowercase and strip a word taken from a request."""
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f"'{field}' must be a non-empty string")
    return value.strip().lower()


def normalize_words(value: Any, field: str) -> List[str]:
    """Normalize an optional list of words (missing means empty)."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise PayloadError(f"'{field}' must be a list of words")
    return [normalize_word(item, field) for item in value]


def normalize_flag(value: Any, field: str, default: bool) -> bool:
    """Optional JSON boolean (missing means default)."""
    if value is None:
        return default
    if not isinstance(value, bool):
        raise PayloadError(f"'{field}' must be a boolean")
    return value


def require_fields(data: Any, *fields: str) -> Dict[str, Any]:
    """Check that a JSON body is an object holding every given field."""
    if not isinstance(data, dict):
        raise PayloadError('Request body must be a JSON object')

    missing = [name for name in fields if name not in data]
    if missing:
        raise PayloadError(f"Missing required field(s): {', '.join(missing)}")
    return data
