"""Parsing of raw request parameters into pipeline inputs."""

from typing import Any, Optional

from ..errors import ValidationError


def parse_limit(value: Any, default: int) -> int:
    """
    Positive integer limit, or `default` for anything else.

    Malformed limits never raise: "abc", "0", "-3", "2.5" and None all fall
    back to the endpoint default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def parse_min_points(value: Any) -> Optional[int]:
    """Integer points threshold, None when absent. Non-integers raise ValidationError."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError("minPoints must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"minPoints must be an integer, got {value!r}")
