"""Shared parsing helpers for number-or-string wire values."""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError


def safe_float(value: Any) -> float | None:
    """Parse number-like input into float, returning None when invalid."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            return float(raw)
        except ValueError:
            return None
    return None


def coerce_number(value: Any) -> int | float:
    """Accept a JSON number or a numeric string; integral values come back as int.

    Raises a pydantic ``type_mismatch`` error so callers running inside a model
    validator surface a structured decoding issue.
    """
    parsed = safe_float(value)
    if parsed is None:
        raise PydanticCustomError(
            "type_mismatch",
            "Could not decode {value} as a number or numeric string",
            {"value": value},
        )
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if parsed.is_integer():
        return int(parsed)
    return parsed


def measurement_text(value: Any) -> str | None:
    """Normalize a weight/height that may arrive as a string or a number."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:.0f}"
    raise PydanticCustomError(
        "type_mismatch",
        "Expected a string or number measurement, got {kind}",
        {"kind": type(value).__name__},
    )
