"""Shared UTC timestamp helpers and the tolerant game-time parser."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic_core import PydanticCustomError

# Tried in order after strict ISO-8601. Only numeric directives are used so
# parsing never depends on the process locale.
FALLBACK_TIME_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def utc_now() -> datetime:
    """Return current UTC time with second precision."""
    return datetime.now(UTC).replace(microsecond=0)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_iso_strict(value: str) -> datetime | None:
    """Parse internet-style ISO-8601 (date, T, time, zone); None when it does not fit."""
    raw = value.strip()
    if "T" not in raw:
        return None
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed.astimezone(UTC)


def parse_game_time(value: str) -> datetime | None:
    """Parse a wire date string through the ISO then fallback-format chain."""
    parsed = parse_iso_strict(value)
    if parsed is not None:
        return parsed
    raw = value.strip()
    for fmt in FALLBACK_TIME_FORMATS:
        try:
            return _as_utc(datetime.strptime(raw, fmt))
        except ValueError:
            continue
    return None


def coerce_game_time(value: Any) -> datetime | None:
    """Model-validator entry point: None passes, strings go through the chain."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if not isinstance(value, str):
        raise PydanticCustomError(
            "type_mismatch",
            "Expected a date string, got {kind}",
            {"kind": type(value).__name__},
        )
    parsed = parse_game_time(value)
    if parsed is None:
        raise PydanticCustomError(
            "data_corrupted",
            "Cannot decode date string: {value}",
            {"value": value},
        )
    return parsed
