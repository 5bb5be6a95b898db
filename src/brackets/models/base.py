"""Shared model base, annotated wire types and stat-label lookups."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt

from brackets.time_utils import coerce_game_time
from brackets.util.parsing import coerce_number, measurement_text

GameTime = Annotated[datetime | None, BeforeValidator(coerce_game_time)]
Number = Annotated[int | float, BeforeValidator(coerce_number)]
Measurement = Annotated[str | None, BeforeValidator(measurement_text)]
DynamicStats = dict[str, StrictInt | None]


class WireModel(BaseModel):
    """Immutable record decoded from a snake_case JSON payload."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


def lookup_stat(stats: DynamicStats, key: str) -> int | None:
    """Absent keys and explicit nulls both read as ``None``."""
    return stats.get(key)


class StatLabels(WireModel):
    """Long/short display labels keyed by dynamic-stat key."""

    long_name_stats: dict[str, str] = Field(default_factory=dict)
    short_name_stats: dict[str, str] = Field(default_factory=dict)

    def long_label(self, key: str) -> str:
        return self.long_name_stats.get(key, key.upper())

    def short_label(self, key: str) -> str:
        return self.short_name_stats.get(key, key.upper())
