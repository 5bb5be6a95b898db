"""Tournament-wide stat leaderboards."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import AliasChoices, Field, StrictInt

from brackets.images import resolve_image_url
from brackets.models.base import Number, WireModel
from brackets.models.players import Player


class PlayerStatEntry(WireModel):
    player: Player
    team_name: str
    score: Number = Field(validation_alias=AliasChoices("score", "value"))
    player_season_id: StrictInt
    team_logo: str | None = None

    @property
    def id(self) -> int:
        return self.player_season_id

    def team_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_logo, base_url)


class StatCategory(WireModel):
    name: str = Field(validation_alias=AliasChoices("name", "display_name"))
    key: str | None = Field(default=None, validation_alias=AliasChoices("key", "category"))
    unit: str | None = None
    stats: list[PlayerStatEntry] = Field(validation_alias=AliasChoices("stats", "leaders"))


def non_empty_categories(categories: Iterable[StatCategory]) -> list[StatCategory]:
    return [category for category in categories if category.stats]
