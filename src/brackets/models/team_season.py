"""Team season payload: games, roster, upcoming game and stat leaders."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, StrictInt, field_validator
from pydantic_core import PydanticCustomError

from brackets.images import resolve_image_url
from brackets.models.base import Number, StatLabels, WireModel
from brackets.models.game import Game
from brackets.models.players import Player


class PlayerSeason(WireModel):
    id: StrictInt
    number: StrictInt | None = None
    player: Player

    @property
    def first_name(self) -> str:
        return self.player.first_name

    @property
    def last_name(self) -> str:
        return self.player.last_name

    def full_image_url(self, base_url: str) -> str | None:
        return self.player.full_image_url(base_url)


class StatLeaderEntry(WireModel):
    id: StrictInt = Field(validation_alias=AliasChoices("id", "player_season_id"))
    first_name: str
    last_name: str
    total: Number
    picture: str | None = Field(
        default=None, validation_alias=AliasChoices("picture", "player_image", "image")
    )

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.picture, base_url)


class StatLeaderCategory(WireModel):
    name: str = Field(validation_alias=AliasChoices("name", "key", "stat"))
    long_name: str | None = None
    short_name: str | None = None
    players: list[StatLeaderEntry] = Field(validation_alias=AliasChoices("players", "leaders"))


def normalize_stat_leaders(value: Any) -> list[Any]:
    """Fold both wire encodings into one ordered list of category objects.

    List input keeps its order. Map input (category name -> leaders) is sorted
    by category name; a map value may be the leader list itself or an object
    carrying ``players`` plus labels.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        categories: list[Any] = []
        for name in sorted(value):
            entry = value[name]
            if isinstance(entry, dict):
                categories.append({**entry, "name": name})
            else:
                categories.append({"name": name, "players": entry})
        return categories
    raise PydanticCustomError(
        "type_mismatch",
        "Expected stat leaders as a list or an object, got {kind}",
        {"kind": type(value).__name__},
    )


class TeamSeasonDetail(WireModel):
    games: list[Game] = Field(default_factory=list)
    player_seasons: list[PlayerSeason] = Field(default_factory=list)
    upcoming_game: Game | None = None
    stat_leaders: list[StatLeaderCategory] = Field(default_factory=list)

    @field_validator("stat_leaders", mode="before")
    @classmethod
    def _normalize_stat_leaders(cls, value: Any) -> list[Any]:
        return normalize_stat_leaders(value)

    @property
    def non_empty_stat_leaders(self) -> list[StatLeaderCategory]:
        return [category for category in self.stat_leaders if category.players]


class TeamSeasonResponse(StatLabels):
    team_season: TeamSeasonDetail

    def category_long_name(self, category: StatLeaderCategory) -> str:
        return category.long_name or self.long_label(category.name)

    def category_short_name(self, category: StatLeaderCategory) -> str:
        return category.short_name or self.short_label(category.name)
