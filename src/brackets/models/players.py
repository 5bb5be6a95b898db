"""Player identities and per-game player stat rows."""

from __future__ import annotations

from pydantic import StrictInt

from brackets.images import resolve_image_url
from brackets.models.base import DynamicStats, WireModel, lookup_stat

TEAM_ENTRY_FIRST_NAME = "Equipo"


class Player(WireModel):
    id: StrictInt
    first_name: str
    last_name: str
    gender: str | None = None
    picture: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.picture, base_url)


class PlayerGameStat(WireModel):
    """A player's line in one game; the "Equipo" row carries team totals."""

    id: StrictInt
    player_name: str
    player_short_name: str
    player_first_name: str
    player_last_name: str
    player_id: StrictInt | None = None
    player_number: StrictInt | None = None
    player_gender: str | None = None
    player_image: str | None = None
    dynamic_stats: DynamicStats

    @property
    def is_team_entry(self) -> bool:
        return self.player_first_name == TEAM_ENTRY_FIRST_NAME

    def stat(self, key: str) -> int | None:
        return lookup_stat(self.dynamic_stats, key)

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.player_image, base_url)


class PlayerSeasonGameStat(WireModel):
    """One game of a player's season, labelled by opponent."""

    id: StrictInt
    opponent: str
    opponent_logo: str | None = None
    dynamic_stats: DynamicStats

    def stat(self, key: str) -> int | None:
        return lookup_stat(self.dynamic_stats, key)

    def opponent_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.opponent_logo, base_url)
