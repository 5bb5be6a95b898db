"""Player season detail: bio fields plus per-opponent stat lines."""

from __future__ import annotations

from pydantic import Field, StrictInt

from brackets.models.base import Measurement, StatLabels, WireModel
from brackets.models.players import Player, PlayerSeasonGameStat

LEAD_STAT_KEY = "points"


class PlayerSeasonInfo(WireModel):
    weight: Measurement = None
    height: Measurement = None
    number: StrictInt | None = None
    team: str
    player: Player
    active_stats: list[str]
    stats: list[PlayerSeasonGameStat]
    playoffs_stats: list[PlayerSeasonGameStat] = Field(default_factory=list)

    @property
    def games_played(self) -> int:
        return len(self.stats)

    @property
    def ordered_stat_keys(self) -> list[str]:
        """Active stats with points moved to the front when present."""
        keys = [key for key in self.active_stats if key != LEAD_STAT_KEY]
        if LEAD_STAT_KEY in self.active_stats:
            keys.insert(0, LEAD_STAT_KEY)
        return keys

    def total_for(self, key: str) -> int:
        return sum(game.stat(key) or 0 for game in self.stats)

    def per_game_average(self, key: str) -> float | None:
        if not self.stats:
            return None
        return self.total_for(key) / self.games_played


class PlayerSeasonDetailResponse(StatLabels):
    long_name_stats: dict[str, str]
    short_name_stats: dict[str, str]
    player_season: PlayerSeasonInfo
