"""Game detail payload: venue, set scores, per-team player lines."""

from __future__ import annotations

from pydantic import StrictBool, StrictInt

from brackets.images import resolve_image_url
from brackets.models.base import GameTime, StatLabels, WireModel
from brackets.models.players import PlayerGameStat


class Venue(WireModel):
    name: str
    court_number: str | None = None

    @property
    def label(self) -> str:
        if self.court_number:
            return f"{self.name} - {self.court_number}"
        return self.name


class GameSets(WireModel):
    team_a_id: StrictInt
    team_a: str
    team_a_logo: str | None = None
    team_a_score: StrictInt
    team_a_scores: list[StrictInt] | None = None
    team_b_id: StrictInt
    team_b: str
    team_b_logo: str | None = None
    team_b_score: StrictInt
    team_b_scores: list[StrictInt] | None = None

    def team_a_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_a_logo, base_url)

    def team_b_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_b_logo, base_url)


class GameDetailTeamStat(WireModel):
    id: StrictInt
    team_name: str
    score: StrictInt
    result: str | None = None
    team_logo: str | None = None
    last_five_games: list[StrictInt | None] | None = None
    player_stats: list[PlayerGameStat]

    @property
    def players(self) -> list[PlayerGameStat]:
        """Individual player rows, without the team-totals row."""
        return [row for row in self.player_stats if not row.is_team_entry]

    @property
    def team_totals(self) -> PlayerGameStat | None:
        for row in self.player_stats:
            if row.is_team_entry:
                return row
        return None

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_logo, base_url)


class GameDetail(WireModel):
    id: StrictInt
    played: StrictBool
    phase: str | None = None
    round: str | None = None
    game_time: GameTime = None
    stage: StrictBool
    venue: Venue | None = None
    active_stats: list[str]
    game_sets: GameSets
    team_stats: list[GameDetailTeamStat]

    def ranked_players(self, stat_key: str) -> list[tuple[PlayerGameStat, int]]:
        """Players of both teams with a positive value for ``stat_key``, best first."""
        ranked: list[tuple[PlayerGameStat, int]] = []
        for team in self.team_stats:
            for player in team.players:
                value = player.stat(stat_key)
                if value is not None and value > 0:
                    ranked.append((player, value))
        ranked.sort(key=lambda item: item[1], reverse=True)
        return ranked


class GameDetailResponse(StatLabels):
    long_name_stats: dict[str, str]
    short_name_stats: dict[str, str]
    game: GameDetail
