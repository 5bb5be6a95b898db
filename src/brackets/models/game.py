"""Game list records and their derived status/winner."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import Field, StrictBool, StrictInt, field_validator

from brackets.images import resolve_image_url
from brackets.models.base import GameTime, WireModel
from brackets.time_utils import utc_now

GameStatus = Literal["scheduled", "in_progress", "finished", "cancelled"]

WON_RESULT = "Won"


class TeamStat(WireModel):
    """One side of a game; position in ``Game.team_stats`` decides home/away."""

    id: StrictInt
    score: StrictInt | None = None
    result: str | None = None
    team_name: str
    team_logo: str | None = None

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_logo, base_url)


class Game(WireModel):
    id: StrictInt
    game_time: GameTime = None
    stage: StrictBool
    team_stats: list[TeamStat] = Field(default_factory=list)

    @field_validator("team_stats", mode="before")
    @classmethod
    def _null_team_stats(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def home_team(self) -> TeamStat | None:
        return self.team_stats[0] if self.team_stats else None

    @property
    def away_team(self) -> TeamStat | None:
        return self.team_stats[1] if len(self.team_stats) > 1 else None

    @property
    def home_score(self) -> int | None:
        home = self.home_team
        return home.score if home is not None else None

    @property
    def away_score(self) -> int | None:
        away = self.away_team
        return away.score if away is not None else None

    @property
    def played_at(self) -> datetime | None:
        return self.game_time

    def status_at(self, now: datetime) -> GameStatus:
        if any(team.result is not None for team in self.team_stats):
            return "finished"
        if self.game_time is not None:
            current = now if now.tzinfo is not None else now.replace(tzinfo=UTC)
            if self.game_time < current:
                return "in_progress"
        return "scheduled"

    @property
    def status(self) -> GameStatus:
        return self.status_at(utc_now())

    @property
    def is_finished(self) -> bool:
        return self.status == "finished"

    @property
    def winner(self) -> TeamStat | None:
        """Explicit "Won" marker first, then the strictly higher of two scores."""
        for team in self.team_stats:
            if team.result == WON_RESULT:
                return team
        home, away = self.home_team, self.away_team
        if home is None or away is None or home.score is None or away.score is None:
            return None
        if home.score > away.score:
            return home
        if away.score > home.score:
            return away
        return None


class DateGroup(WireModel):
    date: str
    games: list[Game]


class GamesResponse(WireModel):
    """Games for one tournament, grouped by calendar date string."""

    games: list[DateGroup]

    @property
    def all_games(self) -> list[Game]:
        return [game for group in self.games for game in group.games]
