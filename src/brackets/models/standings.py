"""Tournament standings rows."""

from __future__ import annotations

from pydantic import Field, StrictFloat, StrictInt

from brackets.images import resolve_image_url
from brackets.models.base import WireModel


class TeamStanding(WireModel):
    id: StrictInt = Field(alias="team_season_id")
    team_name: str = Field(alias="name")
    total: StrictInt
    wins: StrictInt = Field(alias="won")
    losses: StrictInt = Field(alias="lost")
    points_for: StrictInt = Field(alias="favor")
    points_against: StrictInt = Field(alias="against")
    ties: StrictInt = Field(alias="tie")
    average: StrictFloat = Field(alias="avg")
    tie_breaker: str
    team_logo: str | None = None

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.team_logo, base_url)
