"""Tournament list records."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from pydantic import StrictInt

from brackets.images import resolve_image_url
from brackets.models.base import WireModel


class Gender(IntEnum):
    MALE = 0
    FEMALE = 1

    @property
    def display_name(self) -> str:
        return "Varonil" if self is Gender.MALE else "Femenil"


class Tournament(WireModel):
    id: StrictInt
    name: str
    gender: Gender
    team_count: StrictInt | None = None
    image: str | None = None

    @property
    def display_team_count(self) -> int:
        return self.team_count or 0

    def full_image_url(self, base_url: str) -> str | None:
        return resolve_image_url(self.image, base_url)


def filter_by_gender(tournaments: Iterable[Tournament], gender: Gender) -> list[Tournament]:
    """Keep tournament order, dropping entries of the other gender."""
    return [tournament for tournament in tournaments if tournament.gender == gender]
