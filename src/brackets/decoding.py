"""Decoders turning raw Brackets API bodies into typed records.

Collection endpoints may answer with an envelope object (``{"standings": [...]}``)
or with the bare array. Each decoder tries the envelope first and the bare
array second; the wire shape never leaves this module.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from brackets.errors import DecodingError, DecodingIssue, InvalidResponseError
from brackets.models.base import WireModel
from brackets.models.game import Game, GamesResponse
from brackets.models.game_detail import GameDetailResponse
from brackets.models.player_season import PlayerSeasonDetailResponse
from brackets.models.standings import TeamStanding
from brackets.models.stats import StatCategory
from brackets.models.team_season import TeamSeasonResponse
from brackets.models.tournament import Tournament

logger = logging.getLogger(__name__)


class TournamentsEnvelope(WireModel):
    tournaments: list[Tournament]


class StandingsEnvelope(WireModel):
    standings: list[TeamStanding]


class TopStatsEnvelope(WireModel):
    top_stats: list[StatCategory]


Shape = tuple[str, TypeAdapter[Any], Callable[[Any], Any]]

_TOURNAMENT_SHAPES: tuple[Shape, ...] = (
    ("envelope", TypeAdapter(TournamentsEnvelope), lambda value: value.tournaments),
    ("bare", TypeAdapter(list[Tournament]), list),
)
_GAMES_RESPONSE_SHAPES: tuple[Shape, ...] = (
    ("envelope", TypeAdapter(GamesResponse), lambda value: value),
)
_GAMES_SHAPES: tuple[Shape, ...] = (
    ("envelope", TypeAdapter(GamesResponse), lambda value: value.all_games),
    ("bare", TypeAdapter(list[Game]), list),
)
_STANDINGS_SHAPES: tuple[Shape, ...] = (
    ("envelope", TypeAdapter(StandingsEnvelope), lambda value: value.standings),
    ("bare", TypeAdapter(list[TeamStanding]), list),
)
_TOP_STATS_SHAPES: tuple[Shape, ...] = (
    ("envelope", TypeAdapter(TopStatsEnvelope), lambda value: value.top_stats),
    ("bare", TypeAdapter(list[StatCategory]), list),
)
_GAME_DETAIL_SHAPES: tuple[Shape, ...] = (
    ("object", TypeAdapter(GameDetailResponse), lambda value: value),
)
_PLAYER_SEASON_SHAPES: tuple[Shape, ...] = (
    ("object", TypeAdapter(PlayerSeasonDetailResponse), lambda value: value),
)
_TEAM_SEASON_SHAPES: tuple[Shape, ...] = (
    ("object", TypeAdapter(TeamSeasonResponse), lambda value: value),
)


def load_json(body: bytes | str) -> Any:
    """Parse a UTF-8 JSON body; malformed input is a root-level data corruption."""
    try:
        return json.loads(body)
    except ValueError as exc:
        raise DecodingError(
            [DecodingIssue(kind="data_corrupted", path=(), message=f"invalid JSON: {exc}")]
        ) from exc


def _expect_container(payload: Any, context: str) -> None:
    if not isinstance(payload, (dict, list)):
        raise InvalidResponseError(
            detail=f"{context} body must be a JSON object or array, got {type(payload).__name__}"
        )


def decode_shapes(payload: Any, shapes: Sequence[Shape], *, context: str) -> Any:
    """Return the first shape that validates; otherwise raise the most relevant failure.

    A list payload reports the bare-array failure, anything else reports the
    first (envelope/object) failure.
    """
    _expect_container(payload, context)
    failures: list[tuple[str, ValidationError]] = []
    for shape_name, adapter, unwrap in shapes:
        try:
            decoded = adapter.validate_python(payload)
        except ValidationError as exc:
            failures.append((shape_name, exc))
            continue
        logger.debug("decoded %s as %s", context, shape_name)
        return unwrap(decoded)

    chosen_name, chosen = failures[0]
    if isinstance(payload, list):
        for shape_name, exc in failures:
            if shape_name == "bare":
                chosen_name, chosen = shape_name, exc
                break
    error = DecodingError.from_validation_error(chosen)
    logger.warning(
        "%s decoding failed (%s shape): %s",
        context,
        chosen_name,
        "; ".join(issue.describe() for issue in error.issues),
    )
    raise error from chosen


def _decode(body: bytes | str, shapes: Sequence[Shape], *, context: str) -> Any:
    return decode_shapes(load_json(body), shapes, context=context)


def decode_tournaments(body: bytes | str) -> list[Tournament]:
    return _decode(body, _TOURNAMENT_SHAPES, context="tournaments")


def decode_games_response(body: bytes | str) -> GamesResponse:
    """Date-grouped games; only the envelope encoding is accepted."""
    return _decode(body, _GAMES_RESPONSE_SHAPES, context="games")


def decode_games(body: bytes | str) -> list[Game]:
    """Flat game list from either the date-grouped envelope or a bare array."""
    return _decode(body, _GAMES_SHAPES, context="games")


def decode_standings(body: bytes | str) -> list[TeamStanding]:
    return _decode(body, _STANDINGS_SHAPES, context="standings")


def decode_top_stats(body: bytes | str) -> list[StatCategory]:
    return _decode(body, _TOP_STATS_SHAPES, context="top_stats")


def decode_game_detail(body: bytes | str) -> GameDetailResponse:
    return _decode(body, _GAME_DETAIL_SHAPES, context="game_detail")


def decode_player_season(body: bytes | str) -> PlayerSeasonDetailResponse:
    return _decode(body, _PLAYER_SEASON_SHAPES, context="player_season")


def decode_team_season(body: bytes | str) -> TeamSeasonResponse:
    return _decode(body, _TEAM_SEASON_SHAPES, context="team_season")
