"""Canonical Brackets API endpoint paths (relative to ``{base_url}/api``)."""

from __future__ import annotations

from typing import Any

from brackets.errors import InvalidURLError

API_PREFIX = "api"

TOURNAMENTS_PATH = "tournaments.json"
TOURNAMENT_GAMES_TEMPLATE = "tournaments/{tournament_id}/games.json"
TOURNAMENT_STANDINGS_TEMPLATE = "tournaments/{tournament_id}/standings.json"
TOURNAMENT_TOP_STATS_TEMPLATE = "tournaments/{tournament_id}/top_stats.json"
GAME_DETAIL_TEMPLATE = "tournaments/{tournament_id}/games/{game_id}.json"
PLAYER_SEASON_TEMPLATE = "player_seasons/{player_season_id}.json"
TEAM_SEASON_TEMPLATE = "team_seasons/{team_season_id}.json"


def resource_id(value: Any, *, name: str) -> int:
    """Validate an identity used as a path segment."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidURLError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def tournament_games_path(tournament_id: int) -> str:
    return TOURNAMENT_GAMES_TEMPLATE.format(
        tournament_id=resource_id(tournament_id, name="tournament_id")
    )


def tournament_standings_path(tournament_id: int) -> str:
    return TOURNAMENT_STANDINGS_TEMPLATE.format(
        tournament_id=resource_id(tournament_id, name="tournament_id")
    )


def tournament_top_stats_path(tournament_id: int) -> str:
    return TOURNAMENT_TOP_STATS_TEMPLATE.format(
        tournament_id=resource_id(tournament_id, name="tournament_id")
    )


def game_detail_path(tournament_id: int, game_id: int) -> str:
    return GAME_DETAIL_TEMPLATE.format(
        tournament_id=resource_id(tournament_id, name="tournament_id"),
        game_id=resource_id(game_id, name="game_id"),
    )


def player_season_path(player_season_id: int) -> str:
    return PLAYER_SEASON_TEMPLATE.format(
        player_season_id=resource_id(player_season_id, name="player_season_id")
    )


def team_season_path(team_season_id: int) -> str:
    return TEAM_SEASON_TEMPLATE.format(
        team_season_id=resource_id(team_season_id, name="team_season_id")
    )
