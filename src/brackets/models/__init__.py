"""Typed records decoded from Brackets API responses."""

from brackets.models.base import StatLabels, WireModel, lookup_stat
from brackets.models.game import DateGroup, Game, GamesResponse, GameStatus, TeamStat
from brackets.models.game_detail import (
    GameDetail,
    GameDetailResponse,
    GameDetailTeamStat,
    GameSets,
    Venue,
)
from brackets.models.player_season import PlayerSeasonDetailResponse, PlayerSeasonInfo
from brackets.models.players import Player, PlayerGameStat, PlayerSeasonGameStat
from brackets.models.standings import TeamStanding
from brackets.models.stats import PlayerStatEntry, StatCategory, non_empty_categories
from brackets.models.team_season import (
    PlayerSeason,
    StatLeaderCategory,
    StatLeaderEntry,
    TeamSeasonDetail,
    TeamSeasonResponse,
    normalize_stat_leaders,
)
from brackets.models.tournament import Gender, Tournament, filter_by_gender

__all__ = [
    "DateGroup",
    "Game",
    "GameDetail",
    "GameDetailResponse",
    "GameDetailTeamStat",
    "GameSets",
    "GameStatus",
    "GamesResponse",
    "Gender",
    "Player",
    "PlayerGameStat",
    "PlayerSeason",
    "PlayerSeasonDetailResponse",
    "PlayerSeasonGameStat",
    "PlayerSeasonInfo",
    "PlayerStatEntry",
    "StatCategory",
    "StatLabels",
    "StatLeaderCategory",
    "StatLeaderEntry",
    "TeamSeasonDetail",
    "TeamSeasonResponse",
    "TeamStanding",
    "TeamStat",
    "Tournament",
    "Venue",
    "WireModel",
    "filter_by_gender",
    "lookup_stat",
    "non_empty_categories",
    "normalize_stat_leaders",
]
