"""Async HTTP client for the Brackets tournament stats API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter
from typing import TypeVar

import httpx

from brackets import decoding, endpoints
from brackets.errors import APIError, InvalidResponseError, InvalidURLError, NetworkError
from brackets.models.game import Game, GamesResponse
from brackets.models.game_detail import GameDetailResponse
from brackets.models.player_season import PlayerSeasonDetailResponse
from brackets.models.standings import TeamStanding
from brackets.models.stats import StatCategory
from brackets.models.team_season import TeamSeasonResponse
from brackets.models.tournament import Tournament
from brackets.settings import BaseURLProvider, Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RawResponse:
    """Validated 2xx body and metadata from one API call."""

    url: str
    status_code: int
    content: bytes
    duration_ms: int


def build_url(base_url: str, path: str) -> str:
    """Join ``{base_url}/api/{path}`` and reject anything that is not an http(s) URL."""
    base = base_url.strip().rstrip("/")
    raw = f"{base}/{endpoints.API_PREFIX}/{path.lstrip('/')}"
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(raw) from exc
    if url.scheme not in {"http", "https"} or not url.host:
        raise InvalidURLError(raw)
    return str(url)


class BracketsAPIClient:
    """Thin async client: one GET per call, decoding delegated to ``brackets.decoding``.

    The base URL accessor is called for every request, so a runtime switch in
    the provider takes effect on the next call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: BaseURLProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._base_url = base_url or self.settings.base_url_provider()
        self._resource_timeout_s = self.settings.resource_timeout_s
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.request_timeout_s),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> BracketsAPIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def _request(self, path: str) -> RawResponse:
        url = build_url(self._base_url(), path)
        started = perf_counter()
        logger.debug("GET %s", url)
        try:
            async with asyncio.timeout(self._resource_timeout_s):
                response = await self._http.get(url)
                content = response.content
        except TimeoutError as exc:
            raise NetworkError(exc) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(exc) from exc

        duration_ms = int((perf_counter() - started) * 1000)
        if not 200 <= response.status_code <= 299:
            logger.warning("GET %s -> %s in %sms", url, response.status_code, duration_ms)
            raise InvalidResponseError(status_code=response.status_code)
        return RawResponse(
            url=url,
            status_code=response.status_code,
            content=content,
            duration_ms=duration_ms,
        )

    async def _fetch(self, path: str, decode: Callable[[bytes], T]) -> T:
        raw = await self._request(path)
        logger.debug(
            "GET %s -> %s in %sms (%s bytes)",
            raw.url,
            raw.status_code,
            raw.duration_ms,
            len(raw.content),
        )
        return decode(raw.content)

    async def fetch_tournaments(self) -> list[Tournament]:
        """List all tournaments."""
        return await self._fetch(endpoints.TOURNAMENTS_PATH, decoding.decode_tournaments)

    async def fetch_games_response(self, tournament_id: int) -> GamesResponse:
        """Games for a tournament, grouped by date."""
        path = endpoints.tournament_games_path(tournament_id)
        return await self._fetch(path, decoding.decode_games_response)

    async def fetch_games(self, tournament_id: int) -> list[Game]:
        """Games for a tournament as one flat list."""
        path = endpoints.tournament_games_path(tournament_id)
        return await self._fetch(path, decoding.decode_games)

    async def fetch_standings(self, tournament_id: int) -> list[TeamStanding]:
        path = endpoints.tournament_standings_path(tournament_id)
        return await self._fetch(path, decoding.decode_standings)

    async def fetch_top_stats(self, tournament_id: int) -> list[StatCategory]:
        """Tournament-wide stat leader categories."""
        path = endpoints.tournament_top_stats_path(tournament_id)
        return await self._fetch(path, decoding.decode_top_stats)

    async def fetch_game_detail(self, tournament_id: int, game_id: int) -> GameDetailResponse:
        path = endpoints.game_detail_path(tournament_id, game_id)
        return await self._fetch(path, decoding.decode_game_detail)

    async def fetch_player_season(self, player_season_id: int) -> PlayerSeasonDetailResponse:
        path = endpoints.player_season_path(player_season_id)
        return await self._fetch(path, decoding.decode_player_season)

    async def fetch_team_season(self, team_season_id: int) -> TeamSeasonResponse:
        path = endpoints.team_season_path(team_season_id)
        return await self._fetch(path, decoding.decode_team_season)


def describe_error(exc: BaseException) -> str:
    """User-facing message for any failure a fetch can raise."""
    if isinstance(exc, APIError):
        return str(exc)
    return "An unexpected error occurred"
