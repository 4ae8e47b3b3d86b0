"""Shop backend client utilities.

This module provides a thin wrapper around the two backend endpoints that
deliver game odds: the per-league odds feed (games carrying a list of
bookmakers) and the game autocomplete search (games carrying flat odds rows).
The wrapper keeps the HTTP handling in one place so the rest of the
application can focus on parsing and presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

import requests

from odds_client.config import ApiConfig
from odds_client.leagues import get_odds_path_for_league


class ShopApiError(RuntimeError):
    """Raised when the shop backend returns a non-success status code."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class ApiResponse:
    """Container for a backend payload."""

    data: Any
    status_code: int


class ShopApiClient:
    """Simple client that talks to the shop backend."""

    def __init__(self, config: Optional[ApiConfig] = None, session: Optional[requests.Session] = None) -> None:
        self._config = config or ApiConfig()
        if not self._config.base_url:
            raise ValueError("A backend base URL must be supplied")
        self._session = session or requests.Session()

    @property
    def config(self) -> ApiConfig:
        return self._config

    def get_league_odds(self, league_key: str) -> ApiResponse:
        """Fetch upcoming games of a league with their bookmaker markets."""

        path = get_odds_path_for_league(
            league_key,
            self._config.league_paths,
            self._config.default_league_path,
        )
        return self._get(path, {})

    def autocomplete_games(self, query: str, limit: int = 20) -> ApiResponse:
        """Search games by team name or index number.

        Suggestions carry their odds as flat ``market_key`` rows.
        """

        params: MutableMapping[str, str] = {"q": query, "limit": str(limit)}
        return self._get("/games/autocomplete", params)

    def _get(self, path: str, params: Mapping[str, str]) -> ApiResponse:
        url = f"{self._config.base_url.rstrip('/')}{path}"
        response = self._session.get(url, params=params, timeout=self._config.timeout_seconds)
        if response.status_code != 200:
            raise ShopApiError(
                f"Backend request to {path} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return ApiResponse(response.json(), response.status_code)
