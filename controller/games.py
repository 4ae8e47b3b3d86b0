"""Game loading and odds parsing orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from odds_client.client import ApiResponse, ShopApiClient
from odds_engine.models import ParsedOdds
from odds_engine.parser import parse_bookmaker_odds, parse_odds_rows
from persistence.database import Database

DEFAULT_STATUS = "upcoming"


@dataclass(frozen=True)
class Game:
    """A game card as shown in the shop."""

    id: str
    home_team: str
    away_team: str
    match_time: str
    league: str
    sport_key: str
    status: str
    odds: ParsedOdds

    @property
    def title(self) -> str:
        return f"{self.home_team} vs {self.away_team}"


class GamesController:
    def __init__(self, client: ShopApiClient, database: Database) -> None:
        self._client = client
        self._db = database

    def load_league_games(self, league_key: str) -> List[Game]:
        """Fetch a league's odds feed and parse every game's bookmakers."""

        try:
            response = self._client.get_league_odds(league_key)
        except Exception as exc:
            self._db.log("error", "League odds fetch failed", {"league": league_key, "error": str(exc)})
            raise

        entries = _payload_entries(response)
        games: List[Game] = []
        skipped_no_bookmakers = 0
        for entry in entries:
            bookmakers = entry.get("bookmakers")
            if not isinstance(bookmakers, list) or not bookmakers:
                skipped_no_bookmakers += 1
                continue
            home_team = _text(entry.get("home_team"))
            away_team = _text(entry.get("away_team"))
            games.append(
                Game(
                    id=_text(entry.get("id")),
                    home_team=home_team,
                    away_team=away_team,
                    match_time=_text(entry.get("commence_time")),
                    league=_text(entry.get("sport_title")),
                    sport_key=_text(entry.get("sport_key")) or league_key,
                    status=DEFAULT_STATUS,
                    odds=parse_bookmaker_odds(bookmakers, home_team, away_team),
                )
            )

        self._db.log(
            "info",
            "League odds loaded",
            {
                "league": league_key,
                "games_received": len(entries),
                "games_parsed": len(games),
                "skipped_no_bookmakers": skipped_no_bookmakers,
                "games_with_odds": sum(1 for game in games if game.odds.has_valid_odds),
            },
        )
        return games

    def search_games(self, query: str, limit: int = 20) -> List[Game]:
        """Autocomplete search; suggestions carry flat odds rows."""

        query = (query or "").strip()
        if not query:
            return []

        try:
            response = self._client.autocomplete_games(query, limit=limit)
        except Exception as exc:
            self._db.log("error", "Game search failed", {"query": query, "error": str(exc)})
            raise

        entries = _payload_entries(response)
        games: List[Game] = []
        for entry in entries:
            home_team = _text(entry.get("homeTeam"))
            away_team = _text(entry.get("awayTeam"))
            rows = entry.get("odds")
            games.append(
                Game(
                    id=_text(entry.get("id")),
                    home_team=home_team,
                    away_team=away_team,
                    match_time=_text(entry.get("commenceTime")),
                    league=_text(entry.get("league")),
                    sport_key=_text(entry.get("sportKey")),
                    status=_text(entry.get("status")) or DEFAULT_STATUS,
                    odds=parse_odds_rows(rows if isinstance(rows, list) else [], home_team, away_team),
                )
            )

        self._db.log(
            "info",
            "Game search completed",
            {
                "query": query,
                "results": len(games),
                "games_with_odds": sum(1 for game in games if game.odds.has_valid_odds),
            },
        )
        return games


def _payload_entries(response: ApiResponse) -> List[Mapping[str, Any]]:
    payload = response.data
    data = payload.get("data") if isinstance(payload, Mapping) else payload
    if not isinstance(data, list):
        return []
    return [entry for entry in data if isinstance(entry, Mapping)]


def _text(value: Optional[Any]) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
