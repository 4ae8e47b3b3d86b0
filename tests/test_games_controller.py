import pytest

from controller.games import DEFAULT_STATUS, GamesController
from odds_client.client import ApiResponse, ShopApiError
from persistence.database import Database

H2H_MARKET = {
    "key": "h2h",
    "outcomes": [
        {"name": "Arsenal", "price": 1.8},
        {"name": "Draw", "price": 3.2},
        {"name": "Chelsea", "price": 4.5},
    ],
}


class DummyClient:
    def __init__(self, league_payload=None, search_payload=None):
        self.league_payload = league_payload
        self.search_payload = search_payload
        self.searches = []

    def get_league_odds(self, league_key):
        return ApiResponse(self.league_payload, 200)

    def autocomplete_games(self, query, limit=20):
        self.searches.append((query, limit))
        return ApiResponse(self.search_payload, 200)


class FailingClient:
    def get_league_odds(self, league_key):
        raise ShopApiError("Backend request to /epl/odds failed with status 500: oops", status_code=500)

    def autocomplete_games(self, query, limit=20):
        raise ShopApiError("Backend request to /games/autocomplete failed with status 502: bad", status_code=502)


@pytest.fixture
def database(tmp_path):
    return Database(tmp_path / "games.db")


def test_load_league_games_parses_bookmakers(database):
    payload = [
        {
            "id": "g1",
            "sport_key": "soccer_epl",
            "sport_title": "EPL",
            "commence_time": "2025-03-01T15:00:00Z",
            "home_team": "Arsenal",
            "away_team": "Chelsea",
            "bookmakers": [{"key": "book", "markets": [H2H_MARKET]}],
        },
        {"id": "g2", "home_team": "Everton", "away_team": "Fulham", "bookmakers": []},
    ]
    controller = GamesController(DummyClient(league_payload=payload), database)

    games = controller.load_league_games("soccer_epl")

    assert len(games) == 1
    game = games[0]
    assert game.title == "Arsenal vs Chelsea"
    assert game.league == "EPL"
    assert game.status == DEFAULT_STATUS
    assert game.odds.home_odds == 1.8
    assert game.odds.has_valid_odds

    record = database.fetch_logs()[-1]
    assert record.message == "League odds loaded"
    assert record.context == {
        "league": "soccer_epl",
        "games_received": 2,
        "games_parsed": 1,
        "skipped_no_bookmakers": 1,
        "games_with_odds": 1,
    }


def test_load_league_games_defaults_sport_key(database):
    payload = {"data": [{"id": 7, "home_team": "A", "away_team": "B", "bookmakers": [{"markets": []}]}]}
    games = GamesController(DummyClient(league_payload=payload), database).load_league_games("soccer_epl")
    assert games[0].id == "7"
    assert games[0].sport_key == "soccer_epl"
    assert not games[0].odds.has_valid_odds


def test_load_league_games_logs_and_reraises_failures(database):
    controller = GamesController(FailingClient(), database)

    with pytest.raises(ShopApiError):
        controller.load_league_games("soccer_epl")

    record = database.fetch_logs()[-1]
    assert record.level == "error"
    assert record.message == "League odds fetch failed"
    assert "500" in record.context["error"]


def test_search_games_parses_flat_rows(database):
    payload = {
        "data": [
            {
                "id": "g9",
                "homeTeam": "Arsenal",
                "awayTeam": "Chelsea",
                "commenceTime": "2025-03-01T15:00:00Z",
                "league": "EPL",
                "sportKey": "soccer_epl",
                "odds": [
                    {"market_key": "btts", "outcome_name": "Yes", "outcome_price": 1.7, "outcome_point": None},
                ],
            },
            {"id": "g10", "homeTeam": "Everton", "awayTeam": "Fulham", "status": "live", "odds": None},
        ]
    }
    client = DummyClient(search_payload=payload)
    games = GamesController(client, database).search_games("  arse ", limit=5)

    assert client.searches == [("arse", 5)]
    assert [game.id for game in games] == ["g9", "g10"]
    assert games[0].odds.both_teams_to_score.yes == 1.7
    assert games[0].odds.has_valid_odds
    assert games[1].status == "live"
    assert not games[1].odds.has_valid_odds

    record = database.fetch_logs()[-1]
    assert record.message == "Game search completed"
    assert record.context == {"query": "arse", "results": 2, "games_with_odds": 1}


def test_blank_search_makes_no_request(database):
    client = DummyClient(search_payload={"data": []})
    assert GamesController(client, database).search_games("   ") == []
    assert client.searches == []


def test_search_failure_is_logged(database):
    with pytest.raises(ShopApiError):
        GamesController(FailingClient(), database).search_games("chelsea")
    assert database.fetch_logs()[-1].message == "Game search failed"
