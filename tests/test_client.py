import pytest

from odds_client.client import ApiResponse, ShopApiClient, ShopApiError
from odds_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ApiConfig
from odds_client.leagues import DEFAULT_LEAGUE_PATH, get_odds_path_for_league


class DummyResponse:
    def __init__(self, payload, status_code=200, text=""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        return self._payload


class DummySession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        return self.response


def test_league_odds_uses_league_path():
    session = DummySession(DummyResponse([{"id": "g1"}]))
    client = ShopApiClient(ApiConfig(base_url="http://shop.test/api/", timeout_seconds=5), session=session)

    response = client.get_league_odds("soccer_uefa_world_cup_qualifiers")

    assert response == ApiResponse([{"id": "g1"}], 200)
    assert session.calls == [("http://shop.test/api/uefa-world-cup-qualifiers/odds", {}, 5)]


def test_unknown_league_falls_back_to_default_path():
    session = DummySession(DummyResponse([]))
    ShopApiClient(ApiConfig(base_url="http://shop.test/api"), session=session).get_league_odds("soccer_unknown")
    assert session.calls[0][0] == f"http://shop.test/api{DEFAULT_LEAGUE_PATH}"


def test_autocomplete_sends_query_and_limit():
    session = DummySession(DummyResponse({"data": []}))
    client = ShopApiClient(ApiConfig(base_url="http://shop.test/api"), session=session)

    client.autocomplete_games("arsenal", limit=5)

    url, params, timeout = session.calls[0]
    assert url == "http://shop.test/api/games/autocomplete"
    assert params == {"q": "arsenal", "limit": "5"}
    assert timeout == DEFAULT_TIMEOUT_SECONDS


def test_non_success_status_raises():
    session = DummySession(DummyResponse(None, status_code=503, text="unavailable"))
    client = ShopApiClient(session=session)

    with pytest.raises(ShopApiError) as excinfo:
        client.get_league_odds("soccer_epl")

    assert excinfo.value.status_code == 503
    assert "unavailable" in str(excinfo.value)


def test_empty_base_url_is_rejected():
    with pytest.raises(ValueError):
        ShopApiClient(ApiConfig(base_url=""), session=DummySession(DummyResponse(None)))


def test_config_from_env():
    config = ApiConfig.from_env({"SHOP_API_URL": " http://backend:9000/api/ ", "SHOP_API_TIMEOUT": "2.5"})
    assert config.base_url == "http://backend:9000/api"
    assert config.timeout_seconds == 2.5


def test_config_from_env_defaults_on_missing_or_bad_values():
    assert ApiConfig.from_env({}).base_url == DEFAULT_BASE_URL
    assert ApiConfig.from_env({"SHOP_API_TIMEOUT": "soon"}).timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert ApiConfig.from_env({"SHOP_API_TIMEOUT": "-1"}).timeout_seconds == DEFAULT_TIMEOUT_SECONDS


def test_league_paths_can_be_overridden():
    paths = {"soccer_la_liga": "/la-liga/odds"}
    assert get_odds_path_for_league("soccer_la_liga", paths) == "/la-liga/odds"
    assert get_odds_path_for_league("soccer_epl", paths, default_path="/fallback") == "/fallback"
    assert get_odds_path_for_league("soccer_epl") == "/epl/odds"
