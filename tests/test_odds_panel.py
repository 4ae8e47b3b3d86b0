from controller.games import Game
from odds_engine.models import ParsedOdds
from ui.odds_panel import OddsPanel
from ui.sections import BetSelection


def make_game(**odds):
    return Game("g1", "Arsenal", "Chelsea", "2025-03-01T15:00:00Z", "EPL", "soccer_epl", "upcoming", ParsedOdds(**odds))


def test_panel_renders_buttons_and_disables_unpriced(qapp):
    panel = OddsPanel()
    panel.set_game(make_game(home_odds=1.8, away_odds=4.5))

    buttons = panel.option_buttons()
    assert [button.text() for _, button in buttons] == ["1\n1.80", "X\n—", "2\n4.50"]
    assert [button.isEnabled() for _, button in buttons] == [True, False, True]
    assert "Arsenal vs Chelsea" in panel.title_label.text()


def test_clicking_priced_option_emits_selection(qapp):
    panel = OddsPanel()
    game = make_game(home_odds=1.8)
    panel.set_game(game)
    received = []
    panel.selectionRequested.connect(received.append)

    panel.option_buttons()[0][1].click()

    assert received == [BetSelection("g1", "3 Way", "Home", 1.8)]


def test_clearing_game_removes_buttons(qapp):
    panel = OddsPanel()
    panel.set_game(make_game(home_odds=1.8))
    panel.set_game(None)
    assert panel.option_buttons() == []
    assert panel.title_label.text() == "Select a game"


def test_game_without_odds_shows_placeholder(qapp):
    panel = OddsPanel()
    panel.set_game(make_game())
    assert panel.option_buttons() == []
    assert panel.game is not None
