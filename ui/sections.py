"""Betting options shown on a game card, grouped by section.

This module is free of Qt so the labels and grouping can be checked without a
display.  Totals lines pass through :func:`suppress_shadowed_lines` first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from controller.games import Game
from odds_engine.filters import group_team_totals, suppress_shadowed_lines
from odds_engine.models import H2HOdds, TeamTotalLine, TotalLine, is_priced


@dataclass(frozen=True)
class BetSelection:
    """What a click on a betting option hands to the bet slip."""

    game_id: str
    bet_type: str
    selection: str
    odds: float


@dataclass(frozen=True)
class BettingOption:
    bet_type: str
    selection: str
    label: str
    odds: float | None

    @property
    def clickable(self) -> bool:
        return is_priced(self.odds)

    def to_selection(self, game: Game) -> Optional[BetSelection]:
        if not self.clickable:
            return None
        return BetSelection(game.id, self.bet_type, self.selection, float(self.odds))


@dataclass(frozen=True)
class OptionSection:
    title: str
    options: Tuple[BettingOption, ...]


# (title suffix, bet type prefix) per period
_PERIODS = {
    "full-time": ("", ""),
    "first-half": ("1ST HALF - ", "1st Half "),
    "second-half": ("2ND HALF - ", "2nd Half "),
}


def format_point(point: float) -> str:
    return f"{point:g}"


def build_sections(game: Game) -> List[OptionSection]:
    """Every non-empty betting section for ``game``, in display order."""

    odds = game.odds
    sections: List[Optional[OptionSection]] = [
        _three_way(H2HOdds(odds.home_odds, odds.draw_odds, odds.away_odds), "3 WAY", "3 Way"),
        _double_chance(game),
        _totals(odds.totals, "full-time"),
        _both_teams_to_score(game),
        _spreads(game),
        _team_totals(game, odds.team_totals, "full-time"),
        _three_way(odds.h2h_h1, "3 WAY - FIRST HALF", "1st Half 3 Way"),
        _totals(odds.totals_h1, "first-half"),
        _team_totals(game, odds.team_totals_h1, "first-half"),
        _three_way(odds.h2h_h2, "3 WAY - SECOND HALF", "2nd Half 3 Way"),
        _totals(odds.totals_h2, "second-half"),
        _team_totals(game, odds.team_totals_h2, "second-half"),
    ]
    return [section for section in sections if section is not None]


def _section(title: str, options: Sequence[BettingOption]) -> Optional[OptionSection]:
    if not any(option.odds is not None for option in options):
        return None
    return OptionSection(title, tuple(options))


def _three_way(h2h: Optional[H2HOdds], title: str, bet_type: str) -> Optional[OptionSection]:
    if h2h is None:
        return None
    return _section(
        title,
        [
            BettingOption(bet_type, "Home", "1", h2h.home),
            BettingOption(bet_type, "Draw", "X", h2h.draw),
            BettingOption(bet_type, "Away", "2", h2h.away),
        ],
    )


def _double_chance(game: Game) -> Optional[OptionSection]:
    dc = game.odds.double_chance
    return _section(
        "DOUBLE CHANCE",
        [
            BettingOption("Double Chance", "1 or X", "1X", dc.home_or_draw),
            BettingOption("Double Chance", "X or 2", "X2", dc.draw_or_away),
            BettingOption("Double Chance", "1 or 2", "12", dc.home_or_away),
        ],
    )


def _totals(lines: Optional[Sequence[TotalLine]], period: str) -> Optional[OptionSection]:
    if not lines:
        return None
    title_prefix, bet_prefix = _PERIODS[period]
    options: List[BettingOption] = []
    for line in suppress_shadowed_lines(lines):
        point = format_point(line.point)
        bet_type = f"{bet_prefix}Over/Under {point}"
        options.append(BettingOption(bet_type, f"Over {point}", f"O {point}", line.over))
        options.append(BettingOption(bet_type, f"Under {point}", f"U {point}", line.under))
    return _section(f"{title_prefix}TOTALS", options)


def _both_teams_to_score(game: Game) -> Optional[OptionSection]:
    btts = game.odds.both_teams_to_score
    return _section(
        "BOTH TEAMS TO SCORE",
        [
            BettingOption("Both Teams To Score", "Yes", "Yes", btts.yes),
            BettingOption("Both Teams To Score", "No", "No", btts.no),
        ],
    )


def _spreads(game: Game) -> Optional[OptionSection]:
    spreads = game.odds.spreads
    options = []
    if spreads.home_spread_odds is not None:
        line = _signed(spreads.home_spread)
        options.append(BettingOption("Spread", f"{game.home_team} {line}".strip(), f"1 {line}".strip(), spreads.home_spread_odds))
    if spreads.away_spread_odds is not None:
        line = _signed(spreads.away_spread)
        options.append(BettingOption("Spread", f"{game.away_team} {line}".strip(), f"2 {line}".strip(), spreads.away_spread_odds))
    return _section("SPREADS", options)


def _team_totals(game: Game, lines: Optional[Sequence[TeamTotalLine]], period: str) -> Optional[OptionSection]:
    if not lines:
        return None
    title_prefix, bet_prefix = _PERIODS[period]
    bet_type = f"{bet_prefix}Team Total" if bet_prefix else "Full Time Team Total"
    options: List[BettingOption] = []
    for row in group_team_totals(lines):
        point = format_point(row.point)
        for marker, team, line in (("1", game.home_team, row.home), ("2", game.away_team, row.away)):
            if line is None:
                continue
            options.append(BettingOption(bet_type, f"{team} Over {point}", f"{marker} O {point}", line.over))
            options.append(BettingOption(bet_type, f"{team} Under {point}", f"{marker} U {point}", line.under))
    title = f"{title_prefix}TEAM O/U" if title_prefix else "FULL TIME - TEAM O/U"
    return _section(title, options)


def _signed(point: Optional[float]) -> str:
    if point is None:
        return ""
    return f"{point:+g}"
