"""Canonical odds structures handed to the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple


def is_priced(value: Optional[float]) -> bool:
    """A usable price is present and non-zero."""

    return bool(value)


@dataclass(frozen=True)
class H2HOdds:
    home: float | None = None
    draw: float | None = None
    away: float | None = None

    def any_priced(self) -> bool:
        return is_priced(self.home) or is_priced(self.draw) or is_priced(self.away)

    def fully_priced(self) -> bool:
        return is_priced(self.home) and is_priced(self.draw) and is_priced(self.away)

    def to_dict(self) -> Dict[str, Any]:
        return {"home": self.home, "draw": self.draw, "away": self.away}


@dataclass(frozen=True)
class DoubleChanceOdds:
    home_or_draw: float | None = None
    home_or_away: float | None = None
    draw_or_away: float | None = None

    def any_priced(self) -> bool:
        return is_priced(self.home_or_draw) or is_priced(self.home_or_away) or is_priced(self.draw_or_away)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "homeOrDraw": self.home_or_draw,
            "homeOrAway": self.home_or_away,
            "drawOrAway": self.draw_or_away,
        }


@dataclass(frozen=True)
class TotalLine:
    point: float
    over: float | None = None
    under: float | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {"point": self.point, "over": self.over, "under": self.under}


@dataclass(frozen=True)
class TeamTotalLine:
    team: str
    point: float
    over: float | None = None
    under: float | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {"team": self.team, "point": self.point, "over": self.over, "under": self.under}


@dataclass(frozen=True)
class BothTeamsToScoreOdds:
    yes: float | None = None
    no: float | None = None

    def any_priced(self) -> bool:
        return is_priced(self.yes) or is_priced(self.no)

    def to_dict(self) -> Dict[str, Any]:
        return {"yes": self.yes, "no": self.no}


@dataclass(frozen=True)
class SpreadOdds:
    home_spread: float | None = None
    away_spread: float | None = None
    home_spread_odds: float | None = None
    away_spread_odds: float | None = None
    spread_line: float | None = None

    def any_priced(self) -> bool:
        return is_priced(self.home_spread_odds) or is_priced(self.away_spread_odds)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "homeSpread": self.home_spread,
            "awaySpread": self.away_spread,
            "homeSpreadOdds": self.home_spread_odds,
            "awaySpreadOdds": self.away_spread_odds,
            "spreadLine": self.spread_line,
        }


@dataclass(frozen=True)
class OverUnder:
    over25: float | None = None
    under25: float | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {"over25": self.over25, "under25": self.under25}


@dataclass(frozen=True)
class ParsedOdds:
    """Every market the UI can render for one game.

    Optional half-time and team-total fields are ``None`` when the backend
    offered nothing usable for them.
    """

    home_odds: float | None = None
    draw_odds: float | None = None
    away_odds: float | None = None
    double_chance: DoubleChanceOdds = DoubleChanceOdds()
    totals: Tuple[TotalLine, ...] = ()
    both_teams_to_score: BothTeamsToScoreOdds = BothTeamsToScoreOdds()
    spreads: SpreadOdds = SpreadOdds()
    over_under: OverUnder = OverUnder()
    team_totals: Tuple[TeamTotalLine, ...] | None = None
    h2h_h1: H2HOdds | None = None
    h2h_h2: H2HOdds | None = None
    totals_h1: Tuple[TotalLine, ...] | None = None
    totals_h2: Tuple[TotalLine, ...] | None = None
    team_totals_h1: Tuple[TeamTotalLine, ...] | None = None
    team_totals_h2: Tuple[TeamTotalLine, ...] | None = None
    has_valid_odds: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Render the camelCase structure consumed by the game views."""

        payload: Dict[str, Any] = {
            "homeOdds": self.home_odds,
            "drawOdds": self.draw_odds,
            "awayOdds": self.away_odds,
            "doubleChance": self.double_chance.to_dict(),
            "totals": _lines(self.totals),
            "bothTeamsToScore": self.both_teams_to_score.to_dict(),
            "spreads": self.spreads.to_dict(),
            "overUnder": self.over_under.to_dict(),
        }
        if self.team_totals is not None:
            payload["teamTotals"] = _lines(self.team_totals)
        if self.h2h_h1 is not None:
            payload["h2h_h1"] = self.h2h_h1.to_dict()
        if self.h2h_h2 is not None:
            payload["h2h_h2"] = self.h2h_h2.to_dict()
        if self.totals_h1 is not None:
            payload["totals_h1"] = _lines(self.totals_h1)
        if self.totals_h2 is not None:
            payload["totals_h2"] = _lines(self.totals_h2)
        if self.team_totals_h1 is not None:
            payload["team_totals_h1"] = _lines(self.team_totals_h1)
        if self.team_totals_h2 is not None:
            payload["team_totals_h2"] = _lines(self.team_totals_h2)
        payload["hasValidOdds"] = self.has_valid_odds
        return payload


def _lines(lines: Sequence[TotalLine | TeamTotalLine]) -> List[Dict[str, Any]]:
    return [line.to_dict() for line in lines]
