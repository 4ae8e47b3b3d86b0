"""Per-market odds extraction.

Every extractor takes the raw (or already normalized) outcomes of a single
market and returns that market's canonical structure.  Empty input yields the
all-``None`` default; an outcome that cannot be placed is ignored.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from normalize.names import (
    AWAY,
    DRAW,
    DRAW_OR_AWAY,
    HOME,
    HOME_OR_AWAY,
    HOME_OR_DRAW,
    attribute_team,
    contains_ignore_case,
    double_chance_variants,
    equals_ignore_case,
    is_exact_name,
    matches_any_variant,
)
from normalize.outcomes import Outcome, normalize_outcomes
from odds_engine.models import (
    BothTeamsToScoreOdds,
    DoubleChanceOdds,
    H2HOdds,
    SpreadOdds,
    TeamTotalLine,
    TotalLine,
)

logger = logging.getLogger(__name__)

_TEAM_ORDER = {HOME: 0, AWAY: 1}

OutcomeInput = Optional[Iterable[Any]]


def extract_h2h(outcomes: OutcomeInput, home_team: str, away_team: str) -> H2HOdds:
    """Head-to-head prices; team outcomes must carry the exact team name."""

    normalized = normalize_outcomes(outcomes)
    home = _first(normalized, lambda o: is_exact_name(o.name, home_team))
    away = _first(normalized, lambda o: is_exact_name(o.name, away_team))
    draw = _first(normalized, lambda o: equals_ignore_case(o.name, DRAW))
    return H2HOdds(home=_price(home), draw=_price(draw), away=_price(away))


def extract_double_chance(outcomes: OutcomeInput, home_team: str, away_team: str) -> DoubleChanceOdds:
    normalized = normalize_outcomes(outcomes)
    if not normalized:
        return DoubleChanceOdds()

    variants = double_chance_variants(home_team, away_team)

    def leg_price(leg: str) -> Optional[float]:
        return _price(_first(normalized, lambda o: matches_any_variant(o.name, variants[leg])))

    return DoubleChanceOdds(
        home_or_draw=leg_price(HOME_OR_DRAW),
        home_or_away=leg_price(HOME_OR_AWAY),
        draw_or_away=leg_price(DRAW_OR_AWAY),
    )


def extract_totals(outcomes: OutcomeInput) -> Tuple[TotalLine, ...]:
    """Over/under prices grouped by point, ascending.

    A later outcome for the same side and point replaces an earlier one.
    """

    grouped: Dict[float, Dict[str, Optional[float]]] = {}
    for outcome in normalize_outcomes(outcomes):
        if outcome.point is None:
            continue
        _assign_side(grouped.setdefault(outcome.point, {"over": None, "under": None}), outcome)

    lines = [
        TotalLine(point=point, over=entry["over"], under=entry["under"])
        for point, entry in grouped.items()
        if entry["over"] is not None or entry["under"] is not None
    ]
    return tuple(sorted(lines, key=lambda line: line.point))


def extract_team_totals(outcomes: OutcomeInput, home_team: str, away_team: str) -> Tuple[TeamTotalLine, ...]:
    """Team-specific over/under lines, ascending by point, home first on ties."""

    grouped: Dict[Tuple[str, float], Dict[str, Optional[float]]] = {}
    for outcome in normalize_outcomes(outcomes):
        if outcome.point is None:
            continue
        team = attribute_team(outcome, home_team, away_team)
        if team is None:
            logger.warning(
                "Team total outcome not matched to a team: name=%r description=%r home=%r away=%r",
                outcome.name,
                outcome.description,
                home_team,
                away_team,
            )
            continue
        _assign_side(grouped.setdefault((team, outcome.point), {"over": None, "under": None}), outcome)

    lines = [
        TeamTotalLine(team=team, point=point, over=entry["over"], under=entry["under"])
        for (team, point), entry in grouped.items()
        if entry["over"] is not None or entry["under"] is not None
    ]
    return tuple(sorted(lines, key=lambda line: (line.point, _TEAM_ORDER[line.team])))


def extract_btts(outcomes: OutcomeInput) -> BothTeamsToScoreOdds:
    normalized = normalize_outcomes(outcomes)
    yes = _first(normalized, lambda o: equals_ignore_case(o.name, "yes"))
    no = _first(normalized, lambda o: equals_ignore_case(o.name, "no"))
    return BothTeamsToScoreOdds(yes=_price(yes), no=_price(no))


def extract_spreads(outcomes: OutcomeInput, home_team: str, away_team: str) -> SpreadOdds:
    """Handicap lines taken at face value from the outcomes naming each team."""

    normalized = normalize_outcomes(outcomes)
    if not normalized:
        return SpreadOdds()

    home = _first(normalized, lambda o: contains_ignore_case(o.name, home_team))
    away = _first(normalized, lambda o: contains_ignore_case(o.name, away_team))
    return SpreadOdds(
        home_spread=home.point if home else None,
        away_spread=away.point if away else None,
        home_spread_odds=_price(home),
        away_spread_odds=_price(away),
        spread_line=home.point if home else None,
    )


def has_valid_odds(
    h2h: H2HOdds,
    double_chance: DoubleChanceOdds,
    totals: Sequence[TotalLine],
    both_teams_to_score: BothTeamsToScoreOdds,
    spreads: SpreadOdds,
) -> bool:
    """True when at least one betting option can be offered."""

    return (
        h2h.fully_priced()
        or double_chance.any_priced()
        or len(totals) > 0
        or both_teams_to_score.any_priced()
        or spreads.any_priced()
    )


def _first(outcomes: Sequence[Outcome], predicate) -> Optional[Outcome]:
    for outcome in outcomes:
        if predicate(outcome):
            return outcome
    return None


def _price(outcome: Optional[Outcome]) -> Optional[float]:
    return outcome.price if outcome is not None else None


def _assign_side(entry: Dict[str, Optional[float]], outcome: Outcome) -> None:
    label = outcome.name.casefold()
    if "over" in label:
        entry["over"] = outcome.price
    elif "under" in label:
        entry["under"] = outcome.price
