"""Entry points turning backend odds payloads into :class:`ParsedOdds`.

``parse_odds_rows`` handles the current backend's flat ``market_key`` rows and
``parse_bookmaker_odds`` the legacy list of bookmakers.  Both reduce their
input to one :class:`MarketBucket` per market key and share the assembly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from normalize import markets
from normalize.markets import MarketBucket, bucket_bookmakers, bucket_rows
from odds_engine.extractors import (
    extract_btts,
    extract_double_chance,
    extract_h2h,
    extract_spreads,
    extract_team_totals,
    extract_totals,
    has_valid_odds,
)
from odds_engine.filters import find_line
from odds_engine.models import H2HOdds, OverUnder, ParsedOdds

OVER_UNDER_POINT = 2.5


def parse_odds_rows(rows: Optional[Iterable[Any]], home_team: str, away_team: str) -> ParsedOdds:
    """Parse ``[{market_key, outcomes}]`` or one-row-per-outcome odds."""

    return assemble(bucket_rows(rows), home_team, away_team)


def parse_bookmaker_odds(bookmakers: Optional[Iterable[Any]], home_team: str, away_team: str) -> ParsedOdds:
    """Parse ``[{markets: [{key, outcomes}]}]``; the first bookmaker with a market wins."""

    return assemble(bucket_bookmakers(bookmakers), home_team, away_team)


def assemble(buckets: Dict[str, MarketBucket], home_team: str, away_team: str) -> ParsedOdds:
    def outcomes(key: str):
        bucket = buckets.get(key)
        return bucket.outcomes if bucket else ()

    h2h = extract_h2h(outcomes(markets.H2H), home_team, away_team)
    double_chance = extract_double_chance(outcomes(markets.DOUBLE_CHANCE), home_team, away_team)
    totals = extract_totals(outcomes(markets.TOTALS))
    both_teams_to_score = extract_btts(outcomes(markets.BTTS))
    spreads = extract_spreads(outcomes(markets.SPREADS), home_team, away_team)
    team_totals = extract_team_totals(outcomes(markets.TEAM_TOTALS), home_team, away_team)

    h2h_h1 = extract_h2h(outcomes(markets.H2H_H1), home_team, away_team)
    h2h_h2 = extract_h2h(outcomes(markets.H2H_H2), home_team, away_team)
    totals_h1 = extract_totals(outcomes(markets.TOTALS_H1))
    totals_h2 = extract_totals(outcomes(markets.TOTALS_H2))
    team_totals_h1 = extract_team_totals(outcomes(markets.TEAM_TOTALS_H1), home_team, away_team)
    team_totals_h2 = extract_team_totals(outcomes(markets.TEAM_TOTALS_H2), home_team, away_team)

    headline = find_line(totals, OVER_UNDER_POINT)

    return ParsedOdds(
        home_odds=h2h.home,
        draw_odds=h2h.draw,
        away_odds=h2h.away,
        double_chance=double_chance,
        totals=totals,
        both_teams_to_score=both_teams_to_score,
        spreads=spreads,
        over_under=OverUnder(
            over25=headline.over if headline else None,
            under25=headline.under if headline else None,
        ),
        team_totals=team_totals or None,
        h2h_h1=_optional_h2h(h2h_h1),
        h2h_h2=_optional_h2h(h2h_h2),
        totals_h1=totals_h1 or None,
        totals_h2=totals_h2 or None,
        team_totals_h1=team_totals_h1 or None,
        team_totals_h2=team_totals_h2 or None,
        has_valid_odds=has_valid_odds(h2h, double_chance, totals, both_teams_to_score, spreads),
    )


def _optional_h2h(odds: H2HOdds) -> Optional[H2HOdds]:
    return odds if odds.any_priced() else None
