"""Market keys and market bucketing for both backend payload shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from normalize.outcomes import Outcome, normalize_outcome

H2H = "h2h"
DOUBLE_CHANCE = "double_chance"
TOTALS = "totals"
BTTS = "btts"
SPREADS = "spreads"
TEAM_TOTALS = "team_totals"

H2H_H1 = "h2h_h1"
H2H_H2 = "h2h_h2"
TOTALS_H1 = "totals_h1"
TOTALS_H2 = "totals_h2"
TEAM_TOTALS_H1 = "team_totals_h1"
TEAM_TOTALS_H2 = "team_totals_h2"

MARKET_KEYS: Tuple[str, ...] = (
    H2H,
    DOUBLE_CHANCE,
    TOTALS,
    BTTS,
    SPREADS,
    TEAM_TOTALS,
    H2H_H1,
    H2H_H2,
    TOTALS_H1,
    TOTALS_H2,
    TEAM_TOTALS_H1,
    TEAM_TOTALS_H2,
)


@dataclass(frozen=True)
class MarketBucket:
    """All outcomes offered for one market key."""

    market_key: str
    outcomes: Tuple[Outcome, ...] = ()

    def __len__(self) -> int:
        return len(self.outcomes)


def find_market(bookmakers: Optional[Iterable[Any]], market_key: str) -> Optional[Mapping[str, Any]]:
    """Return the first market with ``market_key``, scanning bookmakers in order.

    The first bookmaker carrying the market wins; prices are never compared
    across bookmakers.
    """

    for bookmaker in bookmakers or []:
        if not isinstance(bookmaker, Mapping):
            continue
        for market in bookmaker.get("markets") or []:
            if isinstance(market, Mapping) and market.get("key") == market_key:
                return market
    return None


def bucket_bookmakers(bookmakers: Optional[Iterable[Any]]) -> Dict[str, MarketBucket]:
    """Build one bucket per known market key from the legacy bookmaker shape."""

    books = list(bookmakers or [])
    buckets: Dict[str, MarketBucket] = {}
    for market_key in MARKET_KEYS:
        market = find_market(books, market_key)
        raw_outcomes = market.get("outcomes") if market else None
        buckets[market_key] = MarketBucket(
            market_key,
            tuple(normalize_outcome(raw) for raw in raw_outcomes or []),
        )
    return buckets


def bucket_rows(rows: Optional[Iterable[Any]]) -> Dict[str, MarketBucket]:
    """Build one bucket per known market key from flat ``market_key`` rows.

    A row either groups its outcomes under ``outcomes`` or is itself a single
    outcome (the backend's one-row-per-outcome odds table).
    """

    collected: Dict[str, List[Outcome]] = {key: [] for key in MARKET_KEYS}
    for row in rows or []:
        if not isinstance(row, Mapping):
            continue
        market_key = row.get("market_key")
        target = collected.get(market_key) if isinstance(market_key, str) else None
        if target is None:
            continue
        if "outcomes" in row:
            target.extend(normalize_outcome(raw) for raw in row.get("outcomes") or [])
        else:
            target.append(normalize_outcome(row))
    return {key: MarketBucket(key, tuple(outcomes)) for key, outcomes in collected.items()}
