from normalize.markets import (
    H2H,
    MARKET_KEYS,
    TEAM_TOTALS_H1,
    TOTALS,
    MarketBucket,
    bucket_bookmakers,
    bucket_rows,
    find_market,
)
from normalize.outcomes import Outcome


BOOKMAKERS = [
    {
        "key": "book_a",
        "markets": [
            {"key": "h2h", "outcomes": [{"name": "Arsenal", "price": 1.8}]},
        ],
    },
    {
        "key": "book_b",
        "markets": [
            {"key": "h2h", "outcomes": [{"name": "Arsenal", "price": 1.95}]},
            {"key": "totals", "outcomes": [{"name": "Over", "price": 1.9, "point": 2.5}]},
        ],
    },
]


def test_find_market_returns_first_bookmaker_carrying_the_key():
    market = find_market(BOOKMAKERS, "h2h")
    assert market["outcomes"][0]["price"] == 1.8


def test_find_market_scans_later_bookmakers():
    assert find_market(BOOKMAKERS, "totals")["outcomes"][0]["point"] == 2.5


def test_find_market_returns_none_when_absent():
    assert find_market(BOOKMAKERS, "btts") is None
    assert find_market([], "h2h") is None
    assert find_market(None, "h2h") is None


def test_find_market_skips_malformed_entries():
    bookmakers = [None, {"markets": None}, {"markets": ["bad", {"key": "h2h", "outcomes": []}]}]
    assert find_market(bookmakers, "h2h") == {"key": "h2h", "outcomes": []}


def test_bucket_bookmakers_covers_every_market_key():
    buckets = bucket_bookmakers(BOOKMAKERS)
    assert set(buckets) == set(MARKET_KEYS)
    assert buckets[H2H].outcomes == (Outcome(name="Arsenal", price=1.8),)
    assert buckets[TOTALS].outcomes == (Outcome(name="Over", price=1.9, point=2.5),)
    assert buckets[TEAM_TOTALS_H1] == MarketBucket(TEAM_TOTALS_H1)


def test_bucket_bookmakers_tolerates_null_outcomes():
    buckets = bucket_bookmakers([{"markets": [{"key": "btts", "outcomes": None}]}])
    assert len(buckets["btts"]) == 0


def test_bucket_rows_accepts_grouped_rows():
    rows = [
        {"market_key": "totals", "outcomes": [{"name": "Over", "price": 1.9, "point": 2.5}]},
        {"market_key": "totals", "outcomes": [{"name": "Under", "price": 1.95, "point": 2.5}]},
    ]
    buckets = bucket_rows(rows)
    assert [o.name for o in buckets[TOTALS].outcomes] == ["Over", "Under"]


def test_bucket_rows_accepts_one_row_per_outcome():
    rows = [
        {"bookmaker_key": "b1", "market_key": "h2h", "outcome_name": "Arsenal", "outcome_price": 1.8, "outcome_point": None},
        {"bookmaker_key": "b1", "market_key": "h2h", "outcome_name": "Draw", "outcome_price": 3.2, "outcome_point": None},
    ]
    buckets = bucket_rows(rows)
    assert buckets[H2H].outcomes == (Outcome("Arsenal", 1.8), Outcome("Draw", 3.2))


def test_bucket_rows_ignores_unknown_keys_and_malformed_rows():
    rows = [
        {"market_key": "correct_score", "outcomes": [{"name": "1-0", "price": 7.0}]},
        {"market_key": ["h2h"], "outcome_name": "Arsenal"},
        "garbage",
        None,
    ]
    buckets = bucket_rows(rows)
    assert all(len(bucket) == 0 for bucket in buckets.values())


def test_bucket_rows_handles_missing_input():
    assert all(len(bucket) == 0 for bucket in bucket_rows(None).values())
