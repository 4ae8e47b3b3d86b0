"""Name matching rules used to identify teams and market legs.

Outcome labels coming from the shop backend are free text: a head-to-head
outcome is labelled with the team name itself, double-chance legs appear as
``"1X"``, ``"Home/Draw"`` or ``"Arsenal or Draw"``, and team totals may carry
the team either in ``description`` or inside ``name``.  Each matching rule is
a small predicate so extractors can combine them without re-implementing the
string handling.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, Optional, Tuple

from normalize.outcomes import Outcome

HOME = "home"
AWAY = "away"
DRAW = "draw"

HOME_OR_DRAW = "home_or_draw"
HOME_OR_AWAY = "home_or_away"
DRAW_OR_AWAY = "draw_or_away"


def normalize_label(value: str) -> str:
    """Lower-case ``value``, collapse internal whitespace and trim it."""

    return _squash_whitespace(value.casefold())


def is_exact_name(candidate: str, target: str) -> bool:
    return candidate == target


def equals_ignore_case(candidate: str, target: str) -> bool:
    return candidate.casefold() == target.casefold()


def contains_ignore_case(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def contains_either_way(first: str, second: str) -> bool:
    """True when either string contains the other, ignoring case."""

    a = first.casefold().strip()
    b = second.casefold().strip()
    return a in b or b in a


def matches_any_variant(candidate: str, variants: Iterable[str]) -> bool:
    label = normalize_label(candidate)
    return any(label == normalize_label(variant) for variant in variants)


def double_chance_variants(home_team: str, away_team: str) -> Dict[str, Tuple[str, ...]]:
    """Accepted labels for each double-chance leg."""

    return {
        HOME_OR_DRAW: (
            f"{home_team} or Draw",
            f"Draw or {home_team}",
            "Home or Draw",
            "Draw or Home",
            "1X",
            "X1",
            "Home/Draw",
            "Draw/Home",
        ),
        HOME_OR_AWAY: (
            f"{home_team} or {away_team}",
            f"{away_team} or {home_team}",
            "Home or Away",
            "Away or Home",
            "12",
            "21",
            "Home/Away",
            "Away/Home",
        ),
        DRAW_OR_AWAY: (
            f"Draw or {away_team}",
            f"{away_team} or Draw",
            "Draw or Away",
            "Away or Draw",
            "X2",
            "2X",
            "Draw/Away",
            "Away/Draw",
        ),
    }


def team_from_description(description: Optional[str], home_team: str, away_team: str) -> Optional[str]:
    """Resolve the team a team-total line belongs to from its description.

    The description may be the exact team name, a longer or shorter spelling
    of it (``"Arsenal FC"`` vs ``"Arsenal"``) or the literal side name.
    """

    if not description:
        return None
    label = description.casefold().strip()
    if contains_either_way(label, home_team) or label == HOME:
        return HOME
    if contains_either_way(label, away_team) or label == AWAY:
        return AWAY
    return None


def team_from_name(name: str, home_team: str, away_team: str) -> Optional[str]:
    """Resolve the team from an outcome label such as ``"Arsenal Over"``."""

    label = name.casefold()
    if home_team.casefold().strip() in label or HOME in label:
        return HOME
    if away_team.casefold().strip() in label or AWAY in label:
        return AWAY
    return None


def attribute_team(outcome: Outcome, home_team: str, away_team: str) -> Optional[str]:
    """Return ``"home"``, ``"away"`` or ``None`` for a team-total outcome."""

    return team_from_description(outcome.description, home_team, away_team) or team_from_name(
        outcome.name, home_team, away_team
    )


@lru_cache(maxsize=512)
def _squash_whitespace(value: str) -> str:
    return re.sub(r"\s+", " ", value.strip())
