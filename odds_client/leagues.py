"""League catalogue for the shop backend.

The backend exposes one odds endpoint per league.  Unknown league keys fall
back to the Premier League endpoint, which is what the shop serves by default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

DEFAULT_LEAGUE_KEY = "soccer_epl"
DEFAULT_LEAGUE_PATH = "/epl/odds"


@dataclass(frozen=True)
class LeagueInfo:
    """A league offered in the shop."""

    key: str
    title: str
    odds_path: str


ALL_LEAGUES: List[LeagueInfo] = [
    LeagueInfo("soccer_epl", "English Premier League", "/epl/odds"),
    LeagueInfo("soccer_uefa_world_cup_qualifiers", "UEFA World Cup Qualifiers", "/uefa-world-cup-qualifiers/odds"),
]

_LEAGUE_PATHS: Dict[str, str] = {league.key: league.odds_path for league in ALL_LEAGUES}


def default_league_paths() -> Dict[str, str]:
    return dict(_LEAGUE_PATHS)


def get_odds_path_for_league(
    league_key: str,
    league_paths: Optional[Mapping[str, str]] = None,
    default_path: str = DEFAULT_LEAGUE_PATH,
) -> str:
    """Return the odds endpoint path for ``league_key``."""

    paths = _LEAGUE_PATHS if league_paths is None else league_paths
    if league_key and league_key in paths:
        return paths[league_key]
    return default_path
