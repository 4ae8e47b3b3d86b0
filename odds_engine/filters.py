"""Point comparison and display filtering for totals lines.

Bookmakers often quote whole and quarter lines (``2.0``, ``2.25``, ``2.75``)
next to the half line of the same family (``2.5``).  When the half line is
offered it is the one shown; the neighbours are suppressed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, TypeVar

from normalize.names import AWAY, HOME
from odds_engine.models import TeamTotalLine, TotalLine

POINT_TOLERANCE = 0.001

Line = TypeVar("Line", TotalLine, TeamTotalLine)


@dataclass(frozen=True)
class TeamTotalRow:
    """Home and away team-total lines sharing one point."""

    point: float
    home: TeamTotalLine | None = None
    away: TeamTotalLine | None = None


def points_equal(first: float, second: float) -> bool:
    return abs(first - second) < POINT_TOLERANCE


def is_shadowable_point(point: float) -> bool:
    """Whole and quarter points give way to the half point of their family."""

    fraction = point - math.floor(point)
    return any(points_equal(fraction, target) for target in (0.0, 0.25, 0.75, 1.0))


def find_line(lines: Sequence[Line], point: float) -> Optional[Line]:
    for line in lines:
        if points_equal(line.point, point):
            return line
    return None


def suppress_shadowed_lines(lines: Sequence[Line]) -> List[Line]:
    """Drop whole/quarter lines whose half-point sibling is also offered."""

    points = [line.point for line in lines]

    def offered(value: float) -> bool:
        return any(points_equal(point, value) for point in points)

    kept: List[Line] = []
    for line in lines:
        if is_shadowable_point(line.point) and offered(math.floor(line.point) + 0.5):
            continue
        kept.append(line)
    return kept


def group_team_totals(lines: Sequence[TeamTotalLine]) -> List[TeamTotalRow]:
    """Pair home and away lines by point, ascending, after suppression."""

    rows: Dict[float, Dict[str, TeamTotalLine]] = {}
    for line in suppress_shadowed_lines(lines):
        if line.team not in (HOME, AWAY):
            continue
        rows.setdefault(line.point, {})[line.team] = line
    return [
        TeamTotalRow(point=point, home=entry.get(HOME), away=entry.get(AWAY))
        for point, entry in sorted(rows.items())
    ]
