"""Outcome normalization.

Backend responses describe a priced line either with camelCase keys
(``name``/``price``/``point``) or with the snake_case column names of the flat
odds table (``outcome_name``/``outcome_price``/``outcome_point``).  Everything
downstream works on :class:`Outcome`, so the two spellings are reconciled here
and nowhere else.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Outcome:
    """A single priced betting line."""

    name: str
    price: float
    point: float | None = None
    description: str | None = None


def normalize_outcome(raw: Any) -> Outcome:
    """Map one raw outcome record onto :class:`Outcome`.

    camelCase keys win over their snake_case twins unless the camelCase value
    is empty.  Already normalized outcomes pass through unchanged.  Missing or
    unusable fields fall back to ``""``, ``0.0`` and ``None``; this function
    never raises.
    """

    if isinstance(raw, Outcome):
        return raw
    if not isinstance(raw, Mapping):
        return Outcome(name="", price=0.0)

    name = raw.get("name") or raw.get("outcome_name") or ""
    price = _safe_float(raw.get("price") or raw.get("outcome_price"))
    point = raw.get("point")
    if point is None:
        point = raw.get("outcome_point")
    description = raw.get("description")

    return Outcome(
        name=name if isinstance(name, str) else str(name),
        price=price if price is not None else 0.0,
        point=_safe_float(point),
        description=description if isinstance(description, str) and description else None,
    )


def normalize_outcomes(raw_outcomes: Optional[Iterable[Any]]) -> Tuple[Outcome, ...]:
    if not raw_outcomes:
        return ()
    return tuple(normalize_outcome(raw) for raw in raw_outcomes)


def _safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
