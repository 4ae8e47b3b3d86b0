"""Connection settings for the shop backend."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from odds_client.leagues import DEFAULT_LEAGUE_PATH, default_league_paths

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT_SECONDS = 15.0


@dataclass
class ApiConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    league_paths: Dict[str, str] = field(default_factory=default_league_paths)
    default_league_path: str = DEFAULT_LEAGUE_PATH

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """Build a config from ``SHOP_API_URL`` and ``SHOP_API_TIMEOUT``."""

        env = os.environ if environ is None else environ
        base_url = (env.get("SHOP_API_URL") or "").strip() or DEFAULT_BASE_URL
        timeout = _safe_positive_float(env.get("SHOP_API_TIMEOUT"))
        return cls(
            base_url=base_url.rstrip("/"),
            timeout_seconds=timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
        )


def _safe_positive_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None
