# services/mlb_api.py

import logging
from typing import Any, Dict, Optional

import requests

from services.config import (
    HTTP_TIMEOUT_S,
    MLB_API_BASE,
    SCHEDULE_HYDRATE,
    SPORT_ID,
    USER_AGENT,
)

log = logging.getLogger("dugout.mlb_api")


class ProviderError(Exception):
    """StatsAPI was unreachable, answered non-2xx, or sent something that isn't JSON."""


class StatsApiClient:
    def __init__(self, base_url: str = MLB_API_BASE, timeout: float = HTTP_TIMEOUT_S,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> dict:
        url = f"{self.base_url}{endpoint}"
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
            return r.json() or {}
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            log.warning("GET failed %s %s: HTTP %s", url, params, status)
            raise ProviderError(f"HTTP {status} for {endpoint}") from e
        except (requests.exceptions.RequestException, ValueError) as e:
            log.warning("GET failed %s %s: %s", url, params, e)
            raise ProviderError(f"{type(e).__name__} for {endpoint}") from e

    def fetch_schedule(self, date_ymd: str) -> dict:
        """
        One day of games. `dates` is [] on an off day, which is not an error.
        """
        params = {"sportId": SPORT_ID, "date": date_ymd, "hydrate": SCHEDULE_HYDRATE}
        return self._get("/schedule", params)

    def fetch_boxscore(self, game_pk: int) -> dict:
        return self._get(f"/game/{int(game_pk)}/boxscore")

    def close(self):
        self.session.close()


def schedule_games(schedule: Optional[dict]) -> list:
    """dates[0].games from a single-day schedule payload."""
    dates = (schedule or {}).get("dates") or []
    return (dates[0].get("games") or []) if dates else []
