# services/formatting.py
from datetime import datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from services.config import DISPLAY_TZ


def safe_int(x: Any, default: int = 0) -> int:
    try:
        if x is None:
            return default
        return int(x)
    except Exception:
        return default


def format_player_name(full_name: Optional[str]) -> str:
    """
    'Mike Trout' -> 'M.Trout'. Only the first and last tokens count, so middle
    names and suffixes drop out. Single-token names come back unchanged.
    """
    name = full_name or ""
    parts = name.split()
    if len(parts) < 2:
        return name
    return f"{parts[0][0]}.{parts[-1]}"


def format_record(wins: Any, losses: Any) -> str:
    return f"{safe_int(wins)}-{safe_int(losses)}"


def _parse_iso(iso_str: str) -> Optional[datetime]:
    if not iso_str:
        return None
    s = iso_str.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s)
    except Exception:
        return None


def format_game_time(iso_str: str, tz_name: str = DISPLAY_TZ) -> str:
    """
    StatsAPI gameDate is ISO like '2025-07-04T23:05:00Z'.
    Returns local first-pitch time like '7:05 PM EDT', or '' if unparseable.
    """
    dt = _parse_iso(iso_str)
    if dt is None:
        return ""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    try:
        tz = ZoneInfo(tz_name)
    except Exception:
        tz = ZoneInfo("America/New_York")
    return dt.astimezone(tz).strftime("%I:%M %p %Z").lstrip("0")
