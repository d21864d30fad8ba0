from flask import Flask, jsonify, request
import logging
import threading
from datetime import date, datetime, timezone
from typing import Dict, Optional
from zoneinfo import ZoneInfo

from services.config import DISPLAY_TZ, POLL_TODAY, REFRESH_INTERVAL_S
from services.models import ScoreboardDay
from services.poller import ScoreboardPoller
from services.scoreboard import ScoreboardEngine

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
log = logging.getLogger("dugout")

# one engine (and so one box-score cache) per process
engine = ScoreboardEngine()

# latest polled scoreboard, keyed by its date
_latest: Dict[str, ScoreboardDay] = {}
_latest_lock = threading.Lock()


def _store_latest(day: ScoreboardDay) -> None:
    with _latest_lock:
        _latest.clear()
        _latest[day.date] = day


poller = ScoreboardPoller(engine, _store_latest, interval=REFRESH_INTERVAL_S)


def _today_ymd() -> str:
    try:
        return datetime.now(timezone.utc).astimezone(ZoneInfo(DISPLAY_TZ)).strftime("%Y-%m-%d")
    except Exception as e:
        log.warning("display tz %r unusable, using local date: %s", DISPLAY_TZ, e)
        return date.today().isoformat()


def _valid_ymd(d: str) -> bool:
    try:
        return datetime.strptime(d, "%Y-%m-%d").strftime("%Y-%m-%d") == d
    except ValueError:
        return False


def _flag(name: str) -> bool:
    return (request.args.get(name) or "").lower() in ("1", "true", "yes")


def _polled_day(d: str) -> Optional[ScoreboardDay]:
    """Today's scoreboard from the poller; also (re)points the poller when the day rolls over."""
    if not POLL_TODAY:
        return None
    if poller.date != d:
        poller.select_date(d)
        return None
    with _latest_lock:
        return _latest.get(d)


# ---------- APIs ----------
@app.route("/api/games")
def api_games():
    requested = request.args.get("date")
    d = requested or _today_ymd()
    if not _valid_ymd(d):
        return jsonify({"error": f"bad date {d!r}, expected YYYY-MM-DD"}), 400

    eager = _flag("eager")
    day = None
    if not requested and not eager:
        day = _polled_day(d)
    if day is None:
        day = engine.games_for_date(d, eager=eager)

    if not day.ok:
        # whole list blanks; client shows a retry
        return jsonify(day.to_dict()), 502
    return jsonify(day.to_dict()), 200


@app.route("/api/game/<int:game_pk>/boxscore")
def api_boxscore(game_pk: int):
    snapshot = engine.get_boxscore(game_pk)
    if snapshot is None:
        return jsonify({"gamePk": game_pk, "error": "boxscore unavailable, try again"}), 502
    return jsonify(snapshot.to_dict()), 200


@app.route("/ping")
def ping():
    return "ok", 200


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
