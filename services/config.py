# services/config.py
import os

MLB_API_BASE = os.getenv("DUGOUT_MLB_API", "https://statsapi.mlb.com/api/v1")
SPORT_ID = int(os.getenv("DUGOUT_SPORT_ID", "1"))

# schedule hydration; linescore gives inning info, venue gives name + location
SCHEDULE_HYDRATE = "team,linescore,venue"

HTTP_TIMEOUT_S = float(os.getenv("DUGOUT_HTTP_TIMEOUT", "15"))
USER_AGENT = "Dugout/1.0"

REFRESH_INTERVAL_S = float(os.getenv("DUGOUT_REFRESH_SECONDS", "30"))
BOXSCORE_WORKERS = int(os.getenv("DUGOUT_BOXSCORE_WORKERS", "4"))

DISPLAY_TZ = os.getenv("DUGOUT_TZ", "America/New_York")

# "full" -> IN PROGRESS / FINAL / SCHEDULED, "card" -> LIVE / Final / Scheduled
STATUS_LABELS = os.getenv("DUGOUT_STATUS_LABELS", "full")

# decision_text on pitching lines: "plain" -> W, "suffix" -> ", W", "record" -> W (5-3)
DECISION_STYLE = os.getenv("DUGOUT_DECISION_STYLE", "plain")

# keep today's scoreboard warm with a background poller
POLL_TODAY = os.getenv("DUGOUT_POLL_TODAY", "1").lower() in ("1", "true", "yes")
