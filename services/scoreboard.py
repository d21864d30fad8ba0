# services/scoreboard.py
from __future__ import annotations

import dataclasses
import logging
from concurrent.futures import Future
from datetime import datetime, timezone
from typing import Dict, List, Optional

from services.boxscore import build_boxscore
from services.boxscore_cache import BoxscoreCache
from services.config import DECISION_STYLE, STATUS_LABELS
from services.formatting import format_game_time, safe_int
from services.game_status import classify, status_text
from services.linescore import build_linescore
from services.mlb_api import ProviderError, StatsApiClient, schedule_games
from services.models import BoxscoreSnapshot, GameSummary, ScoreboardDay, TeamSide
from services.teams import team_abbrev

log = logging.getLogger("dugout.scoreboard")


def _team_side(team_wrap: Optional[dict]) -> TeamSide:
    tw = team_wrap or {}
    team = tw.get("team") or {}
    rec = tw.get("leagueRecord") or {}
    name = team.get("name") or ""
    score = tw.get("score")
    return TeamSide(
        name=name,
        abbrev=team_abbrev(name),
        team_id=safe_int(team.get("id"), None) if team.get("id") is not None else None,
        wins=safe_int(rec.get("wins")),
        losses=safe_int(rec.get("losses")),
        score=safe_int(score) if score is not None else None,
    )


def _venue_location(venue: dict) -> str:
    loc = venue.get("location") or {}
    city = loc.get("city")
    region = loc.get("state") or loc.get("country")
    if city and region:
        return f"{city}, {region}"
    return city or ""


def build_game_summary(raw_game: dict, labels: str = STATUS_LABELS) -> GameSummary:
    """
    One schedule game record -> GameSummary. Scheduled games carry no
    linescore; live and final games get one even when the hydration is empty.
    """
    status = classify(raw_game, labels)
    teams = raw_game.get("teams") or {}
    venue = raw_game.get("venue") or {}

    linescore = None
    if not status.is_scheduled:
        linescore = build_linescore(raw_game.get("linescore"))

    return GameSummary(
        game_id=int(raw_game["gamePk"]),
        game_date=raw_game.get("gameDate") or "",
        game_time=format_game_time(raw_game.get("gameDate") or ""),
        venue=venue.get("name") or "TBD",
        venue_location=_venue_location(venue),
        away=_team_side(teams.get("away")),
        home=_team_side(teams.get("home")),
        status=status,
        status_text=status_text(status, linescore, labels),
        linescore=linescore,
    )


class ScoreboardEngine:
    """
    Owns the provider client and the box-score cache for one process.

    games_for_date() is what the periodic refresh calls; get_boxscore() is
    what a "show player stats" request calls.
    """

    def __init__(self, client: Optional[StatsApiClient] = None,
                 cache: Optional[BoxscoreCache] = None,
                 labels: str = STATUS_LABELS,
                 decision_style: str = DECISION_STYLE):
        self.client = client if client is not None else StatsApiClient()
        self.labels = labels
        self.decision_style = decision_style
        self.cache = cache if cache is not None else BoxscoreCache(self._load_boxscore)

    def _load_boxscore(self, game_id: int) -> BoxscoreSnapshot:
        box = self.client.fetch_boxscore(game_id)
        return build_boxscore(game_id, box, self.decision_style)

    def get_boxscore(self, game_id: int) -> Optional[BoxscoreSnapshot]:
        return self.cache.get(game_id)

    def submit_boxscore(self, game_id: int) -> "Future[Optional[BoxscoreSnapshot]]":
        return self.cache.submit(game_id)

    def summarize(self, raw_games: List[dict]) -> List[GameSummary]:
        out: List[GameSummary] = []
        for g in raw_games:
            try:
                out.append(build_game_summary(g, self.labels))
            except Exception as e:
                log.exception("Error shaping game %s: %s", (g or {}).get("gamePk"), e)
                continue
        return out

    def games_for_date(self, date_ymd: str, eager: bool = False) -> ScoreboardDay:
        """
        Schedule for one day. A provider failure comes back as
        ScoreboardDay.error with no games; an off day is just an empty list.
        With eager=True live/final games also get their box score attached.
        """
        fetched_at = datetime.now(timezone.utc).isoformat()
        try:
            schedule = self.client.fetch_schedule(date_ymd)
        except ProviderError as e:
            log.warning("schedule unavailable for %s: %s", date_ymd, e)
            return ScoreboardDay(date=date_ymd, fetched_at=fetched_at, error=str(e))

        games = self.summarize(schedule_games(schedule))
        if eager:
            games = self._attach_boxscores(games)

        log.info("scoreboard %s: %d games", date_ymd, len(games))
        return ScoreboardDay(date=date_ymd, games=games, fetched_at=fetched_at)

    def _attach_boxscores(self, games: List[GameSummary]) -> List[GameSummary]:
        futures: Dict[int, Future] = {
            g.game_id: self.submit_boxscore(g.game_id) for g in games if g.has_player_stats
        }
        out: List[GameSummary] = []
        for g in games:
            fut = futures.get(g.game_id)
            snapshot = fut.result() if fut is not None else None
            out.append(dataclasses.replace(g, boxscore=snapshot) if snapshot else g)
        return out
