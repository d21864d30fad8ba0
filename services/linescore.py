# services/linescore.py
from typing import List, Optional

from services.formatting import safe_int
from services.models import HalfInning, InningLine, InningMark, Linescore, LinescoreTotals

MIN_INNINGS = 9


def _runs(half: Optional[dict]) -> Optional[int]:
    if not half:
        return None
    runs = half.get("runs")
    if runs is None:
        return None
    return safe_int(runs)


def _totals(team: Optional[dict]) -> LinescoreTotals:
    t = team or {}
    return LinescoreTotals(
        runs=safe_int(t.get("runs")),
        hits=safe_int(t.get("hits")),
        errors=safe_int(t.get("errors")),
    )


def build_inning_line(num: int, raw_inning: Optional[dict]) -> InningLine:
    if raw_inning is None:
        return InningLine(num)

    away_half = raw_inning.get("away")
    away_runs = _runs(away_half)
    home_runs = _runs(raw_inning.get("home"))

    away: HalfInning = away_runs if away_runs is not None else InningMark.NOT_PLAYED
    if home_runs is not None:
        home: HalfInning = home_runs
    elif away_half is not None:
        # away team batting now, or the game ended before the bottom half
        home = InningMark.NOT_BATTED
    else:
        home = InningMark.NOT_PLAYED
    return InningLine(num, away, home)


def build_linescore(raw_linescore: Optional[dict]) -> Linescore:
    """
    Schedule 'linescore' hydration -> Linescore with max(9, len(innings)) lines.
    Innings are read by position; the ones not reported yet stay blank.
    """
    ls = raw_linescore or {}
    raw_innings = ls.get("innings") or []
    n = max(MIN_INNINGS, len(raw_innings))

    innings: List[InningLine] = []
    for i in range(n):
        raw = raw_innings[i] if i < len(raw_innings) else None
        innings.append(build_inning_line(i + 1, raw))

    teams = ls.get("teams") or {}
    current = ls.get("currentInning")
    return Linescore(
        innings=innings,
        away=_totals(teams.get("away")),
        home=_totals(teams.get("home")),
        current_inning=safe_int(current, None) if current is not None else None,
        inning_state=ls.get("inningState") or None,
    )
