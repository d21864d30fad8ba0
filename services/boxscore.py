# services/boxscore.py
from typing import Any, Dict, Iterable, List, Optional

from services.config import DECISION_STYLE
from services.formatting import format_player_name, format_record, safe_int
from services.models import (
    BattingTotals,
    BoxscoreSnapshot,
    PlayerBattingLine,
    PlayerPitchingLine,
)

# first positive counter wins; order is the tie-break
DECISION_ORDER = (
    ("wins", "W"),
    ("losses", "L"),
    ("saves", "S"),
    ("holds", "H"),
    ("blownSaves", "BS"),
)


def _player(players: Dict[str, Any], pid: Any) -> dict:
    return (players or {}).get(f"ID{pid}") or {}


def _season(pobj: dict, group: str) -> dict:
    return ((pobj.get("seasonStats") or {}).get(group)) or {}


def resolve_decision(stats: Optional[dict]) -> str:
    """Returns 'W', 'L', 'S', 'H', 'BS' or '' for one pitcher's game stats."""
    st = stats or {}
    for key, token in DECISION_ORDER:
        if safe_int(st.get(key)) > 0:
            return token
    return ""


def format_decision(token: str, style: str = "plain", record: Optional[str] = None) -> str:
    if not token:
        return ""
    if style == "suffix":
        return f", {token}"
    if style == "record" and record:
        return f"{token} ({record})"
    return token


def build_batting_lines(ids: Iterable[Any], players: Dict[str, Any]) -> List[PlayerBattingLine]:
    """
    One line per id that has a batting block, in the order given.
    Ids missing from `players` or without game batting stats are dropped.
    avg is the season-to-date figure, not the single game.
    """
    out: List[PlayerBattingLine] = []
    for pid in ids or []:
        pobj = _player(players, pid)
        st = (pobj.get("stats") or {}).get("batting")
        if not pobj or not st:
            continue
        person = pobj.get("person") or {}
        out.append(PlayerBattingLine(
            player_id=safe_int(person.get("id") or pid),
            name=format_player_name(person.get("fullName")),
            position=((pobj.get("position") or {}).get("abbreviation")) or "",
            ab=safe_int(st.get("atBats")),
            r=safe_int(st.get("runs")),
            h=safe_int(st.get("hits")),
            rbi=safe_int(st.get("rbi")),
            avg=str(_season(pobj, "batting").get("avg") or ".000"),
        ))
    return out


def build_pitching_lines(
    ids: Iterable[Any],
    players: Dict[str, Any],
    decision_style: str = "plain",
) -> List[PlayerPitchingLine]:
    """
    Same contract as build_batting_lines, keyed on the pitching block.
    inningsPitched stays a string ('5.2' is five and two-thirds).
    """
    out: List[PlayerPitchingLine] = []
    for pid in ids or []:
        pobj = _player(players, pid)
        st = (pobj.get("stats") or {}).get("pitching")
        if not pobj or not st:
            continue
        person = pobj.get("person") or {}
        season = _season(pobj, "pitching")

        record = None
        if season.get("wins") is not None and season.get("losses") is not None:
            record = format_record(season.get("wins"), season.get("losses"))

        token = resolve_decision(st)
        out.append(PlayerPitchingLine(
            player_id=safe_int(person.get("id") or pid),
            name=format_player_name(person.get("fullName")),
            decision=token,
            decision_text=format_decision(token, decision_style, record),
            ip=str(st.get("inningsPitched") or "0"),
            h=safe_int(st.get("hits")),
            r=safe_int(st.get("runs")),
            er=safe_int(st.get("earnedRuns")),
            bb=safe_int(st.get("baseOnBalls")),
            so=safe_int(st.get("strikeOuts")),
            np=safe_int(st.get("numberOfPitches")),
            era=str(season.get("era") or "0.00"),
            season_record=record,
        ))
    return out


def batting_totals(lines: Iterable[PlayerBattingLine]) -> BattingTotals:
    ab = r = h = rbi = 0
    for p in lines or []:
        ab += p.ab
        r += p.r
        h += p.h
        rbi += p.rbi
    return BattingTotals(ab=ab, r=r, h=h, rbi=rbi)


def build_boxscore(game_id: int, box: Optional[dict], decision_style: str = DECISION_STYLE) -> BoxscoreSnapshot:
    """/game/{pk}/boxscore payload -> BoxscoreSnapshot for both sides."""
    teams = (box or {}).get("teams") or {}
    sides = {}
    for side in ("away", "home"):
        t = teams.get(side) or {}
        players = t.get("players") or {}
        batting = build_batting_lines(t.get("batters") or [], players)
        pitching = build_pitching_lines(t.get("pitchers") or [], players, decision_style)
        sides[side] = (batting, pitching, batting_totals(batting))

    return BoxscoreSnapshot(
        game_id=int(game_id),
        away_batting=sides["away"][0],
        home_batting=sides["home"][0],
        away_pitching=sides["away"][1],
        home_pitching=sides["home"][1],
        away_totals=sides["away"][2],
        home_totals=sides["home"][2],
    )
