# services/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class GameState(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINAL = "final"


class InningMark(str, Enum):
    """Half-innings without a run value. Both render blank, never as 0."""
    NOT_PLAYED = "not_played"
    NOT_BATTED = "not_batted"


HalfInning = Union[int, InningMark]


def _cell(v: HalfInning) -> Union[int, str]:
    return "" if isinstance(v, InningMark) else v


def _cell_state(v: HalfInning) -> str:
    return v.value if isinstance(v, InningMark) else "played"


@dataclass(frozen=True)
class GameStatus:
    state: GameState
    text: str

    @property
    def is_scheduled(self) -> bool:
        return self.state is GameState.SCHEDULED

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.state.value, "text": self.text}


@dataclass(frozen=True)
class TeamSide:
    name: str
    abbrev: str
    team_id: Optional[int] = None
    wins: int = 0
    losses: int = 0
    score: Optional[int] = None

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.team_id,
            "name": self.name,
            "abbr": self.abbrev,
            "record": self.record,
            "score": self.score,
        }


@dataclass(frozen=True)
class InningLine:
    num: int
    away: HalfInning = InningMark.NOT_PLAYED
    home: HalfInning = InningMark.NOT_PLAYED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num": self.num,
            "away": _cell(self.away),
            "home": _cell(self.home),
            "awayState": _cell_state(self.away),
            "homeState": _cell_state(self.home),
        }


@dataclass(frozen=True)
class LinescoreTotals:
    runs: int = 0
    hits: int = 0
    errors: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"R": self.runs, "H": self.hits, "E": self.errors}


@dataclass(frozen=True)
class Linescore:
    innings: List[InningLine]
    away: LinescoreTotals = field(default_factory=LinescoreTotals)
    home: LinescoreTotals = field(default_factory=LinescoreTotals)
    current_inning: Optional[int] = None
    inning_state: Optional[str] = None

    @property
    def n(self) -> int:
        return len(self.innings)

    @property
    def groups(self) -> List[List[InningLine]]:
        """
        Innings in display groups of three: 1-3, 4-6, 7-9, then every extra
        inning (10..N) in one final group.
        """
        out: List[List[InningLine]] = []
        for start in (0, 3, 6):
            chunk = self.innings[start:start + 3]
            if chunk:
                out.append(chunk)
        extras = self.innings[9:]
        if extras:
            out.append(extras)
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n": self.n,
            "innings": [i.to_dict() for i in self.innings],
            "groups": [[i.num for i in g] for g in self.groups],
            "totals": {"away": self.away.to_dict(), "home": self.home.to_dict()},
            "currentInning": self.current_inning,
            "inningState": self.inning_state,
        }


@dataclass(frozen=True)
class PlayerBattingLine:
    player_id: int
    name: str
    position: str = ""
    ab: int = 0
    r: int = 0
    h: int = 0
    rbi: int = 0
    avg: str = ".000"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.player_id,
            "name": self.name,
            "pos": self.position,
            "ab": self.ab,
            "r": self.r,
            "h": self.h,
            "rbi": self.rbi,
            "avg": self.avg,
        }


@dataclass(frozen=True)
class PlayerPitchingLine:
    player_id: int
    name: str
    decision: str = ""
    decision_text: str = ""
    ip: str = "0"
    h: int = 0
    r: int = 0
    er: int = 0
    bb: int = 0
    so: int = 0
    np: int = 0
    era: str = "0.00"
    season_record: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.player_id,
            "name": self.name,
            "decision": self.decision,
            "decisionText": self.decision_text,
            "ip": self.ip,
            "h": self.h,
            "r": self.r,
            "er": self.er,
            "bb": self.bb,
            "so": self.so,
            "np": self.np,
            "era": self.era,
            "record": self.season_record,
        }


@dataclass(frozen=True)
class BattingTotals:
    ab: int = 0
    r: int = 0
    h: int = 0
    rbi: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {"ab": self.ab, "r": self.r, "h": self.h, "rbi": self.rbi}


@dataclass(frozen=True)
class BoxscoreSnapshot:
    game_id: int
    away_batting: List[PlayerBattingLine] = field(default_factory=list)
    home_batting: List[PlayerBattingLine] = field(default_factory=list)
    away_pitching: List[PlayerPitchingLine] = field(default_factory=list)
    home_pitching: List[PlayerPitchingLine] = field(default_factory=list)
    away_totals: BattingTotals = field(default_factory=BattingTotals)
    home_totals: BattingTotals = field(default_factory=BattingTotals)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gamePk": self.game_id,
            "batters": {
                "away": [p.to_dict() for p in self.away_batting],
                "home": [p.to_dict() for p in self.home_batting],
            },
            "pitchers": {
                "away": [p.to_dict() for p in self.away_pitching],
                "home": [p.to_dict() for p in self.home_pitching],
            },
            "totals": {"away": self.away_totals.to_dict(), "home": self.home_totals.to_dict()},
        }


@dataclass(frozen=True)
class GameSummary:
    game_id: int
    game_date: str
    game_time: str
    venue: str
    away: TeamSide
    home: TeamSide
    status: GameStatus
    status_text: str
    venue_location: str = ""
    linescore: Optional[Linescore] = None
    boxscore: Optional[BoxscoreSnapshot] = None

    @property
    def has_player_stats(self) -> bool:
        return self.status.state in (GameState.LIVE, GameState.FINAL)

    @property
    def matchup(self) -> str:
        return f"{self.away.abbrev} at {self.home.abbrev}"

    @property
    def title(self) -> str:
        away_runs = self.linescore.away.runs if self.linescore else 0
        home_runs = self.linescore.home.runs if self.linescore else 0
        return f"{self.away.abbrev} {away_runs}, {self.home.abbrev} {home_runs}"

    @property
    def winner(self) -> Optional[str]:
        if self.status.state is not GameState.FINAL or self.linescore is None:
            return None
        if self.linescore.away.runs > self.linescore.home.runs:
            return "away"
        if self.linescore.home.runs > self.linescore.away.runs:
            return "home"
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gamePk": self.game_id,
            "gameDate": self.game_date,
            "time": self.game_time,
            "venue": self.venue,
            "venueLocation": self.venue_location,
            "status": self.status.to_dict(),
            "statusText": self.status_text,
            "matchup": self.matchup,
            "title": self.title,
            "winner": self.winner,
            "hasPlayerStats": self.has_player_stats,
            "teams": {"away": self.away.to_dict(), "home": self.home.to_dict()},
            "linescore": self.linescore.to_dict() if self.linescore else None,
            "boxscore": self.boxscore.to_dict() if self.boxscore else None,
        }


@dataclass(frozen=True)
class ScoreboardDay:
    date: str
    games: List[GameSummary] = field(default_factory=list)
    fetched_at: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "fetchedAt": self.fetched_at,
            "error": self.error,
            "games": [g.to_dict() for g in self.games],
        }
