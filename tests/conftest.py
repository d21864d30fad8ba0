"""Shared pytest fixtures: StatsAPI-shaped payloads."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# keep /api/games from starting the background poller
os.environ.setdefault("DUGOUT_POLL_TODAY", "0")

# Ensure app.py and services/ are importable
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def make_player(pid: int, full_name: str, pos: str = "CF", batting: dict | None = None,
                pitching: dict | None = None, season_batting: dict | None = None,
                season_pitching: dict | None = None) -> dict:
    return {
        "person": {"id": pid, "fullName": full_name},
        "position": {"abbreviation": pos},
        "stats": {"batting": batting or {}, "pitching": pitching or {}},
        "seasonStats": {"batting": season_batting or {}, "pitching": season_pitching or {}},
    }


@pytest.fixture
def boxscore_payload() -> dict:
    """Final game box score. 3 (away) has no batting block: pinch runner."""
    away_players = {
        "ID1": make_player(1, "Mike Trout", "CF",
                           batting={"atBats": 4, "runs": 1, "hits": 2, "rbi": 1},
                           season_batting={"avg": ".301"}),
        "ID2": make_player(2, "Shohei Ohtani", "DH",
                           batting={"atBats": 3, "runs": 0, "hits": 1, "rbi": 0},
                           season_batting={"avg": ".287"}),
        "ID3": make_player(3, "Pinch Runner", "PR"),
        "ID10": make_player(10, "Tyler Anderson", "P",
                            pitching={"inningsPitched": "6.0", "hits": 7, "runs": 4, "earnedRuns": 4,
                                      "baseOnBalls": 2, "strikeOuts": 5, "numberOfPitches": 98,
                                      "losses": 1},
                            season_pitching={"era": "4.12", "wins": 5, "losses": 8}),
    }
    home_players = {
        "ID20": make_player(20, "Aaron Judge", "RF",
                            batting={"atBats": 4, "runs": 2, "hits": 2, "rbi": 3},
                            season_batting={"avg": ".322"}),
        "ID21": make_player(21, "Juan Soto", "LF",
                            batting={"atBats": 3, "runs": 1, "hits": 1, "rbi": 0}),
        "ID30": make_player(30, "Gerrit Cole", "P",
                            pitching={"inningsPitched": "7.0", "hits": 5, "runs": 2, "earnedRuns": 2,
                                      "baseOnBalls": 1, "strikeOuts": 9, "numberOfPitches": 104,
                                      "wins": 1},
                            season_pitching={"era": "2.95", "wins": 11, "losses": 3}),
        "ID31": make_player(31, "Clay Holmes", "P",
                            pitching={"inningsPitched": "2.0", "hits": 0, "runs": 0, "earnedRuns": 0,
                                      "baseOnBalls": 0, "strikeOuts": 3, "numberOfPitches": 22,
                                      "saves": 1},
                            season_pitching={"era": "1.80"}),
    }
    return {
        "teams": {
            "away": {"batters": [1, 2, 3], "pitchers": [10], "players": away_players},
            "home": {"batters": [20, 21], "pitchers": [30, 31], "players": home_players},
        }
    }


def make_game(game_pk: int = 745001, abstract: str = "Final", detailed: str | None = "Final",
              linescore: dict | None = None, away: str = "Los Angeles Angels",
              home: str = "New York Yankees") -> dict:
    status = {"abstractGameState": abstract}
    if detailed is not None:
        status["detailedState"] = detailed
    game = {
        "gamePk": game_pk,
        "gameDate": "2025-07-04T23:05:00Z",
        "status": status,
        "teams": {
            "away": {"team": {"id": 108, "name": away}, "leagueRecord": {"wins": 45, "losses": 44}, "score": 2},
            "home": {"team": {"id": 147, "name": home}, "leagueRecord": {"wins": 52, "losses": 37}, "score": 5},
        },
        "venue": {"name": "Yankee Stadium", "location": {"city": "Bronx", "state": "New York"}},
    }
    if linescore is not None:
        game["linescore"] = linescore
    return game


@pytest.fixture
def final_linescore() -> dict:
    innings = [
        {"num": 1, "away": {"runs": 0}, "home": {"runs": 2}},
        {"num": 2, "away": {"runs": 1}, "home": {"runs": 0}},
        {"num": 3, "away": {"runs": 0}, "home": {"runs": 0}},
        {"num": 4, "away": {"runs": 0}, "home": {"runs": 3}},
        {"num": 5, "away": {"runs": 0}, "home": {"runs": 0}},
        {"num": 6, "away": {"runs": 1}, "home": {"runs": 0}},
        {"num": 7, "away": {"runs": 0}, "home": {"runs": 0}},
        {"num": 8, "away": {"runs": 0}, "home": {"runs": 0}},
        {"num": 9, "away": {"runs": 0}, "home": {}},
    ]
    return {
        "currentInning": 9,
        "inningState": "Bottom",
        "innings": innings,
        "teams": {
            "away": {"runs": 2, "hits": 7, "errors": 1},
            "home": {"runs": 5, "hits": 9, "errors": 0},
        },
    }
