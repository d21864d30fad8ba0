# services/game_status.py
from typing import Optional

from services.models import GameState, GameStatus, Linescore

# label set -> fixed display text per state
LABEL_SETS = {
    "full": {GameState.LIVE: "IN PROGRESS", GameState.FINAL: "FINAL", GameState.SCHEDULED: "SCHEDULED"},
    "card": {GameState.LIVE: "LIVE", GameState.FINAL: "Final", GameState.SCHEDULED: "Scheduled"},
}


def _labels(labels: str) -> dict:
    return LABEL_SETS.get(labels) or LABEL_SETS["full"]


def classify(raw_game: Optional[dict], labels: str = "full") -> GameStatus:
    """
    Maps status.abstractGameState/detailedState to a GameStatus.
      Live              -> LIVE, fixed label
      Final             -> FINAL, detailedState or fixed label
      Preview/other/nil -> SCHEDULED, detailedState or fixed label
    Never raises.
    """
    status = (raw_game or {}).get("status") or {}
    abstract = status.get("abstractGameState")
    detailed = (status.get("detailedState") or "").strip()
    text = _labels(labels)

    if abstract == "Live":
        return GameStatus(GameState.LIVE, text[GameState.LIVE])
    if abstract == "Final":
        return GameStatus(GameState.FINAL, detailed or text[GameState.FINAL])
    return GameStatus(GameState.SCHEDULED, detailed or text[GameState.SCHEDULED])


def status_text(status: GameStatus, linescore: Optional[Linescore], labels: str = "full") -> str:
    """Live games with a current inning show e.g. 'TOP 7' instead of the plain label."""
    if status.state is not GameState.LIVE or linescore is None or not linescore.current_inning:
        return status.text
    composed = f"{linescore.inning_state or ''} {linescore.current_inning}".strip()
    return composed.upper() if labels != "card" else composed
