"""Share links and end-of-game messages."""

from __future__ import annotations

from urllib.parse import quote_plus

from .engine import Snapshot
from .game_state import Stage


SHARE_BASE_URL = "https://warpcast.com/~/compose"
GAME_TITLE = "Falling Emojis"


def share_text(score: int) -> str:
    return f"I scored {score} points in {GAME_TITLE}!"


def share_url(score: int) -> str:
    """Return the compose link announcing ``score``."""

    return f"{SHARE_BASE_URL}?text={quote_plus(share_text(score))}"


def share_url_for(snapshot: Snapshot) -> str:
    """Return the share link for a finished game.

    Raises:
        ValueError: If ``snapshot`` was not taken after game over.
    """

    if snapshot.stage is not Stage.GAME_OVER:
        raise ValueError(f"Cannot share a game in stage {snapshot.stage.value!r}")
    return share_url(snapshot.score)


def result_message(score: int) -> str:
    if score >= 1000:
        return "You're a Tetris master!"
    if score >= 500:
        return "Great job!"
    if score >= 200:
        return "Nice work!"
    return "Keep going!"
