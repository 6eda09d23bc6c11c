"""Game engine: the command surface driving a session.

The engine owns a :class:`~emojifall.game_state.GameState` and the session
stage.  Renderers read :meth:`GameEngine.snapshot`; input, timer and
persistence collaborators call the command methods and never touch the state
directly.  Commands are ignored unless the stage is ``playing``.  A command
the board cannot accommodate (a blocked move or rotation) is a silent no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from .config import DEFAULT_CONFIG, EngineConfig
from .game_state import GameState, Stage
from .tetromino import PieceFactory, Tetromino
from .utils import can_move, render_grid


LOGGER = logging.getLogger(__name__)

HighScoreCallback = Callable[[int], None]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session for renderers."""

    board: Tuple[Tuple[int, ...], ...]
    current: Optional[Tetromino]
    upcoming: Optional[Tetromino]
    score: int
    level: int
    lines: int
    paused: bool
    stage: Stage
    high_score: int
    drop_interval: int


class GameEngine:
    """State machine for a single player session."""

    def __init__(
        self,
        config: EngineConfig = DEFAULT_CONFIG,
        *,
        factory: Optional[PieceFactory] = None,
        high_score: int = 0,
        on_new_high_score: Optional[HighScoreCallback] = None,
    ) -> None:
        self.config = config
        self.state = GameState(config=config, factory=factory or PieceFactory())
        self.stage = Stage.WELCOME
        self.high_score = high_score
        self.on_new_high_score = on_new_high_score

    @property
    def playing(self) -> bool:
        return self.stage is Stage.PLAYING

    @property
    def paused(self) -> bool:
        return self.state.paused

    @property
    def drop_interval(self) -> int:
        return self.state.drop_interval

    # Commands ---------------------------------------------------------
    def start(self) -> None:
        """Reset the session and begin playing."""

        self.state.reset_game()
        self.stage = Stage.PLAYING
        self._spawn()
        LOGGER.info("Game started")

    def tick(self) -> None:
        """Advance the active piece one row, locking it when it cannot fall."""

        if not self.playing or self.state.active is None:
            return
        if can_move(self.state.board, self.state.active, 0, 1):
            self.state.active.move(0, 1)
        else:
            self._lock_and_spawn()

    def soft_drop(self) -> None:
        """Player-triggered single row drop; same rules as :meth:`tick`."""

        self.tick()

    def move(self, dx: int) -> None:
        """Shift the active piece one column left (``-1``) or right (``1``)."""

        if not self.playing or self.state.active is None:
            return
        if dx not in (-1, 1):
            LOGGER.debug("Ignoring horizontal move by %r", dx)
            return
        if can_move(self.state.board, self.state.active, dx, 0):
            self.state.active.move(dx, 0)

    def rotate(self) -> None:
        """Rotate the active piece clockwise if it fits where it stands."""

        if not self.playing or self.state.active is None:
            return
        rotated = self.state.active.rotated()
        if can_move(self.state.board, self.state.active, 0, 0, matrix=rotated):
            self.state.active.matrix = rotated

    def hard_drop(self) -> None:
        """Drop the active piece as far as it goes and lock it."""

        if not self.playing or self.state.active is None:
            return
        distance = self.state.board.drop_distance(self.state.active)
        self.state.active.move(0, distance)
        self._lock_and_spawn()

    def toggle_pause(self) -> None:
        """Flip the pause flag.  The engine itself keeps accepting commands."""

        if not self.playing:
            return
        self.state.paused = not self.state.paused
        LOGGER.info("Paused" if self.state.paused else "Resumed")

    # Queries ----------------------------------------------------------
    def snapshot(self) -> Snapshot:
        """Return an immutable copy of everything a renderer needs."""

        state = self.state
        grid = render_grid(state.board, state.active)
        return Snapshot(
            board=tuple(tuple(row) for row in grid),
            current=replace(state.active) if state.active is not None else None,
            upcoming=replace(state.upcoming) if state.upcoming is not None else None,
            score=state.score,
            level=state.level,
            lines=state.lines,
            paused=state.paused,
            stage=self.stage,
            high_score=self.high_score,
            drop_interval=state.drop_interval,
        )

    # Internal helpers -------------------------------------------------
    def _spawn(self) -> None:
        active = self.state.spawn_tetromino()
        if not can_move(self.state.board, active, 0, 0):
            self._game_over()

    def _lock_and_spawn(self) -> None:
        state = self.state
        state.board.lock_piece(state.active)
        state.piece_locked()
        cleared = state.board.clear_full_rows()
        if cleared:
            level = state.level
            points = state.record_clear(cleared)
            LOGGER.debug("Cleared %d row(s) for %d points. Score: %d", cleared, points, state.score)
            if state.level != level:
                LOGGER.info("Level %d, drop interval %d ms", state.level, state.drop_interval)
        self._spawn()

    def _game_over(self) -> None:
        self.stage = Stage.GAME_OVER
        self.state.paused = False
        score = self.state.score
        LOGGER.info("Game over. Final score: %d", score)
        if score > self.high_score:
            self.high_score = score
            LOGGER.info("New high score: %d", score)
            if self.on_new_high_score is not None:
                self.on_new_high_score(score)
