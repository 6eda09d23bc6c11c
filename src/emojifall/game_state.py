"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board
from .config import DEFAULT_CONFIG, EngineConfig
from .tetromino import SHAPE_SIZE, PieceFactory, Tetromino, occupied_cells
from .utils import drop_interval_ms, line_clear_score


class Stage(str, Enum):
    """Lifecycle of a session."""

    WELCOME = "welcome"
    PLAYING = "playing"
    GAME_OVER = "game-over"


@dataclass
class GameState:
    """Mutable state for a game session."""

    config: EngineConfig = DEFAULT_CONFIG
    factory: PieceFactory = field(default_factory=PieceFactory)
    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    upcoming: Optional[Tetromino] = None
    score: int = 0
    lines: int = 0
    level: int = 1
    drop_interval: int = DEFAULT_CONFIG.initial_drop_interval_ms
    paused: bool = False
    pieces: int = 0

    def __post_init__(self) -> None:
        if (self.board.width, self.board.height) != (self.config.width, self.config.height):
            self.board = Board(self.config.width, self.config.height)
        self.drop_interval = drop_interval_ms(self.level, self.config)

    def spawn_position(self, tetromino: Tetromino) -> tuple[int, int]:
        """Return the spawn anchor for ``tetromino``.

        The piece is centred horizontally and its topmost block sits on the
        first board row.
        """

        top = min(dr for dr, _ in occupied_cells(tetromino.matrix))
        return (-top, (self.board.width - SHAPE_SIZE) // 2)

    def spawn_tetromino(self) -> Tetromino:
        """Spawn and return a new active tetromino.

        The piece in ``upcoming`` becomes active and a new upcoming piece is
        drawn from the factory.  The new piece spawns at the top centre of the
        board.
        """

        active = self.upcoming if self.upcoming is not None else self.factory.random_piece()
        active.position = self.spawn_position(active)
        self.active = active
        self.upcoming = self.factory.random_piece()
        return active

    def record_clear(self, cleared: int) -> int:
        """Apply score, line and level changes for ``cleared`` rows.

        Returns the points awarded.  Clearing zero rows changes nothing.
        """

        if cleared <= 0:
            return 0
        points = line_clear_score(cleared, self.level, self.config)
        previous = self.lines
        self.score += points
        self.lines += cleared
        per_level = self.config.lines_per_level
        if self.lines // per_level > previous // per_level:
            self.level += 1
            self.drop_interval = drop_interval_ms(self.level, self.config)
        return points

    def piece_locked(self) -> None:
        """Record that a piece has been locked into the board."""

        self.pieces += 1

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        self.board = Board(self.config.width, self.config.height)
        self.active = None
        self.upcoming = None
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval = drop_interval_ms(self.level, self.config)
        self.paused = False
        self.pieces = 0
