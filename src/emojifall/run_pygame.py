"""Simple pygame front-end for the engine.

This module glues the engine to ``pygame`` for rendering and input, to
:class:`~emojifall.timer.DropTimer` for gravity and to a JSON high score
file.  It runs on the desktop and, through pygbag, inside the browser canvas.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Dict, Optional

import pygame

from .controls import InputController
from .engine import GameEngine, Snapshot
from .game_state import Stage
from .persistence import HighScoreStore, JsonFileHighScoreStore
from .share import result_message, share_url
from .tetromino import PIECE_VALUES, SHAPE_SIZE, PieceFactory, TetrominoType
from .timer import DropTimer


LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Width of the side panel showing the upcoming piece
PANEL_WIDTH = 6 * CELL_SIZE
# Frames per second to run the game loop at
FPS = 60

# Colours for each tetromino type
SHAPE_COLORS = {
    TetrominoType.I: (0, 255, 255),
    TetrominoType.O: (255, 255, 0),
    TetrominoType.T: (128, 0, 128),
    TetrominoType.S: (0, 255, 0),
    TetrominoType.Z: (255, 0, 0),
    TetrominoType.J: (0, 0, 255),
    TetrominoType.L: (255, 165, 0),
}

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: (0, 0, 0)}
for shape, value in PIECE_VALUES.items():
    CELL_COLORS[value] = SHAPE_COLORS[shape]

# pygame key codes to the browser key names understood by ``InputController``
PYGAME_KEYS: Dict[int, str] = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_UP: "ArrowUp",
    pygame.K_SPACE: " ",
    pygame.K_p: "p",
}


def draw_cell(screen: pygame.Surface, value: int, x: int, y: int) -> None:
    rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, CELL_COLORS[value], rect)
    pygame.draw.rect(screen, (50, 50, 50), rect, 1)


def draw_board(screen: pygame.Surface, snap: Snapshot) -> None:
    """Render the board with the active piece composited on top."""

    for r, row in enumerate(snap.board):
        for c, value in enumerate(row):
            draw_cell(screen, value, c * CELL_SIZE, r * CELL_SIZE)


def draw_upcoming(screen: pygame.Surface, snap: Snapshot, left: int) -> None:
    """Render the queued piece in the side panel."""

    if snap.upcoming is None:
        return
    for r in range(SHAPE_SIZE):
        for c in range(SHAPE_SIZE):
            value = snap.upcoming.matrix[r][c]
            draw_cell(screen, value, left + (c + 1) * CELL_SIZE, (r + 1) * CELL_SIZE)


def board_width_px(snap: Snapshot) -> int:
    return len(snap.board[0]) * CELL_SIZE if snap.board else 0


def caption_for(snap: Snapshot) -> str:
    if snap.stage is Stage.WELCOME:
        return "Falling Emojis - press Enter to start"
    if snap.stage is Stage.GAME_OVER:
        return (
            f"Game Over - Score: {snap.score} - High Score: {snap.high_score} - "
            f"{result_message(snap.score)} (Enter to play again)"
        )
    paused = "Paused - " if snap.paused else ""
    return f"Falling Emojis - {paused}Score: {snap.score} - Level: {snap.level} - Lines: {snap.lines}"


class GameRunner:
    """Manage the game loop with start/stop controls."""

    def __init__(self, store: HighScoreStore, *, seed: Optional[int] = None) -> None:
        self._store = store
        self._engine = self._new_engine(seed)
        self._controller = InputController(self._engine, drop_while_paused=True)
        self._timer = DropTimer(self._engine)
        self._running = False
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None

    def _new_engine(self, seed: Optional[int]) -> GameEngine:
        return GameEngine(
            factory=PieceFactory(seed=seed),
            high_score=self._store.load() or 0,
            on_new_high_score=self._store.save,
        )

    @property
    def running(self) -> bool:
        return self._running

    @property
    def engine(self) -> GameEngine:
        return self._engine

    def handle_event(self, event: pygame.event.Event) -> None:
        """Process a single pygame event."""

        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN and not self._engine.playing:
                self._engine.start()
                self._timer.rearm()
            elif event.key in PYGAME_KEYS:
                self._controller.handle_key(PYGAME_KEYS[event.key])

    def _frame(self, dt: float) -> None:
        for event in pygame.event.get():
            self.handle_event(event)
        self._timer.advance(dt)
        if self._screen is None:
            return
        snap = self._engine.snapshot()
        self._screen.fill((0, 0, 0))
        draw_board(self._screen, snap)
        draw_upcoming(self._screen, snap, board_width_px(snap))
        pygame.display.set_caption(caption_for(snap))
        pygame.display.flip()

    async def _run_loop(self) -> None:
        # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
        os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
        pygame.init()
        config = self._engine.config
        self._screen = pygame.display.set_mode(
            (config.width * CELL_SIZE + PANEL_WIDTH, config.height * CELL_SIZE)
        )
        self._clock = pygame.time.Clock()

        self._running = True
        while self._running:
            dt = self._clock.tick(FPS) if self._clock else 0
            try:
                self._frame(dt)
            except Exception:  # pragma: no cover - defensive guard
                # A crash inside a frame restarts the session instead of
                # killing the window.
                LOGGER.exception("Crash detected, restarting game")
                self._engine.start()
                self._timer.rearm()
            # Yield to the browser/host event loop to keep UI responsive
            await asyncio.sleep(0)

        snap = self._engine.snapshot()
        if snap.stage is Stage.GAME_OVER:
            LOGGER.info("Share your score: %s", share_url(snap.score))
        pygame.quit()
        LOGGER.info("Game stopped")

    def run(self) -> None:
        asyncio.run(self._run_loop())


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument(
        "--high-score-file",
        default=os.path.join(os.path.expanduser("~"), ".emojifall.json"),
        help="Where to keep the high score.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    GameRunner(JsonFileHighScoreStore(args.high_score_file), seed=args.seed).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
