"""Falling Emojis: a falling-block puzzle engine rendered with emoji tiles."""

from .board import Board
from .config import EngineConfig
from .controls import InputController
from .engine import GameEngine, Snapshot
from .game_state import GameState, Stage
from .persistence import HighScoreStore, JsonFileHighScoreStore, MemoryHighScoreStore
from .share import result_message, share_url, share_url_for
from .tetromino import PieceFactory, Tetromino, TetrominoType, rotate_clockwise
from .timer import DropTimer
from .utils import can_move, render_grid

__all__ = [
    "Board",
    "EngineConfig",
    "InputController",
    "GameEngine",
    "Snapshot",
    "GameState",
    "Stage",
    "HighScoreStore",
    "JsonFileHighScoreStore",
    "MemoryHighScoreStore",
    "PieceFactory",
    "Tetromino",
    "TetrominoType",
    "rotate_clockwise",
    "DropTimer",
    "can_move",
    "render_grid",
    "result_message",
    "share_url",
    "share_url_for",
]
