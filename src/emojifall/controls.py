"""Translate key presses and touch gestures into engine commands."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from .engine import GameEngine


LOGGER = logging.getLogger(__name__)

# Browser ``KeyboardEvent.key`` values and touch gesture names.
KEY_COMMANDS: Dict[str, str] = {
    "ArrowLeft": "left",
    "ArrowRight": "right",
    "ArrowDown": "soft_drop",
    "ArrowUp": "rotate",
    " ": "hard_drop",
    "p": "pause",
    "P": "pause",
    "swipe_left": "left",
    "swipe_right": "right",
    "swipe_down": "hard_drop",
    "swipe_up": "rotate",
    "tap": "rotate",
}


class InputController:
    """Dispatch named commands to a :class:`GameEngine`.

    With ``drop_while_paused`` set, every command except ``pause`` is dropped
    while the game is paused.  Unknown keys and commands are ignored.
    """

    def __init__(self, engine: GameEngine, *, drop_while_paused: bool = False) -> None:
        self.engine = engine
        self.drop_while_paused = drop_while_paused
        self._commands: Dict[str, Callable[[], None]] = {
            "left": lambda: engine.move(-1),
            "right": lambda: engine.move(1),
            "rotate": engine.rotate,
            "soft_drop": engine.soft_drop,
            "hard_drop": engine.hard_drop,
            "pause": engine.toggle_pause,
        }

    def dispatch(self, command: str) -> bool:
        """Run ``command`` and return ``True`` if it reached the engine."""

        action = self._commands.get(command)
        if action is None:
            LOGGER.debug("Ignoring unknown command %r", command)
            return False
        if not self.engine.playing:
            return False
        if self.drop_while_paused and self.engine.paused and command != "pause":
            return False
        action()
        return True

    def handle_key(self, key: str) -> bool:
        command = KEY_COMMANDS.get(key)
        if command is None:
            LOGGER.debug("Ignoring unmapped key %r", key)
            return False
        return self.dispatch(command)
