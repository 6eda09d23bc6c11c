"""High score storage used by the front-ends.

The engine never reads or writes storage itself.  A front-end loads the
stored value, hands it to :class:`~emojifall.engine.GameEngine` and passes
:meth:`HighScoreStore.save` as the engine's ``on_new_high_score`` callback.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, Union


LOGGER = logging.getLogger(__name__)

# Same key the browser version used in ``localStorage``.
STORAGE_KEY = "tetris-emoji-highscore"


class HighScoreStore(Protocol):
    def load(self) -> Optional[int]: ...

    def save(self, score: int) -> None: ...


class MemoryHighScoreStore:
    """Keep the high score in memory only."""

    def __init__(self, score: Optional[int] = None) -> None:
        self.score = score

    def load(self) -> Optional[int]:
        return self.score

    def save(self, score: int) -> None:
        self.score = score


class JsonFileHighScoreStore:
    """Persist the high score in a small JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> Optional[int]:
        """Return the stored score, or ``None`` if nothing usable is stored.

        A missing file is normal on first run.  An unreadable or malformed file
        is logged and treated as empty so a bad file never blocks a game.
        """

        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not read high score from %s: %s", self.path, exc)
            return None
        value = data.get(STORAGE_KEY) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            LOGGER.warning("Ignoring invalid high score in %s: %r", self.path, value)
            return None
        return value

    def save(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({STORAGE_KEY: int(score)}), encoding="utf-8")
        LOGGER.debug("Saved high score %d to %s", score, self.path)
