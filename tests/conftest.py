from __future__ import annotations

from itertools import cycle
from typing import Iterable, Sequence

import pytest

from emojifall.engine import GameEngine
from emojifall.tetromino import PieceFactory, TetrominoType


class ScriptedRandom:
    """Hand out piece types in a fixed, repeating order."""

    def __init__(self, kinds: Iterable[TetrominoType]) -> None:
        self._kinds = cycle(list(kinds))

    def choice(self, _seq: Sequence[TetrominoType]) -> TetrominoType:
        return next(self._kinds)


@pytest.fixture
def make_engine():
    def _make(*kinds: TetrominoType, **kwargs) -> GameEngine:
        factory = PieceFactory(ScriptedRandom(kinds)) if kinds else PieceFactory(seed=0)
        return GameEngine(factory=factory, **kwargs)

    return _make
