"""Gravity driver feeding periodic ticks into the engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .engine import GameEngine


@dataclass
class DropTimer:
    """Accumulate frame time and tick the engine once per drop interval.

    The timer re-arms, discarding any partially elapsed interval, whenever
    the engine's drop interval changes or the pause flag flips.  Nothing
    accumulates while the engine is paused or not playing.
    """

    engine: GameEngine
    drop_accum: float = 0.0
    interval: int = field(init=False)
    paused: bool = field(init=False)

    def __post_init__(self) -> None:
        self.rearm()

    def rearm(self) -> None:
        self.drop_accum = 0.0
        self.interval = self.engine.drop_interval
        self.paused = self.engine.paused

    def advance(self, dt: float) -> bool:
        """Add ``dt`` milliseconds and return ``True`` if the engine ticked."""

        engine = self.engine
        if engine.paused != self.paused or engine.drop_interval != self.interval:
            self.rearm()
        if not engine.playing or engine.paused:
            return False
        self.drop_accum += dt
        if self.drop_accum < self.interval:
            return False
        self.drop_accum = 0.0
        engine.tick()
        if engine.drop_interval != self.interval:
            self.rearm()
        return True
