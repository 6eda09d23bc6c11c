"""Tunable constants for a game session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Board dimensions, gravity timing and scoring rules.

    Raises:
        ValueError: If a value would make the game unplayable.
    """

    width: int = 10
    height: int = 20
    initial_drop_interval_ms: int = 500
    drop_interval_step_ms: int = 50
    min_drop_interval_ms: int = 100
    lines_per_level: int = 10
    points_per_line: int = 10

    def __post_init__(self) -> None:
        # Pieces are 4x4 matrices, the board must be able to hold one.
        if self.width < 4 or self.height < 4:
            raise ValueError(f"Board too small: {self.width}x{self.height}")
        if self.min_drop_interval_ms <= 0:
            raise ValueError("min_drop_interval_ms must be positive")
        if self.initial_drop_interval_ms < self.min_drop_interval_ms:
            raise ValueError("initial_drop_interval_ms is below min_drop_interval_ms")
        if self.drop_interval_step_ms < 0:
            raise ValueError("drop_interval_step_ms must not be negative")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.points_per_line < 0:
            raise ValueError("points_per_line must not be negative")


DEFAULT_CONFIG = EngineConfig()
