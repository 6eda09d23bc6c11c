"""Simple emoji demo for the engine.

Run with: `python -m emojifall`

Starts a game, hard-drops a few pieces straight down and prints the resulting
frame with emoji tiles, useful as a minimal smoke test of the engine without
a window.  The playable window lives in :mod:`emojifall.run_pygame`.
"""

from __future__ import annotations

import argparse
import logging

from . import GameEngine, PieceFactory
from .engine import Snapshot


EMOJI = "\N{SMILING FACE WITH SUNGLASSES}"
EMPTY = "\N{BLACK LARGE SQUARE}"


def emoji_rows(snap: Snapshot) -> list[str]:
    return ["".join(EMOJI if cell else EMPTY for cell in row) for row in snap.board]


def _print_snapshot(snap: Snapshot) -> None:
    for row in emoji_rows(snap):
        print(row)
    print(f"Score: {snap.score}  Level: {snap.level}  Lines: {snap.lines}  Stage: {snap.stage.value}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--drops", type=int, default=5, help="How many pieces to hard drop.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level.")
    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    engine = GameEngine(factory=PieceFactory(seed=args.seed))
    engine.start()
    for _ in range(args.drops):
        engine.hard_drop()
    _print_snapshot(engine.snapshot())


if __name__ == "__main__":
    main()
