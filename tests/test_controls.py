import logging

import pytest

from emojifall.controls import InputController
from emojifall.tetromino import TetrominoType


O = TetrominoType.O
I = TetrominoType.I


@pytest.mark.parametrize(
    "key, delta",
    [("ArrowLeft", -1), ("ArrowRight", 1), ("swipe_left", -1), ("swipe_right", 1)],
)
def test_horizontal_keys_move_piece(make_engine, key, delta):
    engine = make_engine(O)
    engine.start()
    controller = InputController(engine)
    col = engine.state.active.position[1]
    assert controller.handle_key(key) is True
    assert engine.state.active.position[1] == col + delta


def test_arrow_down_soft_drops_and_space_hard_drops(make_engine):
    engine = make_engine(O)
    engine.start()
    controller = InputController(engine)
    row = engine.state.active.position[0]
    controller.handle_key("ArrowDown")
    assert engine.state.active.position[0] == row + 1
    controller.handle_key(" ")
    assert engine.state.pieces == 1


def test_arrow_up_rotates(make_engine):
    engine = make_engine(I)
    engine.start()
    engine.tick()
    engine.tick()
    controller = InputController(engine)
    controller.handle_key("ArrowUp")
    assert len({c for _, c in engine.state.active.blocks()}) == 1


def test_unknown_keys_and_commands_ignored(make_engine, caplog):
    engine = make_engine(O)
    engine.start()
    controller = InputController(engine)
    before = engine.snapshot()
    with caplog.at_level(logging.DEBUG, logger="emojifall.controls"):
        assert controller.handle_key("Escape") is False
        assert controller.dispatch("teleport") is False
    assert engine.snapshot() == before
    assert any("Escape" in message for message in caplog.messages)


def test_commands_ignored_when_not_playing(make_engine):
    engine = make_engine(O)
    controller = InputController(engine)
    assert controller.handle_key("ArrowLeft") is False
    assert controller.handle_key("p") is False


def test_paused_commands_pass_by_default(make_engine):
    engine = make_engine(O)
    engine.start()
    controller = InputController(engine)
    controller.handle_key("p")
    assert engine.paused is True
    assert controller.handle_key("ArrowRight") is True


def test_drop_while_paused_blocks_everything_but_pause(make_engine):
    engine = make_engine(O)
    engine.start()
    controller = InputController(engine, drop_while_paused=True)
    controller.handle_key("P")
    assert engine.paused is True
    before = engine.snapshot()
    for key in ("ArrowLeft", "ArrowRight", "ArrowUp", "ArrowDown", " "):
        assert controller.handle_key(key) is False
    assert engine.snapshot() == before
    assert controller.handle_key("p") is True
    assert engine.paused is False
