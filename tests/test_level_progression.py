import pytest

from emojifall.config import EngineConfig
from emojifall.game_state import GameState
from emojifall.tetromino import TetrominoType
from emojifall.utils import drop_interval_ms, line_clear_score


@pytest.mark.parametrize("cleared", [1, 2, 3, 4])
@pytest.mark.parametrize("level", [1, 5, 10])
def test_score_scales_with_level(cleared, level):
    state = GameState()
    state.level = level
    assert state.record_clear(cleared) == 10 * cleared * level
    assert state.score == 10 * cleared * level
    assert line_clear_score(cleared, level) == 10 * cleared * level


def test_zero_rows_changes_nothing():
    state = GameState()
    state.lines = 9
    assert state.record_clear(0) == 0
    assert (state.score, state.lines, state.level) == (0, 9, 1)
    assert state.drop_interval == 500


def test_level_advances_when_lines_cross_ten():
    state = GameState()
    state.record_clear(4)
    state.record_clear(4)
    assert state.level == 1
    state.record_clear(2)
    assert state.lines == 10
    assert state.level == 2
    assert state.drop_interval == 450
    state.record_clear(4)
    assert state.level == 2


def test_drop_interval_is_floored():
    config = EngineConfig(initial_drop_interval_ms=200, drop_interval_step_ms=75, min_drop_interval_ms=100)
    state = GameState(config=config)
    assert state.drop_interval == 200
    state.record_clear(4)
    state.record_clear(4)
    state.record_clear(4)
    assert state.level == 2
    assert state.drop_interval == 125
    for _ in range(3):
        state.record_clear(4)
    assert state.level == 3
    assert state.drop_interval == 100
    assert drop_interval_ms(50, config) == 100


def test_reset_resets_counters():
    state = GameState()
    state.record_clear(4)
    state.record_clear(4)
    state.record_clear(4)
    state.paused = True
    state.spawn_tetromino()
    state.reset_game()
    assert (state.score, state.lines, state.level, state.pieces) == (0, 0, 1, 0)
    assert state.drop_interval == 500
    assert state.paused is False
    assert state.active is None and state.upcoming is None
    assert not state.board.grid.any()


def test_spawn_centres_piece_with_top_on_first_row():
    state = GameState()
    state.upcoming = None
    piece = state.spawn_tetromino()
    assert piece.position[1] == 3
    assert min(r for r, _ in piece.blocks()) == 0
    assert state.upcoming is not None
    queued = state.upcoming
    assert state.spawn_tetromino() is queued
    assert isinstance(queued.kind, TetrominoType)


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        EngineConfig(width=2)
    with pytest.raises(ValueError):
        EngineConfig(initial_drop_interval_ms=50, min_drop_interval_ms=100)
    with pytest.raises(ValueError):
        EngineConfig(lines_per_level=0)
