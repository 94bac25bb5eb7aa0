import random

import pytest

from core.lights_out import (GameConfig, ConfigError, create_board,
                             create_solvable_board, flip, has_won, lit_count)
from tests.helpers import board_from


def _changed(a, b):
    return sum(x != y for ra, rb in zip(a, b) for x, y in zip(ra, rb))


def test_default_config_is_classic_5x5():
    cfg = GameConfig()
    assert (cfg.rows, cfg.cols, cfg.start_lit_probability) == (5, 5, 0.5)


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 6), (4, 1), (5, 5), (3, 8)])
def test_create_board_dimensions(rows, cols):
    board = create_board(GameConfig(rows, cols), random.Random(rows * 31 + cols))
    assert len(board) == rows
    assert all(len(row) == cols for row in board)
    assert all(isinstance(cell, bool) for row in board for cell in row)


def test_probability_zero_is_already_won():
    board = create_board(GameConfig(4, 6, 0))
    assert lit_count(board) == 0
    assert has_won(board)


def test_probability_one_lights_everything():
    board = create_board(GameConfig(3, 4, 1))
    assert all(all(row) for row in board)
    assert not has_won(board)


def test_create_board_is_seeded_by_rng():
    cfg = GameConfig(6, 6, 0.5)
    assert create_board(cfg, random.Random(3)) == create_board(cfg, random.Random(3))


@pytest.mark.parametrize("kwargs", [
    {"rows": 0}, {"cols": 0}, {"rows": -2}, {"cols": 2.5}, {"rows": True},
    {"start_lit_probability": -0.1}, {"start_lit_probability": 1.01},
    {"start_lit_probability": "0.5"},
])
def test_bad_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(rows=0)


def test_config_is_frozen():
    cfg = GameConfig()
    with pytest.raises(AttributeError):
        cfg.rows = 9


def test_flip_single_cell_board_wins():
    board = create_board(GameConfig(1, 1, 1))
    assert board == [[True]]
    assert not has_won(board)
    board = flip(board, 0, 0)
    assert board == [[False]]
    assert has_won(board)


def test_flip_centre_of_3x3_makes_a_plus():
    board = flip(board_from(["...", "...", "..."]), 1, 1)
    assert board == board_from([".O.", "OOO", ".O."])


def test_flip_corner_of_2x2_skips_off_board_neighbours():
    board = flip(board_from(["..", ".."]), 0, 0)
    assert board == [[True, True], [True, False]]


def test_flip_returns_new_board_and_leaves_input_alone():
    original = board_from(["O.O", ".O.", "O.O"])
    snapshot = [list(r) for r in original]
    flipped = flip(original, 0, 1)
    assert flipped is not original
    assert flipped != original
    assert original == snapshot


def test_flip_is_its_own_inverse():
    rng = random.Random(11)
    board = create_board(GameConfig(5, 7), rng)
    for _ in range(20):
        r, c = rng.randrange(5), rng.randrange(7)
        assert flip(flip(board, r, c), r, c) == board


@pytest.mark.parametrize("row,col,expected", [
    (2, 2, 5),    # interior
    (0, 2, 4),    # top edge
    (2, 0, 4),    # left edge
    (0, 0, 3),    # corner
    (4, 4, 3),    # opposite corner
])
def test_flip_touch_counts(row, col, expected):
    blank = [[False] * 5 for _ in range(5)]
    assert _changed(blank, flip(blank, row, col)) == expected


def test_flip_touch_counts_on_3x3():
    blank = [[False] * 3 for _ in range(3)]
    assert _changed(blank, flip(blank, 1, 1)) == 5
    assert _changed(blank, flip(blank, 0, 1)) == 4
    assert _changed(blank, flip(blank, 0, 0)) == 3


def test_flip_on_single_row_board():
    board = flip(board_from([".."*2]), 0, 0)
    assert board == board_from(["OO.."])


def test_has_won_matches_zero_lit():
    rng = random.Random(5)
    for _ in range(30):
        board = create_board(GameConfig(3, 3, 0.2), rng)
        assert has_won(board) == (lit_count(board) == 0)


def test_solvable_board_turns_off_by_replaying_flips():
    cfg = GameConfig(4, 5)
    board = create_solvable_board(cfg, scramble=12, rng=random.Random(42))
    replay = random.Random(42)
    for _ in range(12):
        board = flip(board, replay.randrange(4), replay.randrange(5))
    assert has_won(board)


def test_solvable_board_with_no_scramble_is_solved():
    board = create_solvable_board(GameConfig(3, 3, 1), scramble=0)
    assert has_won(board)


def test_solvable_board_rejects_negative_scramble():
    with pytest.raises(ConfigError):
        create_solvable_board(GameConfig(), scramble=-1)


def test_flip_with_centre_above_board_still_flips_neighbour():
    board = flip(board_from(["..", ".."]), -1, 0)
    assert board == board_from(["O.", ".."])


def test_flip_with_centre_past_right_edge_still_flips_neighbour():
    assert flip(board_from(["..", ".."]), 1, 2) == board_from(["..", ".O"])
    assert flip(board_from(["...", "...", "..."]), 1, 3) == board_from(["...", "..O", "..."])


def test_flip_far_off_board_changes_nothing():
    board = board_from(["O.", ".O"])
    assert flip(board, 5, 5) == board
