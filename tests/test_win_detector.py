from typing import List

import pytest

from approx.board import Board, Cell
from approx.win import DIRECTIONS, detect_outcome, line_length, longest_line, run_length


def _board(width: int, height: int, moves: List[int], player: Cell = Cell.BLACK) -> Board:
    b = Board(width, height)
    for i in moves:
        b.place_at(i, player)
    return b


def test_empty_history_is_not_a_fault():
    b = Board(3, 3)
    assert longest_line(b) == 0
    assert detect_outcome(b, 3) is None


def test_top_row_wins_for_black():
    b = _board(3, 3, [0, 1])
    assert detect_outcome(b, 3) is None
    b.place_at(2, Cell.BLACK)
    assert detect_outcome(b, 3) == Cell.BLACK


@pytest.mark.parametrize("line", [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
])
def test_every_line_detected_in_any_order(line: List[int]):
    for order in (line, line[::-1], [line[1], line[0], line[2]]):
        b = _board(3, 3, order[:2], Cell.WHITE)
        assert detect_outcome(b, 3) is None
        b.place_at(order[2], Cell.WHITE)
        assert detect_outcome(b, 3) == Cell.WHITE


def test_counts_stop_at_other_player():
    b = Board(3, 3)
    b.place_at(0, Cell.BLACK)
    b.place_at(1, Cell.WHITE)
    b.place_at(2, Cell.BLACK)
    assert run_length(b, 2, 0, -1) == 0
    assert line_length(b, 2, (0, 1)) == 1


def test_horizontal_walk_does_not_wrap_rows():
    # indices 7..11 are consecutive in memory but span rows 0 and 1
    b = _board(9, 9, [7, 8, 9, 10, 11])
    assert longest_line(b) == 3
    assert detect_outcome(b, 5) is None


def test_gomoku_diagonals():
    up_right = [40 + 8 * k for k in (-2, -1, 1, 2)] + [40]
    b = _board(9, 9, up_right)
    assert line_length(b, 40, DIRECTIONS[0]) == 5
    assert detect_outcome(b, 5) == Cell.BLACK

    down_right = [0, 10, 20, 30, 40]
    b = _board(9, 9, down_right)
    assert line_length(b, 40, DIRECTIONS[1]) == 5
    assert detect_outcome(b, 5) == Cell.BLACK


def test_longer_line_than_connect_still_wins():
    b = _board(9, 9, [0, 1, 2, 3, 5, 6])
    b.place_at(4, Cell.BLACK)
    assert longest_line(b) == 7
    assert detect_outcome(b, 5) == Cell.BLACK


def test_full_board_without_line_is_draw():
    b = Board(3, 3)
    seq = [(0, Cell.BLACK), (1, Cell.WHITE), (2, Cell.BLACK),
           (4, Cell.WHITE), (3, Cell.BLACK), (5, Cell.WHITE),
           (7, Cell.BLACK), (6, Cell.WHITE), (8, Cell.BLACK)]
    for i, p in seq:
        b.place_at(i, p)
    assert detect_outcome(b, 3) == Cell.DRAW


def test_win_on_last_cell_beats_draw():
    b = Board(3, 3)
    seq = [(0, Cell.BLACK), (1, Cell.WHITE), (2, Cell.BLACK),
           (4, Cell.WHITE), (5, Cell.BLACK), (3, Cell.WHITE),
           (7, Cell.BLACK), (6, Cell.WHITE), (8, Cell.BLACK)]
    for i, p in seq:
        b.place_at(i, p)
    # 2, 5, 8 completes on the final move
    assert b.is_full()
    assert detect_outcome(b, 3) == Cell.BLACK
