from typing import List

import pytest
try:
    from hypothesis import given, settings, strategies as st  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - test infra
    pytest.skip("Hypothesis not installed", allow_module_level=True)

from approx.board import Board, Cell
from approx.factory import create_game
from approx.selector import make_rng


def full_scan_winner(board: Board, connect: int) -> Cell:
    """Reference: rescan every line segment of length ``connect``."""
    winners = set()
    for row in range(board.height):
        for col in range(board.width):
            for d_row, d_col in ((0, 1), (1, 0), (1, 1), (-1, 1)):
                end_r = row + d_row * (connect - 1)
                end_c = col + d_col * (connect - 1)
                if not board.in_bounds(end_r, end_c):
                    continue
                cells = {board.cell(board.index_of(row + d_row * k, col + d_col * k))
                         for k in range(connect)}
                if len(cells) == 1 and Cell.EMPTY not in cells:
                    winners.add(cells.pop())
    assert len(winners) <= 1
    return winners.pop() if winners else Cell.EMPTY


def _check_sequence(name: str, order: List[int]) -> None:
    g = create_game(name, make_rng(0))
    for played, index in enumerate(order, start=1):
        g.move(index)
        board = g.board
        assert len(board.history) == played
        assert sum(1 for i in range(board.size) if board.cell(i) != Cell.EMPTY) == played
        reference = full_scan_winner(board, g.connect)
        if g.check_termination():
            if reference != Cell.EMPTY:
                assert g.winner() == reference.name
                assert reference == board.cell(index)
            else:
                assert board.is_full()
                assert g.winner() == "DRAW"
            return
        assert reference == Cell.EMPTY
        assert not board.is_full()
        assert g.winner() == "UNKNOWN"
    pytest.fail("game never terminated")


@given(st.permutations(list(range(9))))
def test_incremental_detector_matches_full_scan_tictactoe(order: List[int]):
    _check_sequence("tictactoe", order)


@settings(max_examples=20, deadline=None)
@given(st.permutations(list(range(81))))
def test_incremental_detector_matches_full_scan_gomoku(order: List[int]):
    _check_sequence("gomoku", order)


@settings(max_examples=50, deadline=None)
@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_random_games_end_with_a_label(seed: int):
    g = create_game("tictactoe", make_rng(seed))
    while not g.check_termination():
        g.play()
    label = g.winner()
    assert label in {"BLACK", "WHITE", "DRAW"}
    assert g.check_termination()
    assert g.winner() == label
