"""
Incremental win detection.
Teaching notes:
- Only the most recent move can complete a line, so we look at that cell alone.
- For each of the four axes we walk outward in both directions, counting
  consecutive cells held by the same player, and add one for the centre.
- This costs O(connect) per move instead of a full-board rescan.
"""
from __future__ import annotations

from typing import Optional, Tuple

from .board import Board, Cell

# (d_row, d_col) for diagonal up-right, diagonal down-right, vertical, horizontal
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 1), (1, 1), (1, 0), (0, 1))


def run_length(board: Board, index: int, d_row: int, d_col: int) -> int:
    player = board.cell(index)
    row, col = board.coords(index)
    count = 0
    while True:
        row += d_row
        col += d_col
        if not board.in_bounds(row, col):
            break
        if board.cell(board.index_of(row, col)) != player:
            break
        count += 1
    return count


def line_length(board: Board, index: int, axis: Tuple[int, int]) -> int:
    d_row, d_col = axis
    return 1 + run_length(board, index, d_row, d_col) + run_length(board, index, -d_row, -d_col)


def longest_line(board: Board) -> int:
    last = board.last_move
    if last is None:
        return 0
    return max(line_length(board, last, axis) for axis in DIRECTIONS)


def detect_outcome(board: Board, connect: int) -> Optional[Cell]:
    """Outcome decided by the last move: the winning player, DRAW, or None."""
    last = board.last_move
    if last is None:
        return None
    if longest_line(board) >= connect:
        return board.cell(last)
    if board.is_full():
        return Cell.DRAW
    return None
