"""
Game abstraction and concrete variants.

A variant is a rule-set: board dimensions plus the connect-length needed to
win. All variants share the same incremental win detector and random mover.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .board import Board, Cell
from .errors import GameAlreadyOver
from .selector import choose_move, make_rng
from .win import detect_outcome

UNKNOWN = "UNKNOWN"


def next_player(player: Cell) -> Cell:
    if player == Cell.BLACK:
        return Cell.WHITE
    if player == Cell.WHITE:
        return Cell.BLACK
    raise AssertionError(f"Turn order broken: {player!r} is not a player")


class Game:
    """Two-player game on a fixed board with random legal moves.

    Lifecycle: BLACK to move on an empty board; ``play`` mutates until
    ``check_termination`` returns True, after which the game is frozen.
    """

    name: str = ""
    width: int = 0
    height: int = 0
    connect: int = 0

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else make_rng()
        self._board = Board(self.width, self.height)
        self._current = Cell.BLACK
        self._outcome: Optional[Cell] = None

    @property
    def board(self) -> Board:
        return self._board

    @property
    def outcome(self) -> Optional[Cell]:
        return self._outcome

    def dimension(self) -> int:
        return self._board.size

    def current_player(self) -> Cell:
        return self._current

    def move(self, index: int) -> int:
        """Place the current player's piece at ``index`` and pass the turn."""
        if self._outcome is not None:
            raise GameAlreadyOver(f"{self.name} is over: {self.winner()}")
        self._board.place_at(index, self._current)
        self._current = next_player(self._current)
        return index

    def play(self) -> int:
        """Make one uniformly random legal move; returns the chosen index."""
        if self._outcome is not None:
            raise GameAlreadyOver(f"{self.name} is over: {self.winner()}")
        index = choose_move(list(self._board.empty_cells()), self._rng)
        return self.move(index)

    def check_termination(self) -> bool:
        if self._outcome is not None:
            return True
        self._outcome = detect_outcome(self._board, self.connect)
        return self._outcome is not None

    def winner(self) -> str:
        if self._outcome is None:
            return UNKNOWN
        return self._outcome.name

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(board={self._board.serialize()!r}, "
                f"to_move={self._current.name}, winner={self.winner()})")


class Tictactoe(Game):
    name = "tictactoe"
    width = 3
    height = 3
    connect = 3


class Gomoku(Game):
    name = "gomoku"
    width = 9
    height = 9
    connect = 5
