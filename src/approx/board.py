"""
Board state and move history.
Teaching notes:
- Cells are stored row-major in a flat list: index = row * width + col.
- BLACK always moves first; DRAW is an outcome value and never sits on the board.
- The history is append-only, so its length always equals the number of pieces.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidMove


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2
    DRAW = 3


PLAYERS = (Cell.BLACK, Cell.WHITE)

_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}


class Board:
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive: {width}x{height}")
        self.width = width
        self.height = height
        self._cells: List[Cell] = [Cell.EMPTY] * (width * height)
        self._history: List[int] = []

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def history(self) -> Tuple[int, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[int]:
        return self._history[-1] if self._history else None

    def __len__(self) -> int:
        return len(self._history)

    def cell(self, index: int) -> Cell:
        return self._cells[index]

    def coords(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.width)

    def index_of(self, row: int, col: int) -> int:
        return row * self.width + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def place_at(self, index: int, player: Cell) -> None:
        if player not in PLAYERS:
            raise InvalidMove(f"Cannot place {player!r}; only BLACK or WHITE may move")
        if not 0 <= index < self.size:
            raise InvalidMove(f"Index {index} is outside a board of {self.size} cells")
        if self._cells[index] != Cell.EMPTY:
            raise InvalidMove(f"Cell {index} is already occupied by {self._cells[index].name}")
        self._cells[index] = player
        self._history.append(index)

    def empty_cells(self) -> Iterator[int]:
        return (i for i, v in enumerate(self._cells) if v == Cell.EMPTY)

    def is_full(self) -> bool:
        return len(self._history) == self.size

    def serialize(self) -> str:
        return ''.join(str(int(v)) for v in self._cells)

    def render(self) -> str:
        rows = []
        for r in range(self.height):
            row = self._cells[r * self.width:(r + 1) * self.width]
            rows.append(' '.join(_SYMBOLS[v] for v in row))
        return '\n'.join(rows)
