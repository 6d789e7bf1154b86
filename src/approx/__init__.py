"""approx package.

Random-play board game simulation: board state, incremental win detection,
game variants, and a controller that tallies outcomes over many games.
"""

from .board import Board, Cell
from .errors import (
    ApproxError,
    GameAlreadyOver,
    InvalidMove,
    NoLegalMoves,
    UnknownGameVariant,
)
from .factory import available_games, create_game, require_game
from .games import Game, Gomoku, Tictactoe
from .simulation import Simulation, SimulationResult, play_out, simulate

__all__ = [
    "Board",
    "Cell",
    "Game",
    "Tictactoe",
    "Gomoku",
    "create_game",
    "require_game",
    "available_games",
    "Simulation",
    "SimulationResult",
    "play_out",
    "simulate",
    "ApproxError",
    "InvalidMove",
    "NoLegalMoves",
    "GameAlreadyOver",
    "UnknownGameVariant",
]
