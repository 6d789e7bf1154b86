"""
Error kinds raised by the game engine and simulation controller.

Library code raises these; only the CLI turns them into exit codes.
"""


class ApproxError(Exception):
    """Base class for all engine errors."""


class InvalidMove(ApproxError, ValueError):
    """A piece was placed on an occupied or out-of-range cell."""


class NoLegalMoves(ApproxError, RuntimeError):
    """A move was requested on a full board."""


class GameAlreadyOver(ApproxError, RuntimeError):
    """A move was requested after the game reached a terminal state."""


class UnknownGameVariant(ApproxError, ValueError):
    """The factory was given a game name it does not know."""
