"""Exception hierarchy for the rule engine.

Format and illegal-move errors are recoverable: callers catch them and ask
the player again. :class:`InvariantViolation` means the board itself is
broken (missing or duplicated king) and must not be swallowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.move import Move


class ChessError(Exception):
    """Base class for every error raised by :mod:`chessrules`."""


class FormatError(ChessError, ValueError):
    """Malformed coordinate, piece or FEN text."""


class OutOfBoundsError(ChessError, IndexError):
    """Row or column outside ``0..7``."""


class IllegalMoveError(ChessError, ValueError):
    """Move is not in the current legal-move set."""

    def __init__(self, move: Move, reason: str = "not a legal move") -> None:
        super().__init__(f"Illegal move {move}: {reason}")
        self.move = move
        self.reason = reason


class InvariantViolation(ChessError, RuntimeError):
    """Board is in a state where legality reasoning is undefined."""
