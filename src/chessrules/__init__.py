"""chessrules: a two-player chess rule engine."""

from chessrules.config import RuleSettings
from chessrules.core import (
    Board,
    ChessError,
    Color,
    FormatError,
    GameResult,
    GameStatus,
    IllegalMoveError,
    InvariantViolation,
    Move,
    MoveGenerator,
    OutOfBoundsError,
    Piece,
    PieceType,
    Rules,
    Square,
)
from chessrules.game import GameState, MoveOutcome

__all__ = [
    "Board",
    "ChessError",
    "Color",
    "FormatError",
    "GameResult",
    "GameState",
    "GameStatus",
    "IllegalMoveError",
    "InvariantViolation",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "OutOfBoundsError",
    "Piece",
    "PieceType",
    "RuleSettings",
    "Rules",
    "Square",
]
