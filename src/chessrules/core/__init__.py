"""Core domain layer: pure chess rule logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate_legal_moves(Color.WHITE):
        print(move)
"""

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.errors import (
    ChessError,
    FormatError,
    IllegalMoveError,
    InvariantViolation,
    OutOfBoundsError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    ParsedFen,
    board_from_fen,
    board_to_fen,
    build_fen,
    parse_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, is_in_bounds, to_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "GameStatus",
    "PieceType",
    # Errors
    "ChessError",
    "FormatError",
    "IllegalMoveError",
    "InvariantViolation",
    "OutOfBoundsError",
    # Types / helpers
    "Square",
    "is_in_bounds",
    "to_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "ParsedFen",
    "board_from_fen",
    "board_to_fen",
    "build_fen",
    "parse_fen",
]
