"""High-level chess rules: check, checkmate, stalemate, 50-move draw."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, GameStatus
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board

FIFTY_MOVE_HALFMOVES = 100  # 100 half-moves = 50 full moves


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Checkmate and stalemate come from an empty legal-move set.
    # - The 50-move rule is independent of both and left to the caller.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return len(gen.generate_legal_moves(color)) == 0

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Classify the position for *color* with one legal-move pass."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color)
        if not gen.generate_legal_moves(color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ONGOING

    @staticmethod
    def is_fifty_move_rule(
        halfmove_clock: int, limit: int = FIFTY_MOVE_HALFMOVES
    ) -> bool:
        return halfmove_clock >= limit

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        halfmove_clock: int = 0,
        fifty_move_limit: int = FIFTY_MOVE_HALFMOVES,
    ) -> GameResult:
        """Determine the current game result."""
        status = Rules.status(board, side_to_move)
        if status == GameStatus.CHECKMATE:
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if status == GameStatus.STALEMATE:
            return GameResult.DRAW

        if Rules.is_fifty_move_rule(halfmove_clock, fifty_move_limit):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
