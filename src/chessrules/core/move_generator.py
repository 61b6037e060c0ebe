"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.move import Move

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.types import Square


class MoveGenerator:
    """Generates legal moves on a given :class:`Board`.

    Each candidate is played on a cloned board and kept only if the mover's
    king is not attacked afterwards. The real board is never touched.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*. Order is not significant."""
        return [
            move
            for move in self.generate_pseudo_legal_moves(color)
            if self._leaves_king_safe(move, color)
        ]

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        board = self._board
        for origin, piece in board.pieces(color):
            for to_sq in piece.candidate_targets(board, origin):
                moves.append(Move(origin, to_sq))
        return moves

    def is_legal(self, move: Move, color: Color) -> bool:
        """Whether *move* is in the legal-move set of *color*."""
        piece = self._board[move.from_sq]
        if piece is None or piece.color != color:
            return False
        if move.to_sq not in piece.candidate_targets(self._board, move.from_sq):
            return False
        return self._leaves_king_safe(move, color)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        board = self._board
        return board.is_square_attacked(board.find_king(color), color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return self._board.is_square_attacked(sq, by_color)

    # -- Internal -------------------------------------------------------------

    def _leaves_king_safe(self, move: Move, color: Color) -> bool:
        simulated = self._board.copy()
        simulated.apply_move(move.from_sq, move.to_sq)
        return not simulated.is_square_attacked(
            simulated.find_king(color), color.opposite
        )
