"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core import movement
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import FormatError
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A chess piece owned by exactly one board cell.

    Equality looks at color and type only; ``square`` and ``has_not_moved``
    are placement state kept in sync by :class:`~chessrules.core.board.Board`.
    """

    color: Color
    piece_type: PieceType
    square: Square | None = field(default=None, compare=False)
    # Only pawns read this (two-square opening advance).
    has_not_moved: bool = field(default=True, compare=False)

    # ── Movement ─────────────────────────────────────────────────────────

    def candidate_targets(
        self, board: Board, origin: Square | None = None
    ) -> list[Square]:
        """Pseudo-legal targets from *origin* (defaults to the stored square)."""
        return movement.candidate_targets(self, board, self._origin(origin))

    def attack_targets(self, board: Board, origin: Square | None = None) -> list[Square]:
        """Squares this piece attacks; pawns use capture geometry only."""
        return movement.attack_targets(self, board, self._origin(origin))

    def moved_to(self, square: Square) -> None:
        """Record a completed move onto *square*."""
        self.square = square
        self.has_not_moved = False

    def copy(self) -> Piece:
        return Piece(self.color, self.piece_type, self.square, self.has_not_moved)

    def _origin(self, origin: Square | None) -> Square:
        if origin is not None:
            return origin
        if self.square is None:
            raise ValueError(f"{self!r} is not on a board and no origin was given")
        return self.square

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise FormatError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
