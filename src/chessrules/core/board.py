"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import logging

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvariantViolation
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, BOARD_SIZE, Square, to_square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid that exclusively owns its pieces.

    Mutation goes through :meth:`place`, :meth:`remove` and
    :meth:`apply_move`. None of them check chess legality.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def get(self, sq: Square | str) -> Piece | None:
        """Piece on *sq* (a :class:`Square` or a name like ``'e4'``)."""
        return self[to_square(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on *sq*, replacing whatever stood there.

        A piece already on this board leaves its old cell; a displaced
        piece is taken off the board.
        """
        old = piece.square
        if old is not None and self._grid[old.row][old.col] is piece:
            self._grid[old.row][old.col] = None
        displaced = self._grid[sq.row][sq.col]
        if displaced is not None and displaced is not piece:
            displaced.square = None
        self._grid[sq.row][sq.col] = piece
        piece.square = sq

    def remove(self, sq: Square) -> Piece | None:
        """Lift and return the piece on *sq*, if any."""
        piece = self._grid[sq.row][sq.col]
        self._grid[sq.row][sq.col] = None
        if piece is not None:
            piece.square = None
        return piece

    def apply_move(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq* to *to_sq*; return any captured piece.

        No legality checking: this is the raw mechanism used by real moves
        and by legality simulation on cloned boards alike.
        """
        piece = self._grid[from_sq.row][from_sq.col]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        captured = self._grid[to_sq.row][to_sq.col]
        if captured is not None:
            captured.square = None

        self._grid[to_sq.row][to_sq.col] = piece
        self._grid[from_sq.row][from_sq.col] = None
        piece.moved_to(to_sq)
        return captured

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """``(square, piece)`` pairs for every *color* piece, row-major."""
        found: list[tuple[Square, Piece]] = []
        for sq in ALL_SQUARES:
            piece = self._grid[sq.row][sq.col]
            if piece is not None and piece.color == color:
                found.append((sq, piece))
        return found

    def find_king(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        kings = [
            sq
            for sq, piece in self.pieces(color)
            if piece.piece_type == PieceType.KING
        ]
        if len(kings) != 1:
            _LOGGER.error("Expected one %s king, found %d", color.name, len(kings))
            if not kings:
                raise InvariantViolation(f"No {color.name} king on board")
            raise InvariantViolation(
                f"{len(kings)} {color.name} kings on board: "
                + ", ".join(str(sq) for sq in kings)
            )
        return kings[0]

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        for origin, piece in self.pieces(by_color):
            if sq in piece.attack_targets(self, origin):
                return True
        return False

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy; pieces are duplicated, never shared."""
        b = Board()
        b._grid = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]
        return b

    clone = copy

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(BOARD_SIZE):
            b.place(Piece(Color.BLACK, PieceType.PAWN), Square(1, col))
            b.place(Piece(Color.WHITE, PieceType.PAWN), Square(6, col))

        for col, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.BLACK, pt), Square(0, col))
            b.place(Piece(Color.WHITE, pt), Square(7, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Same pieces on the same squares with the same pawn flags."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._cell_keys() == other._cell_keys()

    def _cell_keys(self) -> list[tuple[Color, PieceType, bool] | None]:
        return [
            None if p is None else (p.color, p.piece_type, p.has_not_moved)
            for row in self._grid
            for p in row
        ]

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
