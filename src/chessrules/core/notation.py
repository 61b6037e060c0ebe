"""FEN parsing and serialization.

Only the fields this engine models are kept: piece placement, side to move
and the two clocks. Castling and en-passant fields are syntax-checked and
dropped on input, and written back as ``-``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import FormatError
from chessrules.core.movement import pawn_start_row
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"

_CASTLING_RE = re.compile(r"^(-|K?Q?k?q?)$")
_EN_PASSANT_RE = re.compile(r"^(-|[a-h][36])$")


@dataclass(slots=True)
class ParsedFen:
    """Fields of a FEN record that the engine understands."""

    board: Board
    side_to_move: Color = Color.WHITE
    halfmove_clock: int = 0
    fullmove_number: int = 1


def board_from_fen(placement: str) -> Board:
    """Build a :class:`Board` from the piece-placement field of a FEN.

    A pawn standing on its starting row is treated as not yet moved.
    """
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise FormatError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")
    board = Board()
    # FEN lists rank 8 first, which is row 0.
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise FormatError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise FormatError(f"Invalid FEN rank width: {placement!r}")
                piece = Piece.from_char(ch)
                if piece.piece_type == PieceType.PAWN:
                    piece.has_not_moved = row == pawn_start_row(piece.color)
                board.place(piece, Square(row, col))
                col += 1
            if col > BOARD_SIZE:
                raise FormatError(f"Invalid FEN rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise FormatError(f"Invalid FEN rank width: {placement!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise piece placement (first FEN field)."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def parse_fen(fen: str) -> ParsedFen:
    """Parse a FEN string; only the placement field is mandatory."""
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise FormatError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        if parts[1] == "w":
            side = Color.WHITE
        elif parts[1] == "b":
            side = Color.BLACK
        else:
            raise FormatError(f"Invalid FEN side-to-move field: {parts[1]!r}")

    if len(parts) > 2 and not _CASTLING_RE.match(parts[2]):
        raise FormatError(f"Invalid FEN castling field: {parts[2]!r}")
    if len(parts) > 3 and not _EN_PASSANT_RE.match(parts[3]):
        raise FormatError(f"Invalid FEN en-passant field: {parts[3]!r}")

    halfmove = _parse_counter(parts, 4, "halfmove clock", default=0, minimum=0)
    fullmove = _parse_counter(parts, 5, "fullmove number", default=1, minimum=1)

    return ParsedFen(board, side, halfmove, fullmove)


def build_fen(
    board: Board,
    side_to_move: Color = Color.WHITE,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> str:
    """Serialise a position to a six-field FEN string."""
    side_str = "w" if side_to_move == Color.WHITE else "b"
    return f"{board_to_fen(board)} {side_str} - - {halfmove_clock} {fullmove_number}"


def _parse_counter(
    parts: list[str], index: int, name: str, *, default: int, minimum: int
) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise FormatError(f"Invalid FEN {name}: {parts[index]!r}") from None
    if value < minimum:
        raise FormatError(f"Invalid FEN {name}: {parts[index]!r}")
    return value
