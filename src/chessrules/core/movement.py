"""Per-variant candidate move geometry.

Candidate targets obey piece movement and capture rules only. They never
consider whether the mover's own king ends up attacked; that filter lives
in :class:`~chessrules.core.move_generator.MoveGenerator` alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square

if TYPE_CHECKING:
    from collections.abc import Callable

    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

    TargetGenerator = Callable[[Board, Square, Piece], list[Square]]


# (drow, dcol) pairs
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def pawn_direction(color: Color) -> int:
    """Row step of a forward pawn move: White heads for row 0."""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return 6 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    """The opposing back rank for *color*."""
    return 0 if color == Color.WHITE else 7


# -- Shared policies ---------------------------------------------------------


def _step_targets(
    board: Board,
    origin: Square,
    color: Color,
    offsets: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for drow, dcol in offsets:
        to_sq = origin.offset(drow, dcol)
        if to_sq is None:
            continue
        target = board[to_sq]
        if target is None or target.color != color:
            targets.append(to_sq)
    return targets


def _ray_targets(
    board: Board,
    origin: Square,
    color: Color,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    targets: list[Square] = []
    for drow, dcol in directions:
        to_sq = origin.offset(drow, dcol)
        while to_sq is not None:
            target = board[to_sq]
            if target is None:
                targets.append(to_sq)
                to_sq = to_sq.offset(drow, dcol)
                continue
            if target.color != color:
                targets.append(to_sq)
            break
    return targets


# -- Piece-specific generators -------------------------------------------------


def pawn_attacks(origin: Square, color: Color) -> list[Square]:
    """Both forward diagonals, whatever stands on them."""
    direction = pawn_direction(color)
    attacks: list[Square] = []
    for dcol in (-1, 1):
        to_sq = origin.offset(direction, dcol)
        if to_sq is not None:
            attacks.append(to_sq)
    return attacks


def _pawn_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    color = piece.color
    direction = pawn_direction(color)
    targets: list[Square] = []

    one_step = origin.offset(direction, 0)
    if one_step is not None and board.is_empty(one_step):
        targets.append(one_step)
        if piece.has_not_moved:
            two_step = one_step.offset(direction, 0)
            if two_step is not None and board.is_empty(two_step):
                targets.append(two_step)

    for cap_sq in pawn_attacks(origin, color):
        target = board[cap_sq]
        if target is not None and target.color != color:
            targets.append(cap_sq)
    return targets


def _knight_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    return _step_targets(board, origin, piece.color, KNIGHT_OFFSETS)


def _bishop_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    return _ray_targets(board, origin, piece.color, BISHOP_DIRS)


def _rook_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    return _ray_targets(board, origin, piece.color, ROOK_DIRS)


def _queen_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    return _ray_targets(board, origin, piece.color, QUEEN_DIRS)


def _king_targets(board: Board, origin: Square, piece: Piece) -> list[Square]:
    return _step_targets(board, origin, piece.color, KING_OFFSETS)


_GENERATORS: dict[PieceType, TargetGenerator] = {
    PieceType.PAWN: _pawn_targets,
    PieceType.KNIGHT: _knight_targets,
    PieceType.BISHOP: _bishop_targets,
    PieceType.ROOK: _rook_targets,
    PieceType.QUEEN: _queen_targets,
    PieceType.KING: _king_targets,
}


# -- Public API --------------------------------------------------------------


def candidate_targets(piece: Piece, board: Board, origin: Square) -> list[Square]:
    """Pseudo-legal destination squares for *piece* standing on *origin*."""
    return _GENERATORS[piece.piece_type](board, origin, piece)


def attack_targets(piece: Piece, board: Board, origin: Square) -> list[Square]:
    """Squares *piece* could capture on, occupied or not for pawns."""
    if piece.piece_type == PieceType.PAWN:
        return pawn_attacks(origin, piece.color)
    return _GENERATORS[piece.piece_type](board, origin, piece)
