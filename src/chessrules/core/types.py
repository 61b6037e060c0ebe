"""Square value type and coordinate helpers.

Board layout (row-major, White at the bottom):
    row 0 = rank 8  (a8 = Square(0, 0), h8 = Square(0, 7))
    ...
    row 7 = rank 1  (a1 = Square(7, 0), h1 = Square(7, 7))
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import FormatError, OutOfBoundsError

BOARD_SIZE = 8
_FILES = "abcdefgh"
_RANKS = "12345678"


def is_in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate. Ordered by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_in_bounds(self.row, self.col):
            raise OutOfBoundsError(f"Square out of bounds: ({self.row}, {self.col})")

    @classmethod
    def from_algebraic(cls, text: str) -> Square:
        """Parse a square name, e.g. ``'e2'`` -> ``Square(6, 4)``."""
        name = text.strip().lower()
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise FormatError(f"Invalid square name: {text!r}")
        return cls(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))

    def to_algebraic(self) -> str:
        """Human-readable name, e.g. ``Square(0, 0)`` -> ``'a8'``."""
        return f"{_FILES[self.col]}{BOARD_SIZE - self.row}"

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if not is_in_bounds(row, col):
            return None
        return Square(row, col)

    def __str__(self) -> str:
        return self.to_algebraic()


def to_square(value: Square | str) -> Square:
    """Accept either a :class:`Square` or its algebraic name."""
    if isinstance(value, Square):
        return value
    return Square.from_algebraic(value)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


def _rank(rank: int) -> tuple[Square, ...]:
    row = BOARD_SIZE - rank
    return tuple(Square(row, col) for col in range(BOARD_SIZE))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _rank(1)
A2, B2, C2, D2, E2, F2, G2, H2 = _rank(2)
A3, B3, C3, D3, E3, F3, G3, H3 = _rank(3)
A4, B4, C4, D4, E4, F4, G4, H4 = _rank(4)
A5, B5, C5, D5, E5, F5, G5, H5 = _rank(5)
A6, B6, C6, D6, E6, F6, G6, H6 = _rank(6)
A7, B7, C7, D7, E7, F7, G7, H7 = _rank(7)
A8, B8, C8, D8, E8, F8, G8, H8 = _rank(8)
