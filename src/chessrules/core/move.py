"""Move value object (coordinate pair)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single from→to move."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq.to_algebraic()}{self.to_sq.to_algebraic()}"
