"""Rule settings shared by every game a caller creates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chessrules.core.enums import PieceType
from chessrules.core.rules import FIFTY_MOVE_HALFMOVES

_PROMOTABLE: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


@dataclass(frozen=True)
class RuleSettings:
    """All caller-configurable rule knobs."""

    # Piece a pawn turns into on the far rank.
    promotion_piece: PieceType = PieceType.QUEEN

    # Half-moves without pawn move or capture before the 50-move draw.
    fifty_move_halfmoves: int = FIFTY_MOVE_HALFMOVES

    def __post_init__(self) -> None:
        # Plain ints from parsed config become PieceType members.
        try:
            piece = PieceType(self.promotion_piece)
        except ValueError:
            raise ValueError(
                f"Unknown promotion piece: {self.promotion_piece!r}"
            ) from None
        object.__setattr__(self, "promotion_piece", piece)
        if piece not in _PROMOTABLE:
            raise ValueError(f"Cannot promote to {piece.name.lower()}")
        if self.fifty_move_halfmoves < 1:
            raise ValueError(
                f"fifty_move_halfmoves must be positive, got {self.fifty_move_halfmoves}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RuleSettings:
        """Build settings from a plain dict, e.g. a parsed config file.

        Unknown keys are ignored. ``promotion_piece`` may be a
        :class:`PieceType` or a piece name such as ``"rook"``.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in data.items() if key in known}

        promotion = kwargs.get("promotion_piece")
        if isinstance(promotion, str):
            try:
                kwargs["promotion_piece"] = PieceType[promotion.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown piece name: {promotion!r}") from None
        if "fifty_move_halfmoves" in kwargs:
            kwargs["fifty_move_halfmoves"] = int(kwargs["fifty_move_halfmoves"])
        return cls(**kwargs)
