"""Game state: board, side to move, clocks and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NoReturn

from chessrules.config import RuleSettings
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.errors import FormatError, IllegalMoveError, InvariantViolation
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.movement import promotion_row
from chessrules.core.notation import build_fen, parse_fen
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, to_square

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveOutcome:
    """What happened when a move was applied."""

    move: Move
    color: Color
    piece_type: PieceType
    captured: Piece | None = None
    promoted_to: PieceType | None = None
    # Status of the side now to move.
    status: GameStatus = GameStatus.ONGOING

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_promotion(self) -> bool:
        return self.promoted_to is not None

    @property
    def was_check(self) -> bool:
        """Opponent is in check (checkmate included)."""
        return self.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def was_checkmate(self) -> bool:
        return self.status == GameStatus.CHECKMATE

    @property
    def was_stalemate(self) -> bool:
        return self.status == GameStatus.STALEMATE


@dataclass
class GameState:
    """Owns one board plus the side to move and the move clocks.

    This is a pure data/logic class: no I/O, no player bookkeeping. A
    front-end drives it by calling :meth:`apply_move` and the query methods.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    halfmove_clock: int = 0
    fullmove_number: int = 1
    settings: RuleSettings = field(default_factory=RuleSettings)
    move_history: list[MoveOutcome] = field(default_factory=list, init=False)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new_standard_game(cls, settings: RuleSettings | None = None) -> GameState:
        """Fresh game from the canonical starting position."""
        return cls(settings=settings or RuleSettings())

    @classmethod
    def from_fen(cls, fen: str, settings: RuleSettings | None = None) -> GameState:
        """Game continuing from an arbitrary FEN position.

        Raises:
            FormatError: the text is malformed, a side does not have exactly
                one king, or the side that just moved left its king in check.
        """
        parsed = parse_fen(fen)
        _check_playable(parsed.board, parsed.side_to_move)
        return cls(
            board=parsed.board,
            side_to_move=parsed.side_to_move,
            halfmove_clock=parsed.halfmove_clock,
            fullmove_number=parsed.fullmove_number,
            settings=settings or RuleSettings(),
        )

    def to_fen(self) -> str:
        return build_fen(
            self.board, self.side_to_move, self.halfmove_clock, self.fullmove_number
        )

    # ── Query helpers ────────────────────────────────────────────────────

    def piece_at(self, square: Square | str) -> Piece | None:
        return self.board.get(square)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves for *color*; empty unless *color* is to move."""
        color = self._side(color)
        if color != self.side_to_move:
            return []
        return MoveGenerator(self.board).generate_legal_moves(color)

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self.board, self._side(color))

    def is_checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self.board, self._side(color))

    def is_stalemate(self, color: Color | None = None) -> bool:
        return Rules.is_stalemate(self.board, self._side(color))

    @property
    def status(self) -> GameStatus:
        """Check/checkmate/stalemate classification of the side to move."""
        return Rules.status(self.board, self.side_to_move)

    @property
    def is_fifty_move_draw(self) -> bool:
        return Rules.is_fifty_move_rule(
            self.halfmove_clock, self.settings.fifty_move_halfmoves
        )

    @property
    def result(self) -> GameResult:
        return Rules.game_result(
            self.board,
            self.side_to_move,
            self.halfmove_clock,
            self.settings.fifty_move_halfmoves,
        )

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square | str, to_sq: Square | str) -> MoveOutcome:
        """Play a move for the side to move.

        Raises:
            IllegalMoveError: the move is not in :meth:`legal_moves`.
            FormatError: a square name could not be parsed.
            InvariantViolation: the resulting board has no king to classify.
        """
        move = Move(to_square(from_sq), to_square(to_sq))
        color = self.side_to_move
        board = self.board

        piece = board[move.from_sq]
        if piece is None:
            self._reject(move, f"no piece on {move.from_sq}")
        if piece.color != color:
            self._reject(move, f"it is {color}'s turn")
        if not MoveGenerator(board).is_legal(move, color):
            self._reject(move, "not a legal move")

        # Status comes from a copy; a failure there leaves the game untouched.
        preview = board.copy()
        self._play(preview, move, color)
        status = Rules.status(preview, color.opposite)

        piece_type = piece.piece_type
        captured, promoted_to = self._play(board, move, color)
        if promoted_to is not None:
            _LOGGER.debug(
                "Promoted %s pawn on %s to %s", color, move.to_sq, promoted_to.name
            )

        # Clocks
        if piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if color == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = color.opposite

        outcome = MoveOutcome(
            move=move,
            color=color,
            piece_type=piece_type,
            captured=captured,
            promoted_to=promoted_to,
            status=status,
        )
        self.move_history.append(outcome)
        _LOGGER.debug("%s played %s (%s)", color, move, outcome.status.name)

        if outcome.was_checkmate:
            _LOGGER.info("Checkmate: %s wins", color)
        elif outcome.was_stalemate:
            _LOGGER.info("Stalemate after %s", move)
        elif self.is_fifty_move_draw:
            _LOGGER.info("Fifty-move rule reached (%d half-moves)", self.halfmove_clock)

        return outcome

    # ── Internal ─────────────────────────────────────────────────────────

    def _side(self, color: Color | None) -> Color:
        return self.side_to_move if color is None else color

    def _play(
        self, board: Board, move: Move, color: Color
    ) -> tuple[Piece | None, PieceType | None]:
        """Apply *move* to *board* with promotion; return (captured, promoted_to)."""
        captured = board.apply_move(move.from_sq, move.to_sq)
        moved = board[move.to_sq]
        if (
            moved is not None
            and moved.piece_type == PieceType.PAWN
            and move.to_sq.row == promotion_row(color)
        ):
            promoted_to = self.settings.promotion_piece
            board.place(Piece(color, promoted_to, has_not_moved=False), move.to_sq)
            return captured, promoted_to
        return captured, None

    @staticmethod
    def _reject(move: Move, reason: str) -> NoReturn:
        _LOGGER.debug("Rejected %s: %s", move, reason)
        raise IllegalMoveError(move, reason)


def _check_playable(board: Board, side_to_move: Color) -> None:
    """Reject loaded positions that legal play could never reach."""
    try:
        for color in Color:
            board.find_king(color)
    except InvariantViolation as exc:
        raise FormatError(f"Invalid FEN position: {exc}") from exc
    if Rules.is_in_check(board, side_to_move.opposite):
        raise FormatError(
            f"Invalid FEN position: {side_to_move.opposite} king is in check"
            f" with {side_to_move} to move"
        )
