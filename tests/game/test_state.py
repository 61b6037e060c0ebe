"""Tests for GameState."""

import logging

import pytest

from chessrules.config import RuleSettings
from chessrules.core.enums import Color, GameResult, GameStatus, PieceType
from chessrules.core.errors import FormatError, IllegalMoveError, InvariantViolation
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, board_from_fen
from chessrules.core.piece import Piece
from chessrules.core.types import D5, D7, E2, E4, E5, E7, Square
from chessrules.game.state import GameState


def _play(gs: GameState, *moves: str) -> None:
    for text in moves:
        gs.apply_move(text[:2], text[2:])


class TestGameStateSetup:
    def test_new_standard_game(self, standard_game: GameState) -> None:
        assert standard_game.side_to_move == Color.WHITE
        assert standard_game.halfmove_clock == 0
        assert standard_game.fullmove_number == 1
        assert standard_game.ply_count == 0
        assert standard_game.result == GameResult.IN_PROGRESS
        assert standard_game.to_fen() == STARTING_FEN

    def test_default_constructor_is_standard(self) -> None:
        assert GameState().to_fen() == STARTING_FEN

    def test_white_has_twenty_moves(self, standard_game: GameState) -> None:
        assert len(standard_game.legal_moves()) == 20
        assert len(standard_game.legal_moves(Color.WHITE)) == 20

    def test_side_not_to_move_has_no_moves(self, standard_game: GameState) -> None:
        assert standard_game.legal_moves(Color.BLACK) == []

    def test_from_fen(self) -> None:
        gs = GameState.from_fen("4k3/8/8/8/8/8/8/4K3 b - - 12 40")
        assert gs.side_to_move == Color.BLACK
        assert gs.halfmove_clock == 12
        assert gs.fullmove_number == 40
        assert gs.to_fen() == "4k3/8/8/8/8/8/8/4K3 b - - 12 40"

    def test_from_bad_fen(self) -> None:
        with pytest.raises(FormatError):
            GameState.from_fen("not a fen")

    def test_piece_at(self, standard_game: GameState) -> None:
        assert standard_game.piece_at("e1") == Piece(Color.WHITE, PieceType.KING)
        assert standard_game.piece_at(Square.from_algebraic("e4")) is None


class TestGameStateMoves:
    def test_apply_move_relocates_and_flips_side(self, standard_game: GameState) -> None:
        outcome = standard_game.apply_move("e2", "e4")
        assert outcome.move == Move(E2, E4)
        assert outcome.color == Color.WHITE
        assert outcome.piece_type == PieceType.PAWN
        assert not outcome.was_capture
        assert outcome.status == GameStatus.ONGOING
        assert standard_game.piece_at(E2) is None
        assert standard_game.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)
        assert standard_game.side_to_move == Color.BLACK
        assert standard_game.ply_count == 1

    def test_accepts_square_objects(self, standard_game: GameState) -> None:
        standard_game.apply_move(E2, E4)
        standard_game.apply_move(E7, E5)
        assert standard_game.piece_at(E5) == Piece(Color.BLACK, PieceType.PAWN)
        assert len(standard_game.legal_moves()) == 29

    def test_fen_after_opening_moves(self, standard_game: GameState) -> None:
        _play(standard_game, "e2e4", "e7e5")
        assert standard_game.to_fen() == (
            "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w - - 0 2"
        )

    def test_capture_reported(self, standard_game: GameState) -> None:
        _play(standard_game, "e2e4", "d7d5")
        outcome = standard_game.apply_move("e4", "d5")
        assert outcome.was_capture
        assert outcome.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert standard_game.piece_at(D5) == Piece(Color.WHITE, PieceType.PAWN)

    def test_moved_pawn_loses_double_step(self, standard_game: GameState) -> None:
        _play(standard_game, "e2e3", "a7a6")
        targets = {str(m) for m in standard_game.legal_moves() if m.from_sq.col == 4}
        assert "e3e4" in targets
        assert "e3e5" not in targets


class TestClocks:
    def test_knight_move_increments_halfmove(self, standard_game: GameState) -> None:
        standard_game.apply_move("g1", "f3")
        assert standard_game.halfmove_clock == 1
        standard_game.apply_move("g8", "f6")
        assert standard_game.halfmove_clock == 2

    def test_pawn_move_resets_halfmove(self, standard_game: GameState) -> None:
        _play(standard_game, "g1f3", "g8f6", "e2e4")
        assert standard_game.halfmove_clock == 0

    def test_capture_resets_halfmove(self) -> None:
        gs = GameState.from_fen("4k3/8/8/3p4/8/8/8/3QK3 w - - 30 50")
        gs.apply_move("d1", "d5")
        assert gs.halfmove_clock == 0

    def test_fullmove_increments_after_black(self, standard_game: GameState) -> None:
        standard_game.apply_move("e2", "e4")
        assert standard_game.fullmove_number == 1
        standard_game.apply_move("e7", "e5")
        assert standard_game.fullmove_number == 2


class TestIllegalMoves:
    def test_empty_origin(self, standard_game: GameState) -> None:
        with pytest.raises(IllegalMoveError, match="no piece on e4") as info:
            standard_game.apply_move("e4", "e5")
        assert info.value.move == Move(E4, E5)

    def test_wrong_side(self, standard_game: GameState) -> None:
        with pytest.raises(IllegalMoveError, match="white's turn"):
            standard_game.apply_move("e7", "e5")

    def test_not_a_legal_move(self, standard_game: GameState) -> None:
        with pytest.raises(IllegalMoveError, match="not a legal move"):
            standard_game.apply_move("e2", "e5")

    def test_pinned_piece_cannot_leave_line(self) -> None:
        gs = GameState.from_fen("k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1")
        with pytest.raises(IllegalMoveError):
            gs.apply_move("e2", "d2")

    def test_illegal_move_is_value_error(self, standard_game: GameState) -> None:
        with pytest.raises(ValueError):
            standard_game.apply_move("a1", "a3")

    def test_bad_square_name(self, standard_game: GameState) -> None:
        with pytest.raises(FormatError):
            standard_game.apply_move("e2", "e9")

    def test_state_unchanged_after_rejection(self, standard_game: GameState) -> None:
        before = standard_game.to_fen()
        with pytest.raises(IllegalMoveError):
            standard_game.apply_move("d7", "d5")
        assert standard_game.to_fen() == before
        assert standard_game.ply_count == 0


class TestGameEnd:
    def test_fools_mate(self, standard_game: GameState) -> None:
        _play(standard_game, "f2f3", "e7e5", "g2g4")
        outcome = standard_game.apply_move("d8", "h4")
        assert outcome.was_check
        assert outcome.was_checkmate
        assert standard_game.is_checkmate()
        assert standard_game.is_in_check(Color.WHITE)
        assert standard_game.status == GameStatus.CHECKMATE
        assert standard_game.legal_moves() == []
        assert standard_game.result == GameResult.BLACK_WINS
        assert standard_game.is_game_over

    def test_no_moves_after_checkmate(self, standard_game: GameState) -> None:
        _play(standard_game, "f2f3", "e7e5", "g2g4", "d8h4")
        with pytest.raises(IllegalMoveError):
            standard_game.apply_move("a2", "a3")

    def test_check_status(self) -> None:
        gs = GameState.from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        outcome = gs.apply_move("a1", "a8")
        assert outcome.was_check
        assert not outcome.was_checkmate
        assert gs.status == GameStatus.CHECK
        assert not gs.is_game_over

    def test_stalemate_by_move(self) -> None:
        gs = GameState.from_fen("7k/8/5K2/6Q1/8/8/8/8 w - - 0 1")
        outcome = gs.apply_move("g5", "g6")
        assert outcome.was_stalemate
        assert gs.is_stalemate()
        assert not gs.is_in_check()
        assert gs.result == GameResult.DRAW

    def test_fifty_move_draw(self) -> None:
        gs = GameState.from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 99 60")
        assert not gs.is_fifty_move_draw
        gs.apply_move("a1", "a2")
        assert gs.halfmove_clock == 100
        assert gs.is_fifty_move_draw
        assert gs.result == GameResult.DRAW
        assert gs.is_game_over
        # Still playable; the draw is reported, not enforced.
        assert gs.legal_moves()

    def test_fifty_move_limit_from_settings(self) -> None:
        settings = RuleSettings(fifty_move_halfmoves=2)
        gs = GameState.from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1", settings)
        _play(gs, "a1a2", "e8d8")
        assert gs.is_fifty_move_draw


class TestPromotion:
    def test_white_promotes_to_queen(self) -> None:
        gs = GameState.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1")
        outcome = gs.apply_move("a7", "a8")
        assert outcome.was_promotion
        assert outcome.promoted_to == PieceType.QUEEN
        assert outcome.status == GameStatus.ONGOING
        assert gs.piece_at("a8") == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_promotes_with_check(self) -> None:
        gs = GameState.from_fen("k7/8/8/8/8/8/7p/K7 b - - 0 1")
        outcome = gs.apply_move("h2", "h1")
        assert gs.piece_at("h1") == Piece(Color.BLACK, PieceType.QUEEN)
        assert outcome.was_check
        assert gs.status == GameStatus.CHECK

    def test_promotion_piece_from_settings(self) -> None:
        settings = RuleSettings(promotion_piece=PieceType.KNIGHT)
        gs = GameState.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1", settings)
        outcome = gs.apply_move("a7", "a8")
        assert outcome.promoted_to == PieceType.KNIGHT
        promoted = gs.piece_at("a8")
        assert promoted == Piece(Color.WHITE, PieceType.KNIGHT)
        assert promoted is not None and promoted.square == Square.from_algebraic("a8")

    def test_promotion_piece_from_integer_config(self) -> None:
        settings = RuleSettings.from_mapping({"promotion_piece": 2})
        gs = GameState.from_fen("8/P6k/8/8/8/8/8/K7 w - - 0 1", settings)
        outcome = gs.apply_move("a7", "a8")
        assert outcome.promoted_to is PieceType.KNIGHT
        assert gs.piece_at("a8") == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_non_final_rank_does_not_promote(self, standard_game: GameState) -> None:
        outcome = standard_game.apply_move("d2", "d4")
        assert not outcome.was_promotion


class TestLogging:
    def test_rejection_logged_at_debug(
        self, standard_game: GameState, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessrules.game.state"):
            with pytest.raises(IllegalMoveError):
                standard_game.apply_move("e7", "e5")
        assert any("Rejected e7e5" in r.getMessage() for r in caplog.records)

    def test_checkmate_logged_at_info(
        self, standard_game: GameState, caplog: pytest.LogCaptureFixture
    ) -> None:
        _play(standard_game, "f2f3", "e7e5", "g2g4")
        with caplog.at_level(logging.INFO, logger="chessrules.game.state"):
            standard_game.apply_move("d8", "h4")
        infos = [r for r in caplog.records if r.levelno == logging.INFO]
        assert any("Checkmate: black wins" in r.getMessage() for r in infos)

    def test_history_is_recorded(self, standard_game: GameState) -> None:
        _play(standard_game, "e2e4", "d7d5")
        history = standard_game.move_history
        assert [str(o.move) for o in history] == ["e2e4", "d7d5"]
        assert history[1].move == Move(D7, D5)


class TestUnplayablePositions:
    def test_capturable_king_rejected_on_load(self) -> None:
        # Black is in check with White to move.
        with pytest.raises(FormatError, match="black king is in check"):
            GameState.from_fen("4k3/8/8/8/8/8/8/4RK2 w - - 0 1")

    @pytest.mark.parametrize(
        "fen",
        [
            "8/8/8/8/8/8/8/4K3 w - - 0 1",
            "4k3/8/8/8/8/8/8/8 b - - 0 1",
            "4k3/8/8/8/8/8/8/K3K3 w - - 0 1",
        ],
    )
    def test_king_count_rejected_on_load(self, fen: str) -> None:
        with pytest.raises(FormatError, match="king"):
            GameState.from_fen(fen)

    def test_failed_classification_leaves_state_untouched(self) -> None:
        gs = GameState(board=board_from_fen("4k3/8/8/8/8/8/8/4RK2"))
        before = gs.to_fen()
        with pytest.raises(InvariantViolation):
            gs.apply_move("e1", "e8")
        assert gs.to_fen() == before
        assert gs.side_to_move == Color.WHITE
        assert gs.halfmove_clock == 0
        assert gs.ply_count == 0
