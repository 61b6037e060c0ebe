"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.game.state import GameState


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def standard_game() -> GameState:
    """A fresh game from the canonical starting position."""
    return GameState.new_standard_game()
