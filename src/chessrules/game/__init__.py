"""Game layer: the stateful entry point a front-end drives.

Quick start::

    from chessrules.game import GameState

    game = GameState.new_standard_game()
    outcome = game.apply_move("e2", "e4")
"""

from chessrules.game.state import GameState, MoveOutcome

__all__ = [
    "GameState",
    "MoveOutcome",
]
