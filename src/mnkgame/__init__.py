"""mnkgame package.

Generalized tic-tac-toe (n in a row on a rows x cols board), an exhaustive
minimax opponent, tactics helpers, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import (
    InvalidBoardString,
    InvalidGeometry,
    InvalidMark,
    InvalidWinLength,
    MnkError,
    PositionOutOfBounds,
    SquareOccupied,
    WrongTurn,
)
from .game import Game
from .game_basics import O, X, BoardGeometry, BoardState, Move, Position, apply_move
from .lines import DRAW, check_for_n_in_row, evaluate_winner, lines_on_board
from .solver import find_best_move, minimax

__all__ = [
    "X",
    "O",
    "DRAW",
    "BoardGeometry",
    "Position",
    "BoardState",
    "Move",
    "Game",
    "apply_move",
    "lines_on_board",
    "check_for_n_in_row",
    "evaluate_winner",
    "minimax",
    "find_best_move",
    "MnkError",
    "InvalidGeometry",
    "InvalidMark",
    "InvalidBoardString",
    "PositionOutOfBounds",
    "InvalidWinLength",
    "SquareOccupied",
    "WrongTurn",
]
