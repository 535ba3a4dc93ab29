"""
A game in progress: current state, whose turn it is, and the move history.

The game does not stop accepting moves once someone has won; callers check
`result()` (or `evaluate_winner`) after each move and stop on their own.
"""
from typing import List, Optional, Tuple

from .errors import WrongTurn
from .game_basics import MARKS, BoardGeometry, BoardState, Move, apply_move, other_mark
from .lines import check_win_length, evaluate_winner

HistoryEntry = Tuple[BoardState, Move]


class Game:
    def __init__(self, geometry: BoardGeometry, n_in_row: int):
        check_win_length(n_in_row)
        self.geometry = geometry
        self.n_in_row = n_in_row
        self._current_state = BoardState(geometry)
        self._history: List[HistoryEntry] = []
        self._to_move = MARKS[0]

    def current_state(self) -> BoardState:
        return self._current_state

    def history(self) -> List[HistoryEntry]:
        """(state before the move, move) pairs, oldest first. The list is a copy."""
        return list(self._history)

    def whose_turn(self) -> str:
        return self._to_move

    def make_move(self, move: Move) -> None:
        if move.mark != self._to_move:
            raise WrongTurn(f"Attempt to move for {move.mark} during {self._to_move}'s turn")
        old_state = self._current_state
        self._current_state = apply_move(old_state, move)
        self._history.append((old_state, move))
        self._to_move = other_mark(self._to_move)

    def result(self) -> Optional[str]:
        return evaluate_winner(self._current_state, self.n_in_row)
