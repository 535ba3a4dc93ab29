"""
Lines and win detection on an arbitrary rows x cols board.
Teaching notes:
- A line is a maximal row, column or diagonal, listed as (row, col) pairs
  in traversal order. Lines depend only on the board size, so they are cached.
- A win is a streak of at least n equal marks along one line.
"""
from functools import lru_cache
from numbers import Integral
from typing import List, Optional, Tuple

from .errors import InvalidWinLength
from .game_basics import BoardState, is_full

DRAW = "draw"

Coord = Tuple[int, int]
Line = Tuple[Coord, ...]


@lru_cache(maxsize=None)
def lines_on_board(rows: int, cols: int) -> Tuple[Line, ...]:
    lines: List[Line] = []
    for r in range(rows):
        lines.append(tuple((r, c) for c in range(cols)))
    for c in range(cols):
        lines.append(tuple((r, c) for r in range(rows)))

    # Diagonals are swept as if the board were a square of side max(rows, cols)
    side = max(rows, cols)
    for offset in range(-side + 1, side):
        diag = tuple((r, offset + r) for r in range(rows) if 0 <= offset + r < cols)
        if diag:
            lines.append(diag)
    for offset in range(0, 2 * side - 1):
        diag = tuple((r, offset - r) for r in range(rows) if 0 <= offset - r < cols)
        if diag:
            lines.append(diag)
    return tuple(lines)


def check_win_length(n_in_row) -> None:
    if not isinstance(n_in_row, Integral) or isinstance(n_in_row, bool) or n_in_row <= 1:
        raise InvalidWinLength(f"n_in_row must be an integer greater than 1, got {n_in_row!r}")


def check_for_n_in_row(state: BoardState, n_in_row: int) -> List[List[Coord]]:
    """Return every maximal streak of at least `n_in_row` equal marks.

    Matches are listed in line order; each is the streak's coordinates.
    """
    check_win_length(n_in_row)
    g = state.geometry
    matches: List[List[Coord]] = []
    for line in lines_on_board(g.rows, g.cols):
        streak: List[Coord] = []
        current: Optional[str] = None
        for row, col in line:
            value = state.at(row, col)
            if streak and value == current:
                streak.append((row, col))
            else:
                current = value
                streak = [(row, col)]
            if current is not None and len(streak) >= n_in_row:
                if len(streak) > n_in_row:
                    # a longer run supersedes the match recorded for this streak
                    matches.pop()
                matches.append(list(streak))
    return matches


def evaluate_winner(state: BoardState, n_in_row: int) -> Optional[str]:
    """Return the winning mark, DRAW for a full board, or None if play goes on.

    When both marks have a line (impossible in real play) the mark of the
    first match in line order wins.
    """
    matches = check_for_n_in_row(state, n_in_row)
    if matches:
        row, col = matches[0][0]
        return state.at(row, col)
    if is_full(state):
        return DRAW
    return None
