"""
Positional features for an m,n,k board.

A "window" is any n consecutive cells of an enumerated line; a window is open
for a mark when it holds no opponent mark.
"""
from typing import Dict, Iterator

import numpy as np

from .game_basics import MARKS, O, X, BoardState, other_mark
from .lines import Line, check_win_length, lines_on_board

CELL_CODES = {None: 0, X: 1, O: 2}


def to_array(state: BoardState) -> np.ndarray:
    g = state.geometry
    arr = np.zeros((g.rows, g.cols), dtype=np.int8)
    for r in range(g.rows):
        for c in range(g.cols):
            arr[r, c] = CELL_CODES[state.at(r, c)]
    return arr


def _windows(rows: int, cols: int, n_in_row: int) -> Iterator[Line]:
    for line in lines_on_board(rows, cols):
        for start in range(len(line) - n_in_row + 1):
            yield line[start:start + n_in_row]


def window_counts(state: BoardState, mark: str, n_in_row: int) -> np.ndarray:
    """counts[k] = number of open windows for `mark` holding exactly k of its marks."""
    check_win_length(n_in_row)
    board = to_array(state)
    own, opp = CELL_CODES[mark], CELL_CODES[other_mark(mark)]
    counts = np.zeros(n_in_row + 1, dtype=np.int64)
    g = state.geometry
    for window in _windows(g.rows, g.cols, n_in_row):
        cells = board[tuple(zip(*window))]
        if np.any(cells == opp):
            continue
        counts[int(np.count_nonzero(cells == own))] += 1
    return counts


def cell_line_potentials(state: BoardState, n_in_row: int) -> Dict[str, np.ndarray]:
    """Per empty cell, how many open windows pass through it, for each mark.

    Occupied cells stay 0.
    """
    check_win_length(n_in_row)
    board = to_array(state)
    g = state.geometry
    potentials = {m: np.zeros((g.rows, g.cols), dtype=np.int64) for m in MARKS}
    for window in _windows(g.rows, g.cols, n_in_row):
        idx = tuple(zip(*window))
        cells = board[idx]
        for m in MARKS:
            if np.any(cells == CELL_CODES[other_mark(m)]):
                continue
            for r, c in window:
                if board[r, c] == 0:
                    potentials[m][r, c] += 1
    return potentials
