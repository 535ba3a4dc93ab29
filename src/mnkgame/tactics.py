"""
Tactics and simple motifs: immediate wins/blocks, forks, safety checks.
Teaching notes:
- Local motifs provide strong signals before (or instead of) deep search.
- Everything here works on any board size and any n-in-a-row.
"""
from typing import List

from .game_basics import BoardState, Move, Position, apply_move, other_mark
from .lines import evaluate_winner


def immediate_winning_moves(state: BoardState, mark: str, n_in_row: int) -> List[Position]:
    wins: List[Position] = []
    for pos in state.empty_positions():
        child = apply_move(state, Move(pos, mark))
        if evaluate_winner(child, n_in_row) == mark:
            wins.append(pos)
    return wins


def blocking_moves(state: BoardState, mark: str, n_in_row: int) -> List[Position]:
    """Squares where the opponent would win immediately."""
    return immediate_winning_moves(state, other_mark(mark), n_in_row)


def fork_moves(state: BoardState, mark: str, n_in_row: int) -> List[Position]:
    forks: List[Position] = []
    for pos in state.empty_positions():
        child = apply_move(state, Move(pos, mark))
        if evaluate_winner(child, n_in_row) is not None:
            continue
        if len(immediate_winning_moves(child, mark, n_in_row)) >= 2:
            forks.append(pos)
    return forks


def gives_opponent_immediate_win(
    state: BoardState, mark: str, position: Position, n_in_row: int
) -> bool:
    if state.get_square(position) is not None:
        return False
    child = apply_move(state, Move(position, mark))
    if evaluate_winner(child, n_in_row) is not None:
        return False
    return len(immediate_winning_moves(child, other_mark(mark), n_in_row)) > 0
