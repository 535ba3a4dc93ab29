"""
Exact game-theoretic search (plain minimax), scored from the AI's perspective.
Scores:
- +1 the AI's mark wins, 0 draw, -1 the opponent wins.
- Search is exhaustive (no pruning, no depth limit), so only small boards are practical.
- memoize=True keeps a transposition table for the duration of one call;
  it never changes the returned values.
"""
from typing import Dict, List, Optional, Tuple

from .game_basics import BoardState, Move, Position, apply_move, other_mark
from .lines import DRAW, check_win_length, evaluate_winner

Table = Dict[Tuple[BoardState, bool], int]


def minimax(
    state: BoardState,
    n_in_row: int,
    is_maximizing: bool,
    ai_mark: str,
    table: Optional[Table] = None,
) -> int:
    if table is not None:
        cached = table.get((state, is_maximizing))
        if cached is not None:
            return cached

    w = evaluate_winner(state, n_in_row)
    if w is not None:
        if w == DRAW:
            return 0
        return 1 if w == ai_mark else -1

    mark = ai_mark if is_maximizing else other_mark(ai_mark)
    best: Optional[int] = None
    for pos in state.empty_positions():
        child = apply_move(state, Move(pos, mark))
        score = minimax(child, n_in_row, not is_maximizing, ai_mark, table)
        if best is None or (score > best if is_maximizing else score < best):
            best = score

    if table is not None:
        table[(state, is_maximizing)] = best
    return best


def move_scores(
    state: BoardState, n_in_row: int, ai_mark: str, memoize: bool = False
) -> List[Tuple[Position, int]]:
    """Minimax score of every empty square for `ai_mark`, in row-major order."""
    check_win_length(n_in_row)
    other_mark(ai_mark)
    table: Optional[Table] = {} if memoize else None
    scores: List[Tuple[Position, int]] = []
    for pos in state.empty_positions():
        child = apply_move(state, Move(pos, ai_mark))
        # the opponent moves next
        scores.append((pos, minimax(child, n_in_row, False, ai_mark, table)))
    return scores


def pick_best(scored: List[Tuple[Position, int]]) -> Tuple[Optional[Position], Optional[int]]:
    best_pos: Optional[Position] = None
    best_score: Optional[int] = None
    for pos, score in scored:
        if best_score is None or score > best_score:
            best_pos, best_score = pos, score
    return best_pos, best_score


def find_best_move(
    state: BoardState, n_in_row: int, ai_mark: str, memoize: bool = False
) -> Optional[Position]:
    """Best square for `ai_mark`; ties go to the first square in row-major order.

    Returns None only when the board is full.
    """
    best_pos, _ = pick_best(move_scores(state, n_in_row, ai_mark, memoize=memoize))
    return best_pos
