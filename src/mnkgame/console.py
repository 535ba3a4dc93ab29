"""
Interactive text console: a human plays against the minimax AI.

Input and output go through the `ask` and `out` callables so the loop can be
driven by scripted answers in tests.
"""
import logging
from typing import Callable, Optional

from .game import Game
from .game_basics import EMPTY_SYMBOL, MARKS, BoardState, Move, Position, other_mark
from .lines import DRAW
from .solver import find_best_move

CELL_DELIMITER = "|"


def render_board(state: BoardState) -> str:
    g = state.geometry
    out = []
    for r in range(g.rows):
        line = CELL_DELIMITER.join(state.at(r, c) or EMPTY_SYMBOL for c in range(g.cols))
        out.append(line)
        if r < g.rows - 1:
            out.append("-" * len(line))
    return "\n".join(out)


def parse_position(text: str, game: Game) -> Position:
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected row,col but got {text.strip()!r}")
    row, col = (int(p.strip()) for p in parts)
    return Position(game.geometry, row, col)


def choose_mark(ask: Callable[[str], str]) -> str:
    while True:
        answer = ask("\nWould you like to be 'X' or 'O': ").strip().upper()
        if answer in MARKS:
            return answer


def play(
    game: Game,
    ask: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
    human_mark: Optional[str] = None,
    memoize: bool = True,
) -> str:
    """Run the game to completion and return its result ("X", "O" or "draw")."""
    out("Welcome to Tic-Tac-Toe!")
    if human_mark is None:
        human_mark = choose_mark(ask)
    ai_mark = other_mark(human_mark)
    if human_mark == game.whose_turn():
        out(render_board(game.current_state()) + "\n")

    while True:
        result = game.result()
        if result is not None:
            if result == human_mark:
                out("You win!")
            elif result == DRAW:
                out("Draw!")
            else:
                out("AI wins!")
            return result

        if game.whose_turn() == human_mark:
            answer = ask("Enter your move as row,col (e.g. 0,2): ")
            try:
                game.make_move(Move(parse_position(answer, game), human_mark))
            except ValueError as e:
                out(f"Invalid move: {e}")
                continue
            out(render_board(game.current_state()) + "\n")
        else:
            pos = find_best_move(game.current_state(), game.n_in_row, ai_mark, memoize=memoize)
            logging.debug("ai mark=%s plays %s", ai_mark, pos)
            if pos is not None:
                game.make_move(Move(pos, ai_mark))
                out("AI plays:")
                out(render_board(game.current_state()) + "\n")
