from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import Optional

from .config import Settings, load_settings
from .console import play
from .game import Game
from .game_basics import MARKS, BoardGeometry, BoardState, deserialize_board
from .lines import check_win_length, evaluate_winner, lines_on_board
from .features import window_counts
from .solver import find_best_move, move_scores, pick_best
from .tactics import blocking_moves, fork_moves, immediate_winning_moves

BOARD_HELP = 'Board string, rows separated by "/", cells X, O or "." (e.g. XX./OO./...)'


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mnk", description="Generalized tic-tac-toe (m,n,k-game) CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    def add_win_length(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--n-in-row",
            type=int,
            default=settings.n_in_row,
            help=f"Marks in a row needed to win (default: {settings.n_in_row})",
        )

    def add_size(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--rows", type=int, default=settings.rows, help=f"Board rows (default: {settings.rows})")
        sp.add_argument("--cols", type=int, default=settings.cols, help=f"Board columns (default: {settings.cols})")

    p_play = sub.add_parser("play", help="Play against the minimax AI in the terminal")
    add_size(p_play)
    add_win_length(p_play)
    p_play.add_argument("--mark", choices=list(MARKS), help="Your mark (asked interactively if omitted)")
    p_play.add_argument(
        "--memoize",
        action=argparse.BooleanOptionalAction,
        default=settings.memoize,
        help=f"Cache positions during search (default: {'on' if settings.memoize else 'off'})",
    )

    p_win = sub.add_parser("winner", help="Evaluate a board: X, O, draw or none")
    p_win.add_argument("--board", help=BOARD_HELP + " (omit with --stdin)")
    p_win.add_argument("--stdin", action="store_true", help="Read many boards from stdin and stream CSV output")
    add_win_length(p_win)

    p_best = sub.add_parser("best-move", help="Best square for a mark under perfect play")
    p_best.add_argument("--board", help=BOARD_HELP + " (omit with --stdin)")
    p_best.add_argument("--stdin", action="store_true", help="Read many boards from stdin and stream CSV output")
    p_best.add_argument("--mark", required=True, choices=list(MARKS), help="Mark to move")
    p_best.add_argument(
        "--memoize",
        action=argparse.BooleanOptionalAction,
        default=settings.memoize,
        help=f"Cache positions during search (default: {'on' if settings.memoize else 'off'})",
    )
    add_win_length(p_best)

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for a mark")
    p_tac.add_argument("--board", required=True, help=BOARD_HELP)
    p_tac.add_argument("--mark", required=True, choices=list(MARKS), help="Mark to move")
    add_win_length(p_tac)

    p_lines = sub.add_parser("lines", help="Count the lines checked for wins on a board size")
    add_size(p_lines)

    return p


def _read_board(raw: Optional[str]) -> Optional[BoardState]:
    try:
        return deserialize_board(raw or "")
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None


def _format_result(result: Optional[str]) -> str:
    return "none" if result is None else result


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        logging.basicConfig(format="[%(levelname)s] %(message)s")
        logging.error("Invalid environment configuration: %s", e)
        return 2
    parser = build_parser(settings)
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("mnkgame"))
        except Exception:
            print("unknown")
        return 0

    try:
        return _dispatch(ns, parser)
    except ValueError as e:
        logging.error("%s", e)
        return 2


def _dispatch(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if ns.cmd == "play":
        game = Game(BoardGeometry(ns.rows, ns.cols), ns.n_in_row)
        try:
            result = play(game, human_mark=ns.mark, memoize=ns.memoize)
        except (EOFError, KeyboardInterrupt):
            logging.info("Game aborted")
            return 1
        logging.debug("result=%s moves=%d", result, len(game.history()))
        return 0

    if ns.cmd == "winner":
        if ns.stdin:
            check_win_length(ns.n_in_row)
            w = csv.writer(sys.stdout)
            w.writerow(["board", "result"])
            for line in sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    state = deserialize_board(raw)
                except ValueError:
                    continue
                w.writerow([raw, _format_result(evaluate_winner(state, ns.n_in_row))])
            return 0
        state = _read_board(ns.board)
        if state is None:
            return 2
        logging.info("result=%s", _format_result(evaluate_winner(state, ns.n_in_row)))
        return 0

    if ns.cmd == "best-move":
        if ns.stdin:
            check_win_length(ns.n_in_row)
            w = csv.writer(sys.stdout)
            w.writerow(["board", "best_row", "best_col"])
            for line in sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    state = deserialize_board(raw)
                except ValueError:
                    continue
                pos = find_best_move(state, ns.n_in_row, ns.mark, memoize=ns.memoize)
                w.writerow([raw, "" if pos is None else pos.row, "" if pos is None else pos.col])
            return 0
        state = _read_board(ns.board)
        if state is None:
            return 2
        scores = move_scores(state, ns.n_in_row, ns.mark, memoize=ns.memoize)
        best, _ = pick_best(scores)
        logging.info(
            "mark=%s best=%s scores=%s",
            ns.mark,
            "none" if best is None else str(best),
            {str(p): s for p, s in scores},
        )
        return 0

    if ns.cmd == "tactics":
        state = _read_board(ns.board)
        if state is None:
            return 2
        logging.info(
            "mark=%s wins=%s blocks=%s forks=%s",
            ns.mark,
            [str(p) for p in immediate_winning_moves(state, ns.mark, ns.n_in_row)],
            [str(p) for p in blocking_moves(state, ns.mark, ns.n_in_row)],
            [str(p) for p in fork_moves(state, ns.mark, ns.n_in_row)],
        )
        logging.info("open_windows_by_marks=%s", window_counts(state, ns.mark, ns.n_in_row).tolist())
        return 0

    if ns.cmd == "lines":
        g = BoardGeometry(ns.rows, ns.cols)
        lines = lines_on_board(g.rows, g.cols)
        logging.info("rows=%d cols=%d lines=%d longest=%d", g.rows, g.cols, len(lines), max(map(len, lines)))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
