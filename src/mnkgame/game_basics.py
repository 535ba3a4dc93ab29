"""
Game basics: board geometry, positions, immutable board states, moves.
Teaching notes:
- A board is rows x cols; a state maps occupied positions to a mark ("X" or "O").
- Unmapped positions are empty (None). X always starts.
- States are never mutated: apply_move returns a new state, so any
  earlier state stays valid (the game history relies on this).
"""
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .errors import (
    InvalidBoardString,
    InvalidGeometry,
    InvalidMark,
    PositionOutOfBounds,
    SquareOccupied,
)

X = "X"
O = "O"
MARKS = (X, O)
EMPTY_SYMBOL = "."
ROW_SEPARATOR = "/"

PositionKey = Tuple[int, int, int, int]


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def other_mark(mark: str) -> str:
    if mark not in MARKS:
        raise InvalidMark(f"Unknown mark: {mark!r}")
    return O if mark == X else X


@dataclass(frozen=True)
class BoardGeometry:
    rows: int
    cols: int

    def __post_init__(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if not _is_int(value) or value <= 0:
                raise InvalidGeometry(f"{name} must be an integer greater than 0, got {value!r}")

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def positions(self) -> Iterator["Position"]:
        """All positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Position(self, row, col)


@dataclass(frozen=True)
class Position:
    geometry: BoardGeometry
    row: int
    col: int

    def __post_init__(self) -> None:
        if not _is_int(self.row) or not 0 <= self.row < self.geometry.rows:
            raise PositionOutOfBounds(
                f"row must be an integer in [0, {self.geometry.rows}), got {self.row!r}"
            )
        if not _is_int(self.col) or not 0 <= self.col < self.geometry.cols:
            raise PositionOutOfBounds(
                f"col must be an integer in [0, {self.geometry.cols}), got {self.col!r}"
            )

    def key(self) -> PositionKey:
        return (self.row, self.col, self.geometry.rows, self.geometry.cols)

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


@dataclass(frozen=True)
class Move:
    position: Position
    mark: str

    def __post_init__(self) -> None:
        if self.mark not in MARKS:
            raise InvalidMark(f"Mark must be one of {MARKS}, got {self.mark!r}")


class BoardState:
    """Immutable snapshot of the marks on a board.

    Two states with the same geometry and the same occupied squares compare
    (and hash) equal, so states can be used as dictionary keys.
    """

    __slots__ = ("geometry", "_squares", "_hash")

    def __init__(self, geometry: BoardGeometry, squares: Optional[Mapping[PositionKey, str]] = None):
        squares = dict(squares) if squares else {}
        for key, mark in squares.items():
            row, col, rows, cols = key
            if (rows, cols) != (geometry.rows, geometry.cols):
                raise PositionOutOfBounds(f"Key {key} does not belong to a {rows}x{cols} board")
            Position(geometry, row, col)
            if mark not in MARKS:
                raise InvalidMark(f"Mark must be one of {MARKS}, got {mark!r}")
        object.__setattr__(self, "geometry", geometry)
        object.__setattr__(self, "_squares", squares)
        object.__setattr__(self, "_hash", None)

    def __setattr__(self, name, value):
        raise AttributeError(f"BoardState is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"BoardState is immutable; cannot delete {name!r}")

    def get_square(self, position: Position) -> Optional[str]:
        return self._squares.get(position.key())

    def at(self, row: int, col: int) -> Optional[str]:
        """Mark at (row, col); coordinates are trusted to be on the board."""
        return self._squares.get((row, col, self.geometry.rows, self.geometry.cols))

    def num_squares_taken(self) -> int:
        return len(self._squares)

    def num_squares_left(self) -> int:
        return self.geometry.size - len(self._squares)

    def empty_positions(self) -> List[Position]:
        return [p for p in self.geometry.positions() if p.key() not in self._squares]

    def squares(self) -> Dict[PositionKey, str]:
        return dict(self._squares)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.geometry == other.geometry and self._squares == other._squares

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash((self.geometry, frozenset(self._squares.items()))))
        return self._hash

    def __repr__(self) -> str:
        return f"BoardState({serialize_board(self)!r})"


def apply_move(state: BoardState, move: Move) -> BoardState:
    """Return a new state with `move` played; `state` is left untouched."""
    # re-key against the state's own geometry (raises if the square is off this board)
    position = move.position
    if position.geometry != state.geometry:
        position = Position(state.geometry, position.row, position.col)
    if state.get_square(position) is not None:
        raise SquareOccupied(f"Square {position} is already taken")
    squares = state.squares()
    squares[position.key()] = move.mark
    return BoardState(state.geometry, squares)


def is_full(state: BoardState) -> bool:
    return state.num_squares_left() == 0


def serialize_board(state: BoardState) -> str:
    g = state.geometry
    return ROW_SEPARATOR.join(
        ''.join(state.at(r, c) or EMPTY_SYMBOL for c in range(g.cols)) for r in range(g.rows)
    )


def deserialize_board(text: str) -> BoardState:
    rows = text.strip().split(ROW_SEPARATOR)
    width = len(rows[0])
    if width == 0 or any(len(r) != width for r in rows):
        raise InvalidBoardString(f"Board rows must be non-empty and equally long: {text!r}")
    geometry = BoardGeometry(len(rows), width)
    squares: Dict[PositionKey, str] = {}
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch == EMPTY_SYMBOL:
                continue
            if ch not in MARKS:
                raise InvalidBoardString(f"Unexpected cell {ch!r} in board {text!r}")
            squares[(r, c, geometry.rows, geometry.cols)] = ch
    return BoardState(geometry, squares)
