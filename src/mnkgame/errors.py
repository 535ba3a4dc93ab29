"""
Exceptions raised by the game rules.

All of them are plain validation failures at the call boundary, so they
derive from ValueError and carry no extra state.
"""

__all__ = [
    "MnkError",
    "InvalidGeometry",
    "PositionOutOfBounds",
    "InvalidWinLength",
    "InvalidMark",
    "InvalidBoardString",
    "SquareOccupied",
    "WrongTurn",
]


class MnkError(ValueError):
    """Base class for every rules violation."""


class InvalidGeometry(MnkError):
    pass


class PositionOutOfBounds(MnkError):
    pass


class InvalidWinLength(MnkError):
    pass


class InvalidMark(MnkError):
    pass


class InvalidBoardString(MnkError):
    pass


class SquareOccupied(MnkError):
    pass


class WrongTurn(MnkError):
    pass
