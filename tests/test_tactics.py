from mnkgame.game_basics import Position, deserialize_board
from mnkgame.tactics import (
    blocking_moves,
    fork_moves,
    gives_opponent_immediate_win,
    immediate_winning_moves,
)


def test_immediate_wins_and_blocks():
    s = deserialize_board("XX./OO./...")
    g = s.geometry
    assert immediate_winning_moves(s, "X", 3) == [Position(g, 0, 2)]
    assert immediate_winning_moves(s, "O", 3) == [Position(g, 1, 2)]
    assert blocking_moves(s, "X", 3) == [Position(g, 1, 2)]


def test_no_wins_on_empty_board():
    s = deserialize_board(".../.../...")
    assert immediate_winning_moves(s, "X", 3) == []
    assert fork_moves(s, "X", 3) == []


def test_fork_detected():
    # X (0,0) (2,2), O (0,2) (1,1); X at (2,0) threatens (1,0) and (2,1)
    s = deserialize_board("X.O/.O./..X")
    assert fork_moves(s, "X", 3) == [Position(s.geometry, 2, 0)]


def test_gives_opponent_immediate_win():
    s = deserialize_board("XX./OO./...")
    g = s.geometry
    assert gives_opponent_immediate_win(s, "O", Position(g, 2, 2), 3) is True
    assert gives_opponent_immediate_win(s, "O", Position(g, 0, 2), 3) is False
    # winning outright is never a giveaway
    assert gives_opponent_immediate_win(s, "O", Position(g, 1, 2), 3) is False
    # occupied squares are not moves at all
    assert gives_opponent_immediate_win(s, "O", Position(g, 0, 0), 3) is False


def test_larger_board_wins():
    s = deserialize_board("XXX./OOO./..../....")
    g = s.geometry
    assert immediate_winning_moves(s, "X", 4) == [Position(g, 0, 3)]
    assert blocking_moves(s, "X", 4) == [Position(g, 1, 3)]
