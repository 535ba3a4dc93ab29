import numpy as np

from mnkgame.game_basics import deserialize_board
from mnkgame.features import cell_line_potentials, to_array, window_counts


def test_to_array_encoding():
    arr = to_array(deserialize_board("XO./.../..."))
    assert arr.dtype == np.int8
    assert arr.tolist() == [[1, 2, 0], [0, 0, 0], [0, 0, 0]]


def test_window_counts_empty_and_center():
    empty = deserialize_board(".../.../...")
    assert window_counts(empty, "X", 3).tolist() == [8, 0, 0, 0]
    center = deserialize_board(".../.X./...")
    assert window_counts(center, "X", 3).tolist() == [4, 4, 0, 0]
    assert window_counts(center, "O", 3).tolist() == [4, 0, 0, 0]


def test_window_counts_on_larger_board():
    s = deserialize_board("..../..../..../....")
    assert window_counts(s, "O", 3).tolist() == [24, 0, 0, 0]


def test_cell_line_potentials():
    empty = cell_line_potentials(deserialize_board(".../.../..."), 3)
    assert empty["X"].tolist() == [[3, 2, 3], [2, 4, 2], [3, 2, 3]]
    assert np.array_equal(empty["X"], empty["O"])

    center = cell_line_potentials(deserialize_board(".../.X./..."), 3)
    assert center["X"].tolist() == [[3, 2, 3], [2, 0, 2], [3, 2, 3]]
    assert center["O"].tolist() == [[2, 1, 2], [1, 0, 1], [2, 1, 2]]
