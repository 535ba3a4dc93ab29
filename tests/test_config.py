import pytest

from mnkgame.config import Settings, load_settings


def test_defaults_without_environment():
    assert load_settings({}) == Settings(rows=3, cols=3, n_in_row=3, memoize=True)


def test_environment_overrides():
    s = load_settings({"MNK_ROWS": "4", "MNK_COLS": " 5 ", "MNK_N_IN_ROW": "4", "MNK_MEMOIZE": "Yes"})
    assert s == Settings(rows=4, cols=5, n_in_row=4, memoize=True)


def test_blank_values_fall_back_to_defaults():
    assert load_settings({"MNK_ROWS": ""}) == Settings()
    assert load_settings({"MNK_MEMOIZE": "0"}) == Settings(memoize=False)


def test_malformed_integer_is_rejected():
    with pytest.raises(ValueError, match="MNK_COLS"):
        load_settings({"MNK_COLS": "three"})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MNK_N_IN_ROW", "2")
    monkeypatch.delenv("MNK_ROWS", raising=False)
    assert load_settings().n_in_row == 2
