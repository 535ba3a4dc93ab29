"""Default game settings.

Environment-first: MNK_ROWS, MNK_COLS, MNK_N_IN_ROW and MNK_MEMOIZE override
the built-in 3x3 / three-in-a-row defaults. Command-line flags override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    rows: int = 3
    cols: int = 3
    n_in_row: int = 3
    memoize: bool = True


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    defaults = Settings()
    memo = env.get("MNK_MEMOIZE")
    return Settings(
        rows=_env_int(env, "MNK_ROWS", defaults.rows),
        cols=_env_int(env, "MNK_COLS", defaults.cols),
        n_in_row=_env_int(env, "MNK_N_IN_ROW", defaults.n_in_row),
        memoize=defaults.memoize if memo is None else memo.strip().lower() in TRUTHY,
    )
