from __future__ import annotations

import os

import pandas as pd

from ..db import get_conn
from ..repository import reporting_repo

BOARD_COLUMNS = ["chore_id", "chore_name", "roommate_id", "roommate_name"]


def chore_board_items() -> list[dict]:
    """Board rows as plain dicts; unassigned chores carry None roommate fields."""
    with get_conn() as conn:
        return [dict(r) for r in reporting_repo.chore_board(conn)]


def chore_board() -> pd.DataFrame:
    """Chores with their assignees; unassigned chores have empty roommate columns."""
    return pd.DataFrame(chore_board_items(), columns=BOARD_COLUMNS)


def export_chore_board(out_dir: str) -> tuple[str, pd.DataFrame]:
    df = chore_board()
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, "chore_board.csv")
    df.to_csv(path, index=False, encoding="utf-8-sig")
    return path, df
