"""Chore audit trail: one `chore_log` row per mutating chore operation."""
from __future__ import annotations

import time
import uuid
import datetime as dt

from .db import get_conn

DDL = """
CREATE TABLE IF NOT EXISTS chore_log (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  ts TEXT NOT NULL,
  action TEXT NOT NULL,
  chore_id INTEGER,
  chore_name TEXT,
  roommate_id INTEGER,
  result TEXT NOT NULL,
  err_msg TEXT,
  request_id TEXT,
  latency_ms INTEGER
);
CREATE INDEX IF NOT EXISTS idx_chore_log_chore ON chore_log(chore_id);
"""


def ensure_log_schema():
    with get_conn() as conn:
        conn.executescript(DDL)
        conn.commit()


class ChoreAudit:
    """Collects what a chore operation touched and records its outcome.

    No foreign keys on chore_log: history must outlive deleted chores.
    """

    def __init__(self, action: str, chore_id: int | None = None,
                 chore_name: str | None = None, roommate_id: int | None = None):
        self.action = action
        self.chore_id = chore_id
        self.chore_name = chore_name
        self.roommate_id = roommate_id
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()

    def write(self, result: str = "OK", err: str | None = None):
        with get_conn() as conn:
            conn.execute(
                "INSERT INTO chore_log"
                "(ts, action, chore_id, chore_name, roommate_id, result, err_msg, request_id, latency_ms) "
                "VALUES(?,?,?,?,?,?,?,?,?)",
                (
                    dt.datetime.now(dt.timezone.utc).isoformat(),
                    self.action,
                    self.chore_id,
                    self.chore_name,
                    self.roommate_id,
                    result,
                    err,
                    self.request_id,
                    int((time.perf_counter() - self.start) * 1000),
                ),
            )
            conn.commit()


def chore_history(chore_id: int | None = None, action: str | None = None,
                  page: int = 1, size: int = 20) -> tuple[int, list[dict]]:
    """Audit rows newest first, optionally for one chore and/or one action."""
    where = []
    params: dict = {}
    if chore_id is not None:
        where.append("chore_id = :chore_id")
        params["chore_id"] = chore_id
    if action:
        where.append("action = :action")
        params["action"] = action
    wh = " WHERE " + " AND ".join(where) if where else ""
    with get_conn() as conn:
        total = conn.execute(f"SELECT COUNT(1) AS cnt FROM chore_log{wh}", params).fetchone()["cnt"]
        rows = conn.execute(
            f"SELECT id, ts, action, chore_id, chore_name, roommate_id, result, err_msg "
            f"FROM chore_log{wh} ORDER BY id DESC LIMIT :limit OFFSET :offset",
            {**params, "limit": size, "offset": (page - 1) * size},
        ).fetchall()
    return total, [dict(r) for r in rows]
