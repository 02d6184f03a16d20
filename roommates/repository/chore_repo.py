from __future__ import annotations

import sqlite3
from sqlite3 import Connection

from ..domain.chore import Chore, ChoreConflict


def _row_to_chore(r) -> Chore:
    return Chore(id=int(r["Id"]), name=r["Name"])


def list_all(conn: Connection) -> list[Chore]:
    rows = conn.execute("SELECT Id, Name FROM Chore").fetchall()
    return [_row_to_chore(r) for r in rows]


def get_by_id(conn: Connection, chore_id: int) -> Chore | None:
    row = conn.execute("SELECT Name FROM Chore WHERE Id = ?", (chore_id,)).fetchone()
    if row is None:
        return None
    return Chore(id=chore_id, name=row["Name"])


def insert(conn: Connection, name: str) -> int:
    """Insert a chore and return the generated Id in the same round trip."""
    rows = conn.execute(
        "INSERT INTO Chore (Name) VALUES (?) RETURNING Id",
        (name,),
    ).fetchall()
    return int(rows[0]["Id"])


def list_unassigned(conn: Connection) -> list[Chore]:
    sql = (
        "SELECT Chore.Id, Chore.Name "
        "FROM Chore LEFT JOIN RoommateChore ON RoommateChore.ChoreId = Chore.Id "
        "WHERE RoommateChore.RoommateId IS NULL"
    )
    return [_row_to_chore(r) for r in conn.execute(sql).fetchall()]


def assign(conn: Connection, roommate_id: int, chore_id: int) -> int:
    rows = conn.execute(
        "INSERT INTO RoommateChore (RoommateId, ChoreId) VALUES (?, ?) RETURNING Id",
        (roommate_id, chore_id),
    ).fetchall()
    return int(rows[0]["Id"])


def update(conn: Connection, chore: Chore) -> int:
    cur = conn.execute("UPDATE Chore SET Name = ? WHERE Id = ?", (chore.name, chore.id))
    return cur.rowcount


def delete(conn: Connection, chore_id: int) -> ChoreConflict | None:
    # foreign_keys is ON, so a chore still referenced by RoommateChore is rejected here
    try:
        conn.execute("DELETE FROM Chore WHERE Id = ?", (chore_id,))
    except sqlite3.IntegrityError as e:
        return ChoreConflict(chore_id=chore_id, message=f"chore_assigned: {e}")
    return None
