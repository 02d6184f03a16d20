from sqlite3 import Connection


_CHORE_BOARD_SQL = """
SELECT c.Id AS chore_id, c.Name AS chore_name,
       r.Id AS roommate_id,
       CASE WHEN r.Id IS NULL THEN NULL ELSE r.FirstName || ' ' || r.LastName END AS roommate_name
FROM Chore c
LEFT JOIN RoommateChore rc ON rc.ChoreId = c.Id
LEFT JOIN Roommate r ON r.Id = rc.RoommateId
ORDER BY c.Id, r.Id
"""


def chore_board(conn: Connection):
    """
    One row per (chore, assignee); unassigned chores appear once with NULL roommate columns.
    Columns: chore_id, chore_name, roommate_id, roommate_name
    """
    return conn.execute(_CHORE_BOARD_SQL).fetchall()
