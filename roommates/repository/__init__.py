"""Chore SQL. Each function takes an open sqlite3 connection and leaves
opening, committing and closing it to roommates.services."""
