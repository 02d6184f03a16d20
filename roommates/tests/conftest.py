import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "roommates_test.db"
    # Point the app to this temp DB
    os.environ["ROOMMATES_DB_PATH"] = str(path)
    from roommates.db import ensure_schema
    from roommates.logs import ensure_log_schema
    ensure_schema(str(path))
    ensure_log_schema()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from roommates.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture()
def conn(tmp_db_path):
    from roommates.db import get_conn
    with get_conn() as c:
        yield c


@pytest.fixture()
def add_roommate(tmp_db_path):
    def _add(first: str, last: str = "Smith") -> int:
        c = sqlite3.connect(tmp_db_path)
        try:
            cur = c.execute(
                "INSERT INTO Roommate (FirstName, LastName, RentPortion) VALUES (?, ?, 0)",
                (first, last),
            )
            c.commit()
            return int(cur.lastrowid)
        finally:
            c.close()
    return _add


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Clean tables before each test for isolation
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("ROOMMATES_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    # children first so foreign keys never block the wipe
    tables = ["RoommateChore", "Chore", "Roommate", "chore_log"]
    c = sqlite3.connect(tmp_db_path)
    try:
        for t in tables:
            c.execute(f"DELETE FROM {t}")
        c.execute("DELETE FROM sqlite_sequence")
        c.commit()
    finally:
        c.close()
    yield
