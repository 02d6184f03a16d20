from __future__ import annotations

import logging

from ..db import get_conn
from ..logs import ChoreAudit
from ..domain.chore import Chore, ChoreConflict
from ..repository import chore_repo

logger = logging.getLogger(__name__)


def list_chores() -> list[Chore]:
    with get_conn() as conn:
        return chore_repo.list_all(conn)


def get_chore(chore_id: int) -> Chore | None:
    """Return the chore with this id, or None when no row matches."""
    with get_conn() as conn:
        return chore_repo.get_by_id(conn, chore_id)


def list_unassigned_chores() -> list[Chore]:
    with get_conn() as conn:
        return chore_repo.list_unassigned(conn)


def create_chore(name: str) -> Chore:
    """Insert a chore and return a new value carrying the generated id.

    Store errors (e.g. NOT NULL on name) propagate to the caller.
    """
    log = ChoreAudit("CREATE_CHORE", chore_name=name)
    try:
        with get_conn() as conn:
            new_id = chore_repo.insert(conn, name)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    chore = Chore(id=new_id, name=name)
    log.chore_id = new_id
    log.write("OK")
    logger.info(f"chore created: id={new_id} name={name!r}")
    return chore


def assign_chore(roommate_id: int, chore_id: int) -> None:
    """Link a roommate to a chore. Ids are not checked here; the schema's
    foreign keys reject unknown ones with sqlite3.IntegrityError."""
    log = ChoreAudit("ASSIGN_CHORE", chore_id=chore_id, roommate_id=roommate_id)
    try:
        with get_conn() as conn:
            chore_repo.assign(conn, roommate_id, chore_id)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.write("OK")
    logger.info(f"chore {chore_id} assigned to roommate {roommate_id}")


def update_chore(chore: Chore) -> None:
    """Rename a chore. An id with no matching row leaves the store unchanged."""
    log = ChoreAudit("UPDATE_CHORE", chore_id=chore.id, chore_name=chore.name)
    try:
        with get_conn() as conn:
            affected = chore_repo.update(conn, chore)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    if affected == 0:
        logger.debug(f"update_chore: no chore with id={chore.id}")
        log.write("NOOP")
        return
    log.write("OK")


def delete_chore(chore_id: int) -> ChoreConflict | None:
    """Delete a chore.

    Returns a ChoreConflict (and leaves the chore in place) when it is still
    assigned to a roommate; presenting that to the user is up to the caller.
    """
    log = ChoreAudit("DELETE_CHORE", chore_id=chore_id)
    try:
        with get_conn() as conn:
            conflict = chore_repo.delete(conn, chore_id)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    if conflict is not None:
        logger.warning(f"delete_chore refused for id={chore_id}: {conflict.message}")
        log.write("CONFLICT", conflict.message)
        return conflict
    log.write("OK")
    return None
