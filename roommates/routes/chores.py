from __future__ import annotations

import sqlite3

from fastapi import APIRouter, HTTPException, Body
from pydantic import BaseModel

from ..domain.chore import Chore
from ..logs import chore_history
from ..services.report_svc import chore_board_items
from ..services.chore_svc import (
    list_chores,
    get_chore,
    list_unassigned_chores,
    create_chore,
    assign_chore,
    update_chore,
    delete_chore,
)

router = APIRouter()


class ChoreIn(BaseModel):
    name: str


@router.get("/api/chores")
def api_chores():
    return {"items": [c.to_dict() for c in list_chores()]}


@router.get("/api/chores/unassigned")
def api_chores_unassigned():
    return {"items": [c.to_dict() for c in list_unassigned_chores()]}


@router.get("/api/chores/board")
def api_chores_board():
    return {"items": chore_board_items()}


@router.get("/api/chores/logs")
def api_chore_logs(action: str | None = None, page: int = 1, size: int = 20):
    total, items = chore_history(action=action, page=page, size=size)
    return {"total": total, "items": items}


@router.get("/api/chores/{chore_id}")
def api_chore_get(chore_id: int):
    chore = get_chore(chore_id)
    if chore is None:
        raise HTTPException(status_code=404, detail="chore_not_found")
    return chore.to_dict()


@router.post("/api/chores", status_code=201)
def api_chore_create(body: ChoreIn):
    try:
        return create_chore(body.name).to_dict()
    except sqlite3.IntegrityError as ie:
        raise HTTPException(status_code=400, detail=str(ie))


@router.put("/api/chores/{chore_id}")
def api_chore_update(chore_id: int, body: ChoreIn):
    try:
        update_chore(Chore(id=chore_id, name=body.name))
        return {"message": "ok"}
    except sqlite3.IntegrityError as ie:
        raise HTTPException(status_code=400, detail=str(ie))


@router.delete("/api/chores/{chore_id}")
def api_chore_delete(chore_id: int):
    conflict = delete_chore(chore_id)
    if conflict is not None:
        raise HTTPException(status_code=409, detail=conflict.message)
    return {"message": "ok"}


@router.post("/api/chores/{chore_id}/assign")
def api_chore_assign(chore_id: int, roommate_id: int = Body(..., embed=True)):
    try:
        assign_chore(roommate_id, chore_id)
        return {"message": "ok"}
    except sqlite3.IntegrityError as ie:
        raise HTTPException(status_code=400, detail=str(ie))


@router.get("/api/chores/{chore_id}/logs")
def api_chore_history(chore_id: int, page: int = 1, size: int = 20):
    # history stays readable after the chore itself is deleted
    total, items = chore_history(chore_id=chore_id, page=page, size=size)
    return {"total": total, "items": items}
