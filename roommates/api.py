"""
FastAPI app entry point aggregating per-domain routers under roommates/routes.
Keep as `uvicorn roommates.api:app`.
"""
from __future__ import annotations


from fastapi import FastAPI

from .db import ensure_schema
from .logs import ensure_log_schema


app = FastAPI(title="roommates-api", version="0.1.0")


@app.on_event("startup")
def on_startup():
    ensure_schema()
    ensure_log_schema()


from .routes import base as base_routes
from .routes import chores as chores_routes

app.include_router(base_routes.router)
app.include_router(chores_routes.router)
