"""
FastAPI app entry point aggregating the routers under todo_backend/routes.
Keep as `uvicorn todo_backend.api:app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .db import ensure_schema, get_engine
from .version import APP_NAME, __version__

logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME, version=__version__)


@app.on_event("startup")
def on_startup():
    try:
        ensure_schema(get_engine())
    except Exception as e:
        # the database may be unreachable at boot; requests will report it
        logger.warning("ensure_schema failed at startup: %s", e)


from .routes import base as base_routes
from .routes import tasks as tasks_routes

app.include_router(base_routes.router)
app.include_router(tasks_routes.router)
