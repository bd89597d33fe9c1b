# tests/db_env.py
import os
from contextlib import contextmanager


@contextmanager
def pointed_at(url: str):
    """Point TODO_DB_URL (and the cached engine) at `url`, restoring both on exit."""
    from todo_backend.db import reset_engine

    prev = os.environ.get("TODO_DB_URL")
    os.environ["TODO_DB_URL"] = url
    reset_engine()
    try:
        yield url
    finally:
        reset_engine()
        if prev is None:
            os.environ.pop("TODO_DB_URL", None)
        else:
            os.environ["TODO_DB_URL"] = prev
