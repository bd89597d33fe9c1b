import os
import sys
import pytest
from pathlib import Path
from sqlalchemy import text

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))


@pytest.fixture(scope="session")
def tmp_db_url(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "todo_test.db"
    url = f"sqlite:///{path}"
    # Point the app to this temp DB for the whole session
    from db_env import pointed_at
    from todo_backend.db import ensure_schema, get_engine
    with pointed_at(url):
        ensure_schema(get_engine())
        yield url


@pytest.fixture()
def engine(tmp_db_url):
    from todo_backend.db import get_engine
    return get_engine()


@pytest.fixture()
def dao(engine):
    from todo_backend.dao import TaskDAO
    return TaskDAO(engine)


@pytest.fixture()
def client(tmp_db_url):
    # Import app after DB ready so startup hooks can use it
    from todo_backend.api import app
    from fastapi.testclient import TestClient
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_url):
    # Safety: ensure we only ever wipe the temp DB, never a real one
    assert os.environ.get("TODO_DB_URL") == tmp_db_url, "Refusing to clean non-temp DB"
    from todo_backend.db import get_engine
    with get_engine().begin() as conn:
        conn.execute(text("DELETE FROM tasks"))
    yield
