from __future__ import annotations

# todo_backend/db.py
import os
from typing import Optional
from urllib.parse import quote

import yaml
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError

from .errors import DatabaseConnectionError, StatementError

# Resolution order for the connection settings:
# 1) environment variables TODO_DB_URL / TODO_DB_USER / TODO_DB_PASSWORD / TODO_DB_LOCATION
# 2) config.yaml test_db_url (when running under tests)
# 3) config.yaml db_url, or db_user/db_password/db_location
# 4) fallback: SQLite file todo.db in the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "todo.db")

MYSQL_SCHEME = "mysql+pymysql"

_CFG_KEYS = ("db_url", "test_db_url", "db_user", "db_password", "db_location")


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    out = {}
    for k in _CFG_KEYS:
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def load_db_config() -> dict:
    """Merge config.yaml with TODO_DB_* environment overrides."""
    cfg = _read_config_yaml()
    for k in ("db_url", "db_user", "db_password", "db_location"):
        env_v = os.environ.get("TODO_" + k.upper())
        if env_v:
            cfg[k] = env_v
    return cfg


def build_descriptor(user: str, password: str, database: str) -> str:
    """`<user>:<password>@<location>` with the driver scheme in front."""
    return f"{MYSQL_SCHEME}://{quote(user, safe='')}:{quote(password, safe='')}@{database}"


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Build a lazily-connected engine. Nothing touches the network here."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    try:
        return create_engine(url, echo=echo, connect_args=connect_args, pool_pre_ping=not url.startswith("sqlite"))
    except (ArgumentError, NoSuchModuleError, ImportError, ValueError) as exc:
        raise DatabaseConnectionError(f"cannot open database handle: {exc}") from exc


def db_connection(user: str, password: str, database: str) -> Engine:
    return create_db_engine(build_descriptor(user, password, database))


def get_db_url(cfg: Optional[dict] = None) -> str:
    cfg = load_db_config() if cfg is None else cfg
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    env_url = os.environ.get("TODO_DB_URL")
    if env_url:
        return env_url
    if is_test and cfg.get("test_db_url"):
        return cfg["test_db_url"]
    if cfg.get("db_url"):
        return cfg["db_url"]
    if cfg.get("db_location"):
        return build_descriptor(cfg.get("db_user", ""), cfg.get("db_password", ""), cfg["db_location"])
    return f"sqlite:///{_ROOT_DB}"


_engine: Engine | None = None


def get_engine() -> Engine:
    """Process-wide engine for the HTTP and CLI entry points."""
    global _engine
    if _engine is None:
        _engine = create_db_engine(get_db_url())
    return _engine


def reset_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


_DDL = {
    "mysql": """
        CREATE TABLE IF NOT EXISTS tasks (
            id INTEGER PRIMARY KEY AUTO_INCREMENT,
            goal TEXT NOT NULL,
            completed BOOLEAN NOT NULL DEFAULT FALSE
        )
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS tasks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            goal TEXT NOT NULL,
            completed BOOLEAN NOT NULL DEFAULT 0
        )
    """,
}


def ensure_schema(engine: Engine) -> None:
    """Create the tasks table if it is missing (dev/test helper, not a migration)."""
    ddl = _DDL.get(engine.dialect.name, _DDL["mysql"])
    try:
        with engine.begin() as conn:
            conn.execute(text(ddl))
    except SQLAlchemyError as exc:
        raise StatementError(f"ensure_schema_failed: {exc}") from exc
