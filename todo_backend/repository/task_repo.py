from __future__ import annotations

from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection


def insert(conn: Connection, goal: str) -> int:
    cur = conn.execute(text("INSERT INTO tasks (goal) VALUES (:goal)"), {"goal": goal})
    return int(cur.lastrowid)


def get_one(conn: Connection, task_id: int):
    return conn.execute(
        text("SELECT id, goal, completed FROM tasks WHERE id = :id"),
        {"id": task_id},
    ).mappings().first()


def list_all(conn: Connection, completed: Optional[bool] = None):
    sql = "SELECT id, goal, completed FROM tasks"
    params: dict = {}
    if completed is not None:
        sql += " WHERE completed = :completed"
        params["completed"] = completed
    return conn.execute(text(sql), params).mappings().all()


def remove(conn: Connection, task_id: int) -> None:
    conn.execute(text("DELETE FROM tasks WHERE id = :id"), {"id": task_id})


def update(conn: Connection, task_id: int, goal: str, completed: bool) -> int:
    cur = conn.execute(
        text("UPDATE tasks SET goal = :goal, completed = :completed WHERE id = :id"),
        {"goal": goal, "completed": completed, "id": task_id},
    )
    return int(cur.rowcount)
