from __future__ import annotations

from typing import Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import NotFoundError, QueryError, StatementError
from .models import Task
from .repository import task_repo


class TaskDAO:
    """
    Task data-access object wrapping a shared SQLAlchemy engine.

    Every method runs exactly one statement inside ``engine.begin()``: the
    statement commits on success, and the connection goes back to the pool on
    both the success and the error path. The DAO never disposes the engine,
    never logs and never retries; errors go straight back to the caller.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def insert_task(self, goal: str) -> int:
        try:
            with self.engine.begin() as conn:
                return task_repo.insert(conn, goal)
        except SQLAlchemyError as exc:
            raise StatementError(f"insert_task_failed: {exc}") from exc

    def get_task(self, task_id: int) -> Task:
        try:
            with self.engine.begin() as conn:
                row = task_repo.get_one(conn, task_id)
            if row is None:
                raise NotFoundError(task_id)
            return Task.from_row(row)
        except (SQLAlchemyError, ValidationError) as exc:
            raise QueryError(f"get_task_failed: {exc}") from exc

    def get_tasks(self, completed: Optional[bool] = None) -> list[Task]:
        """All tasks, or only those whose completed flag equals `completed`.

        Order is whatever the database returns.
        """
        try:
            with self.engine.begin() as conn:
                rows = task_repo.list_all(conn, completed)
            return [Task.from_row(r) for r in rows]
        except (SQLAlchemyError, ValidationError) as exc:
            raise QueryError(f"get_tasks_failed: {exc}") from exc

    def delete_task(self, task_id: int) -> None:
        # zero rows affected is fine
        try:
            with self.engine.begin() as conn:
                task_repo.remove(conn, task_id)
        except SQLAlchemyError as exc:
            raise StatementError(f"delete_task_failed: {exc}") from exc

    def update_task(self, task_id: int, goal: str, completed: bool) -> int:
        try:
            with self.engine.begin() as conn:
                return task_repo.update(conn, task_id, goal, completed)
        except SQLAlchemyError as exc:
            raise StatementError(f"update_task_failed: {exc}") from exc
