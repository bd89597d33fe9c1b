from __future__ import annotations

import logging
from typing import Optional

from ..dao import TaskDAO
from ..db import get_engine
from ..errors import ParseError
from ..models import Task

logger = logging.getLogger(__name__)

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def parse_completed_filter(raw: str | None) -> Optional[bool]:
    """Turn raw filter text into an optional bool.

    Empty (or missing) means no filter. Accepted spellings are the usual
    1/t/true and 0/f/false variants; anything else raises ParseError.
    """
    if raw is None or raw == "":
        return None
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ParseError(f"invalid_completed_filter: {raw!r}")


def get_dao() -> TaskDAO:
    return TaskDAO(get_engine())


def create_task(dao: TaskDAO, goal: str) -> int:
    task_id = dao.insert_task(goal)
    logger.info("task created id=%s", task_id)
    return task_id


def get_task(dao: TaskDAO, task_id: int) -> Task:
    return dao.get_task(task_id)


def list_tasks(dao: TaskDAO, completed: str | None = "") -> list[Task]:
    # parse before touching the database
    flt = parse_completed_filter(completed)
    tasks = dao.get_tasks(flt)
    logger.debug("list_tasks completed=%s -> %d rows", flt, len(tasks))
    return tasks


def update_task(dao: TaskDAO, task_id: int, goal: str, completed: bool) -> int:
    n = dao.update_task(task_id, goal, completed)
    if n == 0:
        logger.info("update_task id=%s matched no rows", task_id)
    return n


def complete_task(dao: TaskDAO, task_id: int) -> int:
    """Mark a task done, keeping its goal."""
    task = dao.get_task(task_id)
    return dao.update_task(task_id, task.goal, True)


def delete_task(dao: TaskDAO, task_id: int) -> None:
    dao.delete_task(task_id)
    logger.info("task deleted id=%s", task_id)
