from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..errors import NotFoundError, ParseError, TaskRepositoryError
from ..services import task_svc

router = APIRouter()
logger = logging.getLogger(__name__)


class TaskCreate(BaseModel):
    goal: str


class TaskUpdate(BaseModel):
    goal: str
    completed: bool


@router.post("/api/tasks", status_code=201)
def api_task_create(body: TaskCreate):
    try:
        task_id = task_svc.create_task(task_svc.get_dao(), body.goal)
        return {"id": task_id}
    except TaskRepositoryError as e:
        logger.error("create task failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/tasks")
def api_task_list(completed: str = Query("")):
    try:
        tasks = task_svc.list_tasks(task_svc.get_dao(), completed)
        return {"tasks": [t.model_dump() for t in tasks]}
    except ParseError as pe:
        raise HTTPException(status_code=400, detail=str(pe))
    except TaskRepositoryError as e:
        logger.error("list tasks failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/tasks/{task_id}")
def api_task_get(task_id: int):
    try:
        return task_svc.get_task(task_svc.get_dao(), task_id).model_dump()
    except NotFoundError as nf:
        raise HTTPException(status_code=404, detail=str(nf))
    except TaskRepositoryError as e:
        logger.error("get task %s failed: %s", task_id, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/api/tasks/{task_id}")
def api_task_update(task_id: int, body: TaskUpdate):
    try:
        n = task_svc.update_task(task_svc.get_dao(), task_id, body.goal, body.completed)
        return {"rows_updated": n}
    except TaskRepositoryError as e:
        logger.error("update task %s failed: %s", task_id, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/api/tasks/{task_id}")
def api_task_delete(task_id: int):
    try:
        task_svc.delete_task(task_svc.get_dao(), task_id)
        return {"message": "ok"}
    except TaskRepositoryError as e:
        logger.error("delete task %s failed: %s", task_id, e)
        raise HTTPException(status_code=500, detail=str(e))
