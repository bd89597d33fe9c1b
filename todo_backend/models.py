from __future__ import annotations

from pydantic import BaseModel


class Task(BaseModel):
    id: int
    goal: str
    completed: bool = False

    @classmethod
    def from_row(cls, row) -> "Task":
        return cls(id=int(row["id"]), goal=row["goal"], completed=bool(row["completed"]))
