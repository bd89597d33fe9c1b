from __future__ import annotations


class TaskRepositoryError(Exception):
    """Base class for everything the task data layer raises."""


class DatabaseConnectionError(TaskRepositoryError):
    """The engine could not be built from the given descriptor."""


class StatementError(TaskRepositoryError):
    """An insert/update/delete statement could not be prepared or executed."""


class QueryError(TaskRepositoryError):
    """A select failed while executing or while reading rows."""


class ParseError(TaskRepositoryError, ValueError):
    """A filter argument is not a recognised boolean spelling."""


class NotFoundError(TaskRepositoryError, LookupError):
    def __init__(self, task_id: int):
        super().__init__(f"task_not_found: {task_id}")
        self.task_id = task_id
