"""Errors raised by the task service."""


class TaskNotFoundError(Exception):
    """Raised when an operation references a task id that does not exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
