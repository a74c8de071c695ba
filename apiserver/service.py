"""
Task service layer.

The HTTP routes never touch the database directly; they call a
``TaskService``. ``SqlAlchemyTaskService`` is the implementation wired in
by ``create_app``; tests may hand the factory any other object that
implements the same interface.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select

from apiserver.exceptions import TaskNotFoundError
from apiserver.models import Task

logger = logging.getLogger(__name__)

# Largest value a SQLite INTEGER column can hold
MAX_TASK_ID = 2**63 - 1


class TaskService(ABC):
    """Operations the API layer relies on to manage tasks."""

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        """Return every stored task."""

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        """Return the task with ``task_id`` or raise ``TaskNotFoundError``."""

    @abstractmethod
    def create_task(self, content: str) -> Task:
        """Store a new, not yet done task and return it with its id."""

    @abstractmethod
    def update_task(self, task_id: int, content: str, done: bool) -> Task:
        """Replace content and done flag of an existing task."""

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        """Remove an existing task."""

    @abstractmethod
    def done(self, task_id: int) -> None:
        """Mark an existing task as done."""


class SqlAlchemyTaskService(TaskService):
    """
    Task service backed by the application's SQLAlchemy session.

    Every mutation is committed before returning, so each call maps to a
    single transaction.
    """

    def __init__(self, database: SQLAlchemy):
        self.db = database

    def _find(self, task_id: int) -> Task:
        if not 0 <= task_id <= MAX_TASK_ID:
            raise TaskNotFoundError(task_id)
        task = self.db.session.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks(self) -> list[Task]:
        stmt = select(Task).order_by(Task.id.asc())
        return list(self.db.session.scalars(stmt).all())

    def get_task(self, task_id: int) -> Task:
        return self._find(task_id)

    def create_task(self, content: str) -> Task:
        task = Task(content=content, done=False)
        self.db.session.add(task)
        self.db.session.commit()
        logger.info(f"Created task with ID: {task.id}")
        return task

    def update_task(self, task_id: int, content: str, done: bool) -> Task:
        task = self._find(task_id)
        task.content = content
        task.done = done
        self.db.session.commit()
        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        task = self._find(task_id)
        self.db.session.delete(task)
        self.db.session.commit()
        logger.info(f"Deleted task {task_id}")

    def done(self, task_id: int) -> None:
        task = self._find(task_id)
        task.done = True
        self.db.session.commit()
        logger.info(f"Marked task {task_id} as done")


def get_task_service() -> TaskService:
    """Return the task service registered on the current application."""
    return current_app.extensions["task_service"]
