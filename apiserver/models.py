"""
Database models for the task API.

This module defines the SQLAlchemy model for the single entity the API
manages: a to-do item with free-form content and a done flag.
"""

from typing import Any

from apiserver import db


class Task(db.Model):
    """
    Task model representing a to-do item.

    Attributes:
        id: Unique identifier, assigned on insert and never reused.
        content: Free-form text describing the task.
        done: Whether the task has been completed.
    """

    __tablename__ = "tasks"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id: int = db.Column(db.Integer, primary_key=True)
    content: str = db.Column(db.Text, nullable=False, default="")
    done: bool = db.Column(db.Boolean, nullable=False, default=False)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary with the id, content and done fields.
        """
        return {
            "id": self.id,
            "content": self.content,
            "done": bool(self.done),
        }

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.content}>"
