"""
Models for the task services.

Tasks are read-only views of stored documents; every change goes through
the store and comes back as a new snapshot.
"""

from enum import Enum
from typing import Any

from pydantic import Field

from todolist.core.models import StrictBaseModel
from todolist.providers.db.base import StoredDocument


class TaskFilter(str, Enum):
    """Status filter for the task list."""

    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    def matches(self, task: "Task") -> bool:
        if self is TaskFilter.COMPLETED:
            return task.done
        if self is TaskFilter.INCOMPLETE:
            return not task.done
        return True


def _as_text(value: Any) -> str:
    if not value:
        return ""
    return value if isinstance(value, str) else str(value)


class Task(StrictBaseModel):
    """One to-do item as delivered by the store."""

    id: str = Field(..., description="Store-assigned identifier")
    text: str = Field(default="", description="Task title")
    description: str = Field(default="", description="Free-form description")
    done: bool = Field(default=False, description="Completion flag")

    @classmethod
    def from_document(cls, document: StoredDocument) -> "Task":
        """Build a task from a stored document, defaulting missing or empty fields."""
        fields = document.fields
        return cls(
            id=document.id,
            text=_as_text(fields.get("text")),
            description=_as_text(fields.get("description")),
            done=bool(fields.get("done") or False),
        )


class EditTaskParams(StrictBaseModel):
    """Navigation parameters handed to the edit screen."""

    task_id: str = Field(..., description="Identifier of the task being edited")
    current_text: str = Field(default="", description="Title at the time the editor was opened")
    current_description: str = Field(default="", description="Description at the time the editor was opened")

    @classmethod
    def from_task(cls, task: Task) -> "EditTaskParams":
        return cls(task_id=task.id, current_text=task.text, current_description=task.description)
