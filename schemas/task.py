"""Pydantic models for the task list.

``TaskRecord`` is the persisted shape: one JSON object per task, using the
camelCase keys the browser version of the app wrote to local storage
(``dueDate``, ``createdAt``). The whole list is stored as a JSON array under a
single key. ``TaskCreate`` / ``TaskUpdate`` / ``TaskResponse`` are the JSON API
bodies.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from domain.entities import Priority, Task


class TaskRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _numeric_id(cls, value):
        # older data used millisecond timestamps as ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def _blank_due_date(cls, value):
        if value == "":
            return None
        return value

    @field_validator("priority", mode="before")
    @classmethod
    def _unknown_priority(cls, value):
        try:
            return Priority(value)
        except ValueError:
            return Priority.MEDIUM

    @classmethod
    def from_entity(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=task.priority,
            due_date=task.due_date,
            completed=task.completed,
            created_at=task.created_at
        )

    def to_entity(self) -> Task:
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            priority=self.priority,
            due_date=self.due_date,
            completed=self.completed,
            created_at=self.created_at
        )


_TASK_LIST = TypeAdapter(List[TaskRecord])


def dump_tasks(tasks: List[Task]) -> str:
    records = [TaskRecord.from_entity(task) for task in tasks]
    return _TASK_LIST.dump_json(records, by_alias=True).decode("utf-8")


def load_tasks(raw: str) -> List[Task]:
    """Parse a stored task list. Raises ``pydantic.ValidationError`` on bad input."""
    return [record.to_entity() for record in _TASK_LIST.validate_json(raw)]


class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[date] = Field(default=None, alias="dueDate")


class TaskUpdate(BaseModel):
    title: str
    description: Optional[str] = None


class TaskResponse(TaskRecord):
    overdue: bool = False

    @classmethod
    def from_task(cls, task: Task, today: Optional[date] = None) -> "TaskResponse":
        record = TaskRecord.from_entity(task)
        return cls(**record.model_dump(), overdue=task.is_overdue(today))
