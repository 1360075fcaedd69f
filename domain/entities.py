from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass
class TaskDraft:
    """Fields entered in the create-task form, before the task exists."""
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[date] = None


@dataclass
class Task:
    id: str
    title: str
    description: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[date] = None
    completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def is_overdue(self, today: Optional[date] = None) -> bool:
        if self.completed or self.due_date is None:
            return False
        return self.due_date <= (today or date.today())
