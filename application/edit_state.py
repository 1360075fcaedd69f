import logging
from dataclasses import dataclass
from typing import Dict, Optional

from application.use_cases import TaskStore
from domain.entities import Task

logger = logging.getLogger(__name__)


@dataclass
class EditBuffer:
    task_id: str
    title: str
    description: Optional[str] = None


class EditState:
    """In-progress edits, one buffer per task in edit mode.

    Buffers are seeded from the task when editing starts and only reach the
    store on ``commit``. Nothing here is persisted.
    """

    def __init__(self, store: TaskStore):
        self.store = store
        self._buffers: Dict[str, EditBuffer] = {}

    def is_editing(self, task_id: str) -> bool:
        return task_id in self._buffers

    def buffer(self, task_id: str) -> Optional[EditBuffer]:
        return self._buffers.get(task_id)

    def begin(self, task_id: str) -> Optional[EditBuffer]:
        task = self.store.get_task(task_id)
        if not task:
            return None
        edit = EditBuffer(task_id=task.id, title=task.title, description=task.description)
        self._buffers[task_id] = edit
        return edit

    def toggle(self, task_id: str) -> Optional[EditBuffer]:
        if self.is_editing(task_id):
            self.cancel(task_id)
            return None
        return self.begin(task_id)

    def update(self, task_id: str, title: Optional[str] = None, description: Optional[str] = None) -> Optional[EditBuffer]:
        edit = self._buffers.get(task_id)
        if not edit:
            return None
        if title is not None:
            edit.title = title
        if description is not None:
            edit.description = description
        return edit

    def cancel(self, task_id: str) -> None:
        self._buffers.pop(task_id, None)

    def commit(self, task_id: str) -> Optional[Task]:
        edit = self._buffers.pop(task_id, None)
        if not edit:
            return None
        return self.store.save_edit(task_id, edit.title, edit.description)

    def prune(self) -> None:
        for task_id in list(self._buffers):
            if not self.store.get_task(task_id):
                logger.debug(f"Dropping edit buffer for missing task {task_id}")
                del self._buffers[task_id]
