import logging
import threading
import uuid
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import ValidationError

from config import STORAGE_KEY
from domain.entities import Task, TaskDraft
from infrastructure.database import Database
from schemas.task import dump_tasks, load_tasks

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class TaskStore:
    """Owns the ordered task list (newest first) and keeps the local store in sync.

    The list is loaded once when the store is constructed and written back in
    full after every operation that changes it. Operations on an unknown id
    change nothing and return ``None`` / ``False``.
    """

    def __init__(
        self,
        db: Database,
        key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_id,
    ):
        self.db = db
        self.key = key
        self._clock = clock
        self._id_factory = id_factory
        self._tasks: List[Task] = []
        # each mutation and its write to the local store happen under this lock
        self._lock = threading.RLock()
        self.hydrate()

    @property
    def tasks(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def hydrate(self) -> List[Task]:
        with self._lock:
            self._tasks = self._read_saved()
            return list(self._tasks)

    def _read_saved(self) -> List[Task]:
        raw = self.db.get(self.key)
        if raw is None:
            logger.info(f"No saved tasks under '{self.key}', starting empty")
            return []
        try:
            loaded = load_tasks(raw)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Failed to load tasks from '{self.key}', starting empty: {e}")
            return []

        seen = set()
        tasks = []
        for task in loaded:
            if task.id in seen:
                logger.warning(f"Dropping duplicate task id {task.id} from saved data")
                continue
            seen.add(task.id)
            tasks.append(task)
        logger.info(f"Loaded {len(tasks)} tasks from '{self.key}'")
        return tasks

    def persist(self) -> None:
        with self._lock:
            self.db.set(self.key, dump_tasks(self._tasks))
            logger.debug(f"Saved {len(self._tasks)} tasks to '{self.key}'")

    def get_task(self, task_id: str) -> Optional[Task]:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
            return None

    def pending_count(self) -> int:
        with self._lock:
            return sum(1 for task in self._tasks if not task.completed)

    def add(self, draft: TaskDraft) -> Optional[Task]:
        if not draft.title.strip():
            logger.debug("Ignoring task draft with an empty title")
            return None
        with self._lock:
            task = Task(
                id=self._allocate_id(),
                title=draft.title,
                description=draft.description,
                priority=draft.priority,
                due_date=draft.due_date,
                completed=False,
                created_at=self._clock()
            )
            self._tasks.insert(0, task)
            self.persist()
        logger.info(f"Added task {task.id}: {task.title!r}")
        return task

    def delete(self, task_id: str) -> bool:
        with self._lock:
            if not self.get_task(task_id):
                return False
            self._tasks = [t for t in self._tasks if t.id != task_id]
            self.persist()
        logger.info(f"Deleted task {task_id}")
        return True

    def toggle_complete(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self.get_task(task_id)
            if not task:
                return None
            task.completed = not task.completed
            self.persist()
        logger.info(f"Task {task_id} toggled to completed = {task.completed}")
        return task

    def save_edit(self, task_id: str, title: str, description: Optional[str]) -> Optional[Task]:
        # unlike add(), an empty title is accepted here
        with self._lock:
            task = self.get_task(task_id)
            if not task:
                return None
            task.title = title
            task.description = description
            self.persist()
        logger.info(f"Edited task {task_id}")
        return task

    def _allocate_id(self) -> str:
        task_id = self._id_factory()
        while self.get_task(task_id):
            task_id = self._id_factory()
        return task_id
