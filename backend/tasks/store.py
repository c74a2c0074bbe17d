"""Per-user task store: the task list plus completion derived from it.

Percentages are computed from the current list on every call.
"""

import json
import logging
import math
from typing import Iterable, List, Optional

from fastapi import Depends

from auth.utils import get_current_user
from server.database import get_db
from tasks.schemas import SubjectProgress, Task

logger = logging.getLogger(__name__)

STORAGE_KEY = "exam-tasks-storage"
ALL_SUBJECTS = "all"


def _percentage(completed: int, total: int) -> int:
    if total == 0:
        return 0
    # Half-up, not Python's banker's rounding
    return math.floor(completed * 100 / total + 0.5)


class TaskStore:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks or [])

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        self.tasks = list(tasks)

    def toggle_task(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                task.completed = not task.completed
                return task
        return None

    def completion_percentage(self) -> int:
        return _percentage(sum(1 for t in self.tasks if t.completed), len(self.tasks))

    def subjects(self) -> List[str]:
        return list(dict.fromkeys(t.subject for t in self.tasks))

    def tasks_for(self, subject: str) -> List[Task]:
        if subject == ALL_SUBJECTS:
            return self.tasks
        return [t for t in self.tasks if t.subject == subject]

    def subject_completion_percentage(self, subject: str) -> int:
        tasks = self.tasks_for(subject)
        return _percentage(sum(1 for t in tasks if t.completed), len(tasks))

    def subject_progress(self) -> List[SubjectProgress]:
        progress = []
        for subject in self.subjects():
            tasks = self.tasks_for(subject)
            completed = sum(1 for t in tasks if t.completed)
            progress.append(SubjectProgress(
                subject=subject,
                completed=completed,
                total=len(tasks),
                percentage=_percentage(completed, len(tasks)),
            ))
        return progress


def load_task_store(user_id: int) -> TaskStore:
    db = get_db()
    row = db.execute(
        "SELECT payload FROM task_storage WHERE user_id = ? AND storage_key = ?",
        (user_id, STORAGE_KEY)
    ).fetchone()
    db.close()

    if not row:
        return TaskStore()
    return TaskStore(Task(**item) for item in json.loads(row["payload"]))


def save_task_store(user_id: int, store: TaskStore) -> None:
    payload = json.dumps([t.model_dump() for t in store.tasks], ensure_ascii=False)
    db = get_db()
    db.execute(
        """INSERT INTO task_storage (user_id, storage_key, payload, updated_at)
           VALUES (?, ?, ?, datetime('now'))
           ON CONFLICT(user_id, storage_key)
           DO UPDATE SET payload = excluded.payload, updated_at = excluded.updated_at""",
        (user_id, STORAGE_KEY, payload)
    )
    db.commit()
    db.close()
    logger.debug(f"Saved {len(store.tasks)} tasks for user {user_id}")


def get_task_store(current_user: dict = Depends(get_current_user)) -> TaskStore:
    """FastAPI dependency: the authenticated user's store for this request."""
    return load_task_store(current_user["id"])
