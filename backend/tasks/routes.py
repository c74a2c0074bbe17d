"""Task routes: list with progress, toggle completion."""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from auth.utils import get_current_user
from tasks.schemas import TaskListResponse
from tasks.store import ALL_SUBJECTS, TaskStore, get_task_store, save_task_store

router = APIRouter()


def _task_list(store: TaskStore, subject: str = ALL_SUBJECTS) -> TaskListResponse:
    if subject == ALL_SUBJECTS:
        percentage = store.completion_percentage()
    else:
        percentage = store.subject_completion_percentage(subject)
    return TaskListResponse(
        tasks=store.tasks_for(subject),
        completion_percentage=percentage,
        subjects=store.subject_progress(),
    )


@router.get("/tasks", response_model=TaskListResponse)
def get_tasks(subject: Optional[str] = None, store: TaskStore = Depends(get_task_store)):
    """All tasks, or one subject's tasks and completion with ?subject=英語."""
    return _task_list(store, subject or ALL_SUBJECTS)


@router.patch("/tasks/{task_id}/toggle", response_model=TaskListResponse)
def toggle_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
    current_user: dict = Depends(get_current_user),
):
    if store.toggle_task(task_id) is None:
        raise HTTPException(status_code=404, detail="Task not found")
    save_task_store(current_user["id"], store)
    return _task_list(store)
