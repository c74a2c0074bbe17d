"""Brain routes: generate study tasks for a batch of subjects."""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from auth.utils import get_current_user
from brain.catalog import SUBJECTS
from brain.orchestrator import generate_tasks_for_entries
from brain.schemas import GenerateTasksRequest, GenerateTasksResponse
from brain.task_brain import get_task_brain
from tasks.store import TaskStore, get_task_store, save_task_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/generate-tasks", response_model=GenerateTasksResponse)
async def generate_tasks(
    request: Request,
    current_user: dict = Depends(get_current_user),
    brain=Depends(get_task_brain),
    store: TaskStore = Depends(get_task_store),
):
    try:
        payload = await request.json()
    except Exception:
        logger.exception("generate_tasks: request body is not valid JSON")
        raise HTTPException(status_code=500, detail="Failed to generate tasks")

    try:
        body = GenerateTasksRequest.model_validate(payload)
    except ValidationError as exc:
        logger.info(f"generate_tasks: rejected request for user {current_user['id']}: {exc.error_count()} error(s)")
        raise HTTPException(status_code=400, detail="Subject entries are missing or invalid")

    try:
        tasks = await generate_tasks_for_entries(body.subject_entries, brain)
    except Exception:
        logger.exception(f"generate_tasks: unexpected failure for user {current_user['id']}")
        raise HTTPException(status_code=500, detail="Failed to generate tasks")

    store.set_tasks(tasks)
    save_task_store(current_user["id"], store)
    return GenerateTasksResponse(tasks=tasks)


@router.get("/api/subjects")
def list_subjects():
    """Subjects with dedicated templates; other subject names use the default template."""
    return {"subjects": list(SUBJECTS)}
