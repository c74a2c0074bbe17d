"""Run task generation for a batch of subject entries."""

import asyncio
import logging
from typing import List, Protocol, Sequence

from brain.schemas import SubjectEntry
from tasks.schemas import Task

logger = logging.getLogger(__name__)


class TaskGenerator(Protocol):
    async def process(self, entry: SubjectEntry) -> List[Task]: ...


async def generate_tasks_for_entries(entries: Sequence[SubjectEntry], generator: TaskGenerator) -> List[Task]:
    """Generate every entry concurrently; output keeps entry order, then generation order.

    If one entry raises, the calls still in flight are cancelled before the
    error propagates.
    """
    if not entries:
        raise ValueError("at least one subject entry is required")

    pending = [asyncio.ensure_future(generator.process(entry)) for entry in entries]
    try:
        results = await asyncio.gather(*pending)
    except BaseException:
        for fut in pending:
            fut.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        raise

    all_tasks: List[Task] = []
    for tasks in results:
        all_tasks.extend(tasks)
    logger.info(f"Generated {len(all_tasks)} tasks for {len(entries)} subject(s)")
    return all_tasks
