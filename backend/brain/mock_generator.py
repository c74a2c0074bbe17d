"""Template-based task generator used when Gemini is unavailable or unusable."""

import random
import uuid
from typing import Callable, List, Optional

from brain.catalog import get_template
from brain.keywords import extract_keywords
from tasks.schemas import PRIORITIES, Task

MIN_TASKS = 5
MAX_TASKS = 8


def new_task_id() -> str:
    return str(uuid.uuid4())


def keyword_annotation(keyword: str) -> str:
    return f"（特に「{keyword}」に焦点を当てる）"


class MockTaskGenerator:
    """Expands a subject template into 5–8 tasks, one per exam-scope keyword.

    Everything except priority is deterministic. Pass a seeded
    ``random.Random`` to make priorities reproducible too.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        id_factory: Callable[[], str] = new_task_id,
    ):
        self.rng = rng or random.Random()
        self.id_factory = id_factory

    def generate(self, subject: str, exam_scope: str) -> List[Task]:
        template = get_template(subject)
        keywords = extract_keywords(exam_scope)
        task_count = max(MIN_TASKS, min(len(keywords), MAX_TASKS))

        tasks = []
        for i in range(task_count):
            description = template.descriptions[i % len(template.descriptions)]
            if i < len(keywords):
                description += keyword_annotation(keywords[i])

            tasks.append(Task(
                id=self.id_factory(),
                title=template.titles[i % len(template.titles)],
                description=description,
                priority=self.rng.choice(PRIORITIES),
                completed=False,
                subject=subject,
            ))
        return tasks


def generate_mock_tasks(subject: str, exam_scope: str, rng: Optional[random.Random] = None) -> List[Task]:
    return MockTaskGenerator(rng=rng).generate(subject, exam_scope)
