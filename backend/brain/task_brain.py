"""TaskBrain — turns one subject entry into study tasks via Gemini.

Any failure on the AI path (transport, envelope, JSON, validation) falls back
to the template generator, so process() always returns tasks.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, List, Optional

from brain.gemini_client import GeminiClient, GeminiError
from brain.mock_generator import MockTaskGenerator, new_task_id
from brain.schemas import SubjectEntry
from server import config
from tasks.schemas import PRIORITIES, Task

logger = logging.getLogger(__name__)


def build_task_prompt(subject: str, exam_scope: str) -> str:
    return f"""あなたは勉強をサポートするプロの学習コーチです。以下の学習内容範囲から、中高生が効果的に勉強できるようにタスクに分けてください。

科目: {subject}
試験範囲: {exam_scope}

以下の要件に従って、具体的な学習タスクを作成してください：

1. タスクの基本要件：
   - タスク合計が21未満
   - 1つの科目のタスクは7以下
   - 参考書が記載されている場合は、その参考書の学習方法を参照

2. タスクの優先度設定：
   - high: 重要な暗記項目、基本的な理解が必要な項目、頻出問題
   - medium: 応用的な理解、演習問題、復習項目
   - low: 補足的な知識、発展的な学習項目

3. 学習タイプの考慮：
   - 暗記が必要な項目
   - 理解が必要な項目
   - 演習が必要な項目
   - これらのバランスを考慮してタスクを設定

4. 出力形式：
以下の形式のJSON配列のみを出力してください。説明文や追加のテキストは一切不要です：
[
  {{
    "title": "具体的なタスクのタイトル",
    "description": "具体的な学習手順や方法",
    "priority": "high"
  }}
]

注意：
- 余分な説明やテキストは一切不要です
- JSON配列のみを出力してください
- 各タスクは必ずtitle、description、priorityを含めてください
- priorityは必ず"high"、"medium"、"low"のいずれかにしてください"""


def extract_json_array(text: str) -> str:
    """Slice from the first '[' to the last ']' if the model wrapped the array in prose."""
    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        return text[start:end + 1]
    return text


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def is_valid_task_list(data: Any) -> bool:
    if not isinstance(data, list) or not data:
        return False
    return all(
        isinstance(item, dict)
        and _non_empty_str(item.get("title"))
        and _non_empty_str(item.get("description"))
        and item.get("priority") in PRIORITIES
        for item in data
    )


class TaskBrain:
    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        fallback: Optional[MockTaskGenerator] = None,
        id_factory: Callable[[], str] = new_task_id,
    ):
        self.client = client or GeminiClient()
        self.fallback = fallback or MockTaskGenerator()
        self.id_factory = id_factory

    def _fallback(self, entry: SubjectEntry) -> List[Task]:
        return self.fallback.generate(entry.subject, entry.exam_scope)

    async def process(self, entry: SubjectEntry) -> List[Task]:
        subject, exam_scope = entry.subject, entry.exam_scope
        logger.debug(f"TaskBrain: generating tasks for subject={subject!r} scope={exam_scope!r}")

        try:
            text = await self.client.generate_text(build_task_prompt(subject, exam_scope))
        except GeminiError as exc:
            logger.warning(f"TaskBrain: Gemini call failed for {subject!r}, using template tasks: {exc}")
            return self._fallback(entry)

        json_string = extract_json_array(text)
        if config.DEBUG:
            logger.debug(f"TaskBrain: extracted JSON string: {json_string}")

        try:
            data = json.loads(json_string)
        except (ValueError, RecursionError) as exc:
            # RecursionError: nesting deeper than the decoder's recursion limit
            logger.warning(f"TaskBrain: JSON parse failed for {subject!r}, using template tasks: {exc}")
            logger.debug(f"TaskBrain: raw text: {text[:500]}")
            return self._fallback(entry)

        if not is_valid_task_list(data):
            logger.warning(f"TaskBrain: invalid task structure for {subject!r}, using template tasks")
            logger.debug(f"TaskBrain: rejected data: {data!r}")
            return self._fallback(entry)

        tasks = [
            Task(
                id=self.id_factory(),
                title=item["title"],
                description=item["description"],
                priority=item["priority"],
                completed=False,
                subject=subject,
            )
            for item in data
        ]
        logger.info(f"TaskBrain: Gemini produced {len(tasks)} tasks for {subject!r}")
        return tasks


class MockTaskBrain:
    """Pure template build: same interface as TaskBrain, never calls Gemini."""

    def __init__(self, generator: Optional[MockTaskGenerator] = None):
        self.generator = generator or MockTaskGenerator()

    async def process(self, entry: SubjectEntry) -> List[Task]:
        return self.generator.generate(entry.subject, entry.exam_scope)


def get_task_brain():
    """FastAPI dependency: pick the generator for TASK_GENERATION_MODE."""
    if config.TASK_GENERATION_MODE == "mock":
        return MockTaskBrain()
    return TaskBrain()
