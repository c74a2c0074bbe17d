# tests/test_task_store.py

from __future__ import annotations

from tasks.schemas import Task
from tasks.store import STORAGE_KEY, TaskStore, load_task_store, save_task_store
from server.database import get_db


def _task(task_id: str, subject: str = "英語", completed: bool = False) -> Task:
    return Task(
        id=task_id,
        title=f"title {task_id}",
        description="desc",
        priority="medium",
        completed=completed,
        subject=subject,
    )


def test_toggle_twice_restores_state() -> None:
    store = TaskStore([_task("a"), _task("b", completed=True)])

    store.toggle_task("a")
    assert store.tasks[0].completed is True
    store.toggle_task("a")
    assert store.tasks[0].completed is False
    assert store.tasks[1].completed is True


def test_toggle_unknown_id_is_a_no_op() -> None:
    store = TaskStore([_task("a")])

    assert store.toggle_task("missing") is None
    assert store.tasks[0].completed is False


def test_completion_percentage() -> None:
    assert TaskStore().completion_percentage() == 0

    store = TaskStore([_task("a"), _task("b"), _task("c")])
    assert store.completion_percentage() == 0
    store.toggle_task("a")
    assert store.completion_percentage() == 33
    store.toggle_task("b")
    assert store.completion_percentage() == 67
    store.toggle_task("c")
    assert store.completion_percentage() == 100


def test_completion_percentage_rounds_half_up() -> None:
    store = TaskStore([_task(str(i), completed=(i == 0)) for i in range(8)])

    assert store.completion_percentage() == 13  # 12.5


def test_set_tasks_replaces_everything() -> None:
    store = TaskStore([_task("a", completed=True)])

    store.set_tasks([_task("x"), _task("y")])

    assert [t.id for t in store.tasks] == ["x", "y"]
    assert store.completion_percentage() == 0


def test_subject_progress() -> None:
    store = TaskStore([
        _task("e1", "英語", completed=True),
        _task("m1", "数学"),
        _task("e2", "英語"),
        _task("m2", "数学", completed=True),
        _task("m3", "数学", completed=True),
    ])

    assert store.subjects() == ["英語", "数学"]
    assert store.subject_completion_percentage("英語") == 50
    assert store.subject_completion_percentage("数学") == 67
    assert store.subject_completion_percentage("all") == 60
    assert store.subject_completion_percentage("理科") == 0

    progress = {p.subject: p for p in store.subject_progress()}
    assert (progress["数学"].completed, progress["数学"].total, progress["数学"].percentage) == (2, 3, 67)


def test_store_persists_per_user(user_id: int) -> None:
    assert load_task_store(user_id).tasks == []

    store = TaskStore([_task("a", "国語"), _task("b", "国語", completed=True)])
    save_task_store(user_id, store)
    store.toggle_task("a")
    save_task_store(user_id, store)

    loaded = load_task_store(user_id)
    assert [(t.id, t.completed, t.subject) for t in loaded.tasks] == [("a", True, "国語"), ("b", True, "国語")]

    db = get_db()
    rows = db.execute("SELECT storage_key FROM task_storage WHERE user_id = ?", (user_id,)).fetchall()
    db.close()
    assert [r["storage_key"] for r in rows] == [STORAGE_KEY]
