# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from brain.task_brain import get_task_brain
from server import config
from server.database import get_db, init_db
from server.main import app

from .fakes import FakeTaskBrain


@pytest.fixture(autouse=True)
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Every test gets its own SQLite file."""
    path = tmp_path / "study_tasks.db"
    monkeypatch.setattr(config, "DB_PATH", str(path))
    return path


@pytest.fixture()
def user_id(db_path: Path) -> int:
    """A user row, for store tests that bypass HTTP."""
    init_db()
    db = get_db()
    cursor = db.execute(
        "INSERT INTO users (name, email, password_hash) VALUES (?, ?, ?)",
        ("Hanako", "hanako@example.com", "x$y"),
    )
    db.commit()
    uid = cursor.lastrowid
    db.close()
    return uid


@pytest.fixture()
def fake_brain() -> FakeTaskBrain:
    return FakeTaskBrain()


@pytest.fixture()
def anon_client(fake_brain: FakeTaskBrain):
    """TestClient with the task generator replaced; not logged in."""
    app.dependency_overrides[get_task_brain] = lambda: fake_brain
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture()
def client(anon_client: TestClient) -> TestClient:
    """Logged-in TestClient (session cookie set by /auth/register)."""
    resp = anon_client.post(
        "/auth/register",
        json={"name": "Taro", "email": "taro@example.com", "password": "secret123"},
    )
    assert resp.status_code == 200, resp.text
    return anon_client
