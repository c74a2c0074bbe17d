"""Session auth for StudyTasks: PBKDF2 password hashes, cookie tokens, user lookup."""

import hashlib
import secrets
from typing import Optional
from fastapi import HTTPException, Request
from server.database import get_db

SESSION_COOKIE = "session_token"
SESSION_TOKEN_BYTES = 48
PBKDF2_ITERATIONS = 100_000

# Columns handed to routes as current_user; password_hash and auth_token stay in the db.
_PUBLIC_USER_COLUMNS = "id, name, email, created_at"


def _pbkdf2(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS).hex()


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    return f"{salt}${_pbkdf2(password, salt)}"


def verify_password(password: str, stored_hash: str) -> bool:
    salt, sep, expected = stored_hash.partition("$")
    if not sep:
        return False
    return secrets.compare_digest(_pbkdf2(password, salt), expected)


def generate_token() -> str:
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def find_user_by_token(token: str) -> Optional[dict]:
    db = get_db()
    row = db.execute(
        f"SELECT {_PUBLIC_USER_COLUMNS} FROM users WHERE auth_token = ?", (token,)
    ).fetchone()
    db.close()
    return dict(row) if row else None


def get_current_user(request: Request) -> dict:
    """FastAPI dependency: the user owning the session cookie, or 401."""
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    user = find_user_by_token(token)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return user
