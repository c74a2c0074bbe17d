"""Authentication routes: register, login, logout, me."""

import logging
from fastapi import APIRouter, HTTPException, Depends, Response
from server.config import IS_PRODUCTION
from server.database import get_db
from auth.utils import SESSION_COOKIE, hash_password, verify_password, generate_token, get_current_user
from auth.schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=IS_PRODUCTION,
        samesite="lax",
        path="/",
        max_age=2592000,  # 30 days
    )


@router.post("/register", response_model=AuthResponse)
def register(body: RegisterRequest, response: Response):
    if len(body.password) < 6:
        raise HTTPException(status_code=400, detail="Password must be at least 6 characters")
    if not body.email or "@" not in body.email:
        raise HTTPException(status_code=400, detail="Valid email required")
    if not body.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")

    email = body.email.lower().strip()
    db = get_db()
    existing = db.execute("SELECT id FROM users WHERE email = ?", (email,)).fetchone()
    if existing:
        db.close()
        raise HTTPException(status_code=409, detail="Email already registered")

    token = generate_token()
    try:
        cursor = db.execute(
            "INSERT INTO users (name, email, password_hash, auth_token) VALUES (?, ?, ?, ?)",
            (body.name.strip(), email, hash_password(body.password), token)
        )
        db.commit()
        user_id = cursor.lastrowid
    finally:
        db.close()

    logger.info(f"Registered user {user_id}")
    _set_session_cookie(response, token)

    user = UserResponse(id=user_id, name=body.name.strip(), email=email)
    return AuthResponse(token="", user=user)  # Token not returned in JSON, only in cookie


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, response: Response):
    db = get_db()
    row = db.execute(
        "SELECT * FROM users WHERE email = ?", (body.email.lower().strip(),)
    ).fetchone()

    if not row or not verify_password(body.password, row["password_hash"]):
        db.close()
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = generate_token()
    db.execute("UPDATE users SET auth_token = ? WHERE id = ?", (token, row["id"]))
    db.commit()
    db.close()

    _set_session_cookie(response, token)

    user = UserResponse(**{k: row[k] for k in UserResponse.model_fields})
    return AuthResponse(token="", user=user)  # Token not returned in JSON, only in cookie


@router.post("/logout")
def logout(response: Response, current_user: dict = Depends(get_current_user)):
    db = get_db()
    db.execute("UPDATE users SET auth_token = NULL WHERE id = ?", (current_user["id"],))
    db.commit()
    db.close()

    response.delete_cookie(key=SESSION_COOKIE, httponly=True, samesite="lax", path="/")
    return {"message": "Logged out"}


@router.get("/me", response_model=UserResponse)
def get_me(current_user: dict = Depends(get_current_user)):
    return UserResponse(**{k: current_user[k] for k in UserResponse.model_fields})
