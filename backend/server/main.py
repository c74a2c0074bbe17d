"""StudyTasks — FastAPI application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from server.config import ALLOWED_ORIGINS, LOG_LEVEL, TASK_GENERATION_MODE
from server.database import init_db
from server.logging_setup import setup_logging

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

from auth.routes import router as auth_router
from tasks.routes import router as tasks_router
from brain.routes import router as brain_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"StudyTasks API started (generation mode: {TASK_GENERATION_MODE})")
    yield
    logger.info("StudyTasks API shutting down")

app = FastAPI(title="StudyTasks API", version=VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=ALLOWED_ORIGINS != ["*"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# ─── API routes ──────────────────────────────────────────────
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(tasks_router, tags=["tasks"])
app.include_router(brain_router, tags=["brain"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": VERSION}
