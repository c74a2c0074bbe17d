"""Global configuration — paths, env vars.

DEPLOYMENT:
  Copy .env.example → .env and fill in the values.
  To switch servers, only the .env file needs to change — no code edits required.
"""

import os
from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # backend/
PROJECT_DIR = os.path.dirname(BASE_DIR)  # project root

# Load .env from project root (does not override variables already set)
load_dotenv(os.path.join(PROJECT_DIR, ".env"))


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ─── Paths ───────────────────────────────────────────────────
DB_PATH = os.environ.get("DB_PATH") or os.path.join(BASE_DIR, "study_tasks.db")

# ─── Environment ─────────────────────────────────────────────
# Set ENVIRONMENT=production in .env to enable HTTPS-only cookies.
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
IS_PRODUCTION = ENVIRONMENT == "production"

# ─── Server ──────────────────────────────────────────────────
PORT = int(os.environ.get("PORT", 8000))

# ─── CORS ────────────────────────────────────────────────────
# Dev:  ALLOWED_ORIGINS=*
# Prod: ALLOWED_ORIGINS=https://yourdomain.com,https://www.yourdomain.com
_raw_origins = os.environ.get("ALLOWED_ORIGINS", "*")
ALLOWED_ORIGINS = ["*"] if _raw_origins.strip() == "*" else [
    o.strip() for o in _raw_origins.split(",") if o.strip()
]

# ─── Logging ─────────────────────────────────────────────────
# DEBUG=true dumps raw Gemini payloads and extracted JSON to the log.
DEBUG = _env_bool("DEBUG")
LOG_LEVEL = "DEBUG" if DEBUG else os.environ.get("LOG_LEVEL", "INFO").upper()

# ─── Task generation ─────────────────────────────────────────
# ai:   call Gemini per subject, fall back to templates on any failure
# mock: skip Gemini entirely and use the template generator
TASK_GENERATION_MODE = os.environ.get("TASK_GENERATION_MODE", "ai").strip().lower()

GEMINI_BASE_URL = os.environ.get(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
).rstrip("/")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-pro")
GEMINI_TIMEOUT_SECONDS = _env_float("GEMINI_TIMEOUT_SECONDS", 30.0)

# Sampling parameters sent as generationConfig
GEMINI_TEMPERATURE = 0.2
GEMINI_TOP_P = 0.8
GEMINI_TOP_K = 40

# ─── Keys & Secrets ──────────────────────────────────────────
def get_gemini_api_key() -> str:
    """Read the key at call time so a rotated .env value is picked up."""
    return os.environ.get("GEMINI_API_KEY", "").strip()
