"""
Environment-driven settings.

Values are read lazily so tests can override them with `monkeypatch.setenv`.
`main.py` loads a local `.env` file (python-dotenv) before anything reads them.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_UPLOADS_DIR = Path("public") / "uploads"

DEFAULT_PORT = 3001
DEFAULT_SESSION_COOKIE = "revista.sid"
DEFAULT_SESSION_TTL_MINUTES = 12 * 60


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def is_production() -> bool:
    return env_str("APP_ENV").lower() == "production"


def allowed_origin() -> str:
    return env_str("ALLOWED_ORIGIN")


def session_cookie_name() -> str:
    return env_str("SESSION_COOKIE_NAME", DEFAULT_SESSION_COOKIE)


def session_ttl_seconds() -> int:
    minutes = env_int("SESSION_TTL_MINUTES", DEFAULT_SESSION_TTL_MINUTES)
    if minutes <= 0:
        minutes = DEFAULT_SESSION_TTL_MINUTES
    return minutes * 60


def app_root() -> Path:
    # Relative paths (e.g. UPLOADS_DIR) resolve here; defaults to the working directory.
    raw = env_str("APP_ROOT")
    return Path(raw).resolve() if raw else Path.cwd()


def uploads_dir() -> Path:
    raw = env_str("UPLOADS_DIR")
    path = Path(raw) if raw else DEFAULT_UPLOADS_DIR
    return path if path.is_absolute() else app_root() / path


def admin_credentials() -> tuple[str, str] | None:
    # Password is taken verbatim; only the username is trimmed.
    user = env_str("ADMIN_USER")
    password = os.environ.get("ADMIN_PASS", "")
    if not user or not password:
        return None
    return user, password


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()
