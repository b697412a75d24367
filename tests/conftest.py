import asyncio
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from core.sessions import MemorySessionStore, SessionData
from main import create_app

COOKIE_NAME = "revista.sid"
CREATED_AT = datetime(2025, 3, 1, 12, 30, 0)


@pytest.fixture(autouse=True)
def app_env(monkeypatch, tmp_path):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("SESSION_COOKIE_NAME", raising=False)
    monkeypatch.setenv("UPLOADS_DIR", str(tmp_path / "uploads"))
    yield


@pytest.fixture()
def session_store():
    return MemorySessionStore(ttl_seconds=3600)


@pytest.fixture()
def app(session_store):
    return create_app(session_store=session_store)


@pytest.fixture()
def client(app):
    # No `with` block: the lifespan (DB pool, admin bootstrap) is not started.
    return TestClient(app)


@pytest.fixture()
def admin_client(client, session_store):
    token = asyncio.run(session_store.create(SessionData(admin_id=1, username="admin")))
    client.cookies.set(COOKIE_NAME, token)
    return client


@pytest.fixture()
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


def fail_if_called(name):
    async def _fail(*args, **kwargs):
        raise AssertionError(f"{name} must not be called")

    return _fail
