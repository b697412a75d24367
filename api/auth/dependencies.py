"""
Auth dependencies for protected FastAPI routes.

`require_admin` is the gate for every mutating admin endpoint: it runs before
the handler and short-circuits with 401 when the request has no admin session.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from core import settings
from core.sessions import SessionData, SessionStore

LOGIN_REQUIRED_MESSAGE = "Login necessário."
NOT_AUTHENTICATED_MESSAGE = "Não autenticado."


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name())


async def get_current_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> SessionData | None:
    return await store.get(session_token(request))


def is_admin(session: SessionData | None) -> bool:
    return session is not None and session.admin_id is not None


async def require_admin(
    session: SessionData | None = Depends(get_current_session),
) -> SessionData:
    if not is_admin(session):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=LOGIN_REQUIRED_MESSAGE,
        )
    return session
