"""
Admin session endpoints: login, current identity, logout.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from core import errors, settings
from core.sessions import SessionData, SessionStore

from . import dependencies, schemas, service

router = APIRouter(prefix="/api/admin")


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name(),
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.is_production(),
        path="/",
    )


@router.post("/login")
async def login(
    request: Request,
    response: Response,
    payload: schemas.LoginRequest | None = None,
    store: SessionStore = Depends(dependencies.get_session_store),
) -> dict:
    with errors.internal_errors("Erro no login."):
        session = await service.login(payload)

        # A fresh token on every login; the previous one (if any) stops working.
        await store.destroy(dependencies.session_token(request))
        token = await store.create(session)

    _set_session_cookie(response, token)
    return {"ok": True}


@router.get("/me")
async def me(
    session: SessionData | None = Depends(dependencies.get_current_session),
) -> schemas.MeResponse:
    if not dependencies.is_admin(session):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=dependencies.NOT_AUTHENTICATED_MESSAGE,
        )
    return service.me(session)


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(dependencies.get_session_store),
) -> dict:
    await store.destroy(dependencies.session_token(request))
    response.delete_cookie(settings.session_cookie_name(), path="/")
    return {"ok": True}
