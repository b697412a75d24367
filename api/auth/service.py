"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.sessions import SessionData

from . import repository, schemas, security

INVALID_CREDENTIALS_MESSAGE = "Usuário ou senha inválidos."

logger = logging.getLogger(__name__)


async def login(payload: schemas.LoginRequest | None) -> SessionData:
    if payload is None or not payload.username or not payload.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=schemas.MISSING_FIELDS_MESSAGE,
        )

    admin_row = await repository.get_admin_by_username(payload.username)
    if admin_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_MESSAGE,
        )

    if not security.verify_password(payload.password, str(admin_row.get("password_hash") or "")):
        logger.info("login_rejected username=%s", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_MESSAGE,
        )

    logger.info("login_ok admin_id=%s", admin_row["id"])
    return SessionData(admin_id=int(admin_row["id"]), username=str(admin_row["username"]))


def me(session: SessionData) -> schemas.MeResponse:
    return schemas.MeResponse(adminId=session.admin_id, username=session.username)
