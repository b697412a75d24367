"""
Error handling shared by every router.

Clients only ever see four outcomes, always shaped as `{"error": "<message>"}`:
- 400 validation error (missing/malformed input, invalid category, bad id)
- 401 authentication required
- 404 row not found
- 500 internal error (generic message; details go to the server log)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_MESSAGE = "Requisição inválida."
DEFAULT_INTERNAL_MESSAGE = "Erro interno."
INVALID_ID_MESSAGE = "ID inválido."

# Path ids map to SERIAL (int4) columns.
_INT4_MIN = -(2**31)
_INT4_MAX = 2**31 - 1

# ASCII digits only; int() would also take "1_000" or other scripts' digits.
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

ModelT = TypeVar("ModelT", bound=BaseModel)


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def validation_message(errors: list[dict[str, Any]] | tuple[Any, ...]) -> str:
    """
    Pick the client-facing message for a list of pydantic violations.

    Schemas raise `ValueError("<message>")` from their validators; that message
    is used verbatim. Anything else (missing body, wrong JSON) gets a generic one.
    """
    for err in errors:
        ctx = err.get("ctx") or {}
        exc = ctx.get("error")
        if exc is not None and str(exc):
            return str(exc)
    return DEFAULT_VALIDATION_MESSAGE


def validate(model: type[ModelT], **data: Any) -> ModelT:
    """
    Build `model` from `data`, turning violations into a 400.
    """
    try:
        return model(**data)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=validation_message(exc.errors()),
        ) from exc


def parse_id(raw: str | int | None) -> int:
    text = str(raw if raw is not None else "").strip()
    if not _ID_PATTERN.fullmatch(text):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_MESSAGE)
    value = int(text)
    if not _INT4_MIN <= value <= _INT4_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID_MESSAGE)
    return value


@contextmanager
def internal_errors(message: str) -> Iterator[None]:
    """
    Let HTTP errors through; log anything else and surface it as a generic 500.
    """
    try:
        yield
    except StarletteHTTPException:
        raise
    except Exception as exc:
        logger.exception("request_failed message=%r", message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message) from exc


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        error_body(str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        error_body(validation_message(exc.errors())),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        error_body(DEFAULT_INTERNAL_MESSAGE),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
