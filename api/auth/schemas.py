"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

MISSING_FIELDS_MESSAGE = "Campos obrigatórios."


class LoginRequest(BaseModel):
    username: str | None = Field(default=None, max_length=100)
    password: str | None = Field(default=None, max_length=128)

    @model_validator(mode="after")
    def _require_credentials(self) -> "LoginRequest":
        if not self.username or not self.password:
            raise ValueError(MISSING_FIELDS_MESSAGE)
        return self


class MeResponse(BaseModel):
    ok: bool = True
    adminId: int
    username: str
