"""
Pydantic schemas for advertisement endpoints.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from core.categories import is_valid_category

SLOT_REQUIRED_MESSAGE = "slot é obrigatório."
INVALID_CATEGORY_MESSAGE = "Categoria inválida."
INVALID_WEIGHT_MESSAGE = "Peso inválido."

DEFAULT_TYPE = "patrocinador"
DEFAULT_WEIGHT = 100

_INT4_MIN = -(2**31)
_INT4_MAX = 2**31 - 1


def parse_weight(raw: Any) -> int:
    """
    Anything that is not a finite number falls back to DEFAULT_WEIGHT.
    Fractions are truncated toward zero.
    """
    if raw is None or isinstance(raw, bool):
        return DEFAULT_WEIGHT
    try:
        value = float(str(raw).strip())
    except ValueError:
        return DEFAULT_WEIGHT
    if not math.isfinite(value):
        return DEFAULT_WEIGHT

    weight = int(value)
    if not _INT4_MIN <= weight <= _INT4_MAX:
        raise ValueError(INVALID_WEIGHT_MESSAGE)
    return weight


class AdCreate(BaseModel):
    """
    Multipart fields of `POST /api/admin/ads` (the image travels separately).
    """

    slot: str | None = None
    titulo: str | None = None
    texto: str | None = None
    href: str | None = None
    categoria: str | None = None
    tipo: str = DEFAULT_TYPE
    peso: int = DEFAULT_WEIGHT
    ativo: bool = True
    adsense_slot: str | None = None

    @field_validator("slot", "titulo", "texto", "href", "categoria", "adsense_slot", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value == "":
            return None
        return value

    @field_validator("tipo", mode="before")
    @classmethod
    def _default_type(cls, value: Any) -> Any:
        return value or DEFAULT_TYPE

    @field_validator("peso", mode="before")
    @classmethod
    def _weight(cls, value: Any) -> int:
        return parse_weight(value)

    @field_validator("ativo", mode="before")
    @classmethod
    def _active(cls, value: Any) -> Any:
        if value is None or value == "":
            return True
        return value

    @model_validator(mode="after")
    def _check_fields(self) -> "AdCreate":
        if not self.slot:
            raise ValueError(SLOT_REQUIRED_MESSAGE)
        if self.categoria is not None and not is_valid_category(self.categoria):
            raise ValueError(INVALID_CATEGORY_MESSAGE)
        return self
