"""
Pydantic schemas for article ("notícia") endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from core.categories import is_valid_category

MISSING_FIELDS_MESSAGE = "Campos obrigatórios faltando."
INVALID_CATEGORY_MESSAGE = "Categoria inválida."


class ArticleCreate(BaseModel):
    """
    Multipart fields of `POST /api/noticias` (the image travels separately).
    """

    titulo: str | None = None
    resumo: str | None = None
    conteudo: str | None = None
    categoria: str | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> "ArticleCreate":
        if not (self.titulo and self.resumo and self.conteudo and self.categoria):
            raise ValueError(MISSING_FIELDS_MESSAGE)
        if not is_valid_category(self.categoria):
            raise ValueError(INVALID_CATEGORY_MESSAGE)
        return self
