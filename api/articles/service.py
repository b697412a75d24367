"""
Article business logic.

Validation always happens before the repository (or the upload directory) is
touched.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, UploadFile, status

from core import errors, uploads
from core.categories import is_valid_category

from . import repository, schemas

NOT_FOUND_MESSAGE = "Notícia não encontrada."

logger = logging.getLogger(__name__)


async def list_articles(categoria: str | None = None) -> list[dict]:
    # An empty ?categoria= means "no filter".
    if categoria and not is_valid_category(categoria):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=schemas.INVALID_CATEGORY_MESSAGE,
        )
    return await repository.list_articles(categoria=categoria or None)


async def get_article(raw_id: str) -> dict:
    article_id = errors.parse_id(raw_id)
    row = await repository.get_article(article_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    return row


async def create_article(payload: schemas.ArticleCreate, image: UploadFile | None = None) -> dict:
    imagem = await uploads.save_image(image)
    row = await repository.insert_article(
        titulo=payload.titulo,
        resumo=payload.resumo,
        conteudo=payload.conteudo,
        categoria=payload.categoria,
        imagem=imagem,
    )
    logger.info("article_created id=%s categoria=%s", row["id"], row["categoria"])
    return row


async def delete_article(raw_id: str) -> None:
    article_id = errors.parse_id(raw_id)
    if not await repository.delete_article(article_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    logger.info("article_deleted id=%s", article_id)
