"""
Article ("notícia") API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from auth import dependencies as auth_dependencies
from core import errors
from core.sessions import SessionData

from . import schemas, service

router = APIRouter(prefix="/api/noticias")


@router.get("")
async def list_articles(
    categoria: str | None = Query(default=None),
) -> list[dict]:
    with errors.internal_errors("Erro ao listar notícias."):
        return await service.list_articles(categoria)


@router.get("/{article_id}")
async def get_article(article_id: str) -> dict:
    with errors.internal_errors("Erro ao buscar notícia."):
        return await service.get_article(article_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_article(
    titulo: str | None = Form(default=None),
    resumo: str | None = Form(default=None),
    conteudo: str | None = Form(default=None),
    categoria: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
    _: SessionData = Depends(auth_dependencies.require_admin),
) -> dict:
    payload = errors.validate(
        schemas.ArticleCreate,
        titulo=titulo,
        resumo=resumo,
        conteudo=conteudo,
        categoria=categoria,
    )
    with errors.internal_errors("Erro ao criar notícia."):
        return await service.create_article(payload, imagem)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    _: SessionData = Depends(auth_dependencies.require_admin),
) -> Response:
    with errors.internal_errors("Erro ao apagar notícia."):
        await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
