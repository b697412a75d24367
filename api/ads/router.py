"""
Advertisement API endpoints (public selection + admin management).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from auth import dependencies as auth_dependencies
from core import errors
from core.sessions import SessionData

from . import schemas, service

public_router = APIRouter(prefix="/api/ads")
admin_router = APIRouter(prefix="/api/admin/ads")


@public_router.get("")
async def select_ad(
    slot: str | None = Query(default=None),
    categoria: str | None = Query(default=None),
) -> dict | None:
    with errors.internal_errors("Erro ao buscar anúncio."):
        return await service.select_ad(slot, categoria)


@admin_router.post("", status_code=status.HTTP_201_CREATED)
async def create_ad(
    slot: str | None = Form(default=None),
    titulo: str | None = Form(default=None),
    texto: str | None = Form(default=None),
    href: str | None = Form(default=None),
    categoria: str | None = Form(default=None),
    tipo: str | None = Form(default=None),
    peso: str | None = Form(default=None),
    ativo: str | None = Form(default=None),
    adsense_slot: str | None = Form(default=None),
    imagem: UploadFile | None = File(default=None),
    _: SessionData = Depends(auth_dependencies.require_admin),
) -> dict:
    payload = errors.validate(
        schemas.AdCreate,
        slot=slot,
        titulo=titulo,
        texto=texto,
        href=href,
        categoria=categoria,
        tipo=tipo,
        peso=peso,
        ativo=ativo,
        adsense_slot=adsense_slot,
    )
    with errors.internal_errors("Erro ao criar anúncio."):
        return await service.create_ad(payload, imagem)


@admin_router.get("")
async def list_ads(
    _: SessionData = Depends(auth_dependencies.require_admin),
) -> list[dict]:
    with errors.internal_errors("Erro ao listar anúncios."):
        return await service.list_all_ads()


@admin_router.delete("/{ad_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ad(
    ad_id: str,
    _: SessionData = Depends(auth_dependencies.require_admin),
) -> Response:
    with errors.internal_errors("Erro ao apagar anúncio."):
        await service.delete_ad(ad_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
