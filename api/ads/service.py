"""
Advertisement business logic.

Public side: pick the single best ad for a slot (or None).
Admin side: create, list and delete ads.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, UploadFile, status

from core import errors, uploads

from . import repository, schemas

NOT_FOUND_MESSAGE = "Anúncio não encontrado."

logger = logging.getLogger(__name__)


async def select_ad(slot: str | None, categoria: str | None = None) -> dict | None:
    """
    Return the best-ranked active ad for `slot`, or None when nothing matches.

    `categoria` only narrows/ranks candidates; an unknown category is not an
    error, it just leaves the global ads.
    """
    if not slot:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=schemas.SLOT_REQUIRED_MESSAGE,
        )
    return await repository.select_ad(slot=slot, categoria=categoria or None)


async def create_ad(payload: schemas.AdCreate, image: UploadFile | None = None) -> dict:
    imagem = await uploads.save_image(image)
    row = await repository.insert_ad(
        slot=payload.slot,
        titulo=payload.titulo,
        texto=payload.texto,
        href=payload.href,
        imagem=imagem,
        categoria=payload.categoria,
        tipo=payload.tipo,
        peso=payload.peso,
        ativo=payload.ativo,
        adsense_slot=payload.adsense_slot,
    )
    logger.info("ad_created id=%s slot=%s categoria=%s", row["id"], row["slot"], row["categoria"])
    return row


async def list_all_ads() -> list[dict]:
    return await repository.list_ads()


async def delete_ad(raw_id: str) -> None:
    ad_id = errors.parse_id(raw_id)
    if not await repository.delete_ad(ad_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)
    logger.info("ad_deleted id=%s", ad_id)
