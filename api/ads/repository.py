"""
Advertisement persistence (raw SQL).

Ad selection is ranked entirely in SQL:
- only active ads whose slot matches exactly
- with a category: ads for that category or global ones (categoria IS NULL),
  exact category first, then higher `peso`, then newest
- without a category: higher `peso`, then newest
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, slot, titulo, texto, href, imagem, categoria, tipo, peso, ativo, adsense_slot, created_at"


async def select_ad(*, slot: str, categoria: str | None = None) -> dict | None:
    if categoria:
        return await db.fetch_one(
            f"""
            SELECT {_COLUMNS}
            FROM ads
            WHERE ativo = true
              AND slot = $1
              AND (categoria IS NULL OR categoria = $2)
            ORDER BY
              CASE WHEN categoria = $2 THEN 0 ELSE 1 END,
              peso DESC,
              created_at DESC
            LIMIT 1
            """,
            slot,
            categoria,
        )
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM ads
        WHERE ativo = true
          AND slot = $1
        ORDER BY
          peso DESC,
          created_at DESC
        LIMIT 1
        """,
        slot,
    )


async def list_ads() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM ads
        ORDER BY created_at DESC
        """
    )


async def insert_ad(
    *,
    slot: str,
    titulo: str | None,
    texto: str | None,
    href: str | None,
    imagem: str | None,
    categoria: str | None,
    tipo: str,
    peso: int,
    ativo: bool,
    adsense_slot: str | None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO ads (slot, titulo, texto, href, imagem, categoria, tipo, peso, ativo, adsense_slot)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
        RETURNING {_COLUMNS}
        """,
        slot,
        titulo,
        texto,
        href,
        imagem,
        categoria,
        tipo,
        peso,
        ativo,
        adsense_slot,
    )
    if row is None:
        raise RuntimeError("Failed to insert ad.")
    return row


async def delete_ad(ad_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM ads
        WHERE id = $1
        RETURNING id
        """,
        ad_id,
    )
    return row is not None
