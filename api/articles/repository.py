"""
Article persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, titulo, resumo, conteudo, categoria, imagem, created_at"


async def list_articles(*, categoria: str | None = None) -> list[dict]:
    if categoria:
        return await db.fetch_all(
            f"""
            SELECT {_COLUMNS}
            FROM noticias
            WHERE categoria = $1
            ORDER BY created_at DESC
            """,
            categoria,
        )
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM noticias
        ORDER BY created_at DESC
        """
    )


async def get_article(article_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM noticias
        WHERE id = $1
        """,
        article_id,
    )


async def insert_article(
    *,
    titulo: str,
    resumo: str,
    conteudo: str,
    categoria: str,
    imagem: str | None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO noticias (titulo, resumo, conteudo, categoria, imagem)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COLUMNS}
        """,
        titulo,
        resumo,
        conteudo,
        categoria,
        imagem,
    )
    if row is None:
        raise RuntimeError("Failed to insert article.")
    return row


async def delete_article(article_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM noticias
        WHERE id = $1
        RETURNING id
        """,
        article_id,
    )
    return row is not None
