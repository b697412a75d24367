"""
Admin persistence helpers.
"""

from __future__ import annotations

from core import db


async def ensure_admins_table() -> None:
    await db.execute(
        """
        CREATE TABLE IF NOT EXISTS admins (
          id SERIAL PRIMARY KEY,
          username VARCHAR(100) UNIQUE NOT NULL,
          password_hash TEXT NOT NULL,
          created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


async def get_admin_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, password_hash, created_at
        FROM admins
        WHERE username = $1
        """,
        username,
    )


async def create_admin(*, username: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO admins (username, password_hash)
        VALUES ($1, $2)
        RETURNING id, username, created_at
        """,
        username,
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create admin.")
    return row
