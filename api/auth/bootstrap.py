"""
Startup bootstrap: make sure the admin configured in the environment exists.

Known limitation: the existence check and the insert are not atomic. Two
processes starting at the same time with a fresh database can race; the loser
fails on the UNIQUE(username) constraint. Deployment is single-instance.
"""

from __future__ import annotations

import logging

from core import settings

from . import repository, security

logger = logging.getLogger(__name__)


async def ensure_env_admin() -> dict | None:
    """
    Create the `ADMIN_USER`/`ADMIN_PASS` admin if it is not there yet.

    Returns the created row, or None when nothing was inserted.
    """
    credentials = settings.admin_credentials()
    if credentials is None:
        logger.info("admin_bootstrap_skipped reason=missing_credentials")
        return None

    username, password = credentials
    await repository.ensure_admins_table()

    existing = await repository.get_admin_by_username(username)
    if existing is not None:
        logger.info("admin_bootstrap_exists username=%s id=%s", username, existing["id"])
        return None

    row = await repository.create_admin(
        username=username,
        password_hash=security.hash_password(password),
    )
    logger.info("admin_bootstrap_created username=%s id=%s", username, row["id"])
    return row
