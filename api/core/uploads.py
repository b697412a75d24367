"""
Image uploads for articles and ads.

Files land in `settings.uploads_dir()` and are referenced by their public
path `/uploads/<name>`. Serving that directory is left to the web server.
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from fastapi import UploadFile

from . import settings

PUBLIC_PREFIX = "/uploads"
CHUNK_SIZE = 1024 * 1024  # 1 MiB

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^a-z0-9._-]")


def safe_filename(original: str) -> str:
    name = _WHITESPACE.sub("_", (original or "").lower())
    return _UNSAFE.sub("", name)


def has_file(upload: UploadFile | None) -> bool:
    # Browsers send an empty part (no filename) when no file was picked.
    return upload is not None and bool(upload.filename)


async def save_image(upload: UploadFile | None, *, directory: Path | None = None) -> str | None:
    """
    Persist an uploaded image and return its public path, or None if absent.
    """
    if not has_file(upload):
        return None

    target_dir = directory or settings.uploads_dir()
    target_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{int(time.time() * 1000)}-{safe_filename(upload.filename or '')}"
    path = target_dir / filename

    with path.open("wb") as f:
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            f.write(chunk)

    logger.info("upload_saved filename=%s", filename)
    return f"{PUBLIC_PREFIX}/{filename}"
