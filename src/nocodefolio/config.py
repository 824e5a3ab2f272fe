"""Environment-driven settings for exports."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_ARCHIVE_BYTES = 25 * 1024 * 1024  # 25 MiB


def get_export_root() -> Path:
    """Return the directory exported archives are written to by default."""
    env_root = os.getenv("NOCODEFOLIO_EXPORT_DIR")
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path.cwd() / "exports"


def get_max_archive_bytes() -> int:
    """Return the upper bound on the size of a generated archive."""
    raw = os.getenv("NOCODEFOLIO_MAX_ARCHIVE_BYTES")
    if not raw:
        return DEFAULT_MAX_ARCHIVE_BYTES
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer NOCODEFOLIO_MAX_ARCHIVE_BYTES=%r", raw)
        return DEFAULT_MAX_ARCHIVE_BYTES
    if value <= 0:
        logger.warning("Ignoring non-positive NOCODEFOLIO_MAX_ARCHIVE_BYTES=%r", raw)
        return DEFAULT_MAX_ARCHIVE_BYTES
    return value
