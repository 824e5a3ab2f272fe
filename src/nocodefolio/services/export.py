"""Portfolio export: dispatch to a theme, bundle the files, save the archive."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from nocodefolio.models.export import ArchiveBuildError, ExportResult
from nocodefolio.models.portfolio import PortfolioRecord
from nocodefolio.services.archive import ArchiveBundle, ArchiveSink
from nocodefolio.templates import generate_project_files

logger = logging.getLogger(__name__)

__all__ = [
    "default_archive_name",
    "export_portfolio",
    "generate_portfolio",
]


def _sanitize_filename(name: str) -> str:
    """Remove or replace characters that are invalid in filenames."""
    sanitized = re.sub(r'[<>:"/\\|?*\s]+', "_", name)
    sanitized = sanitized.strip("._ ")
    return sanitized or "portfolio"


def default_archive_name(data: Mapping[str, Any] | PortfolioRecord | None) -> str:
    """Return ``<name>_<timestamp>.zip`` for the record's display name."""
    name = None
    if isinstance(data, PortfolioRecord):
        name = data.name
    elif isinstance(data, Mapping):
        name = data.get("name")
    if not isinstance(name, str):
        name = ""

    base = _sanitize_filename(re.sub(r"<[^>]*>", "", name))
    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    return f"{base}_{timestamp}.zip"


def generate_portfolio(
    data: Mapping[str, Any] | PortfolioRecord | None,
    *,
    sink: ArchiveSink | None = None,
    max_bytes: int | None = None,
) -> ArchiveBundle:
    """Generate the project for *data*'s theme and wrap it in a bundle.

    Nothing is zipped until :meth:`ArchiveBundle.materialize` or
    :meth:`ArchiveBundle.download` is awaited.
    """
    files = generate_project_files(data)
    return ArchiveBundle(files, sink=sink, max_bytes=max_bytes)


async def export_portfolio(
    data: Mapping[str, Any] | PortfolioRecord | None,
    filename: str | None = None,
    *,
    sink: ArchiveSink | None = None,
    max_bytes: int | None = None,
) -> ExportResult:
    """Generate, zip and save a portfolio project.

    Args:
        data: Portfolio record or partial mapping.
        filename: Archive name offered to the sink; defaults to
            :func:`default_archive_name`.
        sink: Where to deliver the archive; defaults to the export directory.
        max_bytes: Optional cap on the uncompressed archive size.

    Returns:
        Details of the saved archive; ``path`` is None if the sink declined.

    Raises:
        ArchiveBuildError: If the archive could not be built. Nothing is
            saved in that case.
    """
    bundle = generate_portfolio(data, sink=sink, max_bytes=max_bytes)
    filename = filename or default_archive_name(data)
    try:
        result = await bundle.download(filename)
    except ArchiveBuildError:
        logger.exception("Failed to export portfolio archive %s", filename)
        raise

    if result.path is None:
        logger.info("Export of %s cancelled: no save location chosen", result.filename)
        return result

    logger.info(
        "Exported %s (%d files, %d bytes) to %s",
        result.filename,
        result.file_count,
        result.size_bytes,
        result.path,
    )
    return result
