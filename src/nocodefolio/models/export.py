"""Data models for archive export."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class ArchiveBuildError(Exception):
    """Raised when a project archive cannot be built; nothing is saved."""


@dataclass(slots=True)
class ExportResult:
    """Outcome of a successful export.

    Attributes:
        filename: Name the archive was offered under.
        size_bytes: Size of the compressed archive.
        file_count: Number of entries in the archive.
        path: Where the sink stored the archive, if it reports one.
    """

    filename: str
    size_bytes: int
    file_count: int
    path: Path | None = None
