"""Pack generated project files into a single in-memory zip archive.

:class:`ArchiveBundle` builds the archive off the event loop and hands the
finished bytes to an :class:`ArchiveSink`. Building is all-or-nothing: any
failure raises :class:`ArchiveBuildError` before the sink is called.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from io import BytesIO
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Protocol
from zipfile import ZIP_DEFLATED, LargeZipFile, ZipFile, ZipInfo

from nocodefolio.config import get_export_root, get_max_archive_bytes
from nocodefolio.models.export import ArchiveBuildError, ExportResult

logger = logging.getLogger(__name__)

__all__ = [
    "ArchiveBundle",
    "ArchiveSink",
    "DialogSink",
    "DirectorySink",
    "build_archive_bytes",
]

# Fixed entry timestamp so equal file mappings give identical archives.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_ARCHIVE_SUFFIX = ".zip"


class ArchiveSink(Protocol):
    """Somewhere a finished archive can be offered to the user."""

    def deliver(self, filename: str, payload: bytes) -> Path | None:
        """Store *payload* under *filename*; return the path, or None if declined."""
        ...


class DirectorySink:
    """Write archives into a directory on the local filesystem."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else get_export_root()

    def deliver(self, filename: str, payload: bytes) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / Path(filename).name
        partial = target.with_name(f".{target.name}.part")
        try:
            partial.write_bytes(payload)
            partial.replace(target)
        except Exception:
            partial.unlink(missing_ok=True)
            raise
        return target


class DialogSink:
    """Ask the user where to save the archive with a native file dialog."""

    def deliver(self, filename: str, payload: bytes) -> Path | None:
        import easygui as eg

        chosen = eg.filesavebox(
            msg="Choose where to save your portfolio project",
            title="Export Portfolio",
            default=filename,
            filetypes=[f"*{_ARCHIVE_SUFFIX}"],
        )
        if not chosen:
            return None

        path = Path(chosen)
        if path.suffix.lower() != _ARCHIVE_SUFFIX:
            path = path.with_suffix(_ARCHIVE_SUFFIX)
        return DirectorySink(path.parent).deliver(path.name, payload)


def _entry_name(path: str) -> str:
    """Return *path* as a relative, forward-slash archive entry name.

    Raises:
        ArchiveBuildError: If *path* is empty, absolute or escapes the root.
    """
    if not isinstance(path, str) or not path.strip():
        raise ArchiveBuildError(f"Invalid archive path: {path!r}")
    candidate = PurePosixPath(path.replace("\\", "/"))
    drive = candidate.parts[0] if candidate.parts else ""
    if candidate.is_absolute() or ".." in candidate.parts or ":" in drive:
        raise ArchiveBuildError(f"Archive path must be relative: {path!r}")
    parts = [part for part in candidate.parts if part != "."]
    if not parts:
        raise ArchiveBuildError(f"Invalid archive path: {path!r}")
    return "/".join(parts)


def _zip_write_text(zf: ZipFile, arcname: str, payload: bytes) -> None:
    info = ZipInfo(arcname)
    info.date_time = _ZIP_EPOCH
    info.compress_type = ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    zf.writestr(info, payload)


def build_archive_bytes(files: Mapping[str, str], max_bytes: int | None = None) -> bytes:
    """Return a zip archive holding every entry of *files*.

    Args:
        files: Mapping of relative path to text content. Nested paths become
            nested directories inside the archive.
        max_bytes: Cap on the total uncompressed size; defaults to
            :func:`~nocodefolio.config.get_max_archive_bytes`.

    Raises:
        ArchiveBuildError: If the mapping is empty, a path is invalid or
            duplicated, content is not text or holds lone surrogates, or
            the size cap is exceeded.
    """
    if not files:
        raise ArchiveBuildError("Nothing to archive: no files were generated")

    limit = max_bytes if max_bytes is not None else get_max_archive_bytes()
    buffer = BytesIO()
    total = 0
    seen: set[str] = set()
    try:
        with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as zf:
            for path, content in files.items():
                arcname = _entry_name(path)
                if arcname in seen:
                    raise ArchiveBuildError(f"Duplicate archive path: {arcname}")
                seen.add(arcname)
                if not isinstance(content, str):
                    raise ArchiveBuildError(f"Content for {arcname} is not text")

                try:
                    payload = content.encode("utf-8")
                except UnicodeEncodeError as exc:
                    msg = f"Content for {arcname} cannot be encoded as UTF-8: {exc.reason}"
                    raise ArchiveBuildError(msg) from exc
                total += len(payload)
                if total > limit:
                    msg = f"Archive content exceeds the {limit:,} byte limit"
                    raise ArchiveBuildError(msg)
                _zip_write_text(zf, arcname, payload)
                logger.debug("Added %s (%d bytes)", arcname, len(payload))
    except (LargeZipFile, OSError, ValueError) as exc:
        raise ArchiveBuildError(f"Could not build archive: {exc}") from exc

    return buffer.getvalue()


class ArchiveBundle:
    """A generated project waiting to be zipped and saved.

    The file mapping is copied on construction, so later changes to the
    caller's dict do not leak into the archive.
    """

    def __init__(
        self,
        files: Mapping[str, str],
        *,
        sink: ArchiveSink | None = None,
        max_bytes: int | None = None,
    ) -> None:
        self._files = dict(files)
        self._sink = sink
        self._max_bytes = max_bytes
        self._payload: bytes | None = None

    @property
    def files(self) -> Mapping[str, str]:
        return MappingProxyType(self._files)

    async def materialize(self) -> bytes:
        """Build the archive in a worker thread and return its bytes.

        Raises:
            ArchiveBuildError: If the archive cannot be built.
        """
        if self._payload is None:
            self._payload = await asyncio.to_thread(
                build_archive_bytes, self._files, self._max_bytes
            )
        return self._payload

    async def save(self, filename: str) -> ExportResult:
        """Materialize the archive and offer it to the sink as *filename*.

        A missing ``.zip`` extension is appended. The sink is only called
        once the archive has been built completely, and it runs on the
        calling thread so dialog sinks open their window there.
        """
        if not filename.lower().endswith(_ARCHIVE_SUFFIX):
            filename = f"{filename}{_ARCHIVE_SUFFIX}"

        payload = await self.materialize()
        sink = self._sink if self._sink is not None else DirectorySink()
        path = sink.deliver(filename, payload)
        return ExportResult(
            filename=filename,
            size_bytes=len(payload),
            file_count=len(self._files),
            path=path,
        )

    download = save
