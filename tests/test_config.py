from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nocodefolio.config import (
    DEFAULT_MAX_ARCHIVE_BYTES,
    get_export_root,
    get_max_archive_bytes,
)


class TestExportRoot:
    def test_from_environment(self, export_dir: Path) -> None:
        assert get_export_root() == export_dir.resolve()

    def test_defaults_to_cwd_exports(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.delenv("NOCODEFOLIO_EXPORT_DIR")
        monkeypatch.chdir(tmp_path)
        assert get_export_root() == Path.cwd() / "exports"


class TestMaxArchiveBytes:
    def test_default(self) -> None:
        assert get_max_archive_bytes() == DEFAULT_MAX_ARCHIVE_BYTES

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NOCODEFOLIO_MAX_ARCHIVE_BYTES", "1024")
        assert get_max_archive_bytes() == 1024

    @pytest.mark.parametrize("raw", ["lots", "0", "-5", "1.5"])
    def test_invalid_values_ignored(
        self, raw: str, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("NOCODEFOLIO_MAX_ARCHIVE_BYTES", raw)
        with caplog.at_level(logging.WARNING, logger="nocodefolio.config"):
            assert get_max_archive_bytes() == DEFAULT_MAX_ARCHIVE_BYTES
        assert "NOCODEFOLIO_MAX_ARCHIVE_BYTES" in caplog.text
