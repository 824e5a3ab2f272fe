"""Tests for the nocodefolio command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch
from zipfile import ZipFile

import pytest

from nocodefolio.cli import main


@pytest.fixture
def record_file(tmp_path: Path, sample_record: dict) -> Path:
    path = tmp_path / "record.json"
    path.write_text(json.dumps(sample_record), encoding="utf-8")
    return path


class TestThemesCommand:
    def test_lists_themes(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["themes"]) == 0
        assert capsys.readouterr().out.split() == ["galaxy", "neon"]


class TestExportCommand:
    def test_export_to_output_path(
        self, record_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        output = tmp_path / "site" / "jane.zip"

        assert main(["export", str(record_file), "-o", str(output)]) == 0
        assert output.exists()
        assert "✅ Portfolio exported" in capsys.readouterr().out

    def test_output_without_extension(self, record_file: Path, tmp_path: Path) -> None:
        assert main(["export", str(record_file), "--output", str(tmp_path / "jane")]) == 0
        assert (tmp_path / "jane.zip").exists()

    def test_export_to_default_directory(self, record_file: Path, export_dir: Path) -> None:
        assert main(["export", str(record_file)]) == 0

        archives = list(export_dir.glob("Jane_Doe_*.zip"))
        assert len(archives) == 1

    def test_theme_override(self, record_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "neon.zip"

        assert main(["export", str(record_file), "--theme", "neon", "-o", str(output)]) == 0
        with ZipFile(output) as zf:
            manifest = json.loads(zf.read("package.json"))
        assert manifest["name"] == "jane-doe-nocodefolio-neon"

    def test_unknown_theme_falls_back(self, record_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "site.zip"

        assert main(["export", str(record_file), "--theme", "retro", "-o", str(output)]) == 0
        with ZipFile(output) as zf:
            assert b"nocodefolio-galaxy" in zf.read("package.json")

    def test_dialog_cancelled(
        self, record_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        easygui = MagicMock()
        easygui.filesavebox.return_value = None
        with patch.dict(sys.modules, {"easygui": easygui}):
            assert main(["export", str(record_file), "--dialog"]) == 1
        assert "No save location selected" in capsys.readouterr().out

    def test_dialog_choice(self, record_file: Path, tmp_path: Path) -> None:
        easygui = MagicMock()
        easygui.filesavebox.return_value = str(tmp_path / "picked.zip")
        with patch.dict(sys.modules, {"easygui": easygui}):
            assert main(["export", str(record_file), "--dialog"]) == 0
        assert (tmp_path / "picked.zip").exists()

    def test_missing_record_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["export", str(tmp_path / "missing.json")]) == 1
        assert "Could not read portfolio record" in capsys.readouterr().out

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["export", str(path)]) == 1

    def test_record_must_be_object(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")

        assert main(["export", str(path)]) == 1
        assert "must be a JSON object" in capsys.readouterr().out

    def test_size_limit_exceeded(
        self,
        record_file: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("NOCODEFOLIO_MAX_ARCHIVE_BYTES", "64")
        output = tmp_path / "site.zip"

        assert main(["export", str(record_file), "-o", str(output)]) == 1
        assert not output.exists()
        assert "Export failed" in capsys.readouterr().out


class TestMain:
    def test_keyboard_interrupt(self) -> None:
        with patch("nocodefolio.cli.run_cli", side_effect=KeyboardInterrupt):
            assert main(["themes"]) == 130

    def test_unexpected_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("nocodefolio.cli.run_cli", side_effect=RuntimeError("boom")):
            assert main(["themes"]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().out
