from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from nocodefolio.models import ArchiveBuildError, ExportResult
from nocodefolio.services.archive import ArchiveSink, DialogSink, DirectorySink
from nocodefolio.services.export import default_archive_name, export_portfolio
from nocodefolio.templates import list_templates


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nocodefolio",
        description="Export a portfolio record as a ready-to-build Next.js project.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    export = commands.add_parser("export", help="Generate a project archive from a record")
    export.add_argument("record", help="Path to a portfolio record JSON file")
    export.add_argument(
        "--theme",
        help=f"Override the record's theme ({', '.join(list_templates())})",
    )
    target = export.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", help="Path of the .zip file to write")
    target.add_argument(
        "--dialog",
        action="store_true",
        help="Choose the save location with a file dialog",
    )

    commands.add_parser("themes", help="List the available themes")
    return parser


def _load_record(path: Path) -> dict | None:
    """Read a portfolio record from *path*.

    Returns:
        The decoded JSON object, or None if it could not be read.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        print(f"❌ Could not read portfolio record: {exc}")
        return None
    if not isinstance(data, dict):
        print("❌ Portfolio record must be a JSON object.")
        return None
    return data


def _display_export_result(result: ExportResult) -> None:
    print("\n✅ Portfolio exported:")
    print(f"   • Archive: {result.filename}")
    print(f"   • Files: {result.file_count}")
    print(f"   • Size: {result.size_bytes:,} bytes")
    print(f"   • Saved to: {result.path}")
    print("\nUnzip it, then run `npm install` and `npm run dev`.")


def _run_export(args: argparse.Namespace) -> int:
    data = _load_record(Path(args.record))
    if data is None:
        return 1
    if args.theme:
        data = {**data, "theme": args.theme}

    sink: ArchiveSink
    if args.output:
        output = Path(args.output)
        sink = DirectorySink(output.parent)
        filename = output.name
    else:
        sink = DialogSink() if args.dialog else DirectorySink()
        filename = default_archive_name(data)

    try:
        result = asyncio.run(export_portfolio(data, filename, sink=sink))
    except ArchiveBuildError as exc:
        print(f"\n❌ Export failed: {exc}")
        return 1

    if result.path is None:
        print("❌ No save location selected. Exiting.")
        return 1

    _display_export_result(result)
    return 0


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and run the requested command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "themes":
        for theme in list_templates():
            print(theme)
        return 0
    return _run_export(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
