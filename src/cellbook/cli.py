from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .export import available_formats, export_text
from .jupyter import import_ipynb_file
from .model import Notebook
from .parse import parse_file

logger = logging.getLogger(__name__)


def _load(path: Path) -> Notebook:
    if path.suffix.lower() == ".ipynb":
        return import_ipynb_file(str(path))
    return parse_file(str(path))


def _cmd_export(path: Path, fmt: str, output: str | None) -> int:
    try:
        nb = _load(path)
        text = export_text(nb, fmt)
        if output:
            Path(output).write_text(text + "\n", encoding="utf-8")
            logger.info("Wrote %s export of %s to %s", fmt, path, output)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if not output:
        print(text)
    return 0


def _cmd_formats() -> int:
    for name in available_formats():
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cellbook", description="Cellbook notebook exporter")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_export = sub.add_parser("export", help="Export a notebook (.yaml or .ipynb)")
    p_export.add_argument("file", help="Notebook description (.yaml) or .ipynb file")
    p_export.add_argument(
        "-f",
        "--format",
        dest="fmt",
        default="html",
        choices=available_formats(),
        help="Output format (default: html)",
    )
    p_export.add_argument("-o", "--output", help="Output file (default: stdout)")

    sub.add_parser("formats", help="List available export formats")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.cmd == "export":
        return _cmd_export(Path(args.file), args.fmt, args.output)
    if args.cmd == "formats":
        return _cmd_formats()

    parser.error(f"unknown command: {args.cmd}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
