"""
Command-line front end.

    photodoc build a.jpg b.png -o Images.pdf --page-size auto --sort descending
    photodoc info Images.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from photodoc import __version__
from photodoc.collection import SortOrder
from photodoc.config import ExportConfig
from photodoc.layout import PageSize
from photodoc.logging_utils import configure_logging
from photodoc.output import FileExportSink, describe_pdf
from photodoc.session import Session
from photodoc.settings import SettingsStore
from photodoc.sources import FileImageSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photodoc",
        description="Combine images into a multi-page PDF, one image per page.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a PDF from image files")
    build.add_argument("images", nargs="+", type=Path, help="Image files, in page order")
    build.add_argument("-o", "--output", type=Path, help="Output PDF (default from settings)")
    build.add_argument(
        "--page-size",
        type=PageSize.parse,
        help="a4, letter or auto (default from settings, else a4)",
    )
    build.add_argument("--sort", type=SortOrder.parse, help="ascending or descending")
    build.add_argument(
        "--front",
        type=int,
        metavar="INDEX",
        help="Move the image at INDEX (0-based) to the first page",
    )
    build.add_argument("--limit", type=int, help="Maximum number of images to take")
    build.add_argument("--config", type=Path, help="Settings JSON file")

    info = sub.add_parser("info", help="Show page sizes of a PDF")
    info.add_argument("pdf", type=Path)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "build":
        return _run_build(args, parser)
    return _run_info(args)


def _run_build(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    config = ExportConfig()
    if args.config is not None:
        store = SettingsStore(args.config)
        config = store.to_config()
        logger.debug(f"Using settings from {args.config}: {config}")

    if args.limit is not None and args.limit <= 0:
        parser.error("--limit must be positive")

    limit = args.limit if args.limit is not None else config.selection_limit
    output = args.output or Path(config.default_filename)

    with Session(config) as session:
        if args.page_size is not None:
            session.page_size = args.page_size

        session.acquire(FileImageSource(args.images, selection_limit=limit))
        if session.image_count == 0:
            _print_alerts(session)
            print("No images could be loaded", file=sys.stderr)
            return 1

        if args.front is not None:
            session.move_to_front(args.front)
        if args.sort is not None:
            session.sort_images(args.sort)

        result = session.export(FileExportSink(output))
        _print_alerts(session)

    return 0 if result.success else 1


def _run_info(args: argparse.Namespace) -> int:
    if not args.pdf.is_file():
        print(f"No such file: {args.pdf}", file=sys.stderr)
        return 1
    try:
        summary = describe_pdf(args.pdf)
    except RuntimeError as e:
        print(f"Could not read {args.pdf}: {e}", file=sys.stderr)
        return 1

    print(f"{args.pdf}: {summary.page_count} page(s)")
    for number, ((width, height), images) in enumerate(
        zip(summary.page_sizes, summary.image_counts), start=1
    ):
        print(f"  page {number}: {width:g} x {height:g} pt, {images} image(s)")
    return 0


def _print_alerts(session: Session) -> None:
    for alert in session.pop_alerts():
        stream = sys.stdout if alert.title == "Success" else sys.stderr
        print(f"{alert.title}: {alert.message}", file=stream)


if __name__ == "__main__":
    raise SystemExit(main())
