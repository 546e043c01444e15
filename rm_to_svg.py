#!/usr/bin/env python3
"""
Convert a reMarkable .rm (v5 lines) page into an SVG.

    python rm_to_svg.py page.rm -o page.svg -vvv \
        --preview page.png --preview-size 512
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from rmlines import (
    DEFAULT_PREVIEW_HEIGHT,
    DecodeError,
    LogLevel,
    RenderError,
    decode,
    get_logger,
    log_document_records,
    project,
    render_png,
    to_svg_string,
)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert .rm v5 files to SVG.")
    parser.add_argument("input", type=Path, help="Path to the source .rm v5 file")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Optional SVG destination (defaults to <input>.svg)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (repeat up to five times)",
    )
    parser.add_argument(
        "--dump-records",
        type=Path,
        help="Write every decoded layer/line/point record to this path",
    )
    parser.add_argument(
        "--json",
        type=Path,
        help="Write the decoded document to this path as JSON",
    )
    parser.add_argument("--preview", type=Path, help="Path for a PNG preview of the page")
    parser.add_argument(
        "--preview-size",
        type=int,
        default=DEFAULT_PREVIEW_HEIGHT,
        help="Preview height in pixels",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    log = get_logger(args.verbose)
    log(LogLevel.INFO, "logger initialized")
    log(LogLevel.INFO, f"Input is {args.input}")

    if not args.input.is_file():
        print("[error] input file does not exist", file=sys.stderr)
        return 1

    try:
        with args.input.open("rb") as handle:
            document = decode(handle, logger=log)
    except DecodeError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[error] couldn't open {args.input}, {exc}", file=sys.stderr)
        return 1

    log(LogLevel.INFO, f"Projecting {document.line_count} lines onto the canvas")
    vector = project(document)
    try:
        svg_text = to_svg_string(vector)
    except RenderError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    output_path = args.output or args.input.with_suffix(".svg")
    try:
        if args.dump_records:
            log_document_records(document, args.dump_records)
            log(LogLevel.INFO, f"Record dump written to {args.dump_records}")
        if args.json:
            args.json.parent.mkdir(parents=True, exist_ok=True)
            args.json.write_text(json.dumps(document.to_dict(), indent=2), encoding="utf-8")
            log(LogLevel.INFO, f"JSON written to {args.json}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(svg_text, encoding="utf-8")
        log(LogLevel.INFO, f"SVG written to {output_path}")

        if args.preview:
            render_png(vector, args.preview, args.preview_size)
            log(LogLevel.INFO, f"Preview PNG written to {args.preview}")
    except OSError as exc:
        print(f"[error] couldn't write output, {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
