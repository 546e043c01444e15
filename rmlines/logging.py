from __future__ import annotations

import sys
from enum import IntEnum
from pathlib import Path
from typing import Callable, List, TextIO

from .entities import Document


class LogLevel(IntEnum):
    SILENT = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


Logger = Callable[[LogLevel, str], None]

_MARKERS = {
    LogLevel.ERROR: "[error]",
    LogLevel.WARN: "[!]",
    LogLevel.INFO: "[+]",
    LogLevel.DEBUG: "[i]",
    LogLevel.TRACE: "[.]",
}


def null_logger(level: LogLevel, message: str) -> None:
    return None


def get_logger(verbosity: int, stream: TextIO | None = None) -> Logger:
    """
    Build a logger callback that prints ``message`` only when ``level`` is at
    or below ``verbosity`` (the number of ``-v`` flags on the command line).
    """

    def log(level: LogLevel, message: str) -> None:
        if level == LogLevel.SILENT or verbosity < level:
            return
        print(f"{_MARKERS[level]} {message}", file=sys.stdout if stream is None else stream)

    return log


def format_document_records(document: Document) -> List[str]:
    lines: List[str] = []
    for layer_idx, layer in enumerate(document.layers):
        lines.append(f"layer[{layer_idx}] lines={layer.num_lines}")
        for line_idx, line in enumerate(layer.lines):
            lines.append(
                f"  line[{line_idx:04d}] brush={line.brush_type.name} color={line.brush_color.name} "
                f"size={line.brush_size:.6f} reserved=0x{line.reserved:08X} "
                f"unknown={line.unknown:.6f} points={line.num_points}"
            )
            for point_idx, point in enumerate(line.points):
                lines.append(
                    f"    pt[{point_idx:04d}] ({point.x:.6f},{point.y:.6f}) "
                    f"speed={point.speed:.6f} dir={point.direction:.6f} "
                    f"width={point.width:.6f} pressure={point.pressure:.6f}"
                )
    return lines


def log_document_records(document: Document, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    lines = format_document_records(document)
    destination.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
