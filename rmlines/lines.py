"""
Decoder (and matching encoder) for version 5 reMarkable ``.lines`` pages.

Layout, all little-endian with no padding:
    * 44-byte ASCII magic header
    * int32 layer count, then per layer:
        * int32 line count, then per line:
            * int32 brush type, int32 brush color, uint32 reserved,
              float32 unknown, float32 brush size, int32 point count
            * point count x (six float32: x, y, speed, direction, width, pressure)

Counts are only known once their prefix has been consumed, so the stream is
read strictly front to back.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO, List, Sequence, Tuple

from .entities import HEADER, BrushColor, BrushType, Document, Layer, Line, Point
from .errors import HeaderMismatch, TruncatedInput
from .logging import LogLevel, Logger, null_logger

S_COUNT = struct.Struct("<i")
S_LINE = struct.Struct("<iiIffi")
S_POINT = struct.Struct("<ffffff")

LINE_FIELDS = ("brush_type", "brush_color", "reserved", "unknown", "brush_size", "point_count")
POINT_FIELDS = ("x", "y", "speed", "direction", "width", "pressure")

# Every field in the grammar is four bytes wide.
FIELD_SIZE = 4


def _field_at(fields: Sequence[str], consumed: int) -> str:
    return fields[min(consumed // FIELD_SIZE, len(fields) - 1)]


def _short_read_detail(expected: int, got: int, where: str | None) -> str:
    detail = f"expected {expected} bytes, got {got}"
    return f"{where}; {detail}" if where else detail


def _read_record(
    source: BinaryIO,
    fmt: struct.Struct,
    level: str,
    fields: Sequence[str],
    where: str | None = None,
) -> Tuple:
    buff = bytearray()
    while len(buff) < fmt.size:
        try:
            chunk = source.read(fmt.size - len(buff))
        except OSError as exc:
            raise TruncatedInput(level, _field_at(fields, len(buff)), str(exc)) from exc
        if not chunk:
            raise TruncatedInput(
                level,
                _field_at(fields, len(buff)),
                _short_read_detail(fmt.size, len(buff), where),
            )
        buff += chunk
    return fmt.unpack(bytes(buff))


def _read_header(source: BinaryIO) -> bytes:
    buff = bytearray()
    while len(buff) < len(HEADER):
        try:
            chunk = source.read(len(HEADER) - len(buff))
        except OSError as exc:
            raise TruncatedInput("header", "magic", str(exc)) from exc
        if not chunk:
            break
        buff += chunk
    return bytes(buff)


def _read_count(source: BinaryIO, field: str, where: str | None = None) -> int:
    (count,) = _read_record(source, S_COUNT, "layer", (field,), where)
    return count


def _read_point(source: BinaryIO) -> Point:
    x, y, speed, direction, width, pressure = _read_record(source, S_POINT, "point", POINT_FIELDS)
    return Point(x=x, y=y, speed=speed, direction=direction, width=width, pressure=pressure)


def _read_line(source: BinaryIO) -> Line:
    raw_type, raw_color, reserved, unknown, brush_size, num_points = _read_record(
        source, S_LINE, "line", LINE_FIELDS
    )
    brush_type = BrushType.from_value(raw_type)
    brush_color = BrushColor.from_value(raw_color)
    # Negative counts yield no records; the declared value is kept for encode().
    points = tuple(_read_point(source) for _ in range(max(num_points, 0)))
    return Line(
        brush_type=brush_type,
        brush_color=brush_color,
        reserved=reserved,
        unknown=unknown,
        brush_size=brush_size,
        num_points=num_points,
        points=points,
    )


def _read_layer(source: BinaryIO) -> Layer:
    num_lines = _read_count(source, "line_count")
    lines = tuple(_read_line(source) for _ in range(max(num_lines, 0)))
    return Layer(num_lines=num_lines, lines=lines)


def decode(source: BinaryIO, *, logger: Logger = null_logger) -> Document:
    """
    Decode one page from an open binary stream. Any failure raises a
    ``DecodeError`` subclass; no partially built document is returned.
    """

    logger(LogLevel.INFO, "parsing file")
    header = _read_header(source)
    logger(LogLevel.DEBUG, f"actual header is: {header!r}")
    logger(LogLevel.DEBUG, f"expected header is: {HEADER!r}")
    if header != HEADER:
        raise HeaderMismatch(header, HEADER)
    logger(LogLevel.INFO, "header matches .rm v5 file")

    num_layers = _read_count(source, "layer_count", where="nothing follows the header")
    layers: List[Layer] = []
    for idx in range(max(num_layers, 0)):
        layer = _read_layer(source)
        logger(LogLevel.TRACE, f"layer[{idx}] declared {layer.num_lines} lines")
        layers.append(layer)

    document = Document(num_layers=num_layers, layers=tuple(layers))
    logger(
        LogLevel.INFO,
        f"decoded {len(document.layers)} layers, {document.line_count} lines, "
        f"{document.point_count} points",
    )
    return document


def decode_bytes(blob: bytes, *, logger: Logger = null_logger) -> Document:
    return decode(io.BytesIO(blob), logger=logger)


def _check_count(declared: int, actual: int, what: str) -> None:
    if max(declared, 0) != actual:
        raise ValueError(f"declared {what} count {declared} disagrees with {actual} records")


def encode(document: Document) -> bytes:
    """Write ``document`` back out in the exact grammar ``decode`` accepts."""

    chunks: list[bytes] = [HEADER]
    _check_count(document.num_layers, len(document.layers), "layer")
    chunks.append(S_COUNT.pack(document.num_layers))
    for layer in document.layers:
        _check_count(layer.num_lines, len(layer.lines), "line")
        chunks.append(S_COUNT.pack(layer.num_lines))
        for line in layer.lines:
            _check_count(line.num_points, len(line.points), "point")
            chunks.append(
                S_LINE.pack(
                    int(line.brush_type),
                    int(line.brush_color),
                    line.reserved,
                    line.unknown,
                    line.brush_size,
                    line.num_points,
                )
            )
            for point in line.points:
                chunks.append(
                    S_POINT.pack(
                        point.x,
                        point.y,
                        point.speed,
                        point.direction,
                        point.width,
                        point.pressure,
                    )
                )
    return b"".join(chunks)
