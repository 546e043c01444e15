"""
Core reMarkable .lines (v5) decoding and SVG projection utilities.
"""

from .entities import CANVAS_HEIGHT, CANVAS_WIDTH, HEADER, BrushColor, BrushType, Document, Layer, Line, Point
from .errors import DecodeError, HeaderMismatch, RenderError, TruncatedInput, UnknownEnumValue
from .geometry import (
    LINE_TO,
    MOVE_TO,
    STROKE_WIDTH,
    PathCommand,
    PathGroup,
    StrokePath,
    VectorDocument,
    format_number,
    project,
)
from .lines import decode, decode_bytes, encode
from .logging import LogLevel, get_logger, log_document_records, null_logger
from .raster import DEFAULT_PREVIEW_HEIGHT, render_image, render_png
from .svg import to_drawing, to_svg_string, write_svg

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "HEADER",
    "BrushColor",
    "BrushType",
    "Document",
    "Layer",
    "Line",
    "Point",
    "DecodeError",
    "HeaderMismatch",
    "RenderError",
    "TruncatedInput",
    "UnknownEnumValue",
    "LINE_TO",
    "MOVE_TO",
    "STROKE_WIDTH",
    "PathCommand",
    "PathGroup",
    "StrokePath",
    "VectorDocument",
    "format_number",
    "project",
    "decode",
    "decode_bytes",
    "encode",
    "LogLevel",
    "get_logger",
    "log_document_records",
    "null_logger",
    "DEFAULT_PREVIEW_HEIGHT",
    "render_image",
    "render_png",
    "to_drawing",
    "to_svg_string",
    "write_svg",
]
