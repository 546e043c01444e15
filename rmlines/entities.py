from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .errors import UnknownEnumValue

HEADER = b"reMarkable .lines file, version=5          "
CANVAS_WIDTH = 1404
CANVAS_HEIGHT = 1872


class BrushType(IntEnum):
    # Values 0-11 come from the first tool revision, 12+ from the second.
    PAINTBRUSH = 0
    PENCIL_TILT = 1
    PEN = 2
    MARKER = 3
    FINELINER = 4
    HIGHLIGHTER = 5
    ERASER = 6
    PENCIL_SHARP = 7
    RUBBER_AREA = 8
    ERASE_ALL = 9
    SELECTION_BRUSH_1 = 10
    SELECTION_BRUSH_2 = 11
    PAINTBRUSH_2 = 12
    MECHANICAL_PENCIL = 13
    PENCIL_2 = 14
    BALLPOINT_PEN_2 = 15
    MARKER_2 = 16
    FINELINER_2 = 17
    HIGHLIGHTER_2 = 18
    CALLIGRAPHY = 21

    @classmethod
    def from_value(cls, value: int) -> "BrushType":
        try:
            return cls(value)
        except ValueError:
            raise UnknownEnumValue("brush_type", value) from None


class BrushColor(IntEnum):
    BLACK = 0
    GREY = 1
    WHITE = 2

    @classmethod
    def from_value(cls, value: int) -> "BrushColor":
        try:
            return cls(value)
        except ValueError:
            raise UnknownEnumValue("brush_color", value) from None


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    speed: float = 0.0
    direction: float = 0.0
    width: float = 0.0
    pressure: float = 0.0

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "speed": self.speed,
            "direction": self.direction,
            "width": self.width,
            "pressure": self.pressure,
        }


@dataclass(frozen=True)
class Line:
    """
    One continuous stroke. ``reserved`` and ``unknown`` are carried through
    untouched so the record can be written back byte-for-byte.
    """

    brush_type: BrushType
    brush_color: BrushColor
    reserved: int
    unknown: float
    brush_size: float
    num_points: int
    points: Tuple[Point, ...] = ()

    def to_dict(self) -> dict:
        return {
            "brush_type": self.brush_type.name,
            "brush_color": self.brush_color.name,
            "reserved": self.reserved,
            "unknown": self.unknown,
            "brush_size": self.brush_size,
            "num_points": self.num_points,
            "points": [point.to_dict() for point in self.points],
        }


@dataclass(frozen=True)
class Layer:
    num_lines: int
    lines: Tuple[Line, ...] = ()

    def to_dict(self) -> dict:
        return {
            "num_lines": self.num_lines,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass(frozen=True)
class Document:
    num_layers: int
    layers: Tuple[Layer, ...] = ()

    @property
    def line_count(self) -> int:
        return sum(len(layer.lines) for layer in self.layers)

    @property
    def point_count(self) -> int:
        return sum(len(line.points) for layer in self.layers for line in layer.lines)

    def to_dict(self) -> dict:
        """Serialize the decoded tree so it can be dumped to JSON."""

        return {
            "num_layers": self.num_layers,
            "layers": [layer.to_dict() for layer in self.layers],
        }
