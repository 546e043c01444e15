from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from .entities import CANVAS_HEIGHT, CANVAS_WIDTH, Document, Line, Point

MOVE_TO = "M"
LINE_TO = "L"

# Every stroke is drawn the same way regardless of brush type or size.
STROKE_COLOR = "black"
STROKE_WIDTH = 3
STROKE_LINEJOIN = "round"
STROKE_LINECAP = "round"
FILL = "none"


def format_number(value: float) -> str:
    """Shortest exact text for ``value``; integral floats lose the ``.0``."""

    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class PathCommand:
    op: str
    x: float
    y: float

    def to_text(self) -> str:
        return f"{self.op}{format_number(self.x)},{format_number(self.y)}"


@dataclass(frozen=True)
class StrokePath:
    commands: Tuple[PathCommand, ...] = ()
    fill: str = FILL
    stroke: str = STROKE_COLOR
    stroke_width: float = STROKE_WIDTH
    stroke_linejoin: str = STROKE_LINEJOIN
    stroke_linecap: str = STROKE_LINECAP

    @property
    def d(self) -> str:
        return " ".join(command.to_text() for command in self.commands)

    @property
    def points(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((command.x, command.y) for command in self.commands)

    def style(self) -> Dict[str, object]:
        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
            "stroke_linejoin": self.stroke_linejoin,
            "stroke_linecap": self.stroke_linecap,
        }


@dataclass(frozen=True)
class PathGroup:
    paths: Tuple[StrokePath, ...] = ()


@dataclass(frozen=True)
class VectorDocument:
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    groups: Tuple[PathGroup, ...] = field(default_factory=tuple)

    @property
    def viewbox(self) -> Tuple[int, int, int, int]:
        return 0, 0, self.width, self.height


def path_commands(points: Iterable[Point]) -> Tuple[PathCommand, ...]:
    commands = []
    for idx, point in enumerate(points):
        op = MOVE_TO if idx == 0 else LINE_TO
        commands.append(PathCommand(op, point.x, point.y))
    return tuple(commands)


def project_line(line: Line) -> StrokePath:
    return StrokePath(commands=path_commands(line.points))


def project(document: Document) -> VectorDocument:
    """
    Map each layer to a group and each line to a stroked path, keeping the
    original ordering and coordinates untouched.
    """

    groups = tuple(
        PathGroup(paths=tuple(project_line(line) for line in layer.lines))
        for layer in document.layers
    )
    return VectorDocument(width=CANVAS_WIDTH, height=CANVAS_HEIGHT, groups=groups)
