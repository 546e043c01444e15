from __future__ import annotations

import math
from pathlib import Path

import svgwrite
from svgwrite.path import Path as SVGPath

from .errors import RenderError
from .geometry import StrokePath, VectorDocument


def _svg_path(dwg: svgwrite.Drawing, path: StrokePath) -> SVGPath:
    for x, y in path.points:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise RenderError(f"cannot render non-finite coordinate ({x}, {y})")
    if path.commands:
        return dwg.path(d=path.d, **path.style())
    # svgwrite validates an empty "d" as invalid path data; built without the
    # drawing's validator the empty attribute is simply left out.
    return SVGPath(debug=False, **path.style())


def to_drawing(vector: VectorDocument, filename: str = "image.svg") -> svgwrite.Drawing:
    """
    Build an ``svgwrite`` drawing with one ``<g>`` per group and one
    ``<path>`` per stroke, sized to the canvas. Strokes without points become
    ``<path>`` elements with no ``d`` attribute.
    """

    dwg = svgwrite.Drawing(filename, size=(vector.width, vector.height))
    dwg.viewbox(*vector.viewbox)
    for group in vector.groups:
        grp = dwg.g()
        for path in group.paths:
            grp.add(_svg_path(dwg, path))
        dwg.add(grp)
    return dwg


def to_svg_string(vector: VectorDocument) -> str:
    try:
        return to_drawing(vector).tostring()
    except RenderError:
        raise
    except (TypeError, ValueError) as exc:
        raise RenderError(str(exc)) from exc


def write_svg(vector: VectorDocument, destination: Path) -> None:
    """The file is only created once the whole page has serialized."""

    text = to_svg_string(vector)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
