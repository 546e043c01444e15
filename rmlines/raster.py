"""
Rasterize a projected page to PNG with Pillow so a quick preview can be
checked without an SVG viewer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw

from .geometry import VectorDocument

DEFAULT_PREVIEW_HEIGHT = 512


def preview_size(vector: VectorDocument, height_px: int) -> Tuple[int, int, float]:
    if height_px <= 0:
        raise ValueError("preview height must be positive")
    scale = height_px / vector.height
    width_px = max(1, int(round(vector.width * scale)))
    return width_px, height_px, scale


def render_image(vector: VectorDocument, height_px: int = DEFAULT_PREVIEW_HEIGHT) -> Image.Image:
    width_px, height_px, scale = preview_size(vector, height_px)
    image = Image.new("RGB", (width_px, height_px), (255, 255, 255))
    draw = ImageDraw.Draw(image)

    for group in vector.groups:
        for path in group.paths:
            points = [(x * scale, y * scale) for x, y in path.points]
            if not points:
                continue
            stroke = max(1, int(round(path.stroke_width * scale)))
            if len(points) == 1:
                x, y = points[0]
                radius = stroke / 2.0
                draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=path.stroke)
                continue
            draw.line(points, fill=path.stroke, width=stroke, joint="curve")
    return image


def render_png(vector: VectorDocument, destination: Path, height_px: int = DEFAULT_PREVIEW_HEIGHT) -> None:
    image = render_image(vector, height_px)
    destination.parent.mkdir(parents=True, exist_ok=True)
    image.save(destination)
