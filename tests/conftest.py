import struct
from types import SimpleNamespace

import pytest

HEADER = b"reMarkable .lines file, version=5          "


# ---------------------------------------------------------
# Raw byte builders (independent from rmlines.encode)
# ---------------------------------------------------------
def pack_point(x, y, speed=0.0, direction=0.0, width=0.0, pressure=0.0):
    return struct.pack("<6f", x, y, speed, direction, width, pressure)


def pack_line(
    points=(),
    brush_type=2,
    brush_color=0,
    reserved=0,
    unknown=0.0,
    brush_size=2.0,
    num_points=None,
):
    count = len(points) if num_points is None else num_points
    head = struct.pack("<iiIffi", brush_type, brush_color, reserved, unknown, brush_size, count)
    return head + b"".join(pack_point(*pt) for pt in points)


def pack_layer(lines=(), num_lines=None):
    count = len(lines) if num_lines is None else num_lines
    return struct.pack("<i", count) + b"".join(lines)


def pack_page(layers=(), num_layers=None, header=HEADER):
    count = len(layers) if num_layers is None else num_layers
    return header + struct.pack("<i", count) + b"".join(layers)


@pytest.fixture
def rm_builder():
    return SimpleNamespace(
        header=HEADER,
        point=pack_point,
        line=pack_line,
        layer=pack_layer,
        page=pack_page,
    )


@pytest.fixture
def sample_page_bytes():
    """One layer, one pen line, two points: (10, 20) then (15, 25)."""

    line = pack_line(
        points=[(10.0, 20.0, 0.0, 0.0, 0.0, 0.0), (15.0, 25.0, 0.0, 0.0, 0.0, 0.0)],
        brush_type=2,
        brush_color=0,
        reserved=0,
        unknown=0.0,
        brush_size=2.0,
    )
    return pack_page([pack_layer([line])])


@pytest.fixture
def sample_page_file(tmp_path, sample_page_bytes):
    path = tmp_path / "page.rm"
    path.write_bytes(sample_page_bytes)
    return path
