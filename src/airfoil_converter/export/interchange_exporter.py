# export/interchange_exporter.py
import numpy as np

from airfoil_converter.exceptions import InvalidParameterError

CSV_HEADER = "X,Y,Z"
CSV_Z = "0.000000"

# DXF group codes
DXF_ENTITY = "0"
DXF_NAME = "2"
DXF_LAYER = "8"
DXF_X = "10"
DXF_Y = "20"
DXF_Z = "30"
DXF_VERTICES_FOLLOW = "66"

DXF_DEFAULT_LAYER = "0"
DXF_VERTEX_Z = "0.0"


def _as_points(points):
    return np.asarray(points, dtype=float).reshape(-1, 2)


def _fixed(value):
    # -0.0 + 0.0 is 0.0, so a signed zero never shows up as "-0.000000"
    return f"{value + 0.0:.6f}"


def points_to_csv(points):
    """
    CSV point table with a constant zero Z column.

    Args:
        points: Nx2 array-like of (x, y); may be empty

    Returns:
        str: "X,Y,Z" header and one "x,y,0.000000" line per point, each line ending in "\\n"
    """
    lines = [CSV_HEADER]
    for x, y in _as_points(points):
        lines.append(f"{_fixed(x)},{_fixed(y)},{CSV_Z}")
    return "\n".join(lines) + "\n"


def _group(code, value):
    return [code, value]


def points_to_dxf(points):
    """
    Minimal DXF holding one POLYLINE with a VERTEX per point.

    The points are written as given. No closing vertex is added.

    Args:
        points: Nx2 array-like of (x, y); may be empty

    Returns:
        str: Group code / value lines, "\\n" terminated
    """
    pairs = []
    pairs += _group(DXF_ENTITY, "SECTION")
    pairs += _group(DXF_NAME, "ENTITIES")

    pairs += _group(DXF_ENTITY, "POLYLINE")
    pairs += _group(DXF_LAYER, DXF_DEFAULT_LAYER)
    pairs += _group(DXF_VERTICES_FOLLOW, "1")

    for x, y in _as_points(points):
        pairs += _group(DXF_ENTITY, "VERTEX")
        pairs += _group(DXF_LAYER, DXF_DEFAULT_LAYER)
        pairs += _group(DXF_X, _fixed(x))
        pairs += _group(DXF_Y, _fixed(y))
        pairs += _group(DXF_Z, DXF_VERTEX_Z)

    pairs += _group(DXF_ENTITY, "SEQEND")
    pairs += _group(DXF_ENTITY, "ENDSEC")
    pairs += _group(DXF_ENTITY, "EOF")

    return "\n".join(pairs) + "\n"


EXPORTERS = {
    "csv": points_to_csv,
    "dxf": points_to_dxf,
    # .dwg files get the DXF text
    "dwg": points_to_dxf,
}


def export_points(points, fmt):
    """Serialize points in one of EXPORTERS' formats."""
    try:
        exporter = EXPORTERS[fmt.lower()]
    except KeyError:
        raise InvalidParameterError(f"Unknown export format: {fmt!r}")
    return exporter(points)
