# formulas/airfoil/normalize_airfoil.py
import math

import numpy as np

from airfoil_converter.exceptions import FormatError


def normalize_airfoil(points):
    """
    Rescale an airfoil to unit chord with its leading edge on x = 0.

    Both axes are divided by the x-span, so the ratio between chord and
    thickness is kept. y is not re-centered.

    Args:
        points: Nx2 array-like of (x, y) coordinates, in source order

    Returns:
        tuple: (Nx2 np.ndarray of normalized points, thickness ratio)

    Raises:
        FormatError: if the x-span is zero or not finite, or a y value is not finite
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    if points.shape[0] == 0:
        raise FormatError("degenerate geometry: zero chord span")

    x = points[:, 0]
    y = points[:, 1]

    min_x, max_x = x.min(), x.max()
    raw_chord = max_x - min_x
    if raw_chord == 0 or not math.isfinite(raw_chord):
        raise FormatError("degenerate geometry: zero chord span")

    if not np.all(np.isfinite(y)):
        raise FormatError("non-finite coordinate value")

    # A tiny but finite span can still overflow the division
    with np.errstate(over="ignore", invalid="ignore"):
        normalized = np.column_stack(((x - min_x) / raw_chord, y / raw_chord))
        thickness_ratio = float((y.max() - y.min()) / raw_chord)

    if not (np.all(np.isfinite(normalized)) and math.isfinite(thickness_ratio)):
        raise FormatError("degenerate geometry: zero chord span")

    return normalized, thickness_ratio
