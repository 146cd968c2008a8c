# formulas/airfoil/transform_airfoil.py
import numpy as np

from airfoil_converter.core.models import require_positive


def thickness_scale_factor(data, thickness_percent):
    """
    Factor applied to normalized y so the shape reaches ``thickness_percent``.

    A flat shape (zero normalized thickness) cannot be thickened; its y is left as is.
    """
    require_positive("thickness percent", thickness_percent)
    if data.normalized_thickness > 0:
        return (thickness_percent / 100.0) / data.normalized_thickness
    return 1.0


def transform_airfoil(data, chord, thickness_percent):
    """
    Map normalized airfoil points to design coordinates.

    Args:
        data (AirfoilData): Parsed, unit-chord airfoil
        chord (float): Target chord length, in the caller's unit
        thickness_percent (float): Target max thickness as a percentage of chord

    Returns:
        np.ndarray: New Nx2 array; ``data`` is left untouched

    Raises:
        InvalidParameterError: if chord or thickness_percent is not positive
    """
    require_positive("chord", chord)
    y_scale = thickness_scale_factor(data, thickness_percent)

    points = data.points
    return np.column_stack((points[:, 0] * chord, points[:, 1] * y_scale * chord))


def transform_request(data, request):
    """Same as transform_airfoil, driven by a TransformRequest."""
    return transform_airfoil(data, request.chord, request.thickness_percent)
