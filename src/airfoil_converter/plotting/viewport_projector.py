# plotting/viewport_projector.py
import numpy as np

from airfoil_converter.core.models import LinearScale, ProjectionResult
from airfoil_converter.exceptions import EmptyGeometryError

# Fixed drawing margins, in viewport units
MARGIN_TOP = 40
MARGIN_RIGHT = 40
MARGIN_BOTTOM = 40
MARGIN_LEFT = 50

# Padding around the data, as fractions of its size
X_PAD_FRACTION = 0.1
MIN_HEIGHT_FRACTION = 0.3   # floor on the vertical extent, relative to chord
Y_PAD_FRACTION = 0.5


def drawable_size(viewport):
    """Width and height left inside the margins. Can be negative for tiny viewports."""
    width = viewport.width - MARGIN_LEFT - MARGIN_RIGHT
    height = viewport.height - MARGIN_TOP - MARGIN_BOTTOM
    return width, height


def compute_domains(points):
    """
    Padded x and y domains for a set of points.

    Thin shapes get at least MIN_HEIGHT_FRACTION of their width as vertical
    extent before padding.

    Args:
        points: Nx2 array-like of (x, y)

    Returns:
        tuple: ((x_min, x_max), (y_min, y_max))
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    if points.shape[0] == 0:
        raise EmptyGeometryError("no points to project")

    x_min, x_max = float(points[:, 0].min()), float(points[:, 0].max())
    y_min, y_max = float(points[:, 1].min()), float(points[:, 1].max())

    data_width = x_max - x_min
    data_height = y_max - y_min

    x_pad = data_width * X_PAD_FRACTION
    min_height = data_width * MIN_HEIGHT_FRACTION
    effective_height = max(data_height, min_height)
    y_pad = effective_height * Y_PAD_FRACTION

    return (x_min - x_pad, x_max + x_pad), (y_min - y_pad, y_max + y_pad)


def project(points, viewport):
    """
    Fit points into a viewport.

    Args:
        points: Nx2 array-like of (x, y)
        viewport (ViewportSpec): Size of the display surface

    Returns:
        ProjectionResult: x maps onto [0, width]; y maps onto [height, 0] so
        larger y ends up higher on a surface whose vertical axis points down.

    Raises:
        EmptyGeometryError: if ``points`` is empty
    """
    x_domain, y_domain = compute_domains(points)
    width, height = drawable_size(viewport)

    return ProjectionResult(
        x_scale=LinearScale(domain=x_domain, range=(0.0, float(width))),
        y_scale=LinearScale(domain=y_domain, range=(float(height), 0.0)),
        x_domain=x_domain,
        y_domain=y_domain,
        width=float(width),
        height=float(height),
    )
