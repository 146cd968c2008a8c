"""
Unit tests for the viewport projector.

Uses pytest for testing.
"""

import numpy as np
import pytest

from airfoil_converter.core.models import ViewportSpec
from airfoil_converter.exceptions import EmptyGeometryError, InvalidParameterError
from airfoil_converter.plotting.viewport_projector import (
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    compute_domains,
    drawable_size,
    project,
)

POINTS = np.array([[0, 0], [50, 5], [100, 0], [50, -5]], dtype=float)


def test_compute_domains_thin_shape_floor():
    """A 10-unit-thick, 100-unit-long shape is padded as if it were 30 thick."""
    x_domain, y_domain = compute_domains(POINTS)
    assert x_domain == pytest.approx((-10, 110))
    assert y_domain == pytest.approx((-20, 20))


def test_compute_domains_thick_shape():
    """Shapes taller than the floor use their own height."""
    points = [(0, -30), (100, 30)]
    x_domain, y_domain = compute_domains(points)
    assert x_domain == pytest.approx((-10, 110))
    assert y_domain == pytest.approx((-60, 60))


def test_project_scales():
    """Domain ends land on the drawable edges, with y inverted."""
    result = project(POINTS, ViewportSpec(800, 400))
    width = 800 - MARGIN_LEFT - MARGIN_RIGHT
    height = 400 - MARGIN_TOP - MARGIN_BOTTOM
    assert (result.width, result.height) == (width, height)
    assert result.x_scale(-10) == pytest.approx(0)
    assert result.x_scale(110) == pytest.approx(width)
    assert result.y_scale(-20) == pytest.approx(height)
    assert result.y_scale(20) == pytest.approx(0)
    assert result.y_scale(0) == pytest.approx(height / 2)


def test_project_scale_arrays_and_invert():
    """Scales accept arrays and can be inverted."""
    result = project(POINTS, ViewportSpec(800, 400))
    pixels = result.x_scale(POINTS[:, 0])
    assert pixels.shape == (4,)
    assert np.allclose(result.x_scale.invert(pixels), POINTS[:, 0])


def test_project_is_deterministic():
    """Same input, same result."""
    viewport = ViewportSpec(640, 480)
    assert project(POINTS, viewport) == project(POINTS, viewport)


def test_project_single_point():
    """Zero-size geometry gives zero-width domains instead of an error."""
    result = project([(3.0, 4.0)], ViewportSpec(800, 400))
    assert result.x_domain == (3.0, 3.0)
    assert result.y_domain == (4.0, 4.0)
    assert result.x_scale(3.0) == pytest.approx(result.width / 2)


def test_project_empty():
    """Nothing to project is an error."""
    with pytest.raises(EmptyGeometryError):
        project([], ViewportSpec(800, 400))


def test_drawable_size_small_viewport():
    """Viewports smaller than the margins give negative sizes."""
    assert drawable_size(ViewportSpec(60, 50)) == (60 - 90, 50 - 80)


def test_viewport_spec_requires_positive_size():
    """Zero or negative viewport sizes are refused."""
    with pytest.raises(InvalidParameterError):
        ViewportSpec(0, 400)
    with pytest.raises(InvalidParameterError):
        ViewportSpec(800, -1)
