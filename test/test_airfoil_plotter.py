"""
Unit tests for the matplotlib preview.

Uses pytest for testing.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from airfoil_converter.core.models import ViewportSpec
from airfoil_converter.exceptions import EmptyGeometryError
from airfoil_converter.plotting.airfoil_plotter import AirfoilPlotter

POINTS = np.array([[100, 0], [50, 5], [0, 0], [50, -5]], dtype=float)


def test_plot_airfoil_uses_projection_limits():
    """Axis limits are the padded projection domains."""
    ax = AirfoilPlotter().plot_airfoil(POINTS, ViewportSpec(800, 400), chord=100)
    assert ax.get_xlim() == pytest.approx((-10, 110))
    assert ax.get_ylim() == pytest.approx((-20, 20))
    assert ax.get_xlabel() == "Chord Axis [0 - 100mm]"
    assert ax.get_ylabel() == "Thickness Axis"
    plt.close(ax.figure)


def test_plot_airfoil_figure_size():
    """The figure matches the viewport in pixels."""
    ax = AirfoilPlotter().plot_airfoil(POINTS, ViewportSpec(600, 300))
    width, height = ax.figure.get_size_inches() * ax.figure.dpi
    assert (width, height) == pytest.approx((600, 300))
    plt.close(ax.figure)


def test_plot_airfoil_vertex_markers_threshold():
    """Markers are drawn only for sparse outlines."""
    sparse = AirfoilPlotter(show_vertices_below=80).plot_airfoil(POINTS, ViewportSpec(800, 400))
    assert len(sparse.collections) == 1
    plt.close(sparse.figure)

    dense = AirfoilPlotter(show_vertices_below=3).plot_airfoil(POINTS, ViewportSpec(800, 400))
    assert len(dense.collections) == 0
    plt.close(dense.figure)


def test_plot_airfoil_saves_file(tmp_path):
    """With output_path set, a PNG is written."""
    output = tmp_path / "plots" / "foil.png"
    AirfoilPlotter().plot_airfoil(POINTS, ViewportSpec(400, 200), output_path=str(output), name="foil")
    assert output.exists()
    assert output.stat().st_size > 0


def test_plot_airfoil_empty():
    """No points cannot be plotted."""
    with pytest.raises(EmptyGeometryError):
        AirfoilPlotter().plot_airfoil(np.empty((0, 2)), ViewportSpec(800, 400))
