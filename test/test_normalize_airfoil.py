"""
Unit tests for the normalize_airfoil function.

Uses pytest for testing.
"""

import numpy as np
import pytest

from airfoil_converter.exceptions import FormatError
from airfoil_converter.formulas.airfoil.normalize_airfoil import normalize_airfoil


def test_normalize_airfoil_unit_chord():
    """Already unit-chord points are unchanged."""
    points = [(0, 0), (0.5, 0.05), (1, 0), (0.5, -0.05)]
    normalized, thickness = normalize_airfoil(points)
    assert np.allclose(normalized, points)
    assert thickness == pytest.approx(0.1)


def test_normalize_airfoil_shifted_and_scaled():
    """Leading edge moves to x = 0 and both axes shrink by the chord."""
    points = np.array([[-2.0, 0.0], [0.0, 0.4], [2.0, 0.0], [0.0, -0.4]])
    normalized, thickness = normalize_airfoil(points)
    assert np.allclose(normalized[:, 0], [0.0, 0.5, 1.0, 0.5])
    assert np.allclose(normalized[:, 1], [0.0, 0.1, 0.0, -0.1])
    assert thickness == pytest.approx(0.2)


def test_normalize_airfoil_does_not_modify_input():
    """The caller's array is left alone."""
    points = np.array([[10.0, 1.0], [20.0, 2.0], [30.0, 1.0]])
    original = points.copy()
    normalize_airfoil(points)
    assert np.array_equal(points, original)


def test_normalize_airfoil_flat_plate():
    """A flat shape has zero thickness."""
    normalized, thickness = normalize_airfoil([(0, 0), (0.5, 0), (1, 0)])
    assert thickness == 0.0
    assert np.allclose(normalized[:, 1], 0.0)


def test_normalize_airfoil_zero_span():
    """Identical x values cannot be normalized."""
    with pytest.raises(FormatError, match="zero chord span"):
        normalize_airfoil([(1, 0), (1, 1), (1, -1)])


def test_normalize_airfoil_infinite_span():
    """An overflowing x value counts as a degenerate span."""
    with pytest.raises(FormatError, match="zero chord span"):
        normalize_airfoil([(0, 0), (float("inf"), 0), (1, 0.1)])


def test_normalize_airfoil_infinite_y():
    """Non-finite y values are rejected."""
    with pytest.raises(FormatError, match="non-finite"):
        normalize_airfoil([(0, 0), (0.5, float("inf")), (1, 0)])


def test_normalize_airfoil_empty():
    """No points means no span."""
    with pytest.raises(FormatError):
        normalize_airfoil([])


def test_normalize_airfoil_overflowing_division():
    """A tiny chord with ordinary y values would give infinite coordinates."""
    with pytest.raises(FormatError, match="zero chord span"):
        normalize_airfoil([(0, 0), (1e-310, 0), (0, 1)])


def test_normalize_airfoil_small_chord_still_finite():
    """Small but workable chords normalize as usual."""
    normalized, thickness = normalize_airfoil([(0, 0), (1e-6, 0), (5e-7, 1e-7)])
    assert np.allclose(normalized[:, 0], [0.0, 1.0, 0.5])
    assert thickness == pytest.approx(0.1)
    assert np.all(np.isfinite(normalized))
