# plotting/airfoil_plotter.py
import logging
import os

import matplotlib.pyplot as plt
import numpy as np

from airfoil_converter.plotting.viewport_projector import (
    MARGIN_BOTTOM,
    MARGIN_LEFT,
    MARGIN_RIGHT,
    MARGIN_TOP,
    project,
)

DPI = 100
DEFAULT_COLOR = "#38bdf8"
GRID_COLOR = "#1e293b"
AXIS_COLOR = "#475569"
CHORD_LINE_COLOR = "#94a3b8"


class AirfoilPlotter:
    def __init__(self, show_vertices_below=80, color=DEFAULT_COLOR):
        """
        Initialize the airfoil plotter.

        Args:
            show_vertices_below (int): Draw point markers only for airfoils with fewer points than this
            color (str): Matplotlib color for the outline and fill
        """
        self.show_vertices_below = show_vertices_below
        self.color = color

    def plot_airfoil(self, points, viewport, ax=None, output_path=None, chord=None, name=None):
        """
        Plots transformed airfoil points inside the padded domains of the viewport projection.

        Args:
            points (np.ndarray): Nx2 design coordinates, in source order
            viewport (ViewportSpec): Figure size in pixels
            ax (matplotlib.axes.Axes, optional): Axes to plot on. If None, creates a new figure.
            output_path (str, optional): Save the figure here and close it
            chord (float, optional): Chord shown in the x-axis label; defaults to the x extent
            name (str, optional): Plot title

        Returns:
            matplotlib.axes.Axes: The axes object
        """
        points = np.asarray(points, dtype=float).reshape(-1, 2)
        projection = project(points, viewport)

        if ax is None:
            fig = plt.figure(figsize=(viewport.width / DPI, viewport.height / DPI), dpi=DPI)
            ax = fig.add_axes(self._axes_rect(viewport))

        x = points[:, 0]
        y = points[:, 1]
        x_min, x_max = x.min(), x.max()

        ax.grid(True, color=GRID_COLOR, linestyle=(0, (2, 2)))

        # Origin crosshair and chord line
        ax.axvline(0.0, color=AXIS_COLOR, linewidth=1)
        ax.axhline(0.0, color=AXIS_COLOR, linewidth=1)
        ax.plot([x_min, x_max], [0.0, 0.0], color=CHORD_LINE_COLOR, linewidth=1, linestyle=(0, (5, 5)))

        ax.fill(x, y, color=self.color, alpha=0.15)
        ax.plot(x, y, color=self.color, linewidth=2, linestyle='-')

        if len(points) < self.show_vertices_below:
            ax.scatter(x, y, s=8, facecolors="white", edgecolors=self.color, zorder=3)

        ax.set_xlim(*projection.x_domain)
        ax.set_ylim(*projection.y_domain)

        if chord is None:
            chord = x_max - x_min
        ax.set_xlabel(f"Chord Axis [0 - {chord:.0f}mm]")
        ax.set_ylabel("Thickness Axis")
        if name:
            ax.set_title(name)

        if output_path is not None:
            directory = os.path.dirname(output_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            ax.figure.savefig(output_path)
            plt.close(ax.figure)
            logging.info(f"Saved airfoil plot to {output_path}")

        return ax

    @staticmethod
    def _axes_rect(viewport):
        """Axes position in figure fractions, leaving the projector's margins free."""
        left = MARGIN_LEFT / viewport.width
        bottom = MARGIN_BOTTOM / viewport.height
        width = max(viewport.width - MARGIN_LEFT - MARGIN_RIGHT, 1) / viewport.width
        height = max(viewport.height - MARGIN_TOP - MARGIN_BOTTOM, 1) / viewport.height
        return [left, bottom, width, height]
