import math
import os
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from airfoil_converter.exceptions import InvalidParameterError


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class RawListing:
    """Unparsed coordinate listing and the file name it came from."""
    text: str
    source_name: str

    @property
    def display_name(self):
        return os.path.splitext(os.path.basename(self.source_name))[0]


@dataclass(frozen=True, eq=False)
class AirfoilData:
    """
    A parsed airfoil in unit-chord coordinates.

    Attributes:
        name (str): Header line of the listing, or the file name without extension
        points (np.ndarray): Read-only Nx2 array of normalized (x, y), in source order
        normalized_thickness (float): (max y - min y) / raw chord
    """
    name: str
    points: np.ndarray
    normalized_thickness: float

    def __post_init__(self):
        points = np.array(self.points, dtype=float).reshape(-1, 2)
        points.setflags(write=False)
        object.__setattr__(self, "points", points)

    def __len__(self):
        return self.points.shape[0]


def require_positive(label, value):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{label} must be a number, got {value!r}")
    if not math.isfinite(number) or number <= 0:
        raise InvalidParameterError(f"{label} must be a positive number, got {value!r}")


@dataclass(frozen=True)
class TransformRequest:
    chord: float
    thickness_percent: float

    def __post_init__(self):
        require_positive("chord", self.chord)
        require_positive("thickness percent", self.thickness_percent)


@dataclass(frozen=True)
class ViewportSpec:
    width: float
    height: float

    def __post_init__(self):
        require_positive("viewport width", self.width)
        require_positive("viewport height", self.height)


@dataclass(frozen=True)
class LinearScale:
    """
    Affine map from ``domain`` onto ``range``.

    A zero-width domain has no slope; every input then lands on the middle
    of the range.
    """
    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        span = d1 - d0
        if span == 0:
            t = np.full_like(np.asarray(value, dtype=float), 0.5)
        else:
            t = (np.asarray(value, dtype=float) - d0) / span
        result = r0 + t * (r1 - r0)
        return float(result) if np.ndim(result) == 0 else result

    def invert(self, value):
        return LinearScale(domain=self.range, range=self.domain)(value)


@dataclass(frozen=True)
class ProjectionResult:
    x_scale: LinearScale
    y_scale: LinearScale
    x_domain: Tuple[float, float]
    y_domain: Tuple[float, float]
    width: float
    height: float
