from airfoil_converter.core.models import (
    Point,
    RawListing,
    AirfoilData,
    TransformRequest,
    ViewportSpec,
    LinearScale,
    ProjectionResult,
)

__all__ = [
    'Point',
    'RawListing',
    'AirfoilData',
    'TransformRequest',
    'ViewportSpec',
    'LinearScale',
    'ProjectionResult'
]
