# airfoil_converter/__init__.py
from airfoil_converter.core import AirfoilData, Point, TransformRequest, ViewportSpec, ProjectionResult
from airfoil_converter.exceptions import (
    AirfoilConverterError,
    FormatError,
    InvalidParameterError,
    EmptyGeometryError
)
from airfoil_converter.utilities import parse_dat_text, parse_dat_file
from airfoil_converter.formulas.airfoil import normalize_airfoil, transform_airfoil
from airfoil_converter.plotting import project
from airfoil_converter.export import points_to_csv, points_to_dxf

__version__ = "0.1.0"

__all__ = [
    'AirfoilData',
    'Point',
    'TransformRequest',
    'ViewportSpec',
    'ProjectionResult',
    'AirfoilConverterError',
    'FormatError',
    'InvalidParameterError',
    'EmptyGeometryError',
    'parse_dat_text',
    'parse_dat_file',
    'normalize_airfoil',
    'transform_airfoil',
    'project',
    'points_to_csv',
    'points_to_dxf'
]
