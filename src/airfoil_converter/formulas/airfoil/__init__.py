from airfoil_converter.formulas.airfoil.normalize_airfoil import normalize_airfoil
from airfoil_converter.formulas.airfoil.transform_airfoil import (
    thickness_scale_factor,
    transform_airfoil,
    transform_request
)

__all__ = [
    'normalize_airfoil',
    'thickness_scale_factor',
    'transform_airfoil',
    'transform_request'
]
