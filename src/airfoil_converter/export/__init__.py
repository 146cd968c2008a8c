from airfoil_converter.export.interchange_exporter import (
    points_to_csv,
    points_to_dxf,
    export_points,
    EXPORTERS
)

__all__ = [
    'points_to_csv',
    'points_to_dxf',
    'export_points',
    'EXPORTERS'
]
