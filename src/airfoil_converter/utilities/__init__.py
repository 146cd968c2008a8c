from airfoil_converter.utilities.helpers import (
    read_dat_file,
    write_text_file,
    export_filename,
    default_thickness_percent,
    design_summary
)
from airfoil_converter.utilities.parse_dat_file import (
    parse_dat_text,
    parse_dat_file,
    parse_listing
)

__all__ = [
    'read_dat_file',
    'write_text_file',
    'export_filename',
    'default_thickness_percent',
    'design_summary',
    'parse_dat_text',
    'parse_dat_file',
    'parse_listing'
]
