import logging
import math
import os

import numpy as np

from airfoil_converter.core.models import RawListing

DEFAULT_BASE_NAME = "airfoil"


def read_dat_file(filepath):
    """
    Read a coordinate listing from disk.

    Args:
        filepath (str): Path to the .dat (or .txt) file

    Returns:
        RawListing: File text and its base name
    """
    with open(filepath, 'r', encoding='utf-8-sig', errors='ignore') as f:
        text = f.read()
    logging.debug(f"Read {len(text)} characters from {filepath}")
    return RawListing(text=text, source_name=os.path.basename(filepath))


def write_text_file(content, file_path):
    """
    Write exported text to ``file_path``, creating parent directories.

    Returns:
        str: The path written
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, 'w', newline='\n') as f:
        f.write(content)
    logging.info(f"Wrote {file_path}")
    return file_path


def format_number(value):
    """Renders 100.0 as '100' and 12.5 as '12.5' for use in file names."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def export_filename(base_name, chord, thickness_percent, ext):
    """
    Builds ``{base}_C{chord}_T{thickness}.{ext}``.

    ``base_name`` may be a file name; its extension is dropped.
    """
    base = os.path.splitext(os.path.basename(base_name or ""))[0] or DEFAULT_BASE_NAME
    return f"{base}_C{format_number(chord)}_T{format_number(thickness_percent)}.{ext.lstrip('.')}"


def round_half_up(value):
    return int(math.floor(value + 0.5))


def default_thickness_percent(data):
    """Thickness percent to start from after loading: the airfoil's own, as a whole number, never below 1."""
    return max(1, round_half_up(data.normalized_thickness * 100))


def design_summary(data, points, chord):
    """
    Summarizes a transformed airfoil for display.

    Args:
        data (AirfoilData): The loaded airfoil
        points (np.ndarray): Output of transform_airfoil
        chord (float): Chord length used

    Returns:
        dict: name, original_thickness_percent, vertices, chord, and
            max_thickness measured as the y extent of ``points``
    """
    return {
        "name": data.name,
        "original_thickness_percent": data.normalized_thickness * 100,
        "vertices": len(points),
        "chord": float(chord),
        "max_thickness": float(np.ptp(np.asarray(points, dtype=float).reshape(-1, 2)[:, 1])),
    }
