import re
from dataclasses import dataclass

from airfoil_converter.core.models import AirfoilData, Point, RawListing
from airfoil_converter.exceptions import FormatError
from airfoil_converter.formulas.airfoil.normalize_airfoil import normalize_airfoil
from airfoil_converter.utilities.helpers import read_dat_file

MIN_POINTS = 3

_NUMBER = r"[+-]?[0-9]*\.?[0-9]+(?:[eE][+-]?[0-9]+)?"
COORDINATE_LINE = re.compile(rf"^({_NUMBER})\s+({_NUMBER})$")

BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class Coordinate:
    point: Point


@dataclass(frozen=True)
class Label:
    text: str


@dataclass(frozen=True)
class Skip:
    pass


def classify_line(line, may_claim_label):
    """
    Sorts one trimmed line into a coordinate pair, the airfoil name, or noise.

    Args:
        line (str): A non-empty, whitespace-trimmed line
        may_claim_label (bool): True only for the first line of the listing
            while no name has been taken yet

    Returns:
        Coordinate, Label or Skip
    """
    match = COORDINATE_LINE.match(line)
    if match:
        return Coordinate(Point(float(match.group(1)), float(match.group(2))))
    if may_claim_label:
        return Label(line)
    return Skip()


def _trim(line):
    # str.strip keeps a byte order mark, so drop it with the surrounding whitespace
    return line.strip().strip(BYTE_ORDER_MARK).strip()


def scan_lines(raw_text, default_name):
    """
    Walks the listing once and returns (name, [Point, ...]) in source order.

    Only the first line may be taken as the name; any other line that is not
    exactly two numbers is dropped.
    """
    lines = [_trim(line) for line in raw_text.split("\n")]
    lines = [line for line in lines if line]

    name = default_name
    label_claimed = False
    points = []
    for index, line in enumerate(lines):
        kind = classify_line(line, may_claim_label=(index == 0 and not label_claimed))
        if isinstance(kind, Coordinate):
            points.append(kind.point)
        elif isinstance(kind, Label):
            name = kind.text
            label_claimed = True
    return name, points


def parse_dat_text(raw_text, source_name):
    """
    Parses a Selig-style coordinate listing into a normalized airfoil.

    Args:
        raw_text (str): Full text of the listing
        source_name (str): File name the text came from; its stem is the
            fallback airfoil name

    Returns:
        AirfoilData: Unit-chord points and normalized thickness

    Raises:
        FormatError: on fewer than 3 coordinate lines or a degenerate chord span
    """
    default_name = RawListing(raw_text, source_name).display_name
    name, points = scan_lines(raw_text, default_name)

    if len(points) < MIN_POINTS:
        raise FormatError("insufficient coordinate points")

    normalized, thickness = normalize_airfoil(points)
    return AirfoilData(name=name, points=normalized, normalized_thickness=thickness)


def parse_listing(listing):
    return parse_dat_text(listing.text, listing.source_name)


def parse_dat_file(filepath):
    """Reads a .dat file from disk and parses it with parse_dat_text."""
    return parse_listing(read_dat_file(filepath))
