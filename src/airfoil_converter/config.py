# config.py
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional

from airfoil_converter.core.models import ViewportSpec, require_positive
from airfoil_converter.exceptions import InvalidParameterError

# Recommended ranges; values outside them are allowed but logged
CHORD_RANGE = (10.0, 1000.0)
THICKNESS_PERCENT_RANGE = (1.0, 50.0)

EXPORT_FORMATS = ("csv", "dxf", "dwg")


@dataclass
class ConverterConfig:
    """Defaults for a conversion session."""
    chord: float = 100.0
    thickness_percent: Optional[float] = None  # None: use the loaded airfoil's own thickness
    viewport_width: float = 800.0
    viewport_height: float = 400.0
    output_dir: str = "."
    formats: List[str] = field(default_factory=lambda: ["csv", "dxf"])
    show_vertices_below: int = 80

    def validate(self):
        """
        Check every field and coerce numeric ones to float.

        Raises:
            InvalidParameterError: on a wrongly typed or out-of-domain value
        """
        require_positive("chord", self.chord)
        self.chord = float(self.chord)
        _warn_outside("chord", self.chord, CHORD_RANGE)

        if self.thickness_percent is not None:
            require_positive("thickness percent", self.thickness_percent)
            self.thickness_percent = float(self.thickness_percent)
            _warn_outside("thickness percent", self.thickness_percent, THICKNESS_PERCENT_RANGE)

        self.viewport()
        self.viewport_width = float(self.viewport_width)
        self.viewport_height = float(self.viewport_height)

        if not isinstance(self.output_dir, str):
            raise InvalidParameterError(f"output_dir must be a string, got {self.output_dir!r}")
        # bool is a subclass of int
        if isinstance(self.show_vertices_below, bool) or not isinstance(self.show_vertices_below, int):
            raise InvalidParameterError(
                f"show_vertices_below must be an integer, got {self.show_vertices_below!r}")
        if not isinstance(self.formats, list) or not all(isinstance(fmt, str) for fmt in self.formats):
            raise InvalidParameterError(f"formats must be a list of strings, got {self.formats!r}")

        unknown = [fmt for fmt in self.formats if fmt.lower() not in EXPORT_FORMATS]
        if unknown:
            raise InvalidParameterError(f"Unknown export format(s): {', '.join(unknown)}")
        return self

    def viewport(self):
        return ViewportSpec(width=self.viewport_width, height=self.viewport_height)


def _warn_outside(label, value, bounds):
    low, high = bounds
    if not low <= value <= high:
        logging.warning(f"{label} {value} is outside the recommended range {low:g}-{high:g}")


def load_config(config_path):
    """
    Load a ConverterConfig from a JSON file of overrides.

    Keys missing from the file keep their defaults.

    Raises:
        InvalidParameterError: on unknown keys or invalid values
    """
    with open(config_path, 'r') as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise InvalidParameterError(f"Configuration in {config_path} must be a JSON object")

    known = {f.name for f in fields(ConverterConfig)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidParameterError(f"Unknown configuration key(s) in {config_path}: {', '.join(unknown)}")

    config = ConverterConfig(**overrides).validate()
    logging.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config, config_path):
    """Write ``config`` as JSON and return the path."""
    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)
    logging.info(f"Configuration saved to: {config_path}")
    return config_path
