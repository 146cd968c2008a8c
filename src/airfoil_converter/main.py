# main.py
import argparse
import json
import logging
import os
import sys

from airfoil_converter.config import EXPORT_FORMATS, ConverterConfig, load_config
from airfoil_converter.core.models import TransformRequest, ViewportSpec
from airfoil_converter.exceptions import AirfoilConverterError
from airfoil_converter.export.interchange_exporter import export_points
from airfoil_converter.formulas.airfoil.transform_airfoil import transform_request
from airfoil_converter.utilities.helpers import (
    default_thickness_percent,
    design_summary,
    export_filename,
    read_dat_file,
    write_text_file,
)
from airfoil_converter.utilities.parse_dat_file import parse_listing

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def _load_session(args):
    """Read config and airfoil, then settle on the chord and thickness to use."""
    config = load_config(args.config) if args.config else ConverterConfig().validate()

    listing = read_dat_file(args.filepath)
    data = parse_listing(listing)
    logging.info(f"Loaded '{data.name}' with {len(data)} points from {args.filepath}")

    chord = args.chord if args.chord is not None else config.chord
    thickness = args.thickness if args.thickness is not None else config.thickness_percent
    if thickness is None:
        thickness = default_thickness_percent(data)

    request = TransformRequest(chord=chord, thickness_percent=thickness)
    return config, listing, data, request


def run_info(args):
    """Print the loaded airfoil and the design it would produce."""
    _, _, data, request = _load_session(args)
    points = transform_request(data, request)
    summary = design_summary(data, points, request.chord)

    print(f"Name:            {summary['name']}")
    print(f"Original T/C:    {summary['original_thickness_percent']:.2f}%")
    print(f"Vertices:        {summary['vertices']}")
    print(f"Chord:           {summary['chord']:.2f}")
    print(f"Max thickness:   {summary['max_thickness']:.2f}")
    return 0


def run_export(args):
    """Write the transformed airfoil in each requested format."""
    config, listing, data, request = _load_session(args)
    points = transform_request(data, request)

    formats = args.formats or config.formats
    output_dir = args.output_dir or config.output_dir

    for fmt in formats:
        content = export_points(points, fmt)
        filename = export_filename(listing.source_name, request.chord, request.thickness_percent, fmt)
        path = write_text_file(content, os.path.join(output_dir, filename))
        print(path)
    return 0


def run_plot(args):
    """Save a static preview of the transformed airfoil."""
    from airfoil_converter.plotting.airfoil_plotter import AirfoilPlotter

    config, listing, data, request = _load_session(args)
    points = transform_request(data, request)

    viewport = ViewportSpec(
        width=args.width if args.width is not None else config.viewport_width,
        height=args.height if args.height is not None else config.viewport_height,
    )
    output_path = args.output or export_filename(listing.source_name, request.chord, request.thickness_percent, "png")

    plotter = AirfoilPlotter(show_vertices_below=config.show_vertices_below)
    plotter.plot_airfoil(points, viewport, output_path=output_path, chord=request.chord, name=data.name)
    print(output_path)
    return 0


def _add_design_arguments(parser):
    parser.add_argument("filepath", type=str, help="Path to the input .dat file.")
    parser.add_argument("-c", "--chord", type=float, default=None, help="Chord length (default: 100).")
    parser.add_argument("-t", "--thickness", type=float, default=None,
                        help="Thickness in percent of chord (default: the airfoil's own, rounded).")


def build_parser():
    parser = argparse.ArgumentParser(prog="airfoil-converter",
                                     description="Rescale Selig-style airfoil listings and export them for CAD.")
    parser.add_argument("--config", type=str, default=None, help="JSON file with configuration overrides.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # --- Parser for 'info' command ---
    parser_info = subparsers.add_parser("info", help="Show the parsed airfoil and the resulting design.")
    _add_design_arguments(parser_info)
    parser_info.set_defaults(func=run_info)

    # --- Parser for 'export' command ---
    parser_export = subparsers.add_parser("export", help="Write CSV/DXF/DWG files for the design.")
    _add_design_arguments(parser_export)
    parser_export.add_argument("-f", "--format", dest="formats", action="append", choices=EXPORT_FORMATS,
                               help="Output format; repeat for several (default: csv and dxf).")
    parser_export.add_argument("-o", "--output-dir", type=str, default=None, help="Directory for the output files.")
    parser_export.set_defaults(func=run_export)

    # --- Parser for 'plot' command ---
    parser_plot = subparsers.add_parser("plot", help="Save a PNG preview of the design.")
    _add_design_arguments(parser_plot)
    parser_plot.add_argument("--width", type=float, default=None, help="Image width in pixels.")
    parser_plot.add_argument("--height", type=float, default=None, help="Image height in pixels.")
    parser_plot.add_argument("-o", "--output", type=str, default=None, help="PNG file to write.")
    parser_plot.set_defaults(func=run_plot)

    return parser


def main(argv=None):
    """Parse command-line arguments and run the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)

    try:
        return args.func(args)
    except (AirfoilConverterError, OSError, json.JSONDecodeError) as e:
        logging.error(f"{args.command} failed for {args.filepath}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
