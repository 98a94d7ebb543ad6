"""Headless Plane Renderer - CLI entry point.

Plots points and vectors given on the command line onto a Cartesian plane
and writes the result as a PNG, without opening a window.

Usage:
    python -m cartesian_plane.headless [--point X,Y ...] [--vector X1,Y1:X2,Y2 ...] [-o OUTPUT]

Examples:
    python -m cartesian_plane.headless --point 2,3 --point=-1,-1.5 -o plane.png
    python -m cartesian_plane.headless --vector 0,0:1,0 --vector=0,0:-2,3 -o vectors.png
    python -m cartesian_plane.headless --point 1,1 --width 800 --height 800 --scale 40

Values starting with "-" must be attached with "=" so argparse does not
read them as options.
"""

import sys
import os
import argparse
import logging

# Add plotter/src to path so imports work when run as a script
_src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

# No display needed for offscreen rendering
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

VECTOR_ENDPOINT_SEPARATOR = ':'


def _parse_points(parser, raw_points):
    """Parse --point values, stopping the CLI on the first bad one."""
    from cartesian_plane.services.input_parsing import parse_endpoint_input

    points = []
    for raw in raw_points:
        result = parse_endpoint_input(raw)
        if not result.ok:
            parser.error(f"--point {raw!r}: {result.error.message}")
        points.append(result.value)
    return points


def _parse_vectors(parser, raw_vectors):
    """Parse --vector values written as origin:tip."""
    from cartesian_plane.models.geometry import Vector
    from cartesian_plane.services.input_parsing import parse_endpoint_input

    vectors = []
    for raw in raw_vectors:
        halves = raw.split(VECTOR_ENDPOINT_SEPARATOR)
        if len(halves) != 2:
            parser.error(f"--vector {raw!r}: expected X1,Y1:X2,Y2")
        origin = parse_endpoint_input(halves[0])
        tip = parse_endpoint_input(halves[1])
        for result in (origin, tip):
            if not result.ok:
                parser.error(f"--vector {raw!r}: {result.error.message}")
        vectors.append(Vector(origin.value, tip.value))
    return vectors


def build_parser():
    from cartesian_plane.constants import CANVAS_WIDTH, CANVAS_HEIGHT, DEFAULT_SCALE

    parser = argparse.ArgumentParser(
        description='Render points and vectors on a Cartesian plane to PNG (headless).',
    )
    parser.add_argument(
        '-p', '--point',
        action='append', default=[], metavar='X,Y',
        help='Point to plot (repeatable).',
    )
    parser.add_argument(
        '-V', '--vector',
        action='append', default=[], metavar='X1,Y1:X2,Y2',
        help='Vector to plot from origin to tip (repeatable).',
    )
    parser.add_argument(
        '-o', '--output',
        default='./plane.png',
        help='Output PNG file (default: ./plane.png).',
    )
    parser.add_argument('--width', type=int, default=CANVAS_WIDTH, help='Surface width in pixels.')
    parser.add_argument('--height', type=int, default=CANVAS_HEIGHT, help='Surface height in pixels.')
    parser.add_argument('--scale', type=int, default=DEFAULT_SCALE, help='Pixels per Cartesian unit.')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.width <= 0 or args.height <= 0 or args.scale <= 0:
        parser.error("--width, --height and --scale must be positive")

    points = _parse_points(parser, args.point)
    vectors = _parse_vectors(parser, args.vector)

    from cartesian_plane.services.headless_renderer import render_plane_image, save_png

    image = render_plane_image(points, vectors, args.width, args.height, args.scale)
    out_file = save_png(image, args.output)
    print(f"Rendered {len(points)} point(s) and {len(vectors)} vector(s) to {out_file}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
