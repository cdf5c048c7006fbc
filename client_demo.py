#!/usr/bin/env python3
#
# PROJECT: cube-wireframe
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from cube_wireframe.argb import argb, parse_hex_color
from cube_wireframe.config import CubeSetup, RenderConfig
from cube_wireframe.demo import main as demo_main
from cube_wireframe.log import setup_default_logging


def build_parser():
    epilog = """\
examples:
  %(prog)s                                        Reference scene (needs a wide terminal)
  %(prog)s --translate 2 1.5 0 --scale 20 20 20    Fit an 80x24 terminal
  %(prog)s --translate 2 1.5 0 --scale 20 20 20 --rotate 15 0 0 1
  %(prog)s --color #00FFFF --bg-color #1A1A2E --ascii
  %(prog)s --log-file cube.log --log-level DEBUG  Trace every transform
"""
    parser = argparse.ArgumentParser(
        description="Wireframe cube viewer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--translate", nargs=3, type=float, default=[12.0, 2.0, 2.0],
                        metavar=("TX", "TY", "TZ"),
                        help="Translation applied first (default: 12 2 2)")
    parser.add_argument("--scale", nargs=3, type=float, default=[40.0, 40.0, 40.0],
                        metavar=("SX", "SY", "SZ"),
                        help="Scaling applied second; z uses SY (default: 40 40 40)")
    parser.add_argument("--rotate", nargs=4, type=float, default=None,
                        metavar=("ANGLE", "AX", "AY", "AZ"),
                        help="Rotation in degrees about a unit axis, applied last")
    parser.add_argument("--color", default="#FF00FF",
                        help="Wireframe color in hex #RRGGBB (default: #FF00FF)")
    parser.add_argument("--bg-color", default=None,
                        help="Background color in hex #RRGGBB (default: terminal)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-hud", action="store_true",
                        help="Hide the status line")
    parser.add_argument("--log-level", default="INFO",
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", default=None,
                        help="Write logs to this file while the viewer runs")
    return parser


def parse_args(argv=None):
    """Parse CLI flags into (CubeSetup, RenderConfig, args)."""
    parser = build_parser()
    args = parser.parse_args(argv)

    stroke_rgb = parse_hex_color(args.color)
    if stroke_rgb is None:
        parser.error(f"invalid --color {args.color!r}, expected #RRGGBB")
    bg_rgb = None
    if args.bg_color is not None:
        bg_rgb = parse_hex_color(args.bg_color)
        if bg_rgb is None:
            parser.error(f"invalid --bg-color {args.bg_color!r}, expected #RRGGBB")

    setup = CubeSetup(
        color=argb(*stroke_rgb),
        translation=tuple(args.translate),
        scaling=tuple(args.scale),
    )
    if args.rotate is not None:
        setup.rotation_angle = args.rotate[0]
        setup.rotation_axis = tuple(args.rotate[1:])

    config = RenderConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    if args.no_hud:
        config.show_hud = False
    if bg_rgb is not None:
        config.bg_color = argb(*bg_rgb)

    return setup, config, args


if __name__ == "__main__":
    setup, config, args = parse_args()
    # curses owns the terminal: log to a file, or only warnings to stderr
    if args.log_file:
        setup_default_logging(args.log_level, filename=args.log_file)
    else:
        setup_default_logging("WARNING")
    try:
        curses.wrapper(lambda s: demo_main(s, setup, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        curses.endwin()
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
