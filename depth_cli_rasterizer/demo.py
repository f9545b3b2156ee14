#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from .color import parse_hex_color
from .config import RenderConfig
from .mesh import demo_quad
from .projection import DEFAULT_FRUSTUM
from .renderer import Renderer

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Single-frame demo: builds a RenderConfig from CLI args, draws the demo
    quad and writes it to the output stream.
    """

    def __init__(self, args, stream=None):
        self.stream = stream if stream is not None else sys.stdout

        # ── RenderConfig from terminal detection + CLI overrides ────────
        overrides = dict(
            width=args.width,
            height=args.height,
            frustum=tuple(args.frustum),
            use_bbox=not args.no_bbox,
            gradient_steps=args.gradient_steps,
        )
        if args.mode:
            overrides['mode'] = args.mode
        if args.xterm256:
            overrides['truecolor'] = False

        # ── Parse user-specified hex colors ─────────────────────────────
        near_rgb = self._parse_color(args.near_color, '--near-color')
        far_rgb = self._parse_color(args.far_color, '--far-color')
        if (near_rgb is None) != (far_rgb is None):
            raise ValueError("--near-color and --far-color must be given together")
        overrides['near_color'] = near_rgb
        overrides['far_color'] = far_rgb

        self.config = RenderConfig.detect_terminal(**overrides)
        self.renderer = Renderer(self.config)
        self.triangles = demo_quad()

    @staticmethod
    def _parse_color(value, flag):
        if value is None:
            return None
        rgb = parse_hex_color(value)
        if rgb is None:
            raise ValueError(f"{flag}: expected #RRGGBB, got {value!r}")
        return rgb

    def run(self) -> int:
        written = self.renderer.draw_all(self.triangles)
        logger.info("Drew %d triangles, %d cell writes (%s mode)",
                    len(self.triangles), written, self.config.mode)
        self.renderer.render(self.stream)
        if not self.config.is_color:
            # Bordered frames have no trailing newline of their own
            self.stream.write('\n')
        return 0


def build_parser():
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                      Bordered ASCII depth image
  %(prog)s --mode color                         24-bit grayscale blocks
  %(prog)s --mode color --256                   Same, for xterm-256 terminals
  %(prog)s --mode color --near-color #FFD000 --far-color #300060
  %(prog)s --width 80 --height 24 --no-bbox     Small frame, full-buffer scan
"""
    parser = argparse.ArgumentParser(
        prog="depth-cli-rasterizer",
        description="Software triangle rasterizer with depth-shaded terminal output",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=150,
                        help="Buffer width in cells (default: 150)")
    parser.add_argument("--height", type=int, default=50,
                        help="Buffer height in cells (default: 50)")
    parser.add_argument("--mode", choices=("monochrome", "color"),
                        help="Shading mode (default: detected from terminal)")
    parser.add_argument("--near-color",
                        help="Color-mode gradient start in hex #RRGGBB")
    parser.add_argument("--far-color",
                        help="Color-mode gradient end in hex #RRGGBB")
    parser.add_argument("--gradient-steps", type=int, default=16,
                        help="Number of gradient color steps (default: 16)")
    parser.add_argument("--no-bbox", action="store_true",
                        help="Scan the whole buffer instead of the triangle's bounding box")
    parser.add_argument("--256", dest="xterm256", action="store_true",
                        help="Use xterm-256 colors instead of 24-bit")
    parser.add_argument("--frustum", type=float, nargs=6, default=list(DEFAULT_FRUSTUM),
                        metavar=("L", "R", "T", "B", "N", "F"),
                        help="Projection frustum (default: -1 1 -1 1 1 2)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging on stderr")
    return parser


def main(argv=None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        app = DemoApp(args)
        return app.run()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
