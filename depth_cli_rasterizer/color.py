#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def clamped(cls, r, g, b) -> 'Color':
        """Truncate each channel to int and clamp it into [0, 255]."""
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))

    @classmethod
    def gray(cls, level) -> 'Color':
        c = _clamp_channel(level)
        return cls(c, c, c)


BLACK = Color(0, 0, 0)


def _clamp_channel(v) -> int:
    v = int(v)
    if v < 0: return 0
    if v > 255: return 255
    return v


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: Color with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return Color(r, g, b)
    except ValueError:
        return None


def build_gradient(color_a, color_b, steps):
    """Build a smooth gradient by interpolating in RGB space.
    Returns a list of `steps` Colors running from color_a to color_b."""
    r1, g1, b1 = color_a
    r2, g2, b2 = color_b

    palette = []
    for i in range(steps):
        t = i / float(steps - 1) if steps > 1 else 0.0
        r = int(round(r1 + (r2 - r1) * t))
        g = int(round(g1 + (g2 - g1) * t))
        b = int(round(b1 + (b2 - b1) * t))
        palette.append(Color(r, g, b))
    return palette


# --- xterm-256 fallback for terminals without 24-bit color ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# Grayscale ramp occupies indices 232-255 (24 shades).
# Values: 8, 18, 28, ..., 238


def _nearest_cube_val(v):
    """Find nearest index in the 6-level cube axis."""
    best_i = 0
    best_d = abs(v - _CUBE_VALUES[0])
    for i in range(1, 6):
        d = abs(v - _CUBE_VALUES[i])
        if d < best_d:
            best_d = d
            best_i = i
    return best_i


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""
    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


# --- ANSI escape sequences ---

RESET = "\x1b[0;00m"


def ansi_bg(color: Color, truecolor: bool = True) -> str:
    if truecolor:
        return f"\x1b[48;2;{color.r};{color.g};{color.b}m"
    return f"\x1b[48;5;{rgb_to_nearest_xterm(*color)}m"


def ansi_fg(color: Color, truecolor: bool = True) -> str:
    if truecolor:
        return f"\x1b[38;2;{color.r};{color.g};{color.b}m"
    return f"\x1b[38;5;{rgb_to_nearest_xterm(*color)}m"
