#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/sink.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Serialize a resolved Canvas as terminal text."""

import sys

from .canvas import Canvas
from .color import RESET, ansi_bg, ansi_fg


def format_bordered(canvas: Canvas) -> str:
    """
    Monochrome frame: rows wrapped in '|' and the whole frame in a
    '+---+' border W+2 wide. No trailing newline after the bottom border.
    """
    border = '+' + '-' * canvas.w + '+'
    lines = [border]
    for row in canvas.rows():
        lines.append('|' + ''.join(cell.glyph for cell in row) + '|')
    lines.append(border)
    return '\n'.join(lines)


def format_ansi(canvas: Canvas, truecolor: bool = True) -> str:
    """
    Color frame: per cell background, foreground, glyph, reset.
    Every row ends with a newline; no border.
    """
    out = []
    for row in canvas.rows():
        for cell in row:
            out.append(ansi_bg(cell.bg, truecolor))
            out.append(ansi_fg(cell.fg, truecolor))
            out.append(cell.glyph)
            out.append(RESET)
        out.append('\n')
    return ''.join(out)


def write_bordered(canvas: Canvas, stream=None):
    stream = stream if stream is not None else sys.stdout
    stream.write(format_bordered(canvas))
    stream.flush()


def write_ansi(canvas: Canvas, stream=None, truecolor: bool = True):
    stream = stream if stream is not None else sys.stdout
    stream.write(format_ansi(canvas, truecolor))
    stream.flush()
