#
# PROJECT: depth-cli-rasterizer
# MODULE: depth_cli_rasterizer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .color import Color
from .projection import DEFAULT_FRUSTUM
from .shading import MODES


@dataclass
class RenderConfig:
    """Configuration for the rasterization pipeline."""
    width: int = 150
    height: int = 50
    mode: str = 'monochrome'
    frustum: Tuple[float, float, float, float, float, float] = DEFAULT_FRUSTUM
    use_bbox: bool = True
    truecolor: bool = True
    # Gradient endpoints for color mode; both None means plain grayscale
    near_color: Optional[Color] = None
    far_color: Optional[Color] = None
    gradient_steps: int = 16

    def __post_init__(self):
        if self.width < 2 or self.height < 2:
            raise ValueError(
                f"buffer must be at least 2x2, got {self.width}x{self.height}")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}")
        if len(self.frustum) != 6:
            raise ValueError("frustum needs 6 values: left right top bottom near far")
        self.frustum = tuple(float(v) for v in self.frustum)
        if self.gradient_steps < 2:
            raise ValueError(
                f"gradient_steps must be >= 2, got {self.gradient_steps}")

    @property
    def is_color(self) -> bool:
        return self.mode == 'color'

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess terminal capabilities from TERM and COLORTERM and return a
        config for them. Keyword overrides win over the guess.
        """
        term = os.environ.get('TERM', '').lower()
        colorterm = os.environ.get('COLORTERM', '').lower()

        is_dumb = term in ('', 'dumb', 'unknown')
        has_truecolor = colorterm in ('truecolor', '24bit')
        has_256 = '256color' in term

        settings = dict(
            mode='monochrome' if is_dumb else 'color',
            # Without COLORTERM a 256-color TERM is the safer bet
            truecolor=has_truecolor or not has_256,
        )
        settings.update(overrides)
        return cls(**settings)
