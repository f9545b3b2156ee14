"""Tests for the depth -> Cell shaders."""

import pytest

from depth_cli_rasterizer.color import Color
from depth_cli_rasterizer.shading import (
    BLOCK, GradientShader, grayscale_shader, make_shader, monochrome_shader)


class TestMonochrome:

    @pytest.mark.parametrize("depth,glyph", [
        (-1.0, '0'),
        (0.0, '5'),
        (0.5, '7'),
        (0.99, '9'),
        (1.0, ':'),
    ])
    def test_affine_mapping(self, depth, glyph):
        assert monochrome_shader(depth).glyph == glyph

    @pytest.mark.parametrize("depth,glyph", [(-3.0, '0'), (4.0, ':')])
    def test_clamped(self, depth, glyph):
        assert monochrome_shader(depth).glyph == glyph


class TestGrayscale:

    def test_levels(self):
        assert grayscale_shader(-1.0).fg == Color(0, 0, 0)
        assert grayscale_shader(0.0).bg == Color(128, 128, 128)

    def test_clamped_at_far_plane(self):
        cell = grayscale_shader(1.0)
        assert cell.fg == Color(255, 255, 255)
        assert cell.bg == cell.fg

    def test_block_glyph(self):
        assert grayscale_shader(0.2).glyph == BLOCK


class TestGradient:

    def test_endpoints(self):
        shader = GradientShader((0, 0, 0), (255, 255, 255), steps=2)
        assert shader(-1.0).fg == Color(0, 0, 0)
        assert shader(1.0).fg == Color(255, 255, 255)
        assert shader(0.99).fg == Color(0, 0, 0)

    def test_saturates(self):
        shader = GradientShader((10, 20, 30), (200, 100, 0), steps=8)
        assert shader.index_for(-5.0) == 0
        assert shader.index_for(5.0) == 7

    def test_too_few_steps(self):
        with pytest.raises(ValueError):
            GradientShader((0, 0, 0), (1, 1, 1), steps=1)


class TestMakeShader:

    def test_monochrome(self):
        assert make_shader('monochrome') is monochrome_shader

    def test_color_defaults_to_grayscale(self):
        assert make_shader('color') is grayscale_shader

    def test_color_with_endpoints(self):
        shader = make_shader('color', Color(255, 0, 0), Color(0, 0, 255), steps=4)
        assert isinstance(shader, GradientShader)
        assert shader.palette[0] == Color(255, 0, 0)
        assert shader.palette[-1] == Color(0, 0, 255)

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            make_shader('sepia')
