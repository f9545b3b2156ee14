"""Tests for the command-line demo."""

import pytest

from depth_cli_rasterizer.demo import build_parser, main


@pytest.fixture
def dumb_term(monkeypatch):
    monkeypatch.setenv('TERM', 'dumb')
    monkeypatch.delenv('COLORTERM', raising=False)


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert (args.width, args.height) == (150, 50)
        assert args.mode is None
        assert args.frustum == [-1.0, 1.0, -1.0, 1.0, 1.0, 2.0]
        assert not args.no_bbox
        assert not args.xterm256

    def test_bad_mode_exits_2(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(['--mode', 'sepia'])
        assert exc.value.code == 2


class TestMain:

    def test_monochrome_frame(self, dumb_term, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        lines = out.split('\n')
        assert lines[0] == '+' + '-' * 150 + '+'
        assert lines[51] == '+' + '-' * 150 + '+'
        assert out.endswith('\n')
        assert any(ch in out for ch in '123456789')

    def test_color_frame(self, dumb_term, capsys):
        assert main(['--mode', 'color', '--width', '10', '--height', '5']) == 0
        out = capsys.readouterr().out
        assert out.count('\n') == 5
        assert '\x1b[48;2;' in out

    def test_xterm256(self, dumb_term, capsys):
        assert main(['--mode', 'color', '--256', '--width', '10', '--height', '5']) == 0
        out = capsys.readouterr().out
        assert '\x1b[48;5;' in out
        assert '\x1b[48;2;' not in out

    def test_gradient_colors(self, dumb_term, capsys):
        assert main(['--mode', 'color', '--width', '20', '--height', '10',
                     '--near-color', '#FF0000', '--far-color', '#0000FF']) == 0
        assert '█' in capsys.readouterr().out

    def test_no_bbox_same_output(self, dumb_term, capsys):
        main(['--width', '40', '--height', '20'])
        boxed = capsys.readouterr().out
        main(['--width', '40', '--height', '20', '--no-bbox'])
        assert capsys.readouterr().out == boxed

    @pytest.mark.parametrize("argv", [
        ['--width', '1'],
        ['--mode', 'color', '--near-color', '#zzzzzz', '--far-color', '#000000'],
        ['--mode', 'color', '--near-color', '#ffffff'],
        ['--frustum', '1', '1', '-1', '1', '1', '2'],
    ])
    def test_invalid_values_exit_1(self, dumb_term, capsys, argv):
        assert main(argv) == 1
        assert capsys.readouterr().err.startswith('Error:')
