"""
Tests for the command-line entry point (python -m qr_layout).
"""

from PIL import Image

from qr_layout.__main__ import build_parser, main


class TestCli:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.version == 2
        assert args.output == 'qr.png'
        assert args.view == 'debug'
        assert not args.skip_function_patterns

    def test_main_writes_png(self, tmp_path):
        out = tmp_path / "layout.png"
        assert main(['--version', '1', '--output', str(out), '--scale', '1', '--border', '0']) == 0
        img = Image.open(out)
        assert img.size == (21, 21)
        assert img.getpixel((20, 20)) == 64

    def test_main_zones_view_with_skip(self, tmp_path):
        out = tmp_path / "zones.png"
        assert main(['-v', '44', '-o', str(out), '--view', 'zones', '--skip-function-patterns']) == 0
        assert Image.open(out).mode == 'RGB'

    def test_main_when_out_of_range_then_exit_1(self, tmp_path, caplog):
        out = tmp_path / "never.png"
        assert main(['--version', '45', '--output', str(out)]) == 1
        assert not out.exists()
        assert 'between 1 and 44' in caplog.text

    def test_main_when_bad_scale_then_exit_1(self, tmp_path):
        assert main(['--output', str(tmp_path / "x.png"), '--scale', '0']) == 1

    def test_main_when_unwritable_then_exit_1(self, tmp_path):
        assert main(['--output', str(tmp_path / "missing" / "x.png")]) == 1
