"""
Unit Tests for QrSymbol

Tests for qr_layout.symbol: construction-time validation, derived
geometry, the held encoding region and debug shades.
"""

import pytest

from qr_layout import OutOfRangeError, QrSymbol, generate_encoding_region
from qr_layout.symbol import block_shade


class TestQrSymbolConstruction:
    """Tests for the validation gate at construction."""

    @pytest.mark.parametrize("version", [0, 45, -1, 1000])
    def test_init_when_out_of_range_then_raises(self, version):
        with pytest.raises(OutOfRangeError):
            QrSymbol(version)

    def test_init_when_valid_then_exposes_geometry(self):
        symbol = QrSymbol(7)
        assert symbol.version == 7
        assert symbol.width == 45
        assert not symbol.is_compact
        assert symbol.timing_line_offset == 6
        assert symbol.alignment_anchors == (6, 22, 38)
        assert (22, 22) in symbol.alignment_centers

    def test_init_when_compact_then_micro_geometry(self):
        symbol = QrSymbol(44)
        assert symbol.width == 17
        assert symbol.is_compact
        assert symbol.timing_line_offset == 0
        assert symbol.alignment_centers == []

    def test_repr(self):
        assert repr(QrSymbol(3)) == "QrSymbol(version=3)"


class TestQrSymbolRegion:
    """Tests for the encoding region held by a symbol."""

    def test_region_matches_engine(self):
        assert QrSymbol(5).encoding_region == generate_encoding_region(5)

    def test_region_honours_skip_flag(self):
        symbol = QrSymbol(5, skip_function_patterns=True)
        assert symbol.skip_function_patterns
        assert symbol.encoding_region == generate_encoding_region(5, skip_function_patterns=True)

    def test_region_is_stable_across_accesses(self):
        symbol = QrSymbol(2)
        assert symbol.encoding_region is symbol.encoding_region

    def test_module_count(self):
        assert QrSymbol(1).module_count == 421


class TestDebugShades:
    """Tests for block shading."""

    def test_block_shade_cycles_every_8_blocks(self):
        assert [block_shade(i) for i in range(9)] == [64, 80, 96, 112, 128, 144, 160, 176, 64]

    def test_debug_shades_version_1(self):
        shades = QrSymbol(1).debug_shades()
        assert shades[20][20] == 64          # first block
        assert shades[17][19] == 64          # 8th module of first block
        assert shades[16][20] == 80          # second block
        # Timing column below row 0 is never visited
        assert shades[10][6] is None

    def test_blank_matrix_is_fresh(self):
        symbol = QrSymbol(1)
        matrix = symbol.blank_matrix()
        matrix[0][0] = False
        assert symbol.blank_matrix()[0][0]
