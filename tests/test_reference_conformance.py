"""
Conformance Tests against segno

segno builds complete, standard-conforming QR and Micro QR symbols. Finder,
timing and alignment modules do not depend on the encoded data, so the
modules our blank layout sets must match segno's symbols wherever those
patterns sit.
"""

import pytest
import segno
from segno import consts

from qr_layout.functional_areas import build_blank_matrix
from qr_layout.geometry import alignment_anchors, alignment_centers, finder_origins, width

from .conftest import COMPACT_VERSIONS, STANDARD_VERSIONS

SAMPLE_VERSIONS = [1, 2, 6, 7, 14, 21, 32, 40]


def _reference(version):
    if version > 40:
        return segno.make_micro('1', version=f'M{version - 40}')
    return segno.make_qr('1', version=version)


def _assert_same(ours, ref, cells):
    for x, y in cells:
        assert ours[y][x] == bool(ref[y][x]), (x, y)


class TestAgainstSegno:

    @pytest.mark.parametrize("version", STANDARD_VERSIONS + COMPACT_VERSIONS)
    def test_width_matches(self, version):
        assert _reference(version).symbol_size(border=0) == (width(version), width(version))

    @pytest.mark.parametrize("version", STANDARD_VERSIONS[1:])
    def test_alignment_table_matches(self, version):
        assert tuple(consts.ALIGNMENT_POS[version - 2]) == alignment_anchors(version)

    @pytest.mark.parametrize("version", SAMPLE_VERSIONS + COMPACT_VERSIONS)
    def test_finder_patterns_match(self, version):
        ours = build_blank_matrix(version)
        ref = _reference(version).matrix
        for left, top in finder_origins(version):
            _assert_same(ours, ref, [(x, y) for y in range(top, top + 7) for x in range(left, left + 7)])

    @pytest.mark.parametrize("version", SAMPLE_VERSIONS)
    def test_timing_patterns_match_between_finders(self, version):
        ours = build_blank_matrix(version)
        ref = _reference(version).matrix
        size = width(version)
        _assert_same(ours, ref, [(i, 6) for i in range(8, size - 8)])
        _assert_same(ours, ref, [(6, i) for i in range(8, size - 8)])

    @pytest.mark.parametrize("version", COMPACT_VERSIONS)
    def test_compact_timing_patterns_match(self, version):
        ours = build_blank_matrix(version)
        ref = _reference(version).matrix
        size = width(version)
        _assert_same(ours, ref, [(i, 0) for i in range(8, size)])
        _assert_same(ours, ref, [(0, i) for i in range(8, size)])

    @pytest.mark.parametrize("version", SAMPLE_VERSIONS)
    def test_alignment_patterns_match(self, version):
        ours = build_blank_matrix(version)
        ref = _reference(version).matrix
        for cx, cy in alignment_centers(version):
            _assert_same(ours, ref, [(x, y) for y in range(cy - 2, cy + 3) for x in range(cx - 2, cx + 3)])
