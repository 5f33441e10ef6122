"""Tests for mandprint.core.palette — membership, nearness and nearest-colour search."""

import math

from mandprint.core.palette import (
    INT64_SAFE_CHANNEL,
    NEAR_LIMIT,
    PALETTE_ARRAY,
    PRINTABLE_SET,
    components,
    format_rgb,
    hex_to_rgb,
    is_exact_member,
    is_near,
    is_within_unit_cube,
    minimum_distance,
    nearest_colors,
    palette_distances,
    printable_options,
    rgb_to_hex,
    squared_distance,
    to_rgb,
)
from mandprint.core.palette_data import PRINTABLE_COLORS


def norm(r: int, g: int, b: int) -> tuple[float, float, float]:
    return (r / 255.0, g / 255.0, b / 255.0)


class TestPaletteData:
    def test_size(self):
        assert len(PRINTABLE_COLORS) == 292

    def test_channels_in_range(self):
        for rgb in PRINTABLE_COLORS:
            assert len(rgb) == 3
            assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)

    def test_no_duplicates(self):
        assert len(PRINTABLE_SET) == len(PRINTABLE_COLORS)

    def test_white_printable_black_not(self):
        assert (255, 255, 255) in PRINTABLE_SET
        assert (0, 0, 0) not in PRINTABLE_SET

    def test_array_is_read_only(self):
        assert not PALETTE_ARRAY.flags.writeable


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_palette_entry(self):
        assert hex_to_rgb('#004924') == (0, 73, 36)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    def test_invalid_returns_none(self):
        assert hex_to_rgb('invalid') is None
        assert hex_to_rgb('#ff') is None
        assert hex_to_rgb('#ffffffff') is None

    def test_round_trip_hex(self):
        assert rgb_to_hex((0, 73, 36)) == '#004924'


class TestFormatRgb:
    def test_zero_padded(self):
        assert format_rgb((0, 73, 36)) == '000-073-036'

    def test_full(self):
        assert format_rgb((255, 255, 255)) == '255-255-255'


class TestComponents:
    def test_rgba_ignores_alpha(self):
        assert components((0.1, 0.2, 0.3, 1.0)) == (0.1, 0.2, 0.3)

    def test_none(self):
        assert components(None) is None

    def test_too_short(self):
        assert components((0.1, 0.2)) is None

    def test_non_numeric(self):
        assert components(('a', 0.2, 0.3)) is None

    def test_nan(self):
        assert components((math.nan, 0.2, 0.3)) is None


class TestToRgb:
    def test_lattice_values_round_trip(self):
        for c in (0, 36, 73, 109, 146, 182, 219, 255):
            assert to_rgb(norm(c, c, c)) == (c, c, c)

    def test_half_rounds_up(self):
        assert to_rgb((1.0, 0.0, 0.5)) == (255, 0, 128)

    def test_out_of_range_not_clamped(self):
        assert to_rgb((1.2, -0.2, 0.0)) == (306, -51, 0)

    def test_malformed(self):
        assert to_rgb(None) is None


class TestSquaredDistance:
    def test_same_colour(self):
        assert squared_distance((12, 34, 56), (12, 34, 56)) == 0

    def test_black_white_is_max(self):
        assert squared_distance((0, 0, 0), (255, 255, 255)) == 3 * 255 * 255

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert squared_distance(a, b) == squared_distance(b, a) == 900

    def test_exact_integer(self):
        d = squared_distance((0, 0, 0), (200, 200, 200))
        assert isinstance(d, int)
        assert d == 120000

    def test_palette_distances_match_scalar(self):
        query = (10, 200, 90)
        vector = palette_distances(query)
        assert len(vector) == len(PRINTABLE_COLORS)
        for rgb, d in zip(PRINTABLE_COLORS, vector):
            assert int(d) == squared_distance(query, rgb)


class TestExactMember:
    def test_palette_entry(self):
        assert is_exact_member(norm(0, 73, 36))

    def test_every_entry_is_member(self):
        for rgb in PRINTABLE_COLORS:
            assert is_exact_member(norm(*rgb))

    def test_black_not_member(self):
        assert not is_exact_member((0.0, 0.0, 0.0))

    def test_off_by_one(self):
        assert not is_exact_member(norm(1, 73, 36))

    def test_malformed_fails_closed(self):
        assert not is_exact_member(None)
        assert not is_exact_member((0.1,))


class TestNear:
    def test_limit(self):
        assert NEAR_LIMIT == 1089

    def test_exact_implies_near(self):
        for rgb in PRINTABLE_COLORS:
            assert is_near(norm(*rgb))

    def test_on_boundary_is_near(self):
        # (0, 40, 36) is exactly 33² from (0, 73, 36)
        assert minimum_distance(norm(0, 40, 36)) == 1089
        assert is_near(norm(0, 40, 36))

    def test_just_outside_boundary(self):
        assert minimum_distance(norm(0, 39, 36)) == 1156
        assert not is_near(norm(0, 39, 36))

    def test_near_black_not_near(self):
        assert not is_near(norm(1, 1, 1))

    def test_pure_red_not_near(self):
        assert minimum_distance(norm(255, 0, 0)) == 1296
        assert not is_near(norm(255, 0, 0))

    def test_huge_out_of_cube_distance_is_exact(self):
        rgb = to_rgb((2e7, 0.0, 0.0))
        assert rgb == (5_100_000_000, 0, 0)
        expected = min(squared_distance(rgb, c) for c in PRINTABLE_COLORS)
        assert minimum_distance((2e7, 0.0, 0.0)) == expected
        assert expected > 2**63

    def test_beyond_int64_does_not_raise(self):
        assert not is_near((1e17, 0.0, 0.0))
        nearest = nearest_colors((1e17, 0.0, 0.0))
        assert nearest
        assert all(c[0] == max(p[0] for p in PRINTABLE_COLORS) for c in nearest)

    def test_int64_limit_matches_scalar(self):
        rgb = (INT64_SAFE_CHANNEL, -INT64_SAFE_CHANNEL, 7)
        assert palette_distances(rgb) == [squared_distance(rgb, c) for c in PRINTABLE_COLORS]

    def test_malformed_fails_closed(self):
        assert not is_near(None)
        assert minimum_distance(None) is None


class TestUnitCube:
    def test_inside(self):
        assert is_within_unit_cube((0.0, 0.5, 1.0))

    def test_outside(self):
        assert not is_within_unit_cube((1.01, 0.5, 0.5))
        assert not is_within_unit_cube((0.5, -0.01, 0.5))

    def test_independent_of_palette(self):
        assert is_within_unit_cube((0.0, 0.0, 0.0))

    def test_malformed(self):
        assert not is_within_unit_cube(None)


class TestNearestColors:
    def test_exact_entry_is_singleton(self):
        assert nearest_colors(norm(0, 73, 36)) == [(0, 73, 36)]

    def test_every_entry_nearest_to_itself(self):
        for rgb in PRINTABLE_COLORS:
            assert nearest_colors(norm(*rgb)) == [rgb]

    def test_near_black(self):
        assert nearest_colors(norm(1, 1, 1)) == [(0, 73, 36)]
        assert minimum_distance(norm(1, 1, 1)) == 6410

    def test_ties_all_returned_in_palette_order(self):
        # (18, 73, 36) sits halfway between two entries
        assert nearest_colors(norm(18, 73, 36)) == [(0, 73, 36), (36, 73, 36)]

    def test_all_results_share_minimum(self):
        query = norm(100, 100, 100)
        rgb = to_rgb(query)
        result = nearest_colors(query)
        assert result
        dists = {squared_distance(rgb, c) for c in result}
        assert dists == {minimum_distance(query)}

    def test_results_are_plain_ints(self):
        for c in nearest_colors(norm(200, 10, 10)):
            assert all(type(v) is int for v in c)

    def test_malformed_returns_empty(self):
        assert nearest_colors(None) == []

    def test_printable_options_normalised(self):
        assert printable_options(norm(18, 73, 36)) == [norm(0, 73, 36), norm(36, 73, 36)]
