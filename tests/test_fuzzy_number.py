"""
Tests for triangular fuzzy numbers and alpha-cut defuzzification.
"""

import math

import pytest

from fuzzylp.fuzzy import AlphaCut, TriangularFuzzyNumber as TFN, alpha_cut, crisp


FUZZY_NUMBERS = [
    TFN(10, 20, 30),
    TFN(50, 100, 150),
    TFN(25, 30, 34),
    TFN(0.1, 0.7, 1.3),
    TFN(-5.5, 2.25, 3.0),
    TFN(7, 7, 7),
]

ALPHAS = [i / 10 for i in range(11)]


class TestAlphaCut:
    """Tests for the alpha-cut interval."""

    def test_support_at_zero(self):
        assert alpha_cut(TFN(10, 20, 30), 0.0) == AlphaCut(10, 30)

    def test_peak_at_one(self):
        assert alpha_cut(TFN(10, 20, 30), 1.0) == AlphaCut(20, 20)

    def test_midway(self):
        cut = alpha_cut(TFN(10, 20, 40), 0.5)
        assert cut.lower == 15
        assert cut.upper == 30
        assert cut.width == 15
        assert cut.midpoint == 22.5

    def test_sides_interpolate_independently(self):
        cut = TFN(0, 10, 100).alpha_cut(0.25)
        assert cut.lower == pytest.approx(2.5)
        assert cut.upper == pytest.approx(77.5)

    @pytest.mark.parametrize("fuzzy", FUZZY_NUMBERS[:3])
    def test_monotonic_interpolation(self, fuzzy):
        cuts = [fuzzy.alpha_cut(a) for a in ALPHAS]
        lowers = [c.lower for c in cuts]
        uppers = [c.upper for c in cuts]
        widths = [c.width for c in cuts]

        assert lowers == sorted(lowers)
        assert uppers == sorted(uppers, reverse=True)
        assert widths == sorted(widths, reverse=True)
        assert widths[-1] == 0

    def test_out_of_range_alpha_extrapolates(self):
        fuzzy = TFN(10, 20, 30)
        assert fuzzy.alpha_cut(2.0) == AlphaCut(30, 10)
        assert fuzzy.alpha_cut(-1.0) == AlphaCut(0, 40)

    def test_unordered_triple_swaps_roles(self):
        fuzzy = TFN(30, 20, 10)
        assert not fuzzy.is_ordered
        cut = fuzzy.alpha_cut(0.0)
        assert cut.lower == 30
        assert cut.upper == 10


class TestCrisp:
    """Tests for midpoint defuzzification."""

    @pytest.mark.parametrize("fuzzy", FUZZY_NUMBERS)
    def test_anchor_consistency(self, fuzzy):
        assert crisp(fuzzy, 1.0) == fuzzy.peak

    @pytest.mark.parametrize("fuzzy", FUZZY_NUMBERS)
    def test_support_midpoint_at_zero(self, fuzzy):
        assert crisp(fuzzy, 0.0) == (fuzzy.left + fuzzy.right) / 2

    def test_asymmetric_triangle(self):
        # cut at 0.5 is [27.5, 32.0]
        assert crisp(TFN(25, 30, 34), 0.5) == pytest.approx(29.75)

    def test_method_matches_function(self):
        fuzzy = TFN(80, 120, 160)
        assert fuzzy.crisp(0.3) == crisp(fuzzy, 0.3)

    def test_non_finite_propagates(self):
        assert math.isnan(crisp(TFN(float("nan"), 1, 2), 0.5))


class TestConstruction:
    """Tests for building fuzzy numbers from data."""

    def test_from_short_keys(self):
        assert TFN.from_dict({"a": 1, "m": 2, "b": 3}) == TFN(1.0, 2.0, 3.0)

    def test_from_named_keys(self):
        data = {"left": 1, "peak": 2, "right": 3}
        assert TFN.from_dict(data) == TFN(1.0, 2.0, 3.0)

    def test_from_sequence(self):
        assert TFN.from_dict([4, 5, 6]) == TFN(4.0, 5.0, 6.0)

    def test_unordered_accepted(self):
        assert TFN.from_dict([3, 2, 1]) == TFN(3.0, 2.0, 1.0)

    @pytest.mark.parametrize("data", [{"a": 1, "m": 2}, [1, 2], "1,2,3", 5])
    def test_invalid_shapes(self, data):
        with pytest.raises(ValueError):
            TFN.from_dict(data)

    def test_to_dict(self):
        assert TFN(1, 2, 3).to_dict() == {"a": 1, "m": 2, "b": 3}

    def test_immutable(self):
        fuzzy = TFN(1, 2, 3)
        with pytest.raises(AttributeError):
            fuzzy.peak = 5
