"""Tests for parameter classes and numerical utilities."""

import pytest
import numpy as np
import mpmath as mp
from numpy.testing import assert_allclose

from mh3l.utils.config import Parameters, SchemeFlags
from mh3l.utils.numerics import (
    SERIES_THRESHOLD,
    WIDE_SERIES_THRESHOLD,
    f1_tilde,
    f2_tilde,
    light_higgs_mass_squared,
    split_logs,
    stop_mixing_function,
    tree_level_mass_matrix,
)


def exact_f1(x):
    with mp.workdps(50):
        x = mp.mpf(x)
        return float(x * mp.log(x**2) / (x**2 - 1))


def exact_f2(x):
    with mp.workdps(50):
        y = mp.mpf(x) ** 2
        return float(6 * y * (2 - 2 * y + (1 + y) * mp.log(y)) / (y - 1) ** 3)


def exact_stop_mixing(m1sq, m2sq):
    with mp.workdps(50):
        y = mp.mpf(m1sq) / mp.mpf(m2sq)
        return float(2 - (y + 1) / (y - 1) * mp.log(y))


class TestParameters:
    """Tests for Parameters."""

    def test_defaults_valid(self):
        valid, errors = Parameters().validate()
        assert valid
        assert errors == []

    def test_derived_quantities(self):
        params = Parameters()
        assert_allclose(params.tan_beta, 20.0)
        assert_allclose(params.vev, 246.0)
        assert_allclose(params.beta, np.arctan(20.0))
        assert_allclose(params.Xt, 100.0 - 2000.0 / 20.0, atol=1e-10)
        assert_allclose(params.msq2_average, 2000.0**2)

    def test_array_conversion(self):
        params = Parameters(MSt=[500, 2000])
        assert isinstance(params.MSt, np.ndarray)
        assert params.MSt.dtype == float

    def test_unordered_stops(self):
        valid, errors = Parameters(MSt=[2050.0, 1950.0]).validate()
        assert not valid
        assert any("ascending" in e for e in errors)

    def test_mixing_out_of_range(self):
        valid, errors = Parameters(s2t=1.5).validate()
        assert not valid
        assert any("s2t" in e for e in errors)

    def test_asymmetric_matrix(self):
        mq2 = np.diag([4e6, 4e6, 4e6])
        mq2[0, 1] = 1.0
        valid, errors = Parameters(mq2=mq2).validate()
        assert not valid
        assert any("mq2" in e for e in errors)

    def test_nonpositive_mass(self):
        valid, errors = Parameters(Mt=-1.0).validate()
        assert not valid


class TestSchemeFlags:
    """Tests for SchemeFlags."""

    def test_defaults(self):
        scheme = SchemeFlags()
        assert scheme.mdr_flag == 0
        assert (scheme.one_loop, scheme.two_loop, scheme.three_loop) == (1, 1, 1)

    def test_invalid(self):
        with pytest.raises(ValueError, match="mdr_flag"):
            SchemeFlags(mdr_flag=2)


class TestLoopFunctions:
    """Tests for loop functions with removable singularities."""

    def test_unity_at_degeneracy(self):
        assert f1_tilde(1.0) == 1.0
        assert f2_tilde(1.0) == 1.0
        assert stop_mixing_function(4e6, 4e6) == 0.0

    @pytest.mark.parametrize("sign", [1.0, -1.0])
    def test_f1_continuity(self, sign):
        """Series and closed form should agree at the switching point."""
        d = sign * SERIES_THRESHOLD
        below = f1_tilde(1.0 + d * (1 - 1e-6))
        above = f1_tilde(1.0 + d * (1 + 1e-6))
        assert_allclose(below, above, rtol=1e-8)

    @pytest.mark.parametrize("sign", [1.0, -1.0])
    def test_f2_continuity(self, sign):
        e = sign * WIDE_SERIES_THRESHOLD
        below = f2_tilde(np.sqrt(1.0 + e * (1 - 1e-6)))
        above = f2_tilde(np.sqrt(1.0 + e * (1 + 1e-6)))
        assert_allclose(below, above, rtol=1e-7)

    def test_f2_value(self):
        """F2 at x^2 = 4: 6 * 4 * (2 - 8 + 5 ln 4) / 27."""
        expected = 24.0 * (-6.0 + 5.0 * np.log(4.0)) / 27.0
        assert_allclose(f2_tilde(2.0), expected)

    def test_stop_mixing_continuity(self):
        m2 = 4e6
        below = stop_mixing_function(m2 * (1 + WIDE_SERIES_THRESHOLD * (1 - 1e-6)), m2)
        above = stop_mixing_function(m2 * (1 + WIDE_SERIES_THRESHOLD * (1 + 1e-6)), m2)
        assert_allclose(below, above, rtol=1e-5)

    @pytest.mark.parametrize("sign", [1.0, -1.0])
    def test_series_precision_at_switch(self, sign):
        """Just inside the switching points the series are exact to double precision."""
        x1 = 1.0 + sign * 0.99 * SERIES_THRESHOLD
        assert_allclose(f1_tilde(x1), exact_f1(x1), rtol=1e-13)

        x2 = np.sqrt(1.0 + sign * 0.99 * WIDE_SERIES_THRESHOLD)
        assert_allclose(f2_tilde(x2), exact_f2(x2), rtol=1e-12)

        m2 = 4e6
        m1 = m2 * (1.0 + sign * 0.99 * WIDE_SERIES_THRESHOLD)
        assert_allclose(stop_mixing_function(m1, m2), exact_stop_mixing(m1, m2), rtol=1e-12)

    @pytest.mark.parametrize("sign", [1.0, -1.0])
    def test_closed_form_precision_past_switch(self, sign):
        x1 = 1.0 + sign * 1.01 * SERIES_THRESHOLD
        assert_allclose(f1_tilde(x1), exact_f1(x1), rtol=1e-9)

        x2 = np.sqrt(1.0 + sign * 1.01 * WIDE_SERIES_THRESHOLD)
        assert_allclose(f2_tilde(x2), exact_f2(x2), rtol=1e-9)

        m2 = 4e6
        m1 = m2 * (1.0 + sign * 1.01 * WIDE_SERIES_THRESHOLD)
        assert_allclose(stop_mixing_function(m1, m2), exact_stop_mixing(m1, m2), rtol=1e-9)

    def test_stop_mixing_value(self):
        """F3(m1, m2) = 2 - (m1^2+m2^2)/(m1^2-m2^2) ln(m1^2/m2^2)."""
        expected = 2.0 - 5.0 / -3.0 * np.log(1.0 / 4.0)
        assert_allclose(stop_mixing_function(1.0, 4.0), expected)

    def test_split_logs(self):
        lmMt, lmMS = split_logs(1000.0, 173.34, 2000.0)
        assert_allclose(lmMt + lmMS, np.log(2000.0**2 / 173.34**2))


class TestTreeLevel:
    """Tests for the tree-level mass matrix."""

    def test_trace(self):
        beta = np.arctan(20.0)
        matrix = tree_level_mass_matrix(91.1876, 2000.0, beta)
        assert_allclose(np.trace(matrix), 91.1876**2 + 2000.0**2)

    def test_decoupling_limit(self):
        """For MA >> MZ the light eigenvalue approaches MZ^2 cos^2(2 beta)."""
        beta = np.arctan(20.0)
        matrix = tree_level_mass_matrix(91.1876, 1e5, beta)
        expected = 91.1876**2 * np.cos(2 * beta) ** 2
        assert_allclose(light_higgs_mass_squared(matrix), expected, rtol=1e-4)
