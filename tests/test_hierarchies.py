"""Tests for the hierarchy expansions."""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from mh3l.hierarchies import (
    H3,
    H5,
    H6b2qg2,
    HIERARCHY_REGISTRY,
    assemble_mass_matrix,
    evaluate_hierarchy,
    get_hierarchy,
)
from mh3l.utils.config import Parameters, SchemeFlags
from mh3l.utils.flags import ExpansionFlag, ExpansionFlags, MissingFlagError
from mh3l.utils.numerics import stop_mixing_function


MT = 173.34
G3 = 1.03


def make_args(Mst1=2000.0, Mst2=2000.0, Mgl=2000.0, Msq=None, scale=2000.0, **overrides):
    """Constructor arguments for a spectrum; defaults to the common-mass point."""
    Msq = Mst2 if Msq is None else Msq
    Q2 = scale**2
    args = dict(
        Al4p=G3**2 / (16 * np.pi**2),
        beta=np.arctan(20.0),
        Dmglst2=Mgl - Mst2,
        Dmsqst2=Msq - Mst2,
        lmMt=np.log(Q2 / MT**2),
        lmMst1=np.log(Q2 / Mst1**2),
        lmMst2=np.log(Q2 / Mst2**2),
        Mgl=Mgl,
        Mt=MT,
        Mst1=Mst1,
        Mst2=Mst2,
        MuSUSY=2000.0,
        s2t=1.0,
        mdrFlag=0,
        oneLoopFlag=1,
        twoLoopFlag=1,
        threeLoopFlag=1,
    )
    args.update(overrides)
    return args


def results(expansion):
    return np.array([expansion.getS1(), expansion.getS2(), expansion.getS12()])


ALL_HIERARCHIES = list(HIERARCHY_REGISTRY.values())


# Common-mass point Mgl = Mst1 = Mst2 = Msq = 2000 GeV, Mt = 173.34 GeV,
# tan(beta) = 20, s2t = 1, evaluated at Q = Mt with Al4p = 0.01
REFERENCE_ARGS = dict(scale=MT, Al4p=0.01)
REFERENCE_TRIPLES = {
    "h3": (0.0, 3.8547045095954033, 0.0),
    "h5": (0.0, 3.3892321548020563, -3.4644462078e-3),
    "h6b2qg2": (7.027389556572129, 3.7444543459335223, 1.2508700912808715),
}


class TestReferenceValues:
    """Stored (S1, S2, S12) at the common-mass point."""

    @pytest.mark.parametrize("name", sorted(REFERENCE_TRIPLES))
    def test_common_mass_point(self, name):
        h = get_hierarchy(name)(ExpansionFlags.all_on(), **make_args(**REFERENCE_ARGS))
        assert_allclose(results(h), REFERENCE_TRIPLES[name], rtol=1e-8, atol=1e-12)


class TestCommonContract:
    """Properties every hierarchy shares."""

    @pytest.fixture(params=ALL_HIERARCHIES, ids=lambda cls: cls.name)
    def hierarchy(self, request):
        return request.param

    @pytest.fixture
    def light_stop_args(self):
        """Spectrum with split stops and a heavy gluino."""
        return make_args(Mst1=1000.0, Mst2=1300.0, Mgl=2500.0, Msq=1200.0, scale=1500.0)

    def test_common_mass_point_finite(self, hierarchy):
        """Mgl = Mst1 = Mst2 = 2000 GeV gives finite values."""
        h = hierarchy(ExpansionFlags.all_on(), **make_args())
        assert np.all(np.isfinite(results(h)))

    def test_deterministic(self, hierarchy, light_stop_args):
        first = results(hierarchy(ExpansionFlags.all_on(), **light_stop_args))
        second = results(hierarchy(ExpansionFlags.all_on(), **light_stop_args))
        assert np.array_equal(first, second)

    def test_loop_flags_off_gives_zero(self, hierarchy, light_stop_args):
        args = dict(light_stop_args, oneLoopFlag=0, twoLoopFlag=0, threeLoopFlag=0)
        h = hierarchy(ExpansionFlags.all_on(), **args)
        assert np.all(results(h) == 0.0)

    def test_loop_orders_add(self, hierarchy, light_stop_args):
        """The full result is the sum of the individual loop orders."""
        flags = ExpansionFlags.all_on()
        full = results(hierarchy(flags, **light_stop_args))
        total = np.zeros(3)
        for loop in ("oneLoopFlag", "twoLoopFlag", "threeLoopFlag"):
            only = {"oneLoopFlag": 0, "twoLoopFlag": 0, "threeLoopFlag": 0, loop: 1}
            total += results(hierarchy(flags, **dict(light_stop_args, **only)))
        assert_allclose(full, total, rtol=1e-9, atol=1e-9 * np.max(np.abs(full)))

    def test_all_flags_off_is_leading_order(self, hierarchy, light_stop_args):
        """Without truncation blocks the light-squark mass drops out."""
        off = ExpansionFlags.all_off()
        base = results(hierarchy(off, **light_stop_args))
        shifted = dict(light_stop_args, Dmsqst2=light_stop_args["Dmsqst2"] + 300.0)
        assert_allclose(results(hierarchy(off, **shifted)), base, rtol=1e-13)
        on = results(hierarchy(ExpansionFlags.all_on(), **shifted))
        assert not np.array_equal(on, base)

    def test_missing_flag(self, hierarchy, light_stop_args):
        missing = hierarchy.required_flags[0]
        flags = ExpansionFlags.all_on().without(missing)
        with pytest.raises(MissingFlagError) as excinfo:
            hierarchy(flags, **light_stop_args)
        assert excinfo.value.flag == missing
        assert excinfo.value.hierarchy == hierarchy.name

    def test_only_required_flags_needed(self, hierarchy, light_stop_args):
        flags = ExpansionFlags.all_on(hierarchy.required_flags)
        full = results(hierarchy(ExpansionFlags.all_on(), **light_stop_args))
        assert_allclose(results(hierarchy(flags, **light_stop_args)), full)

    def test_immutable(self, hierarchy, light_stop_args):
        h = hierarchy(ExpansionFlags.all_on(), **light_stop_args)
        with pytest.raises(AttributeError):
            h._s1 = 0.0

    def test_accessors_agree(self, hierarchy, light_stop_args):
        h = hierarchy(ExpansionFlags.all_on(), **light_stop_args)
        assert h.s1 == h.getS1()
        assert h.s2 == h.getS2()
        assert h.s12 == h.getS12()
        matrix = h.as_matrix()
        assert matrix[0, 1] == matrix[1, 0] == h.getS12()

    def test_nan_propagates(self, hierarchy, light_stop_args):
        args = dict(light_stop_args, MuSUSY=float("nan"))
        h = hierarchy(ExpansionFlags.all_on(), **args)
        assert np.isnan(h.getS1())

    def test_mdr_scheme_changes_result(self, hierarchy, light_stop_args):
        drbar = results(hierarchy(ExpansionFlags.all_on(), **light_stop_args))
        mdr = results(hierarchy(ExpansionFlags.all_on(), **dict(light_stop_args, mdrFlag=1)))
        assert np.all(np.isfinite(mdr))
        assert not np.array_equal(drbar, mdr)


class TestH6b2qg2:
    """Tests for the light-stop hierarchy."""

    @pytest.fixture
    def args(self):
        return make_args(Mst1=200.0, Mst2=2000.0, Mgl=2100.0, Msq=1900.0)

    def test_one_loop_decomposition(self, args):
        """Without the xxMst block F3 = 2 + ln(Mst1^2/Mst2^2)."""
        args = dict(args, twoLoopFlag=0, threeLoopFlag=0)
        flags = ExpansionFlags.all_on().with_flag(ExpansionFlag.xxMst, 0)
        h = H6b2qg2(flags, **args)
        p = h.inputs
        lr = p.t1 - p.t2
        expected = assemble_mass_matrix(p, p.t1 + p.t2, lr, 2 + lr)
        assert_allclose([h.getS1(), h.getS2(), h.getS12()], expected, rtol=1e-12)

    def test_one_loop_mixing_function(self, args):
        """The xxMst series reproduces the exact one-loop mixing function."""
        args = dict(args, twoLoopFlag=0, threeLoopFlag=0)
        h = H6b2qg2(ExpansionFlags.all_on(), **args)
        p = h.inputs
        norm = 4 * p.Mt**2 * p.Sbeta**2
        F3 = h.getS1() * norm / (0.5 * p.MuSUSY**2 * p.s2t**2)
        assert_allclose(F3, stop_mixing_function(p.Mst1**2, p.Mst2**2), rtol=1e-4)

    def test_flags_are_additive(self, args):
        """Each flag switches one block independently of the others."""
        off = ExpansionFlags.all_off()
        base = results(H6b2qg2(off, **args))
        full = results(H6b2qg2(ExpansionFlags.all_on(), **args))
        total = base.copy()
        for flag in H6b2qg2.required_flags:
            total += results(H6b2qg2(off.with_flag(flag, 1), **args)) - base
        assert_allclose(full, total, rtol=1e-9, atol=1e-9 * np.max(np.abs(full)))

    def test_gluino_drops_out_without_its_block(self, args):
        flags = ExpansionFlags.all_on().with_flag(ExpansionFlag.xxDmglst2, 0)
        base = results(H6b2qg2(flags, **args))
        heavier = results(H6b2qg2(flags, **dict(args, Dmglst2=args["Dmglst2"] + 200.0)))
        assert_allclose(heavier, base, rtol=1e-13)

    def test_each_flag_matters(self, args):
        full = results(H6b2qg2(ExpansionFlags.all_on(), **args))
        for flag in H6b2qg2.required_flags:
            truncated = results(H6b2qg2(ExpansionFlags.all_on().with_flag(flag, 0), **args))
            assert not np.array_equal(full, truncated), flag.name

    def test_suitable(self):
        assert H6b2qg2.suitable(200.0, 2000.0, 2100.0, 1900.0)
        assert not H6b2qg2.suitable(1950.0, 2050.0, 2000.0, 2000.0)


class TestH3:
    """Tests for the degenerate hierarchy."""

    def test_degenerate_limit(self):
        """The expansion is smooth at Mst1 = Mst2."""
        exact = results(H3(ExpansionFlags.all_on(), **make_args()))
        near = results(H3(ExpansionFlags.all_on(), **make_args(Mst2=2000.0 * (1 + 1e-9))))
        assert_allclose(near, exact, rtol=1e-6, atol=1e-6)

    def test_no_mixing_contribution_at_degeneracy(self):
        """With Mst1 = Mst2 the mixing functions F2, F3 vanish at one loop."""
        args = make_args(twoLoopFlag=0, threeLoopFlag=0)
        h = H3(ExpansionFlags.all_on(), **args)
        assert h.getS1() == 0.0
        assert h.getS12() == 0.0
        assert h.getS2() > 0.0

    @pytest.mark.parametrize("cls", [H3, H5], ids=["h3", "h5"])
    def test_one_loop_mixing_series(self, cls):
        """F3 = -d12^2/6 - d12^3/6 tracks the exact mixing function to O(d12^4)."""
        args = make_args(Mst1=2000.0, Mst2=1900.0, Mgl=2100.0, twoLoopFlag=0, threeLoopFlag=0)
        h = cls(ExpansionFlags.all_on(), **args)
        p = h.inputs
        d12 = (p.Mst1**2 - p.Mst2**2) / p.Mst1**2
        norm = 4 * p.Mt**2 * p.Sbeta**2
        F3 = h.getS1() * norm / (0.5 * p.MuSUSY**2 * p.s2t**2)
        assert_allclose(F3, -d12**2 / 6 - d12**3 / 6, rtol=1e-12)
        assert_allclose(F3, stop_mixing_function(p.Mst1**2, p.Mst2**2), rtol=2 * d12**2)

    def test_suitable(self):
        assert H3.suitable(1950.0, 2050.0, 2000.0, 2000.0)
        assert not H3.suitable(200.0, 2000.0, 2000.0, 2000.0)


class TestH5:
    """Tests for the heavy-gluino hierarchy."""

    def test_gluino_decoupling_series(self):
        """The xxMst block shrinks as the gluino gets heavier."""
        def truncation(Mgl):
            args = make_args(Mst1=1000.0, Mst2=1050.0, Mgl=Mgl, Msq=1000.0, scale=1000.0)
            full = results(H5(ExpansionFlags.all_on(), **args))
            flags = ExpansionFlags.all_on().with_flag(ExpansionFlag.xxMst, 0)
            return np.max(np.abs(full - results(H5(flags, **args))))

        assert truncation(1e5) < truncation(1e4)

    def test_suitable(self):
        assert H5.suitable(1000.0, 1050.0, 5000.0, 1000.0)
        assert not H5.suitable(1000.0, 1050.0, 1100.0, 1000.0)


class TestRegistry:
    """Tests for the hierarchy registry."""

    def test_names(self):
        for name, cls in HIERARCHY_REGISTRY.items():
            assert cls.name == name
            assert get_hierarchy(name) is cls

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown hierarchy"):
            get_hierarchy("h9")

    def test_evaluate_from_parameters(self):
        params = Parameters()
        h = evaluate_hierarchy("h3", params, ExpansionFlags.all_on(), SchemeFlags())
        assert isinstance(h, H3)
        assert np.all(np.isfinite(results(h)))
        assert_allclose(h.inputs.Mst1, params.MSt[0])
        assert_allclose(h.inputs.Al4p, params.g3**2 / (16 * np.pi**2))
