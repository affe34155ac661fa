"""Tests for hierarchy selection."""

import pytest
import numpy as np
from numpy.testing import assert_allclose

from mh3l.hierarchies import HIERARCHY_REGISTRY
from mh3l.hierarchy_calculator import (
    HierarchyCalculator,
    HierarchyResult,
    NoSuitableHierarchyError,
)
from mh3l.utils.config import Parameters, SchemeFlags
from mh3l.utils.flags import ExpansionFlags


def spectrum(Mst1, Mst2, Mgl, Msq, **kwargs):
    """Parameters with the given stop, gluino and light-squark masses."""
    msq2 = np.diag([Msq**2, Msq**2, Mst2**2])
    return Parameters(
        MSt=[Mst1, Mst2], MG=Mgl, mq2=msq2, mu2=msq2.copy(), md2=msq2.copy(), **kwargs
    )


class TestHierarchyCalculator:
    """Tests for HierarchyCalculator."""

    @pytest.fixture
    def degenerate_calc(self):
        """Default spectrum: only h3 fits."""
        return HierarchyCalculator(Parameters())

    @pytest.fixture
    def overlap_calc(self):
        """Spectrum in which both h3 and h6b2qg2 fit."""
        return HierarchyCalculator(spectrum(1300.0, 2000.0, 2000.0, 2000.0))

    def test_prefactor(self, degenerate_calc):
        p = degenerate_calc.params
        expected = 3 * p.Mt**4 / (2 * np.pi**2 * p.vev**2)
        assert_allclose(degenerate_calc.prefactor(), expected)

    def test_suitable_degenerate(self, degenerate_calc):
        assert degenerate_calc.suitable_hierarchies() == ["h3"]

    def test_suitable_light_stop(self):
        calc = HierarchyCalculator(spectrum(500.0, 2000.0, 2000.0, 2000.0))
        assert calc.suitable_hierarchies() == ["h6b2qg2"]

    def test_suitable_heavy_gluino(self):
        calc = HierarchyCalculator(spectrum(1000.0, 1050.0, 5000.0, 1000.0))
        assert calc.suitable_hierarchies() == ["h5"]

    def test_suitable_overlap(self, overlap_calc):
        assert overlap_calc.suitable_hierarchies() == ["h3", "h6b2qg2"]

    def test_no_suitable_hierarchy(self):
        calc = HierarchyCalculator(spectrum(100.0, 2000.0, 100.0, 2000.0))
        assert calc.suitable_hierarchies() == []
        with pytest.raises(NoSuitableHierarchyError):
            calc.calculate()
        with pytest.raises(ValueError):
            calc.select_hierarchy()

    def test_result_matrix(self, degenerate_calc):
        result = degenerate_calc.calculate_hierarchy("h3")
        assert isinstance(result, HierarchyResult)
        expected = degenerate_calc.prefactor() * np.array(
            [[result.s1, result.s12], [result.s12, result.s2]]
        )
        assert_allclose(result.mass_matrix_shift, expected)
        assert np.isfinite(result.delta_mh2)

    def test_positive_correction(self, degenerate_calc):
        """The leading stop correction raises the light Higgs mass."""
        assert degenerate_calc.calculate_hierarchy("h3").delta_mh2 > 0

    def test_single_hierarchy_has_no_spread(self, degenerate_calc):
        result = degenerate_calc.calculate()
        assert result.hierarchy == "h3"
        assert result.hierarchy_spread == 0.0
        assert result.expansion_uncertainty >= 0.0
        assert_allclose(
            result.total_uncertainty,
            np.hypot(result.expansion_uncertainty, result.hierarchy_spread),
        )

    def test_selects_smallest_uncertainty(self, overlap_calc):
        results = overlap_calc.calculate_all()
        best = overlap_calc.calculate()
        assert best.expansion_uncertainty == min(
            r.expansion_uncertainty for r in results.values()
        )
        other = [r for name, r in results.items() if name != best.hierarchy][0]
        assert_allclose(best.hierarchy_spread, abs(best.delta_mh2 - other.delta_mh2))
        assert overlap_calc.select_hierarchy() == best.hierarchy

    def test_tie_goes_to_registry_order(self, overlap_calc, monkeypatch):
        monkeypatch.setattr(overlap_calc, "expansion_uncertainty", lambda name: 0.0)
        assert overlap_calc.calculate().hierarchy == "h3"

    def test_uncertainty_vanishes_without_truncation_blocks(self):
        """With every flag already off, switching flags off changes nothing."""
        calc = HierarchyCalculator(Parameters(), flags=ExpansionFlags.all_off())
        assert calc.expansion_uncertainty("h3") == 0.0

    def test_explicit_flags_override(self, degenerate_calc):
        off = ExpansionFlags.all_off()
        explicit = degenerate_calc.calculate_hierarchy("h3", off)
        calc_off = HierarchyCalculator(degenerate_calc.params, flags=off)
        assert explicit.delta_mh2 == calc_off.calculate_hierarchy("h3").delta_mh2

    def test_loop_orders_off(self):
        scheme = SchemeFlags(one_loop=0, two_loop=0, three_loop=0)
        calc = HierarchyCalculator(Parameters(), scheme=scheme)
        result = calc.calculate_hierarchy("h3")
        assert np.all(result.mass_matrix_shift == 0.0)
        assert result.delta_mh2 == 0.0

    def test_thread_pool_matches_serial(self, overlap_calc):
        names = list(HIERARCHY_REGISTRY)
        serial = overlap_calc.calculate_all(names)
        threaded = overlap_calc.calculate_all(names, max_workers=3)
        assert list(threaded) == names
        for name in names:
            assert threaded[name].delta_mh2 == serial[name].delta_mh2
            assert threaded[name].expansion_uncertainty == serial[name].expansion_uncertainty

    def test_unknown_hierarchy(self, degenerate_calc):
        with pytest.raises(ValueError, match="Unknown hierarchy"):
            degenerate_calc.calculate_hierarchy("h9")
