"""Hierarchy selection and evaluation.

The calculator holds the family of hierarchy expansions, keeps the ones
whose mass ordering matches the spectrum, and picks the one with the
smallest expansion uncertainty. The uncertainty of an expansion is the
quadratic sum of the shifts of the light Higgs mass when each of its
truncation flags is switched off in turn. Ties go to the hierarchy that
comes first in the registry.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, List, Optional
import numpy as np
from numpy.typing import NDArray

from .hierarchies import HIERARCHY_REGISTRY, HierarchyExpansion, get_hierarchy
from .utils.config import Parameters, SchemeFlags
from .utils.flags import ExpansionFlags
from .utils.numerics import (
    light_higgs_mass_squared,
    symmetric_matrix,
    tree_level_mass_matrix,
)

logger = logging.getLogger(__name__)


class NoSuitableHierarchyError(ValueError):
    """Raised when no hierarchy matches the mass ordering."""


@dataclass
class HierarchyResult:
    """Result of evaluating one hierarchy."""

    hierarchy: str
    s1: float  # dimensionless (1, 1) element
    s2: float  # dimensionless (2, 2) element
    s12: float  # dimensionless (1, 2) element
    mass_matrix_shift: NDArray[np.floating]  # [GeV^2]
    delta_mh2: float  # shift of the light eigenvalue [GeV^2]
    expansion_uncertainty: float = 0.0  # [GeV^2]
    hierarchy_spread: float = 0.0  # [GeV^2]

    @property
    def total_uncertainty(self) -> float:
        """Expansion uncertainty and hierarchy spread added in quadrature."""
        return float(np.hypot(self.expansion_uncertainty, self.hierarchy_spread))


class HierarchyCalculator:
    """Select and evaluate hierarchy expansions for an MSSM spectrum.

    Example:
        >>> calc = HierarchyCalculator(Parameters())
        >>> result = calc.calculate()
        >>> result.hierarchy, result.delta_mh2
    """

    def __init__(
        self,
        params: Parameters,
        scheme: SchemeFlags = SchemeFlags(),
        flags: Optional[ExpansionFlags] = None,
    ):
        """Initialize the calculator.

        Args:
            params: MSSM parameters
            scheme: Scheme and loop-order switches
            flags: Truncation flags (default: all enabled)
        """
        self.params = params
        self.scheme = scheme
        self.flags = flags if flags is not None else ExpansionFlags.all_on()

    def prefactor(self) -> float:
        """Return 3 Mt^4 / (2 pi^2 v^2) [GeV^2]."""
        p = self.params
        return 3.0 * p.Mt**4 / (2.0 * np.pi**2 * p.vev**2)

    def tree_level_matrix(self) -> NDArray[np.floating]:
        p = self.params
        return tree_level_mass_matrix(p.MZ, p.MA, p.beta)

    def _delta_mh2(self, shift: NDArray[np.floating]) -> float:
        tree = self.tree_level_matrix()
        return light_higgs_mass_squared(tree + shift) - light_higgs_mass_squared(tree)

    def _to_result(self, expansion: HierarchyExpansion) -> HierarchyResult:
        shift = self.prefactor() * symmetric_matrix(
            expansion.getS1(), expansion.getS2(), expansion.getS12()
        )
        return HierarchyResult(
            hierarchy=expansion.name,
            s1=expansion.getS1(),
            s2=expansion.getS2(),
            s12=expansion.getS12(),
            mass_matrix_shift=shift,
            delta_mh2=self._delta_mh2(shift),
        )

    def calculate_hierarchy(
        self, name: str, flags: Optional[ExpansionFlags] = None
    ) -> HierarchyResult:
        """Evaluate one hierarchy without uncertainty estimate.

        Args:
            name: Hierarchy name
            flags: Truncation flags (default: the calculator's flags)

        Returns:
            HierarchyResult
        """
        cls = get_hierarchy(name)
        expansion = cls.evaluate(
            self.params, flags if flags is not None else self.flags, self.scheme
        )
        return self._to_result(expansion)

    def expansion_uncertainty(self, name: str) -> float:
        """Estimate the truncation uncertainty of a hierarchy [GeV^2].

        Each required flag is switched off in turn; the shifts of the light
        eigenvalue are added in quadrature.
        """
        cls = get_hierarchy(name)
        full = self.calculate_hierarchy(name).delta_mh2
        squares = 0.0
        for flag in cls.required_flags:
            truncated = self.calculate_hierarchy(name, self.flags.with_flag(flag, 0))
            squares += (full - truncated.delta_mh2) ** 2
        return float(np.sqrt(squares))

    def suitable_hierarchies(self) -> List[str]:
        """Names of the hierarchies matching the mass ordering, in registry order."""
        p = self.params
        Mst1, Mst2 = float(p.MSt[0]), float(p.MSt[1])
        Msq = float(np.sqrt(p.msq2_average))
        return [
            name for name, cls in HIERARCHY_REGISTRY.items()
            if cls.suitable(Mst1, Mst2, p.MG, Msq)
        ]

    def _evaluate_with_uncertainty(self, name: str) -> HierarchyResult:
        result = self.calculate_hierarchy(name)
        result.expansion_uncertainty = self.expansion_uncertainty(name)
        return result

    def calculate_all(
        self,
        names: Optional[List[str]] = None,
        max_workers: Optional[int] = None,
    ) -> Dict[str, HierarchyResult]:
        """Evaluate several hierarchies with their expansion uncertainties.

        Args:
            names: Hierarchies to evaluate (default: the suitable ones)
            max_workers: Run the evaluations in a thread pool of this size

        Returns:
            Dictionary from name to HierarchyResult, in the order of `names`
        """
        if names is None:
            names = self.suitable_hierarchies()

        if not max_workers or max_workers <= 1:
            return {name: self._evaluate_with_uncertainty(name) for name in names}

        results: Dict[str, HierarchyResult] = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(self._evaluate_with_uncertainty, name): name
                for name in names
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        return {name: results[name] for name in names}

    def select_hierarchy(self) -> str:
        """Return the suitable hierarchy with the smallest expansion uncertainty.

        Raises:
            NoSuitableHierarchyError: No hierarchy matches the spectrum
        """
        return self.calculate().hierarchy

    def calculate(self, max_workers: Optional[int] = None) -> HierarchyResult:
        """Evaluate the best hierarchy and estimate its uncertainty.

        The hierarchy spread is the difference of the light-Higgs shift to
        the next-best suitable hierarchy (0 if only one fits).

        Raises:
            NoSuitableHierarchyError: No hierarchy matches the spectrum
        """
        results = self.calculate_all(max_workers=max_workers)
        if not results:
            raise NoSuitableHierarchyError(
                f"No hierarchy fits MSt = {self.params.MSt}, MG = {self.params.MG}"
            )

        # sorted() is stable: ties keep registry order
        ranked = sorted(results, key=lambda name: results[name].expansion_uncertainty)
        best = results[ranked[0]]
        if len(ranked) > 1:
            best.hierarchy_spread = abs(best.delta_mh2 - results[ranked[1]].delta_mh2)

        logger.info(
            "Selected hierarchy %s: delta_mh2 = %.4g GeV^2 "
            "(expansion %.3g, spread %.3g) out of %s",
            best.hierarchy, best.delta_mh2, best.expansion_uncertainty,
            best.hierarchy_spread, ranked,
        )
        return best
