#!/usr/bin/env python3
"""
Example Higgs Mass Corrections with mh3l

This script demonstrates the package by:
1. Evaluating every hierarchy expansion for a degenerate spectrum
2. Selecting the best hierarchy for several spectra
3. Splitting the EFT corrections into logarithms and thresholds

Usage:
    python example_mh3l.py
"""

import logging
import numpy as np

from mh3l import (
    ExpansionFlags,
    HIERARCHY_REGISTRY,
    HierarchyCalculator,
    Mh2EFTCalculator,
    NoSuitableHierarchyError,
    Parameters,
    SchemeFlags,
    evaluate_hierarchy,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def print_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f" {title}")
    print("=" * 70)


def spectrum(Mst1: float, Mst2: float, Mgl: float, Msq: float) -> Parameters:
    msq2 = np.diag([Msq**2, Msq**2, Mst2**2])
    return Parameters(MSt=[Mst1, Mst2], MG=Mgl, mq2=msq2, mu2=msq2.copy(), md2=msq2.copy())


def demonstrate_hierarchies():
    """Evaluate every hierarchy at each loop order."""
    print_header("1. HIERARCHY EXPANSIONS")

    params = Parameters()
    flags = ExpansionFlags.all_on()
    print(f"\n{'Hierarchy':<10} {'loops':<6} {'S1':>14} {'S2':>14} {'S12':>14}")
    print("-" * 62)
    for name in HIERARCHY_REGISTRY:
        for loops in (1, 2, 3):
            scheme = SchemeFlags(
                one_loop=int(loops == 1), two_loop=int(loops == 2), three_loop=int(loops == 3)
            )
            h = evaluate_hierarchy(name, params, flags, scheme)
            print(f"{name:<10} {loops:<6} {h.getS1():>14.6e} {h.getS2():>14.6e} {h.getS12():>14.6e}")


def demonstrate_selection():
    """Pick the best hierarchy for a few spectra."""
    print_header("2. HIERARCHY SELECTION")

    spectra = {
        "degenerate": spectrum(1950.0, 2050.0, 2000.0, 2000.0),
        "light stop": spectrum(500.0, 2000.0, 2000.0, 2000.0),
        "heavy gluino": spectrum(1000.0, 1050.0, 5000.0, 1000.0),
        "overlap": spectrum(1300.0, 2000.0, 2000.0, 2000.0),
    }
    for label, params in spectra.items():
        calc = HierarchyCalculator(params)
        try:
            result = calc.calculate(max_workers=2)
        except NoSuitableHierarchyError as exc:
            logger.warning("%s: %s", label, exc)
            continue
        print(
            f"{label:<14} {result.hierarchy:<8} dMh^2 = {result.delta_mh2:10.2f} GeV^2 "
            f"+- {result.total_uncertainty:.2f}"
        )


def demonstrate_eft():
    """Split the EFT corrections into logarithms and thresholds."""
    print_header("3. EFT CORRECTIONS")

    params = Parameters(scale=173.34, Au=np.diag([0.0, 0.0, 2000.0 * np.sqrt(6.0) + 100.0]))
    calc = Mh2EFTCalculator(params)
    print(calc)

    for omit_sm, omit_mssm in ((0, 0), (1, 0), (0, 1), (1, 1)):
        print(
            f"omitSMLogs={omit_sm} omitMSSMLogs={omit_mssm}: "
            f"1L = {calc.getDeltaMh2EFT1Loop(omit_sm, omit_mssm):10.3f}, "
            f"2L = {calc.getDeltaMh2EFT2Loop(omit_sm, omit_mssm):10.3f}, "
            f"3L = {calc.getDeltaMh2EFT3Loop(omit_sm, omit_mssm, 0):10.3f} GeV^2"
        )


def main():
    demonstrate_hierarchies()
    demonstrate_selection()
    demonstrate_eft()


if __name__ == "__main__":
    main()
