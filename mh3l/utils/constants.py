"""Transcendental constants shared by all hierarchy expansions.

The table is built once at import time and is immutable afterwards.
Polylogarithms at complex arguments are evaluated with mpmath and
rounded to double precision.
"""

from dataclasses import dataclass
from typing import Final
import numpy as np
import mpmath as mp


@dataclass(frozen=True)
class ConstantTable:
    """Zeta values, fixed-argument polylogarithms and their combinations."""

    # Zeta values
    z2: float  # zeta(2) = pi^2/6
    z3: float  # zeta(3)
    z4: float  # zeta(4) = pi^4/90

    # Polylogarithms
    pl412: float  # Li4(1/2)
    pl2expPi3: complex  # Li2(exp(i pi/3))
    pl3expPi6sqrt3: complex  # Li3(exp(-i pi/6)/sqrt(3))

    # Derived combinations appearing in three-loop vacuum integrals
    B4: float
    D3: float
    DN: float
    OepS2: float
    S2: float
    T1ep: float


def _polylog(order: int, z) -> complex:
    return complex(mp.polylog(order, z))


def compute_constant_table(dps: int = 30) -> ConstantTable:
    """Evaluate the constant table.

    Args:
        dps: Decimal digits used by mpmath for the polylogarithms

    Returns:
        ConstantTable rounded to double precision
    """
    with mp.workdps(dps):
        z3 = float(mp.zeta(3))
        pl412 = float(mp.re(mp.polylog(4, mp.mpf(1) / 2)))
        pl2expPi3 = _polylog(2, mp.expjpi(mp.mpf(1) / 3))
        pl3expPi6sqrt3 = _polylog(3, mp.expjpi(-mp.mpf(1) / 6) / mp.sqrt(3))

    pi = np.pi
    log2 = np.log(2.0)
    log3 = np.log(3.0)
    sqrt3 = np.sqrt(3.0)
    z2 = pi**2 / 6.0
    z4 = pi**4 / 90.0

    im_pl2 = pl2expPi3.imag
    im_pl3 = pl3expPi6sqrt3.imag

    B4 = -4 * z2 * log2**2 + 2 / 3.0 * log2**4 - 13 / 2.0 * z4 + 16.0 * pl412
    D3 = 6 * z3 - 15 / 4.0 * z4 - 6.0 * im_pl2**2
    DN = 6 * z3 - 4 * z2 * log2**2 + 2 / 3.0 * log2**4 - 21 / 2.0 * z4 + 16.0 * pl412
    OepS2 = (
        -763 / 32.0 - (9 * pi * sqrt3 * log3**2) / 16.0 - (35 * pi**3 * sqrt3) / 48.0
        + 195 / 16.0 * z2 - 15 / 4.0 * z3 + 57 / 16.0 * z4
        + 45 * sqrt3 / 2.0 * im_pl2 - 27 * sqrt3 * im_pl3
    )
    S2 = 4 * im_pl2 / (9.0 * sqrt3)
    T1ep = (
        -45 / 2.0 - (pi * sqrt3 * log3**2) / 8.0 - (35 * pi**3 * sqrt3) / 216.0
        - 9 / 2.0 * z2 + z3
        + 6.0 * sqrt3 * im_pl2 - 6.0 * sqrt3 * im_pl3
    )

    return ConstantTable(
        z2=z2,
        z3=z3,
        z4=z4,
        pl412=pl412,
        pl2expPi3=pl2expPi3,
        pl3expPi6sqrt3=pl3expPi6sqrt3,
        B4=B4,
        D3=D3,
        DN=DN,
        OepS2=OepS2,
        S2=S2,
        T1ep=T1ep,
    )


CONSTANTS: Final[ConstantTable] = compute_constant_table()
