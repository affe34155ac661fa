"""Numerical utilities: loop functions and Higgs mass-matrix helpers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray


# Below this distance from a removable singularity the series is used
SERIES_THRESHOLD = 1e-4
# Functions that cancel to second order or beyond lose more digits in
# closed form and switch to their series earlier
WIDE_SERIES_THRESHOLD = 1e-2


def stop_mixing_function(m1sq: float, m2sq: float) -> float:
    """One-loop mixing function F3 = 2 - (m1^2+m2^2)/(m1^2-m2^2) ln(m1^2/m2^2).

    F3 vanishes quadratically for m1 -> m2. Near the degenerate point the
    series in d = m1^2/m2^2 - 1,

        F3 = sum_{k>=3} (-1)^k (k-2)/(k(k-1)) d^(k-1)
           = -d^2/6 + d^3/6 - 3 d^4/20 + 2 d^5/15 - ...,

    is summed through d^9.
    """
    d = (m1sq - m2sq) / m2sq
    if abs(d) < WIDE_SERIES_THRESHOLD:
        return sum((-1) ** k * (k - 2) / (k * (k - 1)) * d ** (k - 1) for k in range(3, 11))
    return 2.0 - (2.0 + d) / d * np.log1p(d)


def f1_tilde(x: float) -> float:
    """Threshold function F1(x) = x ln(x^2)/(x^2 - 1), F1(1) = 1."""
    d = x - 1.0
    if abs(d) < SERIES_THRESHOLD:
        return 1.0 - d**2 / 6.0 + d**3 / 6.0
    return x * np.log(x**2) / (x**2 - 1.0)


def f2_tilde(x: float) -> float:
    """Threshold function F2(x) = 6x^2 (2 - 2x^2 + (1+x^2) ln x^2)/(x^2-1)^3, F2(1) = 1."""
    x2 = x**2
    e = x2 - 1.0
    if abs(e) < WIDE_SERIES_THRESHOLD:
        return 1.0 - e**2 / 10.0 + e**3 / 10.0 - 3.0 * e**4 / 35.0 + e**5 / 14.0
    return 6.0 * x2 * (2.0 - 2.0 * x2 + (1.0 + x2) * np.log(x2)) / (x2 - 1.0) ** 3


def tree_level_mass_matrix(MZ: float, MA: float, beta: float) -> NDArray[np.floating]:
    """Tree-level CP-even Higgs mass matrix in the (Hd, Hu) basis [GeV^2]."""
    cb, sb = np.cos(beta), np.sin(beta)
    mz2, ma2 = MZ**2, MA**2
    return np.array([
        [mz2 * cb**2 + ma2 * sb**2, -(mz2 + ma2) * sb * cb],
        [-(mz2 + ma2) * sb * cb, mz2 * sb**2 + ma2 * cb**2],
    ])


def light_higgs_mass_squared(matrix: NDArray[np.floating]) -> float:
    """Smaller eigenvalue of a symmetric 2x2 mass matrix."""
    return float(np.linalg.eigvalsh(matrix)[0])


def symmetric_matrix(s1: float, s2: float, s12: float) -> NDArray[np.floating]:
    """Build ((s1, s12), (s12, s2))."""
    return np.array([[s1, s12], [s12, s2]])


def split_logs(
    scale: float, mt: float, ms: float
) -> Tuple[float, float]:
    """Return (ln(Q^2/mt^2), ln(MS^2/Q^2)); their sum is ln(MS^2/mt^2)."""
    return np.log(scale**2 / mt**2), np.log(ms**2 / scale**2)
