"""Three-loop O(g3^4 yt^4) threshold correction to the Higgs quartic.

`delta_lambda_3L` treats arbitrary soft masses; `delta_lambda_degenerate`
is the closed form for mQ3 = mU3 = Mgl = Msq = mst1. For a degenerate
spectrum both agree.

With MS^2 = mQ3 mU3, x = Xt/MS and LS = ln(MS^2/Q^2) the general form is

    dl/(g3^4 yt^4 k^3) = sum_n c_n x^n f_n + LS sum_n b_n x^n f_n
                         + LS^2 sum_n e_n x^n f_n + mass-ratio logs

where k = 1/(16 pi^2) and the f_n are threshold functions of the mass
ratios that equal 1 at the degenerate point. The leading LS^3 term is
part of the renormalization-group logarithms and not of the threshold.
"""

import numpy as np

from ..utils.constants import CONSTANTS
from ..utils.numerics import f1_tilde, f2_tilde


K_LOOP = 1.0 / (16.0 * np.pi**2)

_z3 = CONSTANTS.z3

# non-logarithmic coefficients of x^n
C0 = -1016 / 27. + 64 / 3. * _z3
C1 = 2864 / 27. - 64 * _z3
C2 = -1496 / 9. + 80 * _z3
C3 = -2552 / 27. + 128 / 3. * _z3
C4 = 1210 / 27. - 16 * _z3
C5 = 82 / 9. - 8 / 3. * _z3
C6 = -37 / 54.

# coefficients of LS x^n
B0 = 304 / 9.
B1 = -256 / 3.
B2 = -140 / 3.
B3 = 176 / 9.
B4 = 26 / 3.

# coefficients of LS^2 x^n
E0 = -8.
E2 = 48.
E4 = -4.

# gluino and squark mass-ratio logarithms
C0G = 32 / 9.
C0Q = -8 / 3.
C1G = -64 / 9.
C2G = 16 / 3.


def gluino_function(xg: float) -> float:
    """Odd-power weight 2 xg / (1 + xg^2), equal to 1 at xg = 1."""
    return 2.0 * xg / (1.0 + xg**2)


def delta_lambda_3L(
    scale: float,
    mQ3: float,
    mU3: float,
    Mgl: float,
    Msq: float,
    Xt: float,
    yt: float,
    g3: float,
    omitlogs: int = 0,
) -> float:
    """Three-loop threshold for a general stop/gluino/squark spectrum.

    Args:
        scale: Matching scale Q
        mQ3, mU3: Third-generation soft masses
        Mgl: Gluino mass
        Msq: Average first/second generation squark mass
        Xt: Stop mixing parameter
        yt: Top Yukawa coupling
        g3: Strong coupling
        omitlogs: 1 removes all ln(MS^2/Q^2) terms

    Returns:
        delta_lambda at O(g3^4 yt^4)
    """
    MS = np.sqrt(mQ3 * mU3)
    x = Xt / MS
    xQU = mQ3 / mU3
    f1 = f1_tilde(xQU)
    f2 = f2_tilde(xQU)
    fg = gluino_function(Mgl / MS)
    lg = np.log(Mgl**2 / MS**2)
    lq = np.log(Msq**2 / MS**2)
    LS = (1 - omitlogs) * np.log(MS**2 / scale**2)

    constant = (
        C0 + C0G * lg + C0Q * lq
        + x * fg * (C1 + C1G * lg)
        + x**2 * f1 * (C2 + C2G * lg)
        + x**3 * fg * C3
        + x**4 * f2 * C4
        + x**5 * fg * C5
        + x**6 * f2**2 * C6
    )
    single_log = B0 + B1 * x * fg + B2 * x**2 * f1 + B3 * x**3 * fg + B4 * x**4 * f2
    double_log = E0 + E2 * x**2 * f1 + E4 * x**4 * f2

    return g3**4 * yt**4 * K_LOOP**3 * (constant + LS * single_log + LS**2 * double_log)


def delta_lambda_degenerate(
    scale: float,
    mst1: float,
    Xt: float,
    yt: float,
    g3: float,
    omitlogs: int = 0,
) -> float:
    """Three-loop threshold for mQ3 = mU3 = Mgl = Msq = mst1.

    Args:
        scale: Matching scale Q
        mst1: Common stop mass
        Xt: Stop mixing parameter
        yt: Top Yukawa coupling
        g3: Strong coupling
        omitlogs: 1 removes all logarithmic terms

    Returns:
        delta_lambda at O(g3^4 yt^4)
    """
    x = Xt / mst1
    lS = (1 - omitlogs) * np.log(mst1**2 / scale**2)
    z3 = CONSTANTS.z3

    return g3**4 * yt**4 * K_LOOP**3 * (
        -1016 / 27. + 64 / 3. * z3
        + x * (2864 / 27. - 64 * z3)
        + x**2 * (-1496 / 9. + 80 * z3)
        + x**3 * (-2552 / 27. + 128 / 3. * z3)
        + x**4 * (1210 / 27. - 16 * z3)
        + x**5 * (82 / 9. - 8 / 3. * z3)
        - 37 / 54. * x**6
        + lS * (304 / 9. - 256 / 3. * x - 140 / 3. * x**2 + 176 / 9. * x**3 + 26 / 3. * x**4)
        + lS**2 * (-8 + 48 * x**2 - 4 * x**4)
    )
