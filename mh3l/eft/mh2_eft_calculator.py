"""EFT contributions to the light CP-even Higgs mass.

The Higgs mass is built from the tree-level value plus the O(yt^4),
O(g3^2 yt^4), O(yt^6) and O(g3^4 yt^4) corrections of an effective
Standard Model matched to the MSSM at the stop mass scale MS. Every
logarithm is either a Standard-Model log, ln(Q^2/Mt^2), or an MSSM log,
ln(MS^2/Q^2); products of both are removed by either switch. Passing 1
for `omitSMLogs` or `omitMSSMLogs` removes the corresponding terms.
"""

import logging
import threading
import warnings
import numpy as np

from ..utils.config import Parameters
from ..utils.numerics import f1_tilde, f2_tilde, split_logs
from .orders import EFTOrders
from .threshold import K_LOOP, delta_lambda_3L, delta_lambda_degenerate, gluino_function

logger = logging.getLogger(__name__)


class Mh2EFTCalculator:
    """EFT calculation of the Higgs mass corrections.

    The per-order switches set with `setCorrectionFlag` are the only
    mutable state. Every accessor holds the instance lock for its whole
    evaluation, so a concurrent `setCorrectionFlag` lands either before
    or after it.
    """

    def __init__(
        self,
        params: Parameters,
        msq2: float = float("nan"),
        verbose: bool = True,
    ):
        """Initialize the EFT calculator.

        Args:
            params: MSSM parameters
            msq2: Average squared mass of the first two squark generations;
                NaN takes it from `params`
            verbose: Issue parameter-validation warnings and log a summary
        """
        self.params = params
        self.msq2 = params.msq2_average if np.isnan(msq2) else msq2
        self._orders = [1] * EFTOrders.NUMBER_OF_EFT_ORDERS
        self._lock = threading.RLock()

        if verbose:
            valid, errors = params.validate()
            for error in errors:
                warnings.warn(f"Parameter check: {error}", RuntimeWarning)
            logger.info(
                "EFT calculator: Q = %.6g, Mt = %.6g, MS = %.6g, Xt/MS = %.4g, "
                "tan(beta) = %.4g, Msq = %.6g, valid = %s",
                params.scale, params.Mt, self.MS, self.xt,
                params.tan_beta, np.sqrt(self.msq2), valid,
            )

    # ---- derived quantities ----------------------------------------------

    @property
    def mQ3(self) -> float:
        return float(np.sqrt(self.params.mq2[2, 2]))

    @property
    def mU3(self) -> float:
        return float(np.sqrt(self.params.mu2[2, 2]))

    @property
    def MS(self) -> float:
        """Geometric mean of the stop soft masses."""
        return float(np.sqrt(self.mQ3 * self.mU3))

    @property
    def xt(self) -> float:
        """Xt / MS."""
        return self.params.Xt / self.MS

    @property
    def yt(self) -> float:
        """Top Yukawa coupling sqrt(2) Mt / v."""
        return np.sqrt(2.0) * self.params.Mt / self.params.vev

    def _order(self, order: EFTOrders) -> int:
        with self._lock:
            return self._orders[order]

    def _logs(self, omitSMLogs: int, omitMSSMLogs: int):
        lmMt, lmMS = split_logs(self.params.scale, self.params.Mt, self.MS)
        return (1 - omitSMLogs) * lmMt, (1 - omitMSSMLogs) * lmMS

    # ---- loop orders -----------------------------------------------------

    def getDeltaMh2EFT0Loop(self) -> float:
        """Return the tree-level Higgs mass squared MZ^2 cos^2(2 beta)."""
        with self._lock:
            p = self.params
            return self._order(EFTOrders.G12G22) * p.MZ**2 * np.cos(2.0 * p.beta) ** 2

    def getDeltaMh2EFT1Loop(self, omitSMLogs: int = 0, omitMSSMLogs: int = 0) -> float:
        """Return the O(yt^4) one-loop contribution [GeV^2].

        Args:
            omitSMLogs: 1 removes all ln(Q^2/Mt^2) terms
            omitMSSMLogs: 1 removes all ln(MS^2/Q^2) terms
        """
        with self._lock:
            v2 = self.params.vev**2
            x = self.xt
            lmMt, lmMS = self._logs(omitSMLogs, omitMSSMLogs)
            xQU = self.mQ3 / self.mU3
            threshold = x**2 * f1_tilde(xQU) - x**4 * f2_tilde(xQU) / 12.

            return self._order(EFTOrders.YT4) * 6 * K_LOOP * self.yt**4 * v2 * (
                lmMt + lmMS + threshold
            )

    def getDeltaMh2EFT2Loop(self, omitSMLogs: int = 0, omitMSSMLogs: int = 0) -> float:
        """Return the O(g3^2 yt^4) and O(yt^6) two-loop contributions [GeV^2].

        Args:
            omitSMLogs: 1 removes all ln(Q^2/Mt^2) terms
            omitMSSMLogs: 1 removes all ln(MS^2/Q^2) terms
        """
        with self._lock:
            p = self.params
            v2 = p.vev**2
            yt, g3 = self.yt, p.g3
            x = self.xt
            xQU = self.mQ3 / self.mU3
            fg = gluino_function(p.MG / self.MS)
            lmMt, lmMS = self._logs(omitSMLogs, omitMSSMLogs)

            leading_logs = lmMt**2 + 2 * lmMt * lmMS + lmMS**2
            threshold_1L = x**2 * f1_tilde(xQU) - x**4 * f2_tilde(xQU) / 12.
            threshold_2L = 16 * (-2 * x * fg + x**3 * fg / 3. - x**4 * f2_tilde(xQU) / 12.)

            g32yt4 = g3**2 * yt**4 * K_LOOP**2 * v2 * (
                -48 * leading_logs - 96 * lmMt * threshold_1L + threshold_2L
            )
            yt6 = 27 * yt**6 * K_LOOP**2 * v2 * leading_logs

            return (
                self._order(EFTOrders.G32YT4) * g32yt4
                + self._order(EFTOrders.YT6) * yt6
            )

    def getDeltaMh2EFT3Loop(
        self,
        omitSMLogs: int = 0,
        omitMSSMLogs: int = 0,
        omitDeltaLambda3L: int = 1,
    ) -> float:
        """Return the O(g3^4 yt^4) three-loop contribution [GeV^2].

        Args:
            omitSMLogs: 1 removes all ln(Q^2/Mt^2) terms
            omitMSSMLogs: 1 removes all ln(MS^2/Q^2) terms
            omitDeltaLambda3L: 1 removes the three-loop MSSM threshold
        """
        with self._lock:
            p = self.params
            v2 = p.vev**2
            yt, g3 = self.yt, p.g3
            lmMt, lmMS = self._logs(omitSMLogs, omitMSSMLogs)

            leading_logs = (lmMt + lmMS) ** 3
            dlambda = delta_lambda_3L(
                p.scale, self.mQ3, self.mU3, p.MG, np.sqrt(self.msq2),
                p.Xt, yt, g3, omitlogs=omitMSSMLogs,
            )

            return self._order(EFTOrders.G34YT4) * (
                368 * g3**4 * yt**4 * K_LOOP**3 * v2 * leading_logs
                + (1 - omitDeltaLambda3L) * v2 * dlambda
            )

    def getDeltaLambdaDegenerate(
        self, scale: float, mst1: float, Xt: float, omitlogs: int
    ) -> float:
        """Return delta_lambda at three loops for a degenerate spectrum.

        Args:
            scale: Renormalization scale
            mst1: Common stop mass
            Xt: Stop mixing parameter
            omitlogs: 1 removes all logarithmic terms
        """
        return delta_lambda_degenerate(scale, mst1, Xt, self.yt, self.params.g3, omitlogs)

    def setCorrectionFlag(self, order: int, flag: int) -> None:
        """Enable (1) or disable (0) the correction of a given order.

        Raises:
            IndexError: `order` is not an EFTOrders value
            ValueError: `flag` is not 0 or 1
        """
        if not 0 <= order < EFTOrders.NUMBER_OF_EFT_ORDERS:
            raise IndexError(f"EFT order {order} out of range")
        if flag not in (0, 1):
            raise ValueError(f"Correction flag must be 0 or 1, got {flag}")
        with self._lock:
            self._orders[order] = flag

    def correction_flags(self) -> dict:
        """Snapshot of the per-order switches."""
        with self._lock:
            return {
                EFTOrders(i).name: flag for i, flag in enumerate(self._orders)
            }

    def __str__(self) -> str:
        with self._lock:
            lines = [
                "Mh2EFTCalculator",
                f"  Mh^2_EFT_0L = {self.getDeltaMh2EFT0Loop():.8g} GeV^2",
                f"  ΔMh^2_EFT_1L = {self.getDeltaMh2EFT1Loop(0, 0):.8g} GeV^2",
                f"  ΔMh^2_EFT_2L = {self.getDeltaMh2EFT2Loop(0, 0):.8g} GeV^2",
                f"  ΔMh^2_EFT_3L = {self.getDeltaMh2EFT3Loop(0, 0, 0):.8g} GeV^2",
            ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Mh2EFTCalculator(scale={self.params.scale}, MS={self.MS:.6g})"
