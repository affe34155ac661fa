"""Hierarchy h5: Mst1 ~ Mst2 ~ Msq << Mgl.

The gluino is heavy; its decoupling is expanded in rg = Mst1^2/Mgl^2
(flag xxMst) with lg = ln(Mgl^2/Mst1^2) kept exact. The stop splitting
enters through d12 = (Mst1^2 - Mst2^2)/Mst1^2 (flag xxDmst12) and the
squarks through dq = (Msq - Mst1)/Mst1 (flag xxDmsqst1).
"""

from typing import Dict, Tuple
import numpy as np

from .base import HierarchyExpansion, ExpansionInputs
from .data.h5 import COEFFICIENTS
from ..utils.flags import ExpansionFlag


class H5(HierarchyExpansion):
    """Expansion for light degenerate stops below a heavy gluino."""

    name = "h5"
    required_flags = (
        ExpansionFlag.xxDmsqst1,
        ExpansionFlag.xxDmst12,
        ExpansionFlag.xxMst,
    )
    coefficients = COEFFICIENTS

    @staticmethod
    def suitable(Mst1: float, Mst2: float, Mgl: float, Msq: float) -> bool:
        split = max(abs(Mst2 - Mst1), abs(Msq - Mst1)) / Mst1
        return split < 0.5 and Mst2 / Mgl < 0.6

    def _symbols(
        self, p: ExpansionInputs, x: Dict[ExpansionFlag, int]
    ) -> Dict[str, float]:
        xDmst12 = x[ExpansionFlag.xxDmst12]
        d12 = (p.Mst1**2 - p.Mst2**2) / p.Mst1**2
        return {
            "t1": p.t1,
            "d12": d12,
            "lr": d12 + xDmst12 * (d12**2 / 2. + d12**3 / 3.),
            "dq": (p.Msq - p.Mst1) / p.Mst1,
            "rg": p.Mst1**2 / p.Mgl**2,
            "lg": np.log(p.Mgl**2 / p.Mst1**2),
            # odd powers of the gluino mass enter through Mgl Xt
            "mgx": p.Mt * p.Mgl / p.Mst1**2,
            "xDmsqst1": x[ExpansionFlag.xxDmsqst1],
            "xDmst12": xDmst12,
            "xMst": x[ExpansionFlag.xxMst],
            "shiftst1": p.mdrFlag,
            "shiftst3": p.mdrFlag,
            "xDR2DRMOD": p.mdrFlag,
        }

    def _one_loop(self, s: Dict[str, float]) -> Tuple[float, float, float]:
        d12, lr = s["d12"], s["lr"]
        F1 = 2 * s["t1"] - lr
        F2 = lr
        # F3 = -d12^2/6 - d12^3/6 + O(d12^4)
        F3 = -d12**2 / 6. - s["xDmst12"] * d12**3 / 6.
        return F1, F2, F3
