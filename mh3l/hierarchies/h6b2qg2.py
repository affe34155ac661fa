"""Hierarchy h6b2qg2: Mst1 << Mst2 ~ Mgl ~ Msq.

The light stop is expanded in r = Mst1^2/Mst2^2 (flag xxMst), the
gluino and the light squarks around the heavy stop to second order in
dg = (Mgl - Mst2)/Mst2 (flag xxDmglst2) and dq = (Msq - Mst2)/Mst2
(flag xxDmsqst2). The two- and three-loop terms are listed in
`data/h6b2qg2.py`.
"""

from typing import Dict, Tuple

from .base import HierarchyExpansion, ExpansionInputs
from .data.h6b2qg2 import COEFFICIENTS
from ..utils.flags import ExpansionFlag


class H6b2qg2(HierarchyExpansion):
    """Expansion for a light stop below a heavy stop/gluino/squark block."""

    name = "h6b2qg2"
    required_flags = (
        ExpansionFlag.xxDmglst2,
        ExpansionFlag.xxDmsqst2,
        ExpansionFlag.xxMst,
    )
    coefficients = COEFFICIENTS

    @staticmethod
    def suitable(Mst1: float, Mst2: float, Mgl: float, Msq: float) -> bool:
        heavy_split = max(abs(Mgl - Mst2), abs(Msq - Mst2)) / Mst2
        return Mst1 / Mst2 < 0.7 and heavy_split < 0.5

    def _symbols(
        self, p: ExpansionInputs, x: Dict[ExpansionFlag, int]
    ) -> Dict[str, float]:
        dg = p.Dmglst2 / p.Mst2
        dq = p.Dmsqst2 / p.Mst2
        return {
            "t1": p.t1,
            "t2": p.t2,
            "lr": p.t1 - p.t2,
            "r": p.Mst1**2 / p.Mst2**2,
            "dg": dg,
            "dq": dq,
            # ln(Mgl^2/Mst2^2) and ln(Msq^2/Mst2^2) to second order
            "lgl": 2 * dg - dg**2,
            "lsq": 2 * dq - dq**2,
            "xMst": x[ExpansionFlag.xxMst],
            "xDmglst2": x[ExpansionFlag.xxDmglst2],
            "xDmsqst2": x[ExpansionFlag.xxDmsqst2],
            # MDR switches: shift DR-bar stop masses at two and three loops
            "shiftst1": p.mdrFlag,
            "shiftst3": p.mdrFlag,
            "xDR2DRMOD": p.mdrFlag,
        }

    def _one_loop(self, s: Dict[str, float]) -> Tuple[float, float, float]:
        r, lr = s["r"], s["lr"]
        F1 = s["t1"] + s["t2"]
        F2 = lr
        F3 = 2 + (1 + s["xMst"] * (2 * r + 2 * r**2)) * lr
        return F1, F2, F3
