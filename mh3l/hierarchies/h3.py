"""Hierarchy h3: Mst1 ~ Mst2 ~ Mgl ~ Msq (degenerate spectrum).

Everything is expanded around Mst1: the stop splitting in
d12 = (Mst1^2 - Mst2^2)/Mst1^2 (flag xxDmst12), the gluino in
dg = (Mgl - Mst1)/Mst1 (flag xxDmglst1) and the squarks in
dq = (Msq - Mst1)/Mst1 (flag xxDmsqst1).
"""

from typing import Dict, Tuple

from .base import HierarchyExpansion, ExpansionInputs
from .data.h3 import COEFFICIENTS
from ..utils.flags import ExpansionFlag


class H3(HierarchyExpansion):
    """Expansion for a degenerate stop/gluino/squark spectrum."""

    name = "h3"
    required_flags = (
        ExpansionFlag.xxDmglst1,
        ExpansionFlag.xxDmsqst1,
        ExpansionFlag.xxDmst12,
    )
    coefficients = COEFFICIENTS

    @staticmethod
    def suitable(Mst1: float, Mst2: float, Mgl: float, Msq: float) -> bool:
        split = max(abs(Mst2 - Mst1), abs(Mgl - Mst1), abs(Msq - Mst1)) / Mst1
        return split < 1.0

    def _symbols(
        self, p: ExpansionInputs, x: Dict[ExpansionFlag, int]
    ) -> Dict[str, float]:
        xDmst12 = x[ExpansionFlag.xxDmst12]
        # Mst2^2 = Mst1^2 (1 - d12)
        d12 = (p.Mst1**2 - p.Mst2**2) / p.Mst1**2
        return {
            "t1": p.t1,
            "d12": d12,
            # ln(Mst1^2/Mst2^2) = -ln(1 - d12)
            "lr": d12 + xDmst12 * (d12**2 / 2. + d12**3 / 3.),
            "dg": (p.Mgl - p.Mst1) / p.Mst1,
            "dq": (p.Msq - p.Mst1) / p.Mst1,
            "xDmglst1": x[ExpansionFlag.xxDmglst1],
            "xDmsqst1": x[ExpansionFlag.xxDmsqst1],
            "xDmst12": xDmst12,
            "shiftst1": p.mdrFlag,
            "shiftst3": p.mdrFlag,
        }

    def _one_loop(self, s: Dict[str, float]) -> Tuple[float, float, float]:
        d12, lr = s["d12"], s["lr"]
        F1 = 2 * s["t1"] - lr
        F2 = lr
        # F3 = -d12^2/6 - d12^3/6 + O(d12^4)
        F3 = -d12**2 / 6. - s["xDmst12"] * d12**3 / 6.
        return F1, F2, F3
