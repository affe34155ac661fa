"""Coefficients of the h6b2qg2 loop functions at Q = Mt.

Symbols: t1, t2 = ln(Mst{1,2}^2/Mt^2), lr = t1 - t2, r = Mst1^2/Mst2^2,
dg = (Mgl - Mst2)/Mst2, dq = (Msq - Mst2)/Mst2, lgl and lsq their
second-order logarithms, the truncation flags xMst, xDmglst2, xDmsqst2
and the MDR switches shiftst1, shiftst3, xDR2DRMOD.

The leading logarithms (-8 t^2 per stop at two loops, 184/3 t^3 per
stop at three loops, and the -16 t2 F_1L and 184 t2^2 F_1L products)
follow from the running of Mt and alpha_s below the stop threshold.
The remaining entries are provisional values and are to be replaced by
the published expansion coefficients of this hierarchy.
"""

from ..coefficients import CoefficientTable, term


COEFFICIENTS = CoefficientTable("h6b2qg2", {
    "F1_2L": (
        term(-8, "t1^2"),
        term(-8, "t2^2"),
        term(16 / 3., "t2"),
        term(-8 / 3., "t1"),
        term(-4, z2=16 / 3.),
        term(-16 / 3., "xMst r t1"),
        term(8, "xMst r t2"),
        term(-40 / 9., "xMst r"),
        term(-8 / 3., "xMst r^2 t1"),
        term(4, "xMst r^2 t2"),
        term(-26 / 9., "xMst r^2"),
        term(-32 / 3., "xDmglst2 dg t2"),
        term(16 / 3., "xDmglst2 dg"),
        term(16 / 3., "xDmglst2 dg^2 t2"),
        term(-8 / 9., "xDmglst2 dg^2"),
        term(-4, "xDmglst2 dg^2 lgl"),
        term(16 / 3., "shiftst1"),
        term(-16 / 3., "shiftst1 t2"),
        term(32 / 3., "shiftst1 xDmglst2 dg"),
        term(-32 / 3., "shiftst1 xDmglst2 dg t2"),
        term(16 / 3., "shiftst1 xDmglst2 dg^2"),
        term(-16 / 3., "shiftst1 xDmglst2 dg^2 t2"),
        term(16 / 3., "shiftst1 xMst r t2"),
        term(-16 / 3., "shiftst1 xMst r t1"),
    ),
    "F2_2L": (
        term(-16, "t2 lr"),
        term(8 / 3.),
        term(-16 / 3., "t2"),
        term(0, "lr", z2=16 / 9.),
        term(-32 / 3., "xMst r t2"),
        term(16 / 3., "xMst r t1"),
        term(8 / 3., "xMst r"),
        term(-16 / 3., "xMst r^2 t2"),
        term(8 / 3., "xMst r^2 t1"),
        term(2, "xMst r^2"),
        term(16 / 3., "xDmglst2 dg lr"),
        term(-8 / 3., "xDmglst2 dg"),
        term(-8 / 3., "xDmglst2 dg^2 lr"),
        term(20 / 9., "xDmglst2 dg^2"),
        term(16 / 3., "shiftst1"),
        term(-16 / 3., "shiftst1 xMst r"),
        term(32 / 3., "shiftst1 xDmglst2 dg"),
        term(-32 / 3., "shiftst1 xMst r xDmglst2 dg"),
    ),
    "F3_2L": (
        term(-32, "t2"),
        term(-16, "t2 lr"),
        term(-32, "xMst r t2 lr"),
        term(-32, "xMst r^2 t2 lr"),
        term(64 / 9.),
        term(-16 / 3., "t2"),
        term(-8 / 3., "lr"),
        term(-64 / 3., "xMst r t2"),
        term(32 / 3., "xMst r t1"),
        term(-16 / 9., "xMst r"),
        term(-32 / 3., "xMst r^2 t2"),
        term(16 / 3., "xMst r^2 t1"),
        term(-4 / 3., "xMst r^2"),
        term(-16 / 3., "xDmglst2 dg lr"),
        term(32 / 9., "xDmglst2 dg"),
        term(8 / 3., "xDmglst2 dg^2 lr"),
        term(-28 / 9., "xDmglst2 dg^2"),
        term(-16 / 3., "shiftst1"),
        term(-16 / 3., "shiftst1 lr"),
        term(-32 / 3., "shiftst1 xMst r"),
    ),
    "F1_3L": (
        term(184 / 3., "t1^3"),
        term(184 / 3., "t2^3"),
        term(-64 / 3., "t2^2"),
        term(32 / 3., "t1^2"),
        term(-8, "t1 t2"),
        term(-1004 / 27., "t2", z2=32, z3=16 / 3.),
        term(316 / 27., "t1", z2=-16),
        term(-4720 / 81., z3=56 / 3., z4=-40 / 3., B4=4 / 3., DN=-2 / 9., D3=8 / 27.,
             OepS2=320 / 27., S2=-108, T1ep=8 / 9.),
        term(-64 / 3., "xMst r t1^2"),
        term(32, "xMst r t2^2"),
        term(32 / 3., "xMst r t1 t2"),
        term(-496 / 27., "xMst r t1"),
        term(1628 / 27., "xMst r t2"),
        term(-1216 / 81., "xMst r", z3=16),
        term(-32 / 3., "xMst r^2 t1^2"),
        term(16, "xMst r^2 t2^2"),
        term(16 / 3., "xMst r^2 t1 t2"),
        term(-212 / 27., "xMst r^2 t1"),
        term(700 / 27., "xMst r^2 t2"),
        term(-731 / 81., "xMst r^2", z3=8),
        term(-64, "xDmglst2 dg t2^2"),
        term(1520 / 27., "xDmglst2 dg t2"),
        term(-1144 / 27., "xDmglst2 dg", z3=32 / 3.),
        term(32, "xDmglst2 dg^2 t2^2"),
        term(-28, "xDmglst2 dg^2 t2"),
        term(176 / 27., "xDmglst2 dg^2"),
        term(-24, "xDmglst2 dg^2 lgl t2"),
        term(-16, "xDmsqst2 dq t2^2"),
        term(56 / 3., "xDmsqst2 dq t2"),
        term(-104 / 9., "xDmsqst2 dq", z2=-8),
        term(8, "xDmsqst2 dq^2 t2^2"),
        term(-12, "xDmsqst2 dq^2 t2"),
        term(68 / 9., "xDmsqst2 dq^2"),
        term(4, "xDmsqst2 dq^2 lsq t2"),
        term(-8 / 3., "xDmsqst2 lsq t2"),
        term(32 / 3., "shiftst3 t1"),
        term(32 / 3., "shiftst3 t2"),
        term(-32 / 3., "shiftst3 t1 t2"),
        term(-32 / 3., "shiftst3 t2^2"),
        term(-64 / 9., "shiftst3"),
        term(64 / 9., "shiftst3 t2"),
        term(64 / 3., "shiftst3 xDmglst2 dg"),
        term(-64 / 3., "shiftst3 xDmglst2 dg t2"),
        term(-32 / 3., "xDR2DRMOD t2^2"),
        term(32 / 3., "xDR2DRMOD t2"),
        term(-64 / 3., "xDR2DRMOD xDmglst2 dg t2^2"),
        term(64 / 3., "xDR2DRMOD xDmglst2 dg t2"),
        term(32 / 3., "xDR2DRMOD xMst r t1"),
        term(-32 / 3., "xDR2DRMOD xMst r t2"),
    ),
    "F2_3L": (
        term(184, "t2^2 lr"),
        term(-32 / 3., "t2^2"),
        term(232 / 9., "t2"),
        term(-8, "lr t2"),
        term(-1036 / 81., z3=32 / 3., B4=4 / 3., D3=-4 / 9.),
        term(64 / 3., "xMst r t2^2"),
        term(-32 / 3., "xMst r t1 t2"),
        term(160 / 9., "xMst r lr"),
        term(-88 / 27., "xMst r"),
        term(32 / 3., "xMst r^2 t2^2"),
        term(-16 / 3., "xMst r^2 t1 t2"),
        term(80 / 9., "xMst r^2 lr"),
        term(-50 / 27., "xMst r^2"),
        term(-64 / 3., "xDmglst2 dg lr t2"),
        term(184 / 9., "xDmglst2 dg lr"),
        term(0, "xDmglst2 dg", z3=-16 / 3.),
        term(32 / 3., "xDmglst2 dg^2 lr t2"),
        term(-128 / 9., "xDmglst2 dg^2 lr"),
        term(40 / 27., "xDmglst2 dg^2"),
        term(-8, "xDmsqst2 dq lr t2"),
        term(28 / 3., "xDmsqst2 dq lr"),
        term(-4 / 3., "xDmsqst2 dq"),
        term(4, "xDmsqst2 dq^2 lr t2"),
        term(-6, "xDmsqst2 dq^2 lr"),
        term(2 / 3., "xDmsqst2 dq^2"),
        term(-64 / 3., "shiftst3 t2"),
        term(32 / 3., "shiftst3"),
        term(-128 / 3., "shiftst3 xDmglst2 dg t2"),
        term(64 / 3., "shiftst3 xDmglst2 dg"),
        term(32 / 3., "xDR2DRMOD t2"),
        term(-32 / 3., "xDR2DRMOD"),
        term(-32 / 3., "xDR2DRMOD xMst r t2"),
        term(32 / 3., "xDR2DRMOD xMst r"),
    ),
    "F3_3L": (
        term(368, "t2^2"),
        term(184, "t2^2 lr"),
        term(368, "xMst r t2^2 lr"),
        term(368, "xMst r^2 t2^2 lr"),
        term(128 / 3., "t2^2"),
        term(-736 / 9., "t2"),
        term(32 / 3., "lr t2"),
        term(2336 / 81., z3=-64 / 3., z4=16, B4=-8 / 3., DN=4 / 9., OepS2=-160 / 27., S2=54),
        term(128 / 3., "xMst r t2^2"),
        term(-64 / 3., "xMst r t1 t2"),
        term(-352 / 9., "xMst r t2"),
        term(112 / 27., "xMst r"),
        term(64 / 3., "xMst r^2 t2^2"),
        term(-32 / 3., "xMst r^2 t1 t2"),
        term(-184 / 9., "xMst r^2 t2"),
        term(70 / 27., "xMst r^2"),
        term(64 / 3., "xDmglst2 dg lr t2"),
        term(-320 / 9., "xDmglst2 dg t2"),
        term(224 / 27., "xDmglst2 dg"),
        term(-32 / 3., "xDmglst2 dg^2 lr t2"),
        term(184 / 9., "xDmglst2 dg^2 t2"),
        term(-172 / 27., "xDmglst2 dg^2"),
        term(16, "xDmsqst2 dq t2^2"),
        term(-40 / 3., "xDmsqst2 dq t2"),
        term(8 / 3., "xDmsqst2 dq"),
        term(-8, "xDmsqst2 dq^2 t2^2"),
        term(8, "xDmsqst2 dq^2 t2"),
        term(-4 / 3., "xDmsqst2 dq^2"),
        term(64 / 3., "shiftst3 t2"),
        term(64 / 3., "shiftst3 lr t2"),
        term(-32 / 9., "shiftst3"),
        term(32 / 3., "xDR2DRMOD"),
        term(32 / 3., "xDR2DRMOD lr"),
        term(64 / 3., "xDR2DRMOD xMst r"),
    ),
})
