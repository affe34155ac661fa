"""Coefficients of the h3 loop functions at Q = Mt.

Symbols: t1 = ln(Mst1^2/Mt^2), d12 = (Mst1^2 - Mst2^2)/Mst1^2,
lr = ln(Mst1^2/Mst2^2) to the order set by xDmst12,
dg = (Mgl - Mst1)/Mst1, dq = (Msq - Mst1)/Mst1, the truncation flags
xDmglst1, xDmsqst1, xDmst12 and the MDR switches shiftst1, shiftst3.

The leading logarithms (-16 t1^2 at two loops, 368/3 t1^3 at three
loops, and the -16 t1 F_1L and 184 t1^2 F_1L products) follow from the
running of Mt and alpha_s below the common SUSY scale. The remaining
entries are provisional values and are to be replaced by the published
expansion coefficients of this hierarchy.
"""

from ..coefficients import CoefficientTable, term


COEFFICIENTS = CoefficientTable("h3", {
    "F1_2L": (
        term(-16, "t1^2"),
        term(16, "t1 lr"),
        term(16 / 3., "t1"),
        term(-8 / 3., z2=16 / 3.),
        term(-32 / 3., "xDmglst1 dg t1"),
        term(32 / 3., "xDmglst1 dg"),
        term(16 / 3., "xDmglst1 dg^2 t1"),
        term(-40 / 9., "xDmglst1 dg^2"),
        term(8, "xDmst12 d12 t1"),
        term(-4, "xDmst12 d12"),
        term(16 / 3., "shiftst1"),
        term(-16 / 3., "shiftst1 t1"),
        term(32 / 3., "shiftst1 xDmglst1 dg"),
        term(-32 / 3., "shiftst1 xDmglst1 dg t1"),
    ),
    "F2_2L": (
        term(-16, "t1 lr"),
        term(16 / 3., "d12", z2=-32 / 9.),
        term(8 / 3., "xDmglst1 dg d12"),
        term(-16 / 3., "xDmglst1 dg lr"),
        term(4, "xDmst12 d12^2 t1"),
        term(-10 / 3., "xDmst12 d12^2"),
        term(16 / 3., "shiftst1 d12"),
    ),
    "F3_2L": (
        term(8 / 3., "t1 d12^2"),
        term(8 / 3., "xDmst12 t1 d12^3"),
        term(8 / 9., "d12^2 t1"),
        term(-20 / 27., "d12^2"),
        term(-16 / 9., "xDmglst1 dg d12^2"),
        term(8 / 9., "xDmst12 d12^3 t1"),
        term(-4 / 9., "xDmst12 d12^3"),
        term(-8 / 9., "shiftst1 d12^2"),
    ),
    "F1_3L": (
        term(368 / 3., "t1^3"),
        term(-184, "t1^2 lr"),
        term(-32 / 3., "t1^2"),
        term(-688 / 27., "t1", z2=16, z3=16 / 3.),
        term(-3016 / 81., z3=64 / 3., z4=-20 / 3., B4=2 / 3., DN=-1 / 9., D3=4 / 27.,
             OepS2=160 / 27., S2=-54, T1ep=4 / 9.),
        term(-64, "xDmglst1 dg t1^2"),
        term(1184 / 27., "xDmglst1 dg t1"),
        term(-832 / 27., "xDmglst1 dg", z3=32 / 3.),
        term(32, "xDmglst1 dg^2 t1^2"),
        term(-200 / 9., "xDmglst1 dg^2 t1"),
        term(116 / 27., "xDmglst1 dg^2"),
        term(-16, "xDmsqst1 dq t1^2"),
        term(56 / 3., "xDmsqst1 dq t1"),
        term(-104 / 9., "xDmsqst1 dq", z2=-8),
        term(8, "xDmsqst1 dq^2 t1^2"),
        term(-12, "xDmsqst1 dq^2 t1"),
        term(68 / 9., "xDmsqst1 dq^2"),
        term(92, "xDmst12 d12 t1^2"),
        term(-32 / 3., "xDmst12 d12 t1"),
        term(52 / 9., "xDmst12 d12"),
        term(-32 / 3., "shiftst3 t1^2"),
        term(128 / 9., "shiftst3 t1"),
        term(-64 / 9., "shiftst3"),
        term(64 / 3., "shiftst3 xDmglst1 dg"),
        term(-64 / 3., "shiftst3 xDmglst1 dg t1"),
    ),
    "F2_3L": (
        term(184, "t1^2 lr"),
        term(-64 / 3., "t1 d12"),
        term(232 / 9., "d12", z3=32 / 3., D3=-4 / 9.),
        term(-64 / 3., "xDmglst1 dg d12 t1"),
        term(184 / 9., "xDmglst1 dg d12"),
        term(-8, "xDmsqst1 dq d12 t1"),
        term(28 / 3., "xDmsqst1 dq d12"),
        term(92, "xDmst12 d12^2 t1^2"),
        term(-40 / 3., "xDmst12 d12^2 t1"),
        term(17 / 3., "xDmst12 d12^2"),
        term(32 / 3., "shiftst3 d12"),
        term(-64 / 3., "shiftst3 d12 t1"),
    ),
    "F3_3L": (
        term(-92 / 3., "t1^2 d12^2"),
        term(-92 / 3., "xDmst12 t1^2 d12^3"),
        term(-92 / 9., "d12^2 t1^2"),
        term(160 / 27., "d12^2 t1"),
        term(-434 / 243., "d12^2", z3=8 / 9., B4=2 / 27., S2=-2 / 3.),
        term(32 / 9., "xDmglst1 dg d12^2 t1"),
        term(-112 / 81., "xDmglst1 dg d12^2"),
        term(8 / 9., "xDmsqst1 dq d12^2 t1"),
        term(-4 / 9., "xDmsqst1 dq d12^2"),
        term(-92 / 9., "xDmst12 d12^3 t1^2"),
        term(64 / 27., "xDmst12 d12^3 t1"),
        term(-35 / 81., "xDmst12 d12^3"),
        term(32 / 9., "shiftst3 d12^2 t1"),
        term(-16 / 27., "shiftst3 d12^2"),
    ),
})
