"""Coefficients of the h5 loop functions at Q = Mt.

Symbols: t1 = ln(Mst1^2/Mt^2), d12 = (Mst1^2 - Mst2^2)/Mst1^2,
lr = ln(Mst1^2/Mst2^2) to the order set by xDmst12,
dq = (Msq - Mst1)/Mst1, rg = Mst1^2/Mgl^2, lg = ln(Mgl^2/Mst1^2),
mgx = Mt Mgl/Mst1^2, the truncation flags xDmsqst1, xDmst12, xMst and
the MDR switches shiftst1, shiftst3, xDR2DRMOD.

The leading logarithms (-16 t1^2 at two loops, 368/3 t1^3 at three
loops, and the -16 t1 F_1L and 184 t1^2 F_1L products) follow from the
running of Mt and alpha_s below the stop threshold. The remaining
entries are provisional values and are to be replaced by the published
expansion coefficients of this hierarchy.
"""

from ..coefficients import CoefficientTable, term


COEFFICIENTS = CoefficientTable("h5", {
    "F1_2L": (
        term(-16, "t1^2"),
        term(16, "t1 lr"),
        term(32 / 3., "lg t1"),
        term(-8 / 3., "lg^2"),
        term(8 / 3., "lg"),
        term(-4 / 3.),
        term(16 / 3., "xMst rg lg t1"),
        term(-32 / 3., "xMst rg t1"),
        term(56 / 9., "xMst rg"),
        term(8 / 3., "xMst rg^2 lg t1"),
        term(-4, "xMst rg^2 t1"),
        term(22 / 9., "xMst rg^2"),
        term(8, "xDmst12 d12 t1"),
        term(-16 / 3., "xDmst12 d12 lg"),
        term(16 / 3., "shiftst1"),
        term(-16 / 3., "shiftst1 t1"),
        term(16 / 3., "shiftst1 lg"),
        term(16 / 3., "shiftst1 xMst rg"),
        term(-16 / 3., "shiftst1 xMst rg t1"),
        term(16 / 3., "shiftst1 xMst rg lg"),
    ),
    "F2_2L": (
        term(-16, "t1 lr"),
        term(16 / 3., "d12 lg"),
        term(-8 / 3., "d12"),
        term(-16 / 3., "mgx"),
        term(-16 / 3., "xMst mgx rg lg"),
        term(16 / 3., "xMst mgx rg"),
        term(4, "xDmst12 d12^2 t1"),
        term(-8 / 3., "xDmst12 d12^2 lg"),
        term(16 / 3., "shiftst1 d12"),
        term(16 / 3., "shiftst1 xMst rg d12"),
    ),
    "F3_2L": (
        term(8 / 3., "t1 d12^2"),
        term(8 / 3., "xDmst12 t1 d12^3"),
        term(-8 / 9., "d12^2 lg"),
        term(4 / 9., "d12^2"),
        term(32 / 9., "mgx d12"),
        term(32 / 9., "xMst mgx rg lg d12"),
        term(-8 / 9., "xDmst12 d12^3 lg"),
        term(2 / 9., "xDmst12 d12^3"),
        term(-8 / 9., "shiftst1 d12^2"),
    ),
    "F1_3L": (
        term(368 / 3., "t1^3"),
        term(-184, "t1^2 lr"),
        term(64, "lg t1^2"),
        term(-128 / 3., "lg^2 t1"),
        term(112 / 9., "lg^3"),
        term(-536 / 27., "t1", z2=16, z3=16 / 3.),
        term(248 / 27., "lg", z2=-8),
        term(-1952 / 81., z3=40 / 3., z4=-10 / 3., B4=2 / 3., DN=-1 / 9.,
             OepS2=160 / 27., S2=-54),
        term(32, "xMst rg lg t1^2"),
        term(-64 / 3., "xMst rg lg^2 t1"),
        term(88 / 9., "xMst rg t1"),
        term(-76 / 27., "xMst rg"),
        term(16, "xMst rg^2 lg t1^2"),
        term(-32 / 3., "xMst rg^2 lg^2 t1"),
        term(40 / 9., "xMst rg^2 t1"),
        term(-29 / 27., "xMst rg^2"),
        term(-16, "xDmsqst1 dq t1^2"),
        term(56 / 3., "xDmsqst1 dq t1"),
        term(-104 / 9., "xDmsqst1 dq", z2=-8),
        term(8, "xDmsqst1 dq^2 t1^2"),
        term(-12, "xDmsqst1 dq^2 t1"),
        term(68 / 9., "xDmsqst1 dq^2"),
        term(92, "xDmst12 d12 t1^2"),
        term(-32, "xDmst12 d12 lg t1"),
        term(52 / 9., "xDmst12 d12"),
        term(-32 / 3., "shiftst3 t1^2"),
        term(64 / 3., "shiftst3 t1 lg"),
        term(-32 / 3., "shiftst3 lg^2"),
        term(128 / 9., "shiftst3 t1"),
        term(-64 / 9., "shiftst3"),
        term(32 / 3., "xDR2DRMOD lg t1"),
        term(-32 / 3., "xDR2DRMOD t1^2"),
        term(32 / 3., "xDR2DRMOD xMst rg lg t1"),
        term(-32 / 3., "xDR2DRMOD xMst rg t1^2"),
    ),
    "F2_3L": (
        term(184, "t1^2 lr"),
        term(-64 / 3., "lg t1 d12"),
        term(232 / 9., "lg d12"),
        term(0, "d12", D3=-4 / 9.),
        term(64, "mgx t1"),
        term(-128 / 3., "mgx lg"),
        term(-160 / 9., "mgx", z3=32 / 3.),
        term(32, "xMst mgx rg t1 lg"),
        term(-32, "xMst mgx rg t1"),
        term(-40 / 3., "xMst mgx rg"),
        term(-8, "xDmsqst1 dq d12 t1"),
        term(28 / 3., "xDmsqst1 dq d12"),
        term(92, "xDmst12 d12^2 t1^2"),
        term(-32 / 3., "xDmst12 d12^2 lg t1"),
        term(17 / 3., "xDmst12 d12^2"),
        term(32 / 3., "shiftst3 d12"),
        term(-64 / 3., "shiftst3 t1 d12"),
        term(64 / 3., "shiftst3 lg d12"),
    ),
    "F3_3L": (
        term(-92 / 3., "t1^2 d12^2"),
        term(-92 / 3., "xDmst12 t1^2 d12^3"),
        term(-92 / 9., "d12^2 t1^2"),
        term(32 / 9., "d12^2 lg t1"),
        term(-322 / 243., "d12^2", B4=2 / 27., S2=-2 / 3.),
        term(-128 / 9., "mgx d12 t1"),
        term(256 / 27., "mgx d12 lg"),
        term(0, "mgx d12", z3=8 / 3.),
        term(8 / 9., "xDmsqst1 dq d12^2 t1"),
        term(-4 / 9., "xDmsqst1 dq d12^2"),
        term(-92 / 9., "xDmst12 d12^3 t1^2"),
        term(16 / 9., "xDmst12 d12^3 lg t1"),
        term(-35 / 81., "xDmst12 d12^3"),
        term(32 / 9., "shiftst3 t1 d12^2"),
        term(-32 / 9., "shiftst3 lg d12^2"),
        term(-16 / 27., "shiftst3 d12^2"),
    ),
})
