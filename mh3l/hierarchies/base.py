"""Common contract of the hierarchy expansions.

Each hierarchy (mass-ordering regime) owns one closed-form asymptotic
expansion of the O(at*as^n) corrections to the CP-even Higgs mass matrix.
Every expansion is evaluated once, at construction, from plain numbers:

    H = H6b2qg2(flags, Al4p, beta, Dmglst2, Dmsqst2, lmMt, lmMst1, lmMst2,
                Mgl, Mt, Mst1, Mst2, MuSUSY, s2t,
                mdrFlag, oneLoopFlag, twoLoopFlag, threeLoopFlag)
    H.getS1(), H.getS2(), H.getS12()

The three results are dimensionless. Multiplied by the prefactor
3 Mt^4 / (2 pi^2 v^2) they give the (1,1), (2,2) and (1,2) elements of
the mass-matrix shift in the (Hd, Hu) basis.

Inside an expansion the loop orders combine as

    F = oneLoopFlag * F_1L + twoLoopFlag * Al4p * F_2L
        + threeLoopFlag * Al4p**2 * F_3L

and every truncation flag is a 0/1 multiplier of an additive block.
The one-loop functions are closed forms in each hierarchy module; the
two- and three-loop functions at Q = Mt come from the hierarchy's
coefficient table and are then re-expanded to the scale Q.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple
import numpy as np
from numpy.typing import NDArray

from .coefficients import CoefficientTable
from ..utils.config import Parameters, SchemeFlags
from ..utils.constants import CONSTANTS, ConstantTable
from ..utils.flags import ExpansionFlag, ExpansionFlags


@dataclass(frozen=True)
class ExpansionInputs:
    """Arguments of a hierarchy expansion plus the derived abbreviations."""

    Al4p: float
    beta: float
    Dmglst2: float
    Dmsqst2: float
    lmMt: float
    lmMst1: float
    lmMst2: float
    Mgl: float
    Mt: float
    Mst1: float
    Mst2: float
    MuSUSY: float
    s2t: float
    mdrFlag: int
    oneLoopFlag: int
    twoLoopFlag: int
    threeLoopFlag: int

    @property
    def Tbeta(self) -> float:
        return np.tan(self.beta)

    @property
    def Sbeta(self) -> float:
        return np.sin(self.beta)

    @property
    def Msq(self) -> float:
        """Average light-squark mass, Mst2 + Dmsqst2."""
        return self.Mst2 + self.Dmsqst2

    @property
    def Xt(self) -> float:
        """Stop mixing parameter from the mixing angle and mass splitting."""
        return self.s2t * (self.Mst1**2 - self.Mst2**2) / (2.0 * self.Mt)

    @property
    def At(self) -> float:
        return self.Xt + self.MuSUSY / self.Tbeta

    @property
    def t1(self) -> float:
        """ln(Mst1^2/Mt^2)."""
        return self.lmMt - self.lmMst1

    @property
    def t2(self) -> float:
        """ln(Mst2^2/Mt^2)."""
        return self.lmMt - self.lmMst2


def assemble_mass_matrix(
    inputs: ExpansionInputs, F1: float, F2: float, F3: float
) -> Tuple[float, float, float]:
    """Project the stop-sector functions F1, F2, F3 onto S1, S2, S12.

    Uses the decomposition of the O(at) effective potential in terms of
    the top mass, mu, At and the stop mixing angle:

        S1  = mu^2 s2t^2 F3 / 2
        S12 = -(mu Mt s2t F2 + At mu s2t^2 F3 / 2)
        S2  = 2 Mt^2 F1 + 2 At Mt s2t F2 + At^2 s2t^2 F3 / 2

    each divided by 4 Mt^2 sin^2(beta).
    """
    Mt = inputs.Mt
    mu = inputs.MuSUSY
    s2t = inputs.s2t
    At = inputs.At
    norm = 4.0 * Mt**2 * inputs.Sbeta**2

    s1 = 0.5 * mu**2 * s2t**2 * F3
    s12 = -(mu * Mt * s2t * F2 + 0.5 * At * mu * s2t**2 * F3)
    s2 = 2.0 * Mt**2 * F1 + 2.0 * At * Mt * s2t * F2 + 0.5 * At**2 * s2t**2 * F3
    return s1 / norm, s2 / norm, s12 / norm


def combine_loop_orders(
    inputs: ExpansionInputs,
    one_loop: Tuple[float, float, float],
    two_loop: Tuple[float, float, float],
    three_loop: Tuple[float, float, float],
) -> Tuple[float, float, float]:
    """Re-expand the Q = Mt loop functions to the scale Q and sum the orders.

    With lmMt = ln(Q^2/Mt^2) the running of Mt and alpha_s gives

        F_2L = 16 lmMt F_1L + F_2L'
        F_3L = 72 lmMt^2 F_1L + 23 lmMt F_2L' + F_3L'

    where the primed functions are the ones at Q = Mt.
    """
    lmMt = inputs.lmMt
    one = inputs.oneLoopFlag
    two = inputs.twoLoopFlag * inputs.Al4p
    three = inputs.threeLoopFlag * inputs.Al4p**2

    F = []
    for F_1L, F_2Lp, F_3Lp in zip(one_loop, two_loop, three_loop):
        F_2L = 16 * lmMt * F_1L + F_2Lp
        F_3L = 72 * lmMt**2 * F_1L + 23 * lmMt * F_2Lp + F_3Lp
        F.append(one * F_1L + two * F_2L + three * F_3L)
    return F[0], F[1], F[2]


class HierarchyExpansion(ABC):
    """Abstract base class for hierarchy expansions.

    Subclasses set `name`, `required_flags` and `coefficients`, and
    implement `_symbols` (the expansion variables, flags and switches
    named in the coefficient table) and `_one_loop`. Instances are
    immutable once constructed.
    """

    name: ClassVar[str] = ""
    required_flags: ClassVar[Tuple[ExpansionFlag, ...]] = ()
    coefficients: ClassVar[CoefficientTable]

    def __init__(
        self,
        flags: ExpansionFlags,
        Al4p: float,
        beta: float,
        Dmglst2: float,
        Dmsqst2: float,
        lmMt: float,
        lmMst1: float,
        lmMst2: float,
        Mgl: float,
        Mt: float,
        Mst1: float,
        Mst2: float,
        MuSUSY: float,
        s2t: float,
        mdrFlag: int,
        oneLoopFlag: int,
        twoLoopFlag: int,
        threeLoopFlag: int,
    ):
        """Evaluate the expansion.

        Args:
            flags: Truncation flags; every entry of `required_flags` must be set
            Al4p: alpha_s/(4 pi)
            beta: Mixing angle beta
            Dmglst2: Mgl - Mst2
            Dmsqst2: Msq - Mst2
            lmMt: log((Q/Mt)^2)
            lmMst1: log((Q/Mst1)^2)
            lmMst2: log((Q/Mst2)^2)
            Mgl: Gluino mass
            Mt: Top quark mass
            Mst1, Mst2: Stop masses
            MuSUSY: mu parameter
            s2t: Sine of twice the stop mixing angle
            mdrFlag: 0 for DR-bar, 1 for MDR stop masses
            oneLoopFlag, twoLoopFlag, threeLoopFlag: Include the loop order

        Raises:
            MissingFlagError: A required truncation flag is absent
        """
        x = {flag: flags.require(flag, self.name) for flag in self.required_flags}
        inputs = ExpansionInputs(
            Al4p=Al4p, beta=beta, Dmglst2=Dmglst2, Dmsqst2=Dmsqst2,
            lmMt=lmMt, lmMst1=lmMst1, lmMst2=lmMst2,
            Mgl=Mgl, Mt=Mt, Mst1=Mst1, Mst2=Mst2, MuSUSY=MuSUSY, s2t=s2t,
            mdrFlag=mdrFlag, oneLoopFlag=oneLoopFlag,
            twoLoopFlag=twoLoopFlag, threeLoopFlag=threeLoopFlag,
        )
        F1, F2, F3 = self._expand(inputs, x, CONSTANTS)
        s1, s2, s12 = assemble_mass_matrix(inputs, F1, F2, F3)

        object.__setattr__(self, "_inputs", inputs)
        object.__setattr__(self, "_s1", float(s1))
        object.__setattr__(self, "_s2", float(s2))
        object.__setattr__(self, "_s12", float(s12))

    def __setattr__(self, key, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @abstractmethod
    def _symbols(
        self, p: ExpansionInputs, x: Dict[ExpansionFlag, int]
    ) -> Dict[str, float]:
        """Return the values of the symbols used by the coefficient table."""
        pass

    @abstractmethod
    def _one_loop(self, s: Dict[str, float]) -> Tuple[float, float, float]:
        """Return the one-loop (F1, F2, F3)."""
        pass

    def _expand(
        self,
        p: ExpansionInputs,
        x: Dict[ExpansionFlag, int],
        c: ConstantTable,
    ) -> Tuple[float, float, float]:
        """Return (F1, F2, F3) summed over the enabled loop orders."""
        s = self._symbols(p, x)
        table = self.coefficients
        two_loop = tuple(table.evaluate(f"F{i}_2L", s, c) for i in (1, 2, 3))
        three_loop = tuple(table.evaluate(f"F{i}_3L", s, c) for i in (1, 2, 3))
        return combine_loop_orders(p, self._one_loop(s), two_loop, three_loop)

    @staticmethod
    @abstractmethod
    def suitable(Mst1: float, Mst2: float, Mgl: float, Msq: float) -> bool:
        """Whether the mass ordering matches the hierarchy."""
        pass

    def getS1(self) -> float:
        """Return the (1, 1) element."""
        return self._s1

    def getS2(self) -> float:
        """Return the (2, 2) element."""
        return self._s2

    def getS12(self) -> float:
        """Return the off-diagonal (1, 2) = (2, 1) element."""
        return self._s12

    @property
    def s1(self) -> float:
        return self._s1

    @property
    def s2(self) -> float:
        return self._s2

    @property
    def s12(self) -> float:
        return self._s12

    @property
    def inputs(self) -> ExpansionInputs:
        return self._inputs

    def as_matrix(self) -> NDArray[np.floating]:
        """Return ((S1, S12), (S12, S2))."""
        return np.array([[self._s1, self._s12], [self._s12, self._s2]])

    @classmethod
    def evaluate(
        cls,
        params: Parameters,
        flags: ExpansionFlags,
        scheme: SchemeFlags = SchemeFlags(),
    ) -> "HierarchyExpansion":
        """Construct the expansion from a parameter bundle.

        Args:
            params: MSSM parameters
            flags: Truncation flags
            scheme: Scheme and loop-order switches

        Returns:
            Evaluated expansion
        """
        return cls(flags, **expansion_arguments(params, scheme))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(S1={self._s1:.6e}, "
            f"S2={self._s2:.6e}, S12={self._s12:.6e})"
        )


def expansion_arguments(params: Parameters, scheme: SchemeFlags) -> dict:
    """Map a parameter bundle onto the hierarchy constructor arguments."""
    Mst1, Mst2 = float(params.MSt[0]), float(params.MSt[1])
    Msq = float(np.sqrt(params.msq2_average))
    Q2 = params.scale**2
    return dict(
        Al4p=params.g3**2 / (16.0 * np.pi**2),
        beta=params.beta,
        Dmglst2=params.MG - Mst2,
        Dmsqst2=Msq - Mst2,
        lmMt=np.log(Q2 / params.Mt**2),
        lmMst1=np.log(Q2 / Mst1**2),
        lmMst2=np.log(Q2 / Mst2**2),
        Mgl=params.MG,
        Mt=params.Mt,
        Mst1=Mst1,
        Mst2=Mst2,
        MuSUSY=params.mu,
        s2t=params.s2t,
        mdrFlag=scheme.mdr_flag,
        oneLoopFlag=scheme.one_loop,
        twoLoopFlag=scheme.two_loop,
        threeLoopFlag=scheme.three_loop,
    )
