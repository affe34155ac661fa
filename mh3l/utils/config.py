"""Configuration and parameter classes for mh3l."""

from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np
from numpy.typing import NDArray


def _diag(*values: float) -> NDArray[np.floating]:
    return np.diag(np.array(values, dtype=float))


@dataclass
class Parameters:
    """DR-bar MSSM input parameters at the renormalization scale.

    Attributes:
        scale: Renormalization scale Q [GeV]
        mu: Higgsino mass parameter [GeV]
        g1, g2, g3: Gauge couplings (g1 GUT normalized)
        vd, vu: Higgs VEVs [GeV], v = sqrt(vu^2 + vd^2) ~ 246 GeV
        mq2, md2, mu2: Soft squark mass matrices [GeV^2]
        Au: Up-type trilinear couplings [GeV]
        MA: CP-odd Higgs mass [GeV]
        MG: Gluino mass [GeV]
        MW, MZ: Gauge boson masses [GeV]
        Mt, Mb: Top and bottom quark masses [GeV]
        MSt, MSb: Stop and sbottom masses, ascending [GeV]
        s2t, s2b: Sine of twice the stop/sbottom mixing angle

    The fiducial values describe a degenerate 2 TeV spectrum with
    tan(beta) = 20.
    """

    scale: float = 2000.0
    mu: float = 2000.0
    g1: float = 0.46
    g2: float = 0.63
    g3: float = 1.03
    vd: float = 246.0 / np.sqrt(401.0)
    vu: float = 20.0 * 246.0 / np.sqrt(401.0)
    mq2: NDArray[np.floating] = field(default_factory=lambda: _diag(2000.0**2, 2000.0**2, 2000.0**2))
    md2: NDArray[np.floating] = field(default_factory=lambda: _diag(2000.0**2, 2000.0**2, 2000.0**2))
    mu2: NDArray[np.floating] = field(default_factory=lambda: _diag(2000.0**2, 2000.0**2, 2000.0**2))
    Au: NDArray[np.floating] = field(default_factory=lambda: _diag(0.0, 0.0, 100.0))
    MA: float = 2000.0
    MG: float = 2000.0
    MW: float = 80.4
    MZ: float = 91.1876
    Mt: float = 173.34
    Mb: float = 2.4
    MSt: NDArray[np.floating] = field(default_factory=lambda: np.array([1950.0, 2050.0]))
    MSb: NDArray[np.floating] = field(default_factory=lambda: np.array([1990.0, 2010.0]))
    s2t: float = -0.1
    s2b: float = 0.0

    def __post_init__(self):
        for name in ("mq2", "md2", "mu2", "Au"):
            setattr(self, name, np.asarray(getattr(self, name), dtype=float))
        self.MSt = np.asarray(self.MSt, dtype=float)
        self.MSb = np.asarray(self.MSb, dtype=float)

    @property
    def vev(self) -> float:
        """Electroweak VEV sqrt(vu^2 + vd^2)."""
        return float(np.hypot(self.vu, self.vd))

    @property
    def tan_beta(self) -> float:
        """Ratio of the Higgs VEVs."""
        return self.vu / self.vd

    @property
    def beta(self) -> float:
        """Mixing angle beta = arctan(vu/vd)."""
        return float(np.arctan2(self.vu, self.vd))

    @property
    def At(self) -> float:
        """Stop trilinear coupling."""
        return float(self.Au[2, 2])

    @property
    def Xt(self) -> float:
        """Stop mixing parameter Xt = At - mu/tan(beta)."""
        return self.At - self.mu / self.tan_beta

    @property
    def msq2_average(self) -> float:
        """Average squared mass of the first two squark generations."""
        return float(np.mean([
            self.mq2[0, 0], self.mq2[1, 1],
            self.mu2[0, 0], self.mu2[1, 1],
            self.md2[0, 0], self.md2[1, 1],
        ]))

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate parameter values.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        for name in ("scale", "MA", "MG", "MW", "MZ", "Mt", "Mb"):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                errors.append(f"Unphysical {name} = {value}")

        if self.vu <= 0 or self.vd <= 0:
            errors.append(f"VEVs must be positive, got vu = {self.vu}, vd = {self.vd}")

        for name in ("MSt", "MSb"):
            masses = getattr(self, name)
            if masses.shape != (2,):
                errors.append(f"{name} must hold two masses, got shape {masses.shape}")
            elif np.any(masses <= 0):
                errors.append(f"Non-positive masses in {name} = {masses}")
            elif masses[0] > masses[1]:
                errors.append(f"{name} must be ordered ascending, got {masses}")

        for name in ("s2t", "s2b"):
            value = getattr(self, name)
            if abs(value) > 1:
                errors.append(f"|{name}| = {abs(value)} exceeds 1")

        for name in ("mq2", "md2", "mu2", "Au"):
            matrix = getattr(self, name)
            if matrix.shape != (3, 3):
                errors.append(f"{name} must be a 3x3 matrix, got shape {matrix.shape}")
            elif name != "Au" and not np.allclose(matrix, matrix.T):
                errors.append(f"{name} is not symmetric")
            elif name != "Au" and np.any(np.diag(matrix) <= 0):
                errors.append(f"{name} has non-positive diagonal entries")

        return len(errors) == 0, errors


@dataclass(frozen=True)
class SchemeFlags:
    """Renormalization scheme and loop-order switches.

    Attributes:
        mdr_flag: 0 for DR-bar stop masses, 1 for the MDR scheme
        one_loop, two_loop, three_loop: Include the given loop order
    """

    mdr_flag: int = 0
    one_loop: int = 1
    two_loop: int = 1
    three_loop: int = 1

    def __post_init__(self):
        for name in ("mdr_flag", "one_loop", "two_loop", "three_loop"):
            value = getattr(self, name)
            if value not in (0, 1):
                raise ValueError(f"{name} must be 0 or 1, got {value}")
