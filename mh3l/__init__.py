"""mh3l - Higher-order corrections to the MSSM Higgs mass matrix.

This package evaluates O(at), O(at*as) and O(at*as^2) corrections to the
CP-even Higgs mass matrix of the MSSM:

- Each mass hierarchy (ordering of stop, gluino and squark masses) has its
  own closed-form asymptotic expansion returning S1, S2 and S12
- A hierarchy calculator picks the expansion best suited to a spectrum
  and estimates its truncation uncertainty
- An EFT calculator provides the tree, 1-, 2- and 3-loop corrections of
  the effective Standard Model with switchable logarithms

Key modules:
    utils: Parameters, constant table, expansion flags, loop functions
    hierarchies: Hierarchy expansions and their registry
    hierarchy_calculator: Hierarchy selection and uncertainty estimate
    eft: EFT Higgs mass corrections and the 3-loop threshold

Example usage:
    >>> from mh3l import Parameters, HierarchyCalculator, Mh2EFTCalculator
    >>> params = Parameters()
    >>> result = HierarchyCalculator(params).calculate()
    >>> print(f"{result.hierarchy}: {result.delta_mh2:.1f} GeV^2")
    >>> eft = Mh2EFTCalculator(params, verbose=False)
    >>> print(eft.getDeltaMh2EFT1Loop(0, 0))
"""

__version__ = "1.0.0"

# Core configuration
from .utils.config import Parameters, SchemeFlags
from .utils.constants import ConstantTable, CONSTANTS
from .utils.flags import ExpansionFlag, ExpansionFlags, MissingFlagError

# Hierarchies
from .hierarchies import (
    HierarchyExpansion,
    CoefficientTable,
    H3,
    H5,
    H6b2qg2,
    HIERARCHY_REGISTRY,
    get_hierarchy,
    evaluate_hierarchy,
)
from .hierarchy_calculator import (
    HierarchyCalculator,
    HierarchyResult,
    NoSuitableHierarchyError,
)

# EFT
from .eft import (
    EFTOrders,
    Mh2EFTCalculator,
    delta_lambda_3L,
    delta_lambda_degenerate,
)


__all__ = [
    "__version__",
    # Config
    "Parameters",
    "SchemeFlags",
    # Constants
    "ConstantTable",
    "CONSTANTS",
    # Flags
    "ExpansionFlag",
    "ExpansionFlags",
    "MissingFlagError",
    # Hierarchies
    "HierarchyExpansion",
    "CoefficientTable",
    "H3",
    "H5",
    "H6b2qg2",
    "HIERARCHY_REGISTRY",
    "get_hierarchy",
    "evaluate_hierarchy",
    "HierarchyCalculator",
    "HierarchyResult",
    "NoSuitableHierarchyError",
    # EFT
    "EFTOrders",
    "Mh2EFTCalculator",
    "delta_lambda_3L",
    "delta_lambda_degenerate",
]
