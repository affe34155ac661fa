"""Hierarchy expansions of the O(at*as^n) Higgs mass-matrix corrections."""

from typing import Dict, Type

from .base import (
    HierarchyExpansion,
    ExpansionInputs,
    assemble_mass_matrix,
    combine_loop_orders,
    expansion_arguments,
)
from .coefficients import LOOP_FUNCTIONS, CoefficientTable, Term, term
from .h3 import H3
from .h5 import H5
from .h6b2qg2 import H6b2qg2
from ..utils.config import Parameters, SchemeFlags
from ..utils.flags import ExpansionFlags


# Registry of available hierarchies; the order is the selection tie-break
HIERARCHY_REGISTRY: Dict[str, Type[HierarchyExpansion]] = {
    "h3": H3,
    "h5": H5,
    "h6b2qg2": H6b2qg2,
}


def get_hierarchy(name: str) -> Type[HierarchyExpansion]:
    """Look up a hierarchy class by name.

    Args:
        name: Hierarchy name, e.g. 'h6b2qg2'

    Returns:
        HierarchyExpansion subclass
    """
    try:
        return HIERARCHY_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown hierarchy: {name}; available: {sorted(HIERARCHY_REGISTRY)}"
        ) from None


def evaluate_hierarchy(
    name: str,
    params: Parameters,
    flags: ExpansionFlags,
    scheme: SchemeFlags = SchemeFlags(),
) -> HierarchyExpansion:
    """Evaluate the named hierarchy for a parameter bundle."""
    return get_hierarchy(name).evaluate(params, flags, scheme)


__all__ = [
    "HierarchyExpansion",
    "ExpansionInputs",
    "assemble_mass_matrix",
    "combine_loop_orders",
    "expansion_arguments",
    "CoefficientTable",
    "Term",
    "term",
    "LOOP_FUNCTIONS",
    "H3",
    "H5",
    "H6b2qg2",
    "HIERARCHY_REGISTRY",
    "get_hierarchy",
    "evaluate_hierarchy",
]
