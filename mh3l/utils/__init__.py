"""mh3l utility modules."""

from .constants import ConstantTable, CONSTANTS, compute_constant_table
from .config import Parameters, SchemeFlags
from .flags import ExpansionFlag, ExpansionFlags, MissingFlagError
from .numerics import (
    stop_mixing_function,
    f1_tilde,
    f2_tilde,
    tree_level_mass_matrix,
    light_higgs_mass_squared,
    symmetric_matrix,
    split_logs,
)

__all__ = [
    "ConstantTable",
    "CONSTANTS",
    "compute_constant_table",
    "Parameters",
    "SchemeFlags",
    "ExpansionFlag",
    "ExpansionFlags",
    "MissingFlagError",
    "stop_mixing_function",
    "f1_tilde",
    "f2_tilde",
    "tree_level_mass_matrix",
    "light_higgs_mass_squared",
    "symmetric_matrix",
    "split_logs",
]
