"""Effective-field-theory contributions to the Higgs mass."""

from .orders import EFTOrders
from .threshold import delta_lambda_3L, delta_lambda_degenerate
from .mh2_eft_calculator import Mh2EFTCalculator

__all__ = [
    "EFTOrders",
    "delta_lambda_3L",
    "delta_lambda_degenerate",
    "Mh2EFTCalculator",
]
