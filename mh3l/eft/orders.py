"""Coupling orders of the EFT contributions to the Higgs mass."""

from enum import IntEnum


class EFTOrders(IntEnum):
    """Correction orders that can be switched on and off individually."""

    G12G22 = 0  # tree level, O((g1^2 + g2^2))
    YT4 = 1  # one loop, O(yt^4)
    G32YT4 = 2  # two loop, O(g3^2 yt^4)
    YT6 = 3  # two loop, O(yt^6)
    G34YT4 = 4  # three loop, O(g3^4 yt^4)
    NUMBER_OF_EFT_ORDERS = 5
