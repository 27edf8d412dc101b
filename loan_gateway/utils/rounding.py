"""Rounding helpers for surfaced monetary values"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity (1269.5 → 1270, -0.5 → 0)"""
    return int(math.floor(value + 0.5))
