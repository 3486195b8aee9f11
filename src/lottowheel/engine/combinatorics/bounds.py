"""Lower bounds for covering design sizes."""

from __future__ import annotations

import math
from fractions import Fraction


def schonheim_bound(v: int, k: int, t: int) -> int:
    """Schönheim lower bound L(v, k, t) for a C(v, k, t) covering design.

    L(v, k, t) = ceil(v / k * L(v - 1, k - 1, t - 1)), with L(., ., 0) = 1.
    """
    if t < 0 or k <= 0 or v <= 0:
        raise ValueError("schonheim_bound requires t >= 0 and positive v, k.")
    if t > k or k > v:
        raise ValueError("schonheim_bound requires t <= k <= v.")

    bound = 1
    for step in range(t - 1, -1, -1):
        bound = math.ceil(Fraction(v - step, k - step) * bound)
    return bound
