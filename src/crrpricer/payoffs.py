"""Exercise values at expiry.

``crr_price`` takes the payoff as a plain callable ``f(spot, strike)``, so a
different shape can be priced on the same lattice without touching it.
"""

import numpy as np


def call_payoff(spot, strike: float):
    """max(spot - strike, 0); elementwise when *spot* is an array."""
    if np.ndim(spot) == 0:
        return max(float(spot) - strike, 0.0)
    return np.maximum(np.asarray(spot, dtype=float) - strike, 0.0)
