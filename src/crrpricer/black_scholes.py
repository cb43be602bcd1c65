# black_scholes.py
# Closed-form European prices, used as the reference the lattice is checked
# against, plus put-call parity for callers that need the put.

from math import log, sqrt, exp
from typing import Literal
from scipy.stats import norm

from .core import OptionParameters, InvalidParameters, CALL, PUT

_N = norm.cdf


def _d1_d2(S, K, T, r, sigma):
    if sigma <= 0:
        raise InvalidParameters("closed form needs volatility > 0.")
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def bs_price(params: OptionParameters, kind: Literal["call", "put"] = CALL) -> float:
    d1, d2 = _d1_d2(params.asset, params.strike, params.expiry,
                    params.rate, params.volatility)
    disc_r = exp(-params.rate * params.expiry)
    if kind == CALL:
        return float(params.asset * _N(d1) - disc_r * params.strike * _N(d2))
    elif kind == PUT:
        return float(disc_r * params.strike * _N(-d2) - params.asset * _N(-d1))
    else:
        raise ValueError("kind must be 'call' or 'put'")


def put_from_call(call_price: float, params: OptionParameters) -> float:
    """European put via parity: P = C - S + K e^{-rT}."""
    return call_price - params.asset + params.strike * exp(-params.rate * params.expiry)
