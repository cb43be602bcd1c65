"""Checks on the lattice pricer.

Benchmarks the tree against the Black-Scholes limit, measures how the price
settles as the step count grows, and sweeps the price over a grid of market
shocks.
"""

from __future__ import annotations

import logging
import numpy as np
from typing import Optional
from dataclasses import replace

from .core import OptionParameters, NumericDomainError
from .binomial import crr_price, DEFAULT_STEPS
from .black_scholes import bs_price

__all__ = [
    "cross_validate",
    "convergence_analysis",
    "stress_test",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tree vs closed form
# ---------------------------------------------------------------------------

def cross_validate(params: OptionParameters, *, steps: int = DEFAULT_STEPS) -> dict:
    """Compare the lattice call price with the Black-Scholes call.

    Returns
    -------
    dict
        ``"tree"``, ``"bs"``, ``"abs_error"``, ``"rel_error"``.
    """
    tree = crr_price(params, steps)
    ref = bs_price(params)
    abs_error = abs(tree - ref)
    rel_error = abs_error / ref if ref > 0 else float("nan")
    logger.debug("cross_validate steps=%d tree=%.8f bs=%.8f", steps, tree, ref)
    return {
        "tree": tree,
        "bs": ref,
        "abs_error": abs_error,
        "rel_error": rel_error,
    }


# ---------------------------------------------------------------------------
# Convergence analysis
# ---------------------------------------------------------------------------

def convergence_analysis(
    params: OptionParameters,
    step_values: list | np.ndarray,
    *,
    reference: Optional[float] = None,
) -> dict:
    """Price on successively finer lattices and fit the error decay.

    Parameters
    ----------
    step_values : array-like
        Step counts to try.
    reference : float, optional
        True price for error computation.  Default: Black-Scholes call.

    Returns
    -------
    dict
        ``"steps"``, ``"prices"``, ``"errors"``, ``"order"`` (estimated).
    """
    step_values = [int(n) for n in step_values]

    if reference is None:
        reference = bs_price(params)

    prices = [crr_price(params, n) for n in step_values]
    errors = [abs(p - reference) for p in prices]

    # error ~ C / n^order  => log(e) = -order * log(n) + const
    order = float("nan")
    valid = [(n, e) for n, e in zip(step_values, errors) if e > 0]
    if len(valid) >= 2:
        log_n = np.log([n for n, _ in valid])
        log_e = np.log([e for _, e in valid])
        coeffs = np.polyfit(log_n, log_e, 1)
        order = -float(coeffs[0])

    return {
        "steps": step_values,
        "prices": prices,
        "errors": errors,
        "order": order,
    }


# ---------------------------------------------------------------------------
# Stress testing
# ---------------------------------------------------------------------------

def stress_test(
    params: OptionParameters,
    spot_shocks: np.ndarray,
    vol_shocks: np.ndarray,
    rate_shocks: np.ndarray,
    *,
    steps: int = 200,
) -> np.ndarray:
    """Lattice price across a 3-D grid of market shocks.

    Parameters
    ----------
    spot_shocks : array, shape (n_spot,)
        Multiplicative shocks to the asset price (e.g. [0.8, 1.0, 1.2]).
    vol_shocks : array, shape (n_vol,)
        Additive shocks to volatility; shocked volatility is floored at 1e-6.
        Cells where the lattice cannot be built are NaN.
    rate_shocks : array, shape (n_rate,)
        Additive shocks to the rate.

    Returns
    -------
    np.ndarray, shape (n_spot, n_vol, n_rate)
    """
    spot_shocks = np.asarray(spot_shocks, dtype=float)
    vol_shocks = np.asarray(vol_shocks, dtype=float)
    rate_shocks = np.asarray(rate_shocks, dtype=float)

    result = np.empty((len(spot_shocks), len(vol_shocks), len(rate_shocks)))
    for i, ds in enumerate(spot_shocks):
        for j, dv in enumerate(vol_shocks):
            for k, dr in enumerate(rate_shocks):
                shocked = replace(
                    params,
                    asset=params.asset * ds,
                    volatility=max(params.volatility + dv, 1e-6),
                    rate=params.rate + dr,
                )
                try:
                    result[i, j, k] = crr_price(shocked, steps)
                except NumericDomainError as exc:
                    logger.debug("stress cell (%d, %d, %d) not priceable: %s", i, j, k, exc)
                    result[i, j, k] = np.nan
    return result
