import logging
import numpy as np
from dataclasses import dataclass
from math import exp, sqrt
from typing import Callable

from .core import OptionParameters, InvalidParameters, NumericDomainError
from .payoffs import call_payoff

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 1000


@dataclass(frozen=True)
class LatticeConstants:
    """Per-step quantities of one CRR lattice."""
    steps: int
    dt: float
    discount: float   # exp(-r dt)
    ufactor: float
    up: float
    down: float
    prob: float       # risk-neutral up probability, not clamped to [0, 1]


def _check_steps(steps) -> int:
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)):
        raise InvalidParameters(f"steps must be an integer, got {steps!r}")
    if steps < 1:
        raise InvalidParameters(f"steps must be >= 1, got {steps}")
    return int(steps)


def lattice_constants(params: OptionParameters, steps: int = DEFAULT_STEPS) -> LatticeConstants:
    """Derive dt, discount, u, v and p, matching the first two moments of the
    lognormal step return.

    Raises
    ------
    InvalidParameters
        If ``steps`` is not a positive integer.
    NumericDomainError
        If ``ufactor**2 < 1`` (no real up factor) or the lattice collapses
        to ``u == v``.
    """
    steps = _check_steps(steps)
    dt = params.expiry / steps
    discount = exp(-params.rate * dt)
    ufactor = 0.5 * (discount + exp((params.rate + params.volatility ** 2) * dt))

    radicand = ufactor * ufactor - 1.0
    if radicand < 0.0:
        raise NumericDomainError(
            f"ufactor**2 - 1 = {radicand:.3e} < 0; no real up factor for "
            f"rate={params.rate}, volatility={params.volatility}, dt={dt}"
        )
    up = ufactor + sqrt(radicand)
    down = 1.0 / up
    if up == down:
        raise NumericDomainError(
            "degenerate lattice (u == v); volatility and rate too small for "
            f"dt={dt}"
        )
    prob = (exp(params.rate * dt) - down) / (up - down)

    return LatticeConstants(
        steps=steps, dt=dt, discount=discount, ufactor=ufactor,
        up=up, down=down, prob=prob,
    )


def terminal_asset_prices(asset: float, up: float, down: float, steps: int) -> np.ndarray:
    """Asset prices at expiry, ``asset * up**j * down**(steps - j)`` for j = 0..steps.

    Rolls a single buffer forward one column per step instead of storing the
    triangular tree, so memory stays O(steps).
    """
    steps = _check_steps(steps)
    prices = np.empty(steps + 1, dtype=float)
    prices[0] = asset
    for idx in range(1, steps + 1):
        # right-hand side is materialised before assignment, so slots idx..1
        # all read the previous column
        prices[1:idx + 1] = up * prices[:idx]
        prices[0] = down * prices[0]
    return prices


def crr_price(
    params: OptionParameters,
    steps: int = DEFAULT_STEPS,
    payoff: Callable = call_payoff,
) -> float:
    """Cox-Ross-Rubinstein price of a European option (call by default).

    Parameters
    ----------
    params : OptionParameters
        Spot, strike, expiry (years), rate (decimal), volatility.
    steps : int
        Number of lattice steps. Cost is O(steps**2) time, O(steps) memory.
    payoff : callable
        ``payoff(spot, strike)`` evaluated on the array of terminal asset
        prices; must work elementwise on numpy arrays.

    Returns
    -------
    float
        Present value.
    """
    lc = lattice_constants(params, steps)
    n = lc.steps
    logger.debug(
        "lattice n=%d dt=%.6g u=%.10f v=%.10f p=%.10f disc=%.10f",
        n, lc.dt, lc.up, lc.down, lc.prob, lc.discount,
    )

    prices = terminal_asset_prices(params.asset, lc.up, lc.down, n)
    values = np.array(payoff(prices, params.strike), dtype=float)
    if values.shape != prices.shape:
        raise ValueError(
            f"payoff returned shape {values.shape}, expected {prices.shape}"
        )
    logger.debug(
        "terminal S in [%.6g, %.6g], payoff max %.6g (strike %.6g)",
        prices[0], prices[-1], values.max(), params.strike,
    )

    # Backward induction
    p, disc = lc.prob, lc.discount
    for step in range(n, 0, -1):
        values[:step] = disc * (p * values[1:step + 1] + (1.0 - p) * values[:step])

    return float(values[0])
