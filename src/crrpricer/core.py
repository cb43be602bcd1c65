from __future__ import annotations
import math
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class PricingError(ValueError):
    """Base class for everything the pricer refuses to compute."""


class InvalidParameters(PricingError):
    """Market parameters or step count outside the model's domain."""


class NumericDomainError(PricingError):
    """Lattice constants cannot be derived for these parameters."""


# ---------------------------------------------------------------------------
# Option parameters
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParameters:
    """Market inputs for one European call, already in model units.

    Parameters
    ----------
    asset : float
        Current spot price.
    strike : float
        Exercise price.
    expiry : float
        Time to expiry in years.
    rate : float
        Continuously-compounded risk-free rate as a decimal (0.05 == 5%).
    volatility : float
        Annualised standard deviation of log-returns, as a decimal.
    """
    asset: float
    strike: float
    expiry: float     # years
    rate: float       # decimal
    volatility: float

    def __post_init__(self):
        for name in ("asset", "strike", "expiry", "rate", "volatility"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameters(f"{name} must be finite, got {value}")
        if self.asset <= 0:
            raise InvalidParameters(f"asset must be positive, got {self.asset}")
        if self.strike <= 0:
            raise InvalidParameters(f"strike must be positive, got {self.strike}")
        if self.expiry <= 0:
            raise InvalidParameters(f"expiry must be positive, got {self.expiry}")
        if self.volatility < 0:
            raise InvalidParameters(
                f"volatility must be non-negative, got {self.volatility}"
            )

    @classmethod
    def from_quote(
        cls,
        asset: float,
        strike: float,
        expiry_months: float,
        rate_percent: float,
        volatility: float,
    ) -> OptionParameters:
        """Build parameters from desk units: expiry in months, rate in percent."""
        return cls(
            asset=float(asset),
            strike=float(strike),
            expiry=float(expiry_months) / 12.0,
            rate=float(rate_percent) / 100.0,
            volatility=float(volatility),
        )


CALL = "call"
PUT  = "put"
