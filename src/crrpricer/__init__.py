# crrpricer: European call pricing on a CRR binomial lattice
# Public API

from .core import (
    OptionParameters, CALL, PUT,
    PricingError, InvalidParameters, NumericDomainError,
)
from .payoffs import call_payoff
from .binomial import (
    DEFAULT_STEPS, LatticeConstants, lattice_constants,
    terminal_asset_prices, crr_price,
)

# Closed-form reference
from .black_scholes import bs_price, put_from_call

# Model validation
from .validation import cross_validate, convergence_analysis, stress_test

__all__ = [
    "OptionParameters", "CALL", "PUT",
    "PricingError", "InvalidParameters", "NumericDomainError",
    "call_payoff",
    "DEFAULT_STEPS", "LatticeConstants", "lattice_constants",
    "terminal_asset_prices", "crr_price",
    "bs_price", "put_from_call",
    "cross_validate", "convergence_analysis", "stress_test",
]

__version__ = "0.1.0"
