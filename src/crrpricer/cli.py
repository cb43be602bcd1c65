import argparse
import logging
import sys

from .core import OptionParameters, PricingError
from .binomial import crr_price, DEFAULT_STEPS

# (flag dest, prompt) in the order the values are asked for
PROMPTS = [
    ("asset", "Enter the asset price: "),
    ("strike", "Enter the strike price: "),
    ("expiry_months", "Enter the expiry in months: "),
    ("rate_percent", "Enter the interest rate as a percent: "),
    ("volatility", "Enter the volatility: "),
]


def _positive_int(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s!r}")
    if n < 1:
        raise argparse.ArgumentTypeError("steps must be >= 1")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="crrpricer",
        description="European call price on a Cox-Ross-Rubinstein binomial lattice",
    )
    p.add_argument("--asset", type=float, help="spot price")
    p.add_argument("--strike", type=float, help="strike price")
    p.add_argument("--expiry-months", dest="expiry_months", type=float, help="months")
    p.add_argument("--rate-percent", dest="rate_percent", type=float,
                   help="risk-free rate in percent (5 == 5%%)")
    p.add_argument("--volatility", type=float, help="decimal, e.g. 0.2")
    p.add_argument("--steps", type=_positive_int, default=DEFAULT_STEPS)
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _prompt_missing(args, prompt=input):
    for dest, text in PROMPTS:
        if getattr(args, dest) is None:
            setattr(args, dest, float(prompt(text)))


def main(argv=None, prompt=input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        _prompt_missing(args, prompt)
        params = OptionParameters.from_quote(
            args.asset, args.strike, args.expiry_months,
            args.rate_percent, args.volatility,
        )
        price = crr_price(params, args.steps)
    except PricingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: could not read a number ({exc})", file=sys.stderr)
        return 2
    except EOFError:
        print("error: input closed before all values were entered", file=sys.stderr)
        return 2

    print(f"The value of your option is: {price:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
