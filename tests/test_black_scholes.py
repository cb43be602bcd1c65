import pytest
from crrpricer.core import OptionParameters, InvalidParameters, CALL, PUT
from crrpricer.black_scholes import bs_price, put_from_call


def test_bs_known_values():
    opt = OptionParameters(asset=100, strike=100, expiry=1.0, rate=0.05, volatility=0.2)
    assert abs(bs_price(opt, CALL) - 10.4506) < 1e-3
    assert abs(bs_price(opt, PUT)  - 5.5735)  < 1e-3


def test_parity_on_closed_form():
    opt = OptionParameters(asset=95, strike=105, expiry=0.75, rate=0.02, volatility=0.3)
    assert put_from_call(bs_price(opt, CALL), opt) == pytest.approx(bs_price(opt, PUT), abs=1e-10)


def test_zero_vol_rejected():
    opt = OptionParameters(asset=100, strike=100, expiry=1.0, rate=0.05, volatility=0.0)
    with pytest.raises(InvalidParameters):
        bs_price(opt)


def test_unknown_kind():
    opt = OptionParameters(asset=100, strike=100, expiry=1.0, rate=0.05, volatility=0.2)
    with pytest.raises(ValueError):
        bs_price(opt, "straddle")
