"""Tests for the lattice validation helpers."""

import numpy as np
import pytest
from crrpricer import OptionParameters, crr_price
from crrpricer.validation import cross_validate, convergence_analysis, stress_test

OPT = OptionParameters(asset=100, strike=100, expiry=1.0, rate=0.05, volatility=0.2)


class TestCrossValidate:
    def test_tree_close_to_bs(self):
        result = cross_validate(OPT, steps=1000)
        assert result["abs_error"] < 0.05
        assert result["rel_error"] < 5e-3

    def test_output_keys(self):
        result = cross_validate(OPT, steps=50)
        assert set(result) == {"tree", "bs", "abs_error", "rel_error"}
        assert result["tree"] == crr_price(OPT, 50)


class TestConvergenceAnalysis:
    def test_error_shrinks(self):
        result = convergence_analysis(OPT, [25, 100, 400, 1600])
        assert result["errors"][-1] < result["errors"][0]

    def test_order_positive(self):
        result = convergence_analysis(OPT, [25, 100, 400, 1600])
        assert result["order"] > 0

    def test_explicit_reference(self):
        result = convergence_analysis(OPT, [10, 20], reference=0.0)
        assert result["errors"] == pytest.approx(result["prices"])
        assert result["steps"] == [10, 20]


class TestStressTest:
    def test_output_shape(self):
        spots = np.array([0.9, 1.0, 1.1])
        vols = np.array([-0.05, 0.0, 0.05])
        rates = np.array([-0.01, 0.0, 0.01])
        result = stress_test(OPT, spots, vols, rates, steps=50)
        assert result.shape == (3, 3, 3)

    def test_call_monotone_in_spot(self):
        spots = np.array([0.8, 0.9, 1.0, 1.1, 1.2])
        result = stress_test(OPT, spots, [0.0], [0.0], steps=100)
        assert np.all(np.diff(result[:, 0, 0]) > 0)

    def test_call_monotone_in_vol(self):
        result = stress_test(OPT, [1.0], [-0.1, 0.0, 0.1, 0.2], [0.0], steps=100)
        assert np.all(np.diff(result[0, :, 0]) > 0)

    def test_unshocked_cell_matches_pricer(self):
        result = stress_test(OPT, [1.0], [0.0], [0.0], steps=80)
        assert result[0, 0, 0] == crr_price(OPT, 80)

    def test_vol_and_rate_shocked_to_zero_together(self):
        result = stress_test(OPT, [1.0], [-0.3, 0.0], [-0.05, 0.0], steps=50)
        assert result.shape == (1, 2, 2)
        floor_cell = result[0, 0, 0]
        assert np.isnan(floor_cell) or 0.0 <= floor_cell < 1e-2
        assert np.all(np.isfinite(result[0, 1, :]))
        assert np.isfinite(result[0, 0, 1])

    def test_unpriceable_cell_is_nan(self):
        short = OptionParameters(asset=100, strike=100, expiry=0.001, rate=0.05, volatility=0.2)
        result = stress_test(short, [1.0], [-0.3, 0.0], [-0.05, 0.0], steps=50)
        assert np.isnan(result[0, 0, 0])
        assert np.all(np.isfinite(result[0, 1, :]))
