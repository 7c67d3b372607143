import math

import numpy as np
import pytest

from portopt.analytics import (
    avg_portfolio_performance,
    avg_stock_performances,
    correlation_matrix,
    covariance_matrix,
    log_return_matrix,
    portfolio_volatility,
    sanitize_matrix,
    simple_return_matrix,
)

PERF = np.array(
    [
        [0, -0.0806, 0.0668, 0.1843, 0.2039, 0.2524, 0.2468, 0.4013, 0.4740, 0.6105, 0.7260],
        [0, 0.0262, 0.1392, 0.2969, 0.3098, 0.5822, 0.9335, 1.4879, 1.7845, 2.0384, 2.2784],
        [0, 0.0336, 0.2019, 0.2306, 0.2351, 0.6126, 0.4414, 0.7868, 1.1001, 1.1801, 1.8965],
        [0, 0.0667, 0.1291, 0.2164, 0.1480, 0.5117, 0.6515, 1.2296, 0.9177, 1.2997, 1.8694],
    ]
)


def test_sanitize_matrix_removes_negative_zeros():
    mat = np.array(
        [[complex(-0.0, 0.0), complex(1.0, -0.0)], [complex(-0.0, -0.0), complex(3.0, 4.0)]]
    )
    result = sanitize_matrix(mat)
    assert not np.signbit(result.real).any()
    assert not np.signbit(result.imag).any()
    assert result[0, 1] == 1.0
    assert result[1, 1] == complex(3.0, 4.0)


def test_sanitize_matrix_keeps_negative_values():
    result = sanitize_matrix([[complex(-2.0, -0.5)]])
    assert result[0, 0] == complex(-2.0, -0.5)


def test_avg_stock_performances_matches_reference():
    avg = avg_stock_performances(PERF)
    assert avg.shape == (4,)
    assert avg * 100 == pytest.approx([5.05, 12.35, 9.26, 9.63], abs=0.006)


def test_avg_stock_performances_exact_for_constant_growth():
    growth = 0.07
    perf = np.array([[(1 + growth) ** t - 1 for t in range(6)]])
    assert avg_stock_performances(perf)[0] == pytest.approx(growth)


def test_avg_portfolio_performance_single_asset_weight():
    avg = avg_stock_performances(PERF)
    assert avg_portfolio_performance(avg, [0, 1, 0, 0]) == pytest.approx(avg[1])


def test_avg_portfolio_performance_is_between_extremes():
    avg = avg_stock_performances(PERF)
    weights = [0.113636364, 0.393939394, 0.189393939, 0.303030303]
    result = avg_portfolio_performance(avg, weights)
    assert avg.min() <= result <= avg.max()


def test_avg_portfolio_performance_rejects_size_mismatch():
    with pytest.raises(ValueError):
        avg_portfolio_performance([0.1, 0.2], [1.0])


def test_avg_portfolio_performance_rejects_excess_weight():
    with pytest.raises(ValueError):
        avg_portfolio_performance([0.1, 0.2], [0.7, 0.7])


def test_simple_returns_rebuild_performance():
    ret = simple_return_matrix(PERF)
    assert ret.shape == (4, 10)
    rebuilt = np.cumprod(1 + ret, axis=1) - 1
    np.testing.assert_allclose(rebuilt, PERF[:, 1:], atol=1e-12)


def test_simple_return_first_step_equals_first_performance():
    ret = simple_return_matrix(PERF)
    np.testing.assert_allclose(ret[:, 0], PERF[:, 1])


def test_log_returns_sum_to_total_log_growth():
    logret = log_return_matrix(PERF)
    assert logret.shape == (4, 10)
    np.testing.assert_allclose(logret.sum(axis=1), np.log1p(PERF[:, -1]), atol=1e-12)


def test_log_and_simple_returns_agree():
    np.testing.assert_allclose(
        np.exp(log_return_matrix(PERF)) - 1, simple_return_matrix(PERF), atol=1e-12
    )


def test_covariance_sample_matches_numpy():
    ret = simple_return_matrix(PERF).T
    np.testing.assert_allclose(covariance_matrix(ret), np.cov(ret, rowvar=False))


def test_covariance_population_matches_numpy():
    ret = simple_return_matrix(PERF).T
    np.testing.assert_allclose(
        covariance_matrix(ret, sample=False), np.cov(ret, rowvar=False, bias=True)
    )


def test_correlation_matrix_properties():
    cov = covariance_matrix(simple_return_matrix(PERF).T)
    corr = correlation_matrix(cov)
    np.testing.assert_allclose(np.diag(corr), np.ones(4))
    np.testing.assert_allclose(corr, corr.T)
    assert np.all(np.abs(corr) <= 1 + 1e-12)
    np.testing.assert_allclose(corr, np.corrcoef(simple_return_matrix(PERF)))


def test_portfolio_volatility_single_asset():
    cov = np.array(
        [
            [0.0049, 0.0021, 0.0038, 0.0029],
            [0.0021, 0.0077, 0.0028, 0.0077],
            [0.0038, 0.0028, 0.0206, 0.0114],
            [0.0029, 0.0077, 0.0114, 0.0247],
        ]
    )
    assert portfolio_volatility(cov, [0, 0, 1, 0]) == pytest.approx(math.sqrt(0.0206))


def test_portfolio_volatility_rejects_non_square():
    with pytest.raises(ValueError):
        portfolio_volatility(np.zeros((2, 3)), [0.5, 0.5])


def test_portfolio_volatility_rejects_size_mismatch():
    with pytest.raises(ValueError):
        portfolio_volatility(np.eye(3), [0.5, 0.5])