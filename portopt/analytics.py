"""Return, risk and correlation statistics for a portfolio of assets.

Performance tables hold one row per asset and one column per point in time.
Each value is a zero-based relative performance, so an asset starts at 0.0
and a value of 0.25 means its price is 125 % of the starting price.
"""

from __future__ import annotations

import numpy as np

_WEIGHT_SUM_TOLERANCE = 1e-6


def sanitize_matrix(matrix) -> np.ndarray:
    """Return a complex copy of ``matrix`` with every negative zero made positive."""
    mat = np.array(matrix, dtype=complex)
    real = np.where(mat.real == 0.0, 0.0, mat.real)
    imag = np.where(mat.imag == 0.0, 0.0, mat.imag)
    return real + 1j * imag


def avg_stock_performances(perf) -> np.ndarray:
    """Average performance per time step of each asset in ``perf``.

    A line through the origin is fitted to the log of the normalised prices
    (``1 + perf``) against the time index; ``exp(slope) - 1`` is the average.
    """
    perf = np.asarray(perf, dtype=float)
    log_prices = np.log1p(perf)
    x = np.arange(perf.shape[1], dtype=float)
    slopes = log_prices @ x / (x @ x)
    return np.exp(slopes) - 1.0


def avg_portfolio_performance(stock_perf_avg, weights) -> float:
    """Weighted average of the per-asset average performances."""
    stock_perf_avg = np.asarray(stock_perf_avg, dtype=float).ravel()
    weights = np.asarray(weights, dtype=float).ravel()
    if weights.size != stock_perf_avg.size:
        raise ValueError("weights.size() != stockPerfAvg.size()")
    if weights.sum() - 1.0 > _WEIGHT_SUM_TOLERANCE:
        raise ValueError("weights.sum() != 1")
    return float(stock_perf_avg @ weights)


def simple_return_matrix(perf) -> np.ndarray:
    """Simple relative returns ``P(j+1)/P(j) - 1`` for each step of each asset."""
    perf = np.asarray(perf, dtype=float)
    left = perf[:, :-1]
    right = perf[:, 1:]
    return (right - left) / (1.0 + left)


def log_return_matrix(perf) -> np.ndarray:
    """Log returns ``ln(P(j+1)/P(j))`` for each step of each asset."""
    perf = np.asarray(perf, dtype=float)
    left = 1.0 + perf[:, :-1]
    right = 1.0 + perf[:, 1:]
    return np.log(right / left)


def covariance_matrix(returns, sample=True) -> np.ndarray:
    """Covariance of the columns (variables) of ``returns`` over its rows.

    With ``sample`` true the sum of products is divided by N - 1, otherwise by N.
    """
    data = np.asarray(returns, dtype=float)
    n_rows = data.shape[0]
    centered = data - data.mean(axis=0)
    divisor = n_rows - 1 if sample else n_rows
    return centered.T @ centered / divisor


def correlation_matrix(cov) -> np.ndarray:
    """Correlation matrix ``D^-1 C D^-1`` built from a covariance matrix."""
    cov = np.asarray(cov, dtype=float)
    inv_std = 1.0 / np.sqrt(np.diag(cov))
    return cov * np.outer(inv_std, inv_std)


def portfolio_volatility(cov, weights) -> float:
    """Portfolio volatility ``sqrt(w' C w)``."""
    cov = np.asarray(cov, dtype=float)
    weights = np.asarray(weights, dtype=float).ravel()
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise ValueError("covMat must be square")
    if cov.shape[0] != weights.size:
        raise ValueError("covMat size does not match weights size")
    return float(np.sqrt(weights @ cov @ weights))