"""Text reports of the portfolio statistics for a sample set of four funds."""

from __future__ import annotations

import numpy as np

from portopt.analytics import (
    avg_portfolio_performance,
    avg_stock_performances,
    correlation_matrix,
    covariance_matrix,
    log_return_matrix,
    sanitize_matrix,
    simple_return_matrix,
)
from portopt.sampling import weight_matrix

ASSET_NAMES = (
    "Storm Fund II",
    "Quantex Global Value",
    "Polar Capital Insurance",
    "UniGlobal",
)

PERFORMANCE_TABLE = np.array(
    [
        [0, -0.0806, 0.0668, 0.1843, 0.2039, 0.2524, 0.2468, 0.4013, 0.4740, 0.6105, 0.7260],
        [0, 0.0262, 0.1392, 0.2969, 0.3098, 0.5822, 0.9335, 1.4879, 1.7845, 2.0384, 2.2784],
        [0, 0.0336, 0.2019, 0.2306, 0.2351, 0.6126, 0.4414, 0.7868, 1.1001, 1.1801, 1.8965],
        [0, 0.0667, 0.1291, 0.2164, 0.1480, 0.5117, 0.6515, 1.2296, 0.9177, 1.2997, 1.8694],
    ]
)
"""Yearly zero-based performances, 01.2015 to 01.2025, one row per fund."""

SAMPLE_WEIGHTS = np.array([0.113636364, 0.393939394, 0.189393939, 0.303030303])

_LABEL_WIDTH = max(len(name) for name in ASSET_NAMES)


def format_matrix(mat, width: int = 8, precision: int = 2) -> str:
    """Fixed-point rendering of ``mat``, one line per row, followed by a blank line."""
    rows = np.atleast_2d(np.asarray(mat, dtype=float))
    lines = ["".join(f"{value:{width}.{precision}f}" for value in row) for row in rows]
    return "".join(line + "\n" for line in lines) + "\n"


def _complex_text(mat: np.ndarray) -> str:
    return "\n".join(
        " ".join(f"({z.real:g},{z.imag:g})" for z in row) for row in mat
    )


def _labelled(name: str, text: str) -> str:
    return f"{name:<{_LABEL_WIDTH}}:{text}"


def report_sanitize() -> str:
    """Show a complex matrix with negative zeros before and after sanitising."""
    original = np.array(
        [
            [complex(-0.0, 0.0), complex(1.0, -0.0)],
            [complex(-0.0, -0.0), complex(3.0, 4.0)],
        ]
    )
    return (
        "Original matrix:\n"
        + _complex_text(original)
        + "\n\nSanitized matrix:\n"
        + _complex_text(sanitize_matrix(original))
        + "\n"
    )


def report_avg_performance() -> str:
    """Average performance per fund and of the sample weighted portfolio."""
    averages = avg_stock_performances(PERFORMANCE_TABLE)
    lines = ["Average performances per stock:"]
    lines += [
        _labelled(name, f"{value * 100:7.2f}%") for name, value in zip(ASSET_NAMES, averages)
    ]
    portfolio = avg_portfolio_performance(averages, SAMPLE_WEIGHTS)
    lines.append("")
    lines.append("Average performance applying the following weights:")
    lines.append(" ".join(f"{w:.9f}" for w in SAMPLE_WEIGHTS))
    lines.append(f"Average performance of the portfolio = {portfolio * 100:.2f}%")
    return "\n".join(lines) + "\n"


def _return_rows(title: str, returns: np.ndarray) -> list[str]:
    lines = [title]
    for name, row in zip(ASSET_NAMES, returns):
        values = " ".join(f"{value * 100:7.2f}" for value in row)
        lines.append(_labelled(name, f"{values}%"))
    return lines


def report_returns() -> str:
    """Simple and logarithmic returns per step for each fund, in percent."""
    lines = _return_rows(
        "Simple relative returns per stock:", simple_return_matrix(PERFORMANCE_TABLE)
    )
    lines.append("")
    lines += _return_rows(
        "Logarithm of relative returns per stock:", log_return_matrix(PERFORMANCE_TABLE)
    )
    return "\n".join(lines) + "\n"


def report_covariance() -> str:
    """Sample covariance and correlation matrices of the simple returns."""
    returns = simple_return_matrix(PERFORMANCE_TABLE)
    cov = covariance_matrix(returns.T, sample=True)
    corr = correlation_matrix(cov)
    return (
        "Covariance matrix:\n"
        + format_matrix(cov, 9, 5)
        + "Correlation matrix:\n"
        + format_matrix(corr, 9, 5)
    )


def report_weight_matrix(seed: int | None = 42) -> str:
    """A 5 x 3 random weight matrix and its column sums."""
    mat = weight_matrix(5, 3, seed)
    heading = (
        f"Generated and Normalized Matrix (with seed {seed}):\n"
        if seed is not None
        else "Generated and Normalized Matrix (without seed):\n"
    )
    return (
        heading
        + format_matrix(mat, 9, 5)
        + "Column Sums:\n"
        + format_matrix(mat.sum(axis=0), 9, 5)
    )