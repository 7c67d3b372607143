"""Demonstration reports and the command that prints them."""

from __future__ import annotations

import argparse
import math
import sys

import numpy as np

from portopt.analytics import (
    avg_portfolio_performance,
    avg_stock_performances,
    covariance_matrix,
    portfolio_volatility,
    simple_return_matrix,
)
from portopt.optimizer import PortfolioOptimizer
from portopt.reports import (
    PERFORMANCE_TABLE,
    format_matrix,
    report_avg_performance,
    report_covariance,
    report_returns,
    report_sanitize,
    report_weight_matrix,
)
from portopt.sampling import (
    RiskInterval,
    RiskReturnPair,
    frontier_points,
    random_risk_return_pairs,
    simplex_grid,
    weight_matrix,
)

DEFAULT_SEED = 47110815
"""Seed that makes the random demonstrations reproducible."""

DEMO_RISK_INTERVAL = RiskInterval(1.0, 3.0)
N_DEMO_PAIRS = 1000
N_RISK_BARS = 20
N_MONTE_CARLO_SAMPLES = 1000


def _demo_return_upper_bound(risk: float) -> float:
    """Upper bound of the return interval used for the random test area."""
    return -1.5 * risk * risk + 6.5 * risk - 4


def _pair_lines(pairs: list[RiskReturnPair]) -> list[str]:
    return [f"{pair.risk:9.6f}, {pair.ret:.6f}" for pair in pairs]


def report_centroid(seed: int | None = None) -> str:
    """Centroid of random risk-return pairs under the demo return bound.

    The analytic centroid of the area is (2.0666..., 1.3066...).
    """
    pairs = random_risk_return_pairs(
        DEMO_RISK_INTERVAL, _demo_return_upper_bound, N_DEMO_PAIRS, seed
    )
    risk_avg = sum(p.risk for p in pairs) / len(pairs)
    ret_avg = sum(p.ret for p in pairs) / len(pairs)
    return f"\nCentroid of all risk-return tuples:\n( {risk_avg:.6f}, {ret_avg:.6f} )\n\n"


def report_simplex_grid(m_assets: int = 4, k_resolution: int = 4) -> str:
    """All simplex grid weight vectors for the given size and resolution."""
    expected = math.comb(k_resolution + m_assets - 1, m_assets - 1)
    vectors = simplex_grid(m_assets, k_resolution)
    lines = [
        f"Number of possible weight vectors for {m_assets} assets "
        f"with resolution {k_resolution} is: {expected}",
        "",
        f"Generated {len(vectors)} weight vectors:",
    ]
    lines += [" ".join(f"{v:8.4f}" for v in vec) for vec in vectors]
    return "\n".join(lines) + "\n"


def report_frontier(seed: int | None = DEFAULT_SEED) -> str:
    """Best return per risk bar among random pairs under the demo return bound."""
    pairs = random_risk_return_pairs(
        DEMO_RISK_INTERVAL, _demo_return_upper_bound, N_DEMO_PAIRS, seed
    )
    frontier = frontier_points(pairs, DEMO_RISK_INTERVAL, N_RISK_BARS)
    return "\n".join(["Risk, Return", *_pair_lines(frontier)]) + "\n"


def report_risk_returns(seed: int | None = DEFAULT_SEED) -> str:
    """Risk and return of the sample funds for randomly drawn weight sets."""
    averages = avg_stock_performances(PERFORMANCE_TABLE)
    returns = simple_return_matrix(PERFORMANCE_TABLE)
    cov = covariance_matrix(returns.T)
    weights = weight_matrix(averages.size, N_MONTE_CARLO_SAMPLES, seed)
    pairs = [
        RiskReturnPair(
            portfolio_volatility(cov, column),
            avg_portfolio_performance(averages, column),
        )
        for column in np.asarray(weights).T
    ]
    return (
        "Covariance matrix:\n"
        + format_matrix(cov, 9, 5)
        + "Risk-Return Pairs:\n"
        + "\n".join(["Risk, Return", *_pair_lines(pairs)])
        + "\n"
    )


def report_find_k(num_assets: int = 15, min_grid_points: int = 818800000) -> str:
    """Simplex grid resolution chosen for the given portfolio size."""
    optimizer = PortfolioOptimizer(num_assets, min_grid_points)
    optimizer.initialize()
    return (
        f"Simplex grid resolution for {num_assets} assets with at least "
        f"{min_grid_points} grid points: {optimizer.simplex_grid_resolution}\n"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portopt", description="Print portfolio optimisation reports."
    )
    parser.add_argument(
        "report",
        nargs="?",
        default="find-k",
        choices=[
            "sanitize",
            "avg-performance",
            "returns",
            "covariance",
            "weights",
            "centroid",
            "simplex-grid",
            "frontier",
            "risk-returns",
            "find-k",
        ],
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--assets", type=int, default=None)
    parser.add_argument("--resolution", type=int, default=4)
    parser.add_argument("--min-grid-points", type=int, default=818800000)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the requested report; the grid resolution report by default."""
    args = _build_parser().parse_args(argv)
    seed = args.seed
    if args.report == "sanitize":
        text = report_sanitize()
    elif args.report == "avg-performance":
        text = report_avg_performance()
    elif args.report == "returns":
        text = report_returns()
    elif args.report == "covariance":
        text = report_covariance()
    elif args.report == "weights":
        text = report_weight_matrix(42 if seed is None else seed)
    elif args.report == "centroid":
        text = report_centroid(seed)
    elif args.report == "simplex-grid":
        assets = 4 if args.assets is None else args.assets
        text = report_simplex_grid(assets, args.resolution)
    elif args.report == "frontier":
        text = report_frontier(DEFAULT_SEED if seed is None else seed)
    elif args.report == "risk-returns":
        text = report_risk_returns(DEFAULT_SEED if seed is None else seed)
    else:
        assets = 15 if args.assets is None else args.assets
        text = report_find_k(assets, args.min_grid_points)
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())