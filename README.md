# portopt

Tools for analysing a small portfolio of assets from their historical
performance and for exploring the risk/return space of possible weightings.

Performance tables are NumPy arrays with one row per asset and one column per
point in time. Each value is the cumulative change since the start, so every
row starts at 0.0 and 0.25 means the price is 125 % of the starting price.

## Modules

### `portopt.analytics`

- `avg_stock_performances(perf)`: average performance per time step of each
  asset, from a line through the origin fitted to the log of `1 + perf`.
- `simple_return_matrix(perf)` and `log_return_matrix(perf)`: per-step simple
  returns `P(j+1)/P(j) - 1` and log returns `ln(P(j+1)/P(j))`.
- `covariance_matrix(returns, sample=True)`: covariance of the columns of
  `returns`; divides by N - 1 when `sample` is true, by N otherwise.
- `correlation_matrix(cov)`: correlation matrix from a covariance matrix.
- `avg_portfolio_performance(stock_perf_avg, weights)`: weighted average
  return. Raises `ValueError` if the sizes differ or the weights sum to more
  than 1 by over 1e-6.
- `portfolio_volatility(cov, weights)`: `sqrt(w' C w)`. Raises `ValueError`
  for a non-square matrix or a size mismatch.
- `sanitize_matrix(matrix)`: complex copy with negative zeros made positive.

### `portopt.sampling`

- `RiskInterval(lower, upper)` and `RiskReturnPair(risk, ret)`: frozen
  dataclasses.
- `weight_matrix(rows, cols, seed=None)`: uniform random matrix whose columns
  sum to 1; the same seed gives the same matrix.
- `simplex_grid(m_assets, k_resolution)`: every weight vector whose entries are
  multiples of `1/k_resolution`, `comb(k + m - 1, m - 1)` of them.
- `random_risk_return_pairs(risk_interval, upper_bound, n, seed=None)`: `n`
  pairs with risk uniform in the interval and return uniform in
  `[0, upper_bound(risk)]`.
- `frontier_points(pairs, risk_interval, n_bars)`: the highest return in each
  of `n_bars` equal risk bars, placed at the bar centres (`-inf` for an empty
  bar).

### `portopt.optimizer`

- `find_k(m_assets, n_min_grid_points)`: smallest grid resolution giving at
  least the requested number of simplex grid points.
- `PortfolioOptimizer(num_assets, min_grid_points=0)`: `initialize()` sets
  `simplex_grid_resolution` to the result of `find_k`, but never below
  `SIMPLEX_GRID_RESOLUTION_MIN` (4), and to 4 when no minimum is given.
- `checked_size(n)`: returns `n`, or raises `OverflowError` above 2**64 - 1.

### `portopt.reports` and `portopt.demo`

Functions returning text reports for a worked example of four funds over ten
years (`PERFORMANCE_TABLE`, `ASSET_NAMES`, `SAMPLE_WEIGHTS`), plus
`format_matrix(mat, width=8, precision=2)` for fixed-point matrix output.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np
from portopt.analytics import (
    avg_stock_performances,
    simple_return_matrix,
    covariance_matrix,
    avg_portfolio_performance,
    portfolio_volatility,
)
from portopt.sampling import weight_matrix

perf = np.array([
    [0, -0.0806, 0.0668, 0.1843, 0.2039, 0.2524, 0.2468, 0.4013, 0.4740, 0.6105, 0.7260],
    [0,  0.0262, 0.1392, 0.2969, 0.3098, 0.5822, 0.9335, 1.4879, 1.7845, 2.0384, 2.2784],
])

avg = avg_stock_performances(perf)
cov = covariance_matrix(simple_return_matrix(perf).T, True)

for weights in weight_matrix(2, 5, 47110815).T:
    print(portfolio_volatility(cov, weights), avg_portfolio_performance(avg, weights))
```

## Command line

```
portopt [REPORT] [--seed N] [--assets N] [--resolution N] [--min-grid-points N]
```

`REPORT` is one of `sanitize`, `avg-performance`, `returns`, `covariance`,
`weights`, `centroid`, `simplex-grid`, `frontier`, `risk-returns` and
`find-k`. Without one, `find-k` is printed: the grid resolution for 15 assets
and at least 818800000 grid points. Run `portopt --help` for the option list.

## What it does not do

`PortfolioOptimizer` only chooses a simplex grid resolution; the package does
not search that grid or solve for optimal weights. The reports work on the
built-in example table only; there is no reading of price data from files.