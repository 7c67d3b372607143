"""Choice of the simplex grid resolution for a portfolio optimisation."""

from __future__ import annotations

import math

SIMPLEX_GRID_RESOLUTION_MIN = 4
"""Lowest grid resolution used: a weight step of at most 25 %."""

_SIZE_MAX = 2**64 - 1
_UINT128_MODULUS = 2**128


def checked_size(n: int) -> int:
    """Return ``n`` unchanged if it fits an unsigned 64-bit size, else raise ``OverflowError``."""
    if n > _SIZE_MAX:
        raise OverflowError("uint128_t value exceeds size_t range")
    return n


def _grid_points(m_assets: int, k: int) -> int:
    return math.comb(k + m_assets - 1, k)


def find_k(m_assets: int, n_min_grid_points: int) -> int:
    """Smallest resolution ``k`` giving at least ``n_min_grid_points`` simplex grid points.

    The number of grid points for ``m_assets`` weights at resolution ``k`` is
    ``comb(k + m_assets - 1, k)``.
    """
    if m_assets < 1:
        raise ValueError("m_assets must be at least 1")
    if n_min_grid_points < 0:
        raise ValueError("n_min_grid_points must not be negative")

    if m_assets == 1:
        return 1
    if m_assets == 2:
        return checked_size((n_min_grid_points - 1) % _UINT128_MODULUS)

    k = 1
    while _grid_points(m_assets, k) < n_min_grid_points:
        k *= 2

    k_low, k_high = 0, k
    while k_low <= k_high:
        k_mid = (k_low + k_high) // 2
        if _grid_points(m_assets, k_mid) < n_min_grid_points:
            k_low = k_mid + 1
        else:
            k_high = k_mid - 1
    return k_low


class PortfolioOptimizer:
    """Holds the portfolio size and the simplex grid resolution derived from it.

    Without a minimum number of grid points, or when the resolution found for
    it is below :data:`SIMPLEX_GRID_RESOLUTION_MIN`, the minimum resolution is used.
    For example 4 assets and at least 1000 grid points give a resolution of 17
    (1140 grid points).
    """

    def __init__(self, num_assets: int, min_grid_points: int = 0) -> None:
        self.num_assets = num_assets
        self.min_grid_points = min_grid_points
        self.simplex_grid_resolution: int | None = None

    def initialize(self) -> None:
        """Work out the simplex grid resolution."""
        if self.min_grid_points == 0:
            self.simplex_grid_resolution = SIMPLEX_GRID_RESOLUTION_MIN
            return
        k = find_k(self.num_assets, self.min_grid_points)
        self.simplex_grid_resolution = max(k, SIMPLEX_GRID_RESOLUTION_MIN)