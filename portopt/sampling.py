"""Random and grid-based weight sets and risk-return samples."""

from __future__ import annotations

import math
import random
import secrets
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

import numpy as np

_TWO_POW_32 = 4294967296.0
_TWO_POW_64 = 18446744073709551616.0
_BELOW_ONE = math.nextafter(1.0, 0.0)


@dataclass(frozen=True)
class RiskInterval:
    """Closed interval of risk values."""

    lower: float
    upper: float


@dataclass(frozen=True)
class RiskReturnPair:
    """A risk value together with the return achieved at that risk."""

    risk: float
    ret: float


class _UniformSource:
    """Uniform doubles from a 32-bit Mersenne Twister seeded the standard way."""

    def __init__(self, seed: int | None) -> None:
        if seed is None:
            seed = secrets.randbits(32)
        state = [seed & 0xFFFFFFFF]
        for i in range(1, 624):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & 0xFFFFFFFF)
        self._rng = random.Random()
        self._rng.setstate((3, tuple(state) + (624,), None))

    def canonical(self) -> float:
        low = float(self._rng.getrandbits(32))
        high = float(self._rng.getrandbits(32))
        value = (low + high * _TWO_POW_32) / _TWO_POW_64
        return _BELOW_ONE if value >= 1.0 else value

    def uniform(self, low: float, high: float) -> float:
        return (high - low) * self.canonical() + low


def weight_matrix(rows: int, cols: int, seed: int | None = None) -> np.ndarray:
    """A ``rows x cols`` matrix of uniform [0, 1) values with columns summing to 1.

    Each column is a weight vector. Giving ``seed`` makes the result reproducible.
    """
    source = _UniformSource(seed)
    matrix = np.array(
        [[source.uniform(0.0, 1.0) for _ in range(cols)] for _ in range(rows)], dtype=float
    ).reshape(rows, cols)
    sums = matrix.sum(axis=0)
    fallback = float(1 // rows) if rows else 0.0
    for j, total in enumerate(sums):
        matrix[:, j] = matrix[:, j] / total if total > 0 else fallback
    return matrix


def _compositions(k: int, m: int) -> Iterator[tuple[int, ...]]:
    if m == 1:
        yield (k,)
        return
    for first in range(k + 1):
        for rest in _compositions(k - first, m - 1):
            yield (first, *rest)


def simplex_grid(m_assets: int, k_resolution: int) -> list[np.ndarray]:
    """All weight vectors of ``m_assets`` entries that are multiples of ``1/k_resolution``.

    The vectors come in lexicographic order of their integer compositions and
    number ``comb(k_resolution + m_assets - 1, m_assets - 1)``.
    """
    if m_assets < 1:
        raise ValueError("m_assets must be at least 1")
    if k_resolution < 1:
        raise ValueError("k_resolution must be at least 1")
    return [
        np.array(parts, dtype=float) / k_resolution
        for parts in _compositions(k_resolution, m_assets)
    ]


def random_risk_return_pairs(
    risk_interval: RiskInterval,
    upper_bound: Callable[[float], float],
    n: int,
    seed: int | None = None,
) -> list[RiskReturnPair]:
    """``n`` random pairs with risk uniform in the interval and return in [0, upper_bound(risk)]."""
    source = _UniformSource(seed)
    pairs = []
    for _ in range(n):
        risk = source.uniform(risk_interval.lower, risk_interval.upper)
        ret = source.uniform(0.0, upper_bound(risk))
        pairs.append(RiskReturnPair(risk, ret))
    return pairs


def frontier_points(
    pairs: Sequence[RiskReturnPair], risk_interval: RiskInterval, n_bars: int
) -> list[RiskReturnPair]:
    """Highest return in each of ``n_bars`` equal risk bars, placed at the bar centres.

    Pairs outside the interval are ignored; a bar with no pairs gets ``-inf``.
    """
    if n_bars < 1:
        raise ValueError("n_bars must be at least 1")
    width = (risk_interval.upper - risk_interval.lower) / n_bars
    best = [-math.inf] * n_bars
    for pair in sorted(pairs, key=lambda p: p.risk):
        if not risk_interval.lower <= pair.risk <= risk_interval.upper:
            continue
        index = int((pair.risk - risk_interval.lower) / width)
        if index == n_bars:
            index -= 1
        if 0 <= index < n_bars:
            best[index] = max(best[index], pair.ret)
    return [
        RiskReturnPair(risk_interval.lower + (i + 0.5) * width, value)
        for i, value in enumerate(best)
    ]