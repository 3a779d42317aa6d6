"""
Initial Points

Starting points for relaxation solves:

- Central point: every variable at 0.5
- Alpha point: every variable at the QUBO's alpha heuristic
- Rho point: every variable at the QUBO's rho heuristic
- Random points: uniform in [0, 1)^n
- Random binary points: each variable is 1 with probability `sparsity`

Random generators take a seeded ``numpy.random.Generator`` so the stream is
reproducible.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .constants import DEFAULT_SPARSITY
from .qubo import Qubo


def generate_central_starting_points(n: int) -> np.ndarray:
    """Starting point of exactly 0.5 for each variable."""
    return np.full(n, 0.5)


def generate_alpha_starting_point(qubo: Qubo) -> np.ndarray:
    return np.full(qubo.num_x(), qubo.alpha())


def generate_rho_starting_point(qubo: Qubo) -> np.ndarray:
    return np.full(qubo.num_x(), qubo.rho())


def generate_random_starting_points(
    n: int,
    num_points: int,
    prng: np.random.Generator,
) -> List[np.ndarray]:
    """Fractional points drawn uniformly from [0, 1)^n."""
    _check_num_points(num_points)
    return [prng.random(n) for _ in range(num_points)]


def generate_random_binary_point(
    n: int,
    prng: np.random.Generator,
    sparsity: float = DEFAULT_SPARSITY,
) -> np.ndarray:
    """
    Random binary point where each variable is 1 with probability `sparsity`.

    One unit-interval draw is consumed per variable, in index order.
    """
    if not 0.0 <= sparsity <= 1.0:
        raise ValueError(f"sparsity must be in [0, 1], got {sparsity}")

    x = np.zeros(n, dtype=int)
    for i in range(n):
        if prng.random() < sparsity:
            x[i] = 1
    return x


def generate_random_binary_points(
    n: int,
    num_points: int,
    prng: np.random.Generator,
) -> List[np.ndarray]:
    """`num_points` independent random binary points at sparsity 0.5."""
    _check_num_points(num_points)
    return [
        generate_random_binary_point(n, prng, DEFAULT_SPARSITY)
        for _ in range(num_points)
    ]


def _check_num_points(num_points: int) -> None:
    if num_points < 0:
        raise ValueError(f"num_points must be non-negative, got {num_points}")
