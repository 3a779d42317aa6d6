"""
QUBO Problem Data

Holds the quadratic form shared by every node of a branch-and-bound solve:
a sparse matrix Q and a dense linear term c, with objective

    f(x) = 0.5 * x^T Q x + c^T x

Q is assumed symmetric; this is not checked.
"""

from __future__ import annotations

from dataclasses import dataclass

import autograd.numpy as np
import scipy.sparse as sp


@dataclass(frozen=True)
class Qubo:
    """Immutable quadratic form ``(Q, c)``."""

    q: sp.csr_matrix
    c: np.ndarray

    def __post_init__(self):
        q = sp.csr_matrix(self.q, dtype=float)
        c = np.asarray(self.c, dtype=float).ravel()

        if q.shape[0] != q.shape[1]:
            raise ValueError(f"Q must be square, got shape {q.shape}")
        if q.shape[0] != c.shape[0]:
            raise ValueError(
                f"Q is {q.shape[0]}x{q.shape[1]} but c has length {c.shape[0]}"
            )

        object.__setattr__(self, "q", q)
        object.__setattr__(self, "c", c)

    def num_x(self) -> int:
        return self.q.shape[0]

    def evaluate(self, x) -> float:
        x = np.asarray(x, dtype=float)
        return float(0.5 * x @ (self.q @ x) + self.c @ x)

    def alpha(self) -> float:
        """Best common value t in [0, 1] when every variable is set to t.

        Restricted to x = t * 1, the objective is 0.5 * t^2 * sum(Q) + t * sum(c).
        """
        return _best_scalar(float(self.q.sum()), float(self.c.sum()))

    def rho(self) -> float:
        """Like :meth:`alpha`, but only the diagonal of Q is kept."""
        return _best_scalar(float(self.q.diagonal().sum()), float(self.c.sum()))


def _best_scalar(a: float, b: float) -> float:
    """Minimize 0.5 * a * t^2 + b * t over t in [0, 1]."""
    if a > 0:
        return float(np.clip(-b / a, 0.0, 1.0))

    # Concave or linear: the minimum sits on an endpoint
    return 1.0 if 0.5 * a + b < 0.0 else 0.0
