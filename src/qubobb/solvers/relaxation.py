"""
Convex Relaxation Interface

Converts the QUBO's sparse matrix into the compressed-column form a convex
QP solver such as Clarabel expects, and provides a box-constrained
relaxation solve over [0, 1]^n for a branch-and-bound node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Tuple

import autograd.numpy as np  # type: ignore
import scipy.sparse as sp
from autograd import grad  # type: ignore
from scipy.optimize import minimize  # type: ignore

from ..constants import (
    DEFAULT_RELAXATION_FTOL,
    DEFAULT_RELAXATION_MAXITER,
    DEFAULT_RELAXATION_METHOD,
)
from ..initial_points import generate_central_starting_points
from ..qubo import Qubo
from .base import RelaxationResult, SolverStatus
from .bnb.node import QuboBBNode

logger = logging.getLogger(__name__)

# scipy.optimize.minimize methods that accept an `ftol` option
FTOL_METHODS = {"L-BFGS-B", "SLSQP"}


@dataclass
class ClarabelWrapper:
    """The QUBO as a (CSC matrix, linear term) pair for a convex QP solver."""

    q: sp.csc_matrix
    c: np.ndarray

    @classmethod
    def from_qubo(cls, qubo: Qubo) -> "ClarabelWrapper":
        return cls(q=cls.make_cb_form(qubo.q), c=qubo.c.copy())

    @staticmethod
    def make_cb_form(p0: sp.spmatrix) -> sp.csc_matrix:
        """Exact CSC copy of `p0`; conversion errors propagate."""
        return sp.csc_matrix(p0).copy()

    @cached_property
    def q_dense(self) -> np.ndarray:
        """Dense copy of Q, built once per wrapper for the autograd objective."""
        return self.q.toarray()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.q.shape

    @property
    def indptr(self) -> np.ndarray:
        return self.q.indptr

    @property
    def indices(self) -> np.ndarray:
        return self.q.indices

    @property
    def data(self) -> np.ndarray:
        return self.q.data


def get_relaxation_bounds(node: QuboBBNode, num_x: int) -> List[Tuple[float, float]]:
    """Box [0, 1] per variable, pinned to the value of fixed variables."""
    bounds = [(0.0, 1.0)] * num_x
    for idx, val in node.fixed_variables.items():
        bounds[idx] = (val, val)
    return bounds


def build_minimize_options(
    method: str,
    maxiter: int,
    ftol: float,
    extra: Optional[Dict[str, object]] = None,
) -> Dict[str, object]:
    """Options dict for scipy.optimize.minimize; `ftol` only where supported."""
    minimize_options: Dict[str, object] = {"maxiter": maxiter}
    if method in FTOL_METHODS:
        minimize_options["ftol"] = ftol
    minimize_options.update(extra or {})
    return minimize_options


def solve_relaxation(
    wrapper: ClarabelWrapper,
    node: QuboBBNode,
    x0: Optional[np.ndarray] = None,
    options: Optional[Dict[str, object]] = None,
) -> RelaxationResult:
    """
    Solve min 0.5 x^T Q x + c^T x over [0, 1]^n with the node's fixings.

    Args:
        wrapper: Converted problem data
        node: Node whose fixed variables pin the bounds
        x0: Starting point (default: central point)
        options: Optional solver options:
            - method: scipy.optimize.minimize method (default: "L-BFGS-B")
            - maxiter: Maximum iterations (default: 1000)
            - ftol: Function tolerance, L-BFGS-B and SLSQP only (default: 1e-9)

    Returns:
        RelaxationResult with the relaxed solution and its objective
    """
    options = dict(options or {})
    method = str(options.pop("method", DEFAULT_RELAXATION_METHOD))
    maxiter = int(options.pop("maxiter", DEFAULT_RELAXATION_MAXITER))
    ftol = float(options.pop("ftol", DEFAULT_RELAXATION_FTOL))

    num_x = wrapper.shape[0]
    bounds = get_relaxation_bounds(node, num_x)

    if x0 is None:
        x0 = generate_central_starting_points(num_x)
    x0 = np.array(x0, dtype=float)
    for idx, val in node.fixed_variables.items():
        x0[idx] = val

    # autograd cannot trace through scipy.sparse products
    q_dense = wrapper.q_dense
    c = wrapper.c

    def obj_func(x):
        return 0.5 * np.dot(x, np.dot(q_dense, x)) + np.dot(c, x)

    result = minimize(
        obj_func,
        x0,
        jac=grad(obj_func),
        method=method,
        bounds=bounds,
        options=build_minimize_options(method, maxiter, ftol, options),
    )

    if result.success:
        status = SolverStatus.OPTIMAL
    elif getattr(result, "nit", 0) >= maxiter:
        status = SolverStatus.MAX_ITERATIONS
    else:
        status = SolverStatus.NUMERICAL_ERROR

    if status != SolverStatus.OPTIMAL:
        logger.debug(f"Relaxation solve did not converge: {result.message}")

    return RelaxationResult(
        x=result.x,
        objective=float(obj_func(result.x)),
        status=status,
        num_iters=int(getattr(result, "nit", 0)),
        raw_result=result,
    )
