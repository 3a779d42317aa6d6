"""
Branch-and-Bound Decision Core for QUBO

This package implements the decisions a QUBO branch-and-bound driver asks
for at every node. The tree itself (node queue, pruning, time limit) is
owned by the driver.

Modules:
- node: Node, options and run context dataclasses
- branching: Variable branching strategies and strong-branching estimates
- utils: Shared helper functions
"""

from .branching import (
    best_approximation,
    compute_strong_branch,
    first_not_fixed,
    most_violated,
    random,
    select_branching_variable,
    worst_approximation,
)
from .node import (
    ExhaustedBranchSpace,
    QuboBBNode,
    RunContext,
    SolverOptions,
)

__all__ = [
    "ExhaustedBranchSpace",
    "QuboBBNode",
    "RunContext",
    "SolverOptions",
    "select_branching_variable",
    "first_not_fixed",
    "most_violated",
    "random",
    "worst_approximation",
    "best_approximation",
    "compute_strong_branch",
]
