"""
Branching Variable Selection Strategies

This module implements the strategies for selecting which variable to
branch on at a node of the QUBO branch-and-bound tree.

Strategies:
- FIRST_NOT_FIXED: Lowest unfixed index (deterministic, cheapest)
- MOST_VIOLATED: Unfixed variable whose relaxed value is closest to 0.5
- RANDOM: Circular scan from a random start, seeded per node
- WORST_APPROXIMATION: Strong-branching estimate, pushes the bound up fastest
- BEST_APPROXIMATION: Strong-branching estimate, keeps the bound low

All strategies raise ExhaustedBranchSpace when every variable is fixed.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ...constants import BranchStrategy
from .node import QuboBBNode, RunContext
from .utils import ensure_branchable, get_base_solution, make_node_prng

logger = logging.getLogger(__name__)


def select_branching_variable(context: RunContext, node: QuboBBNode) -> int:
    """Select branching variable based on the strategy in the run options."""
    strategy = BranchStrategy(context.options.branch_strategy)

    if strategy == BranchStrategy.FIRST_NOT_FIXED:
        idx = first_not_fixed(context, node)
    elif strategy == BranchStrategy.MOST_VIOLATED:
        idx = most_violated(context, node)
    elif strategy == BranchStrategy.RANDOM:
        idx = random(context, node)
    elif strategy == BranchStrategy.WORST_APPROXIMATION:
        idx = worst_approximation(context, node)
    else:  # BEST_APPROXIMATION
        idx = best_approximation(context, node)

    logger.debug(
        f"Branching on x[{idx}] (strategy={strategy.value}, "
        f"nodes_visited={context.nodes_visited})"
    )
    return idx


def first_not_fixed(context: RunContext, node: QuboBBNode) -> int:
    """Select the smallest index that is not fixed."""
    return ensure_branchable(node, context.num_x())[0]


def most_violated(context: RunContext, node: QuboBBNode) -> int:
    """Select the unfixed variable whose relaxed value is closest to 0.5.

    A candidate replaces the incumbent on ties as well, so the last of
    several equally violated variables is returned.
    """
    candidates = ensure_branchable(node, context.num_x())

    best_violation = 1.0
    best_idx = candidates[0]

    for i in candidates:
        violation = abs(node.solution[i] - 0.5)
        if violation <= best_violation:
            best_violation = violation
            best_idx = i

    return best_idx


def random(context: RunContext, node: QuboBBNode) -> int:
    """Select the first unfixed variable at or after a random starting index."""
    num_x = context.num_x()
    candidates = ensure_branchable(node, num_x)

    prng = make_node_prng(context)
    start = int(prng.integers(0, 2**64, dtype=np.uint64) % np.uint64(num_x))

    # [start, n) first, then wrap around to [0, start)
    for i in candidates:
        if i >= start:
            return i
    return candidates[0]


def worst_approximation(context: RunContext, node: QuboBBNode) -> int:
    """Branch on the variable with the worst estimated outcome.

    Each variable is scored by the more favorable of its two flips; the
    variable with the largest such score pushes the lower bound up fastest.
    The first index reaching the maximum wins.
    """
    candidates = ensure_branchable(node, context.num_x())
    zero_flip, one_flip = compute_strong_branch(context, node)

    worst = float("-inf")
    best_idx = candidates[0]

    for i in candidates:
        min_obj_gain = min(zero_flip[i], one_flip[i])
        if min_obj_gain > worst:
            worst = min_obj_gain
            best_idx = i

    return best_idx


def best_approximation(context: RunContext, node: QuboBBNode) -> int:
    """Branch on the variable with the best estimated outcome.

    Each variable is scored by the less favorable of its two flips; the
    variable with the smallest such score keeps the lower bound low.
    The last index reaching the minimum wins.
    """
    candidates = ensure_branchable(node, context.num_x())
    zero_flip, one_flip = compute_strong_branch(context, node)

    best = float("inf")
    best_idx = candidates[0]

    for i in candidates:
        max_obj_gain = max(zero_flip[i], one_flip[i])
        if max_obj_gain <= best:
            best = max_obj_gain
            best_idx = i

    return best_idx


def compute_strong_branch(
    context: RunContext,
    node: QuboBBNode,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Estimate the objective change of forcing each variable to 0 or to 1.

    All other variables are held at their node values (fixed value if fixed,
    relaxed value otherwise). For a step d on coordinate i the change is

        0.5 * d * (d * Q[i, i] + (Q x)[i] + (Q^T x)[i] + 2 * c[i])

    Q x and Q^T x are kept separate so the cross term is right for either
    storage convention of Q.

    Returns:
        Tuple of (zero_delta, one_delta), each of length n
    """
    qubo = context.qubo
    x = get_base_solution(node, qubo.num_x())

    delta_zero = -x
    delta_one = 1.0 - x

    q_jj = qubo.q.diagonal()
    q_x = qubo.q @ x
    x_q = qubo.q.T @ x
    cross = q_x + x_q + 2.0 * qubo.c

    zero_result = 0.5 * delta_zero * (delta_zero * q_jj + cross)
    one_result = 0.5 * delta_one * (delta_one * q_jj + cross)

    return zero_result, one_result

