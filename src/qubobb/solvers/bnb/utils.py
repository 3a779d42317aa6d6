"""
Utility Functions for Branch-and-Bound

Helpers shared by the branching strategies: reading a node through its
fixed-variable overlay and deriving the per-call random generator.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .node import ExhaustedBranchSpace, QuboBBNode, RunContext


def get_base_solution(node: QuboBBNode, num_x: int) -> np.ndarray:
    """Node point with fixed variables taken from `fixed_variables`."""
    x = np.array(node.solution[:num_x], dtype=float)
    for idx, val in node.fixed_variables.items():
        x[idx] = val
    return x


def get_unfixed_indices(node: QuboBBNode, num_x: int) -> List[int]:
    """Ascending indices in [0, num_x) that are not fixed at this node."""
    return [i for i in range(num_x) if i not in node.fixed_variables]


def ensure_branchable(node: QuboBBNode, num_x: int) -> List[int]:
    """Unfixed indices of the node; raise ExhaustedBranchSpace if there are none."""
    candidates = get_unfixed_indices(node, num_x)
    if not candidates:
        raise ExhaustedBranchSpace(num_x)
    return candidates


def make_node_prng(context: RunContext) -> np.random.Generator:
    """Fresh generator seeded with `seed + nodes_visited`.

    Every call gets its own generator, so no random state is shared
    between branching calls.
    """
    return np.random.default_rng(context.options.seed + context.nodes_visited)
