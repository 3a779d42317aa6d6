"""
Branch-and-Bound Node, Options and Run Context Dataclasses

This module contains the data structures the branching core reads: the
search node, the per-solve options and the run context exposed by the
tree driver. The core never mutates any of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping

import autograd.numpy as np

from ...constants import BranchStrategy, DEFAULT_MAX_TIME, DEFAULT_SEED
from ...qubo import Qubo


class ExhaustedBranchSpace(RuntimeError):
    """Raised when a branching decision is requested on a fully fixed node."""

    def __init__(self, num_x: int):
        super().__init__(f"No variable to branch on: all {num_x} variables are fixed")
        self.num_x = num_x


@dataclass
class QuboBBNode:
    """
    A node in the branch-and-bound tree.

    - `lower_bound` comes from the relaxation solve at this node.
    - `solution` is the (fractional) relaxation solution, length n. Entries
      of fixed variables are advisory; `fixed_variables` is authoritative.
    - `fixed_variables` maps variable index -> 0.0 or 1.0.
    """

    lower_bound: float
    solution: np.ndarray
    fixed_variables: Dict[int, float] = field(default_factory=dict)


@dataclass
class SolverOptions:
    """Options for a single B&B solve."""

    fixed_variables: Dict[int, float] = field(default_factory=dict)
    branch_strategy: BranchStrategy = BranchStrategy.MOST_VIOLATED
    max_time: float = DEFAULT_MAX_TIME  # Enforced by the tree driver only
    seed: int = DEFAULT_SEED

    @classmethod
    def from_dict(cls, options: Mapping[str, object]) -> "SolverOptions":
        """
        Build options from a plain dict.

        Recognized keys:
            - fixed_variables: mapping of index -> 0/1 (default: {})
            - branch_strategy: one of the BranchStrategy values (default: "most_violated")
            - max_time: time budget in seconds (default: 100)
            - seed: PRNG seed (default: 0)
        """
        options = dict(options)
        fixed = options.pop("fixed_variables", None) or {}
        strategy = BranchStrategy(
            str(options.pop("branch_strategy", BranchStrategy.MOST_VIOLATED))
        )
        max_time = float(options.pop("max_time", DEFAULT_MAX_TIME))
        seed = int(options.pop("seed", DEFAULT_SEED))
        if options:
            raise ValueError(f"Unknown solver options: {sorted(options)}")

        return cls(
            fixed_variables={int(k): float(v) for k, v in dict(fixed).items()},
            branch_strategy=strategy,
            max_time=max_time,
            seed=seed,
        )


@dataclass
class RunContext:
    """What the tree driver exposes to the branching core for one call."""

    qubo: Qubo
    options: SolverOptions = field(default_factory=SolverOptions)
    nodes_visited: int = 0

    def num_x(self) -> int:
        return self.qubo.num_x()
