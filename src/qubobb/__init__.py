__all__ = [
    "Qubo",
    "BranchStrategy",
    "FIRST_NOT_FIXED",
    "MOST_VIOLATED",
    "RANDOM",
    "WORST_APPROXIMATION",
    "BEST_APPROXIMATION",
    "QuboBBNode",
    "SolverOptions",
    "RunContext",
    "ExhaustedBranchSpace",
    "select_branching_variable",
    "compute_strong_branch",
    "ClarabelWrapper",
    "solve_relaxation",
    "SolverStatus",
    "initial_points",
]

from .qubo import Qubo
from .constants import BranchStrategy
from .solvers import ClarabelWrapper, SolverStatus, solve_relaxation
from .solvers.bnb import (
    ExhaustedBranchSpace,
    QuboBBNode,
    RunContext,
    SolverOptions,
    compute_strong_branch,
    select_branching_variable,
)
from . import initial_points

FIRST_NOT_FIXED = BranchStrategy.FIRST_NOT_FIXED
MOST_VIOLATED = BranchStrategy.MOST_VIOLATED
RANDOM = BranchStrategy.RANDOM
WORST_APPROXIMATION = BranchStrategy.WORST_APPROXIMATION
BEST_APPROXIMATION = BranchStrategy.BEST_APPROXIMATION
