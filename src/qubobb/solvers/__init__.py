from __future__ import annotations

from .base import RelaxationResult, SolverStatus
from .relaxation import ClarabelWrapper, get_relaxation_bounds, solve_relaxation


__all__ = [
    "ClarabelWrapper",
    "RelaxationResult",
    "SolverStatus",
    "get_relaxation_bounds",
    "solve_relaxation",
]
