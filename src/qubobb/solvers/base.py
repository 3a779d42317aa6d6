from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

import autograd.numpy as anp  # type: ignore


ArrayLike = anp.ndarray


class SolverStatus(StrEnum):
    OPTIMAL = "optimal"
    MAX_ITERATIONS = "max_iterations"
    NUMERICAL_ERROR = "numerical_error"


@dataclass
class RelaxationResult:
    x: ArrayLike
    objective: float
    status: SolverStatus
    num_iters: Optional[int] = None
    raw_result: Optional[object] = None
