from enum import StrEnum


class BranchStrategy(StrEnum):
    FIRST_NOT_FIXED = "first_not_fixed"
    MOST_VIOLATED = "most_violated"
    RANDOM = "random"
    WORST_APPROXIMATION = "worst_approximation"
    BEST_APPROXIMATION = "best_approximation"


DEFAULT_MAX_TIME = 100.0
DEFAULT_SEED = 0
DEFAULT_SPARSITY = 0.5

DEFAULT_RELAXATION_METHOD = "L-BFGS-B"
DEFAULT_RELAXATION_MAXITER = 1000
DEFAULT_RELAXATION_FTOL = 1e-9
