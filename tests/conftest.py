import pytest
import numpy as np
import scipy.sparse as sp

from qubobb import Qubo
from qubobb.constants import BranchStrategy
from qubobb.solvers.bnb import RunContext, SolverOptions


@pytest.fixture
def make_context():
    """Build a RunContext around a QUBO for a given strategy."""

    def _make(qubo, strategy=BranchStrategy.MOST_VIOLATED, seed=0, nodes_visited=0):
        options = SolverOptions(branch_strategy=strategy, seed=seed)
        return RunContext(qubo=qubo, options=options, nodes_visited=nodes_visited)

    return _make


@pytest.fixture
def diagonal_qubo():
    """Q = 2 * I (3x3), c = 0."""
    return Qubo(q=sp.identity(3, format="csr") * 2.0, c=np.zeros(3))


@pytest.fixture
def random_qubo():
    """Dense symmetric 6x6 QUBO with a non-zero linear term."""
    rng = np.random.default_rng(1234)
    a = rng.normal(size=(6, 6))
    return Qubo(q=sp.csr_matrix(a + a.T), c=rng.normal(size=6))

