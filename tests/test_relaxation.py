"""Tests for the sparse relaxation adapter and the relaxation solve."""
import warnings

import pytest
import numpy as np
import scipy.sparse as sp
from scipy.optimize import OptimizeWarning

import qubobb as qbb
from qubobb import Qubo
from qubobb.solvers import ClarabelWrapper, SolverStatus, get_relaxation_bounds, solve_relaxation
from qubobb.solvers.bnb import QuboBBNode
from qubobb.solvers.relaxation import build_minimize_options


def _node(n, fixed=None):
    return QuboBBNode(
        lower_bound=float("-inf"),
        solution=np.full(n, 0.5),
        fixed_variables=dict(fixed or {}),
    )


class TestClarabelWrapper:
    """Tests for the CSC conversion."""

    def test_round_trip(self, random_qubo):
        wrapper = ClarabelWrapper.from_qubo(random_qubo)

        assert wrapper.q.format == "csc"
        assert wrapper.shape == (6, 6)
        assert wrapper.q.nnz == random_qubo.q.nnz
        assert np.array_equal(wrapper.q.toarray(), random_qubo.q.toarray())
        assert np.array_equal(wrapper.c, random_qubo.c)

    def test_sparse_structure_preserved(self):
        q = sp.csr_matrix(
            np.array([[1.0, 0.0, -2.0], [0.0, 3.0, 0.0], [-2.0, 0.0, 5.0]])
        )
        wrapper = ClarabelWrapper.from_qubo(Qubo(q=q, c=[1.0, 2.0, 3.0]))

        assert list(wrapper.indptr) == [0, 2, 3, 5]
        assert list(wrapper.indices) == [0, 2, 1, 0, 2]
        assert list(wrapper.data) == [1.0, -2.0, 3.0, -2.0, 5.0]

    def test_make_cb_form_from_coo(self):
        coo = sp.coo_matrix(([4.0, 1.5], ([0, 1], [1, 0])), shape=(2, 2))
        csc = ClarabelWrapper.make_cb_form(coo)

        assert csc.format == "csc"
        assert np.array_equal(csc.toarray(), coo.toarray())

    def test_copies_linear_term(self, random_qubo):
        wrapper = ClarabelWrapper.from_qubo(random_qubo)
        wrapper.c[0] += 100.0

        assert not np.isclose(wrapper.c[0], random_qubo.c[0])

    def test_conversion_error_propagates(self):
        with pytest.raises((TypeError, ValueError)):
            ClarabelWrapper.make_cb_form(np.zeros((2, 2, 2)))


class TestSolveRelaxation:
    """Tests for the box-constrained relaxation solve."""

    def setup_method(self):
        # 0.5 x^T (2I) x + c^T x -> x_i = -c_i / 2 clipped to [0, 1]
        self.qubo = Qubo(q=sp.identity(2, format="csr") * 2.0, c=[-1.0, -3.0])
        self.wrapper = ClarabelWrapper.from_qubo(self.qubo)

    def test_unconstrained_box(self):
        result = solve_relaxation(self.wrapper, _node(2))

        assert result.status == SolverStatus.OPTIMAL
        assert np.allclose(result.x, [0.5, 1.0], atol=1e-5)
        assert np.isclose(result.objective, -0.25 - 2.0, atol=1e-6)

    def test_fixed_variables_pinned(self):
        result = solve_relaxation(self.wrapper, _node(2, {1: 0.0}))

        assert np.isclose(result.x[1], 0.0)
        assert np.isclose(result.x[0], 0.5, atol=1e-5)
        assert np.isclose(result.objective, -0.25, atol=1e-6)

    def test_objective_matches_qubo(self):
        result = solve_relaxation(self.wrapper, _node(2), x0=[0.9, 0.1])
        assert np.isclose(result.objective, self.qubo.evaluate(result.x))

    def test_starting_point_generators(self):
        x0 = qbb.initial_points.generate_alpha_starting_point(self.qubo)
        result = solve_relaxation(self.wrapper, _node(2), x0=x0, options={"maxiter": 200})

        assert np.allclose(result.x, [0.5, 1.0], atol=1e-5)

    def test_bounds(self):
        bounds = get_relaxation_bounds(_node(3, {2: 1.0}), 3)
        assert bounds == [(0.0, 1.0), (0.0, 1.0), (1.0, 1.0)]


class TestMinimizeOptions:
    """Tests for how relaxation options reach scipy."""

    def test_ftol_for_supported_methods(self):
        for method in ("L-BFGS-B", "SLSQP"):
            options = build_minimize_options(method, 50, 1e-7)
            assert options == {"maxiter": 50, "ftol": 1e-7}

    def test_no_ftol_for_trust_constr(self):
        options = build_minimize_options("trust-constr", 50, 1e-7, {"gtol": 1e-6})
        assert options == {"maxiter": 50, "gtol": 1e-6}

    def test_trust_constr_without_unknown_option_warning(self):
        qubo = Qubo(q=sp.identity(2, format="csr") * 2.0, c=[-1.0, -3.0])
        wrapper = ClarabelWrapper.from_qubo(qubo)

        with warnings.catch_warnings():
            warnings.simplefilter("error", OptimizeWarning)
            result = solve_relaxation(wrapper, _node(2), options={"method": "trust-constr"})

        assert np.allclose(result.x, [0.5, 1.0], atol=1e-3)

    def test_dense_copy_built_once(self, random_qubo):
        wrapper = ClarabelWrapper.from_qubo(random_qubo)
        solve_relaxation(wrapper, _node(6))
        dense = wrapper.q_dense
        solve_relaxation(wrapper, _node(6, {0: 1.0}))

        assert wrapper.q_dense is dense
        assert np.array_equal(dense, random_qubo.q.toarray())
