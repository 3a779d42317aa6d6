"""Depth-first QUBO branch-and-bound built on qubobb's decision core.

The tree loop below is the driver's job: it owns the node stack, the
incumbent and pruning. qubobb supplies the relaxation solve, the branching
decision and the starting points.

Run this module directly to compare the branching strategies on a small
convex QUBO.
"""

from __future__ import annotations

import time

import numpy as np
import scipy.sparse as sp

import qubobb as qbb
from qubobb import Qubo, QuboBBNode, RunContext, SolverOptions
from qubobb.initial_points import generate_central_starting_points


def make_convex_qubo(n: int, seed: int = 0) -> Qubo:
    rng = np.random.default_rng(seed)
    a = rng.normal(size=(n, n))
    q = a @ a.T + n * np.eye(n)
    return Qubo(q=sp.csr_matrix(q), c=rng.normal(scale=n, size=n))


def solve(qubo: Qubo, options: SolverOptions):
    start_time = time.time()
    wrapper = qbb.ClarabelWrapper.from_qubo(qubo)
    n = qubo.num_x()

    root = QuboBBNode(
        lower_bound=float("-inf"),
        solution=generate_central_starting_points(n),
        fixed_variables=dict(options.fixed_variables),
    )
    stack = [root]
    nodes_visited = 0
    best_x, best_obj = None, float("inf")

    while stack and time.time() - start_time < options.max_time:
        node = stack.pop()
        nodes_visited += 1

        relaxed = qbb.solve_relaxation(wrapper, node, x0=node.solution)
        if relaxed.objective >= best_obj:
            continue

        if len(node.fixed_variables) == n:
            best_x, best_obj = relaxed.x.round(), relaxed.objective
            continue

        node = QuboBBNode(relaxed.objective, relaxed.x, node.fixed_variables)
        context = RunContext(qubo=qubo, options=options, nodes_visited=nodes_visited)
        idx = qbb.select_branching_variable(context, node)

        for value in (0.0, 1.0):
            fixed = dict(node.fixed_variables)
            fixed[idx] = value
            stack.append(QuboBBNode(node.lower_bound, node.solution.copy(), fixed))

    return best_x, best_obj, nodes_visited


def main():
    qubo = make_convex_qubo(8)
    print(f"{'Strategy':>22} {'Objective':>12} {'Nodes':>8}")
    print("-" * 44)
    for strategy in qbb.BranchStrategy:
        options = SolverOptions(branch_strategy=strategy, max_time=30.0, seed=1)
        _, obj, nodes = solve(qubo, options)
        print(f"{strategy.value:>22} {obj:>12.4f} {nodes:>8}")


if __name__ == "__main__":
    main()
