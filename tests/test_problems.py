import os
import sys

import numpy as np
import pytest
from scipy.optimize import rosen, rosen_der

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.problems import PROBLEMS, get_problem, rosenbrock, rosenbrock_grad


def _central_difference(f, x, h=1e-6):
    grad = np.zeros_like(x)
    for i in range(len(x)):
        e = np.zeros_like(x)
        e[i] = h
        grad[i] = (f(x + e) - f(x - e)) / (2.0 * h)
    return grad


@pytest.mark.parametrize("name", sorted(PROBLEMS))
def test_gradient_matches_finite_differences(name):
    problem = get_problem(name)
    rng = np.random.default_rng(42)
    x = rng.uniform(-1.5, 1.5, size=4)

    np.testing.assert_allclose(
        problem.gradient(x), _central_difference(problem.objective, x), rtol=1e-5, atol=1e-5
    )


def test_rosenbrock_agrees_with_scipy():
    rng = np.random.default_rng(7)
    for n in (2, 3, 6):
        x = rng.normal(size=n)
        assert rosenbrock(x) == pytest.approx(rosen(x), rel=1e-12)
        np.testing.assert_allclose(rosenbrock_grad(x), rosen_der(x), rtol=1e-12, atol=1e-12)


def test_known_minimizers():
    assert get_problem("sphere").objective(np.zeros(3)) == 0.0
    assert get_problem("shifted_quadratic").objective(np.full(2, 3.0)) == 0.0
    assert get_problem("rosenbrock").objective(np.ones(4)) == 0.0
    assert get_problem("sq_sum").objective(np.array([1.0, -1.0])) == 0.0


def test_problem_as_objective_counts_calls():
    obj = get_problem("sphere").as_objective()
    obj.value(np.ones(2))
    obj.gradient(np.ones(2))
    assert (obj.n_fev, obj.n_gev) == (1, 1)
