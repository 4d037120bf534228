import os
import sys

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.objective import CallableObjective
from runtime.steppers.bfgs import BFGS, bfgs_inverse_update


def _reference_update(H, s, y):
    """Element-wise form of the inverse-Hessian recursion."""
    n = len(s)
    sTy = sum(s[i] * y[i] for i in range(n))
    yHy = sum(y[i] * H[i][j] * y[j] for i in range(n) for j in range(n))
    out = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            out[i][j] = H[i][j] + (sTy + yHy) * s[i] * s[j] / (sTy * sTy)
            for k in range(n):
                out[i][j] -= (H[i][k] * y[k] * s[j] + s[i] * y[k] * H[k][j]) / sTy
    return out


def _random_spd(rng, n):
    a = rng.normal(size=(n, n))
    return a @ a.T + n * np.eye(n)


def test_vectorized_update_matches_elementwise_formula():
    rng = np.random.default_rng(0)
    H = _random_spd(rng, 4)
    s = rng.normal(size=4)
    y = s + 0.1 * rng.normal(size=4)

    np.testing.assert_allclose(
        bfgs_inverse_update(H, s, y), _reference_update(H, s, y), rtol=1e-12, atol=1e-12
    )


def test_update_satisfies_secant_equation_and_stays_spd():
    rng = np.random.default_rng(1)
    H = np.eye(5)
    A = _random_spd(rng, 5)
    for _ in range(5):
        s = rng.normal(size=5)
        y = A @ s  # quadratic model: sTy > 0
        H_new = bfgs_inverse_update(H, s, y)

        np.testing.assert_allclose(H_new @ y, s, rtol=1e-9, atol=1e-9)
        np.testing.assert_allclose(H_new, H_new.T, rtol=1e-9, atol=1e-9)
        assert np.all(np.linalg.eigvalsh(0.5 * (H_new + H_new.T)) > 0.0)
        H = H_new


def test_update_returns_new_matrix():
    H = np.eye(2)
    H_new = bfgs_inverse_update(H, np.array([1.0, 0.0]), np.array([2.0, 0.0]))
    assert H_new is not H
    np.testing.assert_array_equal(H, np.eye(2))


def test_zero_curvature_produces_non_finite_matrix_without_raising():
    H_new = bfgs_inverse_update(np.eye(2), np.array([1e-9, 0.0]), np.zeros(2))
    assert np.isnan(H_new).all()


def test_bfgs_stepper_moves_toward_minimum():
    obj = CallableObjective(
        lambda x: float((x[0] - 1.0) ** 2), lambda x: np.array([2.0 * (x[0] - 1.0)])
    )
    stepper = BFGS()
    stepper.reset(1)

    x = np.array([0.0])
    x1, g1, alpha = stepper.step(obj, x, obj.gradient(x))

    assert alpha == 0.5
    np.testing.assert_allclose(x1, [1.0])
    np.testing.assert_allclose(g1, [0.0])
    # Exact secant pair on a quadratic recovers the true inverse Hessian.
    np.testing.assert_allclose(stepper.H_inv, [[0.5]])


def test_reset_restores_identity():
    stepper = BFGS()
    stepper.reset(3)
    stepper._H_inv = 2.0 * np.eye(3)
    stepper.skipped_updates = 4

    stepper.reset(3)

    np.testing.assert_array_equal(stepper.H_inv, np.eye(3))
    assert stepper.skipped_updates == 0


def _linear_objective():
    a = np.array([1.0, -2.0])
    return CallableObjective(lambda x: float(np.dot(a, x)), lambda x: a.copy())


def test_skip_guard_keeps_previous_matrix():
    obj = _linear_objective()
    stepper = BFGS(curvature_guard="skip")
    stepper.reset(2)
    stepper._H_inv = np.diag([2.0, 3.0])

    x = np.zeros(2)
    stepper.step(obj, x, obj.gradient(x))

    np.testing.assert_array_equal(stepper.H_inv, np.diag([2.0, 3.0]))
    assert stepper.skipped_updates == 1


def test_reset_guard_restarts_from_identity(caplog):
    obj = _linear_objective()
    stepper = BFGS(curvature_guard="reset")
    stepper.reset(2)
    stepper._H_inv = np.diag([2.0, 3.0])

    x = np.zeros(2)
    with caplog.at_level("WARNING"):
        stepper.step(obj, x, obj.gradient(x))

    np.testing.assert_array_equal(stepper.H_inv, np.eye(2))
    assert stepper.skipped_updates == 1
    assert "Degenerate curvature" in caplog.text
