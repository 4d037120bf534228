"""Quasi-Newton BFGS stepper with Wolfe backtracking line search."""

from __future__ import annotations

import logging

import numpy as np

from core.objective import BaseObjective
from runtime.steppers.line_search import backtracking_line_search

from .base import BaseStepper

logger = logging.getLogger("bfgs_solver")


def bfgs_inverse_update(H_inv: np.ndarray, s: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Return the BFGS update of the inverse Hessian ``H_inv``.

    ``s`` is the displacement taken and ``y`` the change in gradient.
    Implements

        H + (sTy + yHy) s s^T / sTy^2 - (H y s^T + s y^T H) / sTy

    and returns a new array. A vanishing ``sTy`` yields NaN/Inf entries;
    no guard is applied here.
    """
    sTy = np.dot(s, y)
    Hy = H_inv @ y
    yH = y @ H_inv
    yHy = np.dot(y, Hy)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return (
            H_inv
            + (sTy + yHy) * np.outer(s, s) / (sTy * sTy)
            - (np.outer(Hy, s) + np.outer(s, yH)) / sTy
        )


class BFGS(BaseStepper):
    """BFGS stepper using a dense inverse-Hessian approximation.

    Intended for low-dimensional problems. The approximation starts as the
    identity on :meth:`reset` and is replaced wholesale on every step.
    ``curvature_guard`` selects what happens when ``|sTy| <= curvature_eps``:
    ``"none"`` applies the update anyway, ``"skip"`` keeps the previous
    matrix and ``"reset"`` restarts from the identity.
    """

    def __init__(
        self,
        c1: float = 1e-4,
        c2: float = 0.9,
        beta: float = 0.5,
        alpha_min: float = 1e-9,
        curvature_guard: str = "none",
        curvature_eps: float = 1e-12,
    ) -> None:
        super().__init__(c1=c1, c2=c2, beta=beta, alpha_min=alpha_min)
        self.curvature_guard = curvature_guard
        self.curvature_eps = curvature_eps
        self.skipped_updates = 0
        self._H_inv: np.ndarray | None = None

    @property
    def H_inv(self) -> np.ndarray | None:
        return self._H_inv

    def reset(self, n: int) -> None:
        self._H_inv = np.eye(n, dtype=float)
        self.skipped_updates = 0

    def step(
        self,
        objective: BaseObjective,
        x: np.ndarray,
        grad: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray, float]:
        """Take one BFGS step with line search."""
        if self._H_inv is None:
            self.reset(len(x))

        direction = -(self._H_inv @ grad)
        x_new, alpha = backtracking_line_search(
            objective, None, x, direction, g0=grad, **self.line_search_kwargs()
        )
        s = alpha * direction
        grad_new = objective.gradient(x_new)
        y = grad_new - grad

        sTy = float(np.dot(s, y))
        if self.curvature_guard != "none" and not abs(sTy) > self.curvature_eps:
            self.skipped_updates += 1
            if self.curvature_guard == "reset":
                self._H_inv = np.eye(len(x), dtype=float)
            logger.warning(
                "Degenerate curvature sTy=%.3e (eps=%.1e); %s inverse-Hessian update.",
                sTy,
                self.curvature_eps,
                "reset" if self.curvature_guard == "reset" else "skipped",
            )
        else:
            self._H_inv = bfgs_inverse_update(self._H_inv, s, y)

        return x_new, grad_new, alpha
