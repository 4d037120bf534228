"""Gradient descent stepper with Wolfe backtracking line search."""

from __future__ import annotations

import numpy as np

from core.objective import BaseObjective
from runtime.steppers.line_search import backtracking_line_search

from .base import BaseStepper


class GradientDescent(BaseStepper):
    """Step along the negative gradient; no curvature model is kept."""

    def reset(self, n: int) -> None:
        return None

    def step(
        self,
        objective: BaseObjective,
        x: np.ndarray,
        grad: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray, float]:
        """Apply one gradient descent step with backtracking line search."""
        x_new, alpha = backtracking_line_search(
            objective, None, x, -grad, g0=grad, **self.line_search_kwargs()
        )
        return x_new, objective.gradient(x_new), alpha
