import logging
from typing import Callable

import numpy as np

from core.objective import BaseObjective, as_objective

logger = logging.getLogger('bfgs_solver')


def wolfe_conditions(
    f0: float,
    f_trial: float,
    dir_grad0: float,
    dir_grad_trial: float,
    alpha: float,
    c1: float = 1e-4,
    c2: float = 0.9,
) -> tuple[bool, bool]:
    """Return ``(armijo, curvature)`` flags for a trial step.

    Parameters
    ----------
    f0 : float
        Objective value at the start point.
    f_trial : float
        Objective value at the trial point.
    dir_grad0 : float
        Directional derivative ``<d, g(x0)>`` at the start point.
    dir_grad_trial : float
        Directional derivative ``<d, g(x)>`` at the trial point.
    alpha : float
        Trial step length.
    c1, c2 : float
        Armijo and curvature coefficients.
    """
    armijo = f_trial <= f0 + c1 * alpha * dir_grad0
    curvature = dir_grad_trial >= c2 * dir_grad0
    return bool(armijo), bool(curvature)


def backtracking_line_search(
    objective: BaseObjective | Callable[[np.ndarray], float],
    gradient: Callable[[np.ndarray], np.ndarray] | None,
    x0: np.ndarray,
    direction: np.ndarray,
    c1: float = 1e-4,
    c2: float = 0.9,
    beta: float = 0.5,
    alpha_min: float = 1e-9,
    g0: np.ndarray | None = None,
) -> tuple[np.ndarray, float]:
    """Wolfe backtracking line search starting from a unit step.

    Parameters
    ----------
    objective : BaseObjective | Callable
        Objective instance, or the objective callable when ``gradient`` is
        given as well.
    gradient : Callable | None
        Gradient callable, or ``None`` when ``objective`` is a
        :class:`~core.objective.BaseObjective`.
    x0 : np.ndarray
        Start point.
    direction : np.ndarray
        Search direction. Not checked for descent; a non-descent direction
        just shrinks the step down to ``alpha_min``.
    c1 : float, optional
        Armijo coefficient, by default ``1e-4``.
    c2 : float, optional
        Curvature coefficient, by default ``0.9``.
    beta : float, optional
        Step reduction factor, by default ``0.5``.
    alpha_min : float, optional
        Steps below this are returned without testing, by default ``1e-9``.
    g0 : np.ndarray, optional
        Gradient at ``x0`` if the caller already has it.

    Returns
    -------
    tuple[np.ndarray, float]
        The accepted point and the step length used to reach it. When the
        search bottoms out at ``alpha_min`` the point may not satisfy the
        Wolfe conditions.
    """
    obj = as_objective(objective, gradient)
    x0 = np.asarray(x0, dtype=float)
    direction = np.asarray(direction, dtype=float)

    if g0 is None:
        g0 = obj.gradient(x0)
    f0 = obj.value(x0)
    dir_grad0 = float(np.dot(direction, g0))

    alpha = 1.0
    backtracks = 0
    while True:
        x = x0 + alpha * direction
        if alpha < alpha_min:
            logger.debug(
                "Line search hit alpha floor (alpha=%.2e < %.2e) after %d "
                "backtracks; returning unchecked step.",
                alpha,
                alpha_min,
                backtracks,
            )
            return x, alpha

        dir_grad = float(np.dot(direction, obj.gradient(x)))
        armijo, curvature = wolfe_conditions(
            f0, obj.value(x), dir_grad0, dir_grad, alpha, c1, c2
        )
        if armijo and curvature:
            logger.debug(
                "Line search success: alpha=%.3e, backtracks=%d", alpha, backtracks
            )
            return x, alpha

        alpha *= beta
        backtracks += 1
