# runtime/minimizer.py

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from core.exceptions import DimensionMismatchError
from core.objective import BaseObjective, as_objective
from core.parameters.optimizer_parameters import OptimizerParameters
from runtime.steppers.base import BaseStepper
from runtime.steppers.bfgs import BFGS

logger = logging.getLogger("bfgs_solver")

STATUS_CONVERGED = "converged"
STATUS_MAX_ITERATIONS = "max_iterations"
STATUS_NON_FINITE = "non_finite"


@dataclass
class MinimizeResult:
    """Outcome of one optimization run."""

    x: np.ndarray
    value: float
    gradient: np.ndarray
    iterations: int
    status: str
    n_fev: int = 0
    n_gev: int = 0
    skipped_updates: int = 0
    history: Dict[str, List[float]] = field(default_factory=dict)

    @property
    def converged(self) -> bool:
        return self.status == STATUS_CONVERGED

    @property
    def grad_norm(self) -> float:
        return float(np.linalg.norm(self.gradient))


def _all_finite(*arrays) -> bool:
    return all(np.all(np.isfinite(a)) for a in arrays if a is not None)


class Minimizer:
    """Coordinate the optimization loop for one objective."""

    def __init__(
        self,
        objective: BaseObjective,
        params: Optional[OptimizerParameters] = None,
        stepper: Optional[BaseStepper] = None,
        quiet: bool = True,
    ) -> None:
        self.objective = objective
        # Validate a copy so the caller's parameters keep their original values.
        source = params.to_dict() if params is not None else None
        self.params = OptimizerParameters(source).validate()
        self.stepper = stepper if stepper is not None else self._default_stepper()
        self.quiet = quiet

    def _default_stepper(self) -> BFGS:
        p = self.params
        return BFGS(
            c1=p.c1,
            c2=p.c2,
            beta=p.beta,
            alpha_min=p.alpha_min,
            curvature_guard=p.curvature_guard,
            curvature_eps=p.curvature_eps,
        )

    def __repr__(self):
        return (
            f"Minimizer(stepper={self.stepper!r}, params={self.params!r}, "
            f"quiet={self.quiet})"
        )

    def run(
        self,
        x0,
        callback: Optional[Callable[[int, np.ndarray, float], None]] = None,
    ) -> MinimizeResult:
        """Minimize from ``x0`` until the gradient norm is at most ``gtol``.

        Without ``max_iter`` the loop runs until converged, which may be
        forever for objectives with no stationary point. ``callback`` is
        called as ``callback(iteration, x, grad_norm)`` before each step.
        """
        x = np.array(x0, dtype=float).reshape(-1)
        n = x.shape[0]
        if n < 1:
            raise DimensionMismatchError(1, 0, what="x0", message="x0 must not be empty.")

        gtol = self.params.gtol
        max_iter = self.params.max_iter
        obj = self.objective
        fev0, gev0 = obj.n_fev, obj.n_gev

        self.stepper.reset(n)
        grad = obj.gradient(x)
        grad_norm = float(np.linalg.norm(grad))
        history: Dict[str, List[float]] = {"grad_norm": [grad_norm], "alpha": []}

        status = STATUS_CONVERGED
        i = 0
        # A NaN norm compares false and ends the loop.
        while grad_norm > gtol:
            if max_iter is not None and i >= max_iter:
                status = STATUS_MAX_ITERATIONS
                logger.warning(
                    "Stopped after %d iterations without converging; |g|=%.3e > %.1e.",
                    i,
                    grad_norm,
                    gtol,
                )
                break
            if callback:
                callback(i, x, grad_norm)

            x, grad, alpha = self.stepper.step(obj, x, grad)
            i += 1
            grad_norm = float(np.linalg.norm(grad))
            history["grad_norm"].append(grad_norm)
            history["alpha"].append(float(alpha))
            logger.debug("Iteration %d: |g|=%.3e, alpha=%.3e", i, grad_norm, alpha)

            if not self.quiet:
                print(f"Step {i:4d}: |g| = {grad_norm:.5e}, alpha = {alpha:.2e}")

            if not _all_finite(x, grad, getattr(self.stepper, "H_inv", None)):
                break

        if not _all_finite(x, grad, getattr(self.stepper, "H_inv", None)):
            status = STATUS_NON_FINITE
            logger.warning(
                "Non-finite values after %d iterations (degenerate curvature "
                "sTy ~ 0 is the usual cause); result is not a minimizer.",
                i,
            )

        x_final = x.copy()
        value = obj.value(x_final)
        if status == STATUS_CONVERGED:
            logger.info("Converged in %d iterations; |g|=%.3e", i, grad_norm)

        return MinimizeResult(
            x=x_final,
            value=value,
            gradient=grad,
            iterations=i,
            status=status,
            n_fev=obj.n_fev - fev0,
            n_gev=obj.n_gev - gev0,
            skipped_updates=getattr(self.stepper, "skipped_updates", 0),
            history=history,
        )


def _build_minimizer(objective, gradient, params, overrides, stepper) -> Minimizer:
    merged = OptimizerParameters(params.to_dict() if params is not None else None)
    merged.update(overrides)
    return Minimizer(as_objective(objective, gradient), merged, stepper=stepper)


def minimize_result(
    objective,
    gradient=None,
    x0=None,
    params: Optional[OptimizerParameters] = None,
    stepper: Optional[BaseStepper] = None,
    callback=None,
    **overrides,
) -> MinimizeResult:
    """Run BFGS and return the full :class:`MinimizeResult`.

    Keyword ``overrides`` (``gtol``, ``max_iter``, ``c1`` ...) take precedence
    over ``params``.
    """
    if x0 is None:
        raise TypeError("x0 is required")
    minimizer = _build_minimizer(objective, gradient, params, overrides, stepper)
    return minimizer.run(x0, callback=callback)


def minimize(objective, gradient=None, x0=None, **kwargs) -> Tuple[np.ndarray, float]:
    """Minimize ``objective`` from ``x0`` and return ``(x, value)``.

    With default parameters this runs until the gradient norm drops to
    ``1e-12`` with no iteration cap.
    """
    result = minimize_result(objective, gradient, x0, **kwargs)
    return result.x, result.value
