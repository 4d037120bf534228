# core/problems.py
"""Small benchmark objectives with analytic gradients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

from core.exceptions import UnknownProblemError
from core.objective import CallableObjective


@dataclass(frozen=True)
class Problem:
    name: str
    objective: Callable[[np.ndarray], float]
    gradient: Callable[[np.ndarray], np.ndarray]
    description: str = ""

    def as_objective(self) -> CallableObjective:
        return CallableObjective(self.objective, self.gradient)


def sq_sum(x: np.ndarray) -> float:
    s = float(np.sum(x))
    return s * s


def sq_sum_grad(x: np.ndarray) -> np.ndarray:
    return np.full(len(x), 2.0 * float(np.sum(x)))


def sphere(x: np.ndarray) -> float:
    return float(np.dot(x, x))


def sphere_grad(x: np.ndarray) -> np.ndarray:
    return 2.0 * np.asarray(x, dtype=float)


def shifted_quadratic(x: np.ndarray, center: float = 3.0) -> float:
    d = np.asarray(x, dtype=float) - center
    return float(np.dot(d, d))


def shifted_quadratic_grad(x: np.ndarray, center: float = 3.0) -> np.ndarray:
    return 2.0 * (np.asarray(x, dtype=float) - center)


def quartic(x: np.ndarray) -> float:
    r2 = float(np.dot(x, x))
    return r2 * r2


def quartic_grad(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return 4.0 * float(np.dot(x, x)) * x


def rosenbrock(x: np.ndarray) -> float:
    x = np.asarray(x, dtype=float)
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def rosenbrock_grad(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    g = np.zeros_like(x)
    if x.size < 2:
        return g
    xm = x[:-1]
    diff = x[1:] - xm**2
    g[:-1] += -400.0 * xm * diff - 2.0 * (1.0 - xm)
    g[1:] += 200.0 * diff
    return g


PROBLEMS: Dict[str, Problem] = {
    p.name: p
    for p in (
        Problem("sq_sum", sq_sum, sq_sum_grad, "(sum x)^2; minimal on the plane sum x = 0"),
        Problem("sphere", sphere, sphere_grad, "sum x^2; minimum at the origin"),
        Problem(
            "shifted_quadratic",
            shifted_quadratic,
            shifted_quadratic_grad,
            "sum (x-3)^2; minimum at x = 3",
        ),
        Problem("quartic", quartic, quartic_grad, "|x|^4; degenerate minimum at 0"),
        Problem("rosenbrock", rosenbrock, rosenbrock_grad, "minimum at x = 1"),
    )
}


def get_problem(name: str) -> Problem:
    try:
        return PROBLEMS[name]
    except KeyError:
        raise UnknownProblemError(name, tuple(sorted(PROBLEMS))) from None


__all__ = ["PROBLEMS", "Problem", "get_problem"]
