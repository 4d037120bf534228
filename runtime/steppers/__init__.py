"""Utilities and steppers for runtime optimization."""

from .bfgs import BFGS, bfgs_inverse_update
from .gradient_descent import GradientDescent
from .line_search import backtracking_line_search, wolfe_conditions

__all__ = [
    "BFGS",
    "GradientDescent",
    "backtracking_line_search",
    "bfgs_inverse_update",
    "wolfe_conditions",
]
