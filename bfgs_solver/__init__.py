"""Dense BFGS minimization with a Wolfe backtracking line search.

The solver core lives in the top-level packages `core/` and `runtime/`. This
package re-exports the public entry points.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from core.exceptions import (
    BFGSSolverError,
    DimensionMismatchError,
    InvalidParameterError,
    UnknownProblemError,
)
from core.objective import BaseObjective, CallableObjective
from core.parameters.optimizer_parameters import OptimizerParameters
from runtime.minimizer import MinimizeResult, Minimizer, minimize, minimize_result
from runtime.steppers import (
    BFGS,
    GradientDescent,
    backtracking_line_search,
    bfgs_inverse_update,
)

try:
    __version__ = version("bfgs-solver")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "BFGS",
    "BFGSSolverError",
    "BaseObjective",
    "CallableObjective",
    "DimensionMismatchError",
    "GradientDescent",
    "InvalidParameterError",
    "MinimizeResult",
    "Minimizer",
    "OptimizerParameters",
    "UnknownProblemError",
    "backtracking_line_search",
    "bfgs_inverse_update",
    "minimize",
    "minimize_result",
]
