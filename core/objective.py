# core/objective.py
"""Objective/gradient capability consumed by the line search and steppers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import numpy as np

from core.exceptions import DimensionMismatchError

ObjectiveFn = Callable[[np.ndarray], float]
GradientFn = Callable[[np.ndarray], np.ndarray]


class BaseObjective(ABC):
    """A differentiable scalar function of a 1-D ``float64`` vector.

    Implementations must be pure: the same point always gives the same value
    and gradient. ``n_fev`` and ``n_gev`` count evaluations.
    """

    def __init__(self) -> None:
        self.n_fev = 0
        self.n_gev = 0

    @abstractmethod
    def _value(self, x: np.ndarray) -> float:
        """Return the objective value at ``x``."""

    @abstractmethod
    def _gradient(self, x: np.ndarray) -> np.ndarray:
        """Return the gradient at ``x``."""

    def value(self, x: np.ndarray) -> float:
        self.n_fev += 1
        return float(self._value(x))

    def gradient(self, x: np.ndarray) -> np.ndarray:
        self.n_gev += 1
        g = np.asarray(self._gradient(x), dtype=float).reshape(-1)
        if g.shape[0] != x.shape[0]:
            raise DimensionMismatchError(x.shape[0], g.shape[0], what="gradient")
        return g

    def reset_counters(self) -> None:
        self.n_fev = 0
        self.n_gev = 0

    def __repr__(self) -> str:  # pragma: no cover - simple utility
        return (
            f"{self.__class__.__name__}(n_fev={self.n_fev}, n_gev={self.n_gev})"
        )


class CallableObjective(BaseObjective):
    """Adapter for a plain ``(objective, gradient)`` pair of callables."""

    def __init__(self, objective: ObjectiveFn, gradient: GradientFn) -> None:
        super().__init__()
        self._objective = objective
        self._grad = gradient

    def _value(self, x: np.ndarray) -> float:
        return self._objective(x)

    def _gradient(self, x: np.ndarray) -> np.ndarray:
        return self._grad(x)


def as_objective(
    objective: BaseObjective | ObjectiveFn, gradient: GradientFn | None = None
) -> BaseObjective:
    """Return ``objective`` as a :class:`BaseObjective`.

    Accepts either an existing objective instance (``gradient`` must be
    ``None``) or two callables.
    """
    if isinstance(objective, BaseObjective):
        if gradient is not None:
            raise TypeError("gradient must be None when passing a BaseObjective")
        return objective
    if gradient is None:
        raise TypeError("a gradient callable is required")
    return CallableObjective(objective, gradient)


__all__ = ["BaseObjective", "CallableObjective", "as_objective"]
