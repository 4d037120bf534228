# runtime/steppers/base.py
"""Abstract base class for optimization steppers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from core.objective import BaseObjective


class BaseStepper(ABC):
    """Base interface for classes performing optimization steps."""

    def __init__(
        self,
        c1: float = 1e-4,
        c2: float = 0.9,
        beta: float = 0.5,
        alpha_min: float = 1e-9,
    ) -> None:
        self.c1 = c1
        self.c2 = c2
        self.beta = beta
        self.alpha_min = alpha_min

    @abstractmethod
    def reset(self, n: int) -> None:
        """Drop any per-run state and prepare for a problem of dimension ``n``."""

    @abstractmethod
    def step(
        self,
        objective: BaseObjective,
        x: np.ndarray,
        grad: np.ndarray,
    ) -> tuple[np.ndarray, np.ndarray, float]:
        """Advance from ``x`` using the gradient ``grad`` at that point.

        Parameters
        ----------
        objective : BaseObjective
            The function being minimized.
        x : np.ndarray
            Current point.
        grad : np.ndarray
            Gradient of ``objective`` at ``x``.

        Returns
        -------
        tuple[np.ndarray, np.ndarray, float]
            The new point, the gradient there and the step length taken.
        """

    def line_search_kwargs(self) -> dict:
        return {
            "c1": self.c1,
            "c2": self.c2,
            "beta": self.beta,
            "alpha_min": self.alpha_min,
        }

    def __repr__(self) -> str:  # pragma: no cover - simple utility
        params = ", ".join(
            f"{k}={v!r}" for k, v in vars(self).items() if not k.startswith("_")
        )
        return f"{self.__class__.__name__}({params})"
