"""Custom exception types for the BFGS solver."""

from __future__ import annotations


class BFGSSolverError(Exception):
    """Base class for domain-specific errors."""


class DimensionMismatchError(BFGSSolverError):
    """Raised when a vector does not match the dimension of the run."""

    def __init__(
        self, expected: int, got: int, what: str = "vector", message: str | None = None
    ) -> None:
        if message is None:
            message = (
                f"Dimension mismatch for {what}: expected length {expected}, got {got}."
            )
        super().__init__(message)
        self.expected = expected
        self.got = got
        self.what = what


class InvalidParameterError(BFGSSolverError):
    """Raised when an optimizer parameter is unknown or out of range."""

    def __init__(self, name: str, value=None, message: str | None = None) -> None:
        if message is None:
            message = f"Invalid value for parameter '{name}': {value!r}"
        super().__init__(message)
        self.name = name
        self.value = value


class UnknownProblemError(BFGSSolverError):
    """Raised when a benchmark problem name is not registered."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        message = f"Unknown problem '{name}'."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)
        self.name = name


__all__ = [
    "BFGSSolverError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "UnknownProblemError",
]
