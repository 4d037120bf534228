# optimizer_parameters.py

from core.exceptions import InvalidParameterError

CURVATURE_GUARD_MODES = ("none", "skip", "reset")


class OptimizerParameters:
    def __init__(self, initial_params=None):
        """
        all parameters are defined with underscore, _, instead of spaces
        """
        self._params = {
            # Armijo (sufficient decrease) coefficient.
            "c1": 1e-4,
            # Curvature coefficient; must satisfy 0 < c1 < c2 < 1.
            "c2": 0.9,
            # Backtracking contraction factor applied after each failed trial.
            "beta": 0.5,
            # Trial steps below this are returned without checking the
            # Wolfe conditions.
            "alpha_min": 1e-9,
            # Converged when the Euclidean norm of the gradient is <= gtol.
            "gtol": 1e-12,
            # Iteration cap. None runs until converged (possibly forever).
            "max_iter": None,
            # What to do when |s^T y| <= curvature_eps:
            #   "none"  – apply the update anyway; NaN/Inf may propagate.
            #   "skip"  – keep the previous inverse Hessian.
            #   "reset" – restart from the identity.
            "curvature_guard": "none",
            "curvature_eps": 1e-12,
        }
        if initial_params:
            self.update(initial_params)

    def __getattr__(self, name):
        """Attribute access for known parameter keys."""
        params = self.__dict__.get("_params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(
            f"{type(self).__name__!s} object has no attribute {name!r}"
        )

    def __setattr__(self, name, value):
        """Attribute assignment for known parameter keys."""
        if name == "_params":
            object.__setattr__(self, name, value)
            return
        params = self.__dict__.get("_params")
        if params is not None and name in params:
            params[name] = value
            return
        object.__setattr__(self, name, value)

    def get(self, key, default=None):
        """Retrieve a parameter value, or return a default if not found."""
        return self._params.get(key, default)

    def set(self, key, value):
        """Set or update a known parameter."""
        if key not in self._params:
            raise InvalidParameterError(key, value, f"Unknown parameter '{key}'")
        self._params[key] = value

    def update(self, params):
        """Update multiple parameters at once."""
        for key, value in dict(params).items():
            self.set(key, value)

    def validate(self):
        """Check ranges and return ``self`` so calls can be chained."""
        p = self._params
        for key in ("c1", "c2", "beta", "alpha_min", "gtol", "curvature_eps"):
            try:
                p[key] = float(p[key])
            except (TypeError, ValueError):
                raise InvalidParameterError(key, p[key]) from None

        if not 0.0 < p["c1"] < p["c2"] < 1.0:
            raise InvalidParameterError(
                "c1",
                p["c1"],
                f"Wolfe coefficients must satisfy 0 < c1 < c2 < 1; "
                f"got c1={p['c1']}, c2={p['c2']}",
            )
        if not 0.0 < p["beta"] < 1.0:
            raise InvalidParameterError("beta", p["beta"])
        for key in ("alpha_min", "gtol", "curvature_eps"):
            if p[key] < 0.0:
                raise InvalidParameterError(key, p[key])

        if p["max_iter"] is not None:
            try:
                max_iter = int(p["max_iter"])
            except (TypeError, ValueError):
                raise InvalidParameterError("max_iter", p["max_iter"]) from None
            if isinstance(p["max_iter"], bool) or max_iter != p["max_iter"]:
                raise InvalidParameterError("max_iter", p["max_iter"])
            if max_iter < 0:
                raise InvalidParameterError("max_iter", max_iter)
            p["max_iter"] = max_iter

        if p["curvature_guard"] not in CURVATURE_GUARD_MODES:
            raise InvalidParameterError(
                "curvature_guard",
                p["curvature_guard"],
                f"curvature_guard must be one of {CURVATURE_GUARD_MODES}; "
                f"got {p['curvature_guard']!r}",
            )
        return self

    def __contains__(self, key):
        """Check if a parameter exists."""
        return key in self._params

    def __repr__(self):
        """String representation for debugging."""
        return f"OptimizerParameters({self._params})"

    def to_dict(self):
        """Convert the parameters to a dictionary for serialization."""
        return dict(self._params)
