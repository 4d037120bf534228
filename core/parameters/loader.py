# loader.py
import json
import logging

import numpy as np
import yaml

from core.parameters.optimizer_parameters import OptimizerParameters

logger = logging.getLogger("bfgs_solver")


def load_data(filename):
    """Load a problem description from a JSON or YAML file.

    Expected format:
    {
        "problem": "rosenbrock",
        "x0": [-1.2, 1.0],
        "parameters": {"gtol": 1e-10, "max_iter": 500}
    }"""
    filename_str = str(filename)
    with open(filename_str, "r") as f:
        if filename_str.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif filename_str.endswith(".json"):
            data = json.load(f)
        else:
            logger.error(f"Unsupported file format for: {filename_str}")
            raise ValueError(f"Unsupported file format for: {filename_str}")

    return data or {}


def parse_problem(data: dict) -> tuple[str | None, np.ndarray | None, OptimizerParameters]:
    """Return ``(problem_name, x0, parameters)`` from loaded file data.

    Missing keys come back as ``None``; parameters fall back to defaults.
    """
    params = OptimizerParameters()

    input_params = data.get("parameters", {}) or {}
    for key, val in input_params.items():
        # YAML reads "1e-10" (no dot) as a string.
        if isinstance(val, str) and key != "curvature_guard":
            try:
                val = float(val)
            except ValueError:
                logger.warning("parameters.%s should be numeric; got %r", key, val)
        params.set(key, val)
    params.validate()

    x0 = data.get("x0")
    if x0 is not None:
        x0 = np.asarray(x0, dtype=float).reshape(-1)

    problem = data.get("problem")
    logger.debug("Parsed problem %r with x0=%s and %s", problem, x0, params)
    return problem, x0, params
