import argparse
import logging
import sys

import numpy as np

from core.exceptions import BFGSSolverError
from core.parameters.loader import load_data, parse_problem
from core.parameters.optimizer_parameters import (
    CURVATURE_GUARD_MODES,
    OptimizerParameters,
)
from core.problems import PROBLEMS, get_problem
from runtime.logging_config import setup_logging
from runtime.minimizer import Minimizer
from runtime.steppers.bfgs import BFGS
from runtime.steppers.gradient_descent import GradientDescent

logger = logging.getLogger("bfgs_solver")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BFGS minimization driver")
    parser.add_argument(
        "-p",
        "--problem",
        choices=sorted(PROBLEMS),
        default=None,
        help="Benchmark objective to minimize (default: sq_sum).",
    )
    parser.add_argument(
        "-n", "--dim", type=int, default=5, help="Problem dimension (default: 5)."
    )
    parser.add_argument(
        "--x0",
        nargs="+",
        type=float,
        default=None,
        metavar="X",
        help="Start point coordinates, e.g. --x0 -1.2 1; defaults to 0,1,...,n-1.",
    )
    parser.add_argument(
        "-i", "--input", help="Optional YAML/JSON problem file (problem, x0, parameters)."
    )
    parser.add_argument(
        "--stepper",
        choices=["bfgs", "gd"],
        default="bfgs",
        help="Step rule: quasi-Newton BFGS or plain gradient descent.",
    )
    parser.add_argument("--gtol", type=float, default=None, help="Gradient norm tolerance.")
    parser.add_argument(
        "--max-iter",
        type=int,
        default=None,
        help="Iteration cap (default: none, run until converged).",
    )
    parser.add_argument(
        "--curvature-guard",
        choices=CURVATURE_GUARD_MODES,
        default=None,
        help="Handling of degenerate curvature in the BFGS update.",
    )
    parser.add_argument(
        "--plot", action="store_true", help="Show a convergence plot after the run."
    )
    parser.add_argument(
        "--plot-save",
        default=None,
        help="Save the convergence plot to PATH instead of only showing it.",
    )
    parser.add_argument("--log", default=None, help="Optional log file")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress console output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable verbose debug logging"
    )
    return parser


def build_stepper(name: str, params: OptimizerParameters):
    if name == "gd":
        return GradientDescent(
            c1=params.c1, c2=params.c2, beta=params.beta, alpha_min=params.alpha_min
        )
    return BFGS(
        c1=params.c1,
        c2=params.c2,
        beta=params.beta,
        alpha_min=params.alpha_min,
        curvature_guard=params.curvature_guard,
        curvature_eps=params.curvature_eps,
    )


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    global logger
    logger = setup_logging(args.log, quiet=args.quiet, debug=args.debug)

    problem_name, x0, params = None, None, OptimizerParameters()
    if args.input:
        try:
            problem_name, x0, params = parse_problem(load_data(args.input))
        except (OSError, ValueError, BFGSSolverError) as exc:
            print(f"Could not load '{args.input}': {exc}", file=sys.stderr)
            return 1

    # Command-line values win over the input file.
    problem_name = args.problem or problem_name or "sq_sum"
    if args.x0:
        x0 = np.asarray(args.x0, dtype=float)
    if x0 is None:
        if args.dim < 1:
            print("--dim must be at least 1", file=sys.stderr)
            return 1
        x0 = np.arange(args.dim, dtype=float)

    if args.gtol is not None:
        params.gtol = args.gtol
    if args.max_iter is not None:
        params.max_iter = args.max_iter
    if args.curvature_guard is not None:
        params.curvature_guard = args.curvature_guard
    try:
        params.validate()
        problem = get_problem(problem_name)
    except BFGSSolverError as exc:
        print(exc, file=sys.stderr)
        return 1

    logger.debug("Minimizing %s from x0=%s with %s", problem.name, x0, params)

    minimizer = Minimizer(
        problem.as_objective(),
        params,
        stepper=build_stepper(args.stepper, params),
        quiet=args.quiet,
    )
    result = minimizer.run(x0)

    if not args.quiet:
        print(f"x = {result.x.tolist()}")
        print(f"val = {result.value!r}")
    logger.info(
        "%s after %d iterations (%d f-evals, %d g-evals); value=%.6e",
        result.status,
        result.iterations,
        result.n_fev,
        result.n_gev,
        result.value,
    )

    if args.plot or args.plot_save:
        import matplotlib.pyplot as plt

        from visualization.plotting import plot_convergence

        plot_convergence(
            result.history,
            title=f"{problem.name} ({args.stepper}, n={len(x0)})",
            show=args.plot_save is None,
        )
        if args.plot_save:
            fig = plt.gcf()
            fig.savefig(args.plot_save, bbox_inches="tight")
            logger.info("Saved convergence plot to %s", args.plot_save)

    return 0 if result.converged else 2


if __name__ == "__main__":
    sys.exit(main())
