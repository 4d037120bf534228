import os
import sys

import matplotlib

# Use a non-interactive backend suitable for testing.
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.problems import shifted_quadratic, shifted_quadratic_grad
from runtime.minimizer import minimize_result
from visualization.plotting import plot_convergence


def test_plot_convergence_draws_gradient_norm_and_step_length():
    history = {"grad_norm": [10.0, 1.0, 0.1, 0.0], "alpha": [0.5, 1.0, 1.0]}

    ax = plot_convergence(history, title="demo", show=False)

    lines = ax.get_lines()
    assert len(lines) == 1
    # The exact zero is dropped from the log-scale plot.
    np.testing.assert_array_equal(lines[0].get_xdata(), [0, 1, 2])
    assert ax.get_yscale() == "log"
    assert ax.get_title() == "demo"
    assert len(ax.figure.axes) == 2
    plt.close(ax.figure)


def test_plot_convergence_uses_given_axis():
    fig, ax = plt.subplots()
    out = plot_convergence({"grad_norm": [1.0, 0.5], "alpha": [1.0]}, ax=ax, show=False)
    assert out is ax
    plt.close(fig)


def test_plot_convergence_empty_history_warns(caplog):
    with caplog.at_level("WARNING"):
        ax = plot_convergence({}, show=False)
    assert "Empty history" in caplog.text
    plt.close(ax.figure)


def test_plot_real_run_history():
    result = minimize_result(
        shifted_quadratic, shifted_quadratic_grad, np.array([0.0, 1.0]), max_iter=50
    )
    ax = plot_convergence(result.history, show=False)
    # Exact zeros are dropped, so the final point may be missing.
    assert 1 <= len(ax.get_lines()[0].get_xdata()) <= result.iterations + 1
    plt.close(ax.figure)
