import logging
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger("bfgs_solver")


def plot_convergence(
    history: Dict[str, List[float]],
    ax=None,
    title: Optional[str] = None,
    show: bool = True,
):
    """
    Plot the gradient norm and step length of a run per iteration.

    Parameters
    ----------
    history : dict
        ``MinimizeResult.history``; uses the ``"grad_norm"`` list (one entry
        per iterate, starting with ``x0``) and the ``"alpha"`` list (one entry
        per step).
    ax : matplotlib.axes.Axes, optional
        Axis for the gradient norm. The step length goes on a twin axis. If
        omitted, a new figure and axis are created.
    title : str, optional
        Figure title.
    show : bool, optional
        If ``True`` (default), call :func:`matplotlib.pyplot.show` after
        drawing. Set to ``False`` when using non‑interactive backends or when
        the caller is responsible for saving the figure.

    Returns
    -------
    matplotlib.axes.Axes
        The gradient-norm axis.
    """
    grad_norm = np.asarray(history.get("grad_norm", []), dtype=float)
    alpha = np.asarray(history.get("alpha", []), dtype=float)

    if ax is None:
        _, ax = plt.subplots(figsize=(7, 4))

    if grad_norm.size == 0:
        logger.warning("Empty history; nothing to plot.")
        return ax

    # Exact zeros cannot be drawn on a log axis.
    finite = np.isfinite(grad_norm) & (grad_norm > 0)
    iters = np.arange(grad_norm.size)
    ax.semilogy(iters[finite], grad_norm[finite], "o-", color="tab:blue", label="|g|")
    ax.set_xlabel("iteration")
    ax.set_ylabel("gradient norm", color="tab:blue")

    if alpha.size:
        ax2 = ax.twinx()
        steps = np.arange(1, alpha.size + 1)
        ok = np.isfinite(alpha) & (alpha > 0)
        ax2.semilogy(steps[ok], alpha[ok], "s--", color="tab:orange", label="alpha")
        ax2.set_ylabel("step length", color="tab:orange")

    if title:
        ax.set_title(title)
    ax.grid(True, which="both", alpha=0.3)

    if show:
        plt.show()
    return ax
