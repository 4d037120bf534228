import os
import sys

import numpy as np
from scipy.optimize import rosen, rosen_der

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from runtime.minimizer import minimize_result


def test_bfgs_solves_rosenbrock_from_classic_start():
    result = minimize_result(
        rosen, rosen_der, np.array([-1.2, 1.0]), gtol=1e-6, max_iter=2000
    )

    assert result.converged
    np.testing.assert_allclose(result.x, [1.0, 1.0], atol=1e-4)
    assert result.value < 1e-8
    assert result.skipped_updates == 0
