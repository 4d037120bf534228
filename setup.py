from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="bfgs-solver",
    version="0.1.0",
    description="Dense BFGS minimization with a Wolfe backtracking line search.",
    python_requires=">=3.10",
    # The solver core lives in top-level packages next to `bfgs_solver/`.
    packages=find_packages(
        include=["bfgs_solver*", "core*", "runtime*", "visualization*"]
    ),
    py_modules=["main"],
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest", "scipy"],
    },
    entry_points={"console_scripts": ["bfgs-solver=main:main"]},
)
