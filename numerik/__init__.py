"""Introductory numerical methods built on NumPy: LR decomposition, finite-difference Jacobians, Newton iteration, Euler's method and least-squares fitting."""

__version__ = "0.1.0"

__all__ = ["basics", "matrix_io", "jacobian", "lu", "secant", "euler", "regression"]