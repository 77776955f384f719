"""Elementary numerical helpers: temperature conversion, quadratic roots, matrix-vector product."""

from __future__ import annotations

import math
from collections.abc import Sequence


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a temperature from degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32) * 5 / 9


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots of ``a*x**2 + b*x + c``.

    Two distinct roots come back as ``(x1, x2)`` with ``x1`` taken with the
    positive square root, a double root as a one-element tuple, and no real
    roots as an empty tuple.
    """
    delta = b * b - 4 * a * c
    if delta > 0:
        root = math.sqrt(delta)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    if delta == 0:
        return (-b / (2 * a),)
    return ()


def mnf(a: float, b: float, c: float) -> tuple[float, float] | None:
    """Midnight formula: both roots when the discriminant is positive, otherwise ``None``."""
    delta = b * b - 4 * a * c
    if delta > 0:
        root = math.sqrt(delta)
        return ((-b + root) / (2 * a), (-b - root) / (2 * a))
    return None


def matrix_vector(matrix: Sequence[Sequence[float]], x: Sequence[float]) -> list[float]:
    """Return the product ``matrix @ x`` as a list of floats."""
    result = []
    for row in matrix:
        if len(row) != len(x):
            raise ValueError(
                f"row of length {len(row)} cannot multiply a vector of length {len(x)}"
            )
        result.append(float(sum(value * component for value, component in zip(row, x))))
    return result