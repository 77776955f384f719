"""Finite-difference Jacobians compared with an analytic Jacobian."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence

import numpy as np

_INITIAL_MINIMUM = float(2**31 - 1)


def example_function(x) -> np.ndarray:
    """The vector function whose Jacobian is studied."""
    x = np.asarray(x, dtype=float)
    return np.array(
        [
            x[0] + x[1] ** 2 + 3 * x[2],
            x[0] ** 4 + 5 * x[1] + 3 * x[2] ** 2,
            7 * x[0] + 4 * x[1] ** 2 + 9 * x[2],
        ]
    )


def analytic_jacobian(x) -> np.ndarray:
    """Closed-form Jacobian used as the reference."""
    x = np.asarray(x, dtype=float)
    return np.array(
        [
            [1.0, 2 * x[1], 3.0],
            [4 * x[0] ** 3, 5.0, 6 * x[2]],
            [7.0, 8 * x[1], 9.0],
        ]
    )


def _steps(x: np.ndarray, h: float) -> np.ndarray:
    return np.eye(x.size) * h


def jacobian_forward(func: Callable, x, h: float) -> np.ndarray:
    """Jacobian by forward difference quotients with step ``h``."""
    x = np.asarray(x, dtype=float)
    f0 = np.asarray(func(x), dtype=float)
    columns = [(np.asarray(func(x + step), dtype=float) - f0) / h for step in _steps(x, h)]
    return np.column_stack(columns)


def jacobian_central(func: Callable, x, h: float) -> np.ndarray:
    """Jacobian by central difference quotients with step ``h``."""
    x = np.asarray(x, dtype=float)
    columns = [
        (np.asarray(func(x + step), dtype=float) - np.asarray(func(x - step), dtype=float))
        / (2 * h)
        for step in _steps(x, h)
    ]
    return np.column_stack(columns)


def absolute_error(numeric, analytic) -> float:
    """Frobenius norm of the difference of two matrices."""
    return float(np.linalg.norm(np.asarray(numeric) - np.asarray(analytic)))


def relative_error(numeric, analytic) -> float:
    """Absolute error divided by the Frobenius norm of ``analytic``."""
    return absolute_error(numeric, analytic) / float(np.linalg.norm(np.asarray(analytic)))


def optimal_step_index(errors: Iterable[float]) -> int:
    """Index of the first smallest error; 0 when none is below 2**31 - 1."""
    minimum = _INITIAL_MINIMUM
    best = 0
    for index, value in enumerate(errors):
        if minimum > value:
            minimum = value
            best = index
    return best


def error_table(
    x, exponents: Iterable[int] = range(1, 13)
) -> list[tuple[float, float, float, float, float]]:
    """Rows ``(h, abs FD, abs CD, rel FD, rel CD)`` for ``h = 10**-k``."""
    reference = analytic_jacobian(x)
    rows = []
    for k in exponents:
        h = 10.0 ** -k
        forward = jacobian_forward(example_function, x, h)
        central = jacobian_central(example_function, x, h)
        rows.append(
            (
                h,
                absolute_error(reference, forward),
                absolute_error(reference, central),
                relative_error(reference, forward),
                relative_error(reference, central),
            )
        )
    return rows


def _format_matrix(matrix: np.ndarray) -> str:
    cells = [[f"{float(v):g}" for v in row] for row in matrix]
    width = max((len(c) for row in cells for c in row), default=0)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def _format_row(row: tuple[float, float, float, float, float]) -> str:
    h, *errors = row
    return f" {h:.13f}" + "".join(f" {e:.7f}" for e in errors)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Jacobians at the reference point and the error table."""
    argparse.ArgumentParser(prog="numerik-jacobian").parse_args(argv)
    x = np.array([2.1, 0.5, 3.0])
    print("analytische Jakobi Matrix:")
    print(_format_matrix(analytic_jacobian(x)))
    print("Jakobi-Matrix durch Vorwärtsdifferenzenquotient für h=0.1:")
    print(_format_matrix(jacobian_forward(example_function, x, 0.1)))
    print("Jakobi-Matrix durch Zentraldifferenzquotient für h=0.1:")
    print(_format_matrix(jacobian_central(example_function, x, 0.1)))

    rows = error_table(x)
    print(" h Wert         | abs err FD | abs err CD | rel err FD | rel err CD |")
    for row in rows:
        print(_format_row(row))
    best = optimal_step_index(row[1] for row in rows)
    print()
    print("Für h optimal" + _format_row(rows[best]))
    return 0