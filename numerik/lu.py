"""LR (Doolittle) decomposition of a square matrix without pivoting."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import numpy as np

EXAMPLE_MATRIX = np.array(
    [
        [4.0, 3.0, 1.0],
        [11.0, 9.0, 10.0],
        [6.0, 9.0, 9.0],
    ]
)


def lr_decomposition(a) -> tuple[np.ndarray, np.ndarray]:
    """Split ``a`` into a unit lower triangular ``L`` and an upper triangular ``R``.

    Raises ``ValueError`` for a non-square matrix or when a pivot vanishes.
    """
    a = np.array(a, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"LR decomposition needs a square matrix, got shape {a.shape}")
    n = a.shape[0]
    lower = np.zeros((n, n))
    upper = np.zeros((n, n))
    for i in range(n):
        upper[i, i:] = a[i, i:] - lower[i, :i] @ upper[:i, i:]
        lower[i, i] = 1.0
        if i + 1 < n:
            if upper[i, i] == 0:
                raise ValueError(f"zero pivot in row {i}; decomposition without pivoting fails")
            lower[i + 1 :, i] = (a[i + 1 :, i] - lower[i + 1 :, :i] @ upper[:i, i]) / upper[i, i]
    return lower, upper


def _print_matrix(title: str, matrix: np.ndarray) -> None:
    print(title)
    for row in matrix:
        print("".join(f"{float(v):g} " for v in row))


def main(argv: Sequence[str] | None = None) -> int:
    """Decompose the example matrix and print L, R and the check product L R."""
    argparse.ArgumentParser(prog="numerik-lu").parse_args(argv)
    lower, upper = lr_decomposition(EXAMPLE_MATRIX)
    _print_matrix("Matrix L:", lower)
    _print_matrix("Matrix R:", upper)
    _print_matrix("Matrix A_Probe:", lower @ upper)
    return 0