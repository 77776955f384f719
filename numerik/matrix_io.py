"""Reading and writing matrices and vectors as whitespace-separated text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from numerik.basics import matrix_vector


def _fmt(value: float) -> str:
    return f"{float(value):g}"


def _tokens(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield from line.split()


def _take(tokens: Iterator[str], convert, what: str):
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"unexpected end of data while reading {what}") from None
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def _dimensions(tokens: Iterator[str]) -> tuple[int, int]:
    rows = _take(tokens, int, "row count")
    cols = _take(tokens, int, "column count")
    if rows < 0 or cols < 0:
        raise ValueError(f"invalid dimensions {rows}x{cols}")
    return rows, cols


def read_matrix_vector_file(path: str | Path) -> tuple[list[list[float]], list[float]]:
    """Read ``rows cols``, the matrix entries row by row, then a vector of ``cols`` entries."""
    tokens = _tokens(path)
    rows, cols = _dimensions(tokens)
    matrix = [[_take(tokens, float, "matrix entry") for _ in range(cols)] for _ in range(rows)]
    x = [_take(tokens, float, "vector entry") for _ in range(cols)]
    return matrix, x


def write_matrix_vector_report(
    path: str | Path,
    matrix: Sequence[Sequence[float]],
    x: Sequence[float],
    b: Sequence[float],
) -> None:
    """Write the matrix, the vector ``x`` and the product ``b`` to ``path``."""
    with open(path, "w", encoding="utf-8") as out:
        for row in matrix:
            out.write("".join(f"{_fmt(v)} " for v in row) + "\n")
        out.write("".join(f"{_fmt(v)} " for v in x) + "\n")
        out.write("".join(f"{_fmt(v)} " for v in b))


def read_matrix(path: str | Path) -> np.ndarray:
    """Read a matrix of integer entries preceded by its row and column count."""
    tokens = _tokens(path)
    rows, cols = _dimensions(tokens)
    values = [_take(tokens, int, "matrix entry") for _ in range(rows * cols)]
    return np.array(values, dtype=float).reshape(rows, cols)


def save_matrix(path: str | Path, matrix) -> None:
    """Write a matrix row by row, each entry followed by a space."""
    with open(path, "w", encoding="utf-8") as out:
        for row in np.atleast_2d(np.asarray(matrix, dtype=float)):
            out.write("".join(f"{_fmt(v)} " for v in row) + "\n")


def add_matrix_files(
    first: str | Path, second: str | Path, output: str | Path = "Output.dat"
) -> np.ndarray:
    """Add the matrices stored in two files, save the sum to ``output`` and return it."""
    m1 = read_matrix(first)
    m2 = read_matrix(second)
    if m1.shape != m2.shape:
        raise ValueError(f"cannot add matrices of shapes {m1.shape} and {m2.shape}")
    total = m1 + m2
    save_matrix(output, total)
    return total


def _format_matrix(matrix: np.ndarray) -> str:
    cells = [[_fmt(v) for v in row] for row in matrix]
    width = max((len(c) for row in cells for c in row), default=0)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: multiply a matrix with a vector, or add two matrix files."""
    parser = argparse.ArgumentParser(prog="numerik-matrix")
    commands = parser.add_subparsers(dest="command", required=True)
    product = commands.add_parser("product", help="multiply a matrix with a vector")
    product.add_argument("input")
    product.add_argument("output")
    add = commands.add_parser("add", help="add two matrix files")
    add.add_argument("first")
    add.add_argument("second")
    add.add_argument("-o", "--output", default="Output.dat")
    args = parser.parse_args(argv)

    try:
        if args.command == "product":
            matrix, x = read_matrix_vector_file(args.input)
            b = matrix_vector(matrix, x)
            write_matrix_vector_report(args.output, matrix, x, b)
        else:
            total = add_matrix_files(args.first, args.second, args.output)
            print(_format_matrix(total))
    except OSError as exc:
        print(f"Error opening file {exc.filename}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0