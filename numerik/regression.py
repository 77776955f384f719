"""Least-squares fit of experimental data with polynomial models via normal equations."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np


@dataclass(eq=False)
class Experiment:
    """Measured fractions ``w_pa``, distances ``d`` and responses ``p``."""

    w_pa: np.ndarray
    d: np.ndarray
    p: np.ndarray

    @property
    def w_pe(self) -> np.ndarray:
        """Complementary fraction ``1 - w_pa``."""
        return 1.0 - self.w_pa


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


def read_experiment(path: str | Path) -> Experiment:
    """Read ``rows cols`` followed by ``rows`` triples ``w_pa d p``."""
    tokens = _tokens(path)
    rows = _take(tokens, int, "row count")
    _take(tokens, int, "column count")
    if rows < 0:
        raise ValueError(f"invalid row count {rows}")
    triples = [[_take(tokens, float, "measurement") for _ in range(3)] for _ in range(rows)]
    data = np.array(triples, dtype=float).reshape(rows, 3)
    return Experiment(w_pa=data[:, 0].copy(), d=data[:, 1].copy(), p=data[:, 2].copy())


def quadratic_design_matrix(w_pe, d) -> np.ndarray:
    """Columns ``1, w, d, w^2, w d, d^2``."""
    w = np.asarray(w_pe, dtype=float)
    d = np.asarray(d, dtype=float)
    return np.column_stack([np.ones_like(w), w, d, w**2, w * d, d**2])


def quartic_design_matrix(w_pe, d) -> np.ndarray:
    """Columns ``1, w, d, w^2, w d, d^2, w^3, w^2 d^2, d^3, w^4, w^3 d^3, d^4``."""
    w = np.asarray(w_pe, dtype=float)
    d = np.asarray(d, dtype=float)
    return np.column_stack(
        [
            np.ones_like(w),
            w,
            d,
            w**2,
            w * d,
            d**2,
            w**3,
            w**2 * d**2,
            d**3,
            w**4,
            w**3 * d**3,
            d**4,
        ]
    )


def normal_equations(m, p) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(M^T M, M^T p)``."""
    m = np.asarray(m, dtype=float)
    p = np.asarray(p, dtype=float)
    if m.shape[0] != p.shape[0]:
        raise ValueError(f"{m.shape[0]} rows but {p.shape[0]} measurements")
    return m.T @ m, m.T @ p


def condition_from_eigenvalues(matrix) -> float:
    """Ratio of the largest to the smallest real part of the eigenvalues."""
    eigenvalues = np.linalg.eigvals(np.asarray(matrix, dtype=float)).real
    return float(eigenvalues.max()) / float(eigenvalues.min())


def _format_matrix(matrix) -> str:
    array = np.asarray(matrix, dtype=float)
    if array.ndim == 1:
        array = array.reshape(-1, 1)
    cells = [[f"{float(v):g}" for v in row] for row in array]
    width = max((len(c) for row in cells for c in row), default=0)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)


def save_matrix_text(path: str | Path, matrix) -> None:
    """Write the matrix with aligned columns and no trailing newline."""
    Path(path).write_text(_format_matrix(matrix), encoding="utf-8")


def _show(label: str, value) -> None:
    print(label)
    print(_format_matrix(value))


def _run_gnuplot(script: str) -> None:
    if shutil.which("gnuplot") is None:
        print(f"gnuplot not found; skipping {script}", file=sys.stderr)
        return
    subprocess.run(["gnuplot", script, "-"], check=False)


def _fit(design: np.ndarray, experiment: Experiment, label: str = "") -> np.ndarray:
    _show(f"M{label}= ", design)
    system, rhs = normal_equations(design, experiment.p)
    _show(f"M_LGS{label} ist: ", system)
    return system, rhs


def main(argv: Sequence[str] | None = None) -> int:
    """Fit the experiment data: part a (quadratic), b (quartic) or c (both, with conditions)."""
    parser = argparse.ArgumentParser(prog="numerik-regression")
    parser.add_argument("part", nargs="?", choices=("a", "b", "c"), default="c")
    parser.add_argument("--input", default="Experiment.txt")
    parser.add_argument("--no-plot", action="store_true", help="do not start gnuplot")
    args = parser.parse_args(argv)

    try:
        experiment = read_experiment(args.input)
    except OSError:
        print("Datei kann nicht geöffnet werden!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _show("W_PA ist: ", experiment.w_pa)
    _show("d ist: ", experiment.d)
    _show("P ist: ", experiment.p)
    _show("W_PE ist: ", experiment.w_pe)

    try:
        if args.part in ("a", "c"):
            system_a, rhs_a = _fit(
                quadratic_design_matrix(experiment.w_pe, experiment.d), experiment
            )
            _show("b ist: ", rhs_a)
            _show("x ist: ", np.linalg.solve(system_a, rhs_a))
            save_matrix_text("MAT_a.txt", system_a)
        if args.part == "b":
            system_b, rhs_b = _fit(
                quartic_design_matrix(experiment.w_pe, experiment.d), experiment
            )
            _show("b ist: ", rhs_b)
            _show("x ist: ", np.linalg.solve(system_b, rhs_b))
        if args.part == "c":
            system_b, _ = _fit(
                quartic_design_matrix(experiment.w_pe, experiment.d), experiment, "b"
            )
        if args.part in ("b", "c"):
            save_matrix_text("MAT_b.txt", system_b)
            print("Die Matrix M_LGS wurde in MAT_b.txt gespeichert.")
    except np.linalg.LinAlgError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.part == "c":
        _show(" EW1", np.linalg.eigvals(system_a).real)
        _show(" EW2", np.linalg.eigvals(system_b).real)
        print("k1 ist: ")
        print(f"{condition_from_eigenvalues(system_a):g}")
        print("k2 ist: ")
        print(f"{condition_from_eigenvalues(system_b):g}")
    elif not args.no_plot:
        _run_gnuplot("Plot.gpl" if args.part == "a" else "zweitePlot.gpl")
    return 0