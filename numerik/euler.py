"""Explicit Euler method for y' = t + y, y(0) = 1, compared with the exact solution."""

from __future__ import annotations

import argparse
import math
import shutil
import subprocess
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path


def exact_solution(t: float) -> float:
    """Exact solution ``2 e^t - t - 1``."""
    return 2 * math.exp(t) - t - 1


def relative_error(
    y: float, t: float, exact: Callable[[float], float] = exact_solution
) -> float:
    """Relative deviation of ``y`` from ``exact(t)`` in percent."""
    reference = exact(t)
    return abs(y - reference) / abs(reference) * 100


def explicit_euler(h: float, t_end: float = 2.0) -> list[tuple[float, float, float, float]]:
    """Rows ``(t, y, exact, error %)`` from ``t = 0`` until ``t`` reaches ``t_end``.

    Each step advances ``t`` first and then uses the new ``t`` in ``y += h (t + y)``.
    """
    if h <= 0:
        raise ValueError(f"step size must be positive, got {h}")
    t, y = 0.0, 1.0
    rows = [(t, y, exact_solution(t), relative_error(y, t))]
    while t < t_end:
        t += h
        y += h * (t + y)
        rows.append((t, y, exact_solution(t), relative_error(y, t)))
    return rows


def write_table(path: str | Path, rows: Iterable[Sequence[float]]) -> None:
    """Write the rows tab-separated, one per line."""
    with open(path, "w", encoding="utf-8") as out:
        for row in rows:
            out.write("\t".join(f"{float(v):g}" for v in row) + "\n")


def _run_gnuplot(script: str) -> None:
    if shutil.which("gnuplot") is None:
        print(f"gnuplot not found; skipping {script}", file=sys.stderr)
        return
    subprocess.run(["gnuplot", script, "-"], check=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Compute the tables for h = 0.5 and h = 0.01 and plot them."""
    parser = argparse.ArgumentParser(prog="numerik-euler")
    parser.add_argument("--no-plot", action="store_true", help="do not start gnuplot")
    args = parser.parse_args(argv)

    write_table("h0.5.txt", explicit_euler(0.5))
    write_table("h0.01.txt", explicit_euler(0.01))
    if not args.no_plot:
        _run_gnuplot("Plot_A3.gpl")
    return 0