"""Newton iteration with a difference-quotient derivative (secant steps)."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path


def quadratic(x: float) -> float:
    """The example function ``x**2 - 2x - 3``."""
    return x * x - 2 * x - 3


def difference_quotient(x: float, x_prev: float, fx: float, f_prev: float) -> float:
    """Slope of the secant through ``(x_prev, f_prev)`` and ``(x, fx)``."""
    return (fx - f_prev) / (x - x_prev)


def newton_iteration(
    f: Callable[[float], float],
    x0: float,
    tol: float = 1e-10,
    kmax: int = 50,
    h: float = 1e-8,
) -> list[tuple[int, float]]:
    """Iterate until ``|f(x)| <= tol``, ``kmax`` steps or a repeated iterate.

    Returns the pairs ``(k, x_k)``. The first derivative estimate uses the
    point ``x0 - h``. Raises ``ZeroDivisionError`` when the slope vanishes.
    """
    x = x0
    x_prev = x - h
    f_prev = f(x_prev)
    residual = 1.0
    k = 0
    iterations: list[tuple[int, float]] = []
    while residual > tol and k < kmax:
        k += 1
        fx = f(x)
        slope = difference_quotient(x, x_prev, fx, f_prev)
        if slope == 0:
            raise ZeroDivisionError(f"difference quotient vanished at x={x!r}")
        residual = abs(fx)
        x_prev, f_prev = x, fx
        x = x - fx / slope
        iterations.append((k, x))
        if x == x_prev:
            break
    return iterations


def write_iterations(path: str | Path, iterations: Iterable[tuple[int, float]]) -> None:
    """Write one ``k x`` line per iteration."""
    with open(path, "w", encoding="utf-8") as out:
        for k, x in iterations:
            out.write(f"{k} {x:g}\n")


def _run_gnuplot(script: str) -> None:
    if shutil.which("gnuplot") is None:
        print(f"gnuplot not found; skipping {script}", file=sys.stderr)
        return
    subprocess.run(["gnuplot", script, "-"], check=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the iteration from -2 and from 42, save the iterates and plot them."""
    parser = argparse.ArgumentParser(prog="numerik-secant")
    parser.add_argument("--no-plot", action="store_true", help="do not start gnuplot")
    args = parser.parse_args(argv)

    for x0, filename in ((-2.0, "output_minus2.txt"), (42.0, "output_42.txt")):
        print(f"Newton-Verfahren für x0 = {x0:g} wird ausgeführt")
        iterations = newton_iteration(quadratic, x0)
        write_iterations(filename, iterations)
        xs = [x0] + [x for _, x in iterations]
        if len(xs) >= 2 and xs[-1] == xs[-2]:
            print(f"Nullstelle gefunden: {xs[-1]:g}")
        print(f"Anzahl der Iterationen: {len(iterations)}")

    if not args.no_plot:
        _run_gnuplot("Plot2_1.gpl")
    return 0