"""Small command that solves a 2x2 system with the Conjugate Gradient method."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sparsekit.coo import COOMatrix
from sparsekit.errors import MatrixError
from sparsekit.solvers import CGSolver


def _format_float(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def main(argv: Sequence[str] | None = None) -> int:
    """Build a sample matrix, solve it, and print the solution."""
    parser = argparse.ArgumentParser(
        description="Solve a sample sparse system with Conjugate Gradient."
    )
    parser.parse_args(argv)

    coo = COOMatrix([4.0, 1.0, 1.0, 4.0], [0, 0, 1, 1], [0, 1, 0, 1], 2, 2)
    a = coo.to_csr()
    b = [1.0, 1.0]
    solver = CGSolver(1000, 1e-10)

    try:
        x = solver.solve(a, b)
    except MatrixError as exc:
        print(f"Error solving system: {exc}")
        return 1

    print("Solution:", "[" + " ".join(_format_float(v) for v in x) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())