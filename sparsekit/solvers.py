"""Iterative solvers for sparse linear systems."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from sparsekit.csr import CSRMatrix
from sparsekit.errors import ConvergenceError, MatrixError


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((x * y for x, y in zip(a, b)), 0.0)


@dataclass
class CGSolver:
    """Conjugate Gradient solver for symmetric positive-definite systems."""

    max_iter: int = 1000
    tolerance: float = 1e-10

    def solve(self, a: CSRMatrix, b: Sequence[float]) -> list[float]:
        """Solve ``a @ x = b`` starting from the zero vector."""
        b = list(b)
        if a.rows != len(b):
            raise MatrixError("matrix and vector dimensions mismatch")

        x = [0.0] * len(b)
        r = [bi - axi for bi, axi in zip(b, a.matvec(x))]
        p = list(r)
        rs_old = _dot(r, r)
        if math.sqrt(rs_old) < self.tolerance:
            return x

        for _ in range(self.max_iter):
            ap = a.matvec(p)
            curvature = _dot(p, ap)
            if curvature == 0.0:
                # The search direction has broken down; no further progress is possible.
                break
            alpha = rs_old / curvature
            x = [xi + alpha * pi for xi, pi in zip(x, p)]
            r = [ri - alpha * api for ri, api in zip(r, ap)]
            rs_new = _dot(r, r)
            if math.sqrt(rs_new) < self.tolerance:
                return x
            beta = rs_new / rs_old
            p = [ri + beta * pi for ri, pi in zip(r, p)]
            rs_old = rs_new

        raise ConvergenceError("maximum iterations reached without convergence")