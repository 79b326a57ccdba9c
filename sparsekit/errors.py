"""Exceptions raised by sparse matrix operations and solvers."""


class MatrixError(ValueError):
    """Raised when a matrix operation receives invalid input."""


class ConvergenceError(MatrixError):
    """Raised when an iterative solver fails to converge."""