"""Coordinate-format sparse matrices and conversion to and from CSR."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import accumulate

from sparsekit.csr import CSRMatrix
from sparsekit.errors import MatrixError


@dataclass
class COOMatrix:
    """A sparse matrix stored as (row, column, value) triples."""

    values: list[float]
    row_indices: list[int]
    col_indices: list[int]
    rows: int
    cols: int

    def __post_init__(self) -> None:
        self.values = list(self.values)
        self.row_indices = list(self.row_indices)
        self.col_indices = list(self.col_indices)
        if not len(self.values) == len(self.row_indices) == len(self.col_indices):
            raise MatrixError(
                "values, row indices, and column indices must have same length"
            )
        for position, (row, col) in enumerate(zip(self.row_indices, self.col_indices)):
            if not 0 <= row < self.rows:
                raise MatrixError(f"row index out of bounds at position {position}")
            if not 0 <= col < self.cols:
                raise MatrixError(f"column index out of bounds at position {position}")

    def to_csr(self) -> CSRMatrix:
        """Convert to CSR, ordering entries by row and then by column."""
        order = sorted(
            range(len(self.values)),
            key=lambda k: (self.row_indices[k], self.col_indices[k]),
        )
        values = [self.values[k] for k in order]
        col_indices = [self.col_indices[k] for k in order]
        counts = Counter(self.row_indices)
        row_ptr = list(accumulate((counts[r] for r in range(self.rows)), initial=0))
        return CSRMatrix(values, row_ptr, col_indices, self.rows, self.cols)


def from_csr(csr: CSRMatrix) -> COOMatrix:
    """Convert a CSR matrix to coordinate format, copying its data."""
    row_indices = [
        row
        for row in range(csr.rows)
        for _ in range(csr.row_ptr[row], csr.row_ptr[row + 1])
    ]
    return COOMatrix(
        list(csr.values), row_indices, list(csr.col_indices), csr.rows, csr.cols
    )