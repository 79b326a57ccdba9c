"""Compressed Sparse Row matrices and their arithmetic."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from sparsekit.errors import MatrixError

_ZERO_THRESHOLD = 1e-15


@dataclass
class CSRMatrix:
    """A sparse matrix stored in Compressed Sparse Row format."""

    values: list[float]
    row_ptr: list[int]
    col_indices: list[int]
    rows: int
    cols: int

    def __post_init__(self) -> None:
        self.values = list(self.values)
        self.row_ptr = list(self.row_ptr)
        self.col_indices = list(self.col_indices)
        if len(self.row_ptr) != self.rows + 1:
            raise MatrixError(
                f"invalid row pointer array length: expected {self.rows + 1}, "
                f"got {len(self.row_ptr)}"
            )
        if len(self.values) != len(self.col_indices):
            raise MatrixError("values and column indices must have same length")

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return len(self.values)

    def _row_span(self, i: int) -> range:
        return range(self.row_ptr[i], self.row_ptr[i + 1])

    def _row_entries(self, i: int) -> list[tuple[int, float]]:
        span = self._row_span(i)
        return list(
            zip(self.col_indices[span.start:span.stop], self.values[span.start:span.stop])
        )

    def _in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.rows and 0 <= j < self.cols

    def get(self, i: int, j: int) -> float:
        """Return the entry at (i, j); positions out of range read as zero."""
        if not self._in_bounds(i, j):
            return 0.0
        for col, value in self._row_entries(i):
            if col == j:
                return value
        return 0.0

    def set(self, i: int, j: int, value: float) -> None:
        """Overwrite an existing stored entry at (i, j)."""
        if not self._in_bounds(i, j):
            raise IndexError("index out of bounds")
        for k in self._row_span(i):
            if self.col_indices[k] == j:
                self.values[k] = value
                return
        raise MatrixError("cannot set new non-zero element in CSR format directly")

    def matvec(self, vec: Sequence[float]) -> list[float]:
        """Multiply the matrix by a dense vector."""
        if len(vec) != self.cols:
            raise MatrixError(
                f"vector length mismatch: expected {self.cols}, got {len(vec)}"
            )
        return [
            sum((value * vec[col] for col, value in self._row_entries(i)), 0.0)
            for i in range(self.rows)
        ]

    def add(self, other: CSRMatrix) -> CSRMatrix:
        """Return the element-wise sum of two matrices of equal shape."""
        if self.rows != other.rows or self.cols != other.cols:
            raise MatrixError("matrix dimensions mismatch")
        values: list[float] = []
        col_indices: list[int] = []
        row_ptr = [0]
        for i in range(self.rows):
            for col, value in _merge_rows(self._row_entries(i), other._row_entries(i)):
                col_indices.append(col)
                values.append(value)
            row_ptr.append(len(values))
        return CSRMatrix(values, row_ptr, col_indices, self.rows, self.cols)


def _merge_rows(
    left: list[tuple[int, float]], right: list[tuple[int, float]]
) -> Iterator[tuple[int, float]]:
    """Merge two column-sorted rows, summing entries that share a column."""
    p, q = 0, 0
    while p < len(left) or q < len(right):
        if p == len(left):
            yield right[q]
            q += 1
        elif q == len(right):
            yield left[p]
            p += 1
        elif left[p][0] < right[q][0]:
            yield left[p]
            p += 1
        elif left[p][0] > right[q][0]:
            yield right[q]
            q += 1
        else:
            yield left[p][0], left[p][1] + right[q][1]
            p += 1
            q += 1


def from_dense(dense: Sequence[Sequence[float]]) -> CSRMatrix:
    """Build a CSR matrix from a list of rows, dropping near-zero entries."""
    if len(dense) == 0:
        raise MatrixError("empty matrix")
    rows = len(dense)
    cols = len(dense[0])
    values: list[float] = []
    col_indices: list[int] = []
    row_ptr = [0]
    for row in dense:
        if len(row) < cols:
            raise MatrixError("rows of a dense matrix must have equal length")
        for j, value in enumerate(row[:cols]):
            if abs(value) > _ZERO_THRESHOLD:
                values.append(value)
                col_indices.append(j)
        row_ptr.append(len(values))
    return CSRMatrix(values, row_ptr, col_indices, rows, cols)