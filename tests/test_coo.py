import pytest

from sparsekit.coo import COOMatrix, from_csr
from sparsekit.csr import CSRMatrix
from sparsekit.errors import MatrixError


def test_new_coo_matrix_valid():
    m = COOMatrix([1.0, 2.0, 3.0], [0, 0, 1], [0, 1, 1], 2, 2)
    assert m.values == [1.0, 2.0, 3.0]
    assert (m.rows, m.cols) == (2, 2)


def test_new_coo_matrix_mismatched_lengths():
    with pytest.raises(MatrixError):
        COOMatrix([1.0, 2.0], [0, 0, 1], [0, 1], 2, 2)


def test_new_coo_matrix_out_of_bounds_row():
    with pytest.raises(MatrixError) as info:
        COOMatrix([1.0], [2], [0], 2, 2)
    assert str(info.value) == "row index out of bounds at position 0"


def test_new_coo_matrix_out_of_bounds_column():
    with pytest.raises(MatrixError) as info:
        COOMatrix([1.0, 1.0], [0, 1], [0, -1], 2, 2)
    assert str(info.value) == "column index out of bounds at position 1"


def test_coo_to_csr_conversion():
    coo = COOMatrix([1.0, 3.0, 2.0], [0, 1, 0], [0, 1, 1], 2, 2)
    csr = coo.to_csr()
    assert (csr.rows, csr.cols) == (2, 2)
    assert csr.values == pytest.approx([1.0, 2.0, 3.0], abs=1e-15)
    assert csr.row_ptr == [0, 2, 3]
    assert csr.col_indices == [0, 1, 1]


def test_coo_to_csr_with_empty_rows():
    coo = COOMatrix([5.0, 6.0], [3, 1], [0, 2], 4, 3)
    csr = coo.to_csr()
    assert csr.row_ptr == [0, 0, 1, 1, 2]
    assert csr.get(1, 2) == 6.0
    assert csr.get(3, 0) == 5.0


def test_csr_to_coo_conversion():
    csr = CSRMatrix([1.0, 2.0, 3.0], [0, 2, 3], [0, 1, 1], 2, 2)
    coo = from_csr(csr)
    assert (coo.rows, coo.cols) == (2, 2)
    assert coo.values == pytest.approx(csr.values, abs=1e-15)
    assert coo.row_indices == [0, 0, 1]
    assert coo.col_indices == csr.col_indices


def test_from_csr_copies_data():
    csr = CSRMatrix([1.0, 2.0], [0, 1, 2], [0, 1], 2, 2)
    coo = from_csr(csr)
    coo.values[0] = 9.0
    assert csr.values[0] == 1.0


def test_round_trip_csr_coo_csr():
    csr = CSRMatrix([1.0, 2.0, 3.0], [0, 2, 3], [0, 1, 1], 2, 2)
    back = from_csr(csr).to_csr()
    assert back == csr


def test_empty_matrix_conversion():
    coo = COOMatrix([], [], [], 2, 2)
    csr = coo.to_csr()
    assert (csr.rows, csr.cols) == (2, 2)
    assert csr.values == []
    assert csr.col_indices == []
    assert csr.row_ptr == [0, 0, 0]