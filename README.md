# sparsekit

A small sparse matrix toolkit with no third-party dependencies.

- `sparsekit.csr.CSRMatrix` stores a matrix in Compressed Sparse Row format.
  It offers `get`, `set`, `matvec`, `add` and the `nnz` property.
- `sparsekit.csr.from_dense` builds a `CSRMatrix` from a list of rows. It keeps
  only entries whose magnitude is above `1e-15`.
- `sparsekit.coo.COOMatrix` stores a matrix as (row, column, value) triples.
  `to_csr()` converts it to CSR, with entries ordered by row and then by column.
- `sparsekit.coo.from_csr` converts a `CSRMatrix` to a `COOMatrix`. The data is
  copied.
- `sparsekit.solvers.CGSolver` is a conjugate gradient solver for symmetric
  positive-definite systems. It starts from the zero vector. Its defaults are
  `max_iter=1000` and `tolerance=1e-10`.

## Errors

All errors live in `sparsekit.errors`.

- `MatrixError` is a subclass of `ValueError`. It is raised for:
  - inconsistent array lengths;
  - COO indices outside the matrix;
  - mismatched shapes in `matvec`, `add` and `solve`;
  - an empty or ragged dense input to `from_dense`;
  - an attempt to `set` an entry that is not already stored.
- `ConvergenceError` is a subclass of `MatrixError`. `CGSolver.solve` raises it
  when the residual does not fall below the tolerance within `max_iter`
  iterations. It also raises it when the search direction breaks down.
- `CSRMatrix.set` raises `IndexError` for a position outside the matrix.
- `CSRMatrix.get` returns `0.0` for a position outside the matrix, and for any
  entry that is not stored.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from sparsekit.coo import COOMatrix
from sparsekit.csr import from_dense
from sparsekit.solvers import CGSolver

# Build a matrix from triplets and convert it to CSR
coo = COOMatrix([4.0, 1.0, 1.0, 4.0], [0, 0, 1, 1], [0, 1, 0, 1], 2, 2)
a = coo.to_csr()

a.get(0, 1)              # 1.0
a.matvec([1.0, 1.0])     # [5.0, 5.0]
a.set(0, 0, 5.0)         # overwrite a stored entry

# Solve A x = b
solver = CGSolver(1000, 1e-10)
x = solver.solve(a, [1.0, 1.0])

# Dense input and addition
d = from_dense([[1.0, 0.0], [0.0, 2.0]])
s = a.add(d)
```

## Demo

The `sparsekit-demo` command builds a 2×2 system. It solves the system with
`CGSolver` and prints the solution. The command takes no options apart from
`--help`.

```
sparsekit-demo
```

## What it does not do

- It does not read or write matrices from files.
- It has no matrix–matrix multiplication and no preconditioners.
- `CGSolver` is the only solver.
- `CSRMatrix.set` cannot insert new non-zero entries. To add one, build a new
  matrix, for example through `COOMatrix`.