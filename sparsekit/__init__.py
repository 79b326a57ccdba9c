"""Sparse matrices in COO and CSR formats with a conjugate gradient solver."""

__version__ = "0.1.0"
__all__ = ["coo", "csr", "errors", "solvers", "demo"]