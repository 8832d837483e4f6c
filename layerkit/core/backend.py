"""Matrix backends used by the layer and regularizer primitives.

The primitives never touch a concrete container directly. They ask
:func:`backend_for` for the backend that owns an operand and go through the
small :class:`MatrixBackend` surface (subtract, transform, matmul, transpose,
identity, scale).  Dense ``numpy`` arrays and ``scipy.sparse`` matrices are
supported out of the box.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Tuple

import numpy as np
from scipy import sparse

from .types import Array, Matrix

ElementFn = Callable[[Array], Array]


class MatrixBackend(Protocol):
    """Operations the core requires of a numeric container."""

    name: str

    def shape(self, a: Matrix) -> Tuple[int, ...]:
        """Return the shape of ``a``."""

    def subtract(self, a: Matrix, b: Matrix) -> Matrix:
        """Return ``a - b`` element-wise as a fresh matrix."""

    def transform(self, a: Matrix, fn: ElementFn) -> Matrix:
        """Apply the vectorised ``fn`` to every entry of a copy of ``a``."""

    def matmul(self, a: Matrix, b: Matrix) -> Matrix:
        """Return the matrix product ``a @ b``."""

    def transpose(self, a: Matrix) -> Matrix:
        """Return the transpose of ``a``."""

    def identity(self, n: int, like: Matrix) -> Matrix:
        """Return the ``n x n`` identity with the dtype of ``like``."""

    def scale(self, a: Matrix, factor: float) -> Matrix:
        """Return ``factor * a``."""

    def zeros_like(self, a: Matrix) -> Matrix:
        """Return an all-zero matrix with the shape of ``a``."""


@dataclass(frozen=True)
class DenseBackend:
    """Backend for ``numpy.ndarray`` operands."""

    name: str = "dense"

    def shape(self, a: Array) -> Tuple[int, ...]:
        return tuple(a.shape)

    def subtract(self, a: Array, b: Array) -> Array:
        return np.subtract(a, b)

    def transform(self, a: Array, fn: ElementFn) -> Array:
        return np.asarray(fn(np.array(a, copy=True)))

    def matmul(self, a: Array, b: Array) -> Array:
        return a @ b

    def transpose(self, a: Array) -> Array:
        return a.T

    def identity(self, n: int, like: Array) -> Array:
        return np.eye(n, dtype=like.dtype)

    def scale(self, a: Array, factor: float) -> Array:
        return factor * a

    def zeros_like(self, a: Array) -> Array:
        return np.zeros_like(a)


def as_csr(result: Matrix, like: Matrix) -> Matrix:
    """Return ``result`` as CSR in the sparse flavour of ``like``."""

    if isinstance(like, sparse.sparray):
        return sparse.csr_array(result)
    return sparse.csr_matrix(result)


@dataclass(frozen=True)
class SparseBackend:
    """Backend for ``scipy.sparse`` operands.

    Results are CSR, as ``csr_array`` for sparse-array inputs and as
    ``csr_matrix`` for sparse-matrix inputs.
    """

    name: str = "sparse"

    def shape(self, a: Matrix) -> Tuple[int, ...]:
        return tuple(a.shape)

    def subtract(self, a: Matrix, b: Matrix) -> Matrix:
        return as_csr(a - b, like=a)

    def transform(self, a: Matrix, fn: ElementFn) -> Matrix:
        out = as_csr(a, like=a).copy()
        # Implicit zeros stay implicit only when fn(0) == 0.
        if np.any(fn(np.zeros(1, dtype=out.dtype)) != 0):
            return as_csr(fn(out.toarray()), like=a)
        out.data = np.asarray(fn(out.data))
        out.eliminate_zeros()
        return out

    def matmul(self, a: Matrix, b: Matrix) -> Matrix:
        return as_csr(a @ b, like=a)

    def transpose(self, a: Matrix) -> Matrix:
        return as_csr(a.T, like=a)

    def identity(self, n: int, like: Matrix) -> Matrix:
        return as_csr(sparse.identity(n, dtype=like.dtype, format="csr"), like=like)

    def scale(self, a: Matrix, factor: float) -> Matrix:
        return as_csr(a * factor, like=a)

    def zeros_like(self, a: Matrix) -> Matrix:
        return as_csr(sparse.csr_matrix(a.shape, dtype=a.dtype), like=a)


DENSE = DenseBackend()
SPARSE = SparseBackend()


def backend_for(matrix: Matrix) -> MatrixBackend:
    """Return the backend responsible for ``matrix``."""

    if sparse.issparse(matrix):
        return SPARSE
    if isinstance(matrix, np.ndarray):
        return DENSE
    raise TypeError(
        f"Unsupported matrix type {type(matrix).__name__!r}; "
        "expected a numpy.ndarray or a scipy.sparse matrix"
    )


def to_dense(matrix: Matrix) -> Array:
    """Return ``matrix`` as a dense ``numpy`` array."""

    if sparse.issparse(matrix):
        return matrix.toarray()
    return np.asarray(matrix)


__all__ = [
    "DENSE",
    "SPARSE",
    "DenseBackend",
    "ElementFn",
    "MatrixBackend",
    "SparseBackend",
    "as_csr",
    "backend_for",
    "to_dense",
]
