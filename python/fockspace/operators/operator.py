# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Dense and sparse operators over a basis."""

from __future__ import annotations

import dataclasses
import numbers
from typing import Any, Union

import numpy as np
import scipy.sparse
from scipy.sparse.linalg import LinearOperator


class _OperatorMixin:
    basis_l: Any
    basis_r: Any
    data: Any

    # defer binary operations with NumPy scalars to the methods below
    __array_ufunc__ = None

    @property
    def basis(self) -> Any:
        """The basis of a square operator.

        Raises:
            ValueError: The left and right bases differ.
        """
        if self.basis_l != self.basis_r:
            raise ValueError("The operator has different left and right bases.")
        return self.basis_l

    @property
    def shape(self) -> tuple[int, int]:
        """The shape of the matrix representation."""
        return self.data.shape

    def __array__(self, dtype=None, copy=None):
        mat = self.to_dense().data
        if dtype is None:
            return mat
        return mat.astype(dtype, copy=False)

    def _check_bases(self, other: Any) -> None:
        if self.basis_l != other.basis_l or self.basis_r != other.basis_r:
            raise ValueError("Operators must be defined over the same bases.")

    def _linear_operator_(self) -> LinearOperator:
        """Return a SciPy LinearOperator representing the object."""
        data = self.data
        return LinearOperator(
            shape=data.shape,
            matvec=lambda vec: data @ vec,
            rmatvec=lambda vec: data.conj().T @ vec,
            dtype=data.dtype,
        )

    def _approx_eq_(self, other: Any, rtol: float, atol: float) -> bool:
        if not isinstance(other, _OperatorMixin):
            return NotImplemented
        if self.basis_l != other.basis_l or self.basis_r != other.basis_r:
            return False
        return np.allclose(
            self.to_dense().data, other.to_dense().data, rtol=rtol, atol=atol
        )

    def __neg__(self):
        return self * -1

    def __rmul__(self, other):
        return self * other

    def __sub__(self, other):
        return self + (-other)


@dataclasses.dataclass(frozen=True, eq=False)
class DenseOperator(_OperatorMixin):
    """An operator stored as a dense matrix.

    Attributes:
        basis_l: The basis of the output space.
        data: The matrix.
        basis_r: The basis of the input space. Defaults to ``basis_l``.
    """

    basis_l: Any
    data: np.ndarray
    basis_r: Any = None

    def __post_init__(self):
        if self.basis_r is None:
            object.__setattr__(self, "basis_r", self.basis_l)
        object.__setattr__(self, "data", np.asarray(self.data))
        _check_shape(self)

    def dagger(self) -> DenseOperator:
        """Return the Hermitian conjugate."""
        return DenseOperator(self.basis_r, self.data.T.conj(), self.basis_l)

    def to_dense(self) -> DenseOperator:
        return self

    def to_sparse(self) -> SparseOperator:
        return SparseOperator(
            self.basis_l, scipy.sparse.csr_array(self.data), self.basis_r
        )

    def __add__(self, other):
        if not isinstance(other, _OperatorMixin):
            return NotImplemented
        self._check_bases(other)
        return DenseOperator(
            self.basis_l, self.data + other.to_dense().data, self.basis_r
        )

    def __mul__(self, other):
        if isinstance(other, numbers.Number):
            return DenseOperator(self.basis_l, self.data * other, self.basis_r)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, _OperatorMixin):
            return NotImplemented
        if self.basis_r != other.basis_l:
            raise ValueError("Bases of the operators do not match.")
        return DenseOperator(
            self.basis_l, self.data @ other.to_dense().data, other.basis_r
        )


@dataclasses.dataclass(frozen=True, eq=False)
class SparseOperator(_OperatorMixin):
    """An operator stored as a sparse matrix in CSR format.

    Attributes:
        basis_l: The basis of the output space.
        data: The matrix. Any SciPy sparse format is converted to a CSR array.
        basis_r: The basis of the input space. Defaults to ``basis_l``.
    """

    basis_l: Any
    data: scipy.sparse.csr_array
    basis_r: Any = None

    def __post_init__(self):
        if self.basis_r is None:
            object.__setattr__(self, "basis_r", self.basis_l)
        object.__setattr__(self, "data", scipy.sparse.csr_array(self.data))
        _check_shape(self)

    def dagger(self) -> SparseOperator:
        """Return the Hermitian conjugate."""
        return SparseOperator(self.basis_r, self.data.T.conj(), self.basis_l)

    def to_dense(self) -> DenseOperator:
        return DenseOperator(self.basis_l, self.data.toarray(), self.basis_r)

    def to_sparse(self) -> SparseOperator:
        return self

    def __add__(self, other):
        if not isinstance(other, _OperatorMixin):
            return NotImplemented
        self._check_bases(other)
        if isinstance(other, DenseOperator):
            return other + self
        return SparseOperator(
            self.basis_l, self.data + other.to_sparse().data, self.basis_r
        )

    def __mul__(self, other):
        if isinstance(other, numbers.Number):
            return SparseOperator(self.basis_l, self.data * other, self.basis_r)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, _OperatorMixin):
            return NotImplemented
        if self.basis_r != other.basis_l:
            raise ValueError("Bases of the operators do not match.")
        if isinstance(other, DenseOperator):
            return DenseOperator(self.basis_l, self.data @ other.data, other.basis_r)
        return SparseOperator(
            self.basis_l, self.data @ other.to_sparse().data, other.basis_r
        )


@dataclasses.dataclass(frozen=True, eq=False)
class AdjointOperator(_OperatorMixin):
    """The lazily evaluated Hermitian conjugate of another operator.

    Attributes:
        parent: The operator whose adjoint this is.
    """

    parent: Union[DenseOperator, SparseOperator]

    @property
    def basis_l(self) -> Any:
        return self.parent.basis_r

    @property
    def basis_r(self) -> Any:
        return self.parent.basis_l

    @property
    def data(self):
        return self.parent.data.T.conj()

    def dagger(self) -> Union[DenseOperator, SparseOperator]:
        """Return the parent operator."""
        return self.parent

    def to_dense(self) -> DenseOperator:
        return self.parent.dagger().to_dense()

    def to_sparse(self) -> SparseOperator:
        return self.parent.dagger().to_sparse()

    def __add__(self, other):
        return self.parent.dagger() + other

    def __mul__(self, other):
        if isinstance(other, numbers.Number):
            return AdjointOperator(self.parent * np.conj(other))
        return NotImplemented

    def __matmul__(self, other):
        return self.parent.dagger() @ other


def diagonal_operator(basis: Any, diag, *, dtype=None) -> SparseOperator:
    """Return a sparse operator with the given diagonal.

    Args:
        basis: The basis of the operator.
        diag: The diagonal entries.
        dtype: The data type to use for the result. Defaults to the data type of
            ``diag``.

    Returns:
        The diagonal operator.
    """
    diag = np.asarray(diag, dtype=dtype)
    if diag.shape != (len(basis),):
        raise ValueError(
            f"Diagonal of shape {diag.shape} does not match a basis of "
            f"dimension {len(basis)}."
        )
    mat = scipy.sparse.diags_array(diag, format="csr", dtype=diag.dtype)
    return SparseOperator(basis, mat)


def identity_operator(basis: Any, *, dtype=complex) -> SparseOperator:
    """Return the identity operator over a basis."""
    return diagonal_operator(basis, np.ones(len(basis)), dtype=dtype)


def _check_shape(op: Union[DenseOperator, SparseOperator]) -> None:
    expected = (len(op.basis_l), len(op.basis_r))
    if op.data.shape != expected:
        raise ValueError(
            f"Data of shape {op.data.shape} does not match the bases, which "
            f"require shape {expected}."
        )


def sparse_operator_from_triplets(
    basis: Any, rows, cols, vals, *, dtype=complex
) -> SparseOperator:
    """Assemble a square sparse operator from (row, column, value) triplets.

    Values of repeated (row, column) pairs are summed.

    Args:
        basis: The basis of the operator.
        rows: The row indices.
        cols: The column indices.
        vals: The matrix entries.
        dtype: The data type to use for the result.

    Returns:
        The sparse operator.
    """
    dim = len(basis)
    mat = scipy.sparse.coo_array(
        (
            np.asarray(vals, dtype=dtype),
            (np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp)),
        ),
        shape=(dim, dim),
    )
    return SparseOperator(basis, mat.tocsr())
