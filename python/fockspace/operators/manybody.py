# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Promotion of single-particle operators to many-body operators."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Union

import numpy as np
import scipy.sparse

from fockspace.bases import tensor
from fockspace.basis import ManyBodyBasis
from fockspace.operators.operator import (
    AdjointOperator,
    DenseOperator,
    SparseOperator,
    sparse_operator_from_triplets,
)
from fockspace.states.sorted_vector import state_index
from fockspace.states.transition import allocate_buffer, state_transition

logger = logging.getLogger(__name__)

Operator = Union[DenseOperator, SparseOperator, AdjointOperator]


def manybody_operator(
    basis: ManyBodyBasis, op: Operator
) -> Union[DenseOperator, SparseOperator]:
    r"""Create the many-body operator from a one-body or two-body operator.

    For a one-body operator :math:`x` acting on the single-particle basis the result
    is

    .. math::

        X = \sum_{ij} \langle u_i | x | u_j \rangle a^\dagger_i a_j

    and for a two-body interaction acting on the tensor product of the
    single-particle basis with itself it is

    .. math::

        X = \sum_{ijkl} \langle u_i u_j | x | u_k u_l \rangle
            a^\dagger_i a^\dagger_j a_k a_l,

    where :math:`|u_i\rangle` are the single-particle states of the modes. The
    composite index of a two-body operator follows the convention of
    :func:`numpy.kron`, that is, row ``i * S + j`` corresponds to the pair
    :math:`(i, j)` where ``S`` is the number of modes.

    Dense operators are promoted to dense operators and sparse operators to sparse
    operators.

    Args:
        basis: The many-body basis.
        op: The single-particle operator.

    Returns:
        The many-body operator.

    Raises:
        ValueError: The left and right bases of the operator differ.
        ValueError: The basis of the operator has to either be equal to b or b ⊗ b.
    """
    if op.basis_l != op.basis_r:
        raise ValueError(
            "The operator must have equal left and right bases to be promoted."
        )
    if isinstance(op, AdjointOperator):
        return manybody_operator(basis, op.dagger()).dagger()
    onebodybasis = basis.onebodybasis
    if op.basis_l == onebodybasis:
        return _manybody_operator_1(basis, op)
    if op.basis_l == tensor(onebodybasis, onebodybasis):
        return _manybody_operator_2(basis, op)
    raise ValueError(
        "The basis of the given operator has to either be equal to b or b ⊗ b where "
        "b is the single-particle basis associated with the many-body basis. "
        "Operators of higher than two-body order are not supported."
    )


def _manybody_operator_1(
    basis: ManyBodyBasis, op: Union[DenseOperator, SparseOperator]
) -> Union[DenseOperator, SparseOperator]:
    terms = one_body_elements(op)
    return _promote(basis, op, ((((i,), (j,)), value) for i, j, value in terms))


def _manybody_operator_2(
    basis: ManyBodyBasis, op: Union[DenseOperator, SparseOperator]
) -> Union[DenseOperator, SparseOperator]:
    terms = two_body_elements(op, len(basis.onebodybasis))
    return _promote(
        basis, op, ((((i, j), (k, l)), value) for i, j, k, l, value in terms)
    )


def _promote(
    basis: ManyBodyBasis,
    op: Union[DenseOperator, SparseOperator],
    terms: Iterator,
) -> Union[DenseOperator, SparseOperator]:
    occupations = basis.occupations
    dim = len(basis)
    buffer = allocate_buffer(occupations)
    sparse = isinstance(op, SparseOperator)
    dtype = np.result_type(op.data.dtype, complex)
    if sparse:
        rows: list[int] = []
        cols: list[int] = []
        vals: list[complex] = []
    else:
        result = np.zeros((dim, dim), dtype=dtype)
    nterms = 0
    for (create, destroy), value in terms:
        nterms += 1
        for n, occ in enumerate(occupations):
            amplitude = state_transition(buffer, occ, create, destroy)
            if amplitude is None:
                continue
            m = state_index(occupations, buffer.state())
            if m is None:
                continue
            if sparse:
                rows.append(m)
                cols.append(n)
                vals.append(amplitude * value)
            else:
                result[m, n] += amplitude * value
    if sparse:
        out: Union[DenseOperator, SparseOperator] = sparse_operator_from_triplets(
            basis, rows, cols, vals, dtype=dtype
        )
    else:
        out = DenseOperator(basis, result)
    logger.debug(
        "Promoted %s operator with %d nonzero elements over %d many-body states "
        "to %d nonzero elements",
        "sparse" if sparse else "dense",
        nterms,
        dim,
        out.data.nnz if sparse else np.count_nonzero(out.data),
    )
    return out


def one_body_elements(
    op: Union[DenseOperator, SparseOperator],
) -> Iterator[tuple[int, int, complex]]:
    """Iterate over the nonzero matrix elements of a one-body operator.

    Args:
        op: The operator.

    Yields:
        Triples ``(i, j, op[i, j])`` for the nonzero entries. For a sparse operator
        only the stored entries are visited.
    """
    if isinstance(op, SparseOperator):
        coo = scipy.sparse.coo_array(op.data)
        for i, j, value in zip(coo.row, coo.col, coo.data):
            if value != 0:
                yield int(i), int(j), value
        return
    data = op.data
    for i, j in zip(*np.nonzero(data)):
        yield int(i), int(j), data[i, j]


def two_body_elements(
    op: Union[DenseOperator, SparseOperator], nmodes: int
) -> Iterator[tuple[int, int, int, int, complex]]:
    r"""Iterate over the nonzero matrix elements of a two-body operator.

    Args:
        op: The operator, acting on the tensor product of the single-particle basis
            with itself.
        nmodes: The number of modes of the single-particle basis.

    Yields:
        Tuples ``(i, j, k, l, value)`` where ``value`` is the matrix element
        :math:`\langle u_i u_j | x | u_k u_l \rangle`.

    Raises:
        ValueError: The dimension of the operator is not the square of the number
            of modes.
    """
    if op.data.shape != (nmodes**2, nmodes**2):
        raise ValueError(
            f"A two-body operator over {nmodes} modes must have shape "
            f"{(nmodes**2, nmodes**2)}. Got {op.data.shape}."
        )
    for row, col, value in one_body_elements(op):
        i, j = divmod(row, nmodes)
        k, l = divmod(col, nmodes)
        yield i, j, k, l, value
