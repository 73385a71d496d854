# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Expectation values of one-body operators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Union

import numpy as np

from fockspace.bases import tensor
from fockspace.basis import ManyBodyBasis
from fockspace.operators.manybody import Operator, one_body_elements
from fockspace.operators.operator import AdjointOperator, DenseOperator, SparseOperator
from fockspace.states.sorted_vector import state_index
from fockspace.states.states import Ket
from fockspace.states.transition import allocate_buffer, state_transition

State = Union[Ket, DenseOperator, SparseOperator, AdjointOperator]


def one_body_expect(
    op: Operator, state: State | list[State]
) -> complex | list[complex]:
    r"""Expectation value of a one-body operator in a many-body state.

    Evaluates :math:`\langle \psi | X | \psi \rangle` for a ket, or
    :math:`\operatorname{Tr}(\rho X)` for a density operator, where :math:`X` is the
    many-body operator obtained by promoting ``op``. The many-body operator is not
    constructed.

    Args:
        op: The one-body operator, acting on the single-particle basis associated
            with the many-body basis of the state.
        state: A ket or density operator over a many-body basis, or a list of them.

    Returns:
        The expectation value, or a list of expectation values if a list of states
        was given.

    Raises:
        TypeError: The state is not defined over a many-body basis.
        ValueError: The left and right bases of the operator differ.
        NotImplementedError: Expectation values of two-body operators are not
            supported.
        ValueError: The basis of the operator has to either be equal to b or b ⊗ b.
    """
    if isinstance(state, list):
        return [one_body_expect(op, s) for s in state]
    basis = state.basis
    if not isinstance(basis, ManyBodyBasis):
        raise TypeError(
            f"The state must be defined over a ManyBodyBasis. Got {type(basis)}."
        )
    if op.basis_l != op.basis_r:
        raise ValueError("The operator must have equal left and right bases.")
    onebodybasis = basis.onebodybasis
    if op.basis_l == onebodybasis:
        return _one_body_expect_1(op, state)
    if op.basis_l == tensor(onebodybasis, onebodybasis):
        raise NotImplementedError(
            "one_body_expect is not implemented for two-body operators."
        )
    raise ValueError(
        "The basis of the given operator has to either be equal to b or b ⊗ b where "
        "b is the single-particle basis associated with the many-body basis of the "
        "state."
    )


def _one_body_expect_1(op: Operator, state: State) -> complex:
    if isinstance(op, AdjointOperator):
        op = op.parent.dagger()
    basis = state.basis
    occupations = basis.occupations
    weight = _weight_function(state)
    buffer = allocate_buffer(occupations)
    result = 0j
    for i, j, value in one_body_elements(op):
        for n, occ in enumerate(occupations):
            amplitude = state_transition(buffer, occ, i, j)
            if amplitude is None:
                continue
            m = state_index(occupations, buffer.state())
            if m is None:
                continue
            result += amplitude * value * weight(m, n)
    return complex(result)


def _weight_function(state: State) -> Callable[[int, int], Any]:
    # weight of the matrix element X[m, n]
    if isinstance(state, Ket):
        vec = state.data
        return lambda m, n: np.conj(vec[m]) * vec[n]
    if isinstance(state, SparseOperator):
        mat = state.data
        return lambda m, n: mat[n, m]
    mat = state.to_dense().data
    return lambda m, n: mat[n, m]
