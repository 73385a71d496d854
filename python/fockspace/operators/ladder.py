# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Creation, annihilation, number and transition operators."""

from __future__ import annotations

import numbers
from typing import Optional

import numpy as np

from fockspace.basis import ManyBodyBasis
from fockspace.operators.operator import (
    SparseOperator,
    diagonal_operator,
    sparse_operator_from_triplets,
)
from fockspace.states.bitstring import FermionBitstring
from fockspace.states.sorted_vector import state_index
from fockspace.states.transition import (
    Modes,
    allocate_buffer,
    check_modes,
    state_transition,
)


def create(basis: ManyBodyBasis, mode: int, *, dtype=complex) -> SparseOperator:
    r"""Creation operator for a mode of a many-body basis.

    Args:
        basis: The many-body basis.
        mode: The index of the mode.
        dtype: The data type to use for the result.

    Returns:
        The operator :math:`a^\dagger_\text{mode}`.
    """
    return transition(basis, (mode,), (), dtype=dtype)


def destroy(basis: ManyBodyBasis, mode: int, *, dtype=complex) -> SparseOperator:
    r"""Annihilation operator for a mode of a many-body basis.

    Args:
        basis: The many-body basis.
        mode: The index of the mode.
        dtype: The data type to use for the result.

    Returns:
        The operator :math:`a_\text{mode}`.
    """
    return transition(basis, (), (mode,), dtype=dtype)


def number(
    basis: ManyBodyBasis, mode: Optional[int] = None, *, dtype=complex
) -> SparseOperator:
    r"""Particle number operator.

    Args:
        basis: The many-body basis.
        mode: The index of the mode. If not given, the total particle number
            operator is returned.
        dtype: The data type to use for the result.

    Returns:
        The operator :math:`n_\text{mode} = a^\dagger_\text{mode} a_\text{mode}`,
        or :math:`N = \sum_i n_i` if no mode is given.

    Raises:
        IndexError: The mode index is out of range.
    """
    if mode is None:
        diag = basis.total_particle_numbers()
    else:
        check_modes((mode,), len(basis.onebodybasis))
        diag = np.array([_occupation(occ, mode) for occ in basis.occupations])
    return diagonal_operator(basis, diag, dtype=dtype)


def transition(
    basis: ManyBodyBasis, to: Modes, from_: Modes, *, dtype=complex
) -> SparseOperator:
    r"""Operator transferring particles between modes.

    For ``to = (t_1, t_2, ...)`` and ``from_ = (f_1, f_2, ...)`` this is the operator

    .. math::

        a^\dagger_{t_1} a^\dagger_{t_2} \ldots a_{f_2} a_{f_1}

    restricted to the states of the basis. Matrix elements leading to states outside
    the basis are dropped.

    Args:
        basis: The many-body basis.
        to: The mode or modes in which particles are created.
        from_: The mode or modes from which particles are removed.
        dtype: The data type to use for the result.

    Returns:
        The transition operator.

    Raises:
        IndexError: A mode index is out of range.
    """
    nmodes = len(basis.onebodybasis)
    check_modes((to,) if isinstance(to, numbers.Integral) else to, nmodes)
    check_modes((from_,) if isinstance(from_, numbers.Integral) else from_, nmodes)
    occupations = basis.occupations
    rows = []
    cols = []
    vals = []
    buffer = allocate_buffer(occupations)
    for i, occ in enumerate(occupations):
        amplitude = state_transition(buffer, occ, to, from_)
        if amplitude is None:
            continue
        j = state_index(occupations, buffer.state())
        if j is None:
            continue
        rows.append(j)
        cols.append(i)
        vals.append(amplitude)
    return sparse_operator_from_triplets(basis, rows, cols, vals, dtype=dtype)


def _occupation(occupation, mode: int) -> int:
    if isinstance(occupation, FermionBitstring):
        return int(occupation[mode])
    return occupation[mode]
