# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Many-body quantum states."""

from __future__ import annotations

import dataclasses
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np

from fockspace.linalg import one_hot
from fockspace.states.bitstring import FermionBitstring
from fockspace.states.sorted_vector import state_index


@dataclasses.dataclass
class Ket:
    """A state vector over a basis.

    Attributes:
        basis: The basis of the state, usually a
            :class:`~fockspace.ManyBodyBasis`.
        data: Array of state vector coefficients.
    """

    basis: Any
    data: np.ndarray

    def __post_init__(self):
        if self.data.shape != (len(self.basis),):
            raise ValueError(
                f"Data of shape {self.data.shape} does not match a basis of "
                f"dimension {len(self.basis)}."
            )

    def __array__(self, dtype=None, copy=None):
        if copy:
            if dtype is None:
                return self.data.copy()
            return self.data.astype(dtype, copy=True)
        if dtype is None:
            return self.data
        return self.data.astype(dtype, copy=False)

    def norm(self) -> float:
        """Return the Euclidean norm of the state vector."""
        return float(np.linalg.norm(self.data))

    def dagger(self) -> np.ndarray:
        """Return the conjugated coefficients, the components of the bra."""
        return self.data.conj()


def dim(basis: Any) -> int:
    """Get the dimension of the Hilbert space spanned by a basis.

    Args:
        basis: The basis.

    Returns:
        The number of basis states.
    """
    return len(basis)


def basis_state(
    basis: Any,
    occupation: int | Sequence[int] | FermionBitstring,
    *,
    dtype=complex,
) -> Ket:
    """Return the basis state with the given occupation numbers.

    Args:
        basis: The many-body basis.
        occupation: Either the occupation state, or the index of a basis state.
        dtype: The data type to use for the result.

    Returns:
        The state vector with a one at the position of the requested state.

    Raises:
        ValueError: Occupation not included in many-body basis.
        IndexError: Basis state index out of range.
    """
    if isinstance(occupation, numbers.Integral):
        index = int(occupation)
        if not 0 <= index < len(basis):
            raise IndexError(
                f"Basis state index {index} out of range for a basis of "
                f"dimension {len(basis)}."
            )
    else:
        if not isinstance(occupation, FermionBitstring):
            occupation = tuple(int(n) for n in occupation)
        found = state_index(basis.occupations, occupation)
        if found is None:
            raise ValueError(
                f"Occupation {occupation!r} not included in many-body basis."
            )
        index = found
    return Ket(basis, one_hot(len(basis), index, dtype=dtype))
