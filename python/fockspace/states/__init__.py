# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Occupation states and state vectors."""

from fockspace.states.bitstring import (
    MAX_BITSTRING_MODES,
    FermionBitstring,
    OccupationType,
    convert_occupations,
)
from fockspace.states.occupations import boson_states, fermion_states
from fockspace.states.sorted_vector import SortedVector, state_index
from fockspace.states.states import Ket, basis_state, dim
from fockspace.states.transition import (
    BitstringBuffer,
    CountBuffer,
    allocate_buffer,
    state_transition,
)

__all__ = [
    "MAX_BITSTRING_MODES",
    "BitstringBuffer",
    "CountBuffer",
    "FermionBitstring",
    "Ket",
    "OccupationType",
    "SortedVector",
    "allocate_buffer",
    "basis_state",
    "boson_states",
    "convert_occupations",
    "dim",
    "fermion_states",
    "state_index",
    "state_transition",
]
