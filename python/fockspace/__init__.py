# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""fockspace builds operators for many-body quantum systems in Fock space."""

from fockspace import linalg, random, testing
from fockspace.bases import CompositeBasis, GenericBasis, tensor
from fockspace.basis import ManyBodyBasis
from fockspace.operators import (
    AdjointOperator,
    DenseOperator,
    SparseOperator,
    create,
    destroy,
    diagonal_operator,
    identity_operator,
    manybody_operator,
    number,
    one_body_expect,
    transition,
)
from fockspace.protocols import (
    SupportsApproximateEquality,
    SupportsLinearOperator,
    approx_eq,
    linear_operator,
)
from fockspace.states import (
    MAX_BITSTRING_MODES,
    FermionBitstring,
    Ket,
    OccupationType,
    SortedVector,
    basis_state,
    boson_states,
    convert_occupations,
    dim,
    fermion_states,
    state_index,
    state_transition,
)

__all__ = [
    "MAX_BITSTRING_MODES",
    "AdjointOperator",
    "CompositeBasis",
    "DenseOperator",
    "FermionBitstring",
    "GenericBasis",
    "Ket",
    "ManyBodyBasis",
    "OccupationType",
    "SortedVector",
    "SparseOperator",
    "SupportsApproximateEquality",
    "SupportsLinearOperator",
    "approx_eq",
    "basis_state",
    "boson_states",
    "convert_occupations",
    "create",
    "destroy",
    "diagonal_operator",
    "dim",
    "fermion_states",
    "identity_operator",
    "linalg",
    "linear_operator",
    "manybody_operator",
    "number",
    "one_body_expect",
    "random",
    "state_index",
    "state_transition",
    "testing",
    "transition",
]
