# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Operators."""

from fockspace.operators.expect import one_body_expect
from fockspace.operators.ladder import create, destroy, number, transition
from fockspace.operators.manybody import (
    manybody_operator,
    one_body_elements,
    two_body_elements,
)
from fockspace.operators.operator import (
    AdjointOperator,
    DenseOperator,
    SparseOperator,
    diagonal_operator,
    identity_operator,
    sparse_operator_from_triplets,
)

__all__ = [
    "AdjointOperator",
    "DenseOperator",
    "SparseOperator",
    "create",
    "destroy",
    "diagonal_operator",
    "identity_operator",
    "manybody_operator",
    "number",
    "one_body_elements",
    "one_body_expect",
    "sparse_operator_from_triplets",
    "transition",
    "two_body_elements",
]
