# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Random sampling utilities."""

from fockspace.random.random import (
    random_density_operator,
    random_hermitian,
    random_ket,
    random_two_body_operator,
)

__all__ = [
    "random_density_operator",
    "random_hermitian",
    "random_ket",
    "random_two_body_operator",
]
