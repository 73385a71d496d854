# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Single-particle bases."""

from __future__ import annotations

import dataclasses
import math
from typing import Any


@dataclasses.dataclass(frozen=True)
class GenericBasis:
    """A single-particle basis characterized only by its dimension.

    Attributes:
        dim: The number of basis states (modes).
        label: An optional label distinguishing bases of equal dimension.
    """

    dim: int
    label: str = ""

    def __post_init__(self):
        if self.dim < 0:
            raise ValueError(f"Dimension must be non-negative. Got {self.dim}.")

    def __len__(self) -> int:
        return self.dim


@dataclasses.dataclass(frozen=True)
class CompositeBasis:
    """The tensor product of several bases.

    Attributes:
        bases: The factors of the tensor product.
    """

    bases: tuple[Any, ...]

    @property
    def dim(self) -> int:
        """The dimension of the product space."""
        return math.prod(len(b) for b in self.bases)

    def __len__(self) -> int:
        return self.dim


def tensor(*bases: Any) -> CompositeBasis:
    """Return the tensor product of bases.

    Nested composite bases are flattened, so that ``tensor(tensor(a, b), c)`` equals
    ``tensor(a, b, c)``.
    """
    factors: list[Any] = []
    for b in bases:
        if isinstance(b, CompositeBasis):
            factors.extend(b.bases)
        else:
            factors.append(b)
    return CompositeBasis(tuple(factors))
