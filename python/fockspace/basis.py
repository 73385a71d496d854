# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Many-body basis."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from fockspace.states.bitstring import FermionBitstring
from fockspace.states.sorted_vector import SortedVector

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, eq=False)
class ManyBodyBasis:
    """Basis for a many-body system.

    The basis knows the associated single-particle basis and which occupation
    states are included. The position of an occupation state in ``occupations`` is
    its index in every many-body operator and state built over this basis.

    Two bases compare equal if the hashes of their occupation states agree and their
    single-particle bases are equal. The occupation hash is a non-cryptographic
    fast path and is not a full comparison of the occupation states.

    Attributes:
        onebodybasis: The single-particle basis. Its length is the number of modes.
        occupations: The occupation states, as a :class:`SortedVector`. A plain
            sequence is sorted in ascending order on construction.
        occupations_hash (int): Combined hash of all occupation states.
    """

    onebodybasis: Any
    occupations: SortedVector
    occupations_hash: int = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        occupations = self.occupations
        if not isinstance(occupations, SortedVector):
            occupations = SortedVector(_as_states(occupations))
            object.__setattr__(self, "occupations", occupations)
        nmodes = len(self.onebodybasis)
        for occ in occupations:
            if len(occ) != nmodes:
                raise ValueError(
                    "Every occupation state must have one entry per mode of the "
                    f"single-particle basis ({nmodes}). Got {occ!r}."
                )
        object.__setattr__(
            self, "occupations_hash", hash(tuple(hash(occ) for occ in occupations))
        )
        logger.debug(
            "Constructed many-body basis with %d states over %d modes",
            len(occupations),
            nmodes,
        )

    @property
    def shape(self) -> int:
        """The number of many-body basis states."""
        return len(self.occupations)

    def __len__(self) -> int:
        return len(self.occupations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ManyBodyBasis):
            return NotImplemented
        return (
            self.occupations_hash == other.occupations_hash
            and self.onebodybasis == other.onebodybasis
        )

    def __hash__(self) -> int:
        return hash((self.occupations_hash, self.onebodybasis))

    def to_bitstrings(self) -> ManyBodyBasis:
        """Return the same basis with occupations packed into fermion bitstrings.

        Raises:
            ValueError: The number of modes exceeds MAX_BITSTRING_MODES.
            ValueError: Occupations must be 0 or 1.
        """
        occupations = self.occupations
        if occupations and isinstance(occupations[0], FermionBitstring):
            return self
        return ManyBodyBasis(
            self.onebodybasis,
            SortedVector(
                (FermionBitstring.from_occupation(occ) for occ in occupations),
                reverse=occupations.reverse,
            ),
        )

    def total_particle_numbers(self) -> np.ndarray:
        """Return the total number of particles in each basis state."""
        return np.array([_total(occ) for occ in self.occupations], dtype=int)


def _as_states(occupations: Sequence) -> list:
    return [
        occ if isinstance(occ, FermionBitstring) else tuple(int(n) for n in occ)
        for occ in occupations
    ]


def _total(occupation) -> int:
    if isinstance(occupation, FermionBitstring):
        return occupation.count()
    return sum(occupation)
