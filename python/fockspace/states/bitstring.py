# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Packed bitstring representation of fermionic occupation states."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from enum import Enum, auto
from typing import cast

import numpy as np

MAX_BITSTRING_MODES = np.iinfo(np.uint64).bits
"""The maximum number of modes a :class:`FermionBitstring` can hold."""


@dataclasses.dataclass(frozen=True, order=True)
class FermionBitstring:
    """A fermionic occupation state packed into the bits of an unsigned integer.

    Bit ``i`` of ``bits`` is set if and only if mode ``i`` is occupied. Bits beyond
    the first ``n`` are discarded on construction. Bitstrings are ordered by their
    integer value, then by their number of modes.

    Attributes:
        bits: The occupation flags.
        n: The number of modes.
    """

    bits: int
    n: int

    def __post_init__(self):
        if not 0 <= self.n <= MAX_BITSTRING_MODES:
            raise ValueError(
                f"The number of modes must be between 0 and {MAX_BITSTRING_MODES}. "
                f"Got {self.n}."
            )
        bits = int(self.bits)
        if bits < 0:
            raise ValueError(f"Bits must be non-negative. Got {bits}.")
        object.__setattr__(self, "bits", bits & ((1 << self.n) - 1))

    @staticmethod
    def from_occupation(occupation: Sequence[int]) -> FermionBitstring:
        """Encode a sequence of fermionic occupation numbers.

        Args:
            occupation: The occupation of each mode. Every entry must be 0 or 1.

        Returns:
            The packed bitstring.

        Raises:
            ValueError: The number of modes exceeds MAX_BITSTRING_MODES.
            ValueError: Occupations must be 0 or 1.
        """
        n = len(occupation)
        if n > MAX_BITSTRING_MODES:
            raise ValueError(
                f"The number of modes must be at most {MAX_BITSTRING_MODES}. "
                f"Got {n}."
            )
        bits = 0
        for i, count in enumerate(occupation):
            if count != 0 and count != 1:
                raise ValueError(f"Occupations must be 0 or 1. Got {list(occupation)}.")
            if count:
                bits |= 1 << i
        return FermionBitstring(bits, n)

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, mode: int) -> bool:
        if not 0 <= mode < self.n:
            raise IndexError(f"Mode index {mode} out of range for {self.n} modes.")
        return bool(self.bits >> mode & 1)

    def with_bit(self, mode: int, value: bool) -> FermionBitstring:
        """Return a copy with the occupation of one mode set to ``value``."""
        if value:
            return FermionBitstring(self.bits | 1 << mode, self.n)
        return FermionBitstring(self.bits & ~(1 << mode), self.n)

    def to_occupation(self) -> tuple[int, ...]:
        """Return the occupation number of each mode."""
        return tuple(self.bits >> i & 1 for i in range(self.n))

    def count(self) -> int:
        """Return the number of occupied modes."""
        return bin(self.bits).count("1")


class OccupationType(Enum):
    """Enumeration for indicating the encoding of occupation states.

    Counts:
        [(0, 1, 1), (1, 0, 1)]

    Bitstring:
        [FermionBitstring(bits=6, n=3), FermionBitstring(bits=5, n=3)]

    String (mode 0 leftmost):
        ["011", "101"]
    """

    COUNTS = auto()
    """Tuple of occupation numbers."""

    BITSTRING = auto()
    """Packed :class:`FermionBitstring`."""

    STRING = auto()
    """String of digits."""


def convert_occupations(
    occupations: Sequence,
    input_type: OccupationType,
    output_type: OccupationType,
) -> list:
    """Convert occupation states from one encoding to another.

    Bitstring and string encodings only support fermionic (0 or 1) occupations.

    Args:
        occupations: The occupation states.
        input_type: The encoding of the input.
        output_type: The desired encoding of the output.

    Returns:
        The converted occupation states.
    """
    if input_type is output_type:
        return list(occupations)

    if input_type is OccupationType.STRING:
        counts = [tuple(int(c) for c in s) for s in cast(Sequence[str], occupations)]
        return convert_occupations(counts, OccupationType.COUNTS, output_type)

    if input_type is OccupationType.BITSTRING:
        counts = [
            fb.to_occupation() for fb in cast(Sequence[FermionBitstring], occupations)
        ]
        return convert_occupations(counts, OccupationType.COUNTS, output_type)

    if output_type is OccupationType.BITSTRING:
        return [FermionBitstring.from_occupation(occ) for occ in occupations]

    if output_type is OccupationType.STRING:
        result = []
        for occ in occupations:
            if any(c != 0 and c != 1 for c in occ):
                raise ValueError(f"Occupations must be 0 or 1. Got {list(occ)}.")
            result.append("".join(str(c) for c in occ))
        return result

    return [tuple(int(c) for c in occ) for occ in occupations]
