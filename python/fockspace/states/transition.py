# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Application of ladder operators to occupation states."""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from typing import Optional, Union

from fockspace.states.bitstring import FermionBitstring

Modes = Union[int, Sequence[int]]


class CountBuffer:
    """Scratch space holding the occupation numbers of one state."""

    __slots__ = ("counts",)

    def __init__(self, nmodes: int) -> None:
        self.counts = [0] * nmodes

    def state(self) -> tuple[int, ...]:
        """Return the stored occupation state."""
        return tuple(self.counts)


class BitstringBuffer:
    """Scratch space holding one packed fermionic occupation state."""

    __slots__ = ("bits",)

    def __init__(self, bits: Optional[FermionBitstring] = None) -> None:
        self.bits = bits

    def state(self) -> Optional[FermionBitstring]:
        """Return the stored occupation state."""
        return self.bits


TransitionBuffer = Union[CountBuffer, BitstringBuffer]


def allocate_buffer(occupations: Sequence) -> TransitionBuffer:
    """Allocate a scratch buffer suitable for the given occupation states.

    A buffer must only be used by a single caller at a time.

    Args:
        occupations: The occupation states the buffer will be used with.

    Returns:
        A buffer matching the encoding of the occupation states.
    """
    if not occupations:
        return CountBuffer(0)
    first = occupations[0]
    if isinstance(first, FermionBitstring):
        return BitstringBuffer(first)
    return CountBuffer(len(first))


def state_transition(
    buffer: TransitionBuffer,
    occupation: Sequence[int] | FermionBitstring,
    create: Modes,
    destroy: Modes,
) -> Optional[float]:
    r"""Apply a product of ladder operators to an occupation state.

    Computes :math:`a^\dagger_{c_1} a^\dagger_{c_2} \ldots a_{d_2} a_{d_1}|n\rangle`
    where the annihilation operators act first, in the order given, followed by
    the creation operators in the order given. The resulting occupation state is
    written to ``buffer``.

    For occupation numbers the amplitude follows the bosonic ladder algebra,
    :math:`a|n\rangle = \sqrt{n}|n-1\rangle` and
    :math:`a^\dagger|n\rangle = \sqrt{n+1}|n+1\rangle`. For fermionic bitstrings
    the amplitude is always one. In neither case is a fermionic exchange sign
    applied.

    Args:
        buffer: The scratch buffer receiving the resulting state. Its previous
            content is discarded.
        occupation: The initial occupation state.
        create: The mode or modes in which to create a particle.
        destroy: The mode or modes in which to annihilate a particle.

    Returns:
        The amplitude of the resulting state, or None if the result vanishes.

    Raises:
        IndexError: A mode index is out of range.
    """
    if isinstance(create, numbers.Integral):
        create = (create,)
    if isinstance(destroy, numbers.Integral):
        destroy = (destroy,)
    check_modes(create, len(occupation))
    check_modes(destroy, len(occupation))
    if isinstance(occupation, FermionBitstring):
        return _bitstring_transition(buffer, occupation, create, destroy)
    return _count_transition(buffer, occupation, create, destroy)


def _count_transition(
    buffer: TransitionBuffer,
    occupation: Sequence[int],
    create: Sequence[int],
    destroy: Sequence[int],
) -> Optional[float]:
    if not isinstance(buffer, CountBuffer):
        raise TypeError(f"Expected a CountBuffer, got {type(buffer).__name__}.")
    counts = buffer.counts
    counts[:] = occupation
    result = 1
    for i in destroy:
        if counts[i] == 0:
            return None
        result *= counts[i]
        counts[i] -= 1
    for i in create:
        counts[i] += 1
        result *= counts[i]
    return math.sqrt(result)


def _bitstring_transition(
    buffer: TransitionBuffer,
    occupation: FermionBitstring,
    create: Sequence[int],
    destroy: Sequence[int],
) -> Optional[float]:
    if not isinstance(buffer, BitstringBuffer):
        raise TypeError(f"Expected a BitstringBuffer, got {type(buffer).__name__}.")
    for i in destroy:
        if not occupation[i]:
            return None
        occupation = occupation.with_bit(i, False)
    for i in create:
        if occupation[i]:
            return None
        occupation = occupation.with_bit(i, True)
    buffer.bits = occupation
    return 1.0


def check_modes(modes: Sequence[int], nmodes: int) -> None:
    """Raise IndexError unless every mode index lies in ``range(nmodes)``."""
    for i in modes:
        if not 0 <= i < nmodes:
            raise IndexError(f"Mode index {i} out of range for {nmodes} modes.")
