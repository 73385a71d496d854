# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Generation of occupation number states."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable
from typing import Any, Optional

from fockspace.states.sorted_vector import SortedVector

logger = logging.getLogger(__name__)


def fermion_states(nmodes: int | Any, nparticles: int | Iterable[int]) -> SortedVector:
    """Generate all fermionic occupation states of N particles in M modes.

    Example:

    .. code::

        import fockspace

        fockspace.fermion_states(3, 2)
        # output:
        # SortedVector([(1, 1, 0), (1, 0, 1), (0, 1, 1)], reverse=True)

    Args:
        nmodes: The number of modes, or a single-particle basis whose length gives
            the number of modes.
        nparticles: The number of particles. Pass an iterable of integers to
            define a Hilbert space with variable particle number.

    Returns:
        The occupation states, as tuples of 0s and 1s.
    """
    return _states(nmodes, nparticles, max_occupation=1)


def boson_states(nmodes: int | Any, nparticles: int | Iterable[int]) -> SortedVector:
    """Generate all bosonic occupation states of N particles in M modes.

    Example:

    .. code::

        import fockspace

        fockspace.boson_states(2, 2)
        # output:
        # SortedVector([(2, 0), (1, 1), (0, 2)], reverse=True)

    Args:
        nmodes: The number of modes, or a single-particle basis whose length gives
            the number of modes.
        nparticles: The number of particles. Pass an iterable of integers to
            define a Hilbert space with variable particle number.

    Returns:
        The occupation states, as tuples of non-negative integers.
    """
    return _states(nmodes, nparticles, max_occupation=None)


def _states(
    nmodes: int | Any,
    nparticles: int | Iterable[int],
    max_occupation: Optional[int],
) -> SortedVector:
    if not isinstance(nmodes, numbers.Integral):
        nmodes = len(nmodes)
    if isinstance(nparticles, numbers.Integral):
        nmodes, nparticles = int(nmodes), int(nparticles)
        states = _distribute(nparticles, nmodes, max_occupation)
        logger.debug(
            "Generated %d occupation states of %d particles in %d modes",
            len(states),
            nparticles,
            nmodes,
        )
        return SortedVector(states, reverse=True)
    vectors = [_states(nmodes, n, max_occupation) for n in nparticles]
    if not vectors:
        return SortedVector(reverse=True)
    first, *rest = vectors
    return first.union(*rest)


def _distribute(
    nparticles: int, nmodes: int, max_occupation: Optional[int]
) -> list[tuple[int, ...]]:
    """Distribute particles over modes by depth-first search.

    Counts for each mode are tried in descending order. The last mode receives
    every remaining particle. If ``max_occupation`` is given, branches in which
    the remaining modes cannot hold the remaining particles are pruned.
    """
    if nparticles < 0:
        return []
    if nmodes == 0:
        return [()] if nparticles == 0 else []
    results: list[tuple[int, ...]] = []
    stack: list[tuple[tuple[int, ...], int]] = [((), nparticles)]
    while stack:
        prefix, remaining = stack.pop()
        index = len(prefix)
        if max_occupation is not None and nmodes - index < remaining:
            continue
        if index == nmodes - 1:
            results.append(prefix + (remaining,))
            continue
        top = remaining if max_occupation is None else min(max_occupation, remaining)
        # pushed in ascending order so the largest count is popped first
        for n in range(top + 1):
            stack.append((prefix + (n,), remaining - n))
    return results
