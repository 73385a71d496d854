# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Sorted containers of occupation states."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any, Optional, overload


def _identity(x):
    return x


class SortedVector(Sequence):
    """An immutable sorted sequence of distinct elements.

    The ordering is given by ``key`` and ``reverse``, with the same meaning as in
    the builtin :func:`sorted`. Elements that compare equal are stored only once.
    Membership and position lookups use binary search.

    Args:
        elements: The elements. They are sorted if they are not already sorted.
        key: A function computing the sort key of an element.
        reverse: Whether to sort in descending order.
    """

    def __init__(
        self,
        elements: Iterable[Hashable] = (),
        *,
        key: Optional[Callable[[Any], Any]] = None,
        reverse: bool = False,
    ) -> None:
        self._key = key
        self._reverse = reverse
        key_func = _identity if key is None else key
        items = list(elements)
        keys = [key_func(x) for x in items]
        if not _is_sorted(keys, reverse=reverse):
            order = sorted(range(len(items)), key=keys.__getitem__, reverse=reverse)
            items = [items[i] for i in order]
            keys = [keys[i] for i in order]
        self._items: tuple = tuple(_unique(items))
        if len(self._items) != len(keys):
            keys = [key_func(x) for x in self._items]
        self._keys: tuple = tuple(keys)

    @property
    def key(self) -> Optional[Callable[[Any], Any]]:
        """The sort key function."""
        return self._key

    @property
    def reverse(self) -> bool:
        """Whether the elements are sorted in descending order."""
        return self._reverse

    @overload
    def __getitem__(self, index: int) -> Any: ...
    @overload
    def __getitem__(self, index: slice) -> tuple: ...
    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SortedVector):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __or__(self, other: SortedVector) -> SortedVector:
        if not isinstance(other, SortedVector):
            return NotImplemented
        return self.union(other)

    def __repr__(self) -> str:
        return f"SortedVector({list(self._items)!r}, reverse={self._reverse})"

    def find(self, value: Any) -> Optional[int]:
        """Return the position of an element, or None if it is not present.

        Args:
            value: The element to look up.

        Returns:
            The index of the element, or None.
        """
        key = value if self._key is None else self._key(value)
        keys = self._keys
        lo, hi = 0, len(keys)
        try:
            while lo < hi:
                mid = (lo + hi) // 2
                if (keys[mid] > key) if self._reverse else (keys[mid] < key):
                    lo = mid + 1
                else:
                    hi = mid
        except TypeError:
            # not comparable with the stored elements
            return None
        if lo < len(keys) and self._items[lo] == value:
            return lo
        return None

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        """Return the position of an element.

        Raises:
            ValueError: The element is not present.
        """
        i = self.find(value)
        if i is None or i < start or (stop is not None and i >= stop):
            raise ValueError(f"{value!r} is not in SortedVector.")
        return i

    def union(self, *others: SortedVector) -> SortedVector:
        """Merge with other sorted vectors.

        The result uses the ordering of this vector.

        Args:
            others: The sorted vectors to merge with.

        Returns:
            A new sorted vector holding every distinct element of the inputs.
        """
        elements = list(self._items)
        for other in others:
            elements.extend(other)
        return SortedVector(elements, key=self._key, reverse=self._reverse)


def state_index(occupations: Sequence, state: Any) -> Optional[int]:
    """Return the position of a state in a sequence of occupations.

    A :class:`SortedVector` is searched by bisection, any other sequence linearly.

    Args:
        occupations: The occupation states.
        state: The state to look up.

    Returns:
        The index of the state, or None if it is not present.
    """
    if isinstance(occupations, SortedVector):
        return occupations.find(state)
    for i, occ in enumerate(occupations):
        if occ == state:
            return i
    return None


def _is_sorted(keys: Sequence, reverse: bool) -> bool:
    if reverse:
        return all(a >= b for a, b in zip(keys, keys[1:]))
    return all(a <= b for a, b in zip(keys, keys[1:]))


def _unique(items: list) -> Iterator:
    # items are sorted, so duplicates are adjacent
    for i, item in enumerate(items):
        if i and items[i - 1] == item:
            continue
        yield item
