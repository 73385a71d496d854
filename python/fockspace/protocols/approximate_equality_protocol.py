# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Approximate equality protocol."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
import scipy.sparse


class SupportsApproximateEquality(Protocol):
    """An operator or matrix that can be compared within numerical tolerances."""

    def _approx_eq_(self, other: Any, rtol: float, atol: float) -> bool:
        """Compare to ``other``, returning NotImplemented for unknown types."""


def approx_eq(obj: Any, other: Any, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
    """Return whether two operators or matrices agree within tolerance.

    Each argument is asked in turn to compare itself with the other through its
    ``_approx_eq_`` method. Operators over different bases are never equal. If
    neither argument handles the comparison, NumPy arrays and SciPy sparse arrays
    are compared entrywise, and anything else falls back to ``==``. The tolerances
    have the meaning of :func:`numpy.isclose`.

    Args:
        obj: The first operator or matrix.
        other: The second operator or matrix.
        rtol: Relative numerical tolerance.
        atol: Absolute numerical tolerance.

    Returns:
        Whether the two arguments are approximately equal.
    """
    for a, b in ((obj, other), (other, obj)):
        compare = getattr(a, "_approx_eq_", None)
        if compare is None:
            continue
        result = compare(b, rtol=rtol, atol=atol)
        if result is not NotImplemented:
            return result

    if _is_matrix(obj) and _is_matrix(other):
        a = _to_array(obj)
        b = _to_array(other)
        return a.shape == b.shape and np.allclose(a, b, rtol=rtol, atol=atol)

    return obj == other


def _is_matrix(obj: Any) -> bool:
    return isinstance(obj, np.ndarray) or scipy.sparse.issparse(obj)


def _to_array(obj: Any) -> np.ndarray:
    return obj.toarray() if scipy.sparse.issparse(obj) else obj
