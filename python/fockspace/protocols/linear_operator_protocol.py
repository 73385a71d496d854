# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Linear operator protocol."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np
import scipy.sparse
from scipy.sparse.linalg import LinearOperator, aslinearoperator


class SupportsLinearOperator(Protocol):
    """An object that can be converted to a SciPy LinearOperator."""

    def _linear_operator_(self) -> LinearOperator:
        """Return a SciPy LinearOperator representing the object.

        Returns:
            A SciPy LinearOperator representing the object.
        """


def linear_operator(obj: Any) -> LinearOperator:
    """Return a SciPy LinearOperator representing the object.

    Besides objects implementing the ``_linear_operator_`` method, NumPy arrays and
    SciPy sparse matrices are accepted.

    Args:
        obj: The object to convert to a LinearOperator.

    Returns:
        A SciPy LinearOperator representing the object.

    Raises:
        TypeError: The object cannot be converted to a LinearOperator.
    """
    method = getattr(obj, "_linear_operator_", None)
    if method is not None:
        return method()

    if isinstance(obj, np.ndarray) or scipy.sparse.issparse(obj):
        return aslinearoperator(obj)

    raise TypeError(f"Object of type {type(obj)} has no _linear_operator_ method.")
