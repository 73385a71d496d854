# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Linear algebra utilities."""

from __future__ import annotations

import numpy as np
import scipy.sparse


def one_hot(shape: int | tuple[int, ...], index, *, dtype=complex) -> np.ndarray:
    """Return an array of all zeros except for a one at a specified index.

    Args:
        shape: The desired shape of the array.
        index: The index at which to place a one.

    Returns:
        The one-hot vector.
    """
    vec = np.zeros(shape, dtype=dtype)
    vec[index] = 1
    return vec


def _dense(mat) -> np.ndarray:
    if scipy.sparse.issparse(mat):
        return mat.toarray()
    return np.asarray(mat)


def is_hermitian(mat, *, rtol: float = 1e-5, atol: float = 1e-8) -> bool:
    """Determine if a matrix is approximately Hermitian.

    Args:
        mat: The matrix, dense or sparse.
        rtol: Relative numerical tolerance.
        atol: Absolute numerical tolerance.

    Returns:
        Whether the matrix is Hermitian within the given tolerance.
    """
    mat = _dense(mat)
    m, n = mat.shape
    return m == n and np.allclose(mat, mat.T.conj(), rtol=rtol, atol=atol)


def is_diagonal(mat, *, atol: float = 1e-8) -> bool:
    """Determine if a matrix is approximately diagonal.

    Args:
        mat: The matrix, dense or sparse.
        atol: Absolute numerical tolerance.

    Returns:
        Whether all off-diagonal entries vanish within the given tolerance.
    """
    mat = _dense(mat)
    m, n = mat.shape
    if m != n:
        return False
    off_diagonal = mat - np.diag(np.diagonal(mat))
    return bool(np.allclose(off_diagonal, 0, atol=atol))
