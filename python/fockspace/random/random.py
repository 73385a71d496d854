# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Random operators and states."""

from __future__ import annotations

from typing import Any

import numpy as np
import scipy.sparse

from fockspace.bases import tensor
from fockspace.operators.operator import DenseOperator, SparseOperator
from fockspace.states.states import Ket


def random_ket(basis: Any, *, seed=None, dtype=complex) -> Ket:
    """Return a random normalized ket sampled from the uniform distribution.

    Args:
        basis: The basis of the state.
        seed: A seed to initialize the pseudorandom number generator.
            Should be a valid input to ``np.random.default_rng``.
        dtype: The data type to use for the result.

    Returns:
        The sampled ket.

    Raises:
        ValueError: Dimension must be at least one.
    """
    dim = len(basis)
    if dim < 1:
        raise ValueError("Dimension must be at least one.")

    rng = np.random.default_rng(seed)
    vec = rng.standard_normal(dim).astype(dtype, copy=False)
    if np.issubdtype(dtype, np.complexfloating):
        vec += 1j * rng.standard_normal(dim).astype(dtype, copy=False)
    vec /= np.linalg.norm(vec)
    return Ket(basis, vec)


def random_density_operator(basis: Any, *, seed=None, dtype=complex) -> DenseOperator:
    """Return a random density operator distributed with Hilbert-Schmidt measure.

    A density operator is positive semi-definite and has trace equal to one.

    Args:
        basis: The basis of the operator.
        seed: A seed to initialize the pseudorandom number generator.
            Should be a valid input to ``np.random.default_rng``.
        dtype: The data type to use for the result.

    Returns:
        The sampled density operator.

    Raises:
        ValueError: Dimension must be at least one.

    References:
        - `arXiv:0909.5094`_

    .. _arXiv:0909.5094: https://arxiv.org/abs/0909.5094
    """
    dim = len(basis)
    if dim < 1:
        raise ValueError("Dimension must be at least one.")

    rng = np.random.default_rng(seed)
    mat = rng.standard_normal((dim, dim)).astype(dtype, copy=False)
    if np.issubdtype(dtype, np.complexfloating):
        mat += 1j * rng.standard_normal((dim, dim))
    mat @= mat.T.conj()
    mat /= np.trace(mat)
    return DenseOperator(basis, mat)


def random_hermitian(
    basis: Any, *, density: float = 1.0, seed=None, dtype=complex
) -> DenseOperator | SparseOperator:
    """Return a random Hermitian operator.

    Args:
        basis: The basis of the operator.
        density: The fraction of nonzero entries. If less than one, a sparse
            operator is returned.
        seed: A seed to initialize the pseudorandom number generator.
            Should be a valid input to ``np.random.default_rng``.
        dtype: The data type to use for the result.

    Returns:
        The sampled Hermitian operator.
    """
    dim = len(basis)
    rng = np.random.default_rng(seed)
    mat = rng.standard_normal((dim, dim)).astype(dtype, copy=False)
    if np.issubdtype(dtype, np.complexfloating):
        mat += 1j * rng.standard_normal((dim, dim)).astype(dtype, copy=False)
    if density < 1:
        mat *= rng.random((dim, dim)) < density
        return SparseOperator(basis, scipy.sparse.csr_array(mat + mat.T.conj()))
    return DenseOperator(basis, mat + mat.T.conj())


def random_two_body_operator(
    onebodybasis: Any, *, density: float = 1.0, seed=None, dtype=complex
) -> DenseOperator | SparseOperator:
    """Return a random Hermitian two-body operator.

    The operator acts on the tensor product of ``onebodybasis`` with itself and is
    symmetric under exchange of the two particles.

    Args:
        onebodybasis: The single-particle basis.
        density: The fraction of nonzero entries before symmetrization. If less
            than one, a sparse operator is returned.
        seed: A seed to initialize the pseudorandom number generator.
            Should be a valid input to ``np.random.default_rng``.
        dtype: The data type to use for the result.

    Returns:
        The sampled two-body operator.
    """
    nmodes = len(onebodybasis)
    op = random_hermitian(
        tensor(onebodybasis, onebodybasis), density=density, seed=seed, dtype=dtype
    )
    mat = op.to_dense().data.reshape((nmodes,) * 4)
    # symmetrize under simultaneous exchange of both particle indices
    mat = 0.5 * (mat + mat.transpose(1, 0, 3, 2))
    data = mat.reshape((nmodes**2, nmodes**2))
    if isinstance(op, SparseOperator):
        return SparseOperator(op.basis, scipy.sparse.csr_array(data))
    return DenseOperator(op.basis, data)
