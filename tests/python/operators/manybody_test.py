# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Test promotion of single-particle operators to many-body operators."""

from __future__ import annotations

import itertools

import numpy as np
import pytest

import fockspace
from fockspace.operators import one_body_elements, two_body_elements


def _random_matrix(dim: int, seed) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.standard_normal((dim, dim)) + 1j * rng.standard_normal((dim, dim))


@pytest.mark.parametrize(
    "nmodes, nparticles", fockspace.testing.generate_nmodes_nparticles(range(1, 5))
)
def test_identity(nmodes: int, nparticles: int):
    """Test that the promoted identity counts the particles."""
    b = fockspace.GenericBasis(nmodes)
    basis = fockspace.ManyBodyBasis(b, fockspace.fermion_states(b, nparticles))
    op = fockspace.manybody_operator(basis, fockspace.identity_operator(b))
    assert isinstance(op, fockspace.SparseOperator)
    fockspace.testing.assert_operators_allclose(
        op, nparticles * fockspace.identity_operator(basis)
    )


def test_identity_variable_particle_number():
    """Test that the promoted identity is the total number operator."""
    b = fockspace.GenericBasis(3)
    basis = fockspace.ManyBodyBasis(b, fockspace.boson_states(b, range(4)))
    op = fockspace.manybody_operator(basis, fockspace.identity_operator(b))
    fockspace.testing.assert_operators_allclose(op, fockspace.number(basis))


@pytest.mark.parametrize(
    "basis",
    [
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(4), fockspace.fermion_states(4, 2)
        ),
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(3), fockspace.fermion_states(3, range(4))
        ),
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(3), fockspace.boson_states(3, [1, 2])
        ),
    ],
)
def test_one_body(basis: fockspace.ManyBodyBasis):
    """Test promoting a one-body operator."""
    b = basis.onebodybasis
    nmodes = len(b)
    mat = _random_matrix(nmodes, seed=1234)
    dense = fockspace.DenseOperator(b, mat)
    actual = fockspace.manybody_operator(basis, dense)
    assert isinstance(actual, fockspace.DenseOperator)

    expected = np.zeros((len(basis), len(basis)), dtype=complex)
    for i, j in itertools.product(range(nmodes), repeat=2):
        expected += mat[i, j] * fockspace.transition(basis, i, j).to_dense().data
    np.testing.assert_allclose(actual.data, expected, atol=1e-12)

    sparse = fockspace.manybody_operator(basis, dense.to_sparse())
    assert isinstance(sparse, fockspace.SparseOperator)
    fockspace.testing.assert_operators_allclose(sparse, actual, atol=1e-12)


def test_one_body_hermitian():
    """Test that a Hermitian one-body operator gives a Hermitian operator."""
    b = fockspace.GenericBasis(4)
    basis = fockspace.ManyBodyBasis(b, fockspace.fermion_states(b, range(5)))
    op = fockspace.random.random_hermitian(b, density=0.5, seed=2345)
    assert isinstance(op, fockspace.SparseOperator)
    result = fockspace.manybody_operator(basis, op)
    assert fockspace.linalg.is_hermitian(result.data)


def test_one_body_diagonal():
    """Test that a diagonal one-body operator is a weighted number operator."""
    b = fockspace.GenericBasis(3)
    basis = fockspace.ManyBodyBasis(b, fockspace.boson_states(b, 2))
    energies = np.array([0.5, -1.0, 2.0])
    op = fockspace.diagonal_operator(b, energies, dtype=float)
    actual = fockspace.manybody_operator(basis, op)
    expected = energies[0] * fockspace.number(basis, 0)
    for i in range(1, 3):
        expected += energies[i] * fockspace.number(basis, i)
    fockspace.testing.assert_operators_allclose(actual, expected)


def test_adjoint():
    """Test promoting the adjoint of an operator."""
    b = fockspace.GenericBasis(3)
    basis = fockspace.ManyBodyBasis(b, fockspace.fermion_states(b, [1, 2]))
    op = fockspace.DenseOperator(b, _random_matrix(3, seed=3456))
    actual = fockspace.manybody_operator(basis, fockspace.AdjointOperator(op))
    expected = fockspace.manybody_operator(basis, op.dagger())
    fockspace.testing.assert_operators_allclose(actual, expected, atol=1e-12)


@pytest.mark.parametrize(
    "basis",
    [
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(3), fockspace.fermion_states(3, 2)
        ),
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(4), fockspace.fermion_states(4, range(5))
        ),
        fockspace.ManyBodyBasis(
            fockspace.GenericBasis(2), fockspace.boson_states(2, range(4))
        ),
    ],
)
def test_two_body(basis: fockspace.ManyBodyBasis):
    """Test promoting a two-body operator."""
    b = basis.onebodybasis
    nmodes = len(b)
    op = fockspace.random.random_two_body_operator(b, seed=4567)
    assert op.basis == fockspace.tensor(b, b)
    actual = fockspace.manybody_operator(basis, op)
    assert isinstance(actual, fockspace.DenseOperator)

    expected = np.zeros((len(basis), len(basis)), dtype=complex)
    for i, j, k, l in itertools.product(range(nmodes), repeat=4):
        value = op.data[i * nmodes + j, k * nmodes + l]
        transition = fockspace.transition(basis, (i, j), (k, l))
        expected += value * transition.to_dense().data
    np.testing.assert_allclose(actual.data, expected, atol=1e-12)
    assert fockspace.linalg.is_hermitian(actual.data)

    sparse = fockspace.manybody_operator(basis, op.to_sparse())
    fockspace.testing.assert_operators_allclose(sparse, actual, atol=1e-12)


def test_two_body_density_density():
    """Test promoting a density-density interaction."""
    b = fockspace.GenericBasis(2)
    basis = fockspace.ManyBodyBasis(b, fockspace.boson_states(b, 3))
    mat = np.zeros((4, 4))
    for i, j in itertools.product(range(2), repeat=2):
        mat[i * 2 + j, i * 2 + j] = 1
    op = fockspace.DenseOperator(fockspace.tensor(b, b), mat)
    actual = fockspace.manybody_operator(basis, op)
    # sum_ij n_i n_j - n_i = N (N - 1)
    np.testing.assert_allclose(actual.data, 6 * np.eye(len(basis)), atol=1e-12)


def test_mismatched_bases():
    """Test operators over the wrong basis."""
    b = fockspace.GenericBasis(3)
    basis = fockspace.ManyBodyBasis(b, fockspace.fermion_states(b, 1))
    with pytest.raises(ValueError, match="b ⊗ b"):
        fockspace.manybody_operator(
            basis, fockspace.identity_operator(fockspace.GenericBasis(4))
        )
    with pytest.raises(ValueError, match="b ⊗ b"):
        fockspace.manybody_operator(
            basis, fockspace.identity_operator(fockspace.tensor(b, b, b))
        )
    with pytest.raises(ValueError, match="equal left and right"):
        fockspace.manybody_operator(
            basis,
            fockspace.DenseOperator(b, np.zeros((3, 2)), fockspace.GenericBasis(2)),
        )


def test_one_body_elements():
    """Test iterating over the nonzero elements of an operator."""
    b = fockspace.GenericBasis(3)
    mat = np.array([[0, 1, 0], [0, 0, 0], [2j, 0, 3]])
    dense = fockspace.DenseOperator(b, mat)
    expected = [(0, 1, 1), (2, 0, 2j), (2, 2, 3)]
    assert list(one_body_elements(dense)) == expected
    sparse = dense.to_sparse()
    assert sorted(one_body_elements(sparse), key=lambda t: t[:2]) == expected


def test_two_body_elements():
    """Test iterating over the nonzero elements of a two-body operator."""
    b = fockspace.GenericBasis(2)
    mat = np.zeros((4, 4))
    mat[1, 2] = 5
    op = fockspace.DenseOperator(fockspace.tensor(b, b), mat)
    assert list(two_body_elements(op, 2)) == [(0, 1, 1, 0, 5)]
    with pytest.raises(ValueError, match="shape"):
        list(two_body_elements(op, 3))
