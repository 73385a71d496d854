# (C) Copyright IBM 2025.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Test creation, annihilation, number and transition operators."""

from __future__ import annotations

import itertools
import math

import numpy as np
import pytest

import fockspace


def _fermion_basis(nmodes: int, nparticles) -> fockspace.ManyBodyBasis:
    return fockspace.ManyBodyBasis(
        fockspace.GenericBasis(nmodes), fockspace.fermion_states(nmodes, nparticles)
    )


def _boson_basis(nmodes: int, nparticles) -> fockspace.ManyBodyBasis:
    return fockspace.ManyBodyBasis(
        fockspace.GenericBasis(nmodes), fockspace.boson_states(nmodes, nparticles)
    )


def test_create_leaves_fixed_particle_number_basis():
    """Test that creating a particle in a fixed-N basis gives zero."""
    basis = _fermion_basis(2, 1)
    op = fockspace.create(basis, 0)
    assert isinstance(op, fockspace.SparseOperator)
    assert op.shape == (2, 2)
    assert op.data.count_nonzero() == 0


def test_create_variable_particle_number():
    """Test creating a fermion in a basis with variable particle number."""
    basis = _fermion_basis(2, [0, 1, 2])
    assert len(basis) == 4
    mat = fockspace.create(basis, 0).to_dense().data
    occupations = basis.occupations
    row = occupations.index((1, 1))
    col = occupations.index((0, 1))
    assert mat[row, col] == 1
    assert mat[occupations.index((1, 0)), occupations.index((0, 0))] == 1
    assert np.count_nonzero(mat) == 2


def test_destroy_bosons():
    """Test annihilating a boson."""
    basis = _boson_basis(1, 3)
    assert list(basis.occupations) == [(3,)]
    assert fockspace.destroy(basis, 0).data.count_nonzero() == 0

    basis = _boson_basis(1, range(4))
    mat = fockspace.destroy(basis, 0).to_dense().data
    occupations = basis.occupations
    assert mat[occupations.index((2,)), occupations.index((3,))] == pytest.approx(
        math.sqrt(3)
    )
    for n in range(1, 4):
        row = occupations.index((n - 1,))
        col = occupations.index((n,))
        assert mat[row, col] == pytest.approx(math.sqrt(n))
    assert np.count_nonzero(mat) == 3


@pytest.mark.parametrize("nmodes", range(1, 5))
def test_fermion_anticommutator(nmodes: int):
    """Test the anticommutator of a fermion mode on the full Fock space."""
    basis = _fermion_basis(nmodes, range(nmodes + 1))
    eye = fockspace.identity_operator(basis)
    for i in range(nmodes):
        a = fockspace.destroy(basis, i)
        a_dag = fockspace.create(basis, i)
        fockspace.testing.assert_operators_allclose(a @ a_dag + a_dag @ a, eye)
        fockspace.testing.assert_operators_allclose(a_dag, a.dagger())


@pytest.mark.parametrize("nmodes, max_nparticles", [(1, 4), (2, 3), (3, 2)])
def test_boson_commutator(nmodes: int, max_nparticles: int):
    """Test the commutator of a boson mode below the particle number cutoff."""
    basis = _boson_basis(nmodes, range(max_nparticles + 1))
    below_cutoff = basis.total_particle_numbers() < max_nparticles
    for i in range(nmodes):
        a = fockspace.destroy(basis, i)
        a_dag = fockspace.create(basis, i)
        comm = (a @ a_dag - a_dag @ a).to_dense().data
        assert fockspace.linalg.is_diagonal(comm)
        np.testing.assert_allclose(np.diag(comm)[below_cutoff], 1)
        fockspace.testing.assert_operators_allclose(a_dag, a.dagger())


def test_number():
    """Test mode and total number operators."""
    basis = _boson_basis(3, range(3))
    total = fockspace.number(basis)
    np.testing.assert_array_equal(
        total.to_dense().data.diagonal(), basis.total_particle_numbers()
    )
    modes = [fockspace.number(basis, i) for i in range(3)]
    fockspace.testing.assert_operators_allclose(modes[0] + modes[1] + modes[2], total)
    for i, n in enumerate(modes):
        a = fockspace.destroy(basis, i)
        fockspace.testing.assert_operators_allclose(a.dagger() @ a, n, atol=1e-12)
        np.testing.assert_array_equal(
            n.to_dense().data.diagonal(), [occ[i] for occ in basis.occupations]
        )


@pytest.mark.parametrize("nmodes, nparticles", [(3, 1), (3, 2), (4, 2)])
def test_transition_single(nmodes: int, nparticles: int):
    """Test hopping between modes at fixed particle number."""
    basis = _fermion_basis(nmodes, nparticles)
    occupations = basis.occupations
    for i, j in itertools.product(range(nmodes), repeat=2):
        mat = fockspace.transition(basis, i, j).to_dense().data
        expected = np.zeros_like(mat)
        for col, occ in enumerate(occupations):
            if not occ[j]:
                continue
            target = list(occ)
            target[j] = 0
            if target[i]:
                continue
            target[i] = 1
            expected[occupations.index(tuple(target)), col] = 1
        np.testing.assert_array_equal(mat, expected)


@pytest.mark.parametrize(
    "basis",
    [
        _fermion_basis(3, range(4)),
        _boson_basis(2, range(5)),
    ],
)
def test_transition_matches_ladder_products(basis: fockspace.ManyBodyBasis):
    """Test that a transition equals the product of ladder operators."""
    nmodes = len(basis.onebodybasis)
    create = [fockspace.create(basis, i) for i in range(nmodes)]
    destroy = [fockspace.destroy(basis, i) for i in range(nmodes)]
    for i, j, k, l in itertools.product(range(nmodes), repeat=4):
        actual = fockspace.transition(basis, (i, j), (k, l))
        expected = create[i] @ create[j] @ destroy[l] @ destroy[k]
        fockspace.testing.assert_operators_allclose(actual, expected, atol=1e-12)


def test_transition_empty():
    """Test that the empty transition is the identity."""
    basis = _boson_basis(2, range(3))
    fockspace.testing.assert_operators_allclose(
        fockspace.transition(basis, (), ()), fockspace.identity_operator(basis)
    )


@pytest.mark.parametrize("nmodes", range(1, 5))
def test_bitstring_basis(nmodes: int):
    """Test that bitstring and count bases give the same operators."""
    basis = _fermion_basis(nmodes, range(nmodes + 1))
    packed = basis.to_bitstrings()
    perm = [basis.occupations.index(fb.to_occupation()) for fb in packed.occupations]
    for i, j in itertools.product(range(nmodes), repeat=2):
        expected = fockspace.transition(basis, i, j).to_dense().data
        actual = fockspace.transition(packed, i, j).to_dense().data
        np.testing.assert_array_equal(actual, expected[np.ix_(perm, perm)])
    for i in range(nmodes):
        expected = fockspace.create(basis, i).to_dense().data
        actual = fockspace.create(packed, i).to_dense().data
        np.testing.assert_array_equal(actual, expected[np.ix_(perm, perm)])
        expected = fockspace.number(basis, i).to_dense().data
        actual = fockspace.number(packed, i).to_dense().data
        np.testing.assert_array_equal(actual, expected[np.ix_(perm, perm)])


def test_dtype():
    """Test the data type of ladder operators."""
    basis = _boson_basis(2, range(3))
    assert fockspace.create(basis, 0).data.dtype == complex
    assert fockspace.destroy(basis, 0, dtype=float).data.dtype == float
    assert fockspace.number(basis, dtype=float).data.dtype == float


@pytest.mark.parametrize("mode", [-1, 3])
def test_mode_out_of_range(mode: int):
    """Test that ladder operators reject mode indices outside the system."""
    basis = _fermion_basis(3, range(4))
    for b in [basis, basis.to_bitstrings(), _fermion_basis(3, [])]:
        with pytest.raises(IndexError, match="out of range"):
            fockspace.create(b, mode)
        with pytest.raises(IndexError, match="out of range"):
            fockspace.destroy(b, mode)
        with pytest.raises(IndexError, match="out of range"):
            fockspace.number(b, mode)
        with pytest.raises(IndexError, match="out of range"):
            fockspace.transition(b, (0, mode), (1, 2))
