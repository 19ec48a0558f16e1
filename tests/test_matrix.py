"""Test dense materialization and the category laws using pytest."""

import itertools

import numpy as np
import pytest

from lincat.kernel.errors import ShapeMismatchError, UndefinedDimensionError
from lincat.kernel.spaces import UNIT
from lincat.laws import (
    check_associativity,
    check_composition,
    check_distributivity,
    check_fanin,
    check_fanout,
    check_identity,
    check_scaling,
    maps_equal,
)
from lincat.linear import (
    CaseSplit,
    EvalFamily,
    LinearCategory,
    Pair,
    Scaled,
    Zero,
    family,
    from_matrix,
    materialize,
)
from samples import P, PS, S, SP, SPACES, random_map, structural_maps

cat = LinearCategory()


def test_projections_materialize_as_row_selectors() -> None:
    """Projections select rows."""
    np.testing.assert_array_equal(materialize(cat.proj1(S, S)), [[1.0, 0.0]])
    np.testing.assert_array_equal(materialize(cat.proj2(S, S)), [[0.0, 1.0]])


def test_injections_materialize_as_columns() -> None:
    """Injections are unit columns."""
    np.testing.assert_array_equal(materialize(cat.inl(S, S)), [[1.0], [0.0]])
    np.testing.assert_array_equal(materialize(cat.inr(S, S)), [[0.0], [1.0]])


def test_block_layout() -> None:
    """Pairs stack vertically and case-splits sit side by side."""
    a, b = Scaled(2.0, S), Scaled(3.0, S)
    np.testing.assert_array_equal(materialize(Pair(a, b)), [[2.0], [3.0]])
    np.testing.assert_array_equal(materialize(CaseSplit(a, b)), [[2.0, 3.0]])
    np.testing.assert_array_equal(materialize(Scaled(4.0, P)), 4.0 * np.eye(2))
    assert materialize(Zero(PS, S)).shape == (1, 3)


def test_unit_gives_empty_matrices() -> None:
    """Maps to or from Unit have an empty axis."""
    assert materialize(cat.terminal(P)).shape == (0, 2)
    assert materialize(cat.initial(S)).shape == (1, 0)
    assert materialize(cat.identity(UNIT)).shape == (0, 0)


def test_families_have_no_matrix() -> None:
    """Any family node prevents materialization."""
    fam = family(lambda k: Scaled(float(k), S), S, int, S)
    with pytest.raises(UndefinedDimensionError):
        materialize(fam)
    with pytest.raises(UndefinedDimensionError):
        materialize(Pair(EvalFamily(1, fam), Zero(S, S)))


def test_from_matrix_recovers_the_matrix() -> None:
    """from_matrix followed by materialize is the identity."""
    m = np.array([[1.0, 0.0, 2.0], [0.0, 0.0, 0.0], [3.0, 4.0, 5.0]])
    f = from_matrix(m, PS, SP)
    assert f.dom == PS and f.cod == SP
    np.testing.assert_array_equal(materialize(f), m)


def test_from_matrix_uses_zero_blocks() -> None:
    """All-zero blocks become Zero nodes."""
    assert from_matrix(np.zeros((2, 2)), P, P) == Zero(P, P)
    f = from_matrix(np.array([[1.0, 2.0], [0.0, 0.0]]), P, P)
    assert isinstance(f, Pair)
    assert f.right == Zero(P, S)


def test_from_matrix_checks_shape() -> None:
    """from_matrix rejects the wrong shape."""
    with pytest.raises(ShapeMismatchError):
        from_matrix(np.zeros((2, 3)), P, P)


def test_identity_law() -> None:
    """Test the identity law on random and hand-built maps."""
    for dom, cod in itertools.product(SPACES, repeat=2):
        assert check_identity(cat, random_map(dom, cod, seed=3))
    for f in structural_maps():
        assert check_identity(cat, f)


def test_associativity_law() -> None:
    """Test associativity on random and hand-built maps."""
    for seed, (a, b, c, d) in enumerate([(S, P, PS, S), (P, P, P, P), (UNIT, S, SP, P), (PS, S, UNIT, SP)]):
        f = random_map(a, b, seed)
        g = random_map(b, c, seed + 10)
        h = random_map(c, d, seed + 20)
        assert check_associativity(cat, h, g, f)
    maps = structural_maps()
    for h, g, f in zip(maps, maps[1:], maps[2:]):
        assert check_associativity(cat, h, g, f)


def test_composition_matches_matrix_product() -> None:
    """The algebra agrees with matrix multiplication."""
    for seed, (a, b, c) in enumerate(itertools.product([S, P, PS], repeat=3)):
        f = random_map(a, b, seed)
        g = random_map(b, c, seed + 100)
        assert check_composition(g, f)
    for g, f in itertools.product(structural_maps(), repeat=2):
        assert check_composition(g, f)


def test_scaling_is_a_homomorphism() -> None:
    """Scaling commutes with materialization."""
    for k in (0.0, -1.0, 2.5):
        for f in structural_maps():
            assert check_scaling(k, f)
        assert check_scaling(k, random_map(PS, SP, seed=7))


def test_fanout_and_fanin_laws() -> None:
    """Test the universal properties of fanout and fanin."""
    f, g = random_map(P, S, 1), random_map(P, PS, 2)
    assert check_fanout(cat, f, g)
    h, k = random_map(S, P, 3), random_map(PS, P, 4)
    assert check_fanin(cat, h, k)


def test_distributivity() -> None:
    """undistr after distr is the identity."""
    assert check_distributivity(cat, S, S, S)
    assert check_distributivity(cat, P, S, UNIT)
    assert check_distributivity(cat, S, P, P)


def test_maps_equal_compares_spaces_first() -> None:
    """maps_equal needs matching spaces and matrices."""
    assert maps_equal(Scaled(1.0, P), cat.fanout(cat.proj1(S, S), cat.proj2(S, S)))
    assert not maps_equal(Zero(S, P), Zero(P, S))
    assert not maps_equal(Scaled(1.0, S), Scaled(1.1, S))
