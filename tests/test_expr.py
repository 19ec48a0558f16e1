"""Test construction of linear-map expressions."""

import pytest

from lincat.kernel.errors import ShapeMismatchError
from lincat.kernel.spaces import FunctionSpace
from lincat.linear import (
    CaseSplit,
    EvalFamily,
    Pair,
    Scaled,
    Sum,
    Zero,
    add,
    case_split,
    contains_family,
    eval_family,
    family,
    pair,
    scaled_identity,
    zero_map,
)
from samples import P, PS, S, SP


def test_zero_map_and_scaled_identity() -> None:
    """Leaf constructors carry their spaces."""
    z = zero_map(P, S)
    assert z == Zero(P, S)
    assert (z.dom, z.cod) == (P, S)
    k = scaled_identity(3, P)
    assert k == Scaled(3.0, P)
    assert isinstance(k.factor, float)
    assert (k.dom, k.cod) == (P, P)


def test_pair_builds_a_product_codomain() -> None:
    """pair shares the domain and multiplies codomains."""
    f = pair(scaled_identity(2, S), zero_map(S, P))
    assert isinstance(f, Pair)
    assert f.dom == S
    assert f.cod == SP


def test_case_split_builds_a_product_domain() -> None:
    """case_split shares the codomain and multiplies domains."""
    f = case_split(zero_map(P, S), scaled_identity(1, S))
    assert isinstance(f, CaseSplit)
    assert f.dom == PS
    assert f.cod == S


def test_add_needs_equal_spaces() -> None:
    """add keeps the spaces of its operands."""
    f = add(scaled_identity(1, P), zero_map(P, P))
    assert isinstance(f, Sum)
    assert (f.dom, f.cod) == (P, P)
    with pytest.raises(ShapeMismatchError):
        add(scaled_identity(1, P), zero_map(S, P))


def test_pair_and_case_split_validate() -> None:
    """Mismatched shared spaces are rejected at construction."""
    with pytest.raises(ShapeMismatchError):
        pair(zero_map(S, S), zero_map(P, S))
    with pytest.raises(ShapeMismatchError):
        case_split(zero_map(S, S), zero_map(S, P))


def test_eval_family_needs_a_function_space() -> None:
    """eval_family exposes the target of the family's function space."""
    fam = family(lambda k: scaled_identity(k, S), S, int, S)
    assert fam.cod == FunctionSpace(int, S)
    evaluated = eval_family(2, fam)
    assert isinstance(evaluated, EvalFamily)
    assert (evaluated.dom, evaluated.cod) == (S, S)
    with pytest.raises(ShapeMismatchError):
        eval_family(2, scaled_identity(1, S))


def test_contains_family() -> None:
    """Families are found at any depth of the tree."""
    fam = family(lambda k: scaled_identity(k, S), S, int, S)
    assert not contains_family(pair(scaled_identity(1, S), zero_map(S, S)))
    assert contains_family(fam)
    assert contains_family(add(zero_map(S, S), eval_family(1, fam)))
    assert contains_family(case_split(zero_map(S, S), eval_family(1, fam)))
