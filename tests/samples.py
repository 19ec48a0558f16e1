from __future__ import annotations

import numpy as np

from lincat.kernel.spaces import SCALAR, UNIT, Product, Space, dimension_of
from lincat.linear import (
    CaseSplit,
    LinearCategory,
    LinMap,
    Pair,
    Scaled,
    Sum,
    Zero,
    from_matrix,
    identity_map,
)

S = SCALAR
P = Product(S, S)
PS = Product(P, S)
SP = Product(S, P)

SPACES: list[Space] = [UNIT, S, P, PS, SP]


def random_map(dom: Space, cod: Space, seed: int = 0) -> LinMap:
    """Expression for a random dense matrix of the right shape."""
    rng = np.random.default_rng(seed)
    m = rng.normal(size=(dimension_of(cod), dimension_of(dom)))
    return from_matrix(m, dom, cod)


def structural_maps() -> list[LinMap]:
    """Hand-built P -> P maps covering every finite node type."""
    cat = LinearCategory()
    p1, p2 = cat.proj1(S, S), cat.proj2(S, S)
    return [
        identity_map(P),
        Zero(P, P),
        Scaled(-2.5, P),
        Pair(p2, p1),
        Pair(Sum(p1, p2), p1),
        CaseSplit(Pair(Scaled(2.0, S), Zero(S, S)), Pair(Scaled(1.0, S), Scaled(4.0, S))),
        Sum(identity_map(P), Pair(p2, Zero(P, S))),
    ]
