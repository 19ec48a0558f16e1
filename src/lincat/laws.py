"""Executable law checks.

The linear-map checks compare materialized matrices within the
tolerances of ``Settings``; the function-category checks compare
results pointwise on sample inputs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import numpy as np

from lincat.kernel.config import Settings, default_settings
from lincat.kernel.spaces import Product, Space, dimension_of, space_of
from lincat.linear.algebra import LinearCategory, compose, scale
from lincat.linear.expr import LinMap
from lincat.linear.matrix import materialize
from lincat.vectorspace import from_vector, to_vector


def matrices_equal(a: np.ndarray, b: np.ndarray, settings: Settings | None = None) -> bool:
    settings = settings or default_settings()
    return a.shape == b.shape and bool(np.allclose(a, b, atol=settings.atol, rtol=settings.rtol))


def maps_equal(f: LinMap, g: LinMap, settings: Settings | None = None) -> bool:
    """Same spaces and the same matrix."""
    if f.dom != g.dom or f.cod != g.cod:
        return False
    return matrices_equal(materialize(f), materialize(g), settings)


def check_identity(cat: LinearCategory, f: LinMap, settings: Settings | None = None) -> bool:
    left = cat.compose(cat.identity(f.cod), f)
    right = cat.compose(f, cat.identity(f.dom))
    return maps_equal(left, f, settings) and maps_equal(right, f, settings)


def check_associativity(
    cat: LinearCategory, h: LinMap, g: LinMap, f: LinMap, settings: Settings | None = None
) -> bool:
    return maps_equal(
        cat.compose(cat.compose(h, g), f),
        cat.compose(h, cat.compose(g, f)),
        settings,
    )


def check_fanout(cat: LinearCategory, f: LinMap, g: LinMap, settings: Settings | None = None) -> bool:
    """``proj1 ∘ <f, g> == f`` and ``proj2 ∘ <f, g> == g``."""
    paired = cat.fanout(f, g)
    return maps_equal(cat.compose(cat.proj1(f.cod, g.cod), paired), f, settings) and maps_equal(
        cat.compose(cat.proj2(f.cod, g.cod), paired), g, settings
    )


def check_fanin(cat: LinearCategory, f: LinMap, g: LinMap, settings: Settings | None = None) -> bool:
    """``[f, g] ∘ inl == f`` and ``[f, g] ∘ inr == g``."""
    split = cat.fanin(f, g)
    return maps_equal(cat.compose(split, cat.inl(f.dom, g.dom)), f, settings) and maps_equal(
        cat.compose(split, cat.inr(f.dom, g.dom)), g, settings
    )


def undistr(cat: LinearCategory, a: Space, b: Space, c: Space) -> LinMap:
    """Left inverse of ``distr``: ``a × c + b × c -> (a + b) × c``.

    Takes ``a`` and ``c`` from the first summand and ``b`` from the second.
    """
    ac, bc = Product(a, c), Product(b, c)
    p1 = cat.proj1(ac, bc)
    p2 = cat.proj2(ac, bc)
    return cat.fanout(
        cat.fanout(
            cat.compose(cat.proj1(a, c), p1),
            cat.compose(cat.proj1(b, c), p2),
        ),
        cat.compose(cat.proj2(a, c), p1),
    )


def check_distributivity(
    cat: LinearCategory, a: Space, b: Space, c: Space, settings: Settings | None = None
) -> bool:
    """``undistr ∘ distr`` is the identity on ``(a + b) × c``."""
    round_trip = cat.compose(undistr(cat, a, b, c), cat.distr(a, b, c))
    return maps_equal(round_trip, cat.identity(Product(Product(a, b), c)), settings)


def check_scaling(k: float, f: LinMap, settings: Settings | None = None) -> bool:
    return matrices_equal(materialize(scale(k, f)), k * materialize(f), settings)


def check_composition(g: LinMap, f: LinMap, settings: Settings | None = None) -> bool:
    """The algebra agrees with matrix multiplication."""
    return matrices_equal(materialize(compose(g, f)), materialize(g) @ materialize(f), settings)


def check_round_trip(x: Any, space: Space | None = None) -> bool:
    space = space or space_of(x)
    flat = to_vector(x, space)
    return len(flat) == dimension_of(space) and from_vector(flat, space) == x


def check_pointwise(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    samples: Iterable[Any],
) -> bool:
    """``f`` and ``g`` agree on every sample."""
    return all(f(x) == g(x) for x in samples)
