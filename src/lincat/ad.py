"""Forward-mode automatic differentiation over the linear-map algebra.

An ``AD`` arrow maps a point to its value together with the linear map
that best approximates the function at that point. Composition is the
chain rule, carried out by the symbolic algebra, so derivatives stay
symbolic until a Jacobian is asked for.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np

from lincat.kernel.category import CartesianCategory, GeneralizedElement
from lincat.kernel.spaces import SCALAR, UNIT, Product, Space, expect_same, require_space, space_of
from lincat.kernel.trace import Trace
from lincat.linear.algebra import LinearCategory
from lincat.linear.expr import CaseSplit, LinMap, Pair, Scaled, Zero, identity_map
from lincat.linear.matrix import materialize
from lincat.vectorspace import add_values, from_vector, scale_value, to_vector


@dataclass(frozen=True)
class AD:
    """Differentiable arrow ``dom -> cod``.

    Attributes:
        run: Point -> (value, derivative at the point)
        dom: Domain descriptor
        cod: Codomain descriptor
    """

    run: Callable[[Any], tuple[Any, LinMap]]
    dom: Space
    cod: Space

    def __call__(self, x: Any) -> tuple[Any, LinMap]:
        return self.run(x)


class ADCategory(CartesianCategory[AD], GeneralizedElement[AD]):
    """Differentiable arrows with products and constants."""

    def __init__(self, trace: Trace | None = None) -> None:
        self.linear = LinearCategory(trace)

    def identity(self, obj: Space | None = None) -> AD:
        obj = require_space(obj, "ADCategory.identity")
        d = identity_map(obj)
        return AD(lambda x: (x, d), obj, obj)

    def compose(self, g: AD, f: AD) -> AD:
        expect_same(f.cod, g.dom, "composition boundary")
        linear = self.linear

        def run(x: Any) -> tuple[Any, LinMap]:
            y, df = f.run(x)
            z, dg = g.run(y)
            return z, linear.compose(dg, df)

        return AD(run, f.dom, g.cod)

    def terminal(self, obj: Space | None = None) -> AD:
        obj = require_space(obj, "ADCategory.terminal")
        d = Zero(obj, UNIT)
        return AD(lambda _x: ((), d), obj, UNIT)

    def proj1(self, a: Space | None = None, b: Space | None = None) -> AD:
        d = self.linear.proj1(a, b)
        return AD(lambda p: (p[0], d), d.dom, d.cod)

    def proj2(self, a: Space | None = None, b: Space | None = None) -> AD:
        d = self.linear.proj2(a, b)
        return AD(lambda p: (p[1], d), d.dom, d.cod)

    def fanout(self, f: AD, g: AD) -> AD:
        expect_same(f.dom, g.dom, "fanout domains")

        def run(x: Any) -> tuple[Any, LinMap]:
            y1, d1 = f.run(x)
            y2, d2 = g.run(x)
            return (y1, y2), Pair(d1, d2)

        return AD(run, f.dom, Product(f.cod, g.cod))

    def konst(self, value: Any, obj: Space | None = None) -> AD:
        obj = require_space(obj, "ADCategory.konst")
        cod = space_of(value)
        d = Zero(obj, cod)
        return AD(lambda _x: (value, d), obj, cod)


def add(space: Space = SCALAR) -> AD:
    """``(x, y) -> x + y``; its derivative is ``[id, id]``."""
    d = CaseSplit(identity_map(space), identity_map(space))
    return AD(lambda p: (add_values(space, p[0], p[1]), d), Product(space, space), space)


def mult() -> AD:
    """Scalar product ``(x, y) -> x * y``; its derivative is ``[y, x]``."""

    def run(p: tuple[float, float]) -> tuple[float, LinMap]:
        x, y = p
        return x * y, CaseSplit(Scaled(float(y), SCALAR), Scaled(float(x), SCALAR))

    return AD(run, Product(SCALAR, SCALAR), SCALAR)


def negate(space: Space = SCALAR) -> AD:
    d = Scaled(-1.0, space)
    return AD(lambda x: (scale_value(space, -1.0, x), d), space, space)


def scalar_function(fn: Callable[[float], float], derivative: Callable[[float], float]) -> AD:
    """Lift a scalar function with a known derivative."""
    return AD(lambda x: (fn(x), Scaled(float(derivative(x)), SCALAR)), SCALAR, SCALAR)


def jacobian(f: AD, x: Any) -> np.ndarray:
    """Jacobian of ``f`` at ``x``, shaped ``(dim cod, dim dom)``."""
    _, d = f.run(x)
    return materialize(d)


def evaluate_ad(f: AD, x: Any, directions: Iterable[Any]) -> tuple[Any, list[Any]]:
    """Value of ``f`` at ``x`` and its directional derivatives.

    Each direction is a value of ``f.dom``; each derivative is a value of
    ``f.cod``.
    """
    y, d = f.run(x)
    m = materialize(d)
    derivatives = [
        from_vector(m @ np.asarray(to_vector(v, f.dom), dtype=float), f.cod)
        for v in directions
    ]
    return y, derivatives
