"""Composable (Yoneda) representation of linear maps.

A map ``a -> b`` is stored as a transformer that turns any map ``r -> a``
into a map ``r -> b``. Composing two of them composes the transformers,
so building a long chain is O(1) per step; the algebra only runs when
the transformer is applied, usually to the identity (see ``lower``).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np

from lincat.kernel.category import CartesianCategory, CocartesianCategory
from lincat.kernel.spaces import UNIT, FunctionSpace, Product, Space, expect_same, require_space
from lincat.linear.algebra import compose, first, scale, second
from lincat.linear.expr import EvalFamily, Family, LinMap, Pair, Sum, Zero, identity_map
from lincat.linear.matrix import materialize


@dataclass(frozen=True)
class Composable:
    """Transformer form of a linear map ``dom -> cod``."""

    run: Callable[[LinMap], LinMap]
    dom: Space
    cod: Space

    def __call__(self, x: LinMap) -> LinMap:
        expect_same(self.dom, x.cod, "composable input")
        return self.run(x)

    def lower(self) -> LinMap:
        """Recover the ordinary map by applying to the identity."""
        return self(identity_map(self.dom))


def lift(m: LinMap) -> Composable:
    """Wrap an ordinary map."""
    return Composable(lambda x: compose(m, x), m.dom, m.cod)


def linear(k: float, space: Space) -> Composable:
    """``k`` times the identity on ``space``."""
    return Composable(lambda x: scale(k, x), space, space)


def fork_family(
    h: Callable[[Any], Composable], dom: Space, key_space: Any, target: Space
) -> Composable:
    """Build a map ``dom -> (key_space -> target)`` from one map per key."""

    def run(da: LinMap) -> LinMap:
        return Family(lambda b: h(b)(da), da.dom, key_space, target)

    return Composable(run, dom, FunctionSpace(key_space, target))


def eval_at(key: Any, space: FunctionSpace) -> Composable:
    """Evaluation of a function-space value at ``key``."""
    return Composable(lambda x: EvalFamily(key, x), space, space.target)


def to_matrix(c: Composable) -> np.ndarray:
    """Materialize a composable map."""
    return materialize(c.lower())


class ComposableCategory(CartesianCategory[Composable], CocartesianCategory[Composable]):
    """Composable maps with products and coproducts (both pairs of vectors)."""

    def identity(self, obj: Space | None = None) -> Composable:
        obj = require_space(obj, "ComposableCategory.identity")
        return Composable(lambda x: x, obj, obj)

    def compose(self, g: Composable, f: Composable) -> Composable:
        expect_same(f.cod, g.dom, "composition boundary")
        g_run, f_run = g.run, f.run
        return Composable(lambda x: g_run(f_run(x)), f.dom, g.cod)

    def terminal(self, obj: Space | None = None) -> Composable:
        obj = require_space(obj, "ComposableCategory.terminal")
        return Composable(lambda x: Zero(x.dom, UNIT), obj, UNIT)

    def proj1(self, a: Space | None = None, b: Space | None = None) -> Composable:
        a, b = _spaces("proj1", a, b)
        return Composable(first, Product(a, b), a)

    def proj2(self, a: Space | None = None, b: Space | None = None) -> Composable:
        a, b = _spaces("proj2", a, b)
        return Composable(second, Product(a, b), b)

    def fanout(self, f: Composable, g: Composable) -> Composable:
        expect_same(f.dom, g.dom, "fanout domains")
        return Composable(lambda x: Pair(f.run(x), g.run(x)), f.dom, Product(f.cod, g.cod))

    def initial(self, obj: Space | None = None) -> Composable:
        obj = require_space(obj, "ComposableCategory.initial")
        return Composable(lambda x: Zero(x.dom, obj), UNIT, obj)

    def inl(self, a: Space | None = None, b: Space | None = None) -> Composable:
        a, b = _spaces("inl", a, b)
        return Composable(lambda x: Pair(x, Zero(x.dom, b)), a, Product(a, b))

    def inr(self, a: Space | None = None, b: Space | None = None) -> Composable:
        a, b = _spaces("inr", a, b)
        return Composable(lambda x: Pair(Zero(x.dom, a), x), b, Product(a, b))

    def fanin(self, f: Composable, g: Composable) -> Composable:
        expect_same(f.cod, g.cod, "fanin codomains")
        return Composable(
            lambda x: Sum(f.run(first(x)), g.run(second(x))),
            Product(f.dom, g.dom),
            f.cod,
        )


def _spaces(operation: str, *objs: Space | None) -> tuple[Space, ...]:
    return tuple(require_space(obj, f"ComposableCategory.{operation}") for obj in objs)
