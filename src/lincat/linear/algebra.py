"""Composition and scaling rules for linear-map expressions.

``compose(g, f)`` rewrites structurally until no rule applies. Rules are
tried in this order; the first match wins:

    1. zero on either side             -> zero
    2. scaled identity on either side  -> the other side, scaled
    3. sum on the left                 -> distribute over the sum
    4. sum on the right                -> distribute over the sum
    5. pair on the left                -> pair of composites
    6. case-split on the right         -> case-split of composites
    7. case-split after pair           -> sum of the matching composites
    8. family / family evaluation on the left -> push the composite inside

A family evaluation on the right has no rule and raises
``NotYetSupportedError``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from lincat.kernel.category import BicartesianCategory
from lincat.kernel.errors import NotYetSupportedError
from lincat.kernel.spaces import UNIT, Product, Space, expect_same, require_space, split_product
from lincat.kernel.trace import Trace
from lincat.linear.expr import (
    CaseSplit,
    EvalFamily,
    Family,
    LinMap,
    Pair,
    Scaled,
    Sum,
    Zero,
    identity_map,
)


def scale(k: float, f: LinMap) -> LinMap:
    """Multiply ``f`` by ``k``, pushing the factor into every leaf."""
    k = float(k)
    if isinstance(f, Zero):
        return f
    if isinstance(f, Scaled):
        return Scaled(k * f.factor, f.space)
    if isinstance(f, Pair):
        return Pair(scale(k, f.left), scale(k, f.right))
    if isinstance(f, CaseSplit):
        return CaseSplit(scale(k, f.left), scale(k, f.right))
    if isinstance(f, Sum):
        return Sum(scale(k, f.left), scale(k, f.right))
    if isinstance(f, Family):
        body = f.index
        return Family(lambda b: scale(k, body(b)), f.dom, f.key_space, f.target)
    if isinstance(f, EvalFamily):
        return EvalFamily(f.key, scale(k, f.family))
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")


@contextmanager
def _fired(trace: Trace | None, rule: str, g: LinMap, f: LinMap) -> Iterator[None]:
    if trace is None:
        yield
        return
    with trace.span(rule, dom=repr(f.dom), mid=repr(f.cod), cod=repr(g.cod)):
        yield


def compose(g: LinMap, f: LinMap, trace: Trace | None = None) -> LinMap:
    """Normalized composite ``g ∘ f``.

    Args:
        g: Map applied second
        f: Map applied first
        trace: Optional trace receiving one event per rule fired

    Raises:
        ShapeMismatchError: if ``g.dom`` differs from ``f.cod``
        NotYetSupportedError: when ``f`` is a family evaluation
    """
    expect_same(f.cod, g.dom, "composition boundary")

    if isinstance(g, Zero) or isinstance(f, Zero):
        with _fired(trace, "compose.zero", g, f):
            return Zero(f.dom, g.cod)

    if isinstance(g, Scaled):
        with _fired(trace, "compose.scale_left", g, f):
            return scale(g.factor, f)
    if isinstance(f, Scaled):
        with _fired(trace, "compose.scale_right", g, f):
            return scale(f.factor, g)

    if isinstance(g, Sum):
        with _fired(trace, "compose.sum_left", g, f):
            return Sum(compose(g.left, f, trace), compose(g.right, f, trace))
    if isinstance(f, Sum):
        with _fired(trace, "compose.sum_right", g, f):
            return Sum(compose(g, f.left, trace), compose(g, f.right, trace))

    if isinstance(g, Pair):
        with _fired(trace, "compose.pair", g, f):
            return Pair(compose(g.left, f, trace), compose(g.right, f, trace))
    if isinstance(f, CaseSplit):
        with _fired(trace, "compose.case_split", g, f):
            return CaseSplit(compose(g, f.left, trace), compose(g, f.right, trace))

    if isinstance(g, CaseSplit) and isinstance(f, Pair):
        with _fired(trace, "compose.split_pair", g, f):
            return Sum(compose(g.left, f.left, trace), compose(g.right, f.right, trace))

    if isinstance(g, Family):
        with _fired(trace, "compose.family", g, f):
            body = g.index
            return Family(lambda b: compose(body(b), f, trace), f.dom, g.key_space, g.target)
    if isinstance(g, EvalFamily):
        with _fired(trace, "compose.eval_family", g, f):
            return EvalFamily(g.key, compose(g.family, f, trace))

    if isinstance(f, EvalFamily):
        raise NotYetSupportedError(
            "cannot compose through a family evaluation on the right", (g, f)
        )
    raise TypeError(f"Malformed composition of {type(g).__name__} after {type(f).__name__}")


def first(f: LinMap) -> LinMap:
    """Project a map into ``b × c`` onto ``b``."""
    b, c = split_product(f.cod)
    if isinstance(f, Pair):
        return f.left
    if isinstance(f, Sum):
        return Sum(first(f.left), first(f.right))
    if isinstance(f, CaseSplit):
        return CaseSplit(first(f.left), first(f.right))
    if isinstance(f, Zero):
        return Zero(f.dom, b)
    if isinstance(f, Scaled):
        return CaseSplit(Scaled(f.factor, b), Zero(c, b))
    if isinstance(f, EvalFamily):
        raise NotYetSupportedError("cannot project a family evaluation", f)
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")


def second(f: LinMap) -> LinMap:
    """Project a map into ``b × c`` onto ``c``."""
    b, c = split_product(f.cod)
    if isinstance(f, Pair):
        return f.right
    if isinstance(f, Sum):
        return Sum(second(f.left), second(f.right))
    if isinstance(f, CaseSplit):
        return CaseSplit(second(f.left), second(f.right))
    if isinstance(f, Zero):
        return Zero(f.dom, c)
    if isinstance(f, Scaled):
        return CaseSplit(Zero(b, c), Scaled(f.factor, c))
    if isinstance(f, EvalFamily):
        raise NotYetSupportedError("cannot project a family evaluation", f)
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")


def evaluate_families(f: LinMap) -> LinMap:
    """Resolve every family evaluation whose family can be indexed.

    ``EvalFamily(key, Family(body))`` becomes ``body(key)``; evaluations
    are pushed through sums, case-splits, zeros and nested evaluations.
    What cannot be resolved is left in place, so the result may still
    contain family nodes.
    """
    if isinstance(f, (Zero, Scaled)):
        return f
    if isinstance(f, Pair):
        return Pair(evaluate_families(f.left), evaluate_families(f.right))
    if isinstance(f, CaseSplit):
        return CaseSplit(evaluate_families(f.left), evaluate_families(f.right))
    if isinstance(f, Sum):
        return Sum(evaluate_families(f.left), evaluate_families(f.right))
    if isinstance(f, Family):
        return f
    if isinstance(f, EvalFamily):
        return _evaluate_at(f.key, evaluate_families(f.family))
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")


def _evaluate_at(key: Any, f: LinMap) -> LinMap:
    if isinstance(f, Family):
        return evaluate_families(f.index(key))
    if isinstance(f, Zero):
        return Zero(f.dom, f.cod.target)  # type: ignore[attr-defined]
    if isinstance(f, Sum):
        return Sum(_evaluate_at(key, f.left), _evaluate_at(key, f.right))
    if isinstance(f, CaseSplit):
        return CaseSplit(_evaluate_at(key, f.left), _evaluate_at(key, f.right))
    return EvalFamily(key, f)


class LinearCategory(BicartesianCategory[LinMap]):
    """Linear maps as a bicartesian category.

    Products and coproducts coincide (biproducts): both are pairs of
    vectors. All operations need object descriptors.
    """

    def __init__(self, trace: Trace | None = None) -> None:
        self.trace = trace

    def identity(self, obj: Space | None = None) -> LinMap:
        return identity_map(require_space(obj, "LinearCategory.identity"))

    def compose(self, g: LinMap, f: LinMap) -> LinMap:
        return compose(g, f, self.trace)

    def terminal(self, obj: Space | None = None) -> LinMap:
        return Zero(require_space(obj, "LinearCategory.terminal"), UNIT)

    def proj1(self, a: Space | None = None, b: Space | None = None) -> LinMap:
        a, b = _spaces("proj1", a, b)
        return CaseSplit(identity_map(a), Zero(b, a))

    def proj2(self, a: Space | None = None, b: Space | None = None) -> LinMap:
        a, b = _spaces("proj2", a, b)
        return CaseSplit(Zero(a, b), identity_map(b))

    def fanout(self, f: LinMap, g: LinMap) -> LinMap:
        return Pair(f, g)

    def initial(self, obj: Space | None = None) -> LinMap:
        return Zero(UNIT, require_space(obj, "LinearCategory.initial"))

    def inl(self, a: Space | None = None, b: Space | None = None) -> LinMap:
        a, b = _spaces("inl", a, b)
        return Pair(identity_map(a), Zero(a, b))

    def inr(self, a: Space | None = None, b: Space | None = None) -> LinMap:
        a, b = _spaces("inr", a, b)
        return Pair(Zero(b, a), identity_map(b))

    def fanin(self, f: LinMap, g: LinMap) -> LinMap:
        return CaseSplit(f, g)

    def distr(
        self, a: Space | None = None, b: Space | None = None, c: Space | None = None
    ) -> LinMap:
        a, b, c = _spaces("distr", a, b, c)
        ab = Product(a, b)
        c_part = CaseSplit(Zero(ab, c), identity_map(c))
        return Pair(
            Pair(CaseSplit(CaseSplit(identity_map(a), Zero(b, a)), Zero(c, a)), c_part),
            Pair(CaseSplit(CaseSplit(Zero(a, b), identity_map(b)), Zero(c, b)), c_part),
        )


def _spaces(operation: str, *objs: Space | None) -> tuple[Space, ...]:
    return tuple(require_space(obj, f"LinearCategory.{operation}") for obj in objs)
