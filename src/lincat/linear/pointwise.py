"""Pointwise evaluation of linear-map expressions on structured values.

Unlike ``materialize`` this works for families: a map into a function
space yields a Python function of the key.
"""

from __future__ import annotations

from typing import Any

from lincat.linear.expr import CaseSplit, EvalFamily, Family, LinMap, Pair, Scaled, Sum, Zero
from lincat.vectorspace import add_values, scale_value, zero_value


def apply(f: LinMap, x: Any) -> Any:
    """Evaluate ``f`` at the value ``x`` of its domain."""
    if isinstance(f, Zero):
        return zero_value(f.cod)
    if isinstance(f, Scaled):
        return scale_value(f.space, f.factor, x)
    if isinstance(f, Pair):
        return (apply(f.left, x), apply(f.right, x))
    if isinstance(f, CaseSplit):
        a, b = x
        return add_values(f.cod, apply(f.left, a), apply(f.right, b))
    if isinstance(f, Sum):
        return add_values(f.cod, apply(f.left, x), apply(f.right, x))
    if isinstance(f, Family):
        index = f.index
        return lambda key: apply(index(key), x)
    if isinstance(f, EvalFamily):
        return apply(f.family, x)(f.key)
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")
