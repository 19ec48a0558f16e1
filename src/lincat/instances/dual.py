"""Contravariant functions and the dual of an arbitrary category.

Reversing every arrow swaps terminal with initial and products with
coproducts. ``OpCategory`` spells this out for functions; ``dual``
derives it mechanically from any category instance.
"""

from __future__ import annotations

import types
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from lincat.instances.function import FunctionCategory, Left, Right, absurd, either
from lincat.kernel.category import (
    CartesianCategory,
    Category,
    CategoryWith0,
    CategoryWith1,
    CocartesianCategory,
)

M = TypeVar("M")

_functions = FunctionCategory()


@dataclass(frozen=True)
class Op:
    """An arrow ``a -> b`` represented by a function ``b -> a``."""

    fn: Callable[[Any], Any]

    def __call__(self, x: Any) -> Any:
        return self.fn(x)


class OpCategory(CartesianCategory[Op], CocartesianCategory[Op]):
    """Opposite of the function category.

    Terminal object is ``Void``, products are tagged unions; initial
    object is ``()``, coproducts are pairs.
    """

    def identity(self, obj: Any = None) -> Op:
        return Op(_functions.identity())

    def compose(self, g: Op, f: Op) -> Op:
        return Op(_functions.compose(f.fn, g.fn))

    def terminal(self, obj: Any = None) -> Op:
        return Op(absurd)

    def proj1(self, a: Any = None, b: Any = None) -> Op:
        return Op(Left)

    def proj2(self, a: Any = None, b: Any = None) -> Op:
        return Op(Right)

    def fanout(self, f: Op, g: Op) -> Op:
        return Op(either(f.fn, g.fn))

    def initial(self, obj: Any = None) -> Op:
        return Op(lambda _x: ())

    def inl(self, a: Any = None, b: Any = None) -> Op:
        return Op(_functions.proj1())

    def inr(self, a: Any = None, b: Any = None) -> Op:
        return Op(_functions.proj2())

    def fanin(self, f: Op, g: Op) -> Op:
        return Op(_functions.fanout(f.fn, g.fn))


@dataclass(frozen=True)
class Flipped(Generic[M]):
    """A base-category arrow ``b -> a`` viewed as a dual arrow ``a -> b``."""

    arrow: M


class Dual(Category[Flipped[Any]]):
    """Dual of ``base``; build instances with ``dual``."""

    def __init__(self, base: Category[Any]) -> None:
        self.base = base

    def identity(self, obj: Any = None) -> Flipped[Any]:
        return Flipped(self.base.identity(obj))

    def compose(self, g: Flipped[Any], f: Flipped[Any]) -> Flipped[Any]:
        return Flipped(self.base.compose(f.arrow, g.arrow))

    def __repr__(self) -> str:
        return f"dual({self.base!r})"


class _DualWith1(Dual, CategoryWith1[Flipped[Any]]):
    def terminal(self, obj: Any = None) -> Flipped[Any]:
        return Flipped(self.base.initial(obj))  # type: ignore[attr-defined]


class _DualWith0(Dual, CategoryWith0[Flipped[Any]]):
    def initial(self, obj: Any = None) -> Flipped[Any]:
        return Flipped(self.base.terminal(obj))  # type: ignore[attr-defined]


class _DualCartesian(_DualWith1, CartesianCategory[Flipped[Any]]):
    def proj1(self, a: Any = None, b: Any = None) -> Flipped[Any]:
        return Flipped(self.base.inl(a, b))  # type: ignore[attr-defined]

    def proj2(self, a: Any = None, b: Any = None) -> Flipped[Any]:
        return Flipped(self.base.inr(a, b))  # type: ignore[attr-defined]

    def fanout(self, f: Flipped[Any], g: Flipped[Any]) -> Flipped[Any]:
        return Flipped(self.base.fanin(f.arrow, g.arrow))  # type: ignore[attr-defined]


class _DualCocartesian(_DualWith0, CocartesianCategory[Flipped[Any]]):
    def inl(self, a: Any = None, b: Any = None) -> Flipped[Any]:
        return Flipped(self.base.proj1(a, b))  # type: ignore[attr-defined]

    def inr(self, a: Any = None, b: Any = None) -> Flipped[Any]:
        return Flipped(self.base.proj2(a, b))  # type: ignore[attr-defined]

    def fanin(self, f: Flipped[Any], g: Flipped[Any]) -> Flipped[Any]:
        return Flipped(self.base.fanout(f.arrow, g.arrow))  # type: ignore[attr-defined]


def _capabilities(base: Category[Any]) -> tuple[type[Dual], ...]:
    caps: list[type[Dual]] = []
    if isinstance(base, CocartesianCategory):
        caps.append(_DualCartesian)
    elif isinstance(base, CategoryWith0):
        caps.append(_DualWith1)
    if isinstance(base, CartesianCategory):
        caps.append(_DualCocartesian)
    elif isinstance(base, CategoryWith1):
        caps.append(_DualWith0)
    return tuple(caps)


@lru_cache(maxsize=None)
def _dual_class(caps: tuple[type[Dual], ...]) -> type[Dual]:
    if not caps:
        return Dual
    name = "Dual" + "".join(c.__name__.removeprefix("_Dual") for c in caps)
    return types.new_class(name, (*caps, Dual))


def dual(base: Category[Any]) -> Dual:
    """Dual category of ``base``.

    The result is terminal/cartesian exactly when ``base`` is
    initial/cocartesian, and the other way round.
    """
    return _dual_class(_capabilities(base))(base)
