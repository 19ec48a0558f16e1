"""The category of plain Python functions.

Products are pairs, coproducts are ``Left``/``Right`` tagged values and
exponentials are functions. Object arguments are accepted and ignored.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from lincat.kernel.category import BicartesianCategory, ClosedCategory, GeneralizedElement

Fn = Callable[[Any], Any]


@dataclass(frozen=True)
class Left:
    value: Any


@dataclass(frozen=True)
class Right:
    value: Any


class Void:
    """The initial object: a type with no values."""

    def __new__(cls) -> NoReturn:
        raise TypeError("Void has no values")


def absurd(value: Any) -> NoReturn:
    raise TypeError(f"absurd called with {value!r}; Void has no values")


def either(f: Fn, g: Fn) -> Fn:
    """Dispatch a tagged value to ``f`` or ``g``."""

    def run(tagged: Any) -> Any:
        if isinstance(tagged, Left):
            return f(tagged.value)
        if isinstance(tagged, Right):
            return g(tagged.value)
        raise TypeError(f"Expected Left or Right, got {type(tagged).__name__}")

    return run


def _identity(x: Any) -> Any:
    return x


def _fst(p: tuple[Any, Any]) -> Any:
    return p[0]


def _snd(p: tuple[Any, Any]) -> Any:
    return p[1]


class FunctionCategory(BicartesianCategory[Fn], ClosedCategory[Fn], GeneralizedElement[Fn]):
    """Functions with pairs, tagged unions, currying and constants."""

    def identity(self, obj: Any = None) -> Fn:
        return _identity

    def compose(self, g: Fn, f: Fn) -> Fn:
        return lambda x: g(f(x))

    def terminal(self, obj: Any = None) -> Fn:
        return lambda _x: ()

    def proj1(self, a: Any = None, b: Any = None) -> Fn:
        return _fst

    def proj2(self, a: Any = None, b: Any = None) -> Fn:
        return _snd

    def fanout(self, f: Fn, g: Fn) -> Fn:
        return lambda x: (f(x), g(x))

    def initial(self, obj: Any = None) -> Fn:
        return absurd

    def inl(self, a: Any = None, b: Any = None) -> Fn:
        return Left

    def inr(self, a: Any = None, b: Any = None) -> Fn:
        return Right

    def fanin(self, f: Fn, g: Fn) -> Fn:
        return either(f, g)

    def distr(self, a: Any = None, b: Any = None, c: Any = None) -> Fn:
        def run(p: tuple[Any, Any]) -> Any:
            tagged, z = p
            if isinstance(tagged, Left):
                return Left((tagged.value, z))
            if isinstance(tagged, Right):
                return Right((tagged.value, z))
            raise TypeError(f"Expected Left or Right, got {type(tagged).__name__}")

        return run

    def eval(self, b: Any = None, c: Any = None) -> Fn:
        return lambda p: p[0](p[1])

    def transpose(self, f: Fn, a: Any = None, b: Any = None) -> Fn:
        return lambda x: lambda y: f((x, y))

    def konst(self, value: Any, obj: Any = None) -> Fn:
        return lambda _x: value
