"""Category interface - identity, composition and optional structure.

Each capability is its own abstract base class. A concrete category
subclasses the capabilities it supports; leaving out an operation makes
the class impossible to instantiate, so missing structure is reported
at construction time rather than when an expression is evaluated.

Objects are passed as optional descriptors (``obj``, ``a``, ``b``,
``c``). Categories whose morphisms must know their domain and codomain
(linear maps, AD) require them; the function category ignores them.

Composition is written ``compose(g, f)`` and means ``g ∘ f``: ``f`` runs
first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from lincat.kernel.errors import CapabilityError

M = TypeVar("M")


class Category(ABC, Generic[M]):
    """Identity and associative composition.

    Laws:
        compose(identity(b), f) == f == compose(f, identity(a))
        compose(compose(h, g), f) == compose(h, compose(g, f))
    """

    @abstractmethod
    def identity(self, obj: Any = None) -> M:
        """Identity morphism on ``obj``."""
        ...

    @abstractmethod
    def compose(self, g: M, f: M) -> M:
        """Composite ``g ∘ f``."""
        ...


class CategoryWith1(Category[M]):
    """Category with a terminal object."""

    @abstractmethod
    def terminal(self, obj: Any = None) -> M:
        """The unique morphism from ``obj`` to the terminal object."""
        ...


class CartesianCategory(CategoryWith1[M]):
    """Category whose monoidal product is the categorical product.

    Laws:
        compose(proj1(a, b), fanout(f, g)) == f
        compose(proj2(a, b), fanout(f, g)) == g
    """

    @abstractmethod
    def proj1(self, a: Any = None, b: Any = None) -> M:
        ...

    @abstractmethod
    def proj2(self, a: Any = None, b: Any = None) -> M:
        ...

    @abstractmethod
    def fanout(self, f: M, g: M) -> M:
        """``<f, g>``: pair two morphisms sharing a domain."""
        ...


class CategoryWith0(Category[M]):
    """Category with an initial object."""

    @abstractmethod
    def initial(self, obj: Any = None) -> M:
        """The unique morphism from the initial object to ``obj``."""
        ...


class CocartesianCategory(CategoryWith0[M]):
    """Category whose monoidal product is the categorical coproduct.

    Laws:
        compose(fanin(f, g), inl(a, b)) == f
        compose(fanin(f, g), inr(a, b)) == g
    """

    @abstractmethod
    def inl(self, a: Any = None, b: Any = None) -> M:
        ...

    @abstractmethod
    def inr(self, a: Any = None, b: Any = None) -> M:
        ...

    @abstractmethod
    def fanin(self, f: M, g: M) -> M:
        """``[f, g]``: case analysis on a coproduct."""
        ...


class BicartesianCategory(CartesianCategory[M], CocartesianCategory[M]):
    """Both cartesian and cocartesian, with products distributing over coproducts."""

    @abstractmethod
    def distr(self, a: Any = None, b: Any = None, c: Any = None) -> M:
        """``(a + b) × c -> a × c + b × c``."""
        ...


class ClosedCategory(CartesianCategory[M]):
    """Closed cartesian category.

    Law:
        compose(eval(b, c), fanout(compose(transpose(f), proj1), proj2)) == f
    """

    @abstractmethod
    def eval(self, b: Any = None, c: Any = None) -> M:
        """Application ``c^b × b -> c``."""
        ...

    @abstractmethod
    def transpose(self, f: M, a: Any = None, b: Any = None) -> M:
        """Curry ``f : a × b -> c`` into ``a -> c^b``."""
        ...


class GeneralizedElement(Category[M]):
    """Category that can embed constants as morphisms from any object."""

    @abstractmethod
    def konst(self, value: Any, obj: Any = None) -> M:
        ...


def identity(cat: Category[M], obj: Any = None) -> M:
    return cat.identity(obj)


def compose_all(cat: Category[M], *morphisms: M) -> M:
    """Compose right to left: ``compose_all(cat, h, g, f) == h ∘ g ∘ f``."""
    if not morphisms:
        raise ValueError("compose_all needs at least one morphism")
    result = morphisms[-1]
    for m in reversed(morphisms[:-1]):
        result = cat.compose(m, result)
    return result


def require(cat: Category[Any], capability: type[Category[Any]]) -> None:
    """Raise ``CapabilityError`` unless ``cat`` implements ``capability``."""
    if not isinstance(cat, capability):
        raise CapabilityError(
            f"{type(cat).__name__} is not a {capability.__name__}", cat
        )


# Derived combinators. They use nothing but the interface, which is all
# a front end emitting category expressions has to work with.


def diagonal(cat: CartesianCategory[M], a: Any = None) -> M:
    """``a -> a × a``."""
    require(cat, CartesianCategory)
    return cat.fanout(cat.identity(a), cat.identity(a))


def cross(cat: CartesianCategory[M], f: M, g: M, a: Any = None, b: Any = None) -> M:
    """``f × g : a × b -> c × d`` for ``f : a -> c`` and ``g : b -> d``."""
    require(cat, CartesianCategory)
    return cat.fanout(
        cat.compose(f, cat.proj1(a, b)),
        cat.compose(g, cat.proj2(a, b)),
    )


def swap(cat: CartesianCategory[M], a: Any = None, b: Any = None) -> M:
    """``a × b -> b × a``."""
    require(cat, CartesianCategory)
    return cat.fanout(cat.proj2(a, b), cat.proj1(a, b))


def assoc(cat: CartesianCategory[M], a: Any = None, b: Any = None, c: Any = None) -> M:
    """``(a × b) × c -> a × (b × c)``.

    Written with objects as descriptors, the nested product objects are
    built with ``product``; categories that ignore objects ignore it too.
    """
    require(cat, CartesianCategory)
    ab = product(a, b)
    return cat.fanout(
        cat.compose(cat.proj1(a, b), cat.proj1(ab, c)),
        cat.fanout(
            cat.compose(cat.proj2(a, b), cat.proj1(ab, c)),
            cat.proj2(ab, c),
        ),
    )


def product(a: Any, b: Any) -> Any:
    """Product of two object descriptors, or None when objects are untracked."""
    if a is None or b is None:
        return None
    return a * b
