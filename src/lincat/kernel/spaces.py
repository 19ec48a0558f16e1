"""Space descriptors and the dimension system.

Every vector-space-like object is described by an immutable descriptor.
Dimensions are computed from the descriptor alone, never from values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lincat.kernel.errors import ShapeMismatchError, UndefinedDimensionError


class Space:
    """Base class for space descriptors."""

    __slots__ = ()

    def __mul__(self, other: Space) -> Product:
        return Product(self, other)


@dataclass(frozen=True)
class Unit(Space):
    """The zero-dimensional space, with the single value ``()``."""

    def __repr__(self) -> str:
        return "Unit"


@dataclass(frozen=True)
class Scalar(Space):
    """The real line."""

    def __repr__(self) -> str:
        return "Scalar"


@dataclass(frozen=True)
class Product(Space):
    """Binary product; values are 2-tuples."""

    left: Space
    right: Space

    def __repr__(self) -> str:
        return f"({self.left!r} * {self.right!r})"


@dataclass(frozen=True)
class FunctionSpace(Space):
    """Space of functions from ``index`` keys into ``target``.

    ``index`` is only a label for the key type; it takes no part in
    dimension arithmetic.
    """

    index: Any
    target: Space

    def __repr__(self) -> str:
        return f"({self.index!r} -> {self.target!r})"


UNIT = Unit()
SCALAR = Scalar()


def dimension_of(space: Space) -> int:
    """Return the number of scalar coordinates of ``space``.

    Raises:
        UndefinedDimensionError: if ``space`` contains a function space.
    """
    if isinstance(space, Unit):
        return 0
    if isinstance(space, Scalar):
        return 1
    if isinstance(space, Product):
        return dimension_of(space.left) + dimension_of(space.right)
    if isinstance(space, FunctionSpace):
        raise UndefinedDimensionError(
            "function space may not have a well defined dimension", space
        )
    raise TypeError(f"Expected Space, got {type(space).__name__}")


def has_dimension(space: Space) -> bool:
    """Check whether ``space`` is finite dimensional."""
    if isinstance(space, Product):
        return has_dimension(space.left) and has_dimension(space.right)
    return isinstance(space, (Unit, Scalar))


def split_product(space: Space) -> tuple[Space, Space]:
    """Return the component descriptors of a product space.

    Raises:
        ShapeMismatchError: if ``space`` is not a product.
    """
    if not isinstance(space, Product):
        raise ShapeMismatchError(f"Expected a product space, got {space!r}", space)
    return space.left, space.right


def space_of(value: Any) -> Space:
    """Infer the descriptor of a concrete value.

    Floats and ints are scalars, ``()`` is the unit and 2-tuples are
    products. Functions cannot be inferred.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a vector space value")
    if isinstance(value, (int, float)):
        return SCALAR
    if isinstance(value, tuple):
        if len(value) == 0:
            return UNIT
        if len(value) == 2:
            return Product(space_of(value[0]), space_of(value[1]))
        raise TypeError(f"Expected a pair, got a {len(value)}-tuple")
    raise TypeError(f"Cannot infer a space for {type(value).__name__}")


def expect_same(expected: Space, actual: Space, what: str) -> None:
    """Raise ``ShapeMismatchError`` unless both descriptors agree."""
    if expected != actual:
        raise ShapeMismatchError(
            f"{what}: expected {expected!r}, got {actual!r}", (expected, actual)
        )


def require_space(obj: Any, operation: str) -> Space:
    """Return ``obj`` if it is a descriptor, else raise ``TypeError``.

    Categories whose morphisms track their spaces call this on the
    optional object arguments of the category interface.
    """
    if not isinstance(obj, Space):
        raise TypeError(f"{operation} needs a space descriptor, got {obj!r}")
    return obj
