"""Flat-vector (de)serialization and structural vector arithmetic.

Values of a space are plain Python data: floats for ``Scalar``, ``()``
for ``Unit``, 2-tuples for ``Product`` and functions of the key for
``FunctionSpace``. The flat form lists the scalar coordinates left to
right, outermost to innermost, with no length tags: the space alone
determines where one component ends and the next begins.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from lincat.kernel.errors import ShapeMismatchError, UndefinedDimensionError
from lincat.kernel.spaces import FunctionSpace, Product, Scalar, Space, Unit, space_of

R = TypeVar("R")

Continuation = Callable[[Any, int], R]


def to_vector(x: Any, space: Space | None = None) -> list[float]:
    """Flatten ``x`` into ``dimension_of(space)`` coordinates.

    Args:
        x: Value to flatten
        space: Descriptor of ``x``; inferred from the value when omitted
    """
    if space is None:
        space = space_of(x)
    out: list[float] = []
    _emit(space, x, out)
    return out


def _emit(space: Space, x: Any, out: list[float]) -> None:
    if isinstance(space, Unit):
        if x != ():
            raise ShapeMismatchError(f"Expected (), got {x!r}", x)
        return
    if isinstance(space, Scalar):
        out.append(float(x))
        return
    if isinstance(space, Product):
        if not isinstance(x, tuple) or len(x) != 2:
            raise ShapeMismatchError(f"Expected a pair for {space!r}, got {x!r}", x)
        _emit(space.left, x[0], out)
        _emit(space.right, x[1], out)
        return
    if isinstance(space, FunctionSpace):
        raise UndefinedDimensionError("cannot flatten a function space value", space)
    raise TypeError(f"Expected Space, got {type(space).__name__}")


def parse_vector(space: Space, values: Sequence[float], pos: int, k: Continuation[R]) -> R:
    """Parse a value of ``space`` starting at ``values[pos]``.

    Continuation-passing: ``k`` receives the parsed value and the
    position of the unconsumed suffix. A scalar read past the end of the
    input is zero.
    """
    if isinstance(space, Unit):
        return k((), pos)
    if isinstance(space, Scalar):
        if pos >= len(values):
            return k(0.0, pos)
        return k(float(values[pos]), pos + 1)
    if isinstance(space, Product):
        return parse_vector(
            space.left,
            values,
            pos,
            lambda a, rest: parse_vector(
                space.right, values, rest, lambda b, tail: k((a, b), tail)
            ),
        )
    if isinstance(space, FunctionSpace):
        raise UndefinedDimensionError("cannot parse a function space value", space)
    raise TypeError(f"Expected Space, got {type(space).__name__}")


def from_vector(values: Sequence[float], space: Space) -> Any:
    """Rebuild a value of ``space`` from its flat coordinates.

    Trailing coordinates beyond the dimension are ignored; missing ones
    read as zero.
    """
    return parse_vector(space, values, 0, lambda x, _pos: x)


def split_vector(values: Sequence[float], space: Space) -> tuple[Any, list[float]]:
    """Parse a value of ``space`` from the front, returning it with the remainder."""
    return parse_vector(space, values, 0, lambda x, pos: (x, list(values[pos:])))


def zero_value(space: Space) -> Any:
    if isinstance(space, Unit):
        return ()
    if isinstance(space, Scalar):
        return 0.0
    if isinstance(space, Product):
        return (zero_value(space.left), zero_value(space.right))
    if isinstance(space, FunctionSpace):
        target = space.target
        return lambda _key: zero_value(target)
    raise TypeError(f"Expected Space, got {type(space).__name__}")


def add_values(space: Space, x: Any, y: Any) -> Any:
    if isinstance(space, Unit):
        return ()
    if isinstance(space, Scalar):
        return x + y
    if isinstance(space, Product):
        return (add_values(space.left, x[0], y[0]), add_values(space.right, x[1], y[1]))
    if isinstance(space, FunctionSpace):
        target = space.target
        return lambda key: add_values(target, x(key), y(key))
    raise TypeError(f"Expected Space, got {type(space).__name__}")


def scale_value(space: Space, k: float, x: Any) -> Any:
    if isinstance(space, Unit):
        return ()
    if isinstance(space, Scalar):
        return k * x
    if isinstance(space, Product):
        return (scale_value(space.left, k, x[0]), scale_value(space.right, k, x[1]))
    if isinstance(space, FunctionSpace):
        target = space.target
        return lambda key: scale_value(target, k, x(key))
    raise TypeError(f"Expected Space, got {type(space).__name__}")
