"""Dense-matrix materialization of linear-map expressions.

Orientation: ``materialize(f)`` has shape ``(dim f.cod, dim f.dom)``, so
it acts on column vectors and ``materialize(compose(g, f))`` equals
``materialize(g) @ materialize(f)``. A codomain pairing stacks its
blocks vertically; a domain case-split places them side by side.
"""

from __future__ import annotations

import numpy as np

from lincat.kernel.errors import ShapeMismatchError, UndefinedDimensionError
from lincat.kernel.spaces import SCALAR, Product, Space, dimension_of, split_product
from lincat.linear.expr import CaseSplit, LinMap, Pair, Scaled, Sum, Zero, contains_family


def materialize(f: LinMap) -> np.ndarray:
    """Convert ``f`` into a dense ``float64`` matrix.

    Raises:
        UndefinedDimensionError: if ``f`` contains a family or a family
            evaluation; evaluate pointwise with ``apply`` instead.
        ShapeMismatchError: if blocks disagree with the spaces.
    """
    if contains_family(f):
        raise UndefinedDimensionError(
            "function space may not have a well defined dimension", f
        )
    return _materialize(f)


def _materialize(f: LinMap) -> np.ndarray:
    rows, cols = dimension_of(f.cod), dimension_of(f.dom)

    if isinstance(f, Zero):
        return np.zeros((rows, cols))
    if isinstance(f, Scaled):
        if rows != cols:
            raise ShapeMismatchError("scaled identity on a non-square shape", f)
        return f.factor * np.eye(cols)
    if isinstance(f, Sum):
        left, right = _materialize(f.left), _materialize(f.right)
        if left.shape != right.shape:
            raise ShapeMismatchError(
                f"cannot add {left.shape} and {right.shape} blocks", f
            )
        return left + right
    if isinstance(f, Pair):
        top, bottom = split_product(f.cod)
        return _concat(
            [_materialize(f.left), _materialize(f.right)],
            axis=0,
            sizes=(dimension_of(top), dimension_of(bottom)),
            other=cols,
            subject=f,
        )
    if isinstance(f, CaseSplit):
        lhs, rhs = split_product(f.dom)
        return _concat(
            [_materialize(f.left), _materialize(f.right)],
            axis=1,
            sizes=(dimension_of(lhs), dimension_of(rhs)),
            other=rows,
            subject=f,
        )
    raise TypeError(f"Expected LinMap, got {type(f).__name__}")


def _concat(
    blocks: list[np.ndarray],
    axis: int,
    sizes: tuple[int, int],
    other: int,
    subject: LinMap,
) -> np.ndarray:
    for block, size in zip(blocks, sizes):
        expected = (size, other) if axis == 0 else (other, size)
        if block.shape != expected:
            raise ShapeMismatchError(
                f"block of shape {block.shape}, expected {expected}", subject
            )
    return np.concatenate(blocks, axis=axis)


def from_matrix(m: np.ndarray, dom: Space, cod: Space) -> LinMap:
    """Build an expression whose materialization is ``m``.

    Blocks are split along the product structure of ``cod`` (rows) and
    ``dom`` (columns); all-zero blocks become ``Zero``.

    Raises:
        ShapeMismatchError: if ``m`` is not ``(dim cod, dim dom)``.
    """
    m = np.asarray(m, dtype=float)
    expected = (dimension_of(cod), dimension_of(dom))
    if m.shape != expected:
        raise ShapeMismatchError(f"matrix of shape {m.shape}, expected {expected}", m)
    return _from_block(m, dom, cod)


def _from_block(m: np.ndarray, dom: Space, cod: Space) -> LinMap:
    if not m.any():
        return Zero(dom, cod)
    if isinstance(cod, Product):
        top = dimension_of(cod.left)
        return Pair(_from_block(m[:top], dom, cod.left), _from_block(m[top:], dom, cod.right))
    if isinstance(dom, Product):
        left = dimension_of(dom.left)
        return CaseSplit(
            _from_block(m[:, :left], dom.left, cod),
            _from_block(m[:, left:], dom.right, cod),
        )
    return Scaled(float(m[0, 0]), SCALAR)
