"""Symbolic linear-map expressions.

A closed set of node types. Every node knows its domain and codomain
descriptors, and the pairing, case-split, sum and family-evaluation
nodes check them when they are built.

    Zero        the zero map between any two spaces
    Scaled      k times the identity on a space
    Pair        <f, g> into a product codomain
    CaseSplit   [f, g] out of a product domain
    Sum         f + g, both with the same domain and codomain
    Family      b -> f(b), a map into a function space
    EvalFamily  evaluation of a family at a fixed key
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lincat.kernel.errors import ShapeMismatchError
from lincat.kernel.spaces import FunctionSpace, Product, Space, expect_same


class LinMap:
    """Base class of linear-map expression nodes.

    Subclasses expose ``dom`` and ``cod``. Nodes are immutable and may be
    shared freely between expressions.
    """

    __slots__ = ()

    dom: Space
    cod: Space


@dataclass(frozen=True)
class Zero(LinMap):
    dom: Space
    cod: Space


@dataclass(frozen=True)
class Scaled(LinMap):
    factor: float
    space: Space

    @property
    def dom(self) -> Space:
        return self.space

    @property
    def cod(self) -> Space:
        return self.space


@dataclass(frozen=True)
class Pair(LinMap):
    left: LinMap
    right: LinMap

    def __post_init__(self) -> None:
        expect_same(self.left.dom, self.right.dom, "pair domains")

    @property
    def dom(self) -> Space:
        return self.left.dom

    @property
    def cod(self) -> Space:
        return Product(self.left.cod, self.right.cod)


@dataclass(frozen=True)
class CaseSplit(LinMap):
    left: LinMap
    right: LinMap

    def __post_init__(self) -> None:
        expect_same(self.left.cod, self.right.cod, "case-split codomains")

    @property
    def dom(self) -> Space:
        return Product(self.left.dom, self.right.dom)

    @property
    def cod(self) -> Space:
        return self.left.cod


@dataclass(frozen=True)
class Sum(LinMap):
    left: LinMap
    right: LinMap

    def __post_init__(self) -> None:
        expect_same(self.left.dom, self.right.dom, "sum domains")
        expect_same(self.left.cod, self.right.cod, "sum codomains")

    @property
    def dom(self) -> Space:
        return self.left.dom

    @property
    def cod(self) -> Space:
        return self.left.cod


@dataclass(frozen=True)
class Family(LinMap):
    """A linear map whose output is a function of a key.

    ``body(key)`` must be a map ``dom -> target``; this is checked each
    time the family is indexed, see ``index``.
    """

    body: Callable[[Any], LinMap]
    dom: Space
    key_space: Any
    target: Space

    @property
    def cod(self) -> FunctionSpace:
        return FunctionSpace(self.key_space, self.target)

    def index(self, key: Any) -> LinMap:
        member = self.body(key)
        if not isinstance(member, LinMap):
            raise TypeError(f"Family body returned {type(member).__name__}, expected LinMap")
        expect_same(self.dom, member.dom, "family member domain")
        expect_same(self.target, member.cod, "family member codomain")
        return member


@dataclass(frozen=True)
class EvalFamily(LinMap):
    key: Any
    family: LinMap

    def __post_init__(self) -> None:
        if not isinstance(self.family.cod, FunctionSpace):
            raise ShapeMismatchError(
                f"Expected a map into a function space, got codomain {self.family.cod!r}",
                self.family,
            )

    @property
    def dom(self) -> Space:
        return self.family.dom

    @property
    def cod(self) -> Space:
        return self.family.cod.target  # type: ignore[attr-defined]


def zero_map(dom: Space, cod: Space) -> Zero:
    return Zero(dom, cod)


def scaled_identity(k: float, space: Space) -> Scaled:
    return Scaled(float(k), space)


def identity_map(space: Space) -> Scaled:
    return Scaled(1.0, space)


def pair(f: LinMap, g: LinMap) -> Pair:
    return Pair(f, g)


def case_split(f: LinMap, g: LinMap) -> CaseSplit:
    return CaseSplit(f, g)


def add(f: LinMap, g: LinMap) -> Sum:
    return Sum(f, g)


def family(body: Callable[[Any], LinMap], dom: Space, key_space: Any, target: Space) -> Family:
    return Family(body, dom, key_space, target)


def eval_family(key: Any, f: LinMap) -> EvalFamily:
    return EvalFamily(key, f)


def contains_family(f: LinMap) -> bool:
    """Check whether ``f`` has a family or family-evaluation node anywhere."""
    if isinstance(f, (Family, EvalFamily)):
        return True
    if isinstance(f, (Pair, CaseSplit, Sum)):
        return contains_family(f.left) or contains_family(f.right)
    return False
