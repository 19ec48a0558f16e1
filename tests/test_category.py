"""Test the category interface and the function category using pytest."""

import pytest

from lincat.instances import FunctionCategory, Left, Right, Void, absurd
from lincat.kernel.category import (
    CartesianCategory,
    Category,
    ClosedCategory,
    assoc,
    compose_all,
    cross,
    diagonal,
    require,
    swap,
)
from lincat.kernel.errors import CapabilityError
from lincat.laws import check_pointwise

fns = FunctionCategory()

INTS = [-3, 0, 1, 7]
PAIRS = [(x, y) for x in INTS for y in INTS]


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return 2 * x


def test_identity_law() -> None:
    """Test identity on both sides."""
    assert check_pointwise(fns.compose(fns.identity(), inc), inc, INTS)
    assert check_pointwise(fns.compose(inc, fns.identity()), inc, INTS)


def test_associativity() -> None:
    """Test associativity of function composition."""
    lhs = fns.compose(fns.compose(double, inc), double)
    rhs = fns.compose(double, fns.compose(inc, double))
    assert check_pointwise(lhs, rhs, INTS)


def test_compose_all_runs_right_to_left() -> None:
    """compose_all composes right to left and needs an argument."""
    assert compose_all(fns, inc, double)(5) == 11
    with pytest.raises(ValueError):
        compose_all(fns)


def test_fanout_universal_property() -> None:
    """Projections recover both halves of a fanout."""
    paired = fns.fanout(inc, double)
    assert paired(3) == (4, 6)
    assert check_pointwise(fns.compose(fns.proj1(), paired), inc, INTS)
    assert check_pointwise(fns.compose(fns.proj2(), paired), double, INTS)


def test_fanin_universal_property() -> None:
    """Injections select each branch of a fanin."""
    split = fns.fanin(inc, double)
    assert check_pointwise(fns.compose(split, fns.inl()), inc, INTS)
    assert check_pointwise(fns.compose(split, fns.inr()), double, INTS)
    with pytest.raises(TypeError):
        split(3)


def test_terminal_and_initial() -> None:
    """Test the terminal map and the empty initial object."""
    assert fns.terminal()(42) == ()
    with pytest.raises(TypeError):
        Void()
    with pytest.raises(TypeError):
        fns.initial()(object())
    with pytest.raises(TypeError):
        absurd(1)


def test_distr_pushes_tag_through_pair() -> None:
    """distr moves the tag outside the pair."""
    distr = fns.distr()
    assert distr((Left(1), "z")) == Left((1, "z"))
    assert distr((Right(2), "z")) == Right((2, "z"))


def test_distr_inverse() -> None:
    """distr is undone by a fanin of crosses."""
    undistr = fns.fanin(
        cross(fns, fns.inl(), fns.identity()),
        cross(fns, fns.inr(), fns.identity()),
    )
    samples = [(Left(1), 5), (Right(2), 6)]
    assert check_pointwise(fns.compose(undistr, fns.distr()), fns.identity(), samples)


def test_closed_law() -> None:
    """eval after transpose gives back the original function."""
    def add(p: tuple[int, int]) -> int:
        return p[0] + 10 * p[1]

    curried = fns.transpose(add)
    assert curried(1)(2) == 21
    rebuilt = fns.compose(
        fns.eval(),
        fns.fanout(fns.compose(curried, fns.proj1()), fns.proj2()),
    )
    assert check_pointwise(rebuilt, add, PAIRS)


def test_konst_ignores_input() -> None:
    """Constants ignore their argument."""
    assert fns.konst("c")(123) == "c"


def test_derived_combinators() -> None:
    """Test diagonal, swap, assoc and cross on plain functions."""
    assert diagonal(fns)(4) == (4, 4)
    assert swap(fns)((1, 2)) == (2, 1)
    assert assoc(fns)(((1, 2), 3)) == (1, (2, 3))
    assert cross(fns, inc, double)((1, 2)) == (2, 4)


def test_catassoc_on_triples() -> None:
    """fanout(proj1 ∘ proj1, fanout(proj2 ∘ proj1, proj2)) reshapes a triple."""
    cat_assoc = fns.fanout(
        fns.compose(fns.proj1(), fns.proj1()),
        fns.fanout(fns.compose(fns.proj2(), fns.proj1()), fns.proj2()),
    )
    assert cat_assoc((("x", "y"), "z")) == ("x", ("y", "z"))


def test_capabilities() -> None:
    """The function category is closed and cartesian."""
    assert isinstance(fns, ClosedCategory)
    require(fns, CartesianCategory)


def test_missing_capability_is_a_construction_error() -> None:
    """A category missing an operation cannot be instantiated."""
    class OnlyIdentity(Category[object]):
        def identity(self, obj=None):
            return lambda x: x

    with pytest.raises(TypeError):
        OnlyIdentity()  # type: ignore[abstract]


def test_require_reports_missing_capability() -> None:
    """Derived combinators report a missing capability."""
    class Plain(Category[object]):
        def identity(self, obj=None):
            return lambda x: x

        def compose(self, g, f):
            return lambda x: g(f(x))

    with pytest.raises(CapabilityError) as info:
        diagonal(Plain())  # type: ignore[arg-type]
    assert isinstance(info.value, TypeError)
