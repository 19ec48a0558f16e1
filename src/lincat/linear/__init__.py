"""Symbolic linear maps - expressions, rewrite rules, matrices."""

from lincat.linear.algebra import (
    LinearCategory,
    compose,
    evaluate_families,
    first,
    scale,
    second,
)
from lincat.linear.composable import (
    Composable,
    ComposableCategory,
    eval_at,
    fork_family,
    lift,
    linear,
    to_matrix,
)
from lincat.linear.expr import (
    CaseSplit,
    EvalFamily,
    Family,
    LinMap,
    Pair,
    Scaled,
    Sum,
    Zero,
    add,
    case_split,
    contains_family,
    eval_family,
    family,
    identity_map,
    pair,
    scaled_identity,
    zero_map,
)
from lincat.linear.matrix import from_matrix, materialize
from lincat.linear.pointwise import apply

__all__ = [
    # Expressions
    "LinMap",
    "Zero",
    "Scaled",
    "Pair",
    "CaseSplit",
    "Sum",
    "Family",
    "EvalFamily",
    "zero_map",
    "scaled_identity",
    "identity_map",
    "pair",
    "case_split",
    "add",
    "family",
    "eval_family",
    "contains_family",
    # Rules
    "compose",
    "scale",
    "first",
    "second",
    "evaluate_families",
    "LinearCategory",
    # Evaluation
    "materialize",
    "from_matrix",
    "apply",
    # Composable
    "Composable",
    "ComposableCategory",
    "lift",
    "linear",
    "fork_family",
    "eval_at",
    "to_matrix",
]
