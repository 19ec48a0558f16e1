"""Reference category instances."""

from lincat.instances.dual import Dual, Flipped, Op, OpCategory, dual
from lincat.instances.function import FunctionCategory, Left, Right, Void, absurd, either

__all__ = [
    "FunctionCategory",
    "Left",
    "Right",
    "Void",
    "absurd",
    "either",
    "Op",
    "OpCategory",
    "Dual",
    "Flipped",
    "dual",
]
