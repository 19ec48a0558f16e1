"""
Long composition chains with the composable representation.

Composing ``Composable`` maps only composes closures; the rewrite rules
run once, when the chain is lowered to an ordinary expression.
"""

import logging

import numpy as np

from lincat import ComposableCategory, LinearCategory, Trace, materialize
from lincat.kernel.category import compose_all, swap
from lincat.kernel.spaces import SCALAR
from lincat.linear import from_matrix, lift, to_matrix

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
logger = logging.getLogger("composable_chain")

P = SCALAR * SCALAR


def rotation(theta: float):
    c, s = np.cos(theta), np.sin(theta)
    return from_matrix(np.array([[c, -s], [s, c]]), P, P)


if __name__ == "__main__":
    ccat = ComposableCategory()
    steps = [lift(rotation(np.pi / 8)) for _ in range(16)]
    chain = compose_all(ccat, swap(ccat, SCALAR, SCALAR), *steps)
    print("composable chain:")
    print(np.round(to_matrix(chain), 12))

    trace = Trace()
    cat = LinearCategory(trace)
    direct = compose_all(cat, cat.proj1(SCALAR, SCALAR), rotation(0.3), cat.inl(SCALAR, SCALAR))
    print(f"proj1 . rotation . inl = {materialize(direct).tolist()}")
    logger.info("%d rewrite rules fired, top level: %s", len(trace), trace.as_tree().get(None))
