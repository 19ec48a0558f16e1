"""
Forward-mode differentiation of quad(x, y) = x*x + y*y.

This example shows:
1. Building a differentiable arrow from category combinators only
2. Directional derivatives at a point
3. Which rewrite rules the chain rule fired
"""

import logging
import math

from lincat import ADCategory, Trace, evaluate_ad, jacobian
from lincat import ad
from lincat.kernel.spaces import SCALAR

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
logger = logging.getLogger("quad")


def build_quad(cat: ADCategory) -> ad.AD:
    s = SCALAR
    square_x = cat.compose(ad.mult(), cat.fanout(cat.proj1(s, s), cat.proj1(s, s)))
    square_y = cat.compose(ad.mult(), cat.fanout(cat.proj2(s, s), cat.proj2(s, s)))
    return cat.compose(ad.add(), cat.fanout(square_x, square_y))


if __name__ == "__main__":
    trace = Trace()
    quad = build_quad(ADCategory(trace))

    point = (1.0, 2.0)
    directions = [(1.0, 0.0), (0.0, 1.0), (1 / math.sqrt(2), 1 / math.sqrt(2))]
    value, derivatives = evaluate_ad(quad, point, directions)

    print(f"quad{point} = {value}")
    for direction, derivative in zip(directions, derivatives):
        print(f"  along {direction}: {derivative}")
    print(f"jacobian: {jacobian(quad, point).tolist()}")

    for event in trace.get_events():
        logger.info("%s parent=%s %s", event.action, event.parent_id, event.info)
