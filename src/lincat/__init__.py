from .ad import AD, ADCategory, evaluate_ad, jacobian
from .instances import FunctionCategory, OpCategory, dual
from .kernel import (
    SCALAR,
    UNIT,
    FunctionSpace,
    Product,
    Settings,
    Trace,
    dimension_of,
    split_product,
)
from .kernel.errors import (
    LincatError,
    NotYetSupportedError,
    ShapeMismatchError,
    UndefinedDimensionError,
)
from .linear import (
    Composable,
    ComposableCategory,
    LinearCategory,
    LinMap,
    compose,
    materialize,
    scale,
)
from .vectorspace import from_vector, to_vector

__all__ = [
    # Spaces
    "UNIT",
    "SCALAR",
    "Product",
    "FunctionSpace",
    "dimension_of",
    "split_product",
    # Categories
    "FunctionCategory",
    "OpCategory",
    "dual",
    "LinearCategory",
    "ComposableCategory",
    "ADCategory",
    # Linear maps
    "LinMap",
    "Composable",
    "AD",
    "compose",
    "scale",
    "materialize",
    "evaluate_ad",
    "jacobian",
    # Vectors
    "to_vector",
    "from_vector",
    # Errors
    "LincatError",
    "ShapeMismatchError",
    "UndefinedDimensionError",
    "NotYetSupportedError",
    # Infrastructure
    "Trace",
    "Settings",
]
