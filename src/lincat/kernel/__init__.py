"""Kernel layer - category interface, spaces, errors, trace and settings."""

from lincat.kernel.category import (
    BicartesianCategory,
    CartesianCategory,
    Category,
    CategoryWith0,
    CategoryWith1,
    ClosedCategory,
    CocartesianCategory,
    GeneralizedElement,
    assoc,
    compose_all,
    cross,
    diagonal,
    identity,
    require,
    swap,
)
from lincat.kernel.config import Settings, default_settings
from lincat.kernel.errors import (
    CapabilityError,
    LincatError,
    NotYetSupportedError,
    ShapeMismatchError,
    UndefinedDimensionError,
)
from lincat.kernel.spaces import (
    SCALAR,
    UNIT,
    FunctionSpace,
    Product,
    Scalar,
    Space,
    Unit,
    dimension_of,
    has_dimension,
    space_of,
    split_product,
)
from lincat.kernel.trace import Evidence, Trace

__all__ = [
    # Category interface
    "Category",
    "CategoryWith1",
    "CartesianCategory",
    "CategoryWith0",
    "CocartesianCategory",
    "BicartesianCategory",
    "ClosedCategory",
    "GeneralizedElement",
    "identity",
    "compose_all",
    "require",
    "diagonal",
    "cross",
    "swap",
    "assoc",
    # Spaces
    "Space",
    "Unit",
    "Scalar",
    "Product",
    "FunctionSpace",
    "UNIT",
    "SCALAR",
    "dimension_of",
    "has_dimension",
    "split_product",
    "space_of",
    # Errors
    "LincatError",
    "ShapeMismatchError",
    "UndefinedDimensionError",
    "NotYetSupportedError",
    "CapabilityError",
    # Trace & settings
    "Evidence",
    "Trace",
    "Settings",
    "default_settings",
]
