"""Value types of physvalues: `Dimension` and `Quantity`."""

from physvalues.core.dimensions import Dimension
from physvalues.core.exceptions import (
    DimensionMismatchError,
    ExponentError,
    OffsetUnitError,
    PhysValuesError,
    RegistryFrozenError,
)
from physvalues.core.quantity import Quantity

__all__ = [
    "Dimension",
    "Quantity",
    "PhysValuesError",
    "DimensionMismatchError",
    "ExponentError",
    "OffsetUnitError",
    "RegistryFrozenError",
]
