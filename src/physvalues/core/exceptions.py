"""
physvalues.core.exceptions
==========================

Error taxonomy for the physvalues value types.

Unit safety is a contract: combining incompatible quantities is a programming
error. It is surfaced as a typed exception rather than aborting the process,
so callers that want to recover can catch it. Each class also derives from
the builtin exception Python code would naturally expect (``TypeError`` for
mixing incompatible operands, ``ValueError`` for a bad numeric argument).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from physvalues.core.dimensions import Dimension


class PhysValuesError(Exception):
    """Base class for all errors raised by physvalues."""


class DimensionMismatchError(PhysValuesError, TypeError):
    """
    Raised when two quantities with different dimension vectors are added,
    subtracted, compared or converted into one another.
    """

    def __init__(self, operation: str, left: "Dimension", right: "Dimension") -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot {operation} quantities with different dimensions: "
            f"'{_label(left)}' and '{_label(right)}'"
        )


class ExponentError(PhysValuesError, ValueError):
    """Raised when a root would leave a non-integer dimension exponent."""


class OffsetUnitError(PhysValuesError, TypeError):
    """
    Raised when a unit with an additive shift (e.g. Celsius) is used in a
    non-linear operation such as multiplication, division or exponentiation.
    """


class RegistryFrozenError(PhysValuesError, RuntimeError):
    """Raised when a frozen units registry is modified."""


def _label(dim: "Dimension") -> str:
    label = dim.symbol or dim.render()
    return label or "dimensionless"


__all__ = [
    "PhysValuesError",
    "DimensionMismatchError",
    "ExponentError",
    "OffsetUnitError",
    "RegistryFrozenError",
]
