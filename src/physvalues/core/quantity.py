"""
physvalues.core.quantity
========================

Defines the `Quantity` class: a magnitude bound to a `Dimension`.

This module provides:
- Dimensional arithmetic between quantities. Addition, subtraction and
  comparison require matching dimensions; multiplication and division derive
  the unit of the result.
- Conversion between compatible units (`to`, `to_si`).
- Functional forms of every operator (`add`, `multiply`, `square_root`, ...).

Magnitudes are stored in the unit-local scale. Whenever two operands meet,
both are normalized to the SI reference unit, combined there, and the result
is denormalized into the unit of the result, so ``1 km + 500 m`` gives
``1.5 km`` and ``589 km / (300 km/h)`` gives a duration of 7068 s.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Union

from physvalues.core.dimensions import DIMENSIONLESS, Dimension
from physvalues.core.exceptions import DimensionMismatchError
from physvalues.core.utils import format_quantity

Number = Union[int, float]

# Tolerances used by equality and ordering.
REL_TOL = 1e-12
ABS_TOL = 0.0


def _is_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


class Quantity:
    """
    Represents a physical quantity with a magnitude and a unit.

    Attributes
    ----------
    magnitude : float
        The magnitude expressed in the unit-local scale of `dimension`.
    dimension : Dimension
        The unit of measure (exponents, scale and shift).
    """
    __slots__ = ("_magnitude", "_dimension")

    def __init__(self, magnitude: float, dimension: Dimension = DIMENSIONLESS):
        if not _is_number(magnitude):
            raise TypeError(f"Quantity magnitude must be a real number, got {type(magnitude).__name__}")
        if not isinstance(dimension, Dimension):
            raise TypeError(f"Quantity dimension must be a Dimension, got {type(dimension).__name__}")
        object.__setattr__(self, "_magnitude", float(magnitude))
        object.__setattr__(self, "_dimension", dimension)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def dimensionless(cls, value: Number) -> "Quantity":
        return cls(value, DIMENSIONLESS)

    # --- Accessors ---
    @property
    def magnitude(self) -> float:
        return self._magnitude

    @property
    def value(self) -> float:
        """Alias of `magnitude`: the number in the current unit."""
        return self._magnitude

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def normalized(self) -> float:
        """The magnitude expressed in the SI reference unit."""
        return self._dimension.normalize(self._magnitude)

    # --- Helpers ---
    def _check_compatible(self, other: "Quantity", operation: str) -> None:
        if not self._dimension.is_compatible(other._dimension):
            raise DimensionMismatchError(operation, self._dimension, other._dimension)

    def _other_normalized(self, other: object) -> float:
        """Reference magnitude of a comparison operand, checking dimensions."""
        if not isinstance(other, Quantity):
            # Allow comparison with 0 (dimensionless)
            if _is_number(other) and other == 0:
                if not self._dimension.is_dimensionless:
                    raise TypeError("Cannot compare a dimensioned quantity to 0")
                return 0.0
            raise TypeError(f"Cannot compare Quantity with type {type(other).__name__}")
        self._check_compatible(other, "compare")
        return other.normalized

    def _is_close(self, other_normalized: float) -> bool:
        return math.isclose(self.normalized, other_normalized, rel_tol=REL_TOL, abs_tol=ABS_TOL)

    # --- Equality & ordering ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._dimension == other._dimension and self._is_close(other.normalized)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        o = self._other_normalized(other)
        # Strictly less than AND not fuzzy-equal
        return self.normalized < o and not self._is_close(o)

    def __le__(self, other: object) -> bool:
        o = self._other_normalized(other)
        return self.normalized < o or self._is_close(o)

    def __gt__(self, other: object) -> bool:
        o = self._other_normalized(other)
        return self.normalized > o and not self._is_close(o)

    def __ge__(self, other: object) -> bool:
        o = self._other_normalized(other)
        return self.normalized > o or self._is_close(o)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Returns a hashable, discretized key for this quantity.

        `__hash__` is disabled because `__eq__` is tolerance based. Use this
        key to put quantities in dicts or sets at a chosen precision:

        >>> a = (1.0 + 1e-13) * meter
        >>> b = (1.0 - 1e-13) * meter
        >>> a.as_key(precision=9) == b.as_key(precision=9)
        True

        Parameters
        ----------
        precision : int, optional
            Decimal places the *normalized* magnitude is rounded to,
            by default 12.

        Returns
        -------
        tuple
            ``(dimension, rounded_normalized_magnitude)``.
        """
        rounded = round(self.normalized, precision)
        # -0.0 and 0.0 compare equal; keep one canonical zero
        if rounded == 0.0:
            rounded = 0.0
        return (self._dimension, rounded)

    # --- Conversion ---
    def to(self, dimension: Dimension) -> "Quantity":
        """Re-express this quantity in another unit of the same dimension."""
        if not isinstance(dimension, Dimension):
            raise TypeError(f"Can only convert to a Dimension, got {type(dimension).__name__}")
        if not self._dimension.is_compatible(dimension):
            raise DimensionMismatchError("convert", self._dimension, dimension)
        return Quantity(dimension.denormalize(self.normalized), dimension)

    def to_si(self) -> "Quantity":
        """Return an equivalent Quantity in the SI reference unit."""
        return Quantity(self.normalized, self._dimension.reference)

    @property
    def si(self) -> "Quantity":
        return self.to_si()

    # --- Arithmetic ---
    def __add__(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "add")
        # return in left operand's unit
        dim = self._dimension
        return Quantity(dim.denormalize(self.normalized + other.normalized), dim)

    def __sub__(self, other: object) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        self._check_compatible(other, "subtract")
        dim = self._dimension
        return Quantity(dim.denormalize(self.normalized - other.normalized), dim)

    def __mul__(self, other: object) -> "Quantity":
        # quantity × scalar
        if _is_number(other):
            return Quantity(self._magnitude * float(other), self._dimension)

        # quantity × unit: the unit counts as one of itself
        if isinstance(other, Dimension):
            other = Quantity(1.0, other)

        if not isinstance(other, Quantity):
            return NotImplemented

        dim = self._dimension * other._dimension
        return Quantity(dim.denormalize(self.normalized * other.normalized), dim)

    def __rmul__(self, other: object) -> "Quantity":
        # allows 3 * (2 m) -> 6 m and meter * (2 s)
        if isinstance(other, Dimension):
            return Quantity(1.0, other) * self
        if _is_number(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> "Quantity":
        # quantity / scalar
        if _is_number(other):
            return Quantity(self._magnitude / float(other), self._dimension)

        if isinstance(other, Dimension):
            other = Quantity(1.0, other)

        if not isinstance(other, Quantity):
            return NotImplemented

        dim = self._dimension / other._dimension
        return Quantity(dim.denormalize(self.normalized / other.normalized), dim)

    def __rtruediv__(self, other: object) -> "Quantity":
        # scalar / quantity -> inverse dimension
        if isinstance(other, Dimension):
            return Quantity(1.0, other) / self
        if not _is_number(other):
            return NotImplemented
        dim = 1 / self._dimension
        return Quantity(dim.denormalize(float(other) / self.normalized), dim)

    def __pow__(self, n: int) -> "Quantity":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be an int, got {type(n).__name__}")
        return Quantity(self._magnitude ** n, self._dimension ** n)

    def sqrt(self) -> "Quantity":
        """Square root; every exponent of the dimension must be even."""
        dim = self._dimension.sqrt()
        return Quantity(math.sqrt(self._magnitude), dim)

    def __neg__(self) -> "Quantity":
        return Quantity(-self._magnitude, self._dimension)

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self._magnitude), self._dimension)

    def __float__(self) -> float:
        if not self._dimension.is_dimensionless:
            raise TypeError(
                f"Only dimensionless quantities can be converted to float, not '{self._dimension.render()}'"
            )
        return self.normalized

    # --- Stepping ---
    def distance_to(self, other: "Quantity") -> "Quantity":
        """``other - self`` expressed in this quantity's unit."""
        if not isinstance(other, Quantity):
            raise TypeError(f"Expected a Quantity, got {type(other).__name__}")
        self._check_compatible(other, "measure the distance between")
        return Quantity(other.to(self._dimension)._magnitude - self._magnitude, self._dimension)

    def advanced_by(self, amount: "Quantity") -> "Quantity":
        return self + amount

    # --- Rendering ---
    def render(self) -> str:
        """Normalized magnitude followed by the reference unit label."""
        return format_quantity(self.normalized, self._dimension.render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render()

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "si"
            The normalized magnitude with the SI unit label (default).
        "native"
            The magnitude in the current unit followed by the unit's symbol.
            Units without a symbol (e.g. derived ones) fall back to "si".

        Examples
        --------
        >>> d = 1.5 * kilometer
        >>> f"{d}"
        '1500 m'
        >>> f"{d:native}"
        '1.5 km'

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "native", or "si".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "si"):
            return self.render()
        if spec == "native":
            if not self._dimension.symbol:
                return self.render()
            return format_quantity(self._magnitude, self._dimension.symbol)
        raise ValueError("Unknown format spec; use '', 'native', or 'si'")


# --- Functional forms --------------------------------------------------------

def add(a: Quantity, b: Quantity) -> Quantity:
    return a + b


def subtract(a: Quantity, b: Quantity) -> Quantity:
    return a - b


def multiply(a: Quantity, b: Quantity) -> Quantity:
    return a * b


def divide(a: Quantity, b: Quantity) -> Quantity:
    return a / b


def scalar_multiply(k: Number, q: Quantity) -> Quantity:
    """Scale the magnitude by ``k``; the unit is unchanged."""
    return q * k


def scalar_divide(k: Number, q: Quantity) -> Quantity:
    """Divide the magnitude by ``k``; the unit is unchanged."""
    return q / k


def power(q: Quantity, n: int) -> Quantity:
    return q ** n


def square_root(q: Quantity) -> Quantity:
    return q.sqrt()


__all__ = [
    "Quantity",
    "REL_TOL",
    "ABS_TOL",
    "add",
    "subtract",
    "multiply",
    "divide",
    "scalar_multiply",
    "scalar_divide",
    "power",
    "square_root",
]
