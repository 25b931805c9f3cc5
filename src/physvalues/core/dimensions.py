# physvalues.core.dimensions
"""
physvalues.core.dimensions
==========================

The `Dimension` type: a unit of measure described by its exponents over the
seven base physical dimensions, plus the `scale` and `shift` that map a
magnitude expressed in that unit onto the SI reference unit.

    reference = local * scale + shift
    local     = (reference - shift) / scale

Two dimensions are equal when their exponents match; scale and shift only
affect numeric conversion, never compatibility. So ``kilometer == meter``
holds and quantities in both units can be added together.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Any, Iterable, Tuple

from physvalues.core.exceptions import ExponentError, OffsetUnitError
from physvalues.core.utils import BASE_SYMBOLS, format_dim

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from physvalues.core.quantity import Quantity

Exponents = Tuple[int, int, int, int, int, int, int]

_EXPONENT_FIELDS = (
    "length",
    "mass",
    "time",
    "current",
    "temperature",
    "luminous_intensity",
    "amount",
)


def _derived_scale(scale: float, operation: str) -> float:
    """Reject derived scales that fall outside the float range."""
    if scale == 0.0 or not math.isfinite(scale):
        raise ValueError(f"Cannot {operation}: the resulting scale is out of float range")
    return scale


def _as_exponent(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"Exponent '{name}' must be an int, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"Exponent '{name}' must be an int, got {type(value).__name__}"
        ) from None


@dataclass(frozen=True, slots=True, eq=False)
class Dimension:
    """
    An immutable unit of measure.

    Attributes
    ----------
    length, mass, time, current, temperature, luminous_intensity, amount : int
        Exponents of m, kg, s, A, K, cd and mol.
    scale : float
        Factor converting 1 local unit to the reference unit
        (m=1.0, km=1000.0, h=3600.0). Nonzero and finite.
    shift : float
        Offset added after scaling, for units whose zero is not the
        reference zero (°C: scale=1, shift=273.15). 0 for ordinary units.
    symbol : str
        Optional display label of the local unit ("km", "°C"). Not part
        of equality.
    """

    length: int = 0
    mass: int = 0
    time: int = 0
    current: int = 0
    temperature: int = 0
    luminous_intensity: int = 0
    amount: int = 0
    scale: float = 1.0
    shift: float = 0.0
    symbol: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        for name in _EXPONENT_FIELDS:
            object.__setattr__(self, name, _as_exponent(name, getattr(self, name)))

        scale = float(self.scale)
        shift = float(self.shift)
        if scale == 0.0 or not math.isfinite(scale):
            raise ValueError("scale must be a nonzero, finite number")
        if not math.isfinite(shift):
            raise ValueError("shift must be a finite number")
        object.__setattr__(self, "scale", scale)
        object.__setattr__(self, "shift", shift)

    @classmethod
    def from_exponents(
        cls,
        exponents: Iterable[int],
        scale: float = 1.0,
        shift: float = 0.0,
        symbol: str = "",
    ) -> "Dimension":
        exps = tuple(exponents)
        if len(exps) != len(_EXPONENT_FIELDS):
            raise ValueError("Dimension must have 7 exponents (m, kg, s, A, K, cd, mol).")
        return cls(*exps, scale=scale, shift=shift, symbol=symbol)

    # --- Exponent vector ---
    @property
    def exponents(self) -> Exponents:
        return (
            self.length,
            self.mass,
            self.time,
            self.current,
            self.temperature,
            self.luminous_intensity,
            self.amount,
        )

    @property
    def is_dimensionless(self) -> bool:
        return all(e == 0 for e in self.exponents)

    @property
    def is_linear(self) -> bool:
        """True when the unit is purely multiplicative w.r.t. its reference."""
        return self.shift == 0.0

    @property
    def reference(self) -> "Dimension":
        """The SI coherent unit (scale 1, no shift) with the same exponents."""
        return Dimension.from_exponents(self.exponents)

    def is_compatible(self, other: "Dimension") -> bool:
        return self.exponents == other.exponents

    # --- Equality ignores scale, shift and symbol ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.exponents == other.exponents

    def __hash__(self) -> int:
        return hash(self.exponents)

    # --- Normalization ---
    def normalize(self, value: float) -> float:
        """Convert a magnitude in this unit to the reference unit."""
        return value * self.scale + self.shift

    def denormalize(self, value: float) -> float:
        """Convert a reference magnitude back into this unit."""
        return (value - self.shift) / self.scale

    # --- Algebra ---
    def _require_linear(self, operation: str) -> None:
        if not self.is_linear:
            label = self.symbol or self.render()
            raise OffsetUnitError(
                f"Cannot {operation} a unit with an offset ('{label}', shift={self.shift:g}); "
                "convert it to its reference unit first."
            )

    def __mul__(self, other: object) -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        self._require_linear("multiply")
        other._require_linear("multiply")
        return Dimension.from_exponents(
            (x + y for x, y in zip(self.exponents, other.exponents)),
            scale=_derived_scale(self.scale * other.scale, "multiply"),
        )

    def __truediv__(self, other: object) -> "Dimension":
        if not isinstance(other, Dimension):
            return NotImplemented
        self._require_linear("divide")
        other._require_linear("divide")
        return Dimension.from_exponents(
            (x - y for x, y in zip(self.exponents, other.exponents)),
            scale=_derived_scale(self.scale / other.scale, "divide"),
        )

    def __rtruediv__(self, n: object) -> "Dimension":
        if isinstance(n, Real) and not isinstance(n, bool) and n == 1:
            return DIMENSIONLESS / self
        if isinstance(n, Real):
            label = self.symbol or self.render()
            raise TypeError(
                f"Invalid operation: cannot divide {n} by a Dimension ({label}). "
                "Only 1/unit (reciprocal) is supported."
            )
        return NotImplemented

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimension":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Exponent must be an int, got {type(n).__name__}")
        if n == 1:
            return self
        self._require_linear("raise to a power")
        try:
            scale = self.scale ** n
        except OverflowError:
            scale = math.inf
        return Dimension.from_exponents(
            (e * n for e in self.exponents),
            scale=_derived_scale(scale, "raise to a power"),
        )

    def sqrt(self) -> "Dimension":
        """Halve every exponent; all of them must be even."""
        self._require_linear("take the square root of")
        odd = [sym for sym, e in zip(BASE_SYMBOLS, self.exponents) if e % 2]
        if odd:
            raise ExponentError(
                f"Cannot take the square root of '{self.render()}': "
                f"odd exponent for {', '.join(odd)}"
            )
        if self.scale < 0:
            raise ValueError("Cannot take the square root of a unit with a negative scale")
        return Dimension.from_exponents(
            (e // 2 for e in self.exponents),
            scale=math.sqrt(self.scale),
        )

    def __rmul__(self, value: object) -> "Quantity":
        """``5 * kilometer`` builds a Quantity."""
        from physvalues.core.quantity import Quantity

        if isinstance(value, bool) or not isinstance(value, Real):
            return NotImplemented
        return Quantity(float(value), self)

    # --- Rendering ---
    def render(self) -> str:
        """Compact label of the reference unit, e.g. 'm/s^2' or 'kg.m^2'."""
        return format_dim(self.exponents)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        parts = "".join(
            f"[{sym}^{e}]" for sym, e in zip(BASE_SYMBOLS, self.exponents) if e != 0
        )
        extra = f", symbol={self.symbol!r}" if self.symbol else ""
        return f"Dimension({parts or '1'}, scale={self.scale:g}, shift={self.shift:g}{extra})"


# --- Functional forms --------------------------------------------------------

def combine(a: Dimension, b: Dimension) -> Dimension:
    """Exponent-wise sum (the unit of a product)."""
    return a * b


def invert_combine(a: Dimension, b: Dimension) -> Dimension:
    """Exponent-wise difference ``a - b`` (the unit of a quotient)."""
    return a / b


def power(a: Dimension, n: int) -> Dimension:
    return a ** n


def is_dimension_compatible(a: Dimension, b: Dimension) -> bool:
    return a.is_compatible(b)


# --- Base dimensions (SI reference units) ------------------------------------

DIMENSIONLESS      = Dimension()
LENGTH             = Dimension(length=1)
MASS               = Dimension(mass=1)
TIME               = Dimension(time=1)
CURRENT            = Dimension(current=1)
TEMPERATURE        = Dimension(temperature=1)
LUMINOUS_INTENSITY = Dimension(luminous_intensity=1)
AMOUNT             = Dimension(amount=1)


__all__ = [
    "Dimension",
    "Exponents",
    "combine",
    "invert_combine",
    "power",
    "is_dimension_compatible",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "LUMINOUS_INTENSITY",
    "AMOUNT",
]
