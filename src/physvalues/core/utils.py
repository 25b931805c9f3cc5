"""
physvalues.core.utils
=====================

Helpers for rendering dimension vectors and magnitudes as text
(e.g. 'm/s^2', 'kg.m^2/s^2').
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

# Symbols of the base units, in exponent-vector order:
# length, mass, time, current, temperature, luminous intensity, amount.
BASE_SYMBOLS: Tuple[str, ...] = ("m", "kg", "s", "A", "K", "cd", "mol")


def _term(symbol: str, exp: int) -> str:
    return symbol if exp == 1 else f"{symbol}^{exp}"


def format_dim(exponents: Sequence[int]) -> str:
    """
    Turn a 7-vector of exponents into a compact label.

    Positive and negative exponents are rendered as two groups, each in
    base-symbol order. The denominator group follows a '/' and shows the
    absolute exponent: (1, 0, -2, ...) -> 'm/s^2'. A vector with only
    negative exponents joins them with '.' and keeps the sign on every
    exponent but -1: (0, 0, -1, 0, 0, 0, -2) -> 's.mol^-2'.
    A dimensionless vector renders as ''.
    """
    if len(exponents) != len(BASE_SYMBOLS):
        raise ValueError("exponents must have length 7 (m, kg, s, A, K, cd, mol)")

    num: List[str] = []
    den: List[Tuple[str, int]] = []
    for sym, e in zip(BASE_SYMBOLS, exponents):
        if e > 0:
            num.append(_term(sym, e))
        elif e < 0:
            den.append((sym, e))

    if num and den:
        return ".".join(num) + "/" + "/".join(_term(s, -e) for s, e in den)
    if num:
        return ".".join(num)
    # only negative exponents: no "1/" prefix
    return ".".join(s if e == -1 else f"{s}^{e}" for s, e in den)


def format_magnitude(value: float) -> str:
    """Format a magnitude the way quantities print it (15 significant digits)."""
    return f"{value:.15g}"


def format_quantity(value: float, label: str) -> str:
    mag = format_magnitude(value)
    return f"{mag} {label}" if label else mag


__all__ = ["BASE_SYMBOLS", "format_dim", "format_magnitude", "format_quantity"]
