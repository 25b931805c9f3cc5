"""
physvalues.units
================

Predefined units and the lazily built ``u`` namespace over the default
registry.
"""
from typing import TYPE_CHECKING, Any

from physvalues.units.definitions import (
    A,
    K,
    ampere,
    candela,
    celsius,
    centimeter,
    cm,
    d,
    day,
    degC,
    degF,
    fahrenheit,
    g,
    gram,
    h,
    hour,
    kelvin,
    kg,
    kilogram,
    kilometer,
    km,
    m,
    meter,
    millimeter,
    minute,
    mm,
    mol,
    mole,
    s,
    second,
)

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from physvalues.units.registry import UnitsRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from physvalues.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'u' will construct a namespace from the
    package's default registry on first use.
    """
    if name == "u":
        return _get_default_registry().as_namespace()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["u"])
