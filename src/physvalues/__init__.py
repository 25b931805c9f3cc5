"""
physvalues: physical values with dimensional analysis.

A quantity couples a magnitude with a unit of measure. Adding, subtracting or
comparing quantities of different dimensions is refused, while multiplying
and dividing them derives the unit of the result:

>>> from physvalues.units import kilometer, hour
>>> 589 * kilometer / (300 * (kilometer / hour))
7068 s

This module exposes a minimal, stable public API. The units registry is
imported lazily to avoid import-time side effects and circular imports.
"""

import logging
from importlib import metadata as _metadata


__author__ = "physvalues contributors"
__license__ = "Apache-2.0"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("physvalues")
except _metadata.PackageNotFoundError:
    import tomllib
    try:
        with open("pyproject.toml", "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        __version__ = "0.0.0"

# Library logging stays silent unless the application configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from physvalues.core.dimensions import Dimension  # noqa: E402
from physvalues.core.quantity import Quantity  # noqa: E402

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__", "Dimension", "Quantity"]

from typing import TYPE_CHECKING, Any  # noqa: E402

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
