"""
physvalues.units.registry
=========================

A process-wide registry of named units.

- `UnitsRegistry` maps unit names and aliases to `Dimension` constants
  (thread-safe while it is being populated).
- Lookups normalize spelling (Unicode NFC, surrounding whitespace).
- `freeze()` turns the registry read-only; the default registry is built
  once at import time and frozen straight away.
- `UnitNamespace` gives attribute access (``u.km``, ``u.hour``).

The registry resolves single names only; compound expressions such as
"m/s^2" are built with Python operators instead (``meter / second**2``).
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from typing import ClassVar, Dict, Mapping

from physvalues.core.dimensions import Dimension
from physvalues.core.exceptions import RegistryFrozenError
from physvalues.units import definitions

logger = logging.getLogger(__name__)


def normalize_symbol(s: str) -> str:
    """Normalize user-provided unit names (NFC, stripped)."""
    if not s:
        return s
    return unicodedata.normalize("NFC", s.strip())


class UnitsRegistry:
    """Thread-safe registry of named `Dimension` constants."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Dimension] = {}
        self._aliases: Dict[str, str] = {}
        self._frozen = False

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    def __len__(self) -> int:
        return len(self._units)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------- public API ---------------------------------
    def register(self, name: str, unit: Dimension, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a unit under ``name``."""
        if not isinstance(unit, Dimension):
            raise TypeError(f"Can only register a Dimension, got {type(unit).__name__}")
        key = normalize_symbol(name)
        if not key:
            raise ValueError("Unit name must be a non-empty string")

        with self._lock:
            self._check_writable()
            if key in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register unit '{key}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if not replace:
                if key in self._units:
                    raise ValueError(
                        f"Cannot register unit '{key}': a unit with this name already exists."
                    )
                if key in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{key}': an alias with this name already exists."
                    )
            self._units[key] = unit

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        key = normalize_symbol(alias)
        target = normalize_symbol(canonical)
        if not key:
            raise ValueError("Alias must be a non-empty string")

        with self._lock:
            self._check_writable()
            if key in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if target not in self._units:
                raise ValueError(f"Cannot alias '{alias}' to unknown unit '{canonical}'")
            if not replace:
                if key in self._units and key != target:
                    raise ValueError(
                        f"Cannot register alias '{alias}': "
                        f"a unit with the name '{key}' already exists."
                    )
                if key in self._aliases and self._aliases[key] != target:
                    raise ValueError(
                        f"Cannot register alias '{alias}': it already points to '{self._aliases[key]}'."
                    )
            self._aliases[key] = target

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except ValueError:
            return False

    def get(self, symbol: str) -> Dimension:
        """Lookup a unit by name or alias. Raises `ValueError` if unknown."""
        sym = normalize_symbol(symbol)
        with self._lock:
            # alias redirect
            sym = self._aliases.get(sym, sym)
            unit = self._units.get(sym)
        if unit is None:
            raise ValueError(f"Unknown unit symbol: {symbol}")
        return unit

    def all(self) -> Mapping[str, Dimension]:
        with self._lock:
            return dict(self._units)

    def aliases(self) -> Mapping[str, str]:
        with self._lock:
            return dict(self._aliases)

    def freeze(self) -> "UnitsRegistry":
        """Make the registry read-only. Returns the registry for chaining."""
        with self._lock:
            self._frozen = True
        logger.debug("Units registry frozen with %d units and %d aliases.",
                     len(self._units), len(self._aliases))
        return self

    def as_namespace(self) -> "UnitNamespace":
        return UnitNamespace(self)

    # ------------------------- internals -----------------------------------
    def _check_writable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("The units registry is frozen and cannot be modified.")


class UnitNamespace:
    """Attribute-style access to a registry: ``u.km``, ``u("°C")``."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "UnitsRegistry") -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def __call__(self, spec: str) -> Dimension:
        return self._reg.get(spec)

    def __getattr__(self, name: str) -> Dimension:
        # dunder/private lookups (copy, pickle) must not reach the registry
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._reg.get(name)
        except ValueError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit names for autocomplete."""
        base_dir = set(super().__dir__())
        names = set(self._reg.all()) | set(self._reg.aliases())
        return sorted(base_dir | {n for n in names if n.isidentifier()})


UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap the default registry with the predefined units
# ---------------------------------------------------------------------------

def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()
    for name, aliases in definitions.UNIT_NAMES:
        reg.register(name, getattr(definitions, name))
        for alias in aliases:
            reg.register_alias(alias, name)
    logger.debug("Default units registry bootstrapped.")
    return reg.freeze()


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
]
