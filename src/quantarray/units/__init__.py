"""
quantarray.units
================

Quantity kinds, unit lookup and dimension-signature parsing.

``from quantarray.units import u`` gives attribute access to the default
registry (``u.km``, ``u.Position.km``, ``u("kPa")``). The registry is built
on first access, not at import time.
"""
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantarray.core.unit import QuantityKind, Unit
    from quantarray.units.registry import UnitsRegistry

_LAZY = ("u", "DEFAULT_REGISTRY")


def _get_default_registry() -> "UnitsRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from quantarray.units.registry import DEFAULT_REGISTRY  # local import
    return DEFAULT_REGISTRY


def get_unit(symbol: str, kind: "QuantityKind | str | None" = None) -> "Unit":
    """Shortcut for ``DEFAULT_REGISTRY.get(symbol, kind)``."""
    return _get_default_registry().get(symbol, kind)


def get_kind(name: str) -> "QuantityKind":
    """Shortcut for ``DEFAULT_REGISTRY.kind(name)``."""
    return _get_default_registry().kind(name)


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. 'u' is a namespace over the default registry;
    'DEFAULT_REGISTRY' is the registry itself.
    """
    if name == "u":
        return _get_default_registry().as_namespace()
    if name == "DEFAULT_REGISTRY":
        return _get_default_registry()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))
