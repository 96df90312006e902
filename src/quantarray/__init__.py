"""
quantarray: dimension-safe physical quantity vectors.

quantarray stores arrays of physical values in SI, tagged with a display unit
and a quantity kind, in dense or sparse form. Adding and subtracting follows
the Absolute/Relative rules (Position − Position is a Length); multiplying
and dividing produces SI-tagged results that can be cast back to a named
quantity only when the dimensions match.

Heavy subsystems (the units registry) are imported lazily to avoid
import-time side effects and circular imports.
"""

import logging
from importlib import metadata as _metadata
from typing import Any

# Library logging stays silent unless the application configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("quantarray")
except _metadata.PackageNotFoundError:
    import tomllib
    from pathlib import Path

    _pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(_pyproject, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

_LAZY_EXPORTS = {
    "Scalar": "quantarray.core.scalar",
    "SIScalar": "quantarray.core.scalar",
    "QuantityVector": "quantarray.core.vector",
    "SIVector": "quantarray.core.si_vector",
    "QuantityMatrix": "quantarray.core.matrix",
    "SIMatrix": "quantarray.core.matrix",
    "StorageType": "quantarray.core.vector_data",
    "SIDimensions": "quantarray.core.dimensions",
}


def __getattr__(name: str) -> Any:
    if name == "u":
        from quantarray.units import _get_default_registry

        return _get_default_registry().as_namespace()
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS) + ["u"])


# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", *_LAZY_EXPORTS]
