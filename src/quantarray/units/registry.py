"""
quantarray.units.registry
=========================

Thread-safe registry of quantity kinds and their units.

- Every `QuantityKind` gets its own symbol namespace, so the absolute and
  relative flavours of a unit can share a symbol (``m`` is both a Length
  and a Position unit, ``K`` both a Temperature and an AbsoluteTemperature).
- A global symbol index answers lookups without a kind; the first
  registration of a symbol wins, so relative kinds are registered first.
- Prefixed units (``km``, ``mPa``, ``µs``) are synthesized lazily on first
  lookup, with anti-stacking checks and a non-prefixable set.
- `resolve` maps an `SIDimensions` vector to an anonymous SI unit, created
  once per dimension vector and cached for the lifetime of the registry.
- Aliases (e.g. ``ohm`` → ``Ω``, ``degC`` → ``°C``) redirect to canonical
  symbols.

The registry only deals with atomic symbols. Dimension signatures such as
``"kg m s-2"`` go through `quantarray.units.parser`.
"""
from __future__ import annotations

import logging
import math
import re
import threading
import unicodedata
from typing import ClassVar, Dict, Iterable, Mapping, Optional, Tuple

from quantarray.core.dimensions import SIDimensions
from quantarray.core.errors import UnitRuntimeError, require
from quantarray.core.scale import IDENTITY_SCALE, GradeScale, LinearScale, OffsetLinearScale
from quantarray.core.unit import QuantityKind, Unit
from quantarray.units import quantities as q
from quantarray.units.prefixes import PREFIXES

logger = logging.getLogger(__name__)

# Ordered list of prefix symbols by descending length for robust matching
_PREFIX_SYMBOLS_DESC = tuple(sorted((p.symbol for p in PREFIXES), key=len, reverse=True))
_PREFIX_FACTORS: Mapping[str, float] = {p.symbol: p.factor for p in PREFIXES}

_OHM_RE = re.compile(r"(?i)ohm")


def normalize_symbol(s: str) -> str:
    """Normalize user-provided unit symbols.

    Rules:
    - Unicode normalize to NFC (composed forms like "µ").
    - Replace ASCII leading 'u' micro with Greek 'µ' **only** at start.
    - Replace any spelling of 'ohm' with 'Ω'.
    - Strip surrounding whitespace.
    """
    if not s:
        return s

    s = s.strip()
    s = unicodedata.normalize("NFC", s)

    if s.startswith("u"):
        s = "µ" + s[1:]

    return _OHM_RE.sub("Ω", s)


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry for quantity kinds and `Unit` objects."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._kinds: Dict[str, QuantityKind] = {}
        self._si_units: Dict[str, Unit] = {}
        self._units: Dict[str, Dict[str, Unit]] = {}
        self._symbols: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}
        self._non_prefixable: set[str] = set()
        self._absolute: Dict[str, QuantityKind] = {}
        self._derived: Dict[SIDimensions, Unit] = {}
        self._array_classes: Dict[Tuple[str, str], type] = {}

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    # -------------------------- kinds --------------------------------------
    def register_kind(self, kind: QuantityKind, si_symbol: str | None = None) -> Unit:
        """
        Register ``kind`` together with its coherent SI unit and return that unit.

        An absolute kind needs its relative kind registered first; its SI unit
        uses the relative SI unit's symbol unless ``si_symbol`` is given.
        """
        require(kind, "kind")
        with self._lock:
            if kind.generic:
                raise ValueError(f"Generic kind {kind.name!r} cannot be registered")
            if kind.name in self._kinds:
                raise ValueError(f"Cannot register kind '{kind.name}': it already exists.")

            if kind.is_absolute:
                relative = self._kinds.get(kind.relative.name)
                if relative is None or relative != kind.relative:
                    raise ValueError(
                        f"Cannot register absolute kind '{kind.name}': "
                        f"relative kind '{kind.relative.name}' is not registered."
                    )
                if relative.name in self._absolute:
                    raise ValueError(
                        f"Relative kind '{relative.name}' is already paired with "
                        f"'{self._absolute[relative.name].name}'."
                    )
                rel_si = self._si_units[relative.name]
                name = rel_si.name if si_symbol is None else si_symbol
                si = Unit(name, IDENTITY_SCALE, kind, relative_unit=rel_si)
                self._absolute[relative.name] = kind
            else:
                si = Unit.si(kind, si_symbol)

            self._kinds[kind.name] = kind
            self._units[kind.name] = {}
            self._si_units[kind.name] = si
            self._add(si)
            return si

    def kind(self, kind: "QuantityKind | str") -> QuantityKind:
        """Look up a registered kind by name (or validate a kind object)."""
        require(kind, "kind")
        name = kind.name if isinstance(kind, QuantityKind) else kind
        with self._lock:
            found = self._kinds.get(name)
        if found is None or (isinstance(kind, QuantityKind) and found != kind):
            raise ValueError(f"Unknown quantity kind: {name}")
        return found

    def kinds(self) -> Mapping[str, QuantityKind]:
        with self._lock:
            return dict(self._kinds)

    def kinds_for(self, dims: SIDimensions) -> Tuple[QuantityKind, ...]:
        """All registered kinds with exactly these dimensions, in registration order."""
        dims = SIDimensions(dims)
        with self._lock:
            return tuple(k for k in self._kinds.values() if k.dimensions == dims)

    def si_unit(self, kind: "QuantityKind | str") -> Unit:
        target = self.kind(kind)
        with self._lock:
            return self._si_units[target.name]

    def absolute_kind(self, relative: "QuantityKind | str") -> Optional[QuantityKind]:
        """The absolute kind paired with ``relative``, or None."""
        target = self.kind(relative)
        with self._lock:
            return self._absolute.get(target.name)

    # -------------------------- units --------------------------------------
    def set_non_prefixable(self, symbols: Iterable[str]) -> None:
        """Mark unit symbols that must not accept SI prefixes (e.g., 'kg', 'min')."""
        with self._lock:
            self._non_prefixable = {normalize_symbol(s) for s in symbols}

    def is_non_prefixable(self, symbol: str) -> bool:
        return normalize_symbol(symbol) in self._non_prefixable

    def register(self, unit: Unit, replace: bool = False) -> None:
        """Register (or overwrite if replace is True) a unit in its kind's namespace.

        The global symbol index keeps the first unit registered under a symbol;
        with ``replace`` it is only repointed when the kinds agree.
        """
        require(unit, "unit")
        with self._lock:
            if unit.name in getattr(UnitNamespace, "_reserved_names", ()):
                raise ValueError(
                    f"Cannot register unit '{unit.name}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            registered = self._kinds.get(unit.kind.name)
            if registered is None or registered != unit.kind:
                raise ValueError(
                    f"Cannot register unit '{unit.name}': kind '{unit.kind.name}' is not registered."
                )

            namespace = self._units[unit.kind.name]
            if not replace:
                if unit.name in namespace:
                    raise ValueError(
                        f"Cannot register unit '{unit.name}': "
                        f"a {unit.kind.name} unit with this name already exists."
                    )
                if unit.name in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{unit.name}': "
                        "an alias with this name already exists."
                    )

            namespace[unit.name] = unit
            current = self._symbols.get(unit.name)
            if current is None or (replace and current.kind == unit.kind):
                self._symbols[unit.name] = unit

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        norm_key = normalize_symbol(alias)
        literal_key = unicodedata.normalize("NFC", alias.strip())

        with self._lock:
            reserved = getattr(UnitNamespace, "_reserved_names", ())
            if literal_key in reserved or norm_key in reserved:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if not replace:
                for key in {literal_key, norm_key}:
                    if key in self._symbols and key != canonical:
                        raise ValueError(
                            f"Cannot register alias '{alias}' (which maps to '{key}'): "
                            f"a unit with the name '{key}' already exists."
                        )
            self._aliases[norm_key] = canonical
            self._aliases[literal_key] = canonical

    def has(self, symbol: str, kind: "QuantityKind | str | None" = None) -> bool:
        try:
            self.get(symbol, kind)
            return True
        except ValueError:
            return False

    def get(self, symbol: str, kind: "QuantityKind | str | None" = None) -> Unit:
        """Lookup a unit by symbol, optionally within one kind's namespace.

        If missing, try to synthesize it via an SI prefix. Raises `ValueError`
        if unknown.
        """
        if not isinstance(symbol, str):
            raise TypeError(f"Unit symbol must be a str, got {type(symbol).__name__}")
        target_kind = None if kind is None else self.kind(kind)

        sym = normalize_symbol(symbol)
        with self._lock:
            target = self._aliases.get(sym)
            if target is not None:
                sym = target

            namespace = self._symbols if target_kind is None else self._units[target_kind.name]
            u = namespace.get(sym)
            if u is not None:
                return u

            synthesized = self._try_synthesize_prefixed(sym, namespace)
            if synthesized is not None:
                return synthesized

        where = "" if target_kind is None else f" for {target_kind.name}"
        raise ValueError(f"Unknown unit symbol{where}: {symbol}")

    def all(self, kind: "QuantityKind | str | None" = None) -> Mapping[str, Unit]:
        target_kind = None if kind is None else self.kind(kind)
        with self._lock:
            if target_kind is None:
                return dict(self._symbols)
            return dict(self._units[target_kind.name])

    def as_namespace(self) -> "UnitNamespace":
        return UnitNamespace(self)

    # -------------------------- array classes ------------------------------
    def register_vector_class(self, kind: "QuantityKind | str", cls: type) -> None:
        """
        Make ``cls`` (a `QuantityVector` subclass) the class of vectors of
        ``kind`` produced by arithmetic and casts, e.g. a ``LengthVector`` for
        ``Position - Position``.
        """
        from quantarray.core.vector import QuantityVector

        self._register_array_class("vector", kind, cls, QuantityVector)

    def vector_class(self, kind: "QuantityKind | str") -> Optional[type]:
        """The vector class registered for ``kind``, or None."""
        return self._array_class("vector", kind)

    def register_matrix_class(self, kind: "QuantityKind | str", cls: type) -> None:
        """Matrix counterpart of `register_vector_class`."""
        from quantarray.core.matrix import QuantityMatrix

        self._register_array_class("matrix", kind, cls, QuantityMatrix)

    def matrix_class(self, kind: "QuantityKind | str") -> Optional[type]:
        return self._array_class("matrix", kind)

    def _register_array_class(self, family: str, kind: "QuantityKind | str", cls: type, base: type) -> None:
        target = self.kind(kind)
        require(cls, "cls")
        if not (isinstance(cls, type) and issubclass(cls, base)):
            raise TypeError(f"{family} class for {target.name} must subclass {base.__name__}, got {cls!r}")
        with self._lock:
            self._array_classes[(family, target.name)] = cls

    def _array_class(self, family: str, kind: "QuantityKind | str") -> Optional[type]:
        require(kind, "kind")
        name = kind.name if isinstance(kind, QuantityKind) else kind
        with self._lock:
            return self._array_classes.get((family, name))

    # -------------------------- dimensions ---------------------------------
    def resolve(self, dims: SIDimensions) -> Unit:
        """
        The anonymous SI unit for ``dims``, created on first request.

        Repeated calls with equal dimensions return the same unit instance.
        The unit belongs to a generic kind that combines with every kind of
        the same dimensions and is what multiplication and division produce.
        """
        require(dims, "dims")
        dims = SIDimensions(dims)
        with self._lock:
            unit = self._derived.get(dims)
            if unit is None:
                kind = QuantityKind(f"SI[{dims.to_string()}]", dims, generic=True)
                unit = Unit.si(kind, generated=True)
                self._derived[dims] = unit
                logger.debug("Created derived SI unit %r for dimensions %r", unit.name, dims)
            return unit

    def cast_target(
        self,
        dims: SIDimensions,
        kind: "QuantityKind | str",
        display_unit: "Unit | str | None" = None,
    ) -> Tuple[QuantityKind, Unit]:
        """
        Validate a cast of an SI-tagged value with ``dims`` to ``kind``.

        Returns the registered kind and the display unit to use (the kind's
        SI unit by default). Raises `UnitRuntimeError` when the dimensions
        differ or ``display_unit`` belongs to another kind.
        """
        target = self.kind(kind)
        if target.dimensions != SIDimensions(dims):
            raise UnitRuntimeError(
                f"Cannot cast a quantity with dimensions [{SIDimensions(dims)}] "
                f"to {target.name} [{target.dimensions}]"
            )
        if display_unit is None:
            return target, self.si_unit(target)
        if isinstance(display_unit, str):
            display_unit = self.get(display_unit, target)
        if display_unit.kind != target:
            raise UnitRuntimeError(
                f"Display unit '{display_unit.name}' measures {display_unit.kind.name}, not {target.name}"
            )
        return target, display_unit

    # ------------------------- internals -----------------------------------
    def _add(self, unit: Unit) -> None:
        self._units[unit.kind.name][unit.name] = unit
        if unit.name and unit.name not in self._symbols:
            self._symbols[unit.name] = unit

    def _split_prefix(self, symbol: str) -> Tuple[Optional[str], str]:
        for p in _PREFIX_SYMBOLS_DESC:
            if symbol.startswith(p):
                return p, symbol[len(p):]
        return None, symbol

    def _try_synthesize_prefixed(self, sym: str, namespace: Mapping[str, Unit]) -> Optional[Unit]:
        prefix, base_sym = self._split_prefix(sym)
        if prefix is None or not base_sym:
            return None

        base = namespace.get(base_sym)
        if base is None:
            return None

        # Prevent stacked prefixes: base itself must not be synthesized
        if base.generated or base_sym in self._non_prefixable:
            return None
        if not isinstance(base.scale, LinearScale) or base.scale.offset != 0.0:
            return None

        relative_unit = None
        if base.is_absolute:
            rel_namespace = self._units[base.kind.relative.name]
            relative_unit = rel_namespace.get(prefix + base.relative_unit.name)
            if relative_unit is None:
                relative_unit = self._try_synthesize_prefixed(prefix + base.relative_unit.name, rel_namespace)
            if relative_unit is None:
                return None

        factor = _PREFIX_FACTORS[prefix]
        new_unit = Unit(
            sym,
            LinearScale(base.scale.factor * factor),
            base.kind,
            relative_unit=relative_unit,
            generated=True,
        )
        self._add(new_unit)
        logger.debug("Synthesized prefixed unit %r (%s) from %r", sym, base.kind.name, base_sym)
        return new_unit


class UnitNamespace:
    """Attribute access to a registry: ``u.km``, ``u("kPa")``, ``u.Position.km``."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: "UnitsRegistry", kind: "QuantityKind | None" = None) -> None:
        self._reg = reg
        self._kind = kind

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec, self._kind)

    def define(self, expr: str, scale: "float|int", reference: "Unit", replace: bool = False) -> None:
        """Register ``expr`` as ``scale`` times the linear, relative unit ``reference``."""
        if expr in getattr(UnitNamespace, "_reserved_names", ()):
            raise ValueError(
                f"Cannot define unit '{expr}': "
                "name conflicts with UnitNamespace attribute/method."
            )
        ref_scale = reference.scale
        if reference.is_absolute or not isinstance(ref_scale, LinearScale) or ref_scale.offset != 0.0:
            raise ValueError(f"Cannot define '{expr}' from non-proportional unit '{reference.name}'")

        self._reg.register(Unit(expr, LinearScale(float(scale) * ref_scale.factor), reference.kind), replace)

    def __call__(self, spec: str) -> Unit:
        return self._reg.get(spec, self._kind)

    def __getattr__(self, name: str) -> "Unit | UnitNamespace":
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._reg.get(name, self._kind)
        except ValueError:
            pass
        if self._kind is None:
            try:
                return UnitNamespace(self._reg, self._reg.kind(name))
            except ValueError:
                pass
        # Unknown symbol should look like a missing attribute
        raise AttributeError(name)

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        base_dir = set(super().__dir__())
        units = set(self._reg.all(self._kind).keys())
        if self._kind is None:
            units |= set(self._reg.kinds().keys())
            units |= set(self._reg._aliases.keys())
        return sorted(base_dir | units)


UnitNamespace._reserved_names = set(dir(UnitNamespace))  # type: set[str]


# ---------------------------------------------------------------------------
# Bootstrap a default registry
# ---------------------------------------------------------------------------
_SI_SYMBOLS: Mapping[str, str] = {
    "Dimensionless": "",
    "Length": "m",
    "Mass": "kg",
    "Duration": "s",
    "ElectricalCurrent": "A",
    "Temperature": "K",
    "AmountOfSubstance": "mol",
    "LuminousIntensity": "cd",
    "Angle": "rad",
    "AngleSolid": "sr",
    "Area": "m2",
    "Volume": "m3",
    "Speed": "m/s",
    "Acceleration": "m/s2",
    "Frequency": "Hz",
    "Force": "N",
    "Energy": "J",
    "Torque": "N.m",
    "Power": "W",
    "Pressure": "Pa",
    "ElectricalCharge": "C",
    "ElectricalPotential": "V",
    "ElectricalResistance": "Ω",
    "Density": "kg/m3",
}

_YEAR = 365.2425 * 24.0 * 3600.0


def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()

    for kind in q.RELATIVE_KINDS:
        reg.register_kind(kind, _SI_SYMBOLS[kind.name])
    for kind in q.ABSOLUTE_KINDS:
        reg.register_kind(kind)

    # Relative units (symbol, scale_to_si, kind)
    relative_units = (
        ("in",         0.0254,                   q.LENGTH),
        ("ft",         0.3048,                   q.LENGTH),
        ("yd",         0.9144,                   q.LENGTH),
        ("mi",         1609.344,                 q.LENGTH),
        ("NM",         1852.0,                   q.LENGTH),     # nautical mile
        ("au",         149597870700.0,           q.LENGTH),

        ("g",          1e-3,                     q.MASS),
        ("t",          1e3,                      q.MASS),
        ("lb",         0.45359237,               q.MASS),
        ("oz",         0.028349523125,           q.MASS),

        ("min",        60.0,                     q.DURATION),
        ("h",          3600.0,                   q.DURATION),
        ("d",          86400.0,                  q.DURATION),
        ("wk",         7.0 * 86400.0,            q.DURATION),
        ("fortnight",  14.0 * 86400.0,           q.DURATION),
        ("mo",         _YEAR / 12.0,             q.DURATION),   # month (avoid "m")
        ("yr",         _YEAR,                    q.DURATION),   # Gregorian mean year
        ("yr_julian",  365.25 * 86400.0,         q.DURATION),
        ("decade",     10.0 * _YEAR,             q.DURATION),
        ("century",    100.0 * _YEAR,            q.DURATION),
        ("millennium", 1000.0 * _YEAR,           q.DURATION),

        ("Δ°C",        1.0,                      q.TEMPERATURE),
        ("Δ°F",        5.0 / 9.0,                q.TEMPERATURE),
        ("Δ°R",        5.0 / 9.0,                q.TEMPERATURE),

        ("°",          math.pi / 180.0,          q.ANGLE),
        ("arcmin",     math.pi / 10800.0,        q.ANGLE),
        ("arcsec",     math.pi / 648000.0,       q.ANGLE),
        ("grad",       math.pi / 200.0,          q.ANGLE),

        ("ha",         1e4,                      q.AREA),
        ("acre",       4046.8564224,             q.AREA),
        ("L",          1e-3,                     q.VOLUME),
        ("gal",        3.785411784e-3,           q.VOLUME),     # US liquid gallon

        ("km/h",       1.0 / 3.6,                q.SPEED),
        ("kn",         1852.0 / 3600.0,          q.SPEED),
        ("mph",        0.44704,                  q.SPEED),
        ("ft/s2",      0.3048,                   q.ACCELERATION),
        ("rpm",        1.0 / 60.0,               q.FREQUENCY),

        ("kgf",        9.80665,                  q.FORCE),
        ("lbf",        4.4482216152605,          q.FORCE),
        ("Wh",         3600.0,                   q.ENERGY),
        ("eV",         1.602176634e-19,          q.ENERGY),
        ("cal",        4.184,                    q.ENERGY),
        ("BTU",        1055.05585262,            q.ENERGY),
        ("lbf.ft",     1.3558179483314004,       q.TORQUE),
        ("hp",         745.69987158227022,       q.POWER),
        ("bar",        1e5,                      q.PRESSURE),
        ("atm",        101325.0,                 q.PRESSURE),
        ("psi",        6894.757293168,           q.PRESSURE),
        ("mmHg",       133.322387415,            q.PRESSURE),
        ("Ah",         3600.0,                   q.ELECTRICAL_CHARGE),
        ("g/cm3",      1000.0,                   q.DENSITY),
    )
    for sym, scale, kind in relative_units:
        reg.register(Unit(sym, LinearScale(scale), kind))

    # Percent slope: 100 % is a 45° angle
    reg.register(Unit("%", GradeScale(0.01), q.ANGLE))

    # Absolute units (symbol, relative symbol, scale or None to reuse the relative scale)
    absolute_units = (
        ("in",   "in",   None, q.POSITION),
        ("ft",   "ft",   None, q.POSITION),
        ("yd",   "yd",   None, q.POSITION),
        ("mi",   "mi",   None, q.POSITION),
        ("NM",   "NM",   None, q.POSITION),
        ("au",   "au",   None, q.POSITION),

        ("min",  "min",  None, q.TIME),
        ("h",    "h",    None, q.TIME),
        ("d",    "d",    None, q.TIME),
        ("wk",   "wk",   None, q.TIME),

        ("°C",   "Δ°C",  OffsetLinearScale(1.0, 273.15),                    q.ABSOLUTE_TEMPERATURE),
        ("°F",   "Δ°F",  OffsetLinearScale(5.0 / 9.0, 459.67 * 5.0 / 9.0), q.ABSOLUTE_TEMPERATURE),
        ("°R",   "Δ°R",  None,                                             q.ABSOLUTE_TEMPERATURE),

        ("°",    "°",    None, q.DIRECTION),
        ("grad", "grad", None, q.DIRECTION),
    )
    for sym, rel_sym, scale, kind in absolute_units:
        rel = reg.get(rel_sym, kind.relative)
        reg.register(Unit(sym, rel.scale if scale is None else scale, kind, relative_unit=rel))

    # Common aliases
    reg.register_alias("ohm", "Ω")
    reg.register_alias("meter", "m")
    reg.register_alias("metre", "m")
    reg.register_alias("second", "s")
    reg.register_alias("liter", "L")
    reg.register_alias("litre", "L")
    reg.register_alias("deg", "°")
    reg.register_alias("degree", "°")
    reg.register_alias("percent", "%")

    # Time aliases
    reg.register_alias("minute", "min")
    reg.register_alias("hr", "h")
    reg.register_alias("hour", "h")
    reg.register_alias("day", "d")
    reg.register_alias("week", "wk")
    reg.register_alias("month", "mo")
    reg.register_alias("year", "yr")

    # Temperature aliases
    reg.register_alias("degC", "°C")
    reg.register_alias("celsius", "°C")
    reg.register_alias("degF", "°F")
    reg.register_alias("fahrenheit", "°F")
    reg.register_alias("degR", "°R")
    reg.register_alias("rankine", "°R")
    reg.register_alias("delta_degC", "Δ°C")
    reg.register_alias("delta_degF", "Δ°F")
    reg.register_alias("delta_degR", "Δ°R")

    reg.set_non_prefixable([
        "kg",
        "min", "h", "d", "wk", "fortnight",
        "mo", "yr", "yr_julian",
        "decade", "century", "millennium",
        "in", "ft", "yd", "mi", "NM", "au", "t", "lb", "oz",
        "Δ°C", "Δ°F", "Δ°R", "°R", "°", "arcmin", "arcsec", "grad",
        "m2", "m3", "kg/m3", "g/cm3", "ha", "acre", "gal",
        "km/h", "kn", "mph", "ft/s2", "rpm",
        "kgf", "lbf", "BTU", "lbf.ft", "hp", "atm", "psi", "mmHg",
    ])

    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
]
