# pytest tests for quantarray.units.registry
#
# These tests exercise normalization, aliases, SI-prefix synthesis,
# anti-stacking rules, per-kind namespaces, dimension resolution and
# thread-safety. They use an isolated registry instance for most tests.

import logging
import math
import threading

import pytest

from quantarray.core.dimensions import (
    AMOUNT,
    CURRENT,
    DIM_0,
    LENGTH,
    LUMINOUS,
    MASS,
    TEMPERATURE,
    TIME,
    SIDimensions,
    dim_div,
    dim_mul,
    dim_pow,
)
from quantarray.core.errors import UnitRuntimeError
from quantarray.core.scale import LinearScale
from quantarray.core.unit import AbsRel, QuantityKind, Unit
from quantarray.units import quantities as q
from quantarray.units.registry import UnitsRegistry, normalize_symbol


# ---------------------------------------------------------------------------
# Base/derived presence & correctness
# ---------------------------------------------------------------------------

def test_base_units_present(reg):
    for sym, dim in [("m", LENGTH), ("kg", MASS), ("s", TIME), ("A", CURRENT), ("K", TEMPERATURE), ("mol", AMOUNT), ("cd", LUMINOUS)]:
        u = reg.get(sym)
        assert isinstance(u, Unit)
        assert u.name == sym
        assert u.is_base_si
        assert u.dimensions == dim
        assert not u.is_absolute


@pytest.mark.parametrize("sym, dim_expr", [
    ("Hz", dim_pow(TIME, -1)),
    ("N",  dim_mul(MASS, dim_div(LENGTH, dim_pow(TIME, 2)))),
    ("Pa", dim_div(dim_mul(MASS, dim_div(LENGTH, dim_pow(TIME, 2))), dim_pow(LENGTH, 2))),
    ("J",  dim_mul(dim_mul(MASS, dim_div(LENGTH, dim_pow(TIME, 2))), LENGTH)),
    ("W",  dim_div(dim_mul(dim_mul(MASS, dim_div(LENGTH, dim_pow(TIME, 2))), LENGTH), TIME)),
    ("C",  dim_mul(CURRENT, TIME)),
    ("rad", DIM_0),
    ("sr", DIM_0),
    ("m/s", dim_div(LENGTH, TIME)),
    ("kg/m3", dim_div(MASS, dim_pow(LENGTH, 3))),
])
def test_derived_si_units(reg, sym, dim_expr):
    u = reg.get(sym)
    assert u.dimensions == dim_expr
    assert u.is_base_si


def test_dimension_relationships(reg):
    V = reg.get("V").dimensions
    assert V == dim_div(reg.get("W").dimensions, CURRENT)
    assert reg.get("Ω").dimensions == dim_div(V, CURRENT)


@pytest.mark.parametrize("sym, seconds", [
    ("min",       60.0),
    ("h",         60.0 * 60.0),
    ("d",         24.0 * 60.0 * 60.0),
    ("wk",        7.0 * 24.0 * 60.0 * 60.0),
    ("fortnight", 14.0 * 24.0 * 60.0 * 60.0),
    ("mo",        (365.2425 / 12.0) * 24.0 * 3600.0),
    ("yr",        365.2425 * 24.0 * 3600.0),
    ("yr_julian", 365.25 * 24.0 * 3600.0),
    ("decade",     10.0  * 365.2425 * 24.0 * 3600.0),
    ("century",    100.0 * 365.2425 * 24.0 * 3600.0),
    ("millennium", 1000.0 * 365.2425 * 24.0 * 3600.0),
])
def test_time_units_present_and_scaled(reg, sym, seconds):
    u = reg.get(sym)
    assert u.kind is q.DURATION
    assert u.to_standard(1.0) == pytest.approx(seconds)


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

def test_kind_lookup(reg):
    assert reg.kind("Length") is q.LENGTH
    assert reg.kind(q.POSITION) is q.POSITION
    with pytest.raises(ValueError):
        reg.kind("Nope")
    with pytest.raises(ValueError):
        reg.kind(QuantityKind("Length", MASS))


def test_kinds_for_dimensions(reg):
    assert reg.kinds_for(q.ENERGY.dimensions) == (q.ENERGY, q.TORQUE)
    assert reg.kinds_for(LENGTH) == (q.LENGTH, q.POSITION)
    assert q.DIRECTION in reg.kinds_for(DIM_0)


def test_si_unit_and_absolute_pairing(reg):
    assert reg.si_unit("Energy").name == "J"
    assert reg.si_unit("Torque").name == "N.m"
    assert reg.absolute_kind("Length") is q.POSITION
    assert reg.absolute_kind(q.TEMPERATURE) is q.ABSOLUTE_TEMPERATURE
    assert reg.absolute_kind("Mass") is None
    pos_m = reg.si_unit("Position")
    assert pos_m.name == "m"
    assert pos_m.relative_unit is reg.si_unit("Length")


def test_register_kind(reg):
    jerk = QuantityKind("Jerk", dim_div(LENGTH, dim_pow(TIME, 3)))
    si = reg.register_kind(jerk, "m/s3")
    assert si.kind is jerk
    assert reg.get("m/s3") is si
    with pytest.raises(ValueError):
        reg.register_kind(jerk)


def test_register_kind_rejections(reg):
    orphan_rel = QuantityKind("Span", LENGTH)
    orphan_abs = QuantityKind("Spot", LENGTH, AbsRel.ABSOLUTE, orphan_rel)
    with pytest.raises(ValueError):
        reg.register_kind(orphan_abs)
    second_abs = QuantityKind("Place", LENGTH, AbsRel.ABSOLUTE, q.LENGTH)
    with pytest.raises(ValueError):
        reg.register_kind(second_abs)
    with pytest.raises(ValueError):
        reg.register_kind(QuantityKind("SI[x]", LENGTH, generic=True))


# ---------------------------------------------------------------------------
# Absolute / relative namespaces
# ---------------------------------------------------------------------------

def test_global_lookup_prefers_relative(reg):
    assert reg.get("m").kind is q.LENGTH
    assert reg.get("K").kind is q.TEMPERATURE
    assert reg.get("°").kind is q.ANGLE


def test_kind_scoped_lookup(reg):
    pos_km = reg.get("km", "Position")
    assert pos_km.kind is q.POSITION
    assert pos_km.relative_unit is reg.get("km", "Length")
    assert pos_km.to_standard(1.0) == pytest.approx(1000.0)
    abs_k = reg.get("K", q.ABSOLUTE_TEMPERATURE)
    assert abs_k.is_absolute
    with pytest.raises(ValueError):
        reg.get("kg", "Position")


def test_temperature_units(reg):
    c = reg.get("°C")
    f = reg.get("°F")
    assert c.kind is q.ABSOLUTE_TEMPERATURE
    assert c.to_standard(0.0) == 273.15
    assert f.to_standard(32.0) == pytest.approx(273.15)
    assert f.to_standard(-459.67) == pytest.approx(0.0, abs=1e-12)
    assert c.relative_unit is reg.get("Δ°C")
    assert reg.get("Δ°F").to_standard(9.0) == pytest.approx(5.0)


def test_percent_is_a_grade_angle(reg):
    pct = reg.get("%")
    assert pct.kind is q.ANGLE
    assert not pct.is_linear
    assert pct.to_standard(100.0) == pytest.approx(math.pi / 4)


# ---------------------------------------------------------------------------
# Normalization & aliases
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("inp, expected", [
    ("um", "µm"),
    ("uA", "µA"),
    ("ohm", "Ω"),
    ("Ohm", "Ω"),
    ("OHM", "Ω"),
    ("  kPa ", "kPa"),
])
def test_normalization_maps_to_canonical(inp, expected, reg):
    assert normalize_symbol(inp) == expected
    assert reg.get(inp) is reg.get(expected)


@pytest.mark.parametrize("alias, canonical", [
    ("meter", "m"),
    ("metre", "m"),
    ("liter", "L"),
    ("deg", "°"),
    ("percent", "%"),
    ("minute", "min"),
    ("hr", "h"),
    ("hour", "h"),
    ("day", "d"),
    ("week", "wk"),
    ("month", "mo"),
    ("year", "yr"),
    ("degC", "°C"),
    ("celsius", "°C"),
    ("fahrenheit", "°F"),
    ("rankine", "°R"),
    ("delta_degC", "Δ°C"),
])
def test_aliases_map_to_canonical(reg, alias, canonical):
    assert reg.get(alias) is reg.get(canonical)


def test_alias_within_kind(reg):
    assert reg.get("meter", "Position") is reg.get("m", "Position")


def test_alias_registration_custom(reg):
    reg.register_alias("ohms", "Ω")
    assert reg.get("ohms") is reg.get("Ω")
    with pytest.raises(ValueError):
        reg.register_alias("m", "km")
    with pytest.raises(ValueError):
        reg.register_alias("define", "m")


# ---------------------------------------------------------------------------
# Prefix synthesis & anti-stacking
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("pref, base, factor", [
    ("k", "m", 1e3),
    ("M", "s", 1e6),
    ("µ", "A", 1e-6),
    ("n", "mol", 1e-9),
    ("m", "cd", 1e-3),
    ("da", "m", 1e1),
    ("m", "g", 1e-3),
    ("k", "Wh", 1e3),
    ("G", "Pa", 1e9),
])
def test_valid_prefix_synthesis(pref, base, factor, reg):
    base_u = reg.get(base)
    sym = f"{pref}{base}"
    u = reg.get(sym)
    assert u.name == sym
    assert u.kind is base_u.kind
    assert u.generated
    assert u.to_standard(1.0) == pytest.approx(base_u.to_standard(1.0) * factor)


def test_synthesis_is_lazy_and_idempotent(reg):
    base_len = len(reg.all())
    km1 = reg.get("km")
    after_first = len(reg.all())
    km2 = reg.get("km")

    assert after_first == base_len + 1
    assert len(reg.all()) == after_first
    assert km1 is km2


def test_absolute_prefix_synthesizes_relative_pair(reg):
    before = dict(reg.all("Duration"))
    ms_time = reg.get("ms", "Time")
    assert ms_time.is_absolute
    assert "ms" not in before
    assert reg.all("Duration")["ms"] is ms_time.relative_unit


def test_anti_stacking_prefixed_base_rejected(reg):
    assert reg.get("mm").name == "mm"
    with pytest.raises(ValueError):
        reg.get("kmm")
    with pytest.raises(ValueError):
        reg.get("kµm")


@pytest.mark.parametrize("bad_sym", [
    "mkg", "kkg", "ukg",
    "kmin", "µmin", "kh", "kd", "kwk", "kyr", "kdecade",
    "kft", "kmi", "kt", "klb",
    "k°C", "k°R", "kΔ°C", "k°", "k%",
    "km2", "kL/s",
])
def test_non_prefixable_symbols_reject_prefixes(reg, bad_sym):
    with pytest.raises(ValueError):
        reg.get(bad_sym)


def test_non_prefixable_does_not_accidentally_create_units(reg):
    base_len = len(reg.all())
    for bad in ["kyr", "umin", "kh", "kmo", "mkg"]:
        with pytest.raises(ValueError):
            reg.get(bad)
    assert len(reg.all()) == base_len
    assert reg.is_non_prefixable("kg")
    assert not reg.is_non_prefixable("g")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_register_custom_unit(reg):
    furlong = Unit("furlong", LinearScale(201.168), q.LENGTH)
    reg.register(furlong)
    assert reg.get("furlong") is furlong
    assert reg.has("furlong", "Length")
    assert "furlong" in reg
    with pytest.raises(ValueError):
        reg.register(Unit("furlong", LinearScale(200.0), q.LENGTH))
    replacement = Unit("furlong", LinearScale(201.0), q.LENGTH)
    reg.register(replacement, replace=True)
    assert reg.get("furlong") is replacement


def test_register_requires_known_kind(reg):
    stray = QuantityKind("Stray", LENGTH)
    with pytest.raises(ValueError):
        reg.register(Unit("st", LinearScale(1.0), stray))


def test_register_rejects_reserved_names(reg):
    with pytest.raises(ValueError):
        reg.register(Unit("define", LinearScale(1.0), q.LENGTH))


def test_empty_registry_knows_nothing():
    empty = UnitsRegistry()
    assert not empty.has("m")
    with pytest.raises(ValueError):
        empty.get("m")


# ---------------------------------------------------------------------------
# Dimension resolution & casting
# ---------------------------------------------------------------------------

def test_resolve_creates_generic_unit_once(reg, caplog):
    dims = SIDimensions.parse("kg m2 s-3 A-1")
    with caplog.at_level(logging.DEBUG, logger="quantarray.units.registry"):
        first = reg.resolve(dims)
        second = reg.resolve(SIDimensions(tuple(dims)))
    assert first is second
    assert first.kind.generic
    assert first.is_base_si
    assert first.kind.name == f"SI[{dims.to_string()}]"
    created = [r for r in caplog.records if "derived SI unit" in r.getMessage()]
    assert len(created) == 1


def test_resolved_units_are_not_looked_up_by_symbol(reg):
    unit = reg.resolve(dim_pow(LENGTH, 5))
    assert not reg.has(unit.name)


def test_cast_target(reg):
    kind, unit = reg.cast_target(q.ENERGY.dimensions, "Torque")
    assert kind is q.TORQUE
    assert unit.name == "N.m"
    kind, unit = reg.cast_target(q.ENERGY.dimensions, "Energy", "kWh")
    assert unit.name == "kWh"
    with pytest.raises(UnitRuntimeError):
        reg.cast_target(q.POWER.dimensions, "Energy")
    with pytest.raises(UnitRuntimeError):
        reg.cast_target(q.ENERGY.dimensions, "Energy", reg.get("N.m"))


def test_register_vector_and_matrix_classes(reg):
    from quantarray.core.matrix import QuantityMatrix
    from quantarray.core.vector import QuantityVector

    class TorqueVector(QuantityVector):
        __slots__ = ()

    class TorqueMatrix(QuantityMatrix):
        __slots__ = ()

    assert reg.vector_class("Torque") is None
    reg.register_vector_class("Torque", TorqueVector)
    reg.register_matrix_class(q.TORQUE, TorqueMatrix)
    assert reg.vector_class(q.TORQUE) is TorqueVector
    assert reg.matrix_class("Torque") is TorqueMatrix
    assert reg.vector_class("Energy") is None
    assert reg.vector_class(reg.resolve(q.TORQUE.dimensions).kind) is None

    with pytest.raises(TypeError):
        reg.register_vector_class("Torque", TorqueMatrix)
    with pytest.raises(TypeError):
        reg.register_matrix_class("Torque", int)
    with pytest.raises(ValueError):
        reg.register_vector_class("Nope", TorqueVector)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------

def test_unknown_symbol_raises(reg):
    with pytest.raises(ValueError):
        reg.get("nope")
    with pytest.raises(ValueError):
        reg.get("m", "NoSuchKind")
    with pytest.raises(TypeError):
        reg.get(3)


# ---------------------------------------------------------------------------
# Thread-safety: concurrent synthesis and resolution
# ---------------------------------------------------------------------------

def test_thread_safe_prefixed_creation(reg):
    created = []
    resolved = []
    errs = []
    dims = dim_div(AMOUNT, TIME)

    def worker():
        try:
            created.append(reg.get("km"))
            resolved.append(reg.resolve(dims))
        except Exception as e:
            errs.append(e)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errs
    assert all(u is created[0] for u in created)
    assert all(u is resolved[0] for u in resolved)
