"""
quantarray.units.quantities
===========================

The quantity kinds known to the default registry.

Each kind is a named `QuantityKind` with its SI dimensions. Absolute kinds
(Position, Time, AbsoluteTemperature, Direction) carry their paired
relative kind. Kinds that share dimensions (Energy and Torque, Angle and
Dimensionless) stay distinct: the kind, not the dimensions, decides what a
value is.
"""
from __future__ import annotations

from quantarray.core import dimensions as d
from quantarray.core.unit import AbsRel, QuantityKind

# --- Helpful composite dimensions ---
_AREA         = d.dim_pow(d.LENGTH, 2)
_VOLUME       = d.dim_pow(d.LENGTH, 3)
_SPEED        = d.dim_div(d.LENGTH, d.TIME)
_ACCELERATION = d.dim_div(_SPEED, d.TIME)
_FORCE        = d.dim_mul(d.MASS, _ACCELERATION)                  # kg·m/s²
_ENERGY       = d.dim_mul(_FORCE, d.LENGTH)                       # kg·m²/s²
_POWER        = d.dim_div(_ENERGY, d.TIME)
_CHARGE       = d.dim_mul(d.CURRENT, d.TIME)
_POTENTIAL    = d.dim_div(_POWER, d.CURRENT)
_RESISTANCE   = d.dim_div(_POTENTIAL, d.CURRENT)

# --- Base kinds (relative) ---
DIMENSIONLESS       = QuantityKind("Dimensionless", d.DIM_0)
LENGTH              = QuantityKind("Length", d.LENGTH)
MASS                = QuantityKind("Mass", d.MASS)
DURATION            = QuantityKind("Duration", d.TIME)
ELECTRICAL_CURRENT  = QuantityKind("ElectricalCurrent", d.CURRENT)
TEMPERATURE         = QuantityKind("Temperature", d.TEMPERATURE)
AMOUNT_OF_SUBSTANCE = QuantityKind("AmountOfSubstance", d.AMOUNT)
LUMINOUS_INTENSITY  = QuantityKind("LuminousIntensity", d.LUMINOUS)
ANGLE               = QuantityKind("Angle", d.DIM_0)
ANGLE_SOLID         = QuantityKind("AngleSolid", d.DIM_0)

# --- Derived kinds (relative) ---
AREA                  = QuantityKind("Area", _AREA)
VOLUME                = QuantityKind("Volume", _VOLUME)
SPEED                 = QuantityKind("Speed", _SPEED)
ACCELERATION          = QuantityKind("Acceleration", _ACCELERATION)
FREQUENCY             = QuantityKind("Frequency", d.dim_pow(d.TIME, -1))
FORCE                 = QuantityKind("Force", _FORCE)
ENERGY                = QuantityKind("Energy", _ENERGY)
TORQUE                = QuantityKind("Torque", _ENERGY)
POWER                 = QuantityKind("Power", _POWER)
PRESSURE              = QuantityKind("Pressure", d.dim_div(_FORCE, _AREA))
ELECTRICAL_CHARGE     = QuantityKind("ElectricalCharge", _CHARGE)
ELECTRICAL_POTENTIAL  = QuantityKind("ElectricalPotential", _POTENTIAL)
ELECTRICAL_RESISTANCE = QuantityKind("ElectricalResistance", _RESISTANCE)
DENSITY               = QuantityKind("Density", d.dim_div(d.MASS, _VOLUME))

# --- Absolute kinds and their relative partners ---
POSITION             = QuantityKind("Position", d.LENGTH, AbsRel.ABSOLUTE, LENGTH)
TIME                 = QuantityKind("Time", d.TIME, AbsRel.ABSOLUTE, DURATION)
ABSOLUTE_TEMPERATURE = QuantityKind("AbsoluteTemperature", d.TEMPERATURE, AbsRel.ABSOLUTE, TEMPERATURE)
DIRECTION            = QuantityKind("Direction", d.DIM_0, AbsRel.ABSOLUTE, ANGLE)

# Registration order; relative kinds come before the absolute ones that
# reuse their symbols, so a bare symbol lookup finds the relative unit.
RELATIVE_KINDS: tuple[QuantityKind, ...] = (
    DIMENSIONLESS, LENGTH, MASS, DURATION, ELECTRICAL_CURRENT, TEMPERATURE,
    AMOUNT_OF_SUBSTANCE, LUMINOUS_INTENSITY, ANGLE, ANGLE_SOLID,
    AREA, VOLUME, SPEED, ACCELERATION, FREQUENCY, FORCE, ENERGY, TORQUE,
    POWER, PRESSURE, ELECTRICAL_CHARGE, ELECTRICAL_POTENTIAL,
    ELECTRICAL_RESISTANCE, DENSITY,
)
ABSOLUTE_KINDS: tuple[QuantityKind, ...] = (POSITION, TIME, ABSOLUTE_TEMPERATURE, DIRECTION)
ALL_KINDS: tuple[QuantityKind, ...] = RELATIVE_KINDS + ABSOLUTE_KINDS


__all__ = [
    "DIMENSIONLESS", "LENGTH", "MASS", "DURATION", "ELECTRICAL_CURRENT", "TEMPERATURE",
    "AMOUNT_OF_SUBSTANCE", "LUMINOUS_INTENSITY", "ANGLE", "ANGLE_SOLID",
    "AREA", "VOLUME", "SPEED", "ACCELERATION", "FREQUENCY", "FORCE", "ENERGY", "TORQUE",
    "POWER", "PRESSURE", "ELECTRICAL_CHARGE", "ELECTRICAL_POTENTIAL",
    "ELECTRICAL_RESISTANCE", "DENSITY",
    "POSITION", "TIME", "ABSOLUTE_TEMPERATURE", "DIRECTION",
    "RELATIVE_KINDS", "ABSOLUTE_KINDS", "ALL_KINDS",
]
