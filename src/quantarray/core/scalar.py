"""
quantarray.core.scalar
======================

Single quantity values.

A `Scalar` stores its magnitude in SI and remembers the unit it is displayed
in. Scalars are what a quantity vector hands out from ``get(i)`` and what it
accepts as construction input; they follow the same Absolute/Relative rules
as vectors. Multiplying or dividing two scalars gives an `SIScalar`, which is
tagged with SI dimensions only and can be cast back to a named quantity kind
with `SIScalar.as_quantity`.
"""

from __future__ import annotations

from math import isclose
from typing import Union

import numpy as np

from quantarray import config
from quantarray.core.dimensions import DIM_0, DimOp, SIDimensions, combine
from quantarray.core.errors import UnitRuntimeError, ValueRuntimeError, require
from quantarray.core.unit import (
    QuantityKind,
    Unit,
    check_convertible,
    minus_result_unit,
    plus_result_unit,
)
from quantarray.units import _get_default_registry

Number = Union[int, float]


def _ieee_divide(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(a, b))


class Scalar:
    """
    A physical value with a display unit.

    Attributes
    ----------
    _si : float
        The magnitude expressed in the SI unit of its quantity.
    unit : Unit
        The unit in which the value is displayed.
    """

    __slots__ = ("_si", "unit")

    def __init__(self, value: Number, unit: Unit):
        require(value, "value")
        require(unit, "unit")
        self._si = float(unit.to_standard(float(value)))
        self.unit = unit

    @classmethod
    def instantiate_si(cls, value_si: Number, unit: Unit) -> "Scalar":
        """Build from an SI magnitude, displayed in ``unit``."""
        require(value_si, "value_si")
        require(unit, "unit")
        obj = cls.__new__(cls)
        obj._si = float(value_si)
        obj.unit = unit
        return obj

    # --- Properties ---
    @property
    def si(self) -> float:
        return self._si

    @property
    def value(self) -> float:
        return float(self.unit.from_standard(self._si))

    @property
    def kind(self) -> QuantityKind:
        return self.unit.kind

    @property
    def dimensions(self) -> SIDimensions:
        return self.unit.dimensions

    @property
    def is_absolute(self) -> bool:
        return self.unit.is_absolute

    def get_in_unit(self, unit: Unit | None = None) -> float:
        if unit is None:
            return self.value
        target = check_convertible(self.unit, unit)
        return float(target.from_standard(self._si))

    def to(self, unit: Unit) -> "Scalar":
        """Same value, displayed in another unit of the same dimensions."""
        target = check_convertible(self.unit, unit)
        if target == self.unit:
            return self
        return type(self).instantiate_si(self._si, target)

    # --- Comparison ---
    def _check_dim_compatible(self, other: object) -> None:
        if not isinstance(other, Scalar):
            if isinstance(other, (int, float)) and other == 0:
                if self.dimensions != DIM_0:
                    raise TypeError("Cannot compare a dimensioned quantity to 0")
                return
            raise TypeError(f"Cannot compare Scalar with type {type(other)}")

        if self.dimensions != other.dimensions:
            raise UnitRuntimeError(
                f"Cannot compare quantities with different dimensions: "
                f"'{self.unit.name}' and '{other.unit.name}'"
            )

    def _is_close(self, other_si: float) -> bool:
        return isclose(self._si, other_si, rel_tol=config.REL_TOL, abs_tol=0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return (
            self.dimensions == other.dimensions
            and self.is_absolute == other.is_absolute
            and self._is_close(other._si)
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Equality is tolerance based; use as_key() for dict keys.
    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        self._check_dim_compatible(other)
        other_si = getattr(other, "_si", 0.0)
        return self._si < other_si and not self._is_close(other_si)

    def __le__(self, other: object) -> bool:
        self._check_dim_compatible(other)
        other_si = getattr(other, "_si", 0.0)
        return self._si < other_si or self._is_close(other_si)

    def __gt__(self, other: object) -> bool:
        self._check_dim_compatible(other)
        other_si = getattr(other, "_si", 0.0)
        return self._si > other_si and not self._is_close(other_si)

    def __ge__(self, other: object) -> bool:
        self._check_dim_compatible(other)
        other_si = getattr(other, "_si", 0.0)
        return self._si > other_si or self._is_close(other_si)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Hashable, discretised key: (dimensions, absolute?, rounded SI value).

        Two scalars that compare equal may still round to different keys at
        the edge of ``precision``; pick a precision coarser than the noise.
        """
        rounded = round(self._si, precision)
        if rounded == 0.0:
            rounded = 0.0  # fold -0.0
        return (self.dimensions, self.is_absolute, rounded)

    # --- Arithmetic ---
    def plus(self, other: "Scalar") -> "Scalar":
        unit = plus_result_unit(self.unit, other.unit)
        return Scalar.instantiate_si(self._si + other._si, unit)

    def minus(self, other: "Scalar") -> "Scalar":
        unit = minus_result_unit(self.unit, other.unit)
        return Scalar.instantiate_si(self._si - other._si, unit)

    def times(self, other: "Scalar") -> "SIScalar":
        dims = combine(self.dimensions, other.dimensions, DimOp.MULTIPLY)
        return SIScalar.instantiate_si(self._si * other._si, _get_default_registry().resolve(dims))

    def divide(self, other: "Scalar") -> "SIScalar":
        dims = combine(self.dimensions, other.dimensions, DimOp.DIVIDE)
        return SIScalar.instantiate_si(_ieee_divide(self._si, other._si), _get_default_registry().resolve(dims))

    def __add__(self, other: "Scalar") -> "Scalar":
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Scalar") -> "Scalar":
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.minus(other)

    def _check_scalable(self) -> None:
        if self.is_absolute:
            raise ValueRuntimeError(f"Cannot scale an absolute {self.kind.name} value")

    def _scaled(self, factor: float) -> "Scalar":
        self._check_scalable()
        return type(self).instantiate_si(self._si * factor, self.unit)

    def __mul__(self, other: "Scalar | Number") -> "Scalar":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._scaled(float(other))
        if isinstance(other, Scalar):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Scalar":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self._scaled(float(other))
        return NotImplemented

    def __truediv__(self, other: "Scalar | Number") -> "Scalar":
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            self._check_scalable()
            return type(self).instantiate_si(_ieee_divide(self._si, float(other)), self.unit)
        if isinstance(other, Scalar):
            return self.divide(other)
        return NotImplemented

    def __neg__(self) -> "Scalar":
        return self._scaled(-1.0)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        mag = self.value
        name = self.unit.name
        if self.dimensions == DIM_0 and name in ("", "1"):
            return f"{mag:.15g}"
        return f"{mag:.15g} {name}"

    def __format__(self, spec: str) -> str:
        """
        "" or "native" prints in the display unit; "si" prints the SI value
        with the dimension signature.
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec == "si":
            return f"{self._si:.15g} {self.dimensions.to_string()}"
        raise ValueError("Unknown format spec; use '', 'native', or 'si'")


class SIScalar(Scalar):
    """A scalar tagged with SI dimensions only, as produced by times/divide."""

    __slots__ = ()

    def as_quantity(self, kind: "QuantityKind | str", display_unit: Unit | None = None) -> Scalar:
        """Reinterpret as ``kind``; the SI dimensions must match exactly."""
        reg = _get_default_registry()
        target_kind, target_unit = reg.cast_target(self.dimensions, kind, display_unit)
        return Scalar.instantiate_si(self._si, target_unit)


__all__ = ["Scalar", "SIScalar"]
