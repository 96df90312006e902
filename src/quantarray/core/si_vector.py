"""
quantarray.core.si_vector
=========================

Vectors tagged with SI dimensions only.

Multiplying or dividing two quantity vectors cannot in general name the
result (kg·m²/s² is both Energy and Torque), so the result is an `SIVector`
whose unit is the registry's anonymous SI unit for the combined dimensions.
`SIVector.as_quantity` reinterprets it as a named kind, and refuses with
`UnitRuntimeError` when the dimensions differ.

>>> from quantarray.units import u
>>> force = QuantityVector.instantiate([10.0, 20.0], u.N)
>>> dist = QuantityVector.instantiate([2.0, 3.0], u.m)
>>> (force * dist).as_quantity("Energy").get_values_si()
array([20., 60.])
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quantarray.core.dimensions import SIDimensions
from quantarray.core.errors import UnitRuntimeError, require
from quantarray.core.unit import QuantityKind, Unit
from quantarray.core.vector import QuantityVector
from quantarray.core.vector_data import StorageType, VectorData
from quantarray.units import _get_default_registry

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantarray.units.registry import UnitsRegistry


def _dimensions(dimensions: "SIDimensions | str") -> SIDimensions:
    require(dimensions, "dimensions")
    if isinstance(dimensions, str):
        return SIDimensions.parse(dimensions)
    return SIDimensions(dimensions)


class SIVector(QuantityVector):
    """A quantity vector whose only type information is its SI dimensions."""

    __slots__ = ()

    def __init__(self, data: VectorData, unit: Unit) -> None:
        super().__init__(data, unit)
        if not unit.kind.generic:
            raise UnitRuntimeError(
                f"SIVector needs an anonymous SI unit, got '{unit.name}' ({unit.kind.name})"
            )

    @classmethod
    def of(
        cls,
        values,
        dimensions: "SIDimensions | str",
        storage_type: StorageType = StorageType.DENSE,
        size: int | None = None,
        dtype=None,
        registry: "UnitsRegistry | None" = None,
    ) -> "SIVector":
        """
        Build from SI values and a dimension signature such as ``"kgm2/s2"``.

        ``values`` takes the same forms as `QuantityVector.instantiate`.
        """
        reg = registry or _get_default_registry()
        unit = reg.resolve(_dimensions(dimensions))
        return cls.instantiate_si(values, unit, storage_type, size, dtype)

    def as_quantity(
        self,
        kind: "QuantityKind | str",
        display_unit: "Unit | str | None" = None,
        registry: "UnitsRegistry | None" = None,
    ) -> QuantityVector:
        """
        Reinterpret the values as ``kind``, displayed in ``display_unit``
        (default: the kind's SI unit).

        Raises `UnitRuntimeError` when the dimensions of this vector differ
        from those of ``kind``. An immutable vector shares its data with the
        result; a mutable one is copied. The result is an instance of the
        class registered for ``kind`` (`UnitsRegistry.register_vector_class`),
        or a plain `QuantityVector`.
        """
        reg = registry or _get_default_registry()
        target, unit = reg.cast_target(self.dimensions, kind, display_unit)
        data = self._data.copy() if self.is_mutable else self._data
        cls = reg.vector_class(target) or QuantityVector
        return cls.instantiate_vector(data, unit)

    def as_unit(self, display_unit: Unit, registry: "UnitsRegistry | None" = None) -> QuantityVector:
        """Reinterpret as the kind of ``display_unit`` and display in it."""
        require(display_unit, "display_unit")
        return self.as_quantity(display_unit.kind, display_unit, registry)


__all__ = ["SIVector"]
