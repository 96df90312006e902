from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from quantarray.core.dimensions import SIDimensions
from quantarray.core.errors import NullArgumentError, UnitRuntimeError, ValueRuntimeError
from quantarray.core.scale import IDENTITY_SCALE, Scale

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from quantarray.core.scalar import Scalar


class AbsRel(Enum):
    """Whether a quantity is anchored to a fixed origin (ABSOLUTE) or not."""

    ABSOLUTE = "Abs"
    RELATIVE = "Rel"


@dataclass(frozen=True, slots=True)
class QuantityKind:
    """
    A named physical quantity (Length, Energy, Position, ...).

    Several kinds may share the same SI dimensions (Energy and Torque); the
    kind, not the dimensions, decides what a value *is*. An absolute kind
    names its paired relative kind in ``relative``. ``generic`` marks the
    anonymous kinds the registry creates for bare SI dimension vectors.
    """

    name: str
    dimensions: SIDimensions
    abs_rel: AbsRel = AbsRel.RELATIVE
    relative: "QuantityKind | None" = None
    generic: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("QuantityKind name cannot be empty")
        object.__setattr__(self, "dimensions", SIDimensions(self.dimensions))
        if self.abs_rel is AbsRel.ABSOLUTE:
            if self.relative is None:
                raise ValueError(f"Absolute kind {self.name!r} needs a paired relative kind")
            if self.relative.abs_rel is not AbsRel.RELATIVE:
                raise ValueError(f"Paired kind of {self.name!r} must be relative")
            if self.relative.dimensions != self.dimensions:
                raise ValueError(f"Paired kind of {self.name!r} must have the same dimensions")
        elif self.relative is not None:
            raise ValueError(f"Relative kind {self.name!r} cannot have a paired relative kind")

    @property
    def is_absolute(self) -> bool:
        return self.abs_rel is AbsRel.ABSOLUTE

    @property
    def is_relative(self) -> bool:
        return self.abs_rel is AbsRel.RELATIVE

    def __repr__(self) -> str:
        return f"QuantityKind({self.name!r}, {self.dimensions}, {self.abs_rel.value})"


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """A display unit: a symbol, a `Scale` to SI, and the quantity kind it measures."""

    name: str
    scale: Scale
    kind: QuantityKind
    relative_unit: "Unit | None" = None
    generated: bool = field(default=False)

    def __post_init__(self) -> None:
        if self.scale is None:
            raise ValueError(f"Unit {self.name!r}: scale cannot be None")
        if self.kind is None:
            raise ValueError(f"Unit {self.name!r}: kind cannot be None")
        if self.kind.is_absolute:
            if self.relative_unit is None:
                raise ValueError(f"Absolute unit {self.name!r} needs a relative unit")
            if self.relative_unit.kind != self.kind.relative:
                raise ValueError(
                    f"Relative unit of {self.name!r} must belong to {self.kind.relative.name}"
                )
        elif self.relative_unit is not None:
            raise ValueError(f"Relative unit {self.name!r} cannot carry a relative unit")

    @classmethod
    def si(cls, kind: QuantityKind, name: str | None = None, generated: bool = False) -> "Unit":
        """Factory for the coherent SI unit of a relative kind."""
        if name is None:
            name = kind.dimensions.to_string()
        return cls(name, IDENTITY_SCALE, kind, generated=generated)

    # --- Properties ---
    @property
    def dimensions(self) -> SIDimensions:
        return self.kind.dimensions

    @property
    def is_base_si(self) -> bool:
        return self.scale.is_base_si

    @property
    def is_linear(self) -> bool:
        return self.scale.is_linear

    @property
    def is_absolute(self) -> bool:
        return self.kind.is_absolute

    # --- Conversions ---
    def to_standard(self, x):
        return self.scale.to_standard(x)

    def from_standard(self, x):
        return self.scale.from_standard(x)

    def is_compatible(self, other: "Unit") -> bool:
        return self.dimensions == other.dimensions

    # --- Dunder ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return (
            self.name == other.name
            and self.kind == other.kind
            and self.scale == other.scale
        )

    def __hash__(self) -> int:
        return hash((self.name, self.kind.name, self.kind.dimensions))

    def __rmul__(self, value: float) -> "Scalar":
        from quantarray.core.scalar import Scalar

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return NotImplemented
        return Scalar(float(value), self)

    def __repr__(self) -> str:
        return f"Unit({self.name!r}, kind={self.kind.name})"

    def __str__(self) -> str:
        return self.name


# --- Absolute / Relative algebra ---------------------------------------------

def _check_same_dimensions(left: Unit, right: Unit, op: str) -> None:
    if left.dimensions != right.dimensions:
        raise UnitRuntimeError(
            f"Cannot {op} quantities with different dimensions: "
            f"{left.kind.name} [{left.dimensions}] and {right.kind.name} [{right.dimensions}]"
        )


def _same_relative_kind(a: QuantityKind, b: QuantityKind) -> bool:
    # generic SI kinds combine with any kind of the same dimensions
    return a == b or a.generic or b.generic


def _named(left: Unit, right: Unit) -> Unit:
    return right if left.kind.generic and not right.kind.generic else left


def plus_result_unit(left: Unit, right: Unit) -> Unit:
    """
    Display unit of ``left + right``.

    Relative + Relative -> Relative (the left unit, or the right one when
    only the right one names a kind); Absolute + Relative and Relative +
    Absolute -> Absolute (the absolute operand's unit); Absolute + Absolute
    is undefined.
    """
    _check_same_dimensions(left, right, "add")
    if left.is_absolute and right.is_absolute:
        raise ValueRuntimeError(
            f"Cannot add two absolute quantities ({left.kind.name} + {right.kind.name})"
        )
    if left.is_absolute or right.is_absolute:
        absolute, relative = (left, right) if left.is_absolute else (right, left)
        if relative.kind != absolute.kind.relative and not relative.kind.generic:
            raise UnitRuntimeError(
                f"{relative.kind.name} cannot be added to {absolute.kind.name}; "
                f"expected {absolute.kind.relative.name}"
            )
        return absolute
    if not _same_relative_kind(left.kind, right.kind):
        raise UnitRuntimeError(f"Cannot add {right.kind.name} to {left.kind.name}")
    return _named(left, right)


def minus_result_unit(left: Unit, right: Unit) -> Unit:
    """
    Display unit of ``left - right``.

    Absolute - Absolute -> paired Relative; Absolute - Relative -> Absolute;
    Relative - Relative -> Relative; Relative - Absolute is undefined.
    """
    _check_same_dimensions(left, right, "subtract")
    if left.is_absolute and right.is_absolute:
        if left.kind != right.kind:
            raise UnitRuntimeError(f"Cannot subtract {right.kind.name} from {left.kind.name}")
        return left.relative_unit
    if right.is_absolute:
        raise ValueRuntimeError(
            f"Cannot subtract an absolute quantity from a relative one "
            f"({left.kind.name} - {right.kind.name})"
        )
    if left.is_absolute:
        if right.kind != left.kind.relative and not right.kind.generic:
            raise UnitRuntimeError(
                f"{right.kind.name} cannot be subtracted from {left.kind.name}; "
                f"expected {left.kind.relative.name}"
            )
        return left
    if not _same_relative_kind(left.kind, right.kind):
        raise UnitRuntimeError(f"Cannot subtract {right.kind.name} from {left.kind.name}")
    return _named(left, right)


def check_storable(value_unit: Unit, target_unit: Unit) -> None:
    """
    Raise `UnitRuntimeError` unless a value in ``value_unit`` may be stored in
    an array of ``target_unit``'s kind.

    Dimensions, the Absolute/Relative flavour and the kind must all agree;
    a generic SI kind stands in for any kind of the same dimensions.
    """
    if (
        value_unit.dimensions != target_unit.dimensions
        or value_unit.is_absolute != target_unit.is_absolute
        or not _same_relative_kind(value_unit.kind, target_unit.kind)
    ):
        raise UnitRuntimeError(
            f"Cannot store a {value_unit.kind.name} value ('{value_unit.name}') "
            f"in an array of {target_unit.kind.name} [{target_unit.dimensions}]"
        )


def check_convertible(unit: Unit, target: Unit) -> Unit:
    """Return ``target`` if it measures the same dimensions as ``unit``."""
    if target is None:
        raise NullArgumentError("unit cannot be None")
    if not isinstance(target, Unit):
        raise TypeError(f"Expected a Unit, got {type(target).__name__}")
    if unit.dimensions != target.dimensions:
        raise UnitRuntimeError(
            f"Dimension mismatch in conversion: {unit.name} [{unit.dimensions}] "
            f"cannot be expressed in {target.name} [{target.dimensions}]"
        )
    return target


__all__ = [
    "AbsRel",
    "QuantityKind",
    "Unit",
    "plus_result_unit",
    "minus_result_unit",
    "check_convertible",
    "check_storable",
]
