"""
quantarray.core.vector
======================

Typed quantity vectors.

A `QuantityVector` is a `VectorData` (SI values, dense or sparse, mutable or
immutable) plus a display `Unit`. The unit's quantity kind decides what the
values are and how they combine:

- ``plus``/``minus`` follow the Absolute/Relative rules
  (Position − Position → Length, Position + Length → Position, Position +
  Position is an error).
- ``times``/``divide`` always produce an `SIVector` tagged with the combined
  SI dimensions only; `SIVector.as_quantity` turns it back into a named kind
  when the dimensions allow it.
- In-place operations (``set_si``, ``assign``, ``increment_by``, ``ceil``, ...)
  need a mutable vector; ``mutable()`` always hands out a private deep copy.

Example
-------
>>> from quantarray.units import u
>>> a = QuantityVector.instantiate([1.0, 2.0, 3.0], u.km, StorageType.DENSE)
>>> a.get_si(1)
2000.0
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, Sequence

import numpy as np

from quantarray.core.dimensions import DimOp, SIDimensions, combine
from quantarray.core.errors import (
    NullArgumentError,
    SizeMismatchError,
    UnitRuntimeError,
    ValueRuntimeError,
    require,
)
from quantarray.core.scalar import Scalar
from quantarray.core.scale import IDENTITY_SCALE, Scale
from quantarray.core.unit import (
    QuantityKind,
    Unit,
    check_convertible,
    check_storable,
    minus_result_unit,
    plus_result_unit,
)
from quantarray.core.utils import map_chunked
from quantarray.core.vector_data import StorageType, VectorData
from quantarray.units import _get_default_registry

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantarray.core.si_vector import SIVector


def _is_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


def _check_scalars(values: Sequence[object], unit: Unit) -> None:
    for s in values:
        if s is None:
            raise NullArgumentError("values contains one or more None entries")
        if not isinstance(s, Scalar):
            raise TypeError(f"Cannot mix Scalars and {type(s).__name__} in one array")
        check_storable(s.unit, unit)


def _build_data(
    values: "Sequence | np.ndarray | Mapping[int, object]",
    scale: Scale,
    unit: Unit,
    storage_type: StorageType,
    size: int | None,
    dtype,
) -> VectorData:
    """Turn any supported construction input into a `VectorData`."""
    if isinstance(values, Mapping):
        if size is None:
            raise NullArgumentError("size cannot be None when values is a map")
        items = list(values.values())
        if any(isinstance(v, Scalar) for v in items):
            _check_scalars(items, unit)
            return VectorData.instantiate_scalar_map(values, size, storage_type, dtype)
        return VectorData.instantiate_map(values, size, scale, storage_type, dtype)

    if not isinstance(values, np.ndarray):
        values = list(values)
        if any(isinstance(v, Scalar) for v in values):
            _check_scalars(values, unit)
            data = VectorData.instantiate_scalars(values, storage_type, dtype)
        else:
            data = VectorData.instantiate(values, scale, storage_type, dtype)
    else:
        data = VectorData.instantiate(values, scale, storage_type, dtype)

    if size is not None and size != data.size:
        raise SizeMismatchError(f"declared size {size} does not match {data.size} values")
    return data


class QuantityArrayBase:
    """
    Behaviour shared by quantity vectors and matrices: a `VectorData` plus a
    display `Unit`, with the Absolute/Relative rules and the mutability
    discipline layered on top.
    """

    __slots__ = ("_data", "_unit")

    def __init__(self, data: VectorData, unit: Unit) -> None:
        require(data, "data")
        require(unit, "unit")
        if not isinstance(data, VectorData):
            raise TypeError(f"data must be VectorData, got {type(data).__name__}")
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")
        self._data = data
        self._unit = unit

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------
    def _rewrap(self, data: VectorData, unit: Unit | None = None):
        """Same shape and class, new data (and optionally a new unit)."""
        raise NotImplementedError

    def _result(self, data: VectorData, unit: Unit):
        """Wrap the result of plus/minus; subclasses may pick another class."""
        return self._rewrap(data, unit)

    def _si_result(self, data: VectorData, unit: Unit):
        """Wrap the result of times/divide (SI-tagged only)."""
        raise NotImplementedError

    @property
    def shape(self) -> tuple[int, ...]:
        raise NotImplementedError

    def _reshape(self, arr: np.ndarray) -> np.ndarray:
        return arr

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def data(self) -> VectorData:
        return self._data

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def kind(self) -> QuantityKind:
        return self._unit.kind

    @property
    def dimensions(self) -> SIDimensions:
        return self._unit.dimensions

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def storage_type(self) -> StorageType:
        return self._data.storage_type

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_mutable(self) -> bool:
        return self._data.is_mutable

    @property
    def is_dense(self) -> bool:
        return self._data.is_dense

    @property
    def is_sparse(self) -> bool:
        return self._data.is_sparse

    @property
    def is_absolute(self) -> bool:
        return self._unit.is_absolute

    @property
    def is_relative(self) -> bool:
        return not self._unit.is_absolute

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------
    def _target_unit(self, unit: Unit | None) -> Unit:
        return self._unit if unit is None else check_convertible(self._unit, unit)

    def get_values_si(self) -> np.ndarray:
        """A new array of all SI values."""
        return self._reshape(self._data.get_dense_values_si())

    def get_values_in_unit(self, unit: Unit | None = None) -> np.ndarray:
        """A new array of all values in the display unit (or in ``unit``)."""
        target = self._target_unit(unit)
        values = self._data.get_dense_values_si()
        if not target.is_base_si:
            values = np.asarray(map_chunked(target.from_standard, values, out_dtype=values.dtype))
        return self._reshape(values)

    def cardinality(self) -> int:
        """Number of entries with a non-zero SI value."""
        return self._data.cardinality()

    def z_sum(self) -> Scalar:
        """Sum of all values; only meaningful for relative quantities."""
        if self.is_absolute:
            raise ValueRuntimeError(f"Cannot sum absolute {self.kind.name} values")
        return Scalar.instantiate_si(self._data.z_sum(), self._unit)

    # ------------------------------------------------------------------
    # Representation & mutability
    # ------------------------------------------------------------------
    def mutable(self):
        """A writable deep copy; this object is never affected."""
        return self._rewrap(self._data.mutable())

    def immutable(self):
        """A read-only version; returns ``self`` when already immutable."""
        if not self.is_mutable:
            return self
        return self._rewrap(self._data.immutable())

    def clone(self):
        """Deep copy with the same mutability."""
        return self._rewrap(self._data.copy())

    def to_dense(self):
        return self if self.is_dense else self._rewrap(self._data.to_dense())

    def to_sparse(self):
        return self if self.is_sparse else self._rewrap(self._data.to_sparse())

    def to_storage(self, storage_type: StorageType):
        return self.to_dense() if storage_type is StorageType.DENSE else self.to_sparse()

    def to(self, unit: Unit):
        """The same values displayed in another unit of the same quantity kind."""
        target = check_convertible(self._unit, unit)
        if target.kind != self.kind:
            raise UnitRuntimeError(
                f"'{target.name}' is a {target.kind.name} unit; this holds {self.kind.name}"
            )
        if target == self._unit:
            return self
        data = self._data.copy() if self.is_mutable else self._data
        return self._rewrap(data, target)

    # ------------------------------------------------------------------
    # In-place operations (mutable only)
    # ------------------------------------------------------------------
    def assign(self, func: Callable[[np.ndarray], np.ndarray]):
        """Replace every SI value v by ``func(v)``; ``func`` must work element-wise on arrays."""
        self._data.assign(func)
        return self

    def _in_place_operand(self, other, result_unit: Callable[[Unit, Unit], Unit]):
        if isinstance(other, Scalar):
            unit = result_unit(self._unit, other.unit)
            operand = other.si
        elif isinstance(other, QuantityArrayBase):
            self._check_shape(other)
            unit = result_unit(self._unit, other._unit)
            operand = other._data
        else:
            raise TypeError(f"operand must be a Scalar or a quantity array, got {type(other).__name__}")
        if unit.kind != self.kind:
            raise UnitRuntimeError(f"In-place result would be {unit.kind.name}, not {self.kind.name}")
        return operand

    def increment_by(self, other):
        """Add a Scalar or a same-shaped quantity array in place."""
        self._data.increment_by(self._in_place_operand(other, plus_result_unit))
        return self

    def decrement_by(self, other):
        """Subtract a Scalar or a same-shaped quantity array in place."""
        self._data.decrement_by(self._in_place_operand(other, minus_result_unit))
        return self

    def _check_scalable(self, factor: object) -> float:
        if not _is_number(factor):
            raise TypeError(f"factor must be a number, got {type(factor).__name__}")
        if self.is_absolute:
            raise ValueRuntimeError(f"Cannot scale absolute {self.kind.name} values")
        return float(factor)

    def multiply_by(self, factor: float):
        self._data.multiply_by(self._check_scalable(factor))
        return self

    def divide_by(self, divisor: float):
        self._data.divide_by(self._check_scalable(divisor))
        return self

    def abs(self):
        self._data.abs()
        return self

    def ceil(self):
        self._data.ceil()
        return self

    def floor(self):
        self._data.floor()
        return self

    def neg(self):
        self._data.neg()
        return self

    def rint(self):
        self._data.rint()
        return self

    # ------------------------------------------------------------------
    # Out-of-place operations
    # ------------------------------------------------------------------
    def _check_shape(self, other: "QuantityArrayBase") -> None:
        if not isinstance(other, QuantityArrayBase):
            raise TypeError(f"operand must be a quantity array, got {type(other).__name__}")
        if self.shape != other.shape:
            raise SizeMismatchError(f"Shapes differ: {self.shape} and {other.shape}")

    def plus(self, other: "QuantityArrayBase"):
        require(other, "other")
        self._check_shape(other)
        unit = plus_result_unit(self._unit, other._unit)
        return self._result(self._data.plus(other._data), unit)

    def minus(self, other: "QuantityArrayBase"):
        require(other, "other")
        self._check_shape(other)
        unit = minus_result_unit(self._unit, other._unit)
        return self._result(self._data.minus(other._data), unit)

    def _combine(self, other, op: DimOp):
        require(other, "other")
        if isinstance(other, Scalar):
            data = self._data.scaled(other.si) if op is DimOp.MULTIPLY else self._data.divided(other.si)
            other_dims = other.dimensions
        else:
            self._check_shape(other)
            data = self._data.times(other._data) if op is DimOp.MULTIPLY else self._data.divide(other._data)
            other_dims = other.dimensions
        unit = _get_default_registry().resolve(combine(self.dimensions, other_dims, op))
        return self._si_result(data, unit)

    def times(self, other):
        """Element-wise product with a same-shaped array or a Scalar; the result is SI-tagged."""
        return self._combine(other, DimOp.MULTIPLY)

    def divide(self, other):
        """Element-wise quotient with a same-shaped array or a Scalar; the result is SI-tagged."""
        return self._combine(other, DimOp.DIVIDE)

    def __add__(self, other):
        if not isinstance(other, QuantityArrayBase):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, QuantityArrayBase):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        if _is_number(other):
            return self._rewrap(self._data.scaled(self._check_scalable(other)), self._unit)
        if isinstance(other, (QuantityArrayBase, Scalar)):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_number(other):
            return self._rewrap(self._data.scaled(self._check_scalable(other)), self._unit)
        return NotImplemented

    def __truediv__(self, other):
        if _is_number(other):
            return self._rewrap(self._data.divided(self._check_scalable(other)), self._unit)
        if isinstance(other, (QuantityArrayBase, Scalar)):
            return self.divide(other)
        return NotImplemented

    def __neg__(self):
        return self._rewrap(self._data.scaled(self._check_scalable(-1.0)), self._unit)

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantityArrayBase):
            return NotImplemented
        return self.shape == other.shape and self._unit == other._unit and self._data == other._data

    def __hash__(self) -> int:
        return hash((self.shape, self._unit, self._data))

    def _markers(self) -> str:
        mutability = "Mutable" if self.is_mutable else "Immutable"
        abs_rel = "Abs" if self.is_absolute else "Rel"
        return f"{mutability} {abs_rel} {self.storage_type.value} {self.kind.name}"


class QuantityVector(QuantityArrayBase):
    """A fixed-size vector of one quantity kind, displayed in one unit."""

    __slots__ = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def instantiate(
        cls,
        values,
        unit: Unit,
        storage_type: StorageType = StorageType.DENSE,
        size: int | None = None,
        dtype=None,
    ) -> "QuantityVector":
        """
        Build an immutable vector from values in ``unit``.

        ``values`` may be a sequence or numpy array of numbers, a sequence of
        `Scalar` objects, or a mapping of index to number or `Scalar`; a
        mapping needs ``size``.
        """
        require(values, "values")
        require(unit, "unit")
        data = _build_data(values, unit.scale, unit, storage_type, size, dtype)
        return cls.instantiate_vector(data, unit)

    @classmethod
    def instantiate_si(
        cls,
        values_si,
        unit: Unit,
        storage_type: StorageType = StorageType.DENSE,
        size: int | None = None,
        dtype=None,
    ) -> "QuantityVector":
        """Like `instantiate`, but the numbers are already SI values."""
        require(values_si, "values_si")
        require(unit, "unit")
        data = _build_data(values_si, IDENTITY_SCALE, unit, storage_type, size, dtype)
        return cls.instantiate_vector(data, unit)

    @classmethod
    def instantiate_vector(cls, data: VectorData, unit: Unit) -> "QuantityVector":
        """Factory used by every operation that produces a vector of this class."""
        return cls(data, unit)

    @classmethod
    def instantiate_scalar_si(cls, value_si: float, unit: Unit) -> Scalar:
        """Factory used by every operation that produces a single value."""
        return Scalar.instantiate_si(value_si, unit)

    def _rewrap(self, data: VectorData, unit: Unit | None = None) -> "QuantityVector":
        return self.instantiate_vector(data, self._unit if unit is None else unit)

    def _si_result(self, data: VectorData, unit: Unit) -> "SIVector":
        from quantarray.core.si_vector import SIVector

        return SIVector.instantiate_vector(data, unit)

    def _result(self, data: VectorData, unit: Unit) -> "QuantityVector":
        # the result kind picks the class; this class only when it keeps the kind
        cls = _get_default_registry().vector_class(unit.kind)
        if cls is None:
            if unit.kind == self.kind:
                return self._rewrap(data, unit)
            cls = QuantityVector
        return cls.instantiate_vector(data, unit)

    @property
    def shape(self) -> tuple[int, ...]:
        return (self._data.size,)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self._data.size

    def get_si(self, index: int) -> float:
        return self._data.get_si(index)

    def get_in_unit(self, index: int, unit: Unit | None = None) -> float:
        """Value at ``index`` in the display unit, or in another unit of the same dimensions."""
        target = self._target_unit(unit)
        return float(target.from_standard(self._data.get_si(index)))

    def get(self, index: int) -> Scalar:
        return self.instantiate_scalar_si(self._data.get_si(index), self._unit)

    def __getitem__(self, index: int) -> Scalar:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        return self.get(index)

    def get_scalars(self) -> list[Scalar]:
        return [self.instantiate_scalar_si(v, self._unit) for v in self._data.iter_si()]

    def __iter__(self) -> Iterator[Scalar]:
        for v in self._data.iter_si():
            yield self.instantiate_scalar_si(v, self._unit)

    def set(self, index: int, value: Scalar) -> None:
        """Store a Scalar of the same quantity kind (or an SI-tagged one of the same dimensions)."""
        require(value, "value")
        if not isinstance(value, Scalar):
            raise TypeError(f"value must be a Scalar, got {type(value).__name__}")
        check_storable(value.unit, self._unit)
        self._data.set_si(index, value.si)

    def set_si(self, index: int, value_si: float) -> None:
        self._data.set_si(index, float(value_si))

    def set_in_unit(self, index: int, value: float, unit: Unit | None = None) -> None:
        target = self._target_unit(unit)
        self._data.set_si(index, float(target.to_standard(float(value))))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def to_string(self, unit: Unit | None = None, verbose: bool = False, with_unit: bool = True) -> str:
        """
        ``[1, 2, 3] km``; ``verbose`` adds the Mutable/Immutable, Abs/Rel,
        Dense/Sparse and kind markers in front.
        """
        target = self._target_unit(unit)
        body = np.array2string(
            self.get_values_in_unit(target),
            separator=", ",
            threshold=20,
            edgeitems=3,
            formatter={"float_kind": lambda v: f"{v:.6g}"},
        )
        if with_unit and target.name:
            body = f"{body} {target.name}"
        return f"{self._markers()} {body}" if verbose else body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string(verbose=True)})"


__all__ = ["QuantityArrayBase", "QuantityVector"]
