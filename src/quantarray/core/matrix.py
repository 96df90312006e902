"""
quantarray.core.matrix
======================

Two-dimensional quantity arrays.

A `QuantityMatrix` stores ``rows × cols`` SI values row-major in a single
`VectorData`, so it inherits dense/sparse storage, mutability and the
Absolute/Relative rules from the vector engine unchanged. Rows, columns and
the diagonal come out as `QuantityVector` objects; multiplying or dividing
two matrices element-wise gives an `SIMatrix`.
"""

from __future__ import annotations

from numbers import Integral
from typing import TYPE_CHECKING, ClassVar, Iterator, Sequence

import numpy as np

from quantarray.core.errors import (
    NullArgumentError,
    UnitRuntimeError,
    ValueRuntimeError,
    VectorIndexError,
    require,
)
from quantarray.core.scalar import Scalar
from quantarray.core.scale import IDENTITY_SCALE, Scale
from quantarray.core.si_vector import SIVector, _dimensions
from quantarray.core.unit import QuantityKind, Unit, check_storable
from quantarray.core.vector import QuantityArrayBase, QuantityVector, _check_scalars
from quantarray.core.vector_data import StorageType, VectorData
from quantarray.units import _get_default_registry

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantarray.units.registry import UnitsRegistry


def _check_dim(n: int, name: str) -> int:
    require(n, name)
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueRuntimeError(f"{name} must be >= 0, got {n}")
    return int(n)


def _flatten(values: Sequence[Sequence[float]]) -> tuple[list, int, int]:
    """Row-major flattening of a rectangular nested sequence."""
    if isinstance(values, np.ndarray):
        if values.ndim != 2:
            raise ValueRuntimeError(f"values must be two-dimensional, got shape {values.shape}")
        rows, cols = values.shape
        return list(values.ravel()), int(rows), int(cols)

    grid = []
    for row in values:
        if row is None:
            raise NullArgumentError("values contains a None row")
        grid.append(list(row))
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for r, row in enumerate(grid):
        if len(row) != cols:
            raise ValueRuntimeError(f"row {r} has {len(row)} entries, expected {cols}")
    return [v for row in grid for v in row], rows, cols


class QuantityMatrix(QuantityArrayBase):
    """A ``rows × cols`` array of one quantity kind, displayed in one unit."""

    __slots__ = ("_rows", "_cols")

    vector_class: ClassVar[type[QuantityVector]] = QuantityVector

    def __init__(self, data: VectorData, rows: int, cols: int, unit: Unit) -> None:
        super().__init__(data, unit)
        rows = _check_dim(rows, "rows")
        cols = _check_dim(cols, "cols")
        if rows * cols != data.size:
            raise ValueRuntimeError(f"{rows} x {cols} matrix cannot hold {data.size} values")
        self._rows = rows
        self._cols = cols

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _build(cls, values, scale: Scale, unit: Unit, storage_type: StorageType, dtype):
        require(values, "values")
        require(unit, "unit")
        flat, rows, cols = _flatten(values)
        if any(isinstance(v, Scalar) for v in flat):
            _check_scalars(flat, unit)
            data = VectorData.instantiate_scalars(flat, storage_type, dtype)
        else:
            data = VectorData.instantiate(flat, scale, storage_type, dtype)
        return cls.instantiate_matrix(data, rows, cols, unit)

    @classmethod
    def instantiate(
        cls,
        values,
        unit: Unit,
        storage_type: StorageType = StorageType.DENSE,
        dtype=None,
    ) -> "QuantityMatrix":
        """Build an immutable matrix from a rectangular nested sequence in ``unit``."""
        return cls._build(values, None if unit is None else unit.scale, unit, storage_type, dtype)

    @classmethod
    def instantiate_si(
        cls,
        values_si,
        unit: Unit,
        storage_type: StorageType = StorageType.DENSE,
        dtype=None,
    ) -> "QuantityMatrix":
        return cls._build(values_si, IDENTITY_SCALE, unit, storage_type, dtype)

    @classmethod
    def instantiate_matrix(cls, data: VectorData, rows: int, cols: int, unit: Unit) -> "QuantityMatrix":
        """Factory used by every operation that produces a matrix of this class."""
        return cls(data, rows, cols, unit)

    def _rewrap(self, data: VectorData, unit: Unit | None = None) -> "QuantityMatrix":
        return self.instantiate_matrix(data, self._rows, self._cols, self._unit if unit is None else unit)

    def _si_result(self, data: VectorData, unit: Unit) -> "SIMatrix":
        return SIMatrix.instantiate_matrix(data, self._rows, self._cols, unit)

    def _result(self, data: VectorData, unit: Unit) -> "QuantityMatrix":
        cls = _get_default_registry().matrix_class(unit.kind)
        if cls is None:
            if unit.kind == self.kind:
                return self._rewrap(data, unit)
            cls = QuantityMatrix
        return cls.instantiate_matrix(data, self._rows, self._cols, unit)

    def _reshape(self, arr: np.ndarray) -> np.ndarray:
        return arr.reshape(self._rows, self._cols)

    # ------------------------------------------------------------------
    # Shape & access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, ...]:
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @staticmethod
    def _check_axis(name: str, i: int, n: int) -> int:
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise TypeError(f"{name} must be an int, got {type(i).__name__}")
        if i < 0 or i >= n:
            raise VectorIndexError(f"{name} out of range [0, {n}): {i}")
        return int(i)

    def _flat_index(self, row: int, col: int) -> int:
        return self._check_axis("row", row, self._rows) * self._cols + self._check_axis("col", col, self._cols)

    def get_si(self, row: int, col: int) -> float:
        return self._data.get_si(self._flat_index(row, col))

    def get_in_unit(self, row: int, col: int, unit: Unit | None = None) -> float:
        target = self._target_unit(unit)
        return float(target.from_standard(self.get_si(row, col)))

    def get(self, row: int, col: int) -> Scalar:
        return self.vector_class.instantiate_scalar_si(self.get_si(row, col), self._unit)

    def set(self, row: int, col: int, value: Scalar) -> None:
        require(value, "value")
        if not isinstance(value, Scalar):
            raise TypeError(f"value must be a Scalar, got {type(value).__name__}")
        check_storable(value.unit, self._unit)
        self._data.set_si(self._flat_index(row, col), value.si)

    def set_si(self, row: int, col: int, value_si: float) -> None:
        self._data.set_si(self._flat_index(row, col), float(value_si))

    def set_in_unit(self, row: int, col: int, value: float, unit: Unit | None = None) -> None:
        target = self._target_unit(unit)
        self.set_si(row, col, float(target.to_standard(float(value))))

    def _vector(self, positions: np.ndarray) -> QuantityVector:
        return self.vector_class.instantiate_vector(self._data.take(positions), self._unit)

    def get_row(self, row: int) -> QuantityVector:
        start = self._check_axis("row", row, self._rows) * self._cols
        return self._vector(np.arange(start, start + self._cols, dtype=np.int64))

    def get_column(self, col: int) -> QuantityVector:
        col = self._check_axis("col", col, self._cols)
        return self._vector(np.arange(self._rows, dtype=np.int64) * self._cols + col)

    def get_diagonal(self) -> QuantityVector:
        self._check_square()
        return self._vector(np.arange(self._rows, dtype=np.int64) * (self._cols + 1))

    def __iter__(self) -> Iterator[QuantityVector]:
        for r in range(self._rows):
            yield self.get_row(r)

    def transpose(self) -> "QuantityMatrix":
        positions = np.arange(self.size, dtype=np.int64).reshape(self._rows, self._cols).T.ravel()
        return self.instantiate_matrix(self._data.take(positions), self._cols, self._rows, self._unit)

    def _check_square(self) -> None:
        if not self.is_square:
            raise ValueRuntimeError(f"Operation needs a square matrix, got {self._rows} x {self._cols}")

    def determinant_si(self) -> float:
        """Determinant of the SI values (square matrices only)."""
        self._check_square()
        return float(np.linalg.det(self.get_values_si().astype(np.float64)))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def to_string(self, unit: Unit | None = None, verbose: bool = False, with_unit: bool = True) -> str:
        target = self._target_unit(unit)
        body = np.array2string(
            self.get_values_in_unit(target),
            separator=", ",
            threshold=100,
            edgeitems=3,
            formatter={"float_kind": lambda v: f"{v:.6g}"},
        )
        if with_unit and target.name:
            body = f"{body} {target.name}"
        return f"{self._markers()} {self._rows}x{self._cols}\n{body}" if verbose else body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string(verbose=True)})"


class SIMatrix(QuantityMatrix):
    """A quantity matrix whose only type information is its SI dimensions."""

    __slots__ = ()

    vector_class = SIVector

    def __init__(self, data: VectorData, rows: int, cols: int, unit: Unit) -> None:
        super().__init__(data, rows, cols, unit)
        if not unit.kind.generic:
            raise UnitRuntimeError(
                f"SIMatrix needs an anonymous SI unit, got '{unit.name}' ({unit.kind.name})"
            )

    @classmethod
    def of(
        cls,
        values,
        dimensions,
        storage_type: StorageType = StorageType.DENSE,
        dtype=None,
        registry: "UnitsRegistry | None" = None,
    ) -> "SIMatrix":
        """Build from nested SI values and a dimension signature such as ``"m2"``."""
        reg = registry or _get_default_registry()
        return cls.instantiate_si(values, reg.resolve(_dimensions(dimensions)), storage_type, dtype)

    def as_quantity(
        self,
        kind: "QuantityKind | str",
        display_unit: "Unit | str | None" = None,
        registry: "UnitsRegistry | None" = None,
    ) -> QuantityMatrix:
        """Reinterpret as ``kind``; raises `UnitRuntimeError` when the dimensions differ."""
        reg = registry or _get_default_registry()
        target, unit = reg.cast_target(self.dimensions, kind, display_unit)
        data = self._data.copy() if self.is_mutable else self._data
        cls = reg.matrix_class(target) or QuantityMatrix
        return cls.instantiate_matrix(data, self._rows, self._cols, unit)

    def as_unit(self, display_unit: Unit, registry: "UnitsRegistry | None" = None) -> QuantityMatrix:
        require(display_unit, "display_unit")
        return self.as_quantity(display_unit.kind, display_unit, registry)


__all__ = ["QuantityMatrix", "SIMatrix"]
