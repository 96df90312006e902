"""
quantarray.core.vector_data
===========================

Dense and sparse storage of SI values for quantity vectors.

A `VectorData` owns a one-dimensional array of SI (standard-unit) values and
nothing else: it has no unit and no quantity kind. Two concrete variants
exist:

- `DenseVectorData`: one slot per index in a flat numpy array.
- `SparseVectorData`: a strictly increasing index array with a parallel value
  array; indices that are not stored hold an implicit 0.0.

Both variants are interchangeable for every operation (equality, hashing,
arithmetic, iteration); only memory use and speed differ. Each instance is
created mutable or immutable; in-place operations on an immutable instance
raise `ImmutableValueError` and change nothing. The backing arrays of an
immutable instance are also flagged read-only at the numpy level.

Element-wise binary operations between a dense and a sparse operand never
convert the sparse operand to dense first; they evaluate the implicit-zero
part of the sparse side in one vectorised pass over the dense side and patch
the stored indices afterwards. Floating-point edge cases (division by zero,
overflow) follow IEEE-754 and never raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from numbers import Integral, Real
from typing import TYPE_CHECKING, Callable, ClassVar, Iterable, Iterator, Mapping, Sequence

import numpy as np

from quantarray.config import resolve_dtype
from quantarray.core.errors import (
    ImmutableValueError,
    NullArgumentError,
    SizeMismatchError,
    ValueRuntimeError,
    VectorIndexError,
    require,
)
from quantarray.core.utils import map_chunked

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantarray.core.scalar import Scalar
    from quantarray.core.scale import Scale

ArrayFunction = Callable[[np.ndarray], np.ndarray]
ArrayFunction2 = Callable[[np.ndarray, np.ndarray], np.ndarray]


class StorageType(Enum):
    DENSE = "Dense"
    SPARSE = "Sparse"


def _check_storage_type(storage_type: StorageType | None) -> StorageType:
    require(storage_type, "storage_type")
    if not isinstance(storage_type, StorageType):
        raise ValueRuntimeError(f"Unknown storage type: {storage_type!r}")
    return storage_type


def _to_float_array(values: Iterable[float], dtype: np.dtype) -> np.ndarray:
    """Copy ``values`` into a new 1-D array; None elements are rejected."""
    if isinstance(values, np.ndarray):
        arr = np.array(values, dtype=dtype, copy=True)
    else:
        seq = list(values)
        for v in seq:
            if v is None:
                raise NullArgumentError("values contains one or more None entries")
        arr = np.array(seq, dtype=dtype)
    if arr.ndim != 1:
        raise ValueRuntimeError(f"values must be one-dimensional, got shape {arr.shape}")
    return arr


def _to_si(arr: np.ndarray, scale: "Scale") -> np.ndarray:
    if scale.is_base_si:
        return arr
    return map_chunked(scale.to_standard, arr, out_dtype=arr.dtype)


def _store(dense_si: np.ndarray, storage_type: StorageType, mutable: bool = False) -> "VectorData":
    if storage_type is StorageType.DENSE:
        return DenseVectorData(dense_si, mutable=mutable)
    return SparseVectorData.from_dense(dense_si, mutable=mutable)


def _is_number(x: object) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


class VectorData(ABC):
    """Storage-independent contract for a fixed-size vector of SI values."""

    __slots__ = ("_mutable",)

    storage_type: ClassVar[StorageType]

    # ------------------------------------------------------------------
    # Instantiation
    # ------------------------------------------------------------------
    @staticmethod
    def instantiate(
        values: Sequence[float] | np.ndarray,
        scale: "Scale",
        storage_type: StorageType,
        dtype=None,
    ) -> "VectorData":
        """Convert display-unit ``values`` to SI through ``scale`` and store them."""
        require(values, "values")
        require(scale, "scale")
        storage_type = _check_storage_type(storage_type)
        arr = _to_float_array(values, resolve_dtype(dtype))
        return _store(_to_si(arr, scale), storage_type)

    @staticmethod
    def instantiate_scalars(
        values: Sequence["Scalar"],
        storage_type: StorageType,
        dtype=None,
    ) -> "VectorData":
        """Store the SI values of a sequence of scalars."""
        require(values, "values")
        storage_type = _check_storage_type(storage_type)
        si = []
        for s in values:
            if s is None:
                raise NullArgumentError("values contains one or more None entries")
            si.append(s.si)
        return _store(np.array(si, dtype=resolve_dtype(dtype)), storage_type)

    @staticmethod
    def instantiate_map(
        value_map: Mapping[int, float],
        size: int,
        scale: "Scale",
        storage_type: StorageType,
        dtype=None,
    ) -> "VectorData":
        """
        Build from an index → display-value mapping of a declared ``size``.

        Indices absent from the map hold the display-unit zero, i.e.
        ``scale.to_standard(0.0)``, which is 0.0 for every scale without an
        offset.
        """
        require(value_map, "value_map")
        require(scale, "scale")
        storage_type = _check_storage_type(storage_type)
        size = _check_size(size)
        dt = resolve_dtype(dtype)
        keys, vals = _checked_map_items(value_map, size, dt)

        if scale.is_base_si:
            if storage_type is StorageType.SPARSE:
                return SparseVectorData._from_pairs(keys, vals, size)
            dense = np.zeros(size, dtype=dt)
            dense[keys] = vals
            return DenseVectorData(dense)

        dense = np.full(size, scale.to_standard(0.0), dtype=dt)
        if keys.size:
            dense[keys] = _to_si(vals, scale)
        return _store(dense, storage_type)

    @staticmethod
    def instantiate_scalar_map(
        value_map: Mapping[int, "Scalar"],
        size: int,
        storage_type: StorageType,
        dtype=None,
    ) -> "VectorData":
        """Build from an index → scalar mapping; absent indices are SI zero."""
        require(value_map, "value_map")
        storage_type = _check_storage_type(storage_type)
        size = _check_size(size)
        for s in value_map.values():
            if s is None:
                raise NullArgumentError("value_map contains one or more None values")
        si_map = {k: s.si for k, s in value_map.items()}
        dt = resolve_dtype(dtype)
        keys, vals = _checked_map_items(si_map, size, dt)
        if storage_type is StorageType.SPARSE:
            return SparseVectorData._from_pairs(keys, vals, size)
        dense = np.zeros(size, dtype=dt)
        dense[keys] = vals
        return DenseVectorData(dense)

    # ------------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def size(self) -> int: ...

    @property
    @abstractmethod
    def dtype(self) -> np.dtype: ...

    def __len__(self) -> int:
        return self.size

    @property
    def is_mutable(self) -> bool:
        return self._mutable

    @property
    def is_dense(self) -> bool:
        return self.storage_type is StorageType.DENSE

    @property
    def is_sparse(self) -> bool:
        return self.storage_type is StorageType.SPARSE

    # ------------------------------------------------------------------
    # Representation & mutability
    # ------------------------------------------------------------------
    @abstractmethod
    def to_dense(self) -> "DenseVectorData": ...

    @abstractmethod
    def to_sparse(self) -> "SparseVectorData": ...

    def to_storage(self, storage_type: StorageType) -> "VectorData":
        storage_type = _check_storage_type(storage_type)
        return self.to_dense() if storage_type is StorageType.DENSE else self.to_sparse()

    @abstractmethod
    def copy(self, mutable: bool | None = None) -> "VectorData":
        """Deep copy; keeps the mutability flag unless ``mutable`` is given."""

    def mutable(self) -> "VectorData":
        """Return a writable deep copy; the original is never affected."""
        return self.copy(mutable=True)

    def immutable(self) -> "VectorData":
        """Return a read-only instance that shares no writable storage."""
        if not self._mutable:
            return self
        return self.copy(mutable=False)

    def _check_mutable(self) -> None:
        if not self._mutable:
            raise ImmutableValueError("Attempt to modify an immutable vector")

    def _check_index(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        index = int(index)
        if index < 0 or index >= self.size:
            raise VectorIndexError(f"index out of range [0, {self.size}): {index}")
        return index

    def _check_sizes(self, other: "VectorData") -> None:
        require(other, "other")
        if self.size != other.size:
            raise SizeMismatchError(
                f"Two data objects used in a vector operation do not have the same size "
                f"({self.size} != {other.size})"
            )

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    @abstractmethod
    def get_si(self, index: int) -> float: ...

    @abstractmethod
    def set_si(self, index: int, value_si: float) -> None: ...

    @abstractmethod
    def get_dense_values_si(self) -> np.ndarray:
        """A new array holding every SI value, zeros included."""

    @abstractmethod
    def iter_si(self) -> Iterator[float]:
        """SI values in index order."""

    @abstractmethod
    def take(self, positions: np.ndarray) -> "VectorData":
        """Gather ``positions`` into a new immutable instance of the same storage type."""

    @abstractmethod
    def _nonzero(self) -> tuple[np.ndarray, np.ndarray]:
        """(indices, values) of all non-zero SI entries, index-sorted."""

    def cardinality(self) -> int:
        """Number of indices holding a non-zero SI value."""
        return int(np.count_nonzero(self._nonzero()[1]))

    @abstractmethod
    def z_sum(self) -> float:
        """Sum of all SI values."""

    # ------------------------------------------------------------------
    # In-place operations (mutable instances only)
    # ------------------------------------------------------------------
    @abstractmethod
    def assign(self, func: ArrayFunction) -> "VectorData":
        """Replace every SI value v by ``func(v)``; ``func`` must be element-wise on arrays."""

    @abstractmethod
    def _adopt(self, result: "VectorData") -> None:
        """Take over the values of ``result`` while keeping this storage type."""

    def _assign_binary(self, op: ArrayFunction2, other: "VectorData | float") -> "VectorData":
        self._check_mutable()
        if _is_number(other):
            value = float(other)
            return self.assign(lambda v: op(v, value))
        if not isinstance(other, VectorData):
            raise TypeError(f"operand must be VectorData or a number, got {type(other).__name__}")
        self._check_sizes(other)
        self._adopt(_elementwise(op, self, other, self.storage_type))
        return self

    def increment_by(self, other: "VectorData | float") -> "VectorData":
        return self._assign_binary(np.add, other)

    def decrement_by(self, other: "VectorData | float") -> "VectorData":
        return self._assign_binary(np.subtract, other)

    def multiply_by(self, other: "VectorData | float") -> "VectorData":
        return self._assign_binary(np.multiply, other)

    def divide_by(self, other: "VectorData | float") -> "VectorData":
        return self._assign_binary(np.divide, other)

    def abs(self) -> "VectorData":
        return self.assign(np.abs)

    def ceil(self) -> "VectorData":
        return self.assign(np.ceil)

    def floor(self) -> "VectorData":
        return self.assign(np.floor)

    def neg(self) -> "VectorData":
        return self.assign(np.negative)

    def rint(self) -> "VectorData":
        return self.assign(np.rint)

    # ------------------------------------------------------------------
    # Out-of-place operations
    # ------------------------------------------------------------------
    def plus(self, right: "VectorData") -> "VectorData":
        """Sum; sparse only when both operands are sparse."""
        self._check_sizes(right)
        sparse = self.is_sparse and right.is_sparse
        return _elementwise(np.add, self, right, StorageType.SPARSE if sparse else StorageType.DENSE)

    def minus(self, right: "VectorData") -> "VectorData":
        self._check_sizes(right)
        sparse = self.is_sparse and right.is_sparse
        return _elementwise(np.subtract, self, right, StorageType.SPARSE if sparse else StorageType.DENSE)

    def times(self, right: "VectorData") -> "VectorData":
        """Element-wise product; sparse when either operand is sparse."""
        self._check_sizes(right)
        sparse = self.is_sparse or right.is_sparse
        return _elementwise(np.multiply, self, right, StorageType.SPARSE if sparse else StorageType.DENSE)

    def divide(self, right: "VectorData") -> "VectorData":
        """Element-wise quotient; keeps the storage type of the left operand."""
        self._check_sizes(right)
        return _elementwise(np.divide, self, right, self.storage_type)

    def scaled(self, factor: float) -> "VectorData":
        """New immutable instance with every SI value multiplied by ``factor``."""
        result = self.copy(mutable=True)
        result.multiply_by(factor)
        result._freeze()
        return result

    def divided(self, divisor: float) -> "VectorData":
        """New immutable instance with every SI value divided by ``divisor`` (IEEE semantics)."""
        result = self.copy(mutable=True)
        result.divide_by(divisor)
        result._freeze()
        return result

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorData):
            return NotImplemented
        if self is other:
            return True
        if self.size != other.size:
            return False
        i1, v1 = self._nonzero()
        i2, v2 = other._nonzero()
        return np.array_equal(i1, i2) and np.array_equal(v1, v2, equal_nan=True)

    def __hash__(self) -> int:
        idx, vals = self._nonzero()
        return hash((self.size, idx.tobytes(), vals.astype(np.float64).tobytes()))

    def _freeze(self) -> None:
        self._mutable = False
        for arr in self._arrays():
            arr.flags.writeable = False

    @abstractmethod
    def _arrays(self) -> tuple[np.ndarray, ...]: ...

    def __repr__(self) -> str:
        state = "mutable" if self._mutable else "immutable"
        return f"{type(self).__name__}(size={self.size}, {state}, si={np.array2string(self.get_dense_values_si(), threshold=12)})"


# ----------------------------------------------------------------------
# Dense
# ----------------------------------------------------------------------
class DenseVectorData(VectorData):
    """One SI value per index."""

    __slots__ = ("_values",)

    storage_type = StorageType.DENSE

    def __init__(self, values_si: np.ndarray, mutable: bool = False) -> None:
        require(values_si, "values_si")
        arr = np.asarray(values_si)
        if arr.ndim != 1:
            raise ValueRuntimeError(f"values_si must be one-dimensional, got shape {arr.shape}")
        if arr.dtype.kind != "f":
            arr = arr.astype(resolve_dtype(None))
        self._values = arr
        self._mutable = mutable
        if not mutable:
            self._values.flags.writeable = False

    @property
    def size(self) -> int:
        return int(self._values.shape[0])

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def _arrays(self) -> tuple[np.ndarray, ...]:
        return (self._values,)

    def to_dense(self) -> "DenseVectorData":
        return self

    def to_sparse(self) -> "SparseVectorData":
        return SparseVectorData.from_dense(self._values, mutable=self._mutable)

    def copy(self, mutable: bool | None = None) -> "DenseVectorData":
        return DenseVectorData(self._values.copy(), mutable=self._mutable if mutable is None else mutable)

    def get_si(self, index: int) -> float:
        return float(self._values[self._check_index(index)])

    def set_si(self, index: int, value_si: float) -> None:
        self._check_mutable()
        self._values[self._check_index(index)] = value_si

    def get_dense_values_si(self) -> np.ndarray:
        return self._values.copy()

    def iter_si(self) -> Iterator[float]:
        for v in self._values:
            yield float(v)

    def take(self, positions: np.ndarray) -> "DenseVectorData":
        return DenseVectorData(self._values[np.asarray(positions, dtype=np.int64)].copy())

    def _nonzero(self) -> tuple[np.ndarray, np.ndarray]:
        idx = np.flatnonzero(self._values)
        return idx, self._values[idx]

    def cardinality(self) -> int:
        return int(np.count_nonzero(self._values))

    def z_sum(self) -> float:
        return float(np.sum(self._values))

    def assign(self, func: ArrayFunction) -> "DenseVectorData":
        self._check_mutable()
        with np.errstate(all="ignore"):
            self._values[:] = map_chunked(func, self._values)
        return self

    def _adopt(self, result: VectorData) -> None:
        self._values[:] = result.get_dense_values_si()


# ----------------------------------------------------------------------
# Sparse
# ----------------------------------------------------------------------
class SparseVectorData(VectorData):
    """Sorted index array plus parallel value array; other indices are 0.0."""

    __slots__ = ("_indices", "_values", "_size")

    storage_type = StorageType.SPARSE

    def __init__(
        self,
        values_si: np.ndarray,
        indices: np.ndarray,
        size: int,
        mutable: bool = False,
    ) -> None:
        require(values_si, "values_si")
        require(indices, "indices")
        size = _check_size(size)
        vals = np.asarray(values_si)
        idx = np.asarray(indices, dtype=np.int64)
        if vals.ndim != 1 or idx.ndim != 1 or vals.shape != idx.shape:
            raise ValueRuntimeError("indices and values_si must be 1-D arrays of equal length")
        if idx.size:
            if idx[0] < 0 or idx[-1] >= size:
                raise VectorIndexError(f"sparse index out of range [0, {size})")
            if np.any(np.diff(idx) <= 0):
                raise ValueRuntimeError("sparse indices must be strictly increasing")
        if vals.dtype.kind != "f":
            vals = vals.astype(resolve_dtype(None))
        # keep the "only non-zero values are stored" invariant
        keep = vals != 0
        if not np.all(keep):
            idx, vals = idx[keep], vals[keep]
        self._indices = idx
        self._values = vals
        self._size = size
        self._mutable = mutable
        if not mutable:
            self._indices.flags.writeable = False
            self._values.flags.writeable = False

    @classmethod
    def from_dense(cls, dense_si: np.ndarray, mutable: bool = False) -> "SparseVectorData":
        dense_si = np.asarray(dense_si)
        idx = np.flatnonzero(dense_si)
        return cls(dense_si[idx].copy(), idx, dense_si.shape[0], mutable=mutable)

    @classmethod
    def _from_pairs(cls, keys: np.ndarray, vals: np.ndarray, size: int) -> "SparseVectorData":
        order = np.argsort(keys, kind="stable")
        return cls(vals[order], keys[order], size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def _arrays(self) -> tuple[np.ndarray, ...]:
        return (self._indices, self._values)

    def to_dense(self) -> DenseVectorData:
        return DenseVectorData(self.get_dense_values_si(), mutable=self._mutable)

    def to_sparse(self) -> "SparseVectorData":
        return self

    def copy(self, mutable: bool | None = None) -> "SparseVectorData":
        return SparseVectorData(
            self._values.copy(),
            self._indices.copy(),
            self._size,
            mutable=self._mutable if mutable is None else mutable,
        )

    def _position(self, index: int) -> tuple[int, bool]:
        pos = int(np.searchsorted(self._indices, index))
        found = pos < self._indices.size and self._indices[pos] == index
        return pos, bool(found)

    def _values_at(self, positions: np.ndarray) -> np.ndarray:
        """SI values at the (sorted or unsorted) ``positions``, zeros where not stored."""
        out = np.zeros(positions.shape[0], dtype=self._values.dtype)
        if self._indices.size == 0 or positions.size == 0:
            return out
        pos = np.searchsorted(self._indices, positions)
        pos_clipped = np.minimum(pos, self._indices.size - 1)
        hit = self._indices[pos_clipped] == positions
        out[hit] = self._values[pos_clipped[hit]]
        return out

    def get_si(self, index: int) -> float:
        pos, found = self._position(self._check_index(index))
        return float(self._values[pos]) if found else 0.0

    def set_si(self, index: int, value_si: float) -> None:
        self._check_mutable()
        index = self._check_index(index)
        pos, found = self._position(index)
        if found:
            if value_si == 0:
                self._indices = np.delete(self._indices, pos)
                self._values = np.delete(self._values, pos)
            else:
                self._values[pos] = value_si
        elif value_si != 0:
            self._indices = np.insert(self._indices, pos, index)
            self._values = np.insert(self._values, pos, value_si)

    def get_dense_values_si(self) -> np.ndarray:
        dense = np.zeros(self._size, dtype=self._values.dtype)
        dense[self._indices] = self._values
        return dense

    def iter_si(self) -> Iterator[float]:
        k = 0
        stored = self._indices.size
        for i in range(self._size):
            if k < stored and self._indices[k] == i:
                yield float(self._values[k])
                k += 1
            else:
                yield 0.0

    def take(self, positions: np.ndarray) -> "SparseVectorData":
        positions = np.asarray(positions, dtype=np.int64)
        vals = self._values_at(positions)
        nz = np.flatnonzero(vals)
        return SparseVectorData._from_pairs(nz.astype(np.int64), vals[nz], positions.shape[0])

    def _nonzero(self) -> tuple[np.ndarray, np.ndarray]:
        return self._indices, self._values

    def z_sum(self) -> float:
        return float(np.sum(self._values))

    def assign(self, func: ArrayFunction) -> "SparseVectorData":
        self._check_mutable()
        with np.errstate(all="ignore"):
            at_zero = np.asarray(func(np.zeros(1, dtype=self._values.dtype)))[0]
            if at_zero == 0:
                new_values = map_chunked(func, self._values)
                keep = new_values != 0
                self._indices = self._indices[keep].copy()
                self._values = new_values[keep].copy()
            else:
                # func moves the implicit zeros; every index may now be non-zero
                dense = map_chunked(func, self.get_dense_values_si())
                idx = np.flatnonzero(dense)
                self._indices = idx
                self._values = dense[idx].copy()
        return self

    def _adopt(self, result: VectorData) -> None:
        idx, vals = result._nonzero()
        self._indices = np.array(idx, dtype=np.int64, copy=True)
        self._values = np.array(vals, dtype=self._values.dtype, copy=True)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _check_size(size: int) -> int:
    require(size, "size")
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise TypeError(f"size must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueRuntimeError(f"size must be >= 0, got {size}")
    return int(size)


def _checked_map_items(value_map: Mapping[int, float], size: int, dtype: np.dtype) -> tuple[np.ndarray, np.ndarray]:
    keys = []
    vals = []
    for k, v in value_map.items():
        if isinstance(k, bool) or not isinstance(k, Integral):
            raise TypeError(f"map keys must be ints, got {type(k).__name__}")
        if k < 0 or k >= size:
            raise VectorIndexError(f"key {k} in value_map out of range [0, {size})")
        if v is None:
            raise NullArgumentError(f"value_map[{k}] is None")
        keys.append(int(k))
        vals.append(v)
    return np.array(keys, dtype=np.int64), np.array(vals, dtype=dtype)


def _elementwise(op: ArrayFunction2, left: VectorData, right: VectorData, storage_type: StorageType) -> VectorData:
    """
    ``op`` applied index by index; the result is stored as ``storage_type``.

    Two sparse operands are merged over the union of their stored indices;
    outside that union both sides are zero, so the result there is
    ``op(0, 0)``. A sparse and a dense operand are combined by evaluating
    ``op`` against zero over the dense side and patching the stored indices.
    """
    left._check_sizes(right)
    dtype = np.result_type(left.dtype, right.dtype)
    n = left.size
    with np.errstate(all="ignore"):
        if isinstance(left, SparseVectorData) and isinstance(right, SparseVectorData):
            union = np.union1d(left._indices, right._indices)
            merged = np.asarray(op(left._values_at(union), right._values_at(union)), dtype=dtype)
            fill = op(np.zeros(1, dtype=dtype), np.zeros(1, dtype=dtype))[0]
            if fill == 0:
                result = SparseVectorData(merged, union, n)
                return result if storage_type is StorageType.SPARSE else result.to_dense()
            dense = np.full(n, fill, dtype=dtype)
            dense[union] = merged
        elif isinstance(left, SparseVectorData):
            rv = right.get_dense_values_si() if not isinstance(right, DenseVectorData) else right._values
            dense = np.asarray(op(np.zeros(n, dtype=dtype), rv), dtype=dtype)
            dense[left._indices] = op(left._values, rv[left._indices])
        elif isinstance(right, SparseVectorData):
            lv = left.get_dense_values_si() if not isinstance(left, DenseVectorData) else left._values
            dense = np.asarray(op(lv, np.zeros(n, dtype=dtype)), dtype=dtype)
            dense[right._indices] = op(lv[right._indices], right._values)
        else:
            dense = np.asarray(op(left.get_dense_values_si(), right.get_dense_values_si()), dtype=dtype)
    return _store(dense, storage_type)


__all__ = [
    "StorageType",
    "VectorData",
    "DenseVectorData",
    "SparseVectorData",
]
