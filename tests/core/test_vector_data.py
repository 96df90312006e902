import math

import numpy as np
import pytest

from quantarray import config
from quantarray.core.errors import (
    ImmutableValueError,
    NullArgumentError,
    SizeMismatchError,
    ValueRuntimeError,
    VectorIndexError,
)
from quantarray.core.scale import IDENTITY_SCALE, LinearScale, OffsetLinearScale
from quantarray.core.vector_data import (
    DenseVectorData,
    SparseVectorData,
    StorageType,
    VectorData,
)

RAW = [0.0, 123.456, 0.0, 0.0, 234.567, 0.0]
KELVIN_SCENARIO = [0.0, 123.456, 0.0, -273.15, -273.15, 0.0, -273.15, 234.567, 0.0, 0.0]
KM = LinearScale(1000.0)
CELSIUS = OffsetLinearScale(1.0, 273.15)


def make(values, storage=StorageType.DENSE, scale=IDENTITY_SCALE, **kw):
    return VectorData.instantiate(values, scale, storage, **kw)


# -------------------------------------------------------------------
# Instantiation & storage
# -------------------------------------------------------------------
def test_instantiate_picks_storage_class(storage):
    data = make(RAW, storage)
    expected = DenseVectorData if storage is StorageType.DENSE else SparseVectorData
    assert isinstance(data, expected)
    assert data.storage_type is storage
    assert data.size == len(RAW) == len(data)
    assert not data.is_mutable


def test_instantiate_converts_through_scale(storage):
    data = make([1.0, 0.0, 2.5], storage, KM)
    np.testing.assert_array_equal(data.get_dense_values_si(), [1000.0, 0.0, 2500.0])


@pytest.mark.parametrize("values", [RAW, [], [1.0], [-0.5, 0.0, 1e300]])
def test_dense_sparse_round_trip(values):
    original = make(values)
    back = original.to_sparse().to_dense()
    np.testing.assert_array_equal(back.get_dense_values_si(), original.get_dense_values_si())
    assert back == original


def test_to_storage_returns_self_when_already_there(storage):
    data = make(RAW, storage)
    assert data.to_storage(storage) is data


def test_instantiate_rejects_none_entries():
    with pytest.raises(NullArgumentError):
        make([1.0, None])
    with pytest.raises(NullArgumentError):
        VectorData.instantiate(None, IDENTITY_SCALE, StorageType.DENSE)
    with pytest.raises(NullArgumentError):
        VectorData.instantiate([1.0], IDENTITY_SCALE, None)


def test_instantiate_rejects_two_dimensional_input():
    with pytest.raises(ValueRuntimeError):
        make(np.ones((2, 2)))


def test_instantiate_copies_caller_array():
    arr = np.array([1.0, 2.0])
    data = make(arr)
    arr[0] = 99.0
    assert data.get_si(0) == 1.0


# -------------------------------------------------------------------
# Cardinality & z_sum
# -------------------------------------------------------------------
def test_cardinality_counts_non_zero_si_values(storage):
    assert make(RAW, storage).cardinality() == 2
    assert make(RAW, storage, KM).cardinality() == 2


def test_cardinality_kelvin_scenario(reg, storage):
    kelvin = reg.get("K")
    celsius = reg.get("°C")
    in_kelvin = make(KELVIN_SCENARIO, storage, kelvin.scale)
    in_celsius = make(KELVIN_SCENARIO, storage, celsius.scale)
    # every non-zero Kelvin value counts; 0 K is a true zero
    assert in_kelvin.cardinality() == 5
    # -273.15 °C is 0 K, while 0 °C is 273.15 K
    assert in_celsius.cardinality() == 7
    assert in_kelvin.cardinality() != in_celsius.cardinality()


def test_z_sum(storage):
    data = make(RAW, storage, KM)
    assert data.z_sum() == pytest.approx((123.456 + 234.567) * 1000.0)


# -------------------------------------------------------------------
# Mutability
# -------------------------------------------------------------------
@pytest.mark.parametrize(
    "attempt",
    [
        lambda d: d.ceil(),
        lambda d: d.set_si(1, 5.0),
        lambda d: d.assign(np.sqrt),
        lambda d: d.increment_by(1.0),
        lambda d: d.divide_by(2.0),
    ],
    ids=["ceil", "set_si", "assign", "increment_by", "divide_by"],
)
def test_immutable_rejects_changes_and_keeps_values(storage, attempt):
    data = make(RAW, storage)
    before = data.get_dense_values_si()
    with pytest.raises(ImmutableValueError):
        attempt(data)
    np.testing.assert_array_equal(data.get_dense_values_si(), before)


def test_immutable_error_is_a_value_error():
    with pytest.raises(ValueError):
        make(RAW).neg()


def test_mutable_always_copies(storage):
    data = make(RAW, storage)
    m1 = data.mutable()
    m2 = m1.mutable()
    assert m1.is_mutable and m2.is_mutable
    m1.set_si(0, 7.0)
    assert data.get_si(0) == 0.0
    assert m2.get_si(0) == 0.0


def test_immutable_returns_self_or_frozen_copy(storage):
    data = make(RAW, storage)
    assert data.immutable() is data
    m = data.mutable()
    frozen = m.immutable()
    assert not frozen.is_mutable
    m.set_si(1, -1.0)
    assert frozen.get_si(1) == 123.456


# -------------------------------------------------------------------
# Access
# -------------------------------------------------------------------
@pytest.mark.parametrize("index", [-1, 6, 100])
def test_index_out_of_range(storage, index):
    data = make(RAW, storage)
    with pytest.raises(VectorIndexError):
        data.get_si(index)
    with pytest.raises(IndexError):
        data.mutable().set_si(index, 1.0)


def test_index_must_be_int(storage):
    with pytest.raises(TypeError):
        make(RAW, storage).get_si(1.0)


def test_iter_si_yields_every_index(storage):
    assert list(make(RAW, storage).iter_si()) == RAW


def test_sparse_set_si_keeps_only_non_zeros():
    data = make(RAW, StorageType.SPARSE).mutable()
    data.set_si(1, 0.0)
    data.set_si(3, 5.0)
    assert data.cardinality() == 2
    assert list(data.iter_si()) == [0.0, 0.0, 0.0, 5.0, 234.567, 0.0]


def test_take(storage):
    data = make(RAW, storage)
    taken = data.take(np.array([4, 1, 0]))
    assert taken.storage_type is storage
    assert list(taken.iter_si()) == [234.567, 123.456, 0.0]


def test_sparse_constructor_validates_indices():
    with pytest.raises(ValueRuntimeError):
        SparseVectorData(np.array([1.0, 2.0]), np.array([3, 1]), 5)
    with pytest.raises(VectorIndexError):
        SparseVectorData(np.array([1.0]), np.array([5]), 5)
    with pytest.raises(ValueRuntimeError):
        SparseVectorData(np.array([1.0]), np.array([1, 2]), 5)


def test_sparse_constructor_drops_explicit_zeros():
    data = SparseVectorData(np.array([0.0, 2.0]), np.array([0, 3]), 4)
    assert data.cardinality() == 1
    assert data.get_dense_values_si().tolist() == [0.0, 0.0, 0.0, 2.0]


# -------------------------------------------------------------------
# Map instantiation
# -------------------------------------------------------------------
def test_map_fills_missing_indices_with_zero(storage):
    data = VectorData.instantiate_map({3: 4.0, 1: 2.0}, 5, IDENTITY_SCALE, storage)
    assert data.storage_type is storage
    assert list(data.iter_si()) == [0.0, 2.0, 0.0, 4.0, 0.0]


def test_map_with_offset_scale_fills_display_zero():
    data = VectorData.instantiate_map({0: 10.0}, 3, CELSIUS, StorageType.SPARSE)
    np.testing.assert_allclose(data.get_dense_values_si(), [283.15, 273.15, 273.15])


def test_map_key_checks():
    with pytest.raises(VectorIndexError):
        VectorData.instantiate_map({5: 1.0}, 5, IDENTITY_SCALE, StorageType.DENSE)
    with pytest.raises(TypeError):
        VectorData.instantiate_map({"a": 1.0}, 5, IDENTITY_SCALE, StorageType.DENSE)
    with pytest.raises(NullArgumentError):
        VectorData.instantiate_map({0: None}, 5, IDENTITY_SCALE, StorageType.DENSE)
    with pytest.raises(NullArgumentError):
        VectorData.instantiate_map({0: 1.0}, None, IDENTITY_SCALE, StorageType.DENSE)


# -------------------------------------------------------------------
# Arithmetic
# -------------------------------------------------------------------
@pytest.mark.parametrize(
    "left,right,op,expected",
    [
        (StorageType.DENSE, StorageType.DENSE, "plus", StorageType.DENSE),
        (StorageType.DENSE, StorageType.SPARSE, "plus", StorageType.DENSE),
        (StorageType.SPARSE, StorageType.SPARSE, "plus", StorageType.SPARSE),
        (StorageType.SPARSE, StorageType.DENSE, "minus", StorageType.DENSE),
        (StorageType.SPARSE, StorageType.SPARSE, "minus", StorageType.SPARSE),
        (StorageType.DENSE, StorageType.SPARSE, "times", StorageType.SPARSE),
        (StorageType.SPARSE, StorageType.DENSE, "times", StorageType.SPARSE),
        (StorageType.DENSE, StorageType.DENSE, "times", StorageType.DENSE),
        (StorageType.SPARSE, StorageType.DENSE, "divide", StorageType.SPARSE),
        (StorageType.DENSE, StorageType.SPARSE, "divide", StorageType.DENSE),
    ],
)
def test_result_storage_type(left, right, op, expected):
    a = make([1.0, 0.0, 3.0, 0.0], left)
    b = make([2.0, 0.0, 0.0, 4.0], right)
    result = getattr(a, op)(b)
    assert result.storage_type is expected
    assert not result.is_mutable


@pytest.mark.parametrize("left", [StorageType.DENSE, StorageType.SPARSE])
@pytest.mark.parametrize("right", [StorageType.DENSE, StorageType.SPARSE])
def test_element_wise_values_do_not_depend_on_storage(left, right):
    a = make([1.0, 0.0, 3.0, 0.0, -2.0], left)
    b = make([2.0, 0.0, 0.0, 4.0, -2.0], right)
    assert list(a.plus(b).iter_si()) == [3.0, 0.0, 3.0, 4.0, -4.0]
    assert list(a.minus(b).iter_si()) == [-1.0, 0.0, 3.0, -4.0, 0.0]
    assert list(a.times(b).iter_si()) == [2.0, 0.0, 0.0, 0.0, 4.0]


def test_size_mismatch():
    with pytest.raises(SizeMismatchError):
        make([1.0, 2.0]).plus(make([1.0]))
    with pytest.raises(SizeMismatchError):
        make([1.0, 2.0]).mutable().increment_by(make([1.0], StorageType.SPARSE))


def test_division_follows_ieee(storage):
    data = make([1.0, -1.0, 0.0], storage).mutable()
    data.divide_by(0.0)
    values = data.get_dense_values_si()
    assert values[0] == math.inf
    assert values[1] == -math.inf
    assert math.isnan(values[2])


def test_sparse_divide_by_sparse_fills_nan():
    a = make([0.0, 2.0], StorageType.SPARSE)
    b = make([0.0, 4.0], StorageType.SPARSE)
    values = a.divide(b).get_dense_values_si()
    assert math.isnan(values[0])
    assert values[1] == 0.5


def test_in_place_keeps_storage_type(storage):
    data = make([1.0, 0.0, 3.0], storage).mutable()
    data.increment_by(make([0.0, 0.0, 1.0], StorageType.DENSE))
    data.multiply_by(2.0)
    assert data.storage_type is storage
    assert list(data.iter_si()) == [2.0, 0.0, 8.0]


def test_sparse_assign_that_moves_zero():
    data = make([0.0, 2.0, 0.0], StorageType.SPARSE).mutable()
    data.assign(lambda v: v + 1.0)
    assert data.cardinality() == 3
    assert list(data.iter_si()) == [1.0, 3.0, 1.0]


@pytest.mark.parametrize(
    "method,expected",
    [
        ("abs", [1.5, 0.0, 2.5]),
        ("ceil", [-1.0, 0.0, 3.0]),
        ("floor", [-2.0, 0.0, 2.0]),
        ("neg", [1.5, 0.0, -2.5]),
        ("rint", [-2.0, 0.0, 2.0]),
    ],
)
def test_unary_in_place(storage, method, expected):
    data = make([-1.5, 0.0, 2.5], storage).mutable()
    assert getattr(data, method)() is data
    assert list(data.iter_si()) == expected


def test_scaled_and_divided_leave_original_alone(storage):
    data = make([1.0, 0.0, 4.0], storage)
    assert list(data.scaled(3.0).iter_si()) == [3.0, 0.0, 12.0]
    assert list(data.divided(2.0).iter_si()) == [0.5, 0.0, 2.0]
    assert list(data.iter_si()) == [1.0, 0.0, 4.0]


# -------------------------------------------------------------------
# Equality, hashing, dtype
# -------------------------------------------------------------------
def test_equality_ignores_storage_type():
    dense = make(RAW, StorageType.DENSE)
    sparse = make(RAW, StorageType.SPARSE)
    assert dense == sparse
    assert hash(dense) == hash(sparse)
    assert dense != make(RAW[:-1])
    assert dense != make([1.0] + RAW[1:])


def test_float32_storage(storage):
    data = make(RAW, storage, dtype="float32")
    assert data.dtype == np.float32
    assert data.get_si(1) == pytest.approx(123.456, rel=1e-6)
    mixed = data.plus(make(RAW, storage))
    assert mixed.dtype == np.float64


def test_unsupported_dtype():
    with pytest.raises(ValueError):
        make(RAW, dtype="int32")


def test_chunked_evaluation_matches_single_pass(monkeypatch, storage):
    values = np.linspace(-5.0, 5.0, 101)
    expected = make(values, storage, KM).get_dense_values_si()
    monkeypatch.setattr(config, "PARALLEL_THRESHOLD", 10)
    monkeypatch.setattr(config, "MAX_WORKERS", 4)
    np.testing.assert_array_equal(make(values, storage, KM).get_dense_values_si(), expected)
