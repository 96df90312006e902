import numpy as np
import pytest

from quantarray.core.errors import (
    ImmutableValueError,
    SizeMismatchError,
    UnitRuntimeError,
    ValueRuntimeError,
    VectorIndexError,
)
from quantarray.core.matrix import QuantityMatrix, SIMatrix
from quantarray.core.scalar import Scalar
from quantarray.core.vector import QuantityVector
from quantarray.core.vector_data import StorageType
from quantarray.units import quantities as q

GRID = [[1.0, 0.0, 2.0], [0.0, 3.0, 0.0]]


@pytest.fixture()
def km(ureg):
    return ureg.get("km")


def test_instantiate_row_major(km, storage):
    mat = QuantityMatrix.instantiate(GRID, km, storage)
    assert mat.shape == (2, 3)
    assert mat.rows == 2 and mat.cols == 3
    assert mat.size == 6
    assert mat.storage_type is storage
    assert mat.get_values_si().tolist() == [[1000.0, 0.0, 2000.0], [0.0, 3000.0, 0.0]]
    assert mat.get_values_in_unit().tolist() == GRID
    assert mat.cardinality() == 3
    assert not mat.is_square


def test_instantiate_from_numpy_and_scalars(km, ureg):
    mat = QuantityMatrix.instantiate_si(np.array([[1.0, 2.0], [3.0, 4.0]]), km)
    assert mat.get_si(1, 0) == 3.0
    m = ureg.get("m")
    from_scalars = QuantityMatrix.instantiate([[Scalar(1.0, km), Scalar(5.0, m)]], km)
    assert from_scalars.get_values_si().tolist() == [[1000.0, 5.0]]
    with pytest.raises(UnitRuntimeError):
        QuantityMatrix.instantiate([[Scalar(1.0, ureg.get("s"))]], km)


def test_ragged_rows_are_rejected(km):
    with pytest.raises(ValueRuntimeError):
        QuantityMatrix.instantiate([[1.0, 2.0], [3.0]], km)
    with pytest.raises(ValueRuntimeError):
        QuantityMatrix.instantiate(np.ones(3), km)


def test_access_and_bounds(km):
    mat = QuantityMatrix.instantiate(GRID, km)
    assert mat.get(0, 2).value == 2.0
    assert mat.get_in_unit(1, 1) == 3.0
    with pytest.raises(VectorIndexError):
        mat.get_si(2, 0)
    with pytest.raises(VectorIndexError):
        mat.get_si(0, 3)
    with pytest.raises(ImmutableValueError):
        mat.set_si(0, 0, 1.0)


def test_set_on_mutable(km, ureg):
    mat = QuantityMatrix.instantiate(GRID, km).mutable()
    mat.set(1, 2, Scalar(4.0, km))
    mat.set_in_unit(0, 0, 10.0, ureg.get("m"))
    assert mat.get_values_si().tolist() == [[10.0, 0.0, 2000.0], [0.0, 3000.0, 4000.0]]
    with pytest.raises(UnitRuntimeError):
        mat.set(0, 0, Scalar(1.0, ureg.get("s")))


@pytest.mark.regression(reason="matrix scalars were checked on dimensions only")
def test_scalars_and_set_check_kind(ureg):
    delta_degc = ureg.get("Δ°C")
    warm = Scalar(20.0, ureg.get("°C"))
    with pytest.raises(UnitRuntimeError):
        QuantityMatrix.instantiate([[warm]], delta_degc)
    diffs = QuantityMatrix.instantiate([[1.0, 2.0]], delta_degc).mutable()
    with pytest.raises(UnitRuntimeError):
        diffs.set(0, 1, warm)
    energy = QuantityMatrix.instantiate([[1.0]], ureg.get("J")).mutable()
    with pytest.raises(UnitRuntimeError):
        energy.set(0, 0, Scalar(1.0, ureg.get("N.m")))
    assert diffs.get_values_in_unit().tolist() == [[1.0, 2.0]]
    assert energy.get_values_si().tolist() == [[1.0]]


def test_rows_columns_and_diagonal(km, storage):
    mat = QuantityMatrix.instantiate(GRID, km, storage)
    row = mat.get_row(1)
    assert isinstance(row, QuantityVector)
    assert row.unit is km
    assert row.get_values_in_unit().tolist() == [0.0, 3.0, 0.0]
    assert mat.get_column(2).get_values_in_unit().tolist() == [2.0, 0.0]
    assert [r.get_values_in_unit().tolist() for r in mat] == GRID
    with pytest.raises(ValueRuntimeError):
        mat.get_diagonal()
    square = QuantityMatrix.instantiate([[1.0, 2.0], [3.0, 4.0]], km, storage)
    assert square.get_diagonal().get_values_in_unit().tolist() == [1.0, 4.0]


def test_transpose(km):
    t = QuantityMatrix.instantiate(GRID, km).transpose()
    assert t.shape == (3, 2)
    assert t.get_values_in_unit().tolist() == [[1.0, 0.0], [0.0, 3.0], [2.0, 0.0]]


def test_determinant(ureg):
    mat = QuantityMatrix.instantiate([[2.0, 1.0], [1.0, 3.0]], ureg.get("m"))
    assert mat.determinant_si() == pytest.approx(5.0)


def test_algebra(km, ureg):
    a = QuantityMatrix.instantiate(GRID, km)
    total = a + a
    assert type(total) is QuantityMatrix
    assert total.get_values_in_unit().tolist() == [[2.0, 0.0, 4.0], [0.0, 6.0, 0.0]]
    with pytest.raises(SizeMismatchError):
        a + a.transpose()

    area = a * a
    assert isinstance(area, SIMatrix)
    assert area.shape == (2, 3)
    assert area.as_quantity("Area").get_si(1, 1) == 9e6
    with pytest.raises(UnitRuntimeError):
        area.as_quantity("Volume")


def test_absolute_matrix(ureg):
    pos = QuantityMatrix.instantiate([[1.0, 2.0]], ureg.get("m", "Position"))
    diff = pos - pos
    assert diff.kind is q.LENGTH
    assert diff.get_values_si().tolist() == [[0.0, 0.0]]


def test_si_matrix_of(storage):
    mat = SIMatrix.of([[1.0, 2.0], [0.0, 4.0]], "m2", storage)
    assert mat.dimensions == q.AREA.dimensions
    assert isinstance(mat.get_row(0), QuantityVector)
    assert mat.as_unit(mat.as_quantity("Area").unit).kind is q.AREA


def test_to_string(km):
    mat = QuantityMatrix.instantiate([[1.0, 2.0], [3.0, 4.0]], km, StorageType.SPARSE)
    assert str(mat) == "[[1, 2],\n [3, 4]] km"
    assert mat.to_string(verbose=True).startswith("Immutable Rel Sparse Length 2x2\n")


@pytest.mark.regression(reason="rows of a matrix without columns were not bounds-checked")
def test_row_and_column_bounds_without_columns(km):
    mat = QuantityMatrix.instantiate([[], []], km)
    assert mat.shape == (2, 0)
    assert len(mat.get_row(1)) == 0
    with pytest.raises(VectorIndexError):
        mat.get_row(2)
    with pytest.raises(VectorIndexError):
        mat.get_row(999)
    with pytest.raises(VectorIndexError):
        mat.get_column(0)


class LengthMatrix(QuantityMatrix):
    __slots__ = ()


def test_results_use_the_matrix_class_registered_for_their_kind(patched_default):
    reg = patched_default
    pos_m = reg.get("m", "Position")
    a = QuantityMatrix.instantiate([[5.0, 7.0]], pos_m)
    assert type(a - a) is QuantityMatrix

    reg.register_matrix_class("Length", LengthMatrix)
    diff = a - a
    assert type(diff) is LengthMatrix
    assert diff.kind is q.LENGTH
    assert type(SIMatrix.of([[1.0]], "m").as_quantity("Length")) is LengthMatrix
    assert type(SIMatrix.of([[1.0]], "m").as_quantity("Position")) is QuantityMatrix
