# tests/conftest.py
import pytest

import quantarray.units.registry as regmod
from quantarray.core.vector_data import StorageType


@pytest.fixture(scope="session")
def ureg():
    return regmod.DEFAULT_REGISTRY


@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped UnitsRegistry for isolation per test."""
    return regmod._bootstrap_default_registry()


@pytest.fixture()
def patched_default(monkeypatch, reg):
    """Temporarily replace DEFAULT_REGISTRY with an isolated instance."""
    monkeypatch.setattr(regmod, "DEFAULT_REGISTRY", reg)
    yield reg


@pytest.fixture(params=[StorageType.DENSE, StorageType.SPARSE], ids=["dense", "sparse"])
def storage(request):
    return request.param
