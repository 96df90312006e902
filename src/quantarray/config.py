"""
quantarray.config
=================

Process-wide settings for quantarray, read once from the environment at import.

Exports:
    REL_TOL (float): relative tolerance for unit-scale and scalar comparisons.
    DEFAULT_DTYPE (numpy.dtype): element type used when no dtype is given.
    PARALLEL_THRESHOLD (int): array length from which element-wise functions
        are evaluated in chunks on a thread pool.
    MAX_WORKERS (int): size of that thread pool; 1 disables chunking.
"""
from __future__ import annotations

import os

import numpy as np

_SUPPORTED_DTYPES = ("float64", "float32")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {raw!r}")
    return value


def _env_dtype(name: str, default: str) -> np.dtype:
    raw = (os.environ.get(name) or default).strip().lower()
    if raw not in _SUPPORTED_DTYPES:
        raise ValueError(f"{name} must be one of {_SUPPORTED_DTYPES}, got {raw!r}")
    return np.dtype(raw)


REL_TOL: float = _env_float("QUANTARRAY_REL_TOL", 1e-12)
DEFAULT_DTYPE: np.dtype = _env_dtype("QUANTARRAY_DTYPE", "float64")
PARALLEL_THRESHOLD: int = _env_int("QUANTARRAY_PARALLEL_THRESHOLD", 100_000)
MAX_WORKERS: int = _env_int("QUANTARRAY_MAX_WORKERS", os.cpu_count() or 1)


def resolve_dtype(dtype: "np.dtype | str | type | None") -> np.dtype:
    """Return a supported numpy dtype, falling back to DEFAULT_DTYPE."""
    if dtype is None:
        return DEFAULT_DTYPE
    dt = np.dtype(dtype)
    if dt.name not in _SUPPORTED_DTYPES:
        raise ValueError(f"dtype must be one of {_SUPPORTED_DTYPES}, got {dt.name!r}")
    return dt
