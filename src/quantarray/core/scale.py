"""
quantarray.core.scale
=====================

Conversions between a unit's display representation and the SI (standard)
representation of its quantity.

Every scale works on Python floats as well as numpy arrays. Linear scales
expose ``factor``/``offset`` and report ``is_linear``; code that converts in
bulk with factor/offset arithmetic must check ``is_linear`` first, because
grade and function scales cannot be inverted that way.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import numpy as np

from quantarray import config

ArrayLike = "float | np.ndarray"


@runtime_checkable
class Scale(Protocol):
    @property
    def is_linear(self) -> bool: ...

    @property
    def is_base_si(self) -> bool: ...

    def to_standard(self, x): ...
    def from_standard(self, x): ...


@dataclass(frozen=True, slots=True)
class LinearScale:
    """``si = x * factor + offset``; offset is 0 for purely multiplicative units."""

    factor: float
    offset: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.factor) and self.factor != 0.0):
            raise ValueError("factor must be a finite, non-zero number")
        if not math.isfinite(self.offset):
            raise ValueError("offset must be finite")

    @property
    def is_linear(self) -> bool:
        return True

    @property
    def is_base_si(self) -> bool:
        return self.factor == 1.0 and self.offset == 0.0

    def to_standard(self, x):
        if self.is_base_si:
            return x
        return x * self.factor + self.offset

    def from_standard(self, x):
        if self.is_base_si:
            return x
        return (x - self.offset) / self.factor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearScale):
            return NotImplemented
        return (
            math.isclose(self.factor, other.factor, rel_tol=config.REL_TOL, abs_tol=0.0)
            and math.isclose(self.offset, other.offset, rel_tol=config.REL_TOL, abs_tol=1e-12)
        )

    def __hash__(self) -> int:
        # equality is tolerance based, so only the type can take part in the hash
        return hash(LinearScale)


def OffsetLinearScale(factor: float, offset: float) -> LinearScale:
    """Linear scale with a zero-point shift (e.g. Celsius → Kelvin)."""
    return LinearScale(factor, offset)


IDENTITY_SCALE = LinearScale(1.0)


@dataclass(frozen=True, slots=True)
class GradeScale:
    """
    Slope scale: a grade ``x`` (rise/run in display units) maps to the angle
    ``atan(x * conversion_factor)`` in radians. ``conversion_factor`` is 0.01
    for percent.
    """

    conversion_factor: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.conversion_factor) and self.conversion_factor > 0):
            raise ValueError("conversion_factor must be a positive, finite number")

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def is_base_si(self) -> bool:
        return False

    def to_standard(self, x):
        result = np.arctan(np.multiply(x, self.conversion_factor))
        return float(result) if np.ndim(result) == 0 else result

    def from_standard(self, x):
        result = np.tan(x) / self.conversion_factor
        return float(result) if np.ndim(result) == 0 else result


class FunctionScale:
    """Opaque monotonic scale defined by an explicit function pair."""

    __slots__ = ("_to", "_from", "name")

    def __init__(self, to_standard: Callable, from_standard: Callable, name: str = "function") -> None:
        if to_standard is None or from_standard is None:
            raise ValueError("FunctionScale needs both to_standard and from_standard")
        self._to = to_standard
        self._from = from_standard
        self.name = name

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def is_base_si(self) -> bool:
        return False

    def to_standard(self, x):
        return self._to(x)

    def from_standard(self, x):
        return self._from(x)

    def __repr__(self) -> str:
        return f"FunctionScale({self.name!r})"


__all__ = [
    "Scale",
    "LinearScale",
    "OffsetLinearScale",
    "IDENTITY_SCALE",
    "GradeScale",
    "FunctionScale",
]
