"""
quantarray.core.errors
======================

Exception types raised by the quantity core. Every class also derives from
the built-in exception a caller would naturally catch (TypeError, ValueError,
IndexError), so ``except ValueError`` keeps working around quantarray calls.
"""


class QuantArrayError(Exception):
    """Root of all quantarray errors."""


class NullArgumentError(QuantArrayError, TypeError):
    """A required argument was None."""


class ValueRuntimeError(QuantArrayError, ValueError):
    """A value-level contract was violated (bad size, undefined operation, ...)."""


class VectorIndexError(ValueRuntimeError, IndexError):
    """An index fell outside [0, size)."""


class SizeMismatchError(ValueRuntimeError):
    """Two operands of an element-wise operation differ in size."""


class ImmutableValueError(ValueRuntimeError):
    """A mutating call was made on an immutable value."""


class UnitRuntimeError(QuantArrayError, TypeError):
    """Dimensions of a unit or quantity kind do not match."""


def require(value, name: str):
    """Return ``value`` or raise NullArgumentError naming the argument."""
    if value is None:
        raise NullArgumentError(f"{name} cannot be None")
    return value


__all__ = [
    "QuantArrayError",
    "NullArgumentError",
    "ValueRuntimeError",
    "VectorIndexError",
    "SizeMismatchError",
    "ImmutableValueError",
    "UnitRuntimeError",
    "require",
]
