# quantarray.core.dimensions

from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Any, Iterable, Tuple, TypeAlias, Union

from quantarray.core.utils import IrrationalExponentError, _sup, rationalize, simplify_fraction

# --- Public typing -----------------------------------------------------------
Dim: TypeAlias = "SIDimensions"
DimTuple = Tuple[Fraction | int, Fraction | int, Fraction | int, Fraction | int, Fraction | int, Fraction | int, Fraction | int]
DimLike = Union["SIDimensions", DimTuple, Iterable[int | Fraction]]

# Exponent order inside the tuple (L, M, T, I, Θ, N, J)
_AXIS_NAMES = ("L", "M", "T", "I", "Θ", "N", "J")
_AXIS_SYMBOLS = ("m", "kg", "s", "A", "K", "mol", "cd")
# Canonical print order: kg, m, s, A, K, mol, cd
_PRINT_ORDER = (1, 0, 2, 3, 4, 5, 6)


class DimOp(Enum):
    MULTIPLY = "multiply"
    DIVIDE = "divide"


# --- Core object -------------------------------------------------------------

class SIDimensions(tuple):
    """
    Immutable 7-length vector of rational exponents for the SI base dimensions.

    Tuple subclass => hashable, comparable, usable as dict keys. Multiplying two
    SIDimensions adds exponents, dividing subtracts them; the zero vector is
    "dimensionless".
    """

    __slots__ = ()

    def __new__(cls, data: DimLike = (0, 0, 0, 0, 0, 0, 0)) -> "SIDimensions":
        if isinstance(data, SIDimensions):
            return tuple.__new__(cls, data)

        t = tuple(simplify_fraction(x) for x in data)
        if len(t) != 7:
            raise ValueError("SIDimensions must have length 7 (L, M, T, I, Θ, N, J).")
        return tuple.__new__(cls, t)

    @classmethod
    def parse(cls, text: str) -> "SIDimensions":
        """Parse a signature such as ``"kg m s-2"`` or ``"kgm2/s2"``."""
        from quantarray.units.parser import parse_si_dimensions

        return parse_si_dimensions(text)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "SIDimensions":  # type: ignore[override]
        o = SIDimensions(other)
        return SIDimensions(x + y for x, y in zip(self, o, strict=True))

    def __truediv__(self, other: DimLike) -> "SIDimensions":
        o = SIDimensions(other)
        return SIDimensions(x - y for x, y in zip(self, o, strict=True))

    def __pow__(self, n: int | float | Fraction, modulo: Any | None = None) -> "SIDimensions":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for SIDimensions.")

        if isinstance(n, bool) or not isinstance(n, (int, float, Fraction)):
            raise TypeError(f"Exponent must be int, float, or Fraction, got {type(n).__name__}")

        if isinstance(n, float):
            n = rationalize(n, as_fraction=True)  # raises if irrational
        elif isinstance(n, int):
            n = Fraction(n, 1)

        return SIDimensions([e * n for e in self])

    def __rtruediv__(self, other: DimLike) -> "SIDimensions":
        """Handles (tuple / SIDimensions) by calculating (other / self)."""
        return SIDimensions(other) / self

    def __rmul__(self, other: Any) -> "SIDimensions":
        """Prevent (int * SIDimensions) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "SIDimensions":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "SIDimensions":
        return NotImplemented

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return all(x == 0 for x in self)

    def as_tuple(self) -> DimTuple:
        return tuple(self)

    def to_string(self, divided: bool = True, separator: str = "", power_prefix: str = "") -> str:
        """
        Canonical textual form, e.g. ``kgm2/s2`` (divided) or ``kgm2s-2``.

        Symbols appear in the order kg, m, s, A, K, mol, cd. Rational exponents
        are written as ``(p/q)``. The output parses back to an equal value.
        """

        def fmt(i: int, e: Fraction | int) -> str:
            sym = _AXIS_SYMBOLS[i]
            if e == 1:
                return sym
            if isinstance(e, Fraction):
                return f"{sym}{power_prefix}({e.numerator}/{e.denominator})"
            return f"{sym}{power_prefix}{e}"

        if not divided:
            parts = [fmt(i, self[i]) for i in _PRINT_ORDER if self[i] != 0]
            return separator.join(parts) if parts else "1"

        num = [fmt(i, self[i]) for i in _PRINT_ORDER if self[i] > 0]
        den = [fmt(i, -self[i]) for i in _PRINT_ORDER if self[i] < 0]
        numerator = separator.join(num) if num else "1"
        if not den:
            return numerator
        return f"{numerator}/{separator.join(den)}"

    def pretty(self) -> str:
        """'kg·m²/s²' style rendering for display."""
        num, den = [], []
        for i in _PRINT_ORDER:
            e = self[i]
            if e > 0:
                num.append(_AXIS_SYMBOLS[i] + _sup(e))
            elif e < 0:
                den.append(_AXIS_SYMBOLS[i] + _sup(-e))
        numerator = "·".join(num) if num else "1"
        return f"{numerator}/{'·'.join(den)}" if den else numerator

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        parts = ""
        for n, v in zip(_AXIS_NAMES, self, strict=True):
            if v != 0:
                exp = v
                if isinstance(v, Fraction):
                    exp = f"({v.numerator}/{v.denominator})"
                parts += f"[{n}^{exp}]"
        return f"SIDimensions({parts or '1'})"


def combine(a: DimLike, b: DimLike, op: DimOp) -> SIDimensions:
    """Exponent-wise add (MULTIPLY) or subtract (DIVIDE)."""
    if op is DimOp.MULTIPLY:
        return SIDimensions(a) * b
    if op is DimOp.DIVIDE:
        return SIDimensions(a) / b
    raise ValueError(f"Unknown dimension operation: {op!r}")


def dim_mul(a: DimLike, b: DimLike) -> SIDimensions:
    return SIDimensions(a) * b


def dim_div(a: DimLike, b: DimLike) -> SIDimensions:
    return SIDimensions(a) / b


def dim_pow(a: DimLike, n: int | float | Fraction) -> SIDimensions:
    return SIDimensions(a) ** n


# --- Public constants --------------------------------------------------------

DIM_0: Dim       = SIDimensions((0, 0, 0, 0, 0, 0, 0))
LENGTH: Dim      = SIDimensions((1, 0, 0, 0, 0, 0, 0))
MASS: Dim        = SIDimensions((0, 1, 0, 0, 0, 0, 0))
TIME: Dim        = SIDimensions((0, 0, 1, 0, 0, 0, 0))
CURRENT: Dim     = SIDimensions((0, 0, 0, 1, 0, 0, 0))
TEMPERATURE: Dim = SIDimensions((0, 0, 0, 0, 1, 0, 0))
AMOUNT: Dim      = SIDimensions((0, 0, 0, 0, 0, 1, 0))
LUMINOUS: Dim    = SIDimensions((0, 0, 0, 0, 0, 0, 1))

AXIS_SYMBOLS = _AXIS_SYMBOLS

__all__ = [
    "SIDimensions",
    "DimOp",
    "IrrationalExponentError",
    "combine",
    "dim_mul",
    "dim_div",
    "dim_pow",
    "DIM_0",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOUS",
    "AXIS_SYMBOLS",
]
