"""
quantarray.units.parser
=======================

Parser for textual SI-dimension signatures such as ``"kg m s-2"``,
``"kgm2/s2"``, ``"kg.m/s^2"`` or ``"1/s"``.

Grammar::

    expr     := group ['/' group]
    group    := term (sep? term)*
    sep      := ' ' | '*' | '.' | '·'
    term     := factor [exponent]
    factor   := SYMBOL | '1' | '(' expr ')'
    exponent := ['^' | '**'] (signed_int | '(' signed_int ['/' int] ')')
    SYMBOL   := 'kg' | 'm' | 's' | 'A' | 'K' | 'mol' | 'cd'

Everything after the single '/' belongs to the denominator, so
``"kg/s2A"`` means kg / (s²·A).
"""
from __future__ import annotations

from fractions import Fraction
from functools import lru_cache

from quantarray.core.dimensions import AXIS_SYMBOLS, DIM_0, SIDimensions

# Longest symbols first so that "mol" wins over "m"
_SYMBOLS_DESC = tuple(sorted(AXIS_SYMBOLS, key=len, reverse=True))
_SEPARATORS = " \t*.·"


def _unit_vector(symbol: str) -> SIDimensions:
    exps = [0] * 7
    exps[AXIS_SYMBOLS.index(symbol)] = 1
    return SIDimensions(exps)


class _DimensionParser:
    def __init__(self, text: str):
        self.s = text
        self.n = len(text)
        self.i = 0

    def parse(self) -> SIDimensions:
        dims = self._parse_expr()
        if self.i != self.n:
            raise ValueError(f"Unexpected trailing input at {self.i}: {self.s[self.i:self.i+10]!r}")
        return dims

    # expr := group ['/' group]
    def _parse_expr(self) -> SIDimensions:
        numerator = self._parse_group()
        self._skip_sep()
        if self._peek("/"):
            self.i += 1
            denominator = self._parse_group()
            self._skip_sep()
            if self._peek("/"):
                raise ValueError(f"Only one '/' is allowed, found a second at {self.i}")
            return numerator / denominator
        return numerator

    # group := term (sep? term)*
    def _parse_group(self) -> SIDimensions:
        self._skip_sep()
        result = self._parse_term()
        while True:
            self._skip_sep()
            if self.i >= self.n or self.s[self.i] in "/)":
                return result
            result = result * self._parse_term()

    # term := factor [exponent]
    def _parse_term(self) -> SIDimensions:
        if self._peek("("):
            self.i += 1
            base = self._parse_expr()
            self._skip_sep()
            self._eat(")")
            exp = self._parse_exponent()
            return base if exp is None else base ** exp

        if self._peek("1"):
            self.i += 1
            return DIM_0

        symbol = self._parse_symbol()
        if symbol is None:
            ch = self.s[self.i:self.i+1]
            raise ValueError(f"Expected SI base symbol or '(' at {self.i}, got {ch!r}")
        # a bare "(p/q)" directly after a symbol is a rational exponent
        exp = self._parse_exponent_value() if self._peek("(") else self._parse_exponent()
        base = _unit_vector(symbol)
        return base if exp is None else base ** exp

    # ---- token helpers ----
    def _parse_symbol(self) -> str | None:
        for sym in _SYMBOLS_DESC:
            if self.s.startswith(sym, self.i):
                self.i += len(sym)
                return sym
        return None

    def _parse_exponent(self) -> int | Fraction | None:
        if self.s.startswith("**", self.i):
            self.i += 2
            return self._parse_exponent_value()
        if self._peek("^"):
            self.i += 1
            return self._parse_exponent_value()
        if self.i < self.n and (self.s[self.i].isdigit() or self.s[self.i] in "+-"):
            return self._parse_exponent_value()
        return None

    def _parse_exponent_value(self) -> int | Fraction:
        if self._peek("("):
            self.i += 1
            num = self._parse_signed_int()
            den = 1
            if self._peek("/"):
                self.i += 1
                den = self._parse_signed_int()
                if den == 0:
                    raise ValueError("Zero denominator in exponent")
            self._eat(")")
            return Fraction(num, den)
        return self._parse_signed_int()

    def _parse_signed_int(self) -> int:
        i0 = self.i
        if self.i < self.n and self.s[self.i] in "+-":
            self.i += 1
        i1 = self.i
        while self.i < self.n and self.s[self.i].isdigit():
            self.i += 1
        if i1 == self.i:
            raise ValueError(f"Expected integer exponent at {self.i}")
        return int(self.s[i0:self.i])

    def _skip_sep(self) -> None:
        s, n, i = self.s, self.n, self.i
        while i < n and s[i] in _SEPARATORS:
            i += 1
        self.i = i

    def _peek(self, tok: str) -> bool:
        return self.s.startswith(tok, self.i)

    def _eat(self, tok: str) -> None:
        if not self._peek(tok):
            got = self.s[self.i:self.i+len(tok)]
            raise ValueError(f"Expected {tok!r} at {self.i}, got {got!r}")
        self.i += len(tok)


@lru_cache(maxsize=4096)
def parse_si_dimensions(text: str) -> SIDimensions:
    """
    Parse an SI-dimension signature into `SIDimensions`.

    Raises ValueError for empty input, unknown symbols, or malformed exponents.
    Results are cached; SIDimensions is immutable so sharing is safe.
    """
    if not isinstance(text, str):
        raise TypeError(f"Dimension signature must be a str, got {type(text).__name__}")
    stripped = text.strip()
    if not stripped:
        raise ValueError("Empty dimension signature")
    return _DimensionParser(stripped).parse()


__all__ = ["parse_si_dimensions"]
