"""
quantarray.units.prefixes
=========================

SI decimal prefixes used by the registry to synthesize prefixed units
(``km``, ``mPa``, ``µs``) on first lookup.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    symbol: str
    name: str
    factor: float


PREFIXES: tuple[Prefix, ...] = (
    Prefix("Q", "quetta", 1e30),
    Prefix("R", "ronna", 1e27),
    Prefix("Y", "yotta", 1e24),
    Prefix("Z", "zetta", 1e21),
    Prefix("E", "exa", 1e18),
    Prefix("P", "peta", 1e15),
    Prefix("T", "tera", 1e12),
    Prefix("G", "giga", 1e9),
    Prefix("M", "mega", 1e6),
    Prefix("k", "kilo", 1e3),
    Prefix("h", "hecto", 1e2),
    Prefix("da", "deca", 1e1),
    Prefix("d", "deci", 1e-1),
    Prefix("c", "centi", 1e-2),
    Prefix("m", "milli", 1e-3),
    Prefix("µ", "micro", 1e-6),
    Prefix("n", "nano", 1e-9),
    Prefix("p", "pico", 1e-12),
    Prefix("f", "femto", 1e-15),
    Prefix("a", "atto", 1e-18),
    Prefix("z", "zepto", 1e-21),
    Prefix("y", "yocto", 1e-24),
    Prefix("r", "ronto", 1e-27),
    Prefix("q", "quecto", 1e-30),
)


__all__ = ["Prefix", "PREFIXES"]
