"""
quantarray.core.utils
=====================

Small helpers shared by the core modules:

- exact rational handling of dimension exponents (`rationalize`,
  `simplify_fraction`);
- superscript formatting used when printing dimensions;
- `map_chunked`, which evaluates an element-wise array function in
  independent chunks on a thread pool for large arrays.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from fractions import Fraction
from typing import Callable

import numpy as np

from quantarray import config

logger = logging.getLogger(__name__)

_SUPERSCRIPTS = str.maketrans("0123456789-/", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻ᐟ")


class IrrationalExponentError(ValueError):
    """A float exponent has no exact small rational representation."""


def _sup(n: int | Fraction) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def rationalize(
    x: int | float,
    as_fraction: bool = False,
    max_denominator: int = 1000,
) -> int | Fraction:
    """
    Convert an int or float exponent into an exact rational.

    Floats are accepted only when the closest fraction with a denominator of
    at most ``max_denominator`` converts back to exactly the same float.
    """
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        raise TypeError(f"Exponent must be int or float, got {type(x).__name__}")

    if isinstance(x, int):
        return Fraction(x, 1) if as_fraction else x

    if not math.isfinite(x):
        raise IrrationalExponentError(f"Exponent must be finite, got {x!r}")

    frac = Fraction(x).limit_denominator(max_denominator)
    if float(frac) != x:
        raise IrrationalExponentError(
            f"Exponent {x!r} is not an exact rational with denominator <= {max_denominator}"
        )
    if as_fraction:
        return frac
    return frac.numerator if frac.denominator == 1 else frac


def simplify_fraction(x: int | Fraction) -> int | Fraction:
    """Return an int for whole fractions, the (normalized) Fraction otherwise."""
    if isinstance(x, Fraction):
        return x.numerator if x.denominator == 1 else x
    if isinstance(x, float):
        return rationalize(x)
    return int(x)


def map_chunked(func: Callable[[np.ndarray], np.ndarray], values: np.ndarray, out_dtype=None) -> np.ndarray:
    """
    Apply an element-wise ``func`` to ``values`` and return a new array.

    Arrays of at least ``config.PARALLEL_THRESHOLD`` elements are split into
    contiguous chunks that are evaluated on a thread pool; each chunk writes
    only its own slice of the output, so the result is identical to a single
    call of ``func`` on the whole array.
    """
    dtype = out_dtype if out_dtype is not None else values.dtype
    n = values.shape[0]
    workers = config.MAX_WORKERS
    if n < config.PARALLEL_THRESHOLD or workers <= 1:
        return np.asarray(func(values), dtype=dtype)

    out = np.empty(n, dtype=dtype)
    bounds = np.linspace(0, n, num=workers + 1, dtype=np.int64)
    chunks = [(int(lo), int(hi)) for lo, hi in zip(bounds[:-1], bounds[1:]) if hi > lo]
    logger.debug("Evaluating %d elements in %d chunks", n, len(chunks))

    def _run(bounds_pair: tuple[int, int]) -> None:
        lo, hi = bounds_pair
        out[lo:hi] = func(values[lo:hi])

    with ThreadPoolExecutor(max_workers=workers) as pool:
        # list() re-raises the first worker exception here
        list(pool.map(_run, chunks))
    return out


__all__ = [
    "IrrationalExponentError",
    "rationalize",
    "simplify_fraction",
    "map_chunked",
]
