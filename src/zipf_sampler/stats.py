"""
Expected Zipf frequencies and comparisons against observed draws.
"""

from __future__ import annotations
from typing import Optional, Sequence

import numpy as np
import polars as pl


def harmonic_number(n: int, exponent: float) -> float:
    """Generalized harmonic number ``sum(k^-exponent for k in 1..n)``."""
    if n < 1:
        raise ValueError(f"n must be ≥1; got {n}")
    ranks = np.arange(1, n + 1, dtype=np.float64)
    return float((ranks ** (-exponent)).sum())


def zipf_pmf(n: int, exponent: float) -> np.ndarray:
    """
    Probability mass of ranks 1...n.

    Returns
    -------
    np.ndarray
        Array of length n summing to 1, where pmf[k-1] = k^-exponent / H(n, exponent).
    """
    if n < 1:
        raise ValueError(f"n must be ≥1; got {n}")
    if exponent <= 0:
        raise ValueError(f"exponent must be >0; got {exponent}")
    ranks = np.arange(1, n + 1, dtype=np.float64)
    raw = ranks ** (-exponent)
    return raw / raw.sum()


def observed_frequencies(samples: Sequence[int] | np.ndarray, n: int) -> np.ndarray:
    """
    Relative frequency of each value 1...n in `samples`.

    Raises
    ------
    ValueError
        If `samples` is empty or holds values outside [1, n].
    """
    values = np.asarray(samples, dtype=np.int64)
    if values.size == 0:
        raise ValueError("No samples to count")
    if values.min() < 1 or values.max() > n:
        raise ValueError(f"Samples must lie in [1, {n}]")
    counts = np.bincount(values, minlength=n + 1)[1:]
    return counts / float(values.size)


def frequency_report(
    samples: Sequence[int] | np.ndarray, n: int, exponent: float
) -> pl.DataFrame:
    """Per-rank expected vs. observed frequency, with absolute error."""
    expected = zipf_pmf(n, exponent)
    observed = observed_frequencies(samples, n)
    return pl.DataFrame(
        {
            "k": np.arange(1, n + 1, dtype=np.int64),
            "expected": expected,
            "observed": observed,
            "abs_error": np.abs(expected - observed),
        }
    )


def max_abs_error(
    samples: Sequence[int] | np.ndarray,
    n: int,
    exponent: float,
    buckets: Optional[Sequence[int]] = None,
) -> float:
    """
    Largest absolute difference between observed and expected frequency.

    `buckets` are ranks to compare; defaults to 1...n-1.
    """
    report = frequency_report(samples, n, exponent)
    if buckets is None:
        buckets = range(1, max(n, 2))
    idx = np.asarray(list(buckets), dtype=np.int64) - 1
    errors = report["abs_error"].to_numpy()[idx[(idx >= 0) & (idx < n)]]
    return float(errors.max()) if errors.size else 0.0
