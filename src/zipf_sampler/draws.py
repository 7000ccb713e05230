"""
Batch draws and on-disk output for Zipf samples.

This module has NO parallelism: draws are taken one after another from a
single source so results are reproducible under a fixed seed.
"""

from __future__ import annotations
from pathlib import Path
import logging

import numpy as np
import polars as pl

from .sampler import ZipfSampler
from .sources import SourceLike, as_uniform_source

logger = logging.getLogger(__name__)


def draw_samples(sampler: ZipfSampler, source: SourceLike, size: int) -> np.ndarray:
    """
    Draw `size` values sequentially from `sampler`.

    Parameters
    ----------
    sampler : ZipfSampler
        Configured sampler.
    source : UniformSource | Generator | random.Random
        Uniform source shared by all draws of this batch.
    size : int
        Number of draws (must be ≥0).

    Returns
    -------
    np.ndarray
        1D int64 array of values in [1, N].
    """
    if size < 0:
        raise ValueError(f"Sample size must be ≥0; got {size}")
    uniform = as_uniform_source(source)
    out = np.empty(size, dtype=np.int64)
    for i in range(size):
        out[i] = sampler.sample(uniform)
    return out


def samples_frame(samples: np.ndarray) -> pl.DataFrame:
    """Wrap draws in a DataFrame with columns ``draw`` and ``value``."""
    values = np.asarray(samples, dtype=np.int64)
    return (pl.DataFrame(
        {
            "draw": np.arange(values.shape[0], dtype=np.int64),
            "value": values,
        })
        .with_columns([
            pl.col("draw").cast(pl.Int64),
            pl.col("value").cast(pl.Int64),
        ])
    )


def write_samples(df: pl.DataFrame, out_path: Path | str) -> Path:
    """
    Write the samples DataFrame to Parquet (Snappy) or CSV, picked by suffix.

    Raises
    ------
    ValueError
        If the suffix is neither ``.parquet`` nor ``.csv``.
    """
    out_path = Path(out_path)
    suffix = out_path.suffix.lower()
    if suffix not in (".parquet", ".csv"):
        raise ValueError(f"Unsupported output format {suffix!r}; use .parquet or .csv")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".parquet":
        df.write_parquet(str(out_path), compression="snappy")
    else:
        df.write_csv(str(out_path))
    logger.info("Wrote %d samples to %s", df.height, out_path)
    return out_path
