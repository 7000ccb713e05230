"""Microbenchmark for single-draw sampling cost."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Any

from .sampler import ZipfSampler
from .sources import SourceLike, as_uniform_source

logger = logging.getLogger(__name__)

DEFAULT_NUM_ELEMENTS = 1_000_000
DEFAULT_EXPONENT = 1.07
DEFAULT_SAMPLES = 10_000_000


@dataclass(frozen=True)
class BenchmarkResult:
    samples: int
    duration_ns: int
    checksum: int

    @property
    def ns_per_sample(self) -> float:
        if self.samples == 0:
            return 0.0
        return self.duration_ns / self.samples

    def as_dict(self) -> dict[str, Any]:
        return {
            "samples": int(self.samples),
            "duration_ns": int(self.duration_ns),
            "ns_per_sample": float(self.ns_per_sample),
            "checksum": int(self.checksum),
        }


def run_benchmark(
    sampler: ZipfSampler,
    source: SourceLike,
    samples: int = DEFAULT_SAMPLES,
) -> BenchmarkResult:
    if samples < 0:
        raise ValueError(f"samples must be ≥0; got {samples}")
    uniform = as_uniform_source(source)
    logger.info(
        "Benchmark start: N=%d exponent=%s samples=%d",
        sampler.support_size,
        sampler.exponent,
        samples,
    )
    checksum = 0
    start = time.perf_counter_ns()
    for _ in range(samples):
        checksum ^= sampler.sample(uniform)
    duration_ns = time.perf_counter_ns() - start
    result = BenchmarkResult(samples=samples, duration_ns=duration_ns, checksum=checksum)
    logger.info(
        "Benchmark complete: %d samples in %.3f s (%.1f ns/sample)",
        samples,
        duration_ns / 1e9,
        result.ns_per_sample,
    )
    return result
