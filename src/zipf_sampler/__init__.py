"""
Bounded Zipf-distributed random integers via rejection-inversion.

    >>> from zipf_sampler import ZipfSampler, seeded_source
    >>> sampler = ZipfSampler(1000, 1.03)
    >>> value = sampler.sample(seeded_source(7))
"""

from .errors import (
    ElementsZeroError,
    InvalidExponentError,
    SourceExhaustedError,
    ZipfConfigError,
)
from .sampler import ZipfSampler
from .sources import ReplaySource, UniformSource, as_uniform_source, seeded_source

__all__ = [
    "ElementsZeroError",
    "InvalidExponentError",
    "ReplaySource",
    "SourceExhaustedError",
    "UniformSource",
    "ZipfConfigError",
    "ZipfSampler",
    "as_uniform_source",
    "seeded_source",
]
