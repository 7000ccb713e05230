"""
Uniform random sources consumed by the Zipf sampler.

The sampler never touches global randomness: every draw comes from a source
handed in by the caller. A source is any zero-argument callable returning a
float in [0, 1). numpy Generators and ``random.Random`` instances are adapted
through their ``random()`` method.
"""

from __future__ import annotations
import random
from typing import Callable, Iterable, Optional, Protocol, Union, runtime_checkable

from numpy.random import Generator, default_rng

from .errors import SourceExhaustedError


@runtime_checkable
class UniformSource(Protocol):
    """Zero-argument callable producing independent floats in [0, 1)."""

    def __call__(self) -> float:
        ...


SourceLike = Union[UniformSource, Generator, random.Random, Callable[[], float]]


def as_uniform_source(obj: SourceLike) -> UniformSource:
    """
    Adapt a random number generator into a UniformSource.

    Parameters
    ----------
    obj : Generator | random.Random | Callable[[], float]
        A numpy Generator, a stdlib Random instance, any zero-arg callable
        that returns floats in [0, 1), or an object exposing such a
        ``random()`` method.

    Raises
    ------
    TypeError
        If `obj` cannot produce uniform floats.
    """
    if isinstance(obj, (Generator, random.Random)):
        return obj.random
    if callable(obj):
        return obj
    method = getattr(obj, "random", None)
    if callable(method):
        return method
    raise TypeError(
        f"Expected a numpy Generator, random.Random or zero-arg callable; got {type(obj).__name__}"
    )


def seeded_source(seed: Optional[int] = None) -> UniformSource:
    """
    Build a numpy-backed source. ``seed=None`` seeds from OS entropy.
    """
    rng: Generator = default_rng(seed)
    return rng.random


class ReplaySource:
    """
    Replays a fixed sequence of uniform draws.

    Used to make sampling fully deterministic: two samplers fed the same
    sequence must return the same values.
    """

    def __init__(self, draws: Iterable[float]) -> None:
        values = [float(d) for d in draws]
        for i, v in enumerate(values):
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Draw #{i} must be in [0, 1); got {v!r}")
        self._draws = values
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._pos

    def __call__(self) -> float:
        if self._pos >= len(self._draws):
            raise SourceExhaustedError(
                f"Replay source exhausted after {len(self._draws)} draws"
            )
        value = self._draws[self._pos]
        self._pos += 1
        return value
