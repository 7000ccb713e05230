"""
Bounded Zipf sampler using rejection-inversion.

For a random variable X drawn by this sampler the probability mass function is

    P(X = k) = k^(-s) / H(N, s)    for k = 1, 2, ..., N

where H(N, s) is the generalized harmonic number of order N of s.

The method is the one described by Wolfgang Hörmann and Gerhard Derflinger in
"Rejection-inversion to generate variates from monotone discrete
distributions", ACM TOMACS 6.3 (1996), in the form used by Apache Commons RNG's
RejectionInversionZipfSampler. It needs no table of size N: construction
precomputes three scalars and every draw costs a small, N-independent number of
transcendental evaluations.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import math
import numbers

from .errors import ElementsZeroError, InvalidExponentError, ZipfConfigError
from .sources import SourceLike, as_uniform_source

_LOGGER = logging.getLogger(__name__)

# Below this magnitude the closed forms lose precision to cancellation.
_TAYLOR_THRESHOLD = 1e-8


def corrected_exp_factor(x: float) -> float:
    """
    Compute ``(exp(x) - 1) / x``.

    A Taylor series expansion is used if x is close to 0.
    """
    if abs(x) > _TAYLOR_THRESHOLD:
        return math.expm1(x) / x
    return 1.0 + x * 0.5 * (1.0 + x / 3.0 * (1.0 + 0.25 * x))


def corrected_log_factor(x: float) -> float:
    """
    Compute ``log(1 + x) / x``.

    A Taylor series expansion is used if x is close to 0.
    """
    if x == -1.0:
        # limit of log1p(x) / x; math.log1p raises here instead of returning -inf
        return math.inf
    if abs(x) > _TAYLOR_THRESHOLD:
        return math.log1p(x) / x
    return 1.0 - x * (0.5 - x * (1.0 / 3.0 - 0.25 * x))


def h(x: float, exponent: float) -> float:
    """Compute ``h(x) = 1 / x^exponent``."""
    return math.exp(-exponent * math.log(x))


def h_integral(x: float, exponent: float) -> float:
    """
    Compute H(x), the antiderivative of h(x):

    - ``(x^(1 - exponent) - 1) / (1 - exponent)`` if exponent != 1
    - ``log(x)`` if exponent == 1

    Both branches are covered by the same expression.
    """
    log_x = math.log(x)
    return corrected_exp_factor((1.0 - exponent) * log_x) * log_x


def h_integral_inverse(x: float, exponent: float) -> float:
    """Return the y for which ``H(y) = x``."""
    t = x * (1.0 - exponent)
    if t < -1.0:
        # Rounding can push t slightly below -1; log1p is undefined there.
        t = -1.0
    return math.exp(corrected_log_factor(t) * x)


@dataclass(frozen=True)
class ZipfSampler:
    """
    Draws integers in [1, num_elements] with Zipf(exponent) frequencies.

    Attributes:
      num_elements (float): Upper bound N of the support, kept as float.
          Integers and integral floats are accepted, so
          ``dataclasses.replace`` works on a built sampler.
      exponent (float): Skew parameter s > 0.
      h_integral_x1 (float): ``H(1.5) - 1``.
      h_integral_num_elements (float): ``H(N + 0.5)``.
      rejection_threshold (float): ``2 - H^-1(H(2.5) - h(2))``, the bound of
          the cheap acceptance test; 0 when H^-1 saturates at huge exponents.

    Instances hold no mutable state; one sampler can serve any number of call
    sites as long as each brings its own uniform source.
    """

    num_elements: float
    exponent: float
    h_integral_x1: float = field(init=False)
    h_integral_num_elements: float = field(init=False)
    rejection_threshold: float = field(init=False)

    def __post_init__(self) -> None:
        n = self.num_elements
        integral = isinstance(n, numbers.Integral) or (
            isinstance(n, float) and n.is_integer()
        )
        if isinstance(n, bool) or not integral:
            raise TypeError(f"num_elements must be an integer; got {n!r}")
        if n < 1:
            raise ElementsZeroError(f"num_elements must be >= 1; got {n}")
        exponent = float(self.exponent)
        if not exponent > 0.0:
            raise InvalidExponentError(f"exponent must be > 0; got {exponent}")

        try:
            n_float = float(n)
        except OverflowError as e:
            raise ZipfConfigError(
                "NON_FINITE_CONSTANTS", f"num_elements={n} overflows a float"
            ) from e
        h_x1 = h_integral(1.5, exponent) - 1.0
        h_num = h_integral(n_float + 0.5, exponent)
        threshold = 2.0 - h_integral_inverse(
            h_integral(2.5, exponent) - h(2.0, exponent), exponent
        )
        if threshold == -math.inf:
            # H^-1 clamped at t = -1 for a large exponent. The true bound is
            # positive, so 0 keeps the shortcut conservative.
            threshold = 0.0
        if not all(math.isfinite(v) for v in (h_x1, h_num, threshold)):
            raise ZipfConfigError(
                "NON_FINITE_CONSTANTS",
                f"num_elements={n}, exponent={exponent}",
            )

        object.__setattr__(self, "num_elements", n_float)
        object.__setattr__(self, "exponent", exponent)
        object.__setattr__(self, "h_integral_x1", h_x1)
        object.__setattr__(self, "h_integral_num_elements", h_num)
        object.__setattr__(self, "rejection_threshold", threshold)
        _LOGGER.debug(
            "ZipfSampler ready: N=%d exponent=%s h_integral_x1=%r "
            "h_integral_num_elements=%r rejection_threshold=%r",
            n, exponent, h_x1, h_num, threshold,
        )

    @property
    def support_size(self) -> int:
        return int(self.num_elements)

    def sample(self, source: SourceLike) -> int:
        """
        Draw one value in [1, num_elements].

        Parameters
        ----------
        source : UniformSource | Generator | random.Random
            Supplies independent floats in [0, 1). Called once per attempt;
            rejected attempts consume extra draws.

        Returns
        -------
        int
            The sampled rank.
        """
        uniform = as_uniform_source(source)
        exponent = self.exponent
        n = self.num_elements
        h_x1 = self.h_integral_x1
        hnum = self.h_integral_num_elements

        while True:
            u = hnum + uniform() * (h_x1 - hnum)
            # u is uniform in (h_integral_x1, h_integral_num_elements]
            x = h_integral_inverse(u, exponent)

            # Numerical drift can leave x just outside [1, N].
            x = min(max(x, 1.0), n)
            # int() truncates; the 0.5 offset avoids a bias towards k == 1
            k = max(1, int(x + 0.5))

            # With C = 1 / (h_integral_num_elements - h_integral_x1):
            #
            #   P(k = 1) = C * (H(1.5) - h_integral_x1) = C
            #   P(k = m) = C * (H(m + 1/2) - H(m - 1/2))    for m >= 2
            #
            # k = 1 is always accepted, since u >= H(1.5) - h(1) = h_integral_x1.
            # For k >= 2 the left test is a shortcut: Theorem 2 of the paper
            # holds for every positive exponent, so k - x <= s implies
            # u >= H(k + 0.5) - h(k). The right test then accepts m with
            # probability h(m) / (H(m + 1/2) - H(m - 1/2)), and
            #
            #   P(k = m and accepted) = C * h(m) = C / m^exponent.
            if (
                k - x <= self.rejection_threshold
                or u >= h_integral(k + 0.5, exponent) - h(k, exponent)
            ):
                return k
