import logging
import math
import operator
from dataclasses import dataclass, field
from typing import Iterator, List

from rizipf.models import NonPositiveExponentError, RandomSource, ZeroPopulationError
from rizipf.utils import h, h_integral, h_integral_inverse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZipfSampler:
    """
    Generate Zipf-distributed integers in [1, num_elements] using rejection inversion,
    P(X = k) = k^-exponent / H(num_elements, exponent), where H is the generalized harmonic number.

    Based on Wolfgang Hörmann and Gerhard Derflinger, *Rejection-inversion to generate variates
    from monotone discrete distributions*, ACM TOMACS 6.3 (1996). The sampler holds no mutable state,
    it can be shared by any number of threads as long as each thread brings its own random source.

    :param num_elements: population size, must be at least 1.
    :param exponent: skew exponent, must be positive. 1.0 is allowed.
    """

    num_elements: float
    exponent: float
    # H(1.5) - 1
    h_integral_x1: float
    # H(num_elements + 0.5)
    h_integral_num_elements: float
    # 2 - H^-1(H(2.5) - h(2))
    s_threshold: float
    # exact population size, num_elements loses precision above 2**53
    max_k: int = field(repr=False)

    def __init__(self, num_elements: int, exponent: float) -> None:
        if isinstance(num_elements, bool):
            raise TypeError("num_elements must be an integer, got bool")
        n = operator.index(num_elements)
        if n < 1:
            logger.debug("rejecting zipf population size %d", n)
            raise ZeroPopulationError(n)
        exponent = float(exponent)
        # written this way so NaN is rejected too, inf has no usable constants
        if not exponent > 0 or math.isinf(exponent):
            logger.debug("rejecting zipf exponent %r", exponent)
            raise NonPositiveExponentError(exponent)

        # frozen dataclass, fields are only assigned here
        set_field = object.__setattr__
        set_field(self, "num_elements", float(n))
        set_field(self, "max_k", n)
        set_field(self, "exponent", exponent)
        set_field(self, "h_integral_x1", h_integral(1.5, exponent) - 1.0)
        set_field(self, "h_integral_num_elements", h_integral(n + 0.5, exponent))
        set_field(
            self,
            "s_threshold",
            2.0
            - h_integral_inverse(
                h_integral(2.5, exponent) - h(2.0, exponent), exponent
            ),
        )
        logger.debug(
            "zipf sampler ready: num_elements=%d exponent=%r "
            "h_integral_x1=%r h_integral_num_elements=%r s_threshold=%r",
            n,
            exponent,
            self.h_integral_x1,
            self.h_integral_num_elements,
            self.s_threshold,
        )

    def sample(self, rng: RandomSource) -> int:
        """
        Draw one value in [1, num_elements]. Consumes one `rng.random()` call per rejection round,
        errors raised by rng propagate unchanged.

        :param rng: uniform random source, see `RandomSource`.
        """
        # The paper describes Algorithm ZRI for exponents larger than 1, using
        #   H(x) = (v + x)^(1 - q) / (1 - q)
        # as the integral of the hat function, which is undefined for q = 1.
        # With
        #   H(x) = ((v + x)^(1 - q) - 1) / (1 - q)
        # a limit exists for q = 1 and the method works for all positive exponents.
        # Here v = 0 and values are taken from [1, num_elements] instead of [0, i_max].
        hnum = self.h_integral_num_elements
        h_x1 = self.h_integral_x1
        s = self.s_threshold
        exponent = self.exponent
        n = self.num_elements
        max_k = self.max_k

        while True:
            # u is uniformly distributed in (h_integral_x1, h_integral_num_elements]
            u = hnum + rng.random() * (h_x1 - hnum)
            x = h_integral_inverse(u, exponent)

            # numerical inaccuracies can push x out of [1, num_elements]
            if not x >= 1.0:
                x = 1.0
            elif x > n:
                x = n
            k = int(x + 0.5)
            if k < 1:
                k = 1
            elif k > max_k:
                k = max_k

            # P(k = 1) = C * (H(1.5) - h_integral_x1) = C
            # P(k = m) = C * (H(m + 1/2) - H(m - 1/2)) for m >= 2
            # where C = 1 / (h_integral_num_elements - h_integral_x1)
            #
            # k = 1 always passes the right test: u >= H(1.5) - h(1) = h_integral_x1.
            # For k >= 2 the left test is a shortcut: Theorem 2 of the paper holds for all
            # positive exponents, so f(x) = x - H^-1(H(x + 0.5) - h(x)) is non-decreasing
            # and k - x <= s implies u >= H(k + 0.5) - h(k).
            # Accepted values end up with P(k = m) = C * h(m) = C / m^exponent.
            if k - x <= s or u >= h_integral(k + 0.5, exponent) - h(k, exponent):
                return k

    def sample_iter(self, rng: RandomSource) -> Iterator[int]:
        """
        Endless stream of samples drawn from rng.
        """
        while True:
            yield self.sample(rng)

    def sample_n(self, rng: RandomSource, count: int) -> List[int]:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.sample(rng) for _ in range(count)]

    def __repr__(self) -> str:
        return (
            f"Rejection inversion Zipf deviate "
            f"[num_elements={self.max_k}, exponent={self.exponent!r}]"
        )
