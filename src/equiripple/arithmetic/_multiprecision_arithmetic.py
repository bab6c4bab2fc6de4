from typing import List

import mpmath

from ._working_precision import working_precision


class MultiprecisionArithmetic:
    """mpmath arithmetic at a fixed working precision.

    Every value is rounded to ``precision`` bits. Conversions and operations
    must run inside :meth:`scope`.
    """

    name = "mpf"

    def __init__(self, precision: int) -> None:
        self.precision = precision

    def __repr__(self) -> str:
        return f"MultiprecisionArithmetic(precision={self.precision})"

    @property
    def zero(self) -> mpmath.mpf:
        return mpmath.mpf(0)

    @property
    def one(self) -> mpmath.mpf:
        return mpmath.mpf(1)

    def convert(self, value) -> mpmath.mpf:
        # mpf inputs pass through unrounded so exact node equality survives.
        return mpmath.mp.convert(value)

    def fma(self, a, b, c) -> mpmath.mpf:
        """``a * b + c`` with a single rounding."""
        return mpmath.fadd(mpmath.fmul(a, b, exact=True), c)

    def twice(self, value) -> mpmath.mpf:
        return mpmath.ldexp(value, 1)

    def isfinite(self, value) -> bool:
        return mpmath.isfinite(value)

    def vector(self, size: int) -> List[mpmath.mpf]:
        return [mpmath.mpf(0)] * size

    def scope(self):
        return working_precision(self.precision)
