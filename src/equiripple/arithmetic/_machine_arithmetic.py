import contextlib
import math
from fractions import Fraction

import numpy as np

# Hardware fused multiply-add, available from Python 3.13.
_math_fma = getattr(math, "fma", None)


def _exact_fma(a, b, c) -> float:
    """``a * b + c`` in exact rational arithmetic, rounded once on return."""
    return float(Fraction(a) * Fraction(b) + Fraction(c))


class MachineArithmetic:
    """IEEE-754 binary64 arithmetic.

    Scalars are ``numpy.float64`` so that overflow and division by zero
    follow IEEE semantics; vectors are ``float64`` arrays.
    """

    name = "float64"

    @property
    def zero(self) -> np.float64:
        return np.float64(0.0)

    @property
    def one(self) -> np.float64:
        return np.float64(1.0)

    def convert(self, value) -> np.float64:
        return np.float64(value)

    def fma(self, a, b, c) -> np.float64:
        """``a * b + c`` with a single rounding.

        Uses :func:`math.fma` where the interpreter provides it and exact
        rational arithmetic otherwise.
        """
        if not (math.isfinite(a) and math.isfinite(b) and math.isfinite(c)):
            return np.float64(a * b + c)
        try:
            if _math_fma is not None:
                return np.float64(_math_fma(a, b, c))
            return np.float64(_exact_fma(a, b, c))
        except OverflowError:
            return np.float64(math.copysign(math.inf, a * b + c))

    def twice(self, value) -> np.float64:
        return 2.0 * value

    def isfinite(self, value) -> bool:
        return bool(np.isfinite(value))

    def vector(self, size: int) -> np.ndarray:
        return np.zeros(size, dtype=np.float64)

    def scope(self):
        return contextlib.nullcontext()


MACHINE = MachineArithmetic()
